"""No-op wrapper for key-value store writes."""

from mapvc.cli.output import user_output
from mapvc.core.kv_store.abc import JsonValue, KeyValueStore


class DryRunKeyValueStore(KeyValueStore):
    """No-op wrapper that prevents writes to the persisted store.

    Reads are delegated to the wrapped implementation; writes and removals
    print what would happen instead of executing.
    """

    def __init__(self, wrapped: KeyValueStore) -> None:
        """Create a dry-run wrapper around a KeyValueStore implementation.

        Args:
            wrapped: The KeyValueStore implementation to wrap
        """
        self._wrapped = wrapped

    def get(self, key: str) -> JsonValue | None:
        """Read value (read-only, delegates to wrapped)."""
        return self._wrapped.get(key)

    def set(self, key: str, value: JsonValue) -> None:
        """Print dry-run message instead of writing."""
        user_output(f"[DRY RUN] Would write {key}")

    def remove(self, key: str) -> None:
        """Print dry-run message instead of removing."""
        user_output(f"[DRY RUN] Would remove {key}")
