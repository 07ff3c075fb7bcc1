"""Fake key-value store for testing.

FakeKeyValueStore keeps values in a dict. Values are copied through a JSON
round trip on every read and write, matching what a real serializing store
does, so callers can never alias stored state.
"""

import json

from mapvc.core.errors import KeyValueStoreError
from mapvc.core.kv_store.abc import JsonValue, KeyValueStore


class FakeKeyValueStore(KeyValueStore):
    """In-memory fake implementation of KeyValueStore.

    This class has NO public setup methods. All state is provided via constructor.
    """

    def __init__(
        self,
        *,
        data: dict[str, JsonValue] | None = None,
        reject_writes: bool = False,
        failing_keys: set[str] | None = None,
    ) -> None:
        """Create FakeKeyValueStore with pre-configured state.

        Args:
            data: Initial key -> value mapping
            reject_writes: If True, set() raises KeyValueStoreError (quota exceeded)
            failing_keys: Keys whose set() and remove() raise KeyValueStoreError
        """
        self._data = {k: _copy(v) for k, v in (data or {}).items()}
        self._reject_writes = reject_writes
        self._failing_keys = failing_keys or set()
        self._write_count = 0

    @property
    def data(self) -> dict[str, JsonValue]:
        """Snapshot of stored values for test assertions."""
        return {k: _copy(v) for k, v in self._data.items()}

    @property
    def write_count(self) -> int:
        """Number of successful set() calls.

        This property is for test assertions only.
        """
        return self._write_count

    def get(self, key: str) -> JsonValue | None:
        if key not in self._data:
            return None
        return _copy(self._data[key])

    def set(self, key: str, value: JsonValue) -> None:
        if self._reject_writes:
            raise KeyValueStoreError(f"Quota exceeded writing {key}")
        if key in self._failing_keys:
            raise KeyValueStoreError(f"Cannot write {key}")
        self._data[key] = _copy(value)
        self._write_count += 1

    def remove(self, key: str) -> None:
        if key in self._failing_keys:
            raise KeyValueStoreError(f"Cannot remove {key}")
        self._data.pop(key, None)


def _copy(value: JsonValue) -> JsonValue:
    return json.loads(json.dumps(value))
