"""No-op wrapper for live document mutations."""

from mapvc.cli.output import user_output
from mapvc.core.document.abc import LiveDocument
from mapvc.core.snapshot import CustomAsset, Element, Link, Snapshot, Tile


class DryRunLiveDocument(LiveDocument):
    """No-op wrapper that prevents mutation of the live document.

    Capture is delegated to the wrapped implementation. Removal and creation
    calls print what would happen instead of executing.

    Usage:
        real_doc = JsonMapDocument(path)
        noop_doc = DryRunLiveDocument(real_doc)

        # Prints message instead of removing
        noop_doc.remove_element("e1")
    """

    def __init__(self, wrapped: LiveDocument) -> None:
        """Create a dry-run wrapper around a LiveDocument implementation.

        Args:
            wrapped: The LiveDocument implementation to wrap
        """
        self._wrapped = wrapped

    def capture_document(self) -> Snapshot:
        """Capture document (read-only, delegates to wrapped)."""
        return self._wrapped.capture_document()

    def remove_element(self, element_id: str) -> None:
        user_output(f"[DRY RUN] Would remove element {element_id}")

    def remove_tile(self, x: int, y: int, depth: int) -> None:
        user_output(f"[DRY RUN] Would remove tile ({x}, {y}) at depth {depth}")

    def remove_link(self, link_id: str) -> None:
        user_output(f"[DRY RUN] Would remove link {link_id}")

    def remove_custom_asset(self, asset_id: str) -> None:
        user_output(f"[DRY RUN] Would remove custom asset {asset_id}")

    def create_custom_asset(self, asset: CustomAsset) -> None:
        user_output(f"[DRY RUN] Would create custom asset {asset.id}")

    def create_element(self, element: Element) -> None:
        user_output(f"[DRY RUN] Would place element {element.id} ({element.type_id})")

    def create_tile(self, tile: Tile) -> None:
        user_output(f"[DRY RUN] Would place tile ({tile.x}, {tile.y}) at depth {tile.depth}")

    def create_link(self, link: Link) -> None:
        user_output(
            f"[DRY RUN] Would link {link.start_element_id}:{link.start_connection} "
            f"-> {link.end_element_id}:{link.end_connection}"
        )
