"""Fake live document for testing.

FakeLiveDocument is an in-memory implementation that accepts pre-configured
state in its constructor. Construct instances directly with keyword arguments.
"""

from mapvc.core.document.abc import LiveDocument
from mapvc.core.errors import DocumentError
from mapvc.core.snapshot import CustomAsset, Element, Link, Snapshot, Tile, TileKey


class FakeLiveDocument(LiveDocument):
    """In-memory fake implementation of the host map document.

    This class has NO public setup methods. All state is provided via constructor
    using keyword arguments with sensible defaults (empty document).
    """

    def __init__(
        self,
        *,
        initial: Snapshot | None = None,
        failing_calls: set[tuple[str, str]] | None = None,
    ) -> None:
        """Create FakeLiveDocument with pre-configured state.

        Args:
            initial: Document content at construction time (empty if None)
            failing_calls: (operation, key) pairs that raise DocumentError, e.g.
                ("create_element", "e1") or ("remove_tile", "0,0,0")
        """
        start = initial or Snapshot()
        self._tiles: dict[TileKey, Tile] = {t.key: t for t in start.tiles}
        self._elements: dict[str, Element] = {e.id: e for e in start.elements}
        self._links: dict[str, Link] = {w.id: w for w in start.links}
        self._assets: dict[str, CustomAsset] = {a.id: a for a in start.custom_assets}
        self._failing_calls = failing_calls or set()
        self._calls: list[tuple[str, str]] = []

    @property
    def calls(self) -> list[tuple[str, str]]:
        """Mutation calls made so far as (operation, key) pairs.

        This property is for test assertions only.
        """
        return self._calls

    def capture_document(self) -> Snapshot:
        return Snapshot(
            tiles=tuple(self._tiles.values()),
            elements=tuple(self._elements.values()),
            links=tuple(self._links.values()),
            custom_assets=tuple(self._assets.values()),
        )

    def remove_element(self, element_id: str) -> None:
        self._track("remove_element", element_id)
        self._elements.pop(element_id, None)

    def remove_tile(self, x: int, y: int, depth: int) -> None:
        self._track("remove_tile", f"{x},{y},{depth}")
        self._tiles.pop((x, y, depth), None)

    def remove_link(self, link_id: str) -> None:
        self._track("remove_link", link_id)
        self._links.pop(link_id, None)

    def remove_custom_asset(self, asset_id: str) -> None:
        self._track("remove_custom_asset", asset_id)
        self._assets.pop(asset_id, None)

    def create_custom_asset(self, asset: CustomAsset) -> None:
        self._track("create_custom_asset", asset.id)
        self._assets[asset.id] = asset

    def create_element(self, element: Element) -> None:
        self._track("create_element", element.id)
        self._elements[element.id] = element

    def create_tile(self, tile: Tile) -> None:
        self._track("create_tile", f"{tile.x},{tile.y},{tile.depth}")
        self._tiles[tile.key] = tile

    def create_link(self, link: Link) -> None:
        self._track("create_link", link.id)
        self._links[link.id] = link

    def _track(self, operation: str, key: str) -> None:
        self._calls.append((operation, key))
        if (operation, key) in self._failing_calls:
            raise DocumentError(f"{operation} failed for {key}")
