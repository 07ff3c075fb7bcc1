"""Live document interface.

Architecture:
- LiveDocument: Abstract base class defining the host capability
- JsonMapDocument: Production implementation backed by a map JSON file
- FakeLiveDocument: In-memory implementation for tests
- DryRunLiveDocument: Wrapper that reports mutations instead of performing them
"""

from abc import ABC, abstractmethod

from mapvc.core.snapshot import CustomAsset, Element, Link, Snapshot, Tile


class LiveDocument(ABC):
    """Abstract interface for the host's mutable map document.

    Removal primitives are idempotent: removing an item that does not exist is
    a no-op. Creation behavior on a duplicate id is up to the implementation.
    Any primitive that cannot be carried out raises DocumentError.
    """

    @abstractmethod
    def capture_document(self) -> Snapshot:
        """Read the current content of the document without mutating it."""
        ...

    @abstractmethod
    def remove_element(self, element_id: str) -> None: ...

    @abstractmethod
    def remove_tile(self, x: int, y: int, depth: int) -> None: ...

    @abstractmethod
    def remove_link(self, link_id: str) -> None: ...

    @abstractmethod
    def remove_custom_asset(self, asset_id: str) -> None: ...

    @abstractmethod
    def create_custom_asset(self, asset: CustomAsset) -> None: ...

    @abstractmethod
    def create_element(self, element: Element) -> None: ...

    @abstractmethod
    def create_tile(self, tile: Tile) -> None: ...

    @abstractmethod
    def create_link(self, link: Link) -> None: ...
