"""Key-value store interface."""

from abc import ABC, abstractmethod
from typing import Any

JsonValue = Any


class KeyValueStore(ABC):
    """Abstract string-keyed store of JSON values.

    Implementations raise KeyValueStoreError when a read or write cannot be
    carried out (unreadable file, quota exceeded...). Writes are
    last-write-wins per key.
    """

    @abstractmethod
    def get(self, key: str) -> JsonValue | None:
        """Return the stored value, or None if the key is absent."""
        ...

    @abstractmethod
    def set(self, key: str, value: JsonValue) -> None:
        """Store value under key, replacing any previous value."""
        ...

    @abstractmethod
    def remove(self, key: str) -> None:
        """Remove key. Removing an absent key is a no-op."""
        ...
