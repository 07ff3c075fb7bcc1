"""Snapshot value types for a captured map document.

A Snapshot is the full content of the live document at one instant: terrain
tiles, placed elements, links between element connection points and custom
assets. Snapshots are immutable once built; they are stored inside commits
and stash entries and replayed onto the live document by the codec.

Wire names follow the host document format (``typeId``, ``customAssets``,
``startElementId``...). Legacy records exported by the browser plugin used
``devices``/``wires`` naming; ``Snapshot.from_dict`` accepts both.
"""

import json
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

from mapvc.core.errors import InvalidSnapshot

TileKey = tuple[int, int, int]


@dataclass(frozen=True)
class Tile:
    """Terrain tile identified by its grid position and depth.

    Host fields beyond position (terrain type, collision flags...) are carried
    unchanged in ``attributes``.
    """

    x: int
    y: int
    depth: int
    attributes: Mapping[str, Any] = field(default_factory=dict)

    @property
    def key(self) -> TileKey:
        return (self.x, self.y, self.depth)

    def to_dict(self) -> dict[str, Any]:
        return {**self.attributes, "x": self.x, "y": self.y, "depth": self.depth}

    @staticmethod
    def from_dict(data: Mapping[str, Any]) -> "Tile":
        rest = {k: v for k, v in data.items() if k not in ("x", "y", "depth")}
        return Tile(
            x=_require(data, "x", "tile"),
            y=_require(data, "y", "tile"),
            depth=data.get("depth", 0),
            attributes=rest,
        )


@dataclass(frozen=True)
class Element:
    """Placed element (device) with its serialized options payload."""

    id: str
    type_id: str
    options: str
    x: float
    y: float

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "typeId": self.type_id,
            "options": self.options,
            "x": self.x,
            "y": self.y,
        }

    @staticmethod
    def from_dict(data: Mapping[str, Any]) -> "Element":
        type_id = data.get("typeId", data.get("deviceTypeId"))
        if type_id is None:
            raise InvalidSnapshot(f"Element record is missing 'typeId': {dict(data)!r}")
        options = data.get("options", "{}")
        if not isinstance(options, str):
            options = json.dumps(options)
        return Element(
            id=str(_require(data, "id", "element")),
            type_id=str(type_id),
            options=options,
            x=_require(data, "x", "element"),
            y=_require(data, "y", "element"),
        )


@dataclass(frozen=True)
class Link:
    """Connector between two element connection points."""

    id: str
    start_element_id: str
    start_connection: str
    end_element_id: str
    end_connection: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "startElementId": self.start_element_id,
            "startConnection": self.start_connection,
            "endElementId": self.end_element_id,
            "endConnection": self.end_connection,
        }

    @staticmethod
    def from_dict(data: Mapping[str, Any]) -> "Link":
        start = data.get("startElementId", data.get("startDeviceId"))
        end = data.get("endElementId", data.get("endDeviceId"))
        if start is None or end is None:
            raise InvalidSnapshot(f"Link record is missing an endpoint: {dict(data)!r}")
        return Link(
            id=str(_require(data, "id", "link")),
            start_element_id=str(start),
            start_connection=str(_require(data, "startConnection", "link")),
            end_element_id=str(end),
            end_connection=str(_require(data, "endConnection", "link")),
        )


@dataclass(frozen=True)
class CustomAsset:
    """User-authored asset with an embedded payload."""

    id: str
    data: Any
    attributes: Mapping[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {**self.attributes, "id": self.id, "data": self.data}

    @staticmethod
    def from_dict(data: Mapping[str, Any]) -> "CustomAsset":
        rest = {k: v for k, v in data.items() if k not in ("id", "data")}
        return CustomAsset(
            id=str(_require(data, "id", "custom asset")),
            data=data.get("data"),
            attributes=rest,
        )


@dataclass(frozen=True)
class Snapshot:
    """Immutable full capture of a map document."""

    tiles: tuple[Tile, ...] = ()
    elements: tuple[Element, ...] = ()
    links: tuple[Link, ...] = ()
    custom_assets: tuple[CustomAsset, ...] = ()

    def __post_init__(self) -> None:
        _ensure_unique("tile", (t.key for t in self.tiles))
        _ensure_unique("element", (e.id for e in self.elements))
        _ensure_unique("link", (link.id for link in self.links))
        _ensure_unique("custom asset", (a.id for a in self.custom_assets))

    @property
    def is_empty(self) -> bool:
        return not (self.tiles or self.elements or self.links or self.custom_assets)

    def to_dict(self) -> dict[str, Any]:
        return {
            "tiles": [t.to_dict() for t in self.tiles],
            "elements": [e.to_dict() for e in self.elements],
            "links": [link.to_dict() for link in self.links],
            "customAssets": [a.to_dict() for a in self.custom_assets],
        }

    @staticmethod
    def from_dict(data: Mapping[str, Any]) -> "Snapshot":
        """Decode a snapshot record.

        Raises:
            InvalidSnapshot: If a record is malformed or ids repeat within a category
        """
        if not isinstance(data, Mapping):
            raise InvalidSnapshot(f"Snapshot must be an object, got {type(data).__name__}")
        elements = data.get("elements", data.get("devices", []))
        links = data.get("links", data.get("wires", []))
        return Snapshot(
            tiles=tuple(Tile.from_dict(t) for t in data.get("tiles", [])),
            elements=tuple(Element.from_dict(e) for e in elements),
            links=tuple(Link.from_dict(w) for w in links),
            custom_assets=tuple(CustomAsset.from_dict(a) for a in data.get("customAssets", [])),
        )


def _require(data: Mapping[str, Any], key: str, kind: str) -> Any:
    if key not in data:
        raise InvalidSnapshot(f"{kind.capitalize()} record is missing '{key}': {dict(data)!r}")
    return data[key]


def _ensure_unique(kind: str, keys: Iterable[object]) -> None:
    seen: set[object] = set()
    for key in keys:
        if key in seen:
            raise InvalidSnapshot(f"Duplicate {kind} id in snapshot: {key}")
        seen.add(key)
