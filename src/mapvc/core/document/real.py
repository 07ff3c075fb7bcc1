"""Map document backed by a JSON file on disk."""

import json
import logging
import os
import tempfile
from dataclasses import replace
from pathlib import Path

from mapvc.core.document.abc import LiveDocument
from mapvc.core.errors import DocumentError, InvalidSnapshot
from mapvc.core.snapshot import CustomAsset, Element, Link, Snapshot, Tile

logger = logging.getLogger(__name__)


class JsonMapDocument(LiveDocument):
    """Production implementation operating on an exported map file.

    The file holds one JSON object with ``tiles``, ``elements``, ``links`` and
    ``customAssets`` arrays. Every primitive reads the file, applies a single
    change and writes it back before returning, so each call is complete when
    it returns. A missing file reads as an empty map.

    Creating an item whose id already exists replaces the existing item.
    """

    def __init__(self, path: Path) -> None:
        self._path = path

    @property
    def path(self) -> Path:
        return self._path

    def capture_document(self) -> Snapshot:
        return self._read()

    def remove_element(self, element_id: str) -> None:
        doc = self._read()
        self._write(replace(doc, elements=tuple(e for e in doc.elements if e.id != element_id)))

    def remove_tile(self, x: int, y: int, depth: int) -> None:
        doc = self._read()
        self._write(replace(doc, tiles=tuple(t for t in doc.tiles if t.key != (x, y, depth))))

    def remove_link(self, link_id: str) -> None:
        doc = self._read()
        self._write(replace(doc, links=tuple(w for w in doc.links if w.id != link_id)))

    def remove_custom_asset(self, asset_id: str) -> None:
        doc = self._read()
        self._write(
            replace(doc, custom_assets=tuple(a for a in doc.custom_assets if a.id != asset_id))
        )

    def create_custom_asset(self, asset: CustomAsset) -> None:
        doc = self._read()
        kept = tuple(a for a in doc.custom_assets if a.id != asset.id)
        self._write(replace(doc, custom_assets=(*kept, asset)))

    def create_element(self, element: Element) -> None:
        doc = self._read()
        kept = tuple(e for e in doc.elements if e.id != element.id)
        self._write(replace(doc, elements=(*kept, element)))

    def create_tile(self, tile: Tile) -> None:
        doc = self._read()
        kept = tuple(t for t in doc.tiles if t.key != tile.key)
        self._write(replace(doc, tiles=(*kept, tile)))

    def create_link(self, link: Link) -> None:
        doc = self._read()
        known = {e.id for e in doc.elements}
        for endpoint in (link.start_element_id, link.end_element_id):
            if endpoint not in known:
                raise DocumentError(f"Link {link.id} references missing element {endpoint}")
        kept = tuple(w for w in doc.links if w.id != link.id)
        self._write(replace(doc, links=(*kept, link)))

    def _read(self) -> Snapshot:
        if not self._path.exists():
            return Snapshot()
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            raise DocumentError(f"Cannot read map document {self._path}: {e}") from e
        try:
            return Snapshot.from_dict(data)
        except InvalidSnapshot as e:
            raise DocumentError(f"Malformed map document {self._path}: {e}") from e

    def _write(self, doc: Snapshot) -> None:
        logger.debug(
            "Writing map document %s: tiles=%d elements=%d links=%d assets=%d",
            self._path,
            len(doc.tiles),
            len(doc.elements),
            len(doc.links),
            len(doc.custom_assets),
        )
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(dir=self._path.parent, suffix=".tmp")
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    json.dump(doc.to_dict(), f, indent=2)
                os.replace(tmp_name, self._path)
            except OSError:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as e:
            raise DocumentError(f"Cannot write map document {self._path}: {e}") from e


class UnconfiguredDocument(LiveDocument):
    """Placeholder used when no map document path was given.

    Operations that never touch the document (project and branch bookkeeping,
    history) still work; anything that reads or writes the map fails with a
    message telling the user how to configure it.
    """

    MESSAGE = (
        "No map document configured "
        "(pass --map PATH or run: mapvc config set document_path PATH)"
    )

    def capture_document(self) -> Snapshot:
        raise DocumentError(self.MESSAGE)

    def remove_element(self, element_id: str) -> None:
        raise DocumentError(self.MESSAGE)

    def remove_tile(self, x: int, y: int, depth: int) -> None:
        raise DocumentError(self.MESSAGE)

    def remove_link(self, link_id: str) -> None:
        raise DocumentError(self.MESSAGE)

    def remove_custom_asset(self, asset_id: str) -> None:
        raise DocumentError(self.MESSAGE)

    def create_custom_asset(self, asset: CustomAsset) -> None:
        raise DocumentError(self.MESSAGE)

    def create_element(self, element: Element) -> None:
        raise DocumentError(self.MESSAGE)

    def create_tile(self, tile: Tile) -> None:
        raise DocumentError(self.MESSAGE)

    def create_link(self, link: Link) -> None:
        raise DocumentError(self.MESSAGE)
