"""Snapshot capture and full-replace application onto the live document.

apply() does not diff. It removes everything the document currently holds and
then recreates everything in the target:

1. Removal phase: elements, tiles, links, custom assets of the current capture.
2. Creation phase: custom assets, elements, tiles, links of the target.

Custom assets and elements exist before the links that reference them. The
removal phase completes before the creation phase starts.

Each primitive is attempted independently. A DocumentError from one call is
recorded in the ApplyReport and the remaining calls still run; if anything
failed, DocumentSyncFailure is raised after both phases with the full report.
The codec does not verify that the document converged to the target.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Literal, ParamSpec

from mapvc.core.document.abc import LiveDocument
from mapvc.core.errors import DocumentError, DocumentSyncFailure
from mapvc.core.snapshot import Snapshot

P = ParamSpec("P")

logger = logging.getLogger(__name__)

Phase = Literal["remove", "create"]


@dataclass(frozen=True)
class ItemFailure:
    """One live-document primitive that raised during apply()."""

    phase: Phase
    kind: str  # "element", "tile", "link", "custom asset"
    key: str
    reason: str


@dataclass
class ApplyReport:
    """Per-item outcome of an apply() call."""

    removed: int = 0
    created: int = 0
    failures: list[ItemFailure] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failures


class SnapshotCodec:
    """Reads snapshots from and writes snapshots to a LiveDocument."""

    def __init__(self, document: LiveDocument) -> None:
        self._document = document

    def capture(self) -> Snapshot:
        """Capture the live document's current content.

        Raises:
            DocumentSyncFailure: If the document cannot be read
        """
        try:
            return self._document.capture_document()
        except DocumentError as e:
            raise DocumentSyncFailure(f"Cannot read live document: {e}") from e

    def apply(self, target: Snapshot) -> ApplyReport:
        """Replace the live document's content with target.

        Returns:
            ApplyReport with removal/creation counts when every call succeeded

        Raises:
            DocumentSyncFailure: If any primitive call failed
        """
        doc = self._document
        current = self.capture()
        report = ApplyReport()
        logger.debug(
            "Applying snapshot: removing %d items, creating %d items",
            _count(current),
            _count(target),
        )

        for element in current.elements:
            self._attempt(report, "remove", "element", element.id, doc.remove_element, element.id)
        for tile in current.tiles:
            self._attempt(
                report, "remove", "tile", _tile_key(tile.key), doc.remove_tile, *tile.key
            )
        for link in current.links:
            self._attempt(report, "remove", "link", link.id, doc.remove_link, link.id)
        for asset in current.custom_assets:
            self._attempt(
                report, "remove", "custom asset", asset.id, doc.remove_custom_asset, asset.id
            )

        for asset in target.custom_assets:
            self._attempt(
                report, "create", "custom asset", asset.id, doc.create_custom_asset, asset
            )
        for element in target.elements:
            self._attempt(report, "create", "element", element.id, doc.create_element, element)
        for tile in target.tiles:
            self._attempt(report, "create", "tile", _tile_key(tile.key), doc.create_tile, tile)
        for link in target.links:
            self._attempt(report, "create", "link", link.id, doc.create_link, link)

        if report.failures:
            logger.debug("Apply finished with %d failures", len(report.failures))
            first = report.failures[0]
            raise DocumentSyncFailure(
                f"Failed to apply snapshot: {len(report.failures)} document operation(s) failed "
                f"(first: {first.phase} {first.kind} {first.key}: {first.reason})",
                report,
            )
        return report

    def _attempt(
        self,
        report: ApplyReport,
        phase: Phase,
        kind: str,
        key: str,
        call: Callable[P, None],
        *args: P.args,
        **kwargs: P.kwargs,
    ) -> None:
        try:
            call(*args, **kwargs)
        except DocumentError as e:
            logger.debug("%s %s %s failed: %s", phase, kind, key, e)
            report.failures.append(ItemFailure(phase=phase, kind=kind, key=key, reason=str(e)))
            return
        if phase == "remove":
            report.removed += 1
        else:
            report.created += 1


def _count(snapshot: Snapshot) -> int:
    return (
        len(snapshot.tiles)
        + len(snapshot.elements)
        + len(snapshot.links)
        + len(snapshot.custom_assets)
    )


def _tile_key(key: tuple[int, int, int]) -> str:
    return ",".join(str(part) for part in key)
