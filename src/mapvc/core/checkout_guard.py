"""Policies run before checkout replaces the live document.

Checkout and branch switching overwrite whatever is on the live document.
By default unsaved edits are discarded without warning. A guard can change
that, for example by stashing the current content first.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import replace

from mapvc.core.codec import SnapshotCodec
from mapvc.core.models import Project, StashEntry, new_id
from mapvc.core.time.abc import Time

logger = logging.getLogger(__name__)


class CheckoutGuard(ABC):
    """Hook invoked before a stored snapshot is applied over the live document."""

    @abstractmethod
    def before_apply(self, project: Project, operation: str) -> Project:
        """Return the project to continue with (unchanged, or with new stash entries).

        Args:
            project: Project state loaded for the operation
            operation: Human-readable operation name, e.g. "checkout"
        """
        ...


class DiscardChanges(CheckoutGuard):
    """Default policy: live edits are silently replaced."""

    def before_apply(self, project: Project, operation: str) -> Project:
        return project


class AutoStash(CheckoutGuard):
    """Push the live document onto the stash before it is replaced.

    Nothing is stashed when the live document is identical to the current
    branch head, since no edits would be lost.
    """

    def __init__(self, codec: SnapshotCodec, time: Time) -> None:
        self._codec = codec
        self._time = time

    def before_apply(self, project: Project, operation: str) -> Project:
        state = self._codec.capture()
        head = project.head_commit()
        if head is not None and head.state == state:
            return project
        if head is None and state.is_empty:
            return project
        existing = {entry.id for entry in project.stash}
        entry = StashEntry(
            id=new_id(existing),
            message=f"Auto-stash before {operation}",
            timestamp=self._time.now_ms(),
            state=state,
        )
        logger.debug("Auto-stashing live document before %s as %s", operation, entry.id)
        return replace(project, stash=(entry, *project.stash))
