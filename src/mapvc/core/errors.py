"""Error taxonomy for versioning operations.

Every error here is recoverable: the engine catches VersionControlError at the
operation boundary, reports it to the user and leaves persisted state as it was.

Collaborator errors (DocumentError, KeyValueStoreError) are raised by the live
document and key-value store implementations. The codec and project store
translate them into DocumentSyncFailure and PersistenceFailure.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from mapvc.core.codec import ApplyReport


class VersionControlError(Exception):
    """Base class for user-facing versioning failures."""


class NoProjectSelected(VersionControlError):
    def __init__(self) -> None:
        super().__init__("No project selected")


class ProjectNotFound(VersionControlError):
    def __init__(self, name: str) -> None:
        super().__init__(f"Project not found: {name}")
        self.name = name


class ProjectAlreadyExists(VersionControlError):
    def __init__(self, name: str) -> None:
        super().__init__(f"Project already exists: {name}")
        self.name = name


class CommitNotFound(VersionControlError):
    def __init__(self, commit_id: str) -> None:
        super().__init__(f"Commit not found: {commit_id}")
        self.commit_id = commit_id


class BranchNotFound(VersionControlError):
    def __init__(self, name: str) -> None:
        super().__init__(f"Branch not found: {name}")
        self.name = name


class BranchAlreadyExists(VersionControlError):
    def __init__(self, name: str) -> None:
        super().__init__(f"Branch already exists: {name}")
        self.name = name


class EmptyStash(VersionControlError):
    def __init__(self) -> None:
        super().__init__("No stash entries")


class IndexOutOfRange(VersionControlError):
    def __init__(self, index: int, size: int) -> None:
        super().__init__(f"Invalid stash index: {index} (stash has {size} entries)")
        self.index = index
        self.size = size


class InvalidName(VersionControlError):
    """A project or branch name was blank (treated as an aborted prompt)."""

    def __init__(self, kind: str) -> None:
        super().__init__(f"{kind} name cannot be empty")
        self.kind = kind


class InvalidSnapshot(VersionControlError):
    """A snapshot payload could not be decoded or violates id uniqueness."""


class PersistenceFailure(VersionControlError):
    """The key-value store rejected a read or write."""


class DocumentSyncFailure(VersionControlError):
    """Live-document primitives failed while capturing or applying a snapshot.

    report is set when the failure happened during apply and lists every
    failed item.
    """

    def __init__(self, message: str, report: "ApplyReport | None" = None) -> None:
        super().__init__(message)
        self.report = report


class DocumentError(Exception):
    """Raised by a LiveDocument primitive that could not be carried out."""


class KeyValueStoreError(Exception):
    """Raised by a KeyValueStore that could not read or write a key."""
