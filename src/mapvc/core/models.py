"""Persisted versioning data model: projects, branches, commits and stash entries.

A Project owns one commit table (commit id -> Commit). Each Branch holds the
ordered ids of its commits plus a head pointer. Forking a branch copies the id
tuple, so every branch enumerates its own full history while commit payloads
are stored once.

All values are frozen. Operations build new values with dataclasses.replace().
"""

import uuid
from collections.abc import Collection, Mapping
from dataclasses import dataclass, field, replace
from typing import Any

from mapvc.core.errors import (
    BranchNotFound,
    CommitNotFound,
    InvalidSnapshot,
    PersistenceFailure,
)
from mapvc.core.snapshot import Snapshot

MAIN_BRANCH = "main"
SHORT_ID_LENGTH = 7
MIN_PREFIX_LENGTH = 4


def new_id(taken: Collection[str] = ()) -> str:
    """Generate a random hex id not present in taken."""
    while True:
        candidate = uuid.uuid4().hex
        if candidate not in taken:
            return candidate


@dataclass(frozen=True)
class Commit:
    """Named, timestamped snapshot linked to the commit that was head when created."""

    id: str
    message: str
    timestamp: int  # epoch milliseconds
    parent: str | None
    state: Snapshot

    @property
    def short_id(self) -> str:
        return self.id[:SHORT_ID_LENGTH]

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "message": self.message,
            "timestamp": self.timestamp,
            "parent": self.parent,
            "state": self.state.to_dict(),
        }

    @staticmethod
    def from_dict(data: Mapping[str, Any]) -> "Commit":
        return Commit(
            id=str(data["id"]),
            message=str(data["message"]),
            timestamp=int(data["timestamp"]),
            parent=data.get("parent"),
            state=Snapshot.from_dict(data["state"]),
        )


@dataclass(frozen=True)
class StashEntry:
    """Uncommitted snapshot shelved on the project's stash stack."""

    id: str
    message: str
    timestamp: int
    state: Snapshot

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "message": self.message,
            "timestamp": self.timestamp,
            "state": self.state.to_dict(),
        }

    @staticmethod
    def from_dict(data: Mapping[str, Any]) -> "StashEntry":
        return StashEntry(
            id=str(data["id"]),
            message=str(data["message"]),
            timestamp=int(data["timestamp"]),
            state=Snapshot.from_dict(data["state"]),
        )


@dataclass(frozen=True)
class Branch:
    """Named commit history with a head pointer.

    head is None for an empty branch, otherwise one of commit_ids.
    """

    name: str
    commit_ids: tuple[str, ...] = ()
    head: str | None = None

    def __post_init__(self) -> None:
        if self.head is not None and self.head not in self.commit_ids:
            raise ValueError(f"Head {self.head} of branch {self.name} is not in its history")

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "commitIds": list(self.commit_ids), "head": self.head}


@dataclass(frozen=True)
class Project:
    """Root of all persisted versioning state for one map."""

    name: str
    current_branch: str = MAIN_BRANCH
    branches: Mapping[str, Branch] = field(
        default_factory=lambda: {MAIN_BRANCH: Branch(name=MAIN_BRANCH)}
    )
    commits: Mapping[str, Commit] = field(default_factory=dict)
    stash: tuple[StashEntry, ...] = ()

    def __post_init__(self) -> None:
        if self.current_branch not in self.branches:
            raise ValueError(
                f"Current branch {self.current_branch} of project {self.name} does not exist"
            )

    @staticmethod
    def fresh(name: str) -> "Project":
        """Project as it exists right after creation: one empty main branch."""
        return Project(name=name)

    @property
    def branch(self) -> Branch:
        """The currently checked-out branch."""
        return self.branches[self.current_branch]

    def get_branch(self, name: str) -> Branch:
        if name not in self.branches:
            raise BranchNotFound(name)
        return self.branches[name]

    def branch_commits(self, name: str | None = None) -> list[Commit]:
        """Commits of a branch in creation order (default: current branch)."""
        branch = self.get_branch(name if name is not None else self.current_branch)
        return [self.commits[commit_id] for commit_id in branch.commit_ids]

    def head_commit(self, name: str | None = None) -> Commit | None:
        branch = self.get_branch(name if name is not None else self.current_branch)
        if branch.head is None:
            return None
        return self.commits.get(branch.head)

    def resolve_commit(self, ref: str, branch_name: str | None = None) -> Commit:
        """Find a commit on a branch by full id or unambiguous id prefix.

        Raises:
            CommitNotFound: If no commit matches, or a prefix matches several
        """
        branch = self.get_branch(branch_name if branch_name is not None else self.current_branch)
        if ref in branch.commit_ids:
            return self.commits[ref]
        if len(ref) < MIN_PREFIX_LENGTH:
            raise CommitNotFound(ref)
        matches = [commit_id for commit_id in branch.commit_ids if commit_id.startswith(ref)]
        if len(matches) != 1:
            raise CommitNotFound(ref)
        return self.commits[matches[0]]

    def with_branch(self, branch: Branch) -> "Project":
        return replace(self, branches={**self.branches, branch.name: branch})

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "currentBranch": self.current_branch,
            "commits": {commit_id: c.to_dict() for commit_id, c in self.commits.items()},
            "branches": {name: b.to_dict() for name, b in self.branches.items()},
            "stash": [entry.to_dict() for entry in self.stash],
        }

    @staticmethod
    def from_dict(data: Mapping[str, Any]) -> "Project":
        """Decode a persisted project record.

        Accepts both the commit-table layout written by to_dict() and the
        legacy layout where each branch embeds a full ``commits`` array.

        Raises:
            PersistenceFailure: If the record is malformed
        """
        try:
            return _decode_project(data)
        except (KeyError, TypeError, ValueError, InvalidSnapshot) as e:
            raise PersistenceFailure(f"Corrupt project record: {e}") from e


def _decode_project(data: Mapping[str, Any]) -> Project:
    commits: dict[str, Commit] = {
        commit_id: Commit.from_dict(raw) for commit_id, raw in data.get("commits", {}).items()
    }
    branches: dict[str, Branch] = {}
    for name, raw_branch in data["branches"].items():
        if "commitIds" in raw_branch:
            commit_ids = tuple(str(c) for c in raw_branch["commitIds"])
        else:
            # Legacy layout: commits embedded per branch, duplicated across forks
            embedded = [Commit.from_dict(raw) for raw in raw_branch.get("commits", [])]
            for commit in embedded:
                commits.setdefault(commit.id, commit)
            commit_ids = tuple(commit.id for commit in embedded)
        missing = [c for c in commit_ids if c not in commits]
        if missing:
            raise ValueError(f"branch {name} references unknown commits {missing}")
        branches[name] = Branch(name=name, commit_ids=commit_ids, head=raw_branch.get("head"))
    return Project(
        name=str(data["name"]),
        current_branch=str(data.get("currentBranch", MAIN_BRANCH)),
        branches=branches,
        commits=commits,
        stash=tuple(StashEntry.from_dict(raw) for raw in data.get("stash", [])),
    )
