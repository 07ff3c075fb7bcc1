"""Versioning engine: commit, checkout, branches, stash and project lifecycle.

Every public operation:
- resolves the current project first (NoProjectSelected if none is set),
- loads the project, computes a new immutable Project value,
- applies snapshots to the live document BEFORE writing metadata, so a failed
  apply leaves head, branch and stash state untouched in the store,
- reports the outcome through UserFeedback and returns an OperationResult.

VersionControlError never escapes a public operation. Anything else (a bug)
propagates.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass, replace
from functools import wraps
from typing import Concatenate, Generic, ParamSpec, TypeVar

from mapvc.core.checkout_guard import CheckoutGuard, DiscardChanges
from mapvc.core.codec import SnapshotCodec
from mapvc.core.errors import (
    BranchAlreadyExists,
    EmptyStash,
    IndexOutOfRange,
    InvalidName,
    NoProjectSelected,
    ProjectAlreadyExists,
    ProjectNotFound,
    VersionControlError,
)
from mapvc.core.graph import GraphNode, build_graph
from mapvc.core.models import Branch, Commit, Project, StashEntry, new_id
from mapvc.core.project_store import ProjectStore
from mapvc.core.time.abc import Time
from mapvc.core.user_feedback import UserFeedback

logger = logging.getLogger(__name__)

T = TypeVar("T")
P = ParamSpec("P")
R = TypeVar("R")

DEFAULT_COMMIT_MESSAGE = "Untitled commit"
DEFAULT_STASH_MESSAGE = "WIP"


@dataclass(frozen=True)
class OperationResult(Generic[T]):
    """Outcome of an engine operation.

    ok is False exactly when error is set; value is only meaningful when ok.
    """

    ok: bool
    value: T | None = None
    error: VersionControlError | None = None


@dataclass(frozen=True)
class ProjectListing:
    """Registered project names in creation order, and the current one if any."""

    names: tuple[str, ...]
    current: str | None


@dataclass(frozen=True)
class ProjectStatus:
    """Summary of the current project for display."""

    project: str
    branch: str
    branches: tuple[str, ...]
    commit_count: int
    stash_count: int
    head: Commit | None


def operation(
    func: Callable[Concatenate["VersioningEngine", P], R],
) -> Callable[Concatenate["VersioningEngine", P], OperationResult[R]]:
    """Catch VersionControlError at the operation boundary and report it."""

    @wraps(func)
    def wrapper(
        self: "VersioningEngine", *args: P.args, **kwargs: P.kwargs
    ) -> OperationResult[R]:
        try:
            value = func(self, *args, **kwargs)
        except VersionControlError as e:
            logger.debug("Operation %s failed: %s: %s", func.__name__, type(e).__name__, e)
            self.feedback.error(f"Error: {e}")
            return OperationResult(ok=False, error=e)
        return OperationResult(ok=True, value=value)

    return wrapper


class VersioningEngine:
    """State transitions over persisted projects and the live document."""

    def __init__(
        self,
        *,
        store: ProjectStore,
        codec: SnapshotCodec,
        time: Time,
        feedback: UserFeedback,
        checkout_guard: CheckoutGuard | None = None,
    ) -> None:
        self.store = store
        self.codec = codec
        self.time = time
        self.feedback = feedback
        self.checkout_guard = checkout_guard if checkout_guard is not None else DiscardChanges()

    # Project lifecycle

    @operation
    def create_project(self, name: str) -> Project:
        """Register a new project, make it current and persist its empty main branch."""
        name = _require_name(name, "Project")
        names = self.store.list_projects()
        if name in names:
            raise ProjectAlreadyExists(name)
        project = Project.fresh(name)
        self.store.save_project(project)
        self.store.save_project_list([*names, name])
        self.store.set_current_project_name(name)
        self.feedback.success(f"Created project: {name}")
        return project

    @operation
    def select_project(self, name: str) -> Project:
        """Make a registered project current and restore its current branch head."""
        name = _require_name(name, "Project")
        if name not in self.store.list_projects():
            raise ProjectNotFound(name)
        project = self.store.load_project(name)
        head = project.head_commit()
        if head is not None:
            self.codec.apply(head.state)
        self.store.set_current_project_name(name)
        self.feedback.success(f"Switched to: {name}")
        return project

    @operation
    def list_projects(self) -> ProjectListing:
        return ProjectListing(
            names=tuple(self.store.list_projects()),
            current=self.store.current_project_name(),
        )

    @operation
    def delete_project(self) -> str:
        """Delete the current project with all its branches, commits and stash."""
        name = self._current_project_name()
        self.store.delete_project(name)
        self.feedback.success(f"Deleted project: {name}")
        return name

    # Commits and branches

    @operation
    def commit(self, message: str = "") -> Commit:
        project = self._load_current_project()
        branch = project.branch
        state = self.codec.capture()
        commit = Commit(
            id=new_id(project.commits.keys()),
            message=_message_or(message, DEFAULT_COMMIT_MESSAGE),
            timestamp=self.time.now_ms(),
            parent=branch.head,
            state=state,
        )
        updated_branch = replace(
            branch, commit_ids=(*branch.commit_ids, commit.id), head=commit.id
        )
        updated = replace(
            project.with_branch(updated_branch),
            commits={**project.commits, commit.id: commit},
        )
        self.store.save_project(updated)
        logger.debug("Committed %s on %s/%s", commit.id, project.name, branch.name)
        self.feedback.success(f"Committed: {commit.message}")
        return commit

    @operation
    def checkout(self, commit_ref: str) -> Commit:
        """Replace the live document with a commit of the current branch and move head.

        Unsaved live edits are discarded unless the checkout guard preserves them.
        No commit is created.
        """
        project = self._load_current_project()
        commit = project.resolve_commit(commit_ref)
        guarded = self.checkout_guard.before_apply(project, "checkout")
        self.codec.apply(commit.state)
        self.store.save_project(guarded.with_branch(replace(guarded.branch, head=commit.id)))
        self._report_guard(project, guarded, "checkout")
        self.feedback.success(f"Checked out: {commit.message}")
        return commit

    @operation
    def create_branch(self, name: str) -> Branch:
        """Fork the current branch's history and head under a new name."""
        name = _require_name(name, "Branch")
        project = self._load_current_project()
        if name in project.branches:
            raise BranchAlreadyExists(name)
        source = project.branch
        branch = Branch(name=name, commit_ids=source.commit_ids, head=source.head)
        self.store.save_project(project.with_branch(branch))
        self.feedback.success(f"Created branch: {name}")
        return branch

    @operation
    def switch_branch(self, name: str) -> Branch:
        """Make a branch current and restore its head.

        Switching to a branch with no commits leaves the live document as is.
        """
        project = self._load_current_project()
        branch = project.get_branch(name)
        head = project.head_commit(name)
        guarded = project
        if head is not None:
            guarded = self.checkout_guard.before_apply(project, "switching branch")
            self.codec.apply(head.state)
        self.store.save_project(replace(guarded, current_branch=name))
        self._report_guard(project, guarded, "switching branch")
        self.feedback.success(f"Switched to branch: {name}")
        return branch

    @operation
    def list_branches(self) -> tuple[Branch, ...]:
        """Branches of the current project in creation order."""
        return tuple(self._load_current_project().branches.values())

    @operation
    def history(self, branch: str | None = None) -> tuple[GraphNode, ...]:
        """Graph nodes for a branch (default: current), newest first."""
        project = self._load_current_project()
        target = project.get_branch(branch if branch is not None else project.current_branch)
        return build_graph(project.branch_commits(target.name), target.head)

    @operation
    def status(self) -> ProjectStatus:
        project = self._load_current_project()
        return ProjectStatus(
            project=project.name,
            branch=project.current_branch,
            branches=tuple(project.branches),
            commit_count=len(project.branch.commit_ids),
            stash_count=len(project.stash),
            head=project.head_commit(),
        )

    # Stash

    @operation
    def stash_save(self, message: str = "") -> StashEntry:
        """Push the live document onto the front of the stash. The document is left as is."""
        project = self._load_current_project()
        entry = StashEntry(
            id=new_id({e.id for e in project.stash}),
            message=_message_or(message, DEFAULT_STASH_MESSAGE),
            timestamp=self.time.now_ms(),
            state=self.codec.capture(),
        )
        self.store.save_project(replace(project, stash=(entry, *project.stash)))
        self.feedback.success(f"Stashed: {entry.message}")
        return entry

    @operation
    def stash_pop(self) -> StashEntry:
        """Apply the most recent stash entry and drop it from the stash."""
        project = self._load_current_project()
        if not project.stash:
            raise EmptyStash()
        entry, *rest = project.stash
        self.codec.apply(entry.state)
        self.store.save_project(replace(project, stash=tuple(rest)))
        self.feedback.success(f"Applied stash: {entry.message}")
        return entry

    @operation
    def delete_stash(self, index: int) -> StashEntry:
        """Drop one stash entry without applying it."""
        project = self._load_current_project()
        if index < 0 or index >= len(project.stash):
            raise IndexOutOfRange(index, len(project.stash))
        entry = project.stash[index]
        remaining = project.stash[:index] + project.stash[index + 1 :]
        self.store.save_project(replace(project, stash=remaining))
        self.feedback.success(f"Deleted stash: {entry.message}")
        return entry

    @operation
    def list_stash(self) -> tuple[StashEntry, ...]:
        return self._load_current_project().stash

    # Helpers

    def _current_project_name(self) -> str:
        name = self.store.current_project_name()
        if name is None:
            raise NoProjectSelected()
        return name

    def _load_current_project(self) -> Project:
        return self.store.load_project(self._current_project_name())

    def _report_guard(self, project: Project, guarded: Project, operation_name: str) -> None:
        if guarded is not project:
            self.feedback.info(f"Stashed live changes before {operation_name}")


def _require_name(name: str | None, kind: str) -> str:
    if name is None or not name.strip():
        raise InvalidName(kind)
    return name.strip()


def _message_or(message: str | None, default: str) -> str:
    if message is None or not message.strip():
        return default
    return message
