"""Pydantic models for JSON output schemas.

This module defines the validated JSON schemas for CLI commands that support
--json output. These models ensure type safety and provide runtime validation
of JSON output structures.
"""

from pydantic import BaseModel, ConfigDict, Field

from mapvc.core.engine import ProjectStatus
from mapvc.core.graph import GraphNode
from mapvc.core.models import StashEntry


class CommitNodeInfo(BaseModel):
    """One commit in `mapvc log --json`.

    Attributes:
        id: Full commit id
        short_id: Abbreviated id as shown in the text graph
        message: Commit message
        timestamp: Creation time in epoch milliseconds
        parent: Parent commit id (None for the first commit)
        children: Ids of commits whose parent is this commit
        is_head: Whether this commit is the branch head
    """

    model_config = ConfigDict(strict=True)

    id: str
    short_id: str
    message: str
    timestamp: int = Field(..., ge=0)
    parent: str | None
    children: list[str]
    is_head: bool

    @staticmethod
    def from_node(node: GraphNode) -> "CommitNodeInfo":
        return CommitNodeInfo(
            id=node.commit_id,
            short_id=node.short_id,
            message=node.message,
            timestamp=node.timestamp,
            parent=node.parent_id,
            children=list(node.child_ids),
            is_head=node.is_head,
        )


class LogCommandResponse(BaseModel):
    """JSON response schema for the `mapvc log` command."""

    model_config = ConfigDict(strict=True)

    branch: str
    commits: list[CommitNodeInfo]


class StashEntryInfo(BaseModel):
    """One stash entry in JSON output, by stack position (0 = most recent)."""

    model_config = ConfigDict(strict=True)

    index: int = Field(..., ge=0)
    id: str
    message: str
    timestamp: int

    @staticmethod
    def from_entry(index: int, entry: StashEntry) -> "StashEntryInfo":
        return StashEntryInfo(
            index=index, id=entry.id, message=entry.message, timestamp=entry.timestamp
        )


class StatusCommandResponse(BaseModel):
    """JSON response schema for the `mapvc status` command.

    Attributes:
        project: Current project name
        branch: Current branch name
        branches: All branch names of the project
        commits: Number of commits on the current branch
        stashed: Number of stash entries
        head: Head commit id of the current branch (None for an empty branch)
    """

    model_config = ConfigDict(strict=True)

    project: str
    branch: str
    branches: list[str]
    commits: int = Field(..., ge=0)
    stashed: int = Field(..., ge=0)
    head: str | None

    @staticmethod
    def from_status(status: ProjectStatus) -> "StatusCommandResponse":
        return StatusCommandResponse(
            project=status.project,
            branch=status.branch,
            branches=list(status.branches),
            commits=status.commit_count,
            stashed=status.stash_count,
            head=status.head.id if status.head is not None else None,
        )
