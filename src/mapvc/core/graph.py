"""Commit history graph for display.

This module contains pure logic: it derives display nodes from a branch's
commit log and renders them as text. It never touches the store.
"""

from collections.abc import Sequence
from dataclasses import dataclass

from mapvc.cli.output import format_timestamp
from mapvc.core.models import SHORT_ID_LENGTH, Commit


@dataclass(frozen=True)
class GraphNode:
    """One commit as shown in the history graph."""

    commit_id: str
    short_id: str
    message: str
    timestamp: int
    parent_id: str | None
    child_ids: tuple[str, ...]
    is_head: bool


def build_graph(commits: Sequence[Commit], head_id: str | None) -> tuple[GraphNode, ...]:
    """Build graph nodes, newest first, from a branch's commits in creation order.

    A commit is a child of its parent when that parent is part of the same log.
    Empty input gives an empty tuple.
    """
    children: dict[str, list[str]] = {commit.id: [] for commit in commits}
    for commit in commits:
        if commit.parent is not None and commit.parent in children:
            children[commit.parent].append(commit.id)

    return tuple(
        GraphNode(
            commit_id=commit.id,
            short_id=commit.id[:SHORT_ID_LENGTH],
            message=commit.message,
            timestamp=commit.timestamp,
            parent_id=commit.parent,
            child_ids=tuple(children[commit.id]),
            is_head=commit.id == head_id,
        )
        for commit in reversed(commits)
    )


def format_graph(nodes: Sequence[GraphNode]) -> str:
    """Render graph nodes as a vertical text graph.

    Example:
        ● add bridge (HEAD)
        │   3f9a2c1 - 2026-01-05 14:02:11
        │
        ● init
            91be0d4 - 2026-01-05 13:58:40
    """
    if not nodes:
        return "No commits yet"

    lines: list[str] = []
    for index, node in enumerate(nodes):
        is_last = index == len(nodes) - 1
        head_marker = " (HEAD)" if node.is_head else ""
        rail = " " if is_last else "│"
        lines.append(f"● {node.message}{head_marker}")
        lines.append(f"{rail}   {node.short_id} - {format_timestamp(node.timestamp)}")
        if not is_last:
            lines.append("│")
    return "\n".join(lines)
