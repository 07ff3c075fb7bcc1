"""Tests for commit graph building and text rendering."""

from mapvc.core.graph import build_graph, format_graph
from mapvc.core.models import Commit
from mapvc.core.snapshot import Snapshot


def _commit(commit_id: str, parent: str | None, message: str) -> Commit:
    return Commit(id=commit_id, message=message, timestamp=0, parent=parent, state=Snapshot())


def test_empty_history_has_no_nodes() -> None:
    assert build_graph([], None) == ()
    assert format_graph(()) == "No commits yet"


def test_nodes_are_newest_first_with_linkage() -> None:
    commits = [
        _commit("aaaaaaaaaa", None, "init"),
        _commit("bbbbbbbbbb", "aaaaaaaaaa", "second"),
    ]

    nodes = build_graph(commits, "aaaaaaaaaa")

    assert [n.message for n in nodes] == ["second", "init"]
    assert nodes[1].child_ids == ("bbbbbbbbbb",)
    assert nodes[0].parent_id == "aaaaaaaaaa"
    assert nodes[0].short_id == "bbbbbbb"
    assert [n.is_head for n in nodes] == [False, True]


def test_parent_outside_log_is_not_linked() -> None:
    nodes = build_graph([_commit("cccccccccc", "missing", "orphan")], "cccccccccc")

    assert nodes[0].parent_id == "missing"
    assert nodes[0].child_ids == ()


def test_format_graph_marks_head_and_draws_rail() -> None:
    commits = [
        _commit("aaaaaaaaaa", None, "init"),
        _commit("bbbbbbbbbb", "aaaaaaaaaa", "second"),
    ]

    lines = format_graph(build_graph(commits, "bbbbbbbbbb")).splitlines()

    assert lines[0] == "● second (HEAD)"
    assert lines[1].startswith("│   bbbbbbb - ")
    assert lines[2] == "│"
    assert lines[3] == "● init"
    assert lines[4].startswith("    aaaaaaa - ")
    assert len(lines) == 5
