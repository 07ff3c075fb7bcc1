"""Tests for the stash operations of VersioningEngine."""

from mapvc.core.errors import EmptyStash, IndexOutOfRange
from mapvc.core.snapshot import Snapshot
from tests.test_utils.engine_helpers import engine_env
from tests.test_utils.snapshots import sample_snapshot, single_element_snapshot


def test_stash_save_keeps_document_and_pushes_front() -> None:
    env = engine_env()
    env.edit(single_element_snapshot("first"))
    env.engine.stash_save("first")
    env.edit(single_element_snapshot("second"))

    result = env.engine.stash_save("second")

    assert result.ok
    assert [e.message for e in env.load().stash] == ["second", "first"]
    assert env.engine.codec.capture() == single_element_snapshot("second")


def test_stash_message_defaults_to_wip() -> None:
    env = engine_env()

    entry = env.engine.stash_save("").value

    assert entry is not None
    assert entry.message == "WIP"


def test_stash_save_then_pop_restores_document() -> None:
    saved = sample_snapshot("saved")
    env = engine_env()
    env.edit(saved)
    env.engine.stash_save("wip")
    env.edit(sample_snapshot("other"))

    result = env.engine.stash_pop()

    assert result.ok
    assert env.engine.codec.capture() == saved
    assert env.load().stash == ()
    assert env.feedback.successes[-1] == "Applied stash: wip"


def test_stash_pop_takes_most_recent_entry() -> None:
    env = engine_env()
    env.edit(single_element_snapshot("old"))
    env.engine.stash_save("old")
    env.edit(single_element_snapshot("new"))
    env.engine.stash_save("new")

    popped = env.engine.stash_pop().value

    assert popped is not None
    assert popped.message == "new"
    assert [e.message for e in env.load().stash] == ["old"]


def test_stash_pop_on_empty_stash_fails() -> None:
    env = engine_env()

    result = env.engine.stash_pop()

    assert isinstance(result.error, EmptyStash)
    assert env.feedback.errors == ["Error: No stash entries"]


def test_delete_stash_removes_entry_without_applying() -> None:
    env = engine_env()
    env.edit(single_element_snapshot("a"))
    env.engine.stash_save("a")
    env.edit(single_element_snapshot("b"))
    env.engine.stash_save("b")
    env.edit(Snapshot())
    calls_before = list(env.document.calls)

    result = env.engine.delete_stash(1)

    assert result.value is not None
    assert result.value.message == "a"
    assert [e.message for e in env.load().stash] == ["b"]
    assert env.document.calls == calls_before


def test_delete_stash_out_of_range_leaves_stash_unchanged() -> None:
    env = engine_env()
    env.engine.stash_save("only")
    before = env.load().stash

    for index in (-1, 1, 5):
        result = env.engine.delete_stash(index)
        assert isinstance(result.error, IndexOutOfRange)

    assert env.load().stash == before


def test_list_stash_most_recent_first() -> None:
    env = engine_env()
    env.engine.stash_save("one")
    env.engine.stash_save("two")

    entries = env.engine.list_stash().value

    assert entries is not None
    assert [e.message for e in entries] == ["two", "one"]
