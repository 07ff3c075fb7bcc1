"""Tests for checkout guards, including auto-stash before checkout."""

from dataclasses import replace
from pathlib import Path

from mapvc.core.checkout_guard import AutoStash, DiscardChanges
from mapvc.core.config_store import GlobalConfig
from mapvc.core.context import MapvcContext
from mapvc.core.document.fake import FakeLiveDocument
from mapvc.core.errors import DocumentSyncFailure
from mapvc.core.kv_store.fake import FakeKeyValueStore
from mapvc.core.snapshot import Snapshot
from tests.fakes.user_feedback import FakeUserFeedback
from tests.test_utils.snapshots import sample_snapshot, single_element_snapshot


def _auto_stash_ctx(
    feedback: FakeUserFeedback | None = None,
    document: FakeLiveDocument | None = None,
    kv_store: FakeKeyValueStore | None = None,
    create_project: bool = True,
) -> MapvcContext:
    config = replace(GlobalConfig.defaults(Path("/test/mapvc")), auto_stash=True)
    ctx = MapvcContext.for_test(
        document=document, kv_store=kv_store, global_config=config, feedback=feedback
    )
    if create_project:
        assert ctx.engine.create_project("Demo").ok
    return ctx


def test_default_guard_discards_changes() -> None:
    ctx = MapvcContext.for_test()

    assert isinstance(ctx.engine.checkout_guard, DiscardChanges)


def test_auto_stash_config_installs_guard() -> None:
    assert isinstance(_auto_stash_ctx().engine.checkout_guard, AutoStash)


def test_checkout_stashes_unsaved_edits() -> None:
    feedback = FakeUserFeedback()
    ctx = _auto_stash_ctx(feedback)
    ctx.engine.codec.apply(sample_snapshot("a"))
    first = ctx.engine.commit("a").value
    ctx.engine.codec.apply(sample_snapshot("unsaved"))
    assert first is not None

    assert ctx.engine.checkout(first.id).ok

    project = ctx.project_store.load_project("Demo")
    assert [e.message for e in project.stash] == ["Auto-stash before checkout"]
    assert project.stash[0].state == sample_snapshot("unsaved")
    assert ctx.engine.codec.capture() == sample_snapshot("a")
    assert "Stashed live changes before checkout" in feedback.infos


def test_clean_document_is_not_stashed() -> None:
    ctx = _auto_stash_ctx()
    ctx.engine.codec.apply(sample_snapshot("a"))
    first = ctx.engine.commit("a").value
    assert first is not None

    ctx.engine.checkout(first.id)

    assert ctx.project_store.load_project("Demo").stash == ()


def test_empty_document_on_empty_branch_is_not_stashed() -> None:
    ctx = _auto_stash_ctx()
    ctx.engine.create_branch("feature")
    ctx.engine.switch_branch("feature")
    ctx.engine.codec.apply(single_element_snapshot("x"))
    ctx.engine.commit("x")
    ctx.engine.switch_branch("main")
    ctx.engine.codec.apply(Snapshot())

    ctx.engine.switch_branch("feature")

    assert ctx.project_store.load_project("Demo").stash == ()


def test_switch_with_unsaved_edits_stashes_them() -> None:
    ctx = _auto_stash_ctx()
    ctx.engine.codec.apply(single_element_snapshot("main"))
    ctx.engine.commit("main")
    ctx.engine.create_branch("feature")
    ctx.engine.codec.apply(single_element_snapshot("edit"))

    ctx.engine.switch_branch("feature")

    stash = ctx.project_store.load_project("Demo").stash
    assert len(stash) == 1
    assert stash[0].state == single_element_snapshot("edit")


def test_failed_checkout_does_not_persist_auto_stash() -> None:
    kv_store = FakeKeyValueStore()
    setup = _auto_stash_ctx(kv_store=kv_store)
    setup.engine.codec.apply(sample_snapshot("a"))
    first = setup.engine.commit("a").value
    assert first is not None
    feedback = FakeUserFeedback()
    failing = _auto_stash_ctx(
        feedback=feedback,
        document=FakeLiveDocument(
            initial=sample_snapshot("unsaved"), failing_calls={("create_element", "a-e1")}
        ),
        kv_store=kv_store,
        create_project=False,
    )
    before = kv_store.data

    result = failing.engine.checkout(first.id)

    assert isinstance(result.error, DocumentSyncFailure)
    assert kv_store.data == before
    assert failing.project_store.load_project("Demo").stash == ()
    assert feedback.infos == []


def test_failed_switch_does_not_persist_auto_stash() -> None:
    kv_store = FakeKeyValueStore()
    setup = _auto_stash_ctx(kv_store=kv_store)
    setup.engine.codec.apply(single_element_snapshot("main"))
    setup.engine.commit("main")
    setup.engine.create_branch("feature")
    failing = _auto_stash_ctx(
        document=FakeLiveDocument(
            initial=single_element_snapshot("edit"),
            failing_calls={("create_element", "main")},
        ),
        kv_store=kv_store,
        create_project=False,
    )
    before = kv_store.data

    result = failing.engine.switch_branch("feature")

    assert isinstance(result.error, DocumentSyncFailure)
    assert kv_store.data == before
    assert failing.project_store.load_project("Demo").current_branch == "main"
