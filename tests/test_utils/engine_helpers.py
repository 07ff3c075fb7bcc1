"""Helpers for building an engine wired to fakes."""

from dataclasses import dataclass

from mapvc.core.context import MapvcContext
from mapvc.core.document.fake import FakeLiveDocument
from mapvc.core.engine import VersioningEngine
from mapvc.core.kv_store.fake import FakeKeyValueStore
from mapvc.core.models import Project
from mapvc.core.snapshot import Snapshot
from tests.fakes.user_feedback import FakeUserFeedback


@dataclass
class EngineEnv:
    """An engine plus direct handles on the fakes behind it."""

    ctx: MapvcContext
    document: FakeLiveDocument
    kv_store: FakeKeyValueStore
    feedback: FakeUserFeedback

    @property
    def engine(self) -> VersioningEngine:
        return self.ctx.engine

    def load(self, name: str = "Demo") -> Project:
        return self.ctx.project_store.load_project(name)

    def edit(self, snapshot: Snapshot) -> None:
        """Simulate the user editing the live map to look like snapshot."""
        self.ctx.engine.codec.apply(snapshot)


def engine_env(
    *,
    document: FakeLiveDocument | None = None,
    kv_store: FakeKeyValueStore | None = None,
    project: str | None = "Demo",
) -> EngineEnv:
    """Build an engine over fakes, optionally with a freshly created current project."""
    document = document if document is not None else FakeLiveDocument()
    kv_store = kv_store if kv_store is not None else FakeKeyValueStore()
    feedback = FakeUserFeedback()
    ctx = MapvcContext.for_test(document=document, kv_store=kv_store, feedback=feedback)
    if project is not None:
        assert ctx.engine.create_project(project).ok
    return EngineEnv(ctx=ctx, document=document, kv_store=kv_store, feedback=feedback)
