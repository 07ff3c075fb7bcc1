"""Application context with dependency injection."""

from dataclasses import dataclass
from pathlib import Path

from mapvc.core.checkout_guard import AutoStash, CheckoutGuard, DiscardChanges
from mapvc.core.codec import SnapshotCodec
from mapvc.core.config_store import ConfigStore, GlobalConfig, RealConfigStore
from mapvc.core.document.abc import LiveDocument
from mapvc.core.document.dry_run import DryRunLiveDocument
from mapvc.core.document.real import JsonMapDocument, UnconfiguredDocument
from mapvc.core.engine import VersioningEngine
from mapvc.core.kv_store.abc import KeyValueStore
from mapvc.core.kv_store.dry_run import DryRunKeyValueStore
from mapvc.core.kv_store.real import JsonFileKeyValueStore
from mapvc.core.project_store import ProjectStore
from mapvc.core.time.abc import Time
from mapvc.core.time.real import RealTime
from mapvc.core.user_feedback import InteractiveFeedback, SuppressedFeedback, UserFeedback


@dataclass(frozen=True)
class MapvcContext:
    """Immutable context holding all dependencies for mapvc operations.

    Created at CLI entry point and threaded through the application.
    Frozen to prevent accidental modification at runtime.
    """

    document: LiveDocument
    kv_store: KeyValueStore
    time: Time
    feedback: UserFeedback
    config_store: ConfigStore
    global_config: GlobalConfig
    engine: VersioningEngine
    dry_run: bool

    @property
    def project_store(self) -> ProjectStore:
        return self.engine.store

    @staticmethod
    def for_test(
        document: LiveDocument | None = None,
        kv_store: KeyValueStore | None = None,
        time: Time | None = None,
        feedback: UserFeedback | None = None,
        config_store: ConfigStore | None = None,
        global_config: GlobalConfig | None = None,
        dry_run: bool = False,
    ) -> "MapvcContext":
        """Create test context with optional pre-configured integration classes.

        Any dependency left as None gets its in-memory fake. The engine is
        wired from the resulting pieces exactly as in production.

        Example:
            >>> document = FakeLiveDocument(initial=snapshot)
            >>> kv_store = FakeKeyValueStore()
            >>> ctx = MapvcContext.for_test(document=document, kv_store=kv_store)
            >>> ctx.engine.create_project("Demo")
        """
        from tests.fakes.time import FakeTime
        from tests.fakes.user_feedback import FakeUserFeedback

        from mapvc.core.config_store import FakeConfigStore
        from mapvc.core.document.fake import FakeLiveDocument
        from mapvc.core.kv_store.fake import FakeKeyValueStore

        if document is None:
            document = FakeLiveDocument()

        if kv_store is None:
            kv_store = FakeKeyValueStore()

        if time is None:
            time = FakeTime()

        if feedback is None:
            feedback = FakeUserFeedback()

        if global_config is None:
            global_config = GlobalConfig.defaults(Path("/test/mapvc"))

        if config_store is None:
            config_store = FakeConfigStore(config=global_config)

        # Apply dry-run wrappers if needed (matching production behavior)
        if dry_run:
            document = DryRunLiveDocument(document)
            kv_store = DryRunKeyValueStore(kv_store)

        return _assemble(
            document=document,
            kv_store=kv_store,
            time=time,
            feedback=feedback,
            config_store=config_store,
            global_config=global_config,
            dry_run=dry_run,
        )


def create_context(
    *,
    dry_run: bool,
    quiet: bool = False,
    map_path: Path | None = None,
    config_store: ConfigStore | None = None,
) -> MapvcContext:
    """Create production context with real implementations.

    Called at CLI entry point to create the context for the entire
    command execution.

    Args:
        dry_run: If True, wrap the document and store with dry-run wrappers that
                 print intended mutations without executing them
        quiet: If True, use SuppressedFeedback (errors only)
        map_path: Map document path, overriding document_path from config
        config_store: Config store to load from (default: RealConfigStore)

    Raises:
        ValueError: If the config file is malformed
    """
    # 1. Load global config (defaults when no file exists)
    if config_store is None:
        config_store = RealConfigStore()
    global_config = config_store.load()

    # 2. Create integration classes
    document_path = map_path if map_path is not None else global_config.document_path
    document: LiveDocument
    if document_path is None:
        document = UnconfiguredDocument()
    else:
        document = JsonMapDocument(document_path)
    kv_store: KeyValueStore = JsonFileKeyValueStore(global_config.store_path)

    # 3. Choose feedback implementation based on mode
    feedback: UserFeedback = SuppressedFeedback() if quiet else InteractiveFeedback()

    # 4. Apply dry-run wrappers if needed
    if dry_run:
        document = DryRunLiveDocument(document)
        kv_store = DryRunKeyValueStore(kv_store)

    return _assemble(
        document=document,
        kv_store=kv_store,
        time=RealTime(),
        feedback=feedback,
        config_store=config_store,
        global_config=global_config,
        dry_run=dry_run,
    )


def _assemble(
    *,
    document: LiveDocument,
    kv_store: KeyValueStore,
    time: Time,
    feedback: UserFeedback,
    config_store: ConfigStore,
    global_config: GlobalConfig,
    dry_run: bool,
) -> MapvcContext:
    codec = SnapshotCodec(document)
    guard: CheckoutGuard = AutoStash(codec, time) if global_config.auto_stash else DiscardChanges()
    engine = VersioningEngine(
        store=ProjectStore(kv_store, prefix=global_config.key_prefix),
        codec=codec,
        time=time,
        feedback=feedback,
        checkout_guard=guard,
    )
    return MapvcContext(
        document=document,
        kv_store=kv_store,
        time=time,
        feedback=feedback,
        config_store=config_store,
        global_config=global_config,
        engine=engine,
        dry_run=dry_run,
    )
