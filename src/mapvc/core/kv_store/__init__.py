"""Key-value persistence integration.

Values are JSON-compatible Python objects stored under string keys.
"""

from mapvc.core.kv_store.abc import JsonValue, KeyValueStore
from mapvc.core.kv_store.dry_run import DryRunKeyValueStore
from mapvc.core.kv_store.fake import FakeKeyValueStore
from mapvc.core.kv_store.real import JsonFileKeyValueStore

__all__ = [
    "DryRunKeyValueStore",
    "FakeKeyValueStore",
    "JsonFileKeyValueStore",
    "JsonValue",
    "KeyValueStore",
]
