"""Key-value store persisted as a single JSON file."""

import json
import logging
import os
import tempfile
from pathlib import Path

from mapvc.core.errors import KeyValueStoreError
from mapvc.core.kv_store.abc import JsonValue, KeyValueStore

logger = logging.getLogger(__name__)


class JsonFileKeyValueStore(KeyValueStore):
    """Production implementation keeping every key in one JSON object on disk.

    Writes go to a temporary file in the same directory followed by
    os.replace(), so a failed write never leaves a truncated store behind.
    """

    def __init__(self, path: Path) -> None:
        self._path = path

    @property
    def path(self) -> Path:
        return self._path

    def get(self, key: str) -> JsonValue | None:
        return self._load().get(key)

    def set(self, key: str, value: JsonValue) -> None:
        data = self._load()
        data[key] = value
        self._dump(data)

    def remove(self, key: str) -> None:
        data = self._load()
        if key not in data:
            return
        del data[key]
        self._dump(data)

    def _load(self) -> dict[str, JsonValue]:
        if not self._path.exists():
            return {}
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            raise KeyValueStoreError(f"Cannot read store {self._path}: {e}") from e
        if not isinstance(data, dict):
            raise KeyValueStoreError(f"Store {self._path} does not contain a JSON object")
        return data

    def _dump(self, data: dict[str, JsonValue]) -> None:
        logger.debug("Writing store %s (%d keys)", self._path, len(data))
        try:
            content = json.dumps(data)
        except (TypeError, ValueError) as e:
            raise KeyValueStoreError(f"Value is not JSON-serializable: {e}") from e
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(dir=self._path.parent, suffix=".tmp")
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    f.write(content)
                os.replace(tmp_name, self._path)
            except OSError:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as e:
            raise KeyValueStoreError(f"Cannot write store {self._path}: {e}") from e
