"""Global configuration data structures and loading.

Provides immutable global config data loaded from ~/.mapvc/config.toml
(the directory can be moved with the MAPVC_HOME environment variable).
A missing config file means defaults.
"""

import os
import tomllib
from abc import ABC, abstractmethod
from dataclasses import dataclass, replace
from pathlib import Path

import tomlkit

from mapvc.core.project_store import DEFAULT_KEY_PREFIX

CONFIG_KEYS = ("store_path", "document_path", "key_prefix", "auto_stash")


def mapvc_home() -> Path:
    """Directory holding config.toml and the default store."""
    override = os.environ.get("MAPVC_HOME")
    if override:
        return Path(override).expanduser()
    return Path.home() / ".mapvc"


@dataclass(frozen=True)
class GlobalConfig:
    """Immutable global configuration data.

    Loaded once at CLI entry point and stored in MapvcContext.
    All fields are read-only after construction.
    """

    store_path: Path
    document_path: Path | None
    key_prefix: str
    auto_stash: bool

    @staticmethod
    def defaults(home: Path) -> "GlobalConfig":
        return GlobalConfig(
            store_path=home / "store.json",
            document_path=None,
            key_prefix=DEFAULT_KEY_PREFIX,
            auto_stash=False,
        )

    def with_value(self, key: str, value: str) -> "GlobalConfig":
        """Return a copy with one key set from its string form.

        Raises:
            ValueError: If key is unknown or value cannot be parsed
        """
        if key == "store_path":
            return replace(self, store_path=Path(value).expanduser())
        if key == "document_path":
            return replace(self, document_path=Path(value).expanduser() if value else None)
        if key == "key_prefix":
            return replace(self, key_prefix=value)
        if key == "auto_stash":
            return replace(self, auto_stash=_parse_bool(value))
        raise ValueError(f"Unknown config key: {key} (valid keys: {', '.join(CONFIG_KEYS)})")


class ConfigStore(ABC):
    """Abstract interface for global config operations.

    Provides dependency injection for global config access, enabling
    in-memory implementations for tests without touching filesystem.
    """

    @abstractmethod
    def exists(self) -> bool:
        """Check if global config exists."""
        ...

    @abstractmethod
    def load(self) -> GlobalConfig:
        """Load global config, falling back to defaults for missing keys.

        Raises:
            ValueError: If config is malformed
        """
        ...

    @abstractmethod
    def save(self, config: GlobalConfig) -> None:
        """Save global config."""
        ...

    @abstractmethod
    def path(self) -> Path:
        """Get the path to the global config file (for messages and debugging)."""
        ...


class RealConfigStore(ConfigStore):
    """Production implementation that reads/writes <home>/config.toml."""

    def __init__(self, home: Path | None = None) -> None:
        self._home = home if home is not None else mapvc_home()

    def exists(self) -> bool:
        return self.path().exists()

    def load(self) -> GlobalConfig:
        defaults = GlobalConfig.defaults(self._home)
        config_path = self.path()
        if not config_path.exists():
            return defaults

        try:
            data = tomllib.loads(config_path.read_text(encoding="utf-8"))
        except tomllib.TOMLDecodeError as e:
            raise ValueError(f"Malformed config {config_path}: {e}") from e

        store_path = data.get("store_path")
        document_path = data.get("document_path")
        return GlobalConfig(
            store_path=Path(store_path).expanduser() if store_path else defaults.store_path,
            document_path=Path(document_path).expanduser() if document_path else None,
            key_prefix=str(data.get("key_prefix", defaults.key_prefix)),
            auto_stash=bool(data.get("auto_stash", defaults.auto_stash)),
        )

    def save(self, config: GlobalConfig) -> None:
        """Save config, preserving comments and formatting of an existing file."""
        config_path = self.path()
        config_path.parent.mkdir(parents=True, exist_ok=True)

        if config_path.exists():
            doc = tomlkit.parse(config_path.read_text(encoding="utf-8"))
        else:
            doc = tomlkit.document()
            doc.add(tomlkit.comment("Global mapvc configuration"))

        doc["store_path"] = str(config.store_path)
        if config.document_path is not None:
            doc["document_path"] = str(config.document_path)
        elif "document_path" in doc:
            del doc["document_path"]
        doc["key_prefix"] = config.key_prefix
        doc["auto_stash"] = config.auto_stash

        config_path.write_text(tomlkit.dumps(doc), encoding="utf-8")

    def path(self) -> Path:
        return self._home / "config.toml"


class FakeConfigStore(ConfigStore):
    """Test implementation that stores config in memory without touching filesystem."""

    def __init__(self, config: GlobalConfig | None = None) -> None:
        """Initialize in-memory config store.

        Args:
            config: Initial config state (None = config doesn't exist)
        """
        self._config = config

    def exists(self) -> bool:
        return self._config is not None

    def load(self) -> GlobalConfig:
        if self._config is None:
            return GlobalConfig.defaults(Path("/fake/mapvc"))
        return self._config

    def save(self, config: GlobalConfig) -> None:
        self._config = config

    def path(self) -> Path:
        return Path("/fake/mapvc/config.toml")


def _parse_bool(value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in ("true", "yes", "1", "on"):
        return True
    if lowered in ("false", "no", "0", "off"):
        return False
    raise ValueError(f"Expected a boolean (true/false), got: {value}")
