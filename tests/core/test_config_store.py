"""Tests for global config loading and saving."""

from pathlib import Path

import pytest

from mapvc.core.config_store import FakeConfigStore, GlobalConfig, RealConfigStore, mapvc_home


def test_missing_file_gives_defaults(tmp_path: Path) -> None:
    store = RealConfigStore(home=tmp_path)

    config = store.load()

    assert not store.exists()
    assert config == GlobalConfig.defaults(tmp_path)
    assert config.store_path == tmp_path / "store.json"
    assert config.document_path is None
    assert config.key_prefix == "mapvc_"
    assert config.auto_stash is False


def test_save_then_load(tmp_path: Path) -> None:
    store = RealConfigStore(home=tmp_path)
    config = GlobalConfig(
        store_path=tmp_path / "other.json",
        document_path=tmp_path / "map.json",
        key_prefix="vc_",
        auto_stash=True,
    )

    store.save(config)

    assert store.exists()
    assert store.load() == config


def test_save_preserves_comments(tmp_path: Path) -> None:
    store = RealConfigStore(home=tmp_path)
    store.path().write_text('# my settings\nkey_prefix = "x_"\n', encoding="utf-8")

    store.save(store.load().with_value("auto_stash", "true"))

    content = store.path().read_text(encoding="utf-8")
    assert "# my settings" in content
    assert "auto_stash = true" in content


def test_clearing_document_path_removes_key(tmp_path: Path) -> None:
    store = RealConfigStore(home=tmp_path)
    store.save(GlobalConfig.defaults(tmp_path).with_value("document_path", "/maps/a.json"))

    store.save(store.load().with_value("document_path", ""))

    assert "document_path" not in store.path().read_text(encoding="utf-8")
    assert store.load().document_path is None


def test_malformed_file_raises_value_error(tmp_path: Path) -> None:
    store = RealConfigStore(home=tmp_path)
    store.path().write_text("key_prefix = ", encoding="utf-8")

    with pytest.raises(ValueError, match="Malformed config"):
        store.load()


def test_with_value_parses_booleans() -> None:
    config = GlobalConfig.defaults(Path("/h"))

    assert config.with_value("auto_stash", "yes").auto_stash is True
    assert config.with_value("auto_stash", "False").auto_stash is False
    with pytest.raises(ValueError, match="Expected a boolean"):
        config.with_value("auto_stash", "maybe")


def test_with_value_rejects_unknown_key() -> None:
    with pytest.raises(ValueError, match="Unknown config key: colour"):
        GlobalConfig.defaults(Path("/h")).with_value("colour", "blue")


def test_mapvc_home_env_override(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("MAPVC_HOME", str(tmp_path))

    assert mapvc_home() == tmp_path
    assert RealConfigStore().path() == tmp_path / "config.toml"


def test_fake_config_store_round_trip() -> None:
    store = FakeConfigStore()
    assert not store.exists()

    config = store.load().with_value("key_prefix", "t_")
    store.save(config)

    assert store.exists()
    assert store.load().key_prefix == "t_"
