"""CLI tests for the config command group."""

from pathlib import Path

from click.testing import CliRunner

from mapvc.cli.cli import cli
from mapvc.core.config_store import FakeConfigStore, GlobalConfig
from mapvc.core.context import MapvcContext


def test_config_list_shows_all_keys() -> None:
    ctx = MapvcContext.for_test()

    result = CliRunner().invoke(cli, ["config", "list"], obj=ctx)

    assert result.exit_code == 0, result.output
    assert result.stdout.splitlines() == [
        "  store_path=/test/mapvc/store.json",
        "  document_path=",
        "  key_prefix=mapvc_",
        "  auto_stash=false",
    ]


def test_config_get() -> None:
    result = CliRunner().invoke(cli, ["config", "get", "key_prefix"], obj=MapvcContext.for_test())

    assert result.exit_code == 0
    assert result.stdout == "mapvc_\n"


def test_config_get_unknown_key() -> None:
    result = CliRunner().invoke(cli, ["config", "get", "nope"], obj=MapvcContext.for_test())

    assert result.exit_code == 1
    assert "Invalid key: nope" in result.output


def test_config_set_saves_to_store() -> None:
    config_store = FakeConfigStore()
    ctx = MapvcContext.for_test(config_store=config_store)

    result = CliRunner().invoke(cli, ["config", "set", "auto_stash", "true"], obj=ctx)

    assert result.exit_code == 0, result.output
    assert "Set auto_stash=true" in result.output
    assert config_store.load().auto_stash is True


def test_config_set_invalid_value() -> None:
    config_store = FakeConfigStore()
    ctx = MapvcContext.for_test(config_store=config_store)

    result = CliRunner().invoke(cli, ["config", "set", "auto_stash", "maybe"], obj=ctx)

    assert result.exit_code == 1
    assert "Expected a boolean" in result.output
    assert not config_store.exists()


def test_config_set_dry_run_does_not_save() -> None:
    config = GlobalConfig.defaults(Path("/test/mapvc"))
    config_store = FakeConfigStore(config=config)
    ctx = MapvcContext.for_test(config_store=config_store, global_config=config, dry_run=True)

    result = CliRunner().invoke(cli, ["config", "set", "key_prefix", "x_"], obj=ctx)

    assert result.exit_code == 0, result.output
    assert "[DRY RUN] Would set key_prefix=x_" in result.output
    assert config_store.load().key_prefix == "mapvc_"
