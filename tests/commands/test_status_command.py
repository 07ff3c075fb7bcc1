"""CLI tests for the status command."""

import json

from click.testing import CliRunner

from mapvc.cli.cli import cli
from mapvc.core.context import MapvcContext


def test_status_text_panel() -> None:
    ctx = MapvcContext.for_test()
    ctx.engine.create_project("Demo")
    ctx.engine.commit("init")
    ctx.engine.create_branch("feature")
    ctx.engine.stash_save("wip")

    result = CliRunner().invoke(cli, ["status"], obj=ctx)

    assert result.exit_code == 0, result.output
    assert "Demo" in result.output
    assert "Branch: main" in result.output
    assert "Commits: 1" in result.output
    assert "init" in result.output
    assert "Other branches: feature" in result.output
    assert "Stash entries: 1" in result.output


def test_status_for_empty_branch() -> None:
    ctx = MapvcContext.for_test()
    ctx.engine.create_project("Demo")

    result = CliRunner().invoke(cli, ["status"], obj=ctx)

    assert result.exit_code == 0, result.output
    assert "(no commits yet)" in result.output


def test_status_json() -> None:
    ctx = MapvcContext.for_test()
    ctx.engine.create_project("Demo")
    head = ctx.engine.commit("init").value
    assert head is not None

    result = CliRunner().invoke(cli, ["status", "--json"], obj=ctx)

    assert result.exit_code == 0, result.output
    assert json.loads(result.stdout) == {
        "project": "Demo",
        "branch": "main",
        "branches": ["main"],
        "commits": 1,
        "stashed": 0,
        "head": head.id,
    }


def test_status_without_project_fails() -> None:
    result = CliRunner().invoke(cli, ["status"], obj=MapvcContext.for_test())

    assert result.exit_code == 1
