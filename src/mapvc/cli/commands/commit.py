"""Commit command - record the current map as a new commit on the current branch."""

import click

from mapvc.cli.ensure import Ensure
from mapvc.cli.output import user_output
from mapvc.core.context import MapvcContext


@click.command("commit")
@click.option("-m", "--message", default="", help="Commit message (default: 'Untitled commit')")
@click.pass_obj
def commit_cmd(ctx: MapvcContext, message: str) -> None:
    """Snapshot the map and append it to the current branch."""
    commit = Ensure.succeeded(ctx.engine.commit(message))
    user_output(f"[{commit.short_id}] {commit.message}")
