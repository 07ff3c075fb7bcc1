"""Branch commands: list, create and switch branches."""

import click

from mapvc.cli.ensure import Ensure
from mapvc.cli.output import machine_output
from mapvc.core.context import MapvcContext
from mapvc.core.models import SHORT_ID_LENGTH


@click.command("branch")
@click.argument("name", required=False)
@click.pass_obj
def branch_cmd(ctx: MapvcContext, name: str | None) -> None:
    """List branches, or create branch NAME from the current branch.

    A new branch starts with the full history and head of the current branch.
    The current branch does not change; use `mapvc switch NAME`.
    """
    if name is None:
        current = Ensure.succeeded(ctx.engine.status()).branch
        for branch in Ensure.succeeded(ctx.engine.list_branches()):
            marker = "*" if branch.name == current else " "
            head = branch.head[:SHORT_ID_LENGTH] if branch.head is not None else "(empty)"
            machine_output(f"{marker} {branch.name}  {head}")
        return

    name = Ensure.not_blank(name, "Branch name cannot be empty")
    Ensure.succeeded(ctx.engine.create_branch(name))


@click.command("switch")
@click.argument("name")
@click.pass_obj
def switch_cmd(ctx: MapvcContext, name: str) -> None:
    """Make NAME the current branch and restore its head onto the map.

    Switching to a branch without commits leaves the map untouched.
    """
    name = Ensure.not_blank(name, "Branch name cannot be empty")
    Ensure.succeeded(ctx.engine.switch_branch(name))
