"""Checkout command - restore a commit of the current branch onto the map."""

import click

from mapvc.cli.ensure import Ensure
from mapvc.core.context import MapvcContext


@click.command("checkout")
@click.argument("commit_ref", metavar="COMMIT")
@click.pass_obj
def checkout_cmd(ctx: MapvcContext, commit_ref: str) -> None:
    """Replace the map with COMMIT and move the branch head to it.

    COMMIT is a full commit id or an unambiguous prefix of at least 4
    characters (the 7-character ids shown by `mapvc log` work).

    Unsaved edits on the map are discarded unless auto_stash is enabled.
    """
    Ensure.succeeded(ctx.engine.checkout(commit_ref))
