"""Stash commands: shelve and restore uncommitted map state."""

import click

from mapvc.cli.ensure import Ensure
from mapvc.cli.json_output import emit_json
from mapvc.cli.json_schemas import StashEntryInfo
from mapvc.cli.output import format_timestamp, machine_output, user_output
from mapvc.core.context import MapvcContext


@click.group("stash")
def stash_group() -> None:
    """Shelve map state without committing it."""


@stash_group.command("save")
@click.option("-m", "--message", default="", help="Stash message (default: 'WIP')")
@click.pass_obj
def stash_save_cmd(ctx: MapvcContext, message: str) -> None:
    """Push the current map onto the stash. The map itself is left as is."""
    Ensure.succeeded(ctx.engine.stash_save(message))


@stash_group.command("pop")
@click.pass_obj
def stash_pop_cmd(ctx: MapvcContext) -> None:
    """Restore the most recent stash entry onto the map and drop it."""
    Ensure.succeeded(ctx.engine.stash_pop())


@stash_group.command("list")
@click.option("--json", "output_json", is_flag=True, help="Output JSON format")
@click.pass_obj
def stash_list_cmd(ctx: MapvcContext, output_json: bool) -> None:
    """List stash entries, most recent first."""
    entries = Ensure.succeeded(ctx.engine.list_stash())

    if output_json:
        emit_json(
            {
                "stash": [
                    StashEntryInfo.from_entry(index, entry).model_dump(mode="json")
                    for index, entry in enumerate(entries)
                ]
            }
        )
        return

    if not entries:
        user_output("No stash entries")
        return

    for index, entry in enumerate(entries):
        machine_output(f"{index}: {entry.message} ({format_timestamp(entry.timestamp)})")


@stash_group.command("drop")
@click.argument("index", type=int)
@click.option("-f", "--force", is_flag=True, help="Do not ask for confirmation")
@click.pass_obj
def stash_drop_cmd(ctx: MapvcContext, index: int, force: bool) -> None:
    """Delete stash entry INDEX (0 = most recent) without applying it."""
    if not force and not click.confirm("Delete this stash entry?", err=True):
        user_output("Aborted.")
        return
    Ensure.succeeded(ctx.engine.delete_stash(index))
