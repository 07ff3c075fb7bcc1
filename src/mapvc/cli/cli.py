import logging
from pathlib import Path

import click

from mapvc.cli.commands.branch import branch_cmd, switch_cmd
from mapvc.cli.commands.checkout import checkout_cmd
from mapvc.cli.commands.commit import commit_cmd
from mapvc.cli.commands.config import config_group
from mapvc.cli.commands.log import log_cmd
from mapvc.cli.commands.project import project_group
from mapvc.cli.commands.stash import stash_group
from mapvc.cli.commands.status import status_cmd
from mapvc.cli.ensure import Ensure
from mapvc.cli.help_formatter import GroupedCommandGroup
from mapvc.core.context import create_context

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])  # terse help flags


@click.group(cls=GroupedCommandGroup, context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="mapvc")
@click.option("--debug", is_flag=True, help="Show debug logging on stderr")
@click.option("-q", "--quiet", is_flag=True, help="Only report errors")
@click.option("--dry-run", is_flag=True, help="Print what would change without changing it")
@click.option(
    "--map",
    "map_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Map document to version (overrides document_path from config)",
)
@click.pass_context
def cli(
    ctx: click.Context, debug: bool, quiet: bool, dry_run: bool, map_path: Path | None
) -> None:
    """Version a map document with commits, branches and a stash."""
    if debug:
        logging.basicConfig(level=logging.DEBUG, format="[DEBUG %(name)s:%(lineno)d] %(message)s")

    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        try:
            ctx.obj = create_context(dry_run=dry_run, quiet=quiet, map_path=map_path)
        except ValueError as e:
            Ensure.invariant(False, str(e))


# Register all commands
cli.add_command(commit_cmd)
cli.add_command(checkout_cmd)
cli.add_command(branch_cmd)
cli.add_command(switch_cmd)
cli.add_command(stash_group)
cli.add_command(log_cmd)
cli.add_command(status_cmd)
cli.add_command(project_group)
cli.add_command(config_group)


def main() -> None:
    """CLI entry point used by the `mapvc` console script."""
    cli()
