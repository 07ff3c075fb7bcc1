"""Log command - show the commit graph of a branch."""

import click

from mapvc.cli.ensure import Ensure
from mapvc.cli.json_output import emit_json
from mapvc.cli.json_schemas import CommitNodeInfo, LogCommandResponse
from mapvc.cli.output import machine_output
from mapvc.core.context import MapvcContext
from mapvc.core.graph import format_graph


@click.command("log")
@click.option("-b", "--branch", default=None, help="Branch to show (default: current branch)")
@click.option("--json", "output_json", is_flag=True, help="Output JSON format")
@click.pass_obj
def log_cmd(ctx: MapvcContext, branch: str | None, output_json: bool) -> None:
    """Show the commit history of a branch, newest first."""
    nodes = Ensure.succeeded(ctx.engine.history(branch))

    if output_json:
        if branch is None:
            branch = Ensure.succeeded(ctx.engine.status()).branch
        response = LogCommandResponse(
            branch=branch,
            commits=[CommitNodeInfo.from_node(node) for node in nodes],
        )
        emit_json(response.model_dump(mode="json"))
        return

    machine_output(format_graph(nodes))
