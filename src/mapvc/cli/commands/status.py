"""Status command - summarize the current project and branch."""

import click
from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from mapvc.cli.ensure import Ensure
from mapvc.cli.json_output import emit_json
from mapvc.cli.json_schemas import StatusCommandResponse
from mapvc.cli.output import format_timestamp
from mapvc.core.context import MapvcContext
from mapvc.core.engine import ProjectStatus


def format_status(status: ProjectStatus) -> Panel:
    """Format the project status as a rich Panel.

    Example:
        >>> console.print(format_status(status))
    """
    lines: list[Text] = [
        Text(f"Branch: {status.branch}", style="bold"),
        Text(f"Commits: {status.commit_count}"),
    ]

    if status.head is None:
        lines.append(Text("Head: (no commits yet)", style="dim"))
    else:
        lines.append(
            Text(
                f"Head: {status.head.short_id} {status.head.message} "
                f"({format_timestamp(status.head.timestamp)})",
                style="green",
            )
        )

    others = [name for name in status.branches if name != status.branch]
    if others:
        lines.append(Text(f"Other branches: {', '.join(others)}"))

    if status.stash_count:
        lines.append(Text(f"Stash entries: {status.stash_count}", style="yellow"))

    return Panel(Text("\n").join(lines), title=status.project, border_style="blue", padding=(0, 1))


@click.command("status")
@click.option("--json", "output_json", is_flag=True, help="Output JSON format")
@click.pass_obj
def status_cmd(ctx: MapvcContext, output_json: bool) -> None:
    """Show the current project, branch, head and stash size."""
    status = Ensure.succeeded(ctx.engine.status())

    if output_json:
        emit_json(StatusCommandResponse.from_status(status).model_dump(mode="json"))
        return

    Console().print(format_status(status))
