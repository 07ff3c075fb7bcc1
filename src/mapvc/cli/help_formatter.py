"""Click group that shows `mapvc --help` commands in sections."""

import click

# Section title -> command names, in display order. Unlisted commands go to "Setup".
COMMAND_SECTIONS: dict[str, tuple[str, ...]] = {
    "Workflow": ("commit", "checkout", "branch", "switch", "stash"),
    "Inspection": ("log", "status"),
}
FALLBACK_SECTION = "Setup"


class GroupedCommandGroup(click.Group):
    """Click Group that organizes commands into sections in help output.

    - Workflow: commands that record or restore map state
    - Inspection: read-only views of history and status
    - Setup: project management and configuration
    """

    def format_commands(self, ctx: click.Context, formatter: click.HelpFormatter) -> None:
        sections: dict[str, list[tuple[str, str]]] = {
            title: [] for title in (*COMMAND_SECTIONS, FALLBACK_SECTION)
        }
        for name in self.list_commands(ctx):
            cmd = self.get_command(ctx, name)
            if cmd is None or cmd.hidden:
                continue
            row = (name, cmd.get_short_help_str(limit=formatter.width))
            sections[_section_for(name)].append(row)

        for title, rows in sections.items():
            if not rows:
                continue
            with formatter.section(title):
                formatter.write_dl(rows)


def _section_for(command_name: str) -> str:
    for title, names in COMMAND_SECTIONS.items():
        if command_name in names:
            return title
    return FALLBACK_SECTION
