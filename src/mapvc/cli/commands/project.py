"""Project management commands: create, select, list and delete projects."""

import click

from mapvc.cli.ensure import Ensure
from mapvc.cli.output import machine_output, user_output
from mapvc.core.context import MapvcContext


@click.group("project")
def project_group() -> None:
    """Manage map projects."""


@project_group.command("new")
@click.argument("name")
@click.pass_obj
def new_project_cmd(ctx: MapvcContext, name: str) -> None:
    """Create a project and make it current.

    The project starts with an empty main branch. The map document is not
    touched.
    """
    name = Ensure.not_blank(name, "Project name cannot be empty")
    Ensure.succeeded(ctx.engine.create_project(name))


@project_group.command("select")
@click.argument("name")
@click.pass_obj
def select_project_cmd(ctx: MapvcContext, name: str) -> None:
    """Make a project current and restore its current branch head onto the map."""
    name = Ensure.not_blank(name, "Project name cannot be empty")
    Ensure.succeeded(ctx.engine.select_project(name))


@project_group.command("list")
@click.pass_obj
def list_projects_cmd(ctx: MapvcContext) -> None:
    """List projects. The current project is marked with '*'."""
    listing = Ensure.succeeded(ctx.engine.list_projects())
    if not listing.names:
        user_output("No projects yet. Create one with: mapvc project new NAME")
        return

    for name in listing.names:
        marker = "*" if name == listing.current else " "
        machine_output(f"{marker} {name}")


@project_group.command("delete")
@click.option("-f", "--force", is_flag=True, help="Do not ask for confirmation")
@click.pass_obj
def delete_project_cmd(ctx: MapvcContext, force: bool) -> None:
    """Delete the current project with all of its branches, commits and stash."""
    status = Ensure.succeeded(ctx.engine.status())
    if not force:
        if not click.confirm(
            f'Delete project "{status.project}"? This cannot be undone.', err=True
        ):
            user_output("Aborted.")
            return
    Ensure.succeeded(ctx.engine.delete_project())
