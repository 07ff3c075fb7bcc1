import click

from mapvc.cli.ensure import Ensure
from mapvc.cli.output import machine_output, user_output
from mapvc.core.config_store import CONFIG_KEYS, GlobalConfig
from mapvc.core.context import MapvcContext


def _config_values(config: GlobalConfig) -> dict[str, str]:
    return {
        "store_path": str(config.store_path),
        "document_path": str(config.document_path) if config.document_path is not None else "",
        "key_prefix": config.key_prefix,
        "auto_stash": str(config.auto_stash).lower(),
    }


@click.group("config")
def config_group() -> None:
    """Manage mapvc configuration."""


@config_group.command("list")
@click.pass_obj
def config_list(ctx: MapvcContext) -> None:
    """Print a list of configuration keys and values."""
    user_output(click.style(f"Global configuration ({ctx.config_store.path()}):", bold=True))
    if not ctx.config_store.exists():
        user_output("  (no config file - showing defaults)")
    for key, value in _config_values(ctx.global_config).items():
        machine_output(f"  {key}={value}")


@config_group.command("get")
@click.argument("key", metavar="KEY")
@click.pass_obj
def config_get(ctx: MapvcContext, key: str) -> None:
    """Print the value of a given configuration key."""
    Ensure.invariant(key in CONFIG_KEYS, f"Invalid key: {key}")
    machine_output(_config_values(ctx.global_config)[key])


@config_group.command("set")
@click.argument("key", metavar="KEY")
@click.argument("value", metavar="VALUE")
@click.pass_obj
def config_set(ctx: MapvcContext, key: str, value: str) -> None:
    """Update configuration with a value for the given key."""
    try:
        new_config = ctx.global_config.with_value(key, value)
    except ValueError as e:
        Ensure.invariant(False, str(e))
        return

    if ctx.dry_run:
        user_output(f"[DRY RUN] Would set {key}={value} in {ctx.config_store.path()}")
        return

    ctx.config_store.save(new_config)
    user_output(f"Set {key}={value}")
