"""Output utilities for CLI commands with clear intent.

user_output() is for human-readable messages and goes to stderr.
machine_output() is for data meant to be piped or parsed and goes to stdout.
"""

from datetime import datetime

import click


def user_output(message: str = "", nl: bool = True) -> None:
    """Write a human-facing message to stderr."""
    click.echo(message, err=True, nl=nl)


def machine_output(message: str = "", nl: bool = True) -> None:
    """Write machine-readable output to stdout."""
    click.echo(message, nl=nl)


def format_timestamp(timestamp_ms: int) -> str:
    """Format epoch milliseconds as local date and time.

    Example:
        >>> format_timestamp(0)  # in UTC
        '1970-01-01 00:00:00'
    """
    return datetime.fromtimestamp(timestamp_ms / 1000).strftime("%Y-%m-%d %H:%M:%S")
