"""CLI error handling utilities with styled output.

This module provides the Ensure class for asserting invariants in CLI commands
with consistent, user-friendly error messages. All errors use red "Error:" prefix
for visual consistency.
"""

from typing import TypeVar, cast

import click

from mapvc.cli.output import user_output
from mapvc.core.engine import OperationResult

T = TypeVar("T")


class Ensure:
    """Helper class for asserting invariants with consistent error handling."""

    @staticmethod
    def invariant(condition: bool, error_message: str) -> None:
        """Ensure condition is true, otherwise output styled error and exit.

        Args:
            condition: Boolean condition to check
            error_message: Error message to display if condition is false.
                          "Error: " prefix will be added automatically in red.

        Raises:
            SystemExit: If condition is false (with exit code 1)
        """
        if not condition:
            user_output(click.style("Error: ", fg="red") + error_message)
            raise SystemExit(1)

    @staticmethod
    def not_blank(value: str | None, error_message: str) -> str:
        """Ensure a user-supplied name is non-blank, otherwise exit.

        A blank value is treated like a cancelled prompt: nothing is changed.

        Returns:
            The value stripped of surrounding whitespace
        """
        if value is None or not value.strip():
            user_output(click.style("Error: ", fg="red") + error_message)
            raise SystemExit(1)
        return value.strip()

    @staticmethod
    def succeeded(result: OperationResult[T]) -> T:
        """Ensure an engine operation succeeded, otherwise exit.

        The engine has already reported the failure through UserFeedback, so
        nothing more is printed here.

        Returns:
            The operation's value (with narrowed type T)

        Raises:
            SystemExit: If the operation failed (with exit code 1)
        """
        if not result.ok:
            raise SystemExit(1)
        return cast(T, result.value)
