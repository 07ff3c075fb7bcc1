"""User-facing notifications with mode awareness."""

from abc import ABC, abstractmethod

import click

from mapvc.cli.output import user_output


class UserFeedback(ABC):
    """Fire-and-forget notifications for the outcome of versioning operations.

    The engine reports every success and every failure through this interface
    instead of printing, so callers decide how (or whether) messages appear.

    Two modes:
    - Interactive: Show all messages (info, success, errors)
    - Quiet: Suppress info and success, still show errors

    Usage:
        ctx.feedback.success("Committed: init")
        ctx.feedback.error("Error: No project selected")
    """

    @abstractmethod
    def info(self, message: str) -> None:
        """Show informational message (suppressed in quiet mode)."""

    @abstractmethod
    def success(self, message: str) -> None:
        """Show success message (suppressed in quiet mode)."""

    @abstractmethod
    def error(self, message: str) -> None:
        """Show error message (always shown)."""


class InteractiveFeedback(UserFeedback):
    """Feedback shown in interactive mode (all messages)."""

    def info(self, message: str) -> None:
        user_output(message)

    def success(self, message: str) -> None:
        user_output(click.style(message, fg="green"))

    def error(self, message: str) -> None:
        user_output(click.style(message, fg="red"))


class SuppressedFeedback(UserFeedback):
    """Feedback for --quiet mode (only errors shown)."""

    def info(self, message: str) -> None:
        pass

    def success(self, message: str) -> None:
        pass

    def error(self, message: str) -> None:
        user_output(click.style(message, fg="red"))
