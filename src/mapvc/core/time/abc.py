"""Clock abstraction for testing.

This module provides an ABC for reading the wall clock so that commit and
stash timestamps are deterministic under test.
"""

from abc import ABC, abstractmethod


class Time(ABC):
    """Abstract time operations for dependency injection."""

    @abstractmethod
    def now_ms(self) -> int:
        """Current time as integer milliseconds since the epoch."""
        ...
