"""Fake Time implementation for testing.

FakeTime is an in-memory clock that returns a predictable, strictly increasing
sequence of timestamps, making commit and stash timestamps deterministic.
"""

from mapvc.core.time.abc import Time

DEFAULT_START_MS = 1_700_000_000_000


class FakeTime(Time):
    """Fake clock that advances by a fixed step on every reading.

    This class has NO public setup methods. All state is provided via constructor
    or captured during execution.
    """

    def __init__(self, start_ms: int = DEFAULT_START_MS, step_ms: int = 1000) -> None:
        """Create FakeTime.

        Args:
            start_ms: Value returned by the first now_ms() call
            step_ms: Amount added after each call (0 freezes the clock)
        """
        self._next_ms = start_ms
        self._step_ms = step_ms
        self._readings: list[int] = []

    @property
    def readings(self) -> list[int]:
        """Read-only access to every value returned by now_ms()."""
        return self._readings

    def now_ms(self) -> int:
        value = self._next_ms
        self._next_ms += self._step_ms
        self._readings.append(value)
        return value
