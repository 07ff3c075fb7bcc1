"""Real time implementation using the system clock."""

import time

from mapvc.core.time.abc import Time


class RealTime(Time):
    """Production implementation using time.time()."""

    def now_ms(self) -> int:
        return int(time.time() * 1000)
