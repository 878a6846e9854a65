"""Frame pacing for the game loop."""

from __future__ import annotations

import time
from typing import Callable


class Clock:
    """Measure the time between ticks and cap the loop at a target frame rate.

    The clock only enforces a ceiling: a frame that already took longer than
    one frame period is returned as is, a faster one is stretched by sleeping
    for a full frame period.
    """

    def __init__(
        self,
        now: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self._now = now
        self._sleep = sleep
        self.last_tick = now()

    def tick(self, fps: float) -> float:
        """Pace the caller to ``fps`` and return the seconds since the last tick."""

        if fps <= 0:
            raise ValueError("fps must be positive")
        period = 1.0 / fps
        elapsed = self._now() - self.last_tick
        if elapsed <= period:
            self._sleep(period)
            elapsed = self._now() - self.last_tick
        self.last_tick = self._now()
        return elapsed
