"""Measuring elapsed wall-clock time between calls."""

from __future__ import annotations

import time
from dataclasses import dataclass


@dataclass
class Timer:
    """Remembers the system time of the last tick, starting at the epoch."""

    last: float = 0.0

    def tick(self) -> float:
        """Seconds since the previous tick; the timer then restarts from now."""
        now = time.time()
        elapsed = now - self.last
        self.last = now
        return elapsed