"""Thread-safe reporting of how much of an operation is done."""

from __future__ import annotations

import math
import sys
import threading
from typing import Optional, TextIO


class ProgressReporter:
    """Prints the fraction of work done on one line, safe to update from many threads."""

    def __init__(self, total_work: int, stream: Optional[TextIO] = None) -> None:
        self._total_work = total_work
        self._work_done = 0
        self._stream = stream if stream is not None else sys.stdout
        self._lock = threading.Lock()

    @property
    def total_work(self) -> int:
        """Total amount of work."""
        return self._total_work

    @property
    def work_done(self) -> int:
        """Amount of work reported so far."""
        return self._work_done

    def _ratio(self) -> float:
        if self._total_work == 0:
            return math.inf if self._work_done else math.nan
        return self._work_done / self._total_work

    def update(self, num: int) -> None:
        """Add num units of finished work and print the progress."""
        with self._lock:
            self._work_done += num
            self._stream.write(
                "\r %.2f Percent Done (%d / %d)"
                % (self._ratio() * 100.0, self._work_done, self._total_work)
            )
            self._stream.flush()

    def done(self) -> None:
        """Mark all work as finished and end the progress line."""
        with self._lock:
            self._work_done = self._total_work
            self._stream.write(
                "\r %.2f Percent Done (%d / %d)\n"
                % (100.0, self._work_done, self._total_work)
            )
            self._stream.flush()