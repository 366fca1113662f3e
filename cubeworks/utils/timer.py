"""A stopwatch measuring elapsed wall-clock time."""

from __future__ import annotations

import time
from typing import Callable


class Timer:
    """A stopwatch that can be started and stopped.

    While running, the elapsed time is measured up to now; once stopped it is
    frozen at the moment of stopping.
    """

    __slots__ = ("_now", "_start_time", "_end_time", "_is_running")

    def __init__(self, now: Callable[[], float] = time.perf_counter) -> None:
        self._now = now
        self._start_time = 0.0
        self._end_time = 0.0
        self._is_running = False

    @property
    def is_running(self) -> bool:
        """Whether the timer is currently running."""
        return self._is_running

    def start(self) -> None:
        """Start (or restart) measuring from now."""
        self._start_time = self._now()
        self._is_running = True

    def stop(self) -> None:
        """Stop measuring, freezing the elapsed time."""
        self._end_time = self._now()
        self._is_running = False

    def elapsed_seconds(self) -> float:
        """Return the elapsed time in seconds."""
        end_time = self._now() if self._is_running else self._end_time
        return end_time - self._start_time

    def elapsed_milliseconds(self) -> float:
        """Return the elapsed time in milliseconds."""
        return self.elapsed_seconds() * 1000