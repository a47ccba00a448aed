"""A small stopwatch that restarts every time it is read."""

from __future__ import annotations

import time
from enum import Enum


class Units(Enum):
    """Units a :class:`Timer` can report in."""

    MICRO = 1_000
    MILLI = 1_000_000


class Timer:
    """Measures time elapsed since it was created, started or last measured."""

    def __init__(self) -> None:
        self._start = time.perf_counter_ns()

    def start(self) -> None:
        self._start = time.perf_counter_ns()

    def measure(self, units: Units = Units.MICRO) -> int:
        """Return the whole elapsed time in ``units`` and restart the timer."""
        elapsed = time.perf_counter_ns() - self._start
        self._start = time.perf_counter_ns()
        return elapsed // units.value