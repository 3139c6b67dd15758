"""A small stopwatch for timing processing steps."""

from __future__ import annotations

import time
from enum import Enum


class Units(Enum):
    """Resolution of a measured duration."""

    MICRO = 1_000
    MILLI = 1_000_000

    @property
    def nanoseconds(self) -> int:
        return self.value


class Timer:
    """Measures time elapsed since construction, ``start`` or the last ``measure``."""

    def __init__(self) -> None:
        self._start = time.perf_counter_ns()

    def start(self) -> None:
        self._start = time.perf_counter_ns()

    def measure(self, units: Units = Units.MICRO) -> int:
        """Return whole elapsed units (truncated) and restart the clock."""
        end = time.perf_counter_ns()
        elapsed = (end - self._start) // units.nanoseconds
        self._start = time.perf_counter_ns()
        return elapsed