"""Clock sources for Timer: the real monotonic clock and a manual one for tests."""

import time
from typing import Protocol


class Clock(Protocol):
    """Anything with a ``now()`` returning a monotonic sample in nanoseconds."""

    def now(self) -> int:
        ...


class MonotonicClock:
    """Wall-clock monotonic time backed by ``time.perf_counter_ns``."""

    def now(self) -> int:
        return time.perf_counter_ns()


class ManualClock:
    """Clock that only moves when told to.

    Usage:
        clock = ManualClock()
        t = Timer(clock=clock)
        clock.advance_seconds(1.5)
        assert t.elapsed_total().count() == 1.5
    """

    def __init__(self, start: int = 0):
        self._now = int(start)

    def now(self) -> int:
        return self._now

    def advance(self, nanos: int) -> int:
        """Move the clock forward by ``nanos`` and return the new reading."""
        if nanos < 0:
            raise ValueError(f"Monotonic clock cannot move backwards (step={nanos}ns)")
        self._now += int(nanos)
        return self._now

    def advance_seconds(self, seconds: float) -> int:
        return self.advance(round(seconds * 1_000_000_000))
