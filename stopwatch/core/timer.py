"""Stopwatch timer producing Durations from an injected monotonic clock."""

from .clock import Clock, MonotonicClock
from .duration import DEFAULT_FORMAT, DEFAULT_PRINT_MODE, Duration, PrintMode


class Timer:
    """Always-running stopwatch.

    There is no stopped state: ``stop()`` samples the elapsed time and starts
    a new measurement window in one call. Not thread-safe; guard shared
    instances with a lock.

    Args:
        print_mode: Rendering mode for every Duration this timer produces.
        format: Format string paired with ``print_mode``.
        clock: Source of ``now()`` in nanoseconds. Defaults to MonotonicClock.
    """

    def __init__(
        self,
        print_mode: PrintMode = DEFAULT_PRINT_MODE,
        format: str = DEFAULT_FORMAT,
        clock: Clock | None = None,
    ):
        self._clock = MonotonicClock() if clock is None else clock
        self._print_mode = PrintMode.parse(print_mode)
        self._format = format
        self._initial_time_point = self._clock.now()

    @property
    def print_mode(self) -> PrintMode:
        return self._print_mode

    @property
    def format(self) -> str:
        return self._format

    def set_print_mode(self, print_mode: PrintMode) -> None:
        self._print_mode = PrintMode.parse(print_mode)

    def set_format(self, format: str) -> None:
        self._format = format

    def start(self) -> None:
        """Begin a new measurement window, discarding the current one."""
        self._initial_time_point = self._clock.now()

    def reset(self) -> None:
        """Zero the timer and begin a new measurement window."""
        self._initial_time_point = self._clock.now()

    def stop(self) -> Duration:
        """Return the elapsed Duration, then reset."""
        elapsed = self.elapsed_total()
        self.reset()
        return elapsed

    def elapsed_total(self) -> Duration:
        """Time since the last construction/start/reset/stop, under the current policy."""
        return Duration(
            self._clock.now() - self._initial_time_point,
            self._print_mode,
            self._format,
        )

    def to_string(self) -> str:
        # Renders the (always zero) total, not the running elapsed time.
        return Duration(0, self._print_mode, self._format).to_string()

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"Timer(print_mode={self._print_mode.value!r}, format={self._format!r})"


def timer_has_elapsed(timer: Timer, target_duration: float) -> bool:
    """True if more than ``target_duration`` seconds have elapsed (strictly greater)."""
    return timer.elapsed_total().count() > target_duration
