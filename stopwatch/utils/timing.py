"""Timing context manager for benchmarking."""

from contextlib import contextmanager
from dataclasses import dataclass, field

from ..core.clock import Clock
from ..core.duration import DEFAULT_FORMAT, DEFAULT_PRINT_MODE, Duration, PrintMode
from ..core.timer import Timer


@dataclass
class TimingResult:
    """Stores elapsed time from a timing context."""

    elapsed: Duration = field(default_factory=Duration.zero)


@contextmanager
def timer(
    print_mode: PrintMode = DEFAULT_PRINT_MODE,
    format: str = DEFAULT_FORMAT,
    clock: Clock | None = None,
):
    """Context manager that measures a block's wall-clock time as a Duration.

    Usage:
        with timer() as t:
            do_something()
        print(f"Took {t.elapsed}")  # e.g. "12s340ms"
        print(t.elapsed.count())    # seconds as float
    """
    watch = Timer(print_mode, format, clock=clock)
    result = TimingResult(Duration(0, watch.print_mode, watch.format))
    try:
        yield result
    finally:
        result.elapsed = watch.stop()
