"""Elapsed-time value with a rendering policy: human or numeric strings."""

import operator
from dataclasses import dataclass
from enum import Enum
from functools import total_ordering

import numpy as np

_INT64 = np.iinfo(np.int64)

NANOS_PER_SECOND = 1_000_000_000

# (label, size in nanoseconds), largest first
_UNITS = (
    ("h", 3600 * NANOS_PER_SECOND),
    ("m", 60 * NANOS_PER_SECOND),
    ("s", NANOS_PER_SECOND),
    ("ms", 1_000_000),
    ("us", 1_000),
    ("ns", 1),
)


class PrintMode(str, Enum):
    """How a Duration turns itself into a string."""

    HUMAN = "human"
    NUMERIC = "numeric"

    @classmethod
    def parse(cls, value: "str | PrintMode") -> "PrintMode":
        """Look up a mode by name (case-insensitive).

        Raises:
            ValueError: If the name is not a known mode.
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            raise ValueError(
                f"Unknown print mode '{value}'. Available: {[m.value for m in cls]}"
            ) from None


DEFAULT_PRINT_MODE = PrintMode.HUMAN
DEFAULT_FORMAT = ""


def _checked(nanos) -> int:
    """Coerce to int and reject values outside the signed 64-bit range."""
    nanos = operator.index(nanos)
    if not _INT64.min <= nanos <= _INT64.max:
        raise OverflowError(f"Duration of {nanos}ns does not fit in a signed 64-bit count")
    return nanos


def _split_units(magnitude: int) -> list[tuple[int, str]]:
    """Largest non-zero unit, plus the next smaller unit if its residual is non-zero."""
    for i, (unit, size) in enumerate(_UNITS):
        if magnitude < size:
            continue
        major, rest = divmod(magnitude, size)
        parts = [(major, unit)]
        if i + 1 < len(_UNITS):
            minor_unit, minor_size = _UNITS[i + 1]
            minor = rest // minor_size
            if minor:
                parts.append((minor, minor_unit))
        return parts
    return [(0, "ns")]


@total_ordering
@dataclass(eq=False)
class Duration:
    """Signed nanosecond count plus the policy used to render it.

    Equality, ordering and hashing look at ``nanos`` only; ``print_mode`` and
    ``format`` matter for rendering alone.
    """

    nanos: int = 0
    print_mode: PrintMode = DEFAULT_PRINT_MODE
    format: str = DEFAULT_FORMAT

    def __post_init__(self):
        self.nanos = _checked(self.nanos)
        self.print_mode = PrintMode.parse(self.print_mode)

    @classmethod
    def zero(cls) -> "Duration":
        return cls(0)

    @classmethod
    def from_nanos(
        cls,
        nanos: int,
        print_mode: PrintMode = DEFAULT_PRINT_MODE,
        format: str = DEFAULT_FORMAT,
    ) -> "Duration":
        return cls(nanos, print_mode, format)

    def count(self) -> float:
        """Return the duration in seconds."""
        return self.nanos / NANOS_PER_SECOND

    def set_print_mode(self, print_mode: PrintMode) -> None:
        self.print_mode = PrintMode.parse(print_mode)

    def set_format(self, format: str) -> None:
        self.format = format

    def assign(self, value: "int | Duration") -> "Duration":
        """Replace the nanosecond count, keeping this value's rendering policy.

        Args:
            value: A raw nanosecond count or another Duration (e.g. ``Duration.zero()``).

        Returns:
            self
        """
        if isinstance(value, Duration):
            value = value.nanos
        self.nanos = _checked(value)
        return self

    def to_string(self) -> str:
        if self.print_mode is PrintMode.NUMERIC:
            return self._render_numeric()
        return self._render_human()

    def _render_human(self) -> str:
        sign = "-" if self.nanos < 0 else ""
        parts = _split_units(abs(self.nanos))
        if not self.format:
            return sign + "".join(f"{value}{unit}" for value, unit in parts)
        try:
            body = "".join(self.format.format(value=value, unit=unit) for value, unit in parts)
        except (AttributeError, KeyError, IndexError, TypeError, ValueError, OverflowError):
            return self.format
        return (sign + body).rstrip()

    def _render_numeric(self) -> str:
        if not self.format:
            return "%g" % self.count()
        try:
            return self.format % self.count()
        except (TypeError, ValueError, OverflowError):
            return self.format

    def __str__(self) -> str:
        return self.to_string()

    def __eq__(self, other):
        if not isinstance(other, Duration):
            return NotImplemented
        return self.nanos == other.nanos

    def __lt__(self, other):
        if not isinstance(other, Duration):
            return NotImplemented
        return self.nanos < other.nanos

    def __hash__(self):
        return hash(self.nanos)

    def __add__(self, other):
        if not isinstance(other, Duration):
            return NotImplemented
        return Duration(self.nanos + other.nanos, self.print_mode, self.format)

    def __sub__(self, other):
        if not isinstance(other, Duration):
            return NotImplemented
        return Duration(self.nanos - other.nanos, self.print_mode, self.format)

    def __neg__(self):
        return Duration(-self.nanos, self.print_mode, self.format)

    def __abs__(self):
        return Duration(abs(self.nanos), self.print_mode, self.format)
