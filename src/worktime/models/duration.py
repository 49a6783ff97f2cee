"""Duration value type for the work-time calculator.

This module provides the low-level time quantity used by every other
calculation:
- An exact, signed Duration stored as whole seconds
- Normalization of hour/minute pairs
- Signed subtraction and integer division
- Conversion to and from dt.timedelta

Floating point is never used here. Decimal hours are produced only by
the report writer.
"""

import datetime as dt
from dataclasses import dataclass
from typing import Tuple

SECONDS_PER_MINUTE = 60
MINUTES_PER_HOUR = 60
SECONDS_PER_HOUR = SECONDS_PER_MINUTE * MINUTES_PER_HOUR


def normalize(hours: int, minutes: int) -> Tuple[int, int]:
    """Normalize an hour/minute pair into its canonical form.

    Minutes below zero borrow from the hours, minutes of 60 or more carry
    into the hours. The result always satisfies ``0 <= |minutes| < 60``
    and both parts carry the same sign, so a negative span stays negative
    instead of wrapping into a mixed-sign pair.

    Args:
        hours: Hour component, may be negative
        minutes: Minute component, may be negative or exceed 59

    Returns:
        Tuple of (hours, minutes)

    Example:
        >>> normalize(1, 75)
        (2, 15)
        >>> normalize(2, -30)
        (1, 30)
        >>> normalize(-1, 0)
        (-1, 0)
        >>> normalize(-1, 30)
        (0, -30)
    """
    total_minutes = hours * MINUTES_PER_HOUR + minutes
    sign = -1 if total_minutes < 0 else 1
    whole_hours, rest_minutes = divmod(abs(total_minutes), MINUTES_PER_HOUR)
    return sign * whole_hours, sign * rest_minutes


@dataclass(frozen=True, order=True)
class Duration:
    """Signed span of time stored as an exact number of seconds.

    Attributes:
        seconds: Total length in seconds (negative for negative spans)

    Example:
        >>> Duration.from_components(7, 48)
        Duration(seconds=28080)
        >>> str(Duration.from_components(2, 0) - Duration.from_components(3, 0))
        '-01:00'
    """

    seconds: int = 0

    @classmethod
    def from_components(cls, hours: int, minutes: int, seconds: int = 0) -> "Duration":
        """Build a duration from hour, minute and second parts."""
        return cls(hours * SECONDS_PER_HOUR + minutes * SECONDS_PER_MINUTE + seconds)

    @classmethod
    def from_minutes(cls, minutes: int) -> "Duration":
        """Build a duration from a number of minutes."""
        return cls(minutes * SECONDS_PER_MINUTE)

    @classmethod
    def from_timedelta(cls, td: dt.timedelta) -> "Duration":
        """Convert a timedelta, dropping any sub-second remainder.

        Example:
            >>> Duration.from_timedelta(dt.timedelta(hours=1, microseconds=5))
            Duration(seconds=3600)
        """
        return cls(td // dt.timedelta(seconds=1))

    def to_timedelta(self) -> dt.timedelta:
        """Convert to a timedelta."""
        return dt.timedelta(seconds=self.seconds)

    @property
    def total_minutes(self) -> int:
        """Whole minutes, truncated toward zero."""
        magnitude_minutes = abs(self.seconds) // SECONDS_PER_MINUTE
        return -magnitude_minutes if self.seconds < 0 else magnitude_minutes

    def components(self) -> Tuple[int, int, int, int]:
        """Decompose into (sign, hours, minutes, seconds).

        Hours are unbounded, minutes and seconds lie in 0..59.

        Example:
            >>> Duration.from_components(-3, -30).components()
            (-1, 3, 30, 0)
        """
        sign = -1 if self.seconds < 0 else 1
        rest, seconds = divmod(abs(self.seconds), SECONDS_PER_MINUTE)
        hours, minutes = divmod(rest, MINUTES_PER_HOUR)
        return sign, hours, minutes, seconds

    def __add__(self, other: "Duration") -> "Duration":
        if not isinstance(other, Duration):
            return NotImplemented
        return Duration(self.seconds + other.seconds)

    def __sub__(self, other: "Duration") -> "Duration":
        if not isinstance(other, Duration):
            return NotImplemented
        return Duration(self.seconds - other.seconds)

    def __neg__(self) -> "Duration":
        return Duration(-self.seconds)

    def __abs__(self) -> "Duration":
        return Duration(abs(self.seconds))

    def __floordiv__(self, divisor: int) -> "Duration":
        return divide(self, divisor)

    def __bool__(self) -> bool:
        return self.seconds != 0

    def __str__(self) -> str:
        sign, hours, minutes, _ = self.components()
        prefix = "-" if sign < 0 and (hours or minutes) else ""
        return f"{prefix}{hours:02d}:{minutes:02d}"


ZERO = Duration(0)


def subtract(a: Duration, b: Duration) -> Duration:
    """Subtract two durations, keeping the sign of the result.

    Example:
        >>> subtract(Duration.from_components(2, 0), Duration.from_components(3, 0))
        Duration(seconds=-3600)
    """
    return a - b


def divide(a: Duration, divisor: int) -> Duration:
    """Integer-divide a duration, working in whole minutes.

    The duration is converted entirely to minutes, divided, and
    normalized back into hours and minutes. Seconds are discarded.

    Args:
        a: Duration to divide
        divisor: Positive integer divisor

    Returns:
        The divided duration

    Raises:
        ValueError: If divisor is not positive

    Example:
        >>> str(divide(Duration.from_components(39, 0), 5))
        '07:48'
    """
    if divisor <= 0:
        raise ValueError(f"Divisor must be positive, got {divisor}")

    # Truncate toward zero so a negative span divides like its magnitude
    sign = -1 if a.total_minutes < 0 else 1
    minutes = sign * (abs(a.total_minutes) // divisor)
    hours, minutes = normalize(0, minutes)
    return Duration.from_components(hours, minutes)


def magnitude(a: Duration) -> Duration:
    """Return the duration without its sign (for display only)."""
    return abs(a)
