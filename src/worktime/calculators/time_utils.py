"""Time-of-day utilities for the work-time calculator.

This module provides low-level helpers for working with instants on the
current day:
- Anchoring an hour/minute clock value to a date
- Measuring the span between two instants as a Duration
- Shifting an instant by a Duration

Instants are naive dt.datetime values in the local zone.
"""

import datetime as dt

from worktime.errors import InvalidFormat
from worktime.models.duration import Duration


def anchor_clock(clock: Duration, on: dt.date) -> dt.datetime:
    """Turn a clock value into an instant on the given date.

    Args:
        clock: Hour/minute value since midnight (e.g. parsed from "08:30")
        on: Date to anchor to

    Returns:
        Naive datetime with seconds set to 0

    Raises:
        InvalidFormat: If the clock value is not a time of day (00:00-23:59)

    Example:
        >>> anchor_clock(Duration.from_components(8, 30), dt.date(2024, 3, 4))
        datetime.datetime(2024, 3, 4, 8, 30)
    """
    sign, hours, minutes, _ = clock.components()
    if sign < 0 or hours > 23:
        raise InvalidFormat(
            f"Invalid time of day: {clock}",
            recovery_hint="Use a clock time between 00:00 and 23:59",
        )
    return dt.datetime.combine(on, dt.time(hours, minutes))


def elapsed_between(start: dt.datetime, end: dt.datetime) -> Duration:
    """Calculate the signed span from start to end.

    Example:
        >>> elapsed_between(dt.datetime(2024, 3, 4, 9), dt.datetime(2024, 3, 4, 8))
        Duration(seconds=-3600)
    """
    return Duration.from_timedelta(end - start)


def shift(instant: dt.datetime, duration: Duration) -> dt.datetime:
    """Move an instant forward (or back, for negative durations)."""
    return instant + duration.to_timedelta()
