"""Parsers for the clock, break and target strings given on the command line.

All parsing is strict: a string that does not match the expected pattern
raises InvalidFormat instead of silently turning into zero.
"""

import logging
import re
from typing import Optional

from worktime.errors import ConflictingOrMissingTarget, InvalidFormat
from worktime.models.duration import Duration, divide
from worktime.models.session import BreakInterval

logger = logging.getLogger(__name__)

# Hours may exceed 23 for weekly targets such as "39:00"
_CLOCK_PATTERN = re.compile(r"^(\d{2,3}):([0-5]\d)$")

DEFAULT_WORKDAYS_PER_WEEK = 5


def parse_clock(text: str) -> Duration:
    """Parse a string in HH:MM format.

    The result is an hour/minute quantity. It serves both as a time of
    day (see anchor_clock) and as a duration such as a target.

    Args:
        text: String to parse (e.g., "09:30" or "39:00")

    Returns:
        Parsed value as a Duration

    Raises:
        InvalidFormat: If the string is not HH:MM with minutes 00-59

    Example:
        >>> str(parse_clock("07:48"))
        '07:48'
    """
    if text is None:
        raise InvalidFormat("Missing time value", recovery_hint="Use HH:MM")

    match = _CLOCK_PATTERN.match(text.strip())
    if not match:
        raise InvalidFormat(
            f"Invalid time format: '{text}'",
            recovery_hint="Use HH:MM, e.g. 08:30",
        )

    hours = int(match.group(1))
    minutes = int(match.group(2))
    return Duration.from_components(hours, minutes)


def parse_break_interval(text: str) -> BreakInterval:
    """Parse a break given as HH:MM-HH:MM.

    Args:
        text: Break string (e.g., "12:00-12:45")

    Returns:
        BreakInterval with start and end clock values

    Raises:
        InvalidFormat: If the dash is missing or either side is malformed
    """
    if text is None or "-" not in text:
        raise InvalidFormat(
            f"Invalid break format: '{text}'",
            recovery_hint="Use HH:MM-HH:MM, e.g. 12:00-12:30",
        )

    start_str, end_str = text.split("-", 1)
    try:
        return BreakInterval(start=parse_clock(start_str), end=parse_clock(end_str))
    except InvalidFormat as e:
        raise InvalidFormat(
            f"Invalid break format: '{text}' ({e.message})",
            recovery_hint="Use HH:MM-HH:MM, e.g. 12:00-12:30",
        ) from e


def parse_duration_range(text: str) -> Duration:
    """Parse a break string into its length (end - start).

    Example:
        >>> str(parse_duration_range("09:00-09:30"))
        '00:30'
    """
    interval = parse_break_interval(text)
    if interval.length.seconds < 0:
        logger.warning(f"Break '{text}' ends before it starts, length is negative")
    return interval.length


def parse_target(
    daily: Optional[str],
    weekly: Optional[str],
    workdays: int = DEFAULT_WORKDAYS_PER_WEEK,
) -> Duration:
    """Resolve the day's target from a daily or a weekly figure.

    Exactly one of daily and weekly must be given. A weekly target is
    divided by the number of working days.

    Args:
        daily: Daily target in HH:MM format, or None
        weekly: Weekly target in HH:MM format, or None
        workdays: Working days per week

    Returns:
        Daily target duration

    Raises:
        ConflictingOrMissingTarget: If both or neither target is given
        InvalidFormat: If the given target is malformed

    Example:
        >>> str(parse_target(None, "39:00"))
        '07:48'
    """
    has_daily = bool(daily)
    has_weekly = bool(weekly)

    if has_daily == has_weekly:
        raise ConflictingOrMissingTarget(
            "Either weekly or daily work time should be set",
            recovery_hint="Pass exactly one of -d/--daily or -w/--weekly",
        )

    if has_daily:
        target = parse_clock(daily)
        logger.debug(f"Using daily target {target}")
        return target

    weekly_target = parse_clock(weekly)
    target = divide(weekly_target, workdays)
    logger.debug(f"Derived daily target {target} from weekly {weekly_target}")
    return target
