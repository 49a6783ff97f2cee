"""Session reader: assembles a WorkSession from raw option strings.

This module checks the caller preconditions (start given, exactly one
target), parses every string strictly and anchors the start time to the
date of the current instant.
"""

import datetime as dt
import logging
from typing import Optional, Sequence

from worktime.calculators.time_utils import anchor_clock
from worktime.models.session import WorkSession
from worktime.readers.time_parser import (
    DEFAULT_WORKDAYS_PER_WEEK,
    parse_clock,
    parse_duration_range,
    parse_target,
)
from worktime.validators.option_validators import OptionValidators

logger = logging.getLogger(__name__)


class SessionReader:
    """Reads raw command line values into a WorkSession.

    Example:
        >>> reader = SessionReader()
        >>> session = reader.read(
        ...     raw_start="09:00",
        ...     raw_daily="08:00",
        ...     raw_weekly=None,
        ...     raw_breaks=["12:00-12:30"],
        ...     now=dt.datetime(2024, 3, 4, 14, 0),
        ... )
        >>> str(session.breaks[0])
        '00:30'
    """

    def __init__(
        self,
        default_weekly: Optional[str] = None,
        workdays: int = DEFAULT_WORKDAYS_PER_WEEK,
    ):
        """
        Initialize the reader.

        Args:
            default_weekly: Weekly target used when no target is given
            workdays: Working days per week for weekly targets
        """
        self.default_weekly = default_weekly
        self.workdays = workdays

    def read(
        self,
        raw_start: Optional[str],
        raw_daily: Optional[str],
        raw_weekly: Optional[str],
        raw_breaks: Sequence[str],
        now: dt.datetime,
    ) -> WorkSession:
        """Build a session from raw option values.

        Args:
            raw_start: Start time in HH:MM format
            raw_daily: Daily target in HH:MM format, or None
            raw_weekly: Weekly target in HH:MM format, or None
            raw_breaks: Break strings in HH:MM-HH:MM format
            now: Current local instant

        Returns:
            Validated WorkSession

        Raises:
            MissingRequiredInput: If the start time is absent
            ConflictingOrMissingTarget: If both or neither target applies
            InvalidFormat: If any string is malformed
            pydantic.ValidationError: If the target is not positive
        """
        start_str = OptionValidators.validate_start(raw_start)
        daily, weekly = OptionValidators.resolve_target_options(
            raw_daily, raw_weekly, self.default_weekly
        )

        start = anchor_clock(parse_clock(start_str), now.date())
        target = parse_target(daily, weekly, self.workdays)
        breaks = [parse_duration_range(raw) for raw in raw_breaks]

        logger.info(
            f"Session read: start {start:%H:%M}, target {target}, "
            f"{len(breaks)} recorded break(s)"
        )

        return WorkSession(start=start, now=now, target=target, breaks=breaks)
