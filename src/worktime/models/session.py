"""Work session and break interval models.

A WorkSession is the complete input of one budget calculation: when the
day started, the current instant, the day's target and the recorded
breaks.
"""

import datetime as dt
from typing import List

from pydantic import Field, field_validator

from worktime.models.base import BaseDataModel
from worktime.models.duration import Duration


class BreakInterval(BaseDataModel):
    """One recorded break, given as two clock values.

    The end is expected at or after the start on the same day. This is
    not enforced: a break crossing midnight yields a negative length,
    which is passed through unchanged.

    Attributes:
        start: Clock value at which the break began
        end: Clock value at which the break ended

    Example:
        >>> interval = BreakInterval(
        ...     start=Duration.from_components(12, 0),
        ...     end=Duration.from_components(12, 45),
        ... )
        >>> str(interval.length)
        '00:45'
    """

    start: Duration = Field(..., description="Break start clock value")
    end: Duration = Field(..., description="Break end clock value")

    @property
    def length(self) -> Duration:
        """Length of the break (end - start)."""
        return self.end - self.start


class WorkSession(BaseDataModel):
    """Input of a single budget calculation.

    Attributes:
        start: Start of the working day, anchored to today
        now: Current instant, anchored to today
        target: Work duration aimed for today
        breaks: Recorded break lengths, in the order given

    Example:
        >>> session = WorkSession(
        ...     start=dt.datetime(2024, 3, 4, 9, 0),
        ...     now=dt.datetime(2024, 3, 4, 14, 0),
        ...     target=Duration.from_components(8, 0),
        ... )
        >>> session.breaks
        []
    """

    start: dt.datetime = Field(..., description="Start of the working day")
    now: dt.datetime = Field(..., description="Current instant")
    target: Duration = Field(..., description="Target work duration for the day")
    breaks: List[Duration] = Field(
        default_factory=list, description="Recorded break lengths"
    )

    @field_validator("target")
    @classmethod
    def validate_target(cls, v: Duration) -> Duration:
        """Validate that the target is a positive duration.

        Raises:
            ValueError: If the target is zero or negative
        """
        if v.seconds <= 0:
            raise ValueError(f"target must be positive, got {v}")
        return v
