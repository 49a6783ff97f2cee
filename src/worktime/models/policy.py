"""Break policy model.

The statutory break sizes and the 9 and 10 hour thresholds appear in
every calculation. They live here as one immutable value that is passed
into the calculators, so a different break rule never touches the
arithmetic.
"""

from pydantic import ConfigDict, Field, model_validator

from worktime.models.base import BaseDataModel
from worktime.models.duration import Duration


class BreakPolicy(BaseDataModel):
    """Break sizes and work-time thresholds.

    Attributes:
        short_break: Break assumed for shorter days (default 30 minutes)
        long_break: Break assumed for long days (default 45 minutes)
        nine_hours: First threshold (default 9 hours)
        ten_hours: Hard cap on daily work (default 10 hours)

    Example:
        >>> policy = BreakPolicy()
        >>> str(policy.long_break)
        '00:45'
    """

    model_config = ConfigDict(frozen=True)

    short_break: Duration = Field(
        default=Duration.from_minutes(30), description="Short statutory break"
    )
    long_break: Duration = Field(
        default=Duration.from_minutes(45), description="Long statutory break"
    )
    nine_hours: Duration = Field(
        default=Duration.from_components(9, 0), description="First threshold"
    )
    ten_hours: Duration = Field(
        default=Duration.from_components(10, 0), description="Daily cap"
    )

    @model_validator(mode="after")
    def validate_ordering(self) -> "BreakPolicy":
        """Validate that the policy values are consistent.

        Raises:
            ValueError: If a break is negative, the long break is shorter
                than the short one, or the cap lies below the first threshold
        """
        if self.short_break.seconds < 0 or self.long_break.seconds < 0:
            raise ValueError("Break sizes cannot be negative")
        if self.long_break < self.short_break:
            raise ValueError(
                f"long_break ({self.long_break}) must not be shorter than "
                f"short_break ({self.short_break})"
            )
        if self.ten_hours < self.nine_hours:
            raise ValueError(
                f"ten_hours ({self.ten_hours}) must not be below "
                f"nine_hours ({self.nine_hours})"
            )
        return self
