"""Error types raised by the work-time calculator.

The calculation core never prints or exits. It raises one of the errors
below and leaves formatting and the exit code to the command line layer.
"""

from typing import Optional


class WorkTimeError(Exception):
    """Base exception for work-time errors with user-friendly messages."""

    def __init__(self, message: str, recovery_hint: Optional[str] = None):
        """
        Initialize work-time error.

        Args:
            message: Error message to display
            recovery_hint: Optional hint for recovering from the error
        """
        self.message = message
        self.recovery_hint = recovery_hint
        super().__init__(message)


class MissingRequiredInput(WorkTimeError):
    """The start time was not given."""

    pass


class ConflictingOrMissingTarget(WorkTimeError):
    """Both or neither of the daily and weekly targets were given."""

    pass


class InvalidFormat(WorkTimeError, ValueError):
    """A time or break string does not match the expected pattern."""

    pass


class EmptySet(WorkTimeError, ValueError):
    """A break statistic was requested for an empty set of breaks."""

    pass
