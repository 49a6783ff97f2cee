"""Validators for raw command line options and assembled sessions.

Option checks enforce the preconditions the calculator relies on and
raise on violation. Session checks never raise: they return warnings for
inputs the calculator accepts but whose results are of limited use.
"""

from typing import List, Optional, Tuple

from worktime.errors import ConflictingOrMissingTarget, MissingRequiredInput
from worktime.models.policy import BreakPolicy
from worktime.models.session import WorkSession


class OptionValidators:
    """Collection of checks on raw option strings and sessions."""

    @staticmethod
    def validate_start(raw_start: Optional[str]) -> str:
        """Validate that a start time was given.

        Args:
            raw_start: Raw value of the start option

        Returns:
            The stripped start string

        Raises:
            MissingRequiredInput: If the start time is absent or blank
        """
        if raw_start is None or not raw_start.strip():
            raise MissingRequiredInput(
                "Start time must be set",
                recovery_hint="Pass the start of your working day with -s HH:MM",
            )
        return raw_start.strip()

    @staticmethod
    def resolve_target_options(
        raw_daily: Optional[str],
        raw_weekly: Optional[str],
        default_weekly: Optional[str] = None,
    ) -> Tuple[Optional[str], Optional[str]]:
        """Resolve which target option applies.

        The default weekly target is used only when neither a daily nor a
        weekly target was given, so an explicit daily target never
        conflicts with the default.

        Args:
            raw_daily: Raw value of the daily option
            raw_weekly: Raw value of the weekly option
            default_weekly: Weekly target to fall back to

        Returns:
            Tuple of (daily, weekly) with exactly one of them set

        Raises:
            ConflictingOrMissingTarget: If both or neither are set
        """
        daily = raw_daily.strip() if raw_daily and raw_daily.strip() else None
        weekly = raw_weekly.strip() if raw_weekly and raw_weekly.strip() else None

        if daily is None and weekly is None and default_weekly:
            weekly = default_weekly

        if (daily is None) == (weekly is None):
            raise ConflictingOrMissingTarget(
                "Either weekly or daily work time should be set",
                recovery_hint="Pass exactly one of -d/--daily or -w/--weekly",
            )
        return daily, weekly

    @staticmethod
    def check_session(session: WorkSession, policy: BreakPolicy) -> List[str]:
        """Collect warnings about a session.

        Args:
            session: Assembled work session
            policy: Break sizes and thresholds

        Returns:
            List of warning messages (empty if nothing stands out)
        """
        warnings = []

        if session.now < session.start:
            warnings.append(
                f"Start time {session.start:%H:%M} lies in the future, "
                "figures are shown by magnitude"
            )

        for index, length in enumerate(session.breaks, start=1):
            if length.seconds < 0:
                warnings.append(
                    f"Break {index} ends before it starts, breaks across "
                    "midnight are not supported"
                )

        if session.target > policy.ten_hours:
            warnings.append(
                f"Target {session.target} exceeds the daily cap of {policy.ten_hours}"
            )

        return warnings
