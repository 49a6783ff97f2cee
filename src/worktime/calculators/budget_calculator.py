"""Work budget calculation.

This module implements the central calculation of the day's budget:
- Elapsed time since the start (now - start)
- Work done (elapsed - breaks)
- Remaining work or overtime relative to the target
- Clock times at which the target, 9 hours and 10 hours are reached
- How much longer one may work before hitting the 10 hour cap

Thresholds add max(standard break, recorded breaks) so a longer break
pushes the expected finish later, never earlier.
"""

import datetime as dt
import logging
from dataclasses import dataclass, field
from typing import List, Optional

from worktime.calculators.break_calculator import accumulate_breaks
from worktime.calculators.time_utils import elapsed_between, shift
from worktime.models.duration import Duration
from worktime.models.policy import BreakPolicy
from worktime.models.session import WorkSession
from worktime.utils.logging_utils import log_function_call

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BudgetResult:
    """Result of the work budget calculation.

    Attributes:
        start: Start of the working day
        now: Instant the budget was calculated for
        target: Target work duration for the day
        elapsed_total: Time since the start (now - start)
        worked: Elapsed time minus breaks
        remaining_or_overtime: Remaining time (negative) or overtime
        done: True once worked time exceeds the target
        total_break: Sum of all breaks, including an inferred one
        longest_break: Longest break, including an inferred one
        break_inferred: True if no break was recorded and one was assumed
        latest_stop: Time left until the 10 hour cap
        target_reached_at: Clock time at which the target is reached
        nine_hours_at: Clock time at which 9 hours are reached
        ten_hours_at: Clock time at which 10 hours are reached
        breaks: All break lengths used in the calculation
    """

    start: dt.datetime
    now: dt.datetime
    target: Duration
    elapsed_total: Duration
    worked: Duration
    remaining_or_overtime: Duration
    done: bool
    total_break: Duration
    longest_break: Duration
    break_inferred: bool
    latest_stop: Duration
    target_reached_at: dt.datetime
    nine_hours_at: dt.datetime
    ten_hours_at: dt.datetime
    breaks: List[Duration] = field(default_factory=list)

    @property
    def label(self) -> str:
        """'more' once the target is exceeded, 'remaining' before."""
        return "more" if self.done else "remaining"


@log_function_call
def calculate_budget(
    session: WorkSession, policy: Optional[BreakPolicy] = None
) -> BudgetResult:
    """Calculate the work budget for a session.

    Formulas:
        worked = (now - start) - breaks
        done = worked > target
        remaining = worked + breaks - target                if done
                    (now - start) - (target + breaks)       otherwise
        target at = start + target + max(short break, breaks)
        9h at = start + 9h + max(long break, breaks)
        10h at = start + 10h + max(long break, breaks)
        latest stop = start + 10h + max(breaks, long break) - now

    The two remaining formulas are deliberately asymmetric. If no break
    was recorded, one is inferred first (see accumulate_breaks). The
    session itself is never modified.

    Args:
        session: Start, now, target and recorded breaks
        policy: Break sizes and thresholds (defaults to BreakPolicy())

    Returns:
        BudgetResult with all derived durations and clock times

    Example:
        >>> session = WorkSession(
        ...     start=dt.datetime(2024, 3, 4, 9, 0),
        ...     now=dt.datetime(2024, 3, 4, 14, 0),
        ...     target=Duration.from_components(8, 0),
        ... )
        >>> result = calculate_budget(session)
        >>> str(result.worked), str(result.remaining_or_overtime), result.label
        ('04:30', '-03:30', 'remaining')
    """
    if policy is None:
        policy = BreakPolicy()

    # now < start is not special-cased, the negative span propagates
    elapsed_total = elapsed_between(session.start, session.now)

    summary = accumulate_breaks(session.breaks, elapsed_total, policy)
    total_break = summary.total

    worked = elapsed_total - total_break
    done = worked > session.target

    if done:
        remaining_or_overtime = worked + total_break - session.target
    else:
        remaining_or_overtime = elapsed_total - (session.target + total_break)

    target_reached_at = shift(
        session.start, session.target + max(policy.short_break, total_break)
    )
    nine_hours_at = shift(
        session.start, policy.nine_hours + max(policy.long_break, total_break)
    )
    ten_hours_at = shift(
        session.start, policy.ten_hours + max(policy.long_break, total_break)
    )
    latest_stop = elapsed_between(session.now, ten_hours_at)

    logger.debug(
        f"Elapsed {elapsed_total}, worked {worked}, "
        f"{'overtime' if done else 'remaining'} {remaining_or_overtime}, "
        f"latest stop in {latest_stop}"
    )

    return BudgetResult(
        start=session.start,
        now=session.now,
        target=session.target,
        elapsed_total=elapsed_total,
        worked=worked,
        remaining_or_overtime=remaining_or_overtime,
        done=done,
        total_break=total_break,
        longest_break=summary.longest,
        break_inferred=summary.inferred,
        latest_stop=latest_stop,
        target_reached_at=target_reached_at,
        nine_hours_at=nine_hours_at,
        ten_hours_at=ten_hours_at,
        breaks=summary.breaks,
    )
