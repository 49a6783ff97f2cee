"""Break accumulation for the work budget.

This module sums the recorded breaks, finds the longest one, and infers
a break when none was recorded. Statutory break expectations apply
whether or not the breaks were logged, so a day without any recorded
break is treated as if the break the policy expects had been taken.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Sequence

from worktime.errors import EmptySet
from worktime.models.duration import ZERO, Duration
from worktime.models.policy import BreakPolicy

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BreakSummary:
    """Result of break accumulation.

    Attributes:
        breaks: Break lengths, including an inferred one if any
        total: Sum of all breaks
        longest: Longest break
        inferred: True if the last entry was added by inference
    """

    breaks: List[Duration] = field(default_factory=list)
    total: Duration = ZERO
    longest: Duration = ZERO
    inferred: bool = False


def total_break(breaks: Sequence[Duration]) -> Duration:
    """Sum break lengths. An empty sequence sums to zero."""
    return sum(breaks, ZERO)


def longest_break(breaks: Sequence[Duration]) -> Duration:
    """Return the longest break, compared by magnitude.

    A break across midnight has a negative length and still counts by
    its size. The entry is returned as recorded, with its sign.

    Raises:
        EmptySet: If there are no breaks
    """
    if not breaks:
        raise EmptySet("Cannot determine the longest break of an empty set")
    return max(breaks, key=abs)


def infer_break(elapsed_total: Duration, policy: BreakPolicy) -> Duration:
    """Infer the break to assume when none was recorded.

    If the elapsed time minus the long break stays below the nine hour
    threshold, the short break is assumed. Otherwise the long one is.

    Args:
        elapsed_total: Time since the start of the day
        policy: Break sizes and thresholds

    Returns:
        The inferred break length

    Example:
        >>> str(infer_break(Duration.from_components(9, 30), BreakPolicy()))
        '00:30'
        >>> str(infer_break(Duration.from_components(9, 45), BreakPolicy()))
        '00:45'
    """
    if elapsed_total - policy.long_break < policy.nine_hours:
        return policy.short_break
    return policy.long_break


def accumulate_breaks(
    breaks: Sequence[Duration], elapsed_total: Duration, policy: BreakPolicy
) -> BreakSummary:
    """Total the recorded breaks, inferring one if their total is zero.

    Inference only happens when the recorded total is exactly zero, not
    when it is merely small. The inferred break is appended to the list,
    so the total and the longest break both include it.

    Args:
        breaks: Recorded break lengths
        elapsed_total: Time since the start of the day
        policy: Break sizes and thresholds

    Returns:
        BreakSummary with the (possibly extended) list and its statistics
    """
    all_breaks = list(breaks)
    inferred = False

    if total_break(all_breaks) == ZERO:
        assumed = infer_break(elapsed_total, policy)
        logger.info(f"No break recorded, assuming a break of {assumed}")
        all_breaks.append(assumed)
        inferred = True

    summary = BreakSummary(
        breaks=all_breaks,
        total=total_break(all_breaks),
        longest=longest_break(all_breaks),
        inferred=inferred,
    )
    logger.debug(
        f"Breaks: {len(all_breaks)} entries, total {summary.total}, "
        f"longest {summary.longest}"
    )
    return summary
