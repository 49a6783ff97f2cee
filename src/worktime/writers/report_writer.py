"""Text rendering of durations, clock times and the budget report.

Durations are always rendered by magnitude: whether a figure is
remaining time or overtime is carried by the label next to it.
"""

import datetime as dt
from typing import List

from worktime.calculators.budget_calculator import BudgetResult
from worktime.models.duration import MINUTES_PER_HOUR, Duration

# Width of the "[HH:MM:SS] " prefix, used to align continuation lines
_INDENT = " " * 11


def format_hhmm(duration: Duration) -> str:
    """Format a duration as HH:MM.

    The sign is dropped and hours are not wrapped at 24.

    Example:
        >>> format_hhmm(Duration.from_components(-3, -30))
        '03:30'
        >>> format_hhmm(Duration.from_components(39, 0))
        '39:00'
    """
    _, hours, minutes, _ = duration.components()
    return f"{hours:02d}:{minutes:02d}"


def format_decimal_hours(duration: Duration) -> str:
    """Format a duration as decimal hours.

    Uses six significant digits and no trailing zeros. Seconds are
    ignored.

    Example:
        >>> format_decimal_hours(Duration.from_components(7, 48))
        '7.8'
        >>> format_decimal_hours(Duration.from_components(8, 0))
        '8'
        >>> format_decimal_hours(Duration.from_components(7, 40))
        '7.66667'
    """
    _, hours, minutes, _ = duration.components()
    return format(hours + minutes / MINUTES_PER_HOUR, "g")


def format_clock(instant: dt.datetime) -> str:
    """Format an instant as HH:MM:SS."""
    return instant.strftime("%H:%M:%S")


class ReportWriter:
    """Renders a BudgetResult as the three-line text report.

    Example output:
        [14:00:00] start: 09:00:00; 8h: 17:30:00; 9h: 18:45:00; 10h: 19:45:00
                   already done: 04:30; 03:30 remaining; no longer than: 05:45
                   total break time: 00:30; longest break: 00:30
    """

    def render_lines(self, result: BudgetResult) -> List[str]:
        """Render the report as a list of lines."""
        thresholds = (
            f"[{format_clock(result.now)}] start: {format_clock(result.start)}; "
            f"{format_decimal_hours(result.target)}h: "
            f"{format_clock(result.target_reached_at)}; "
            f"9h: {format_clock(result.nine_hours_at)}; "
            f"10h: {format_clock(result.ten_hours_at)}"
        )
        progress = (
            f"{_INDENT}already done: {format_hhmm(result.worked)}; "
            f"{format_hhmm(result.remaining_or_overtime)} {result.label}; "
            f"no longer than: {format_hhmm(result.latest_stop)}"
        )
        breaks = (
            f"{_INDENT}total break time: {format_hhmm(result.total_break)}; "
            f"longest break: {format_hhmm(result.longest_break)}"
        )
        return [thresholds, progress, breaks]

    def render(self, result: BudgetResult) -> str:
        """Render the report as a single string."""
        return "\n".join(self.render_lines(result))
