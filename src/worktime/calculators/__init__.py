"""Calculator modules for the work-time budget."""

from worktime.calculators.break_calculator import (
    BreakSummary,
    accumulate_breaks,
    infer_break,
    longest_break,
    total_break,
)
from worktime.calculators.budget_calculator import BudgetResult, calculate_budget
from worktime.calculators.time_utils import anchor_clock, elapsed_between, shift

__all__ = [
    # break_calculator
    "BreakSummary",
    "accumulate_breaks",
    "infer_break",
    "longest_break",
    "total_break",
    # budget_calculator
    "BudgetResult",
    "calculate_budget",
    # time_utils
    "anchor_clock",
    "elapsed_between",
    "shift",
]
