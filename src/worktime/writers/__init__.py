"""Writers module for rendering budget results.

This module provides functionality to format durations and clock times
and to render the complete budget report as text.
"""

from worktime.writers.report_writer import (
    ReportWriter,
    format_clock,
    format_decimal_hours,
    format_hhmm,
)

__all__ = [
    "ReportWriter",
    "format_clock",
    "format_decimal_hours",
    "format_hhmm",
]
