"""CLI utility functions."""

from worktime.cli.utils.formatters import format_error, format_info, format_warning

__all__ = [
    "format_error",
    "format_info",
    "format_warning",
]
