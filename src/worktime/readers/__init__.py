"""
Readers for turning command line strings into calculator inputs.
"""

from .session_reader import SessionReader
from .time_parser import (
    parse_break_interval,
    parse_clock,
    parse_duration_range,
    parse_target,
)

__all__ = [
    "SessionReader",
    "parse_break_interval",
    "parse_clock",
    "parse_duration_range",
    "parse_target",
]
