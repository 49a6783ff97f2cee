"""Data models for the work-time calculator.

This package contains Pydantic models for the calculation inputs:
- BaseDataModel: Base class with common configuration
- Duration: Exact signed span of time
- BreakPolicy: Break sizes and thresholds
- BreakInterval: One recorded break
- WorkSession: Complete input of a budget calculation
"""

from worktime.models.base import BaseDataModel
from worktime.models.duration import ZERO, Duration
from worktime.models.policy import BreakPolicy
from worktime.models.session import BreakInterval, WorkSession

__all__ = [
    "BaseDataModel",
    "Duration",
    "ZERO",
    "BreakPolicy",
    "BreakInterval",
    "WorkSession",
]
