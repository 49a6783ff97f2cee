"""Validation of command line options and work sessions."""

from worktime.validators.option_validators import OptionValidators

__all__ = ["OptionValidators"]
