"""Work-time budgeting calculator."""

__version__ = "1.0.0"
