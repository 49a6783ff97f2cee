"""CLI commands."""

from worktime.cli.commands.budget import budget

__all__ = ["budget"]
