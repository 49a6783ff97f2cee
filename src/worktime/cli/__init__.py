"""Work-time CLI.

This module provides the command-line interface of the work-time
calculator. The single command prints today's work budget.
"""

from worktime.cli.commands.budget import budget

cli = budget


def main():
    """Main entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
