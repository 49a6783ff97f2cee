"""Error handling for the worktime command."""

import sys
import traceback

import click
from pydantic import ValidationError

from worktime.cli.utils.formatters import format_error, format_warning
from worktime.errors import (
    ConflictingOrMissingTarget,
    EmptySet,
    InvalidFormat,
    MissingRequiredInput,
    WorkTimeError,
)


class ConfigurationError(WorkTimeError):
    """Error in the settings loaded from the environment or .env file."""

    pass


def _echo_error(title: str, error: WorkTimeError) -> None:
    click.echo(format_error(f"{title}: {error.message}"), err=True)
    if error.recovery_hint:
        click.echo(format_warning(f"Hint: {error.recovery_hint}"), err=True)


def handle_cli_error(error: Exception, debug: bool = False) -> int:
    """
    Report an error with a user-friendly message.

    Args:
        error: The exception that occurred
        debug: Whether to show full stack trace

    Returns:
        Exit code (1 configuration, 3 input format, 4 processing,
        130 abort, 255 unexpected)
    """
    if isinstance(
        error, (ConfigurationError, MissingRequiredInput, ConflictingOrMissingTarget)
    ):
        _echo_error("Configuration Error", error)
        return 1

    elif isinstance(error, InvalidFormat):
        _echo_error("Input Format Error", error)
        return 3

    elif isinstance(error, ValidationError):
        messages = "; ".join(e["msg"] for e in error.errors())
        click.echo(format_error(f"Invalid Input: {messages}"), err=True)
        return 3

    elif isinstance(error, EmptySet):
        _echo_error("Processing Error", error)
        return 4

    elif isinstance(error, WorkTimeError):
        _echo_error("Error", error)
        return 4

    # Handle click.Abort (user cancellation)
    elif isinstance(error, click.Abort):
        click.echo(format_warning("\nOperation cancelled by user"), err=True)
        return 130  # Standard exit code for SIGINT

    else:
        click.echo(format_error(f"Unexpected Error: {type(error).__name__}"), err=True)
        click.echo(str(error), err=True)

        if debug:
            click.echo("\nFull stack trace:", err=True)
            click.echo(
                "".join(
                    traceback.format_exception(
                        type(error), error, error.__traceback__
                    )
                ),
                err=True,
            )
        else:
            click.echo(
                format_warning("\nRun with --debug flag for full stack trace"),
                err=True,
            )

        return 255


def with_error_handling(debug: bool = False):
    """
    Context manager that reports errors and exits with a matching code.

    Args:
        debug: Whether to show full stack traces

    Example:
        with with_error_handling(debug):
            # Command implementation
            pass
    """

    class ErrorHandler:
        """Context manager for error handling."""

        def __init__(self, show_debug: bool):
            self.show_debug = show_debug

        def __enter__(self):
            return self

        def __exit__(self, exc_type, exc_val, exc_tb):
            if isinstance(exc_val, Exception) and not isinstance(
                exc_val, click.exceptions.Exit
            ):
                exit_code = handle_cli_error(exc_val, self.show_debug)
                sys.exit(exit_code)
            return False  # Don't suppress exceptions

    return ErrorHandler(debug)
