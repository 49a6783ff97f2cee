"""Budget command: prints today's work-time budget."""

import datetime as dt
from typing import Optional, Tuple

import click
from pydantic import ValidationError

from worktime import __version__
from worktime.calculators.budget_calculator import calculate_budget
from worktime.calculators.time_utils import anchor_clock
from worktime.cli.error_handlers import ConfigurationError, with_error_handling
from worktime.cli.utils.formatters import format_info, format_warning
from worktime.config.logging_config import LoggingConfig, configure_logging
from worktime.config.settings import get_config
from worktime.readers.session_reader import SessionReader
from worktime.readers.time_parser import parse_clock
from worktime.utils.logging_utils import LogContext, generate_correlation_id
from worktime.validators.option_validators import OptionValidators
from worktime.writers.report_writer import ReportWriter


def resolve_now(raw_now: Optional[str]) -> dt.datetime:
    """Return the current local instant, or the HH:MM override for today.

    Args:
        raw_now: Optional override in HH:MM format

    Returns:
        Naive local datetime
    """
    now = dt.datetime.now()
    if raw_now:
        return anchor_clock(parse_clock(raw_now), now.date())
    return now


@click.command(
    name="worktime",
    context_settings={"help_option_names": ["-h", "--help"]},
)
@click.option(
    "-s",
    "--start",
    "raw_start",
    type=str,
    default=None,
    metavar="HH:MM",
    help="Start of the working day (required)",
)
@click.option(
    "-d",
    "--daily",
    "raw_daily",
    type=str,
    default=None,
    metavar="HH:MM",
    help="Daily target. Cannot be used with --weekly.",
)
@click.option(
    "-w",
    "--weekly",
    "raw_weekly",
    type=str,
    default=None,
    metavar="HH:MM",
    help=(
        "Weekly target, divided by the working days per week. "
        "Cannot be used with --daily. Defaults to WORKTIME_WEEKLY_TARGET (39:00)."
    ),
)
@click.option(
    "-b",
    "--break",
    "raw_breaks",
    type=str,
    multiple=True,
    metavar="HH:MM-HH:MM",
    help="Recorded break, may be given several times",
)
@click.option(
    "--now",
    "raw_now",
    type=str,
    default=None,
    metavar="HH:MM",
    help="Calculate for this time of day instead of the current time",
)
@click.option("--debug", is_flag=True, help="Show debug logs and full stack traces")
@click.version_option(version=__version__)
def budget(
    raw_start: Optional[str],
    raw_daily: Optional[str],
    raw_weekly: Optional[str],
    raw_breaks: Tuple[str, ...],
    raw_now: Optional[str],
    debug: bool,
):
    """Show how much of today's work time is done and how much remains.

    Prints the clock times at which the target, 9 hours and 10 hours are
    reached, the work done so far, the time remaining (or the overtime),
    and the break totals. If no break was recorded, a 30 or 45 minute
    break is assumed.

    Example:
        worktime -s 08:30 -d 08:00
        worktime -s 08:30 -w 40:00 -b 12:00-12:30 -b 15:00-15:10
    """
    with with_error_handling(debug):
        try:
            settings = get_config()
        except ValidationError as e:
            raise ConfigurationError(
                f"Invalid settings: {e.error_count()} error(s)",
                recovery_hint="Check the WORKTIME_* and LOG_* environment variables",
            ) from e

        logging_config = LoggingConfig.from_env(default_level=settings.log_level)
        if debug or settings.debug:
            logging_config.log_level = "DEBUG"
        configure_logging(logging_config)

        with LogContext(correlation_id=generate_correlation_id()):
            reader = SessionReader(
                default_weekly=settings.weekly_target,
                workdays=settings.workdays_per_week,
            )
            session = reader.read(
                raw_start=raw_start,
                raw_daily=raw_daily,
                raw_weekly=raw_weekly,
                raw_breaks=raw_breaks,
                now=resolve_now(raw_now),
            )
            policy = settings.get_break_policy()

            for warning in OptionValidators.check_session(session, policy):
                click.echo(format_warning(warning), err=True)

            result = calculate_budget(session, policy)

        if result.break_inferred:
            click.echo(
                format_info(f"No break recorded, assuming {result.total_break}"),
                err=True,
            )
        click.echo(ReportWriter().render(result))
