"""Unit tests for the worktime command."""

import pytest
from click.testing import CliRunner

from worktime import __version__
from worktime.cli import cli


class TestCLIMain:
    """Test suite for the command line entry point."""

    @pytest.fixture
    def runner(self):
        """Create a Click CLI test runner."""
        return CliRunner()

    def test_help_short_flag(self, runner):
        """Test that -h shows the usage."""
        result = runner.invoke(cli, ["-h"])
        assert result.exit_code == 0
        assert "Usage:" in result.output
        assert "--start" in result.output
        assert "--weekly" in result.output

    def test_version_flag(self, runner):
        """Test that --version prints the package version."""
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_unknown_option_is_usage_error(self, runner):
        """Test that click reports unknown options with exit code 2."""
        result = runner.invoke(cli, ["--unknown"])
        assert result.exit_code == 2


class TestBudgetReport:
    """Test the printed report."""

    @pytest.fixture
    def runner(self, mock_env):
        """Create a runner with a controlled environment."""
        return CliRunner()

    def test_daily_target_report(self, runner):
        """Test the report for a daily target without recorded breaks."""
        result = runner.invoke(cli, ["-s", "09:00", "-d", "08:00", "--now", "14:00"])

        assert result.exit_code == 0
        assert (
            "[14:00:00] start: 09:00:00; 8h: 17:30:00; 9h: 18:45:00; 10h: 19:45:00"
            in result.output
        )
        assert (
            "           already done: 04:30; 03:30 remaining; no longer than: 05:45"
            in result.output
        )
        assert (
            "           total break time: 00:30; longest break: 00:30"
            in result.output
        )

    def test_inferred_break_is_announced(self, runner):
        """Test that an assumed break is reported on stderr."""
        result = runner.invoke(cli, ["-s", "09:00", "-d", "08:00", "--now", "14:00"])
        assert "No break recorded, assuming 00:30" in result.output

    def test_weekly_target_with_breaks(self, runner):
        """Test a weekly target and several recorded breaks."""
        result = runner.invoke(
            cli,
            [
                "-s", "07:00",
                "-w", "39:00",
                "-b", "12:00-12:30",
                "-b", "15:00-15:15",
                "--now", "17:00",
            ],
        )

        assert result.exit_code == 0
        assert "7.8h: 15:33:00" in result.output
        assert "already done: 09:15; 02:12 more; no longer than: 00:45" in result.output
        assert "total break time: 00:45; longest break: 00:30" in result.output
        assert "No break recorded" not in result.output

    def test_default_weekly_target(self, runner):
        """Test that the configured week applies when no target is given."""
        result = runner.invoke(cli, ["-s", "07:00", "--now", "12:00"])

        assert result.exit_code == 0
        assert "7.8h: 15:18:00" in result.output

    def test_default_weekly_target_from_env(self, runner, monkeypatch):
        """Test that WORKTIME_WEEKLY_TARGET changes the default."""
        monkeypatch.setenv("WORKTIME_WEEKLY_TARGET", "40:00")
        result = runner.invoke(cli, ["-s", "07:00", "--now", "12:00"])

        assert result.exit_code == 0
        assert "8h: 15:30:00" in result.output

    def test_break_across_midnight_is_longest(self, runner):
        """Test that a negative break is ranked by its length."""
        result = runner.invoke(
            cli,
            [
                "-s", "08:00",
                "-d", "08:00",
                "-b", "23:50-00:10",
                "-b", "12:00-12:05",
                "--now", "13:00",
            ],
        )

        assert result.exit_code == 0
        assert "longest break: 00:20" in result.output
        assert "breaks across midnight are not supported" in result.output

    def test_start_in_future_warns(self, runner):
        """Test that a start after now is reported but still calculated."""
        result = runner.invoke(cli, ["-s", "15:00", "-d", "08:00", "--now", "14:00"])

        assert result.exit_code == 0
        assert "lies in the future" in result.output


class TestBudgetErrors:
    """Test exit codes for invalid input."""

    @pytest.fixture
    def runner(self, mock_env):
        """Create a runner with a controlled environment."""
        return CliRunner()

    def test_missing_start(self, runner):
        """Test that a missing start time exits with code 1."""
        result = runner.invoke(cli, ["-d", "08:00"])
        assert result.exit_code == 1
        assert "Start time must be set" in result.output

    def test_daily_and_weekly(self, runner):
        """Test that daily and weekly together exit with code 1."""
        result = runner.invoke(cli, ["-s", "08:00", "-d", "08:00", "-w", "40:00"])
        assert result.exit_code == 1
        assert "Either weekly or daily work time should be set" in result.output

    @pytest.mark.parametrize(
        "args",
        [
            ["-s", "8:00", "-d", "08:00"],
            ["-s", "08:00", "-d", "8h"],
            ["-s", "08:00", "-d", "08:00", "-b", "12:00"],
            ["-s", "08:00", "-d", "08:00", "--now", "noon"],
        ],
    )
    def test_invalid_format(self, runner, args):
        """Test that malformed times exit with code 3."""
        result = runner.invoke(cli, args)
        assert result.exit_code == 3
        assert "Input Format Error" in result.output

    def test_start_hour_out_of_range(self, runner):
        """Test that a start time past 23 hours is rejected."""
        result = runner.invoke(cli, ["-s", "25:00", "-d", "08:00"])
        assert result.exit_code == 3

    def test_zero_target(self, runner):
        """Test that a zero daily target is rejected as invalid input."""
        result = runner.invoke(cli, ["-s", "08:00", "-d", "00:00", "--now", "12:00"])
        assert result.exit_code == 3
        assert "target must be positive" in result.output

    def test_invalid_settings(self, runner, monkeypatch):
        """Test that broken settings exit with code 1."""
        monkeypatch.setenv("WORKTIME_WORKDAYS_PER_WEEK", "0")
        result = runner.invoke(cli, ["-s", "08:00", "-d", "08:00"])
        assert result.exit_code == 1
        assert "Invalid settings" in result.output
