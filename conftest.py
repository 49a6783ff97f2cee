"""
Global pytest configuration and fixtures.
"""
import datetime as dt
from typing import Dict

import pytest

import worktime.config.settings
from worktime.config import WorkTimeConfig, reload_config
from worktime.config.logging_config import reset_logging
from worktime.models import BreakPolicy, Duration


@pytest.fixture(scope="session")
def test_env_vars() -> Dict[str, str]:
    """Test environment variables for configuration."""
    return {
        'WORKTIME_WEEKLY_TARGET': '39:00',
        'WORKTIME_WORKDAYS_PER_WEEK': '5',
        'WORKTIME_SHORT_BREAK_MINUTES': '30',
        'WORKTIME_LONG_BREAK_MINUTES': '45',
        'DEBUG': 'false',
        'LOG_LEVEL': 'WARNING'
    }


@pytest.fixture
def mock_env(test_env_vars, monkeypatch, tmp_path):
    """Mock environment variables for testing."""
    # Keep a developer's .env out of the tests
    monkeypatch.chdir(tmp_path)
    for key, value in test_env_vars.items():
        monkeypatch.setenv(key, value)

    # Clear the global config to force reload with test values
    worktime.config.settings._config = None

    yield test_env_vars

    worktime.config.settings._config = None


@pytest.fixture
def test_config(mock_env) -> WorkTimeConfig:
    """Test configuration instance."""
    return reload_config()


@pytest.fixture
def policy() -> BreakPolicy:
    """Default break policy (30/45 minutes, 9h/10h)."""
    return BreakPolicy()


@pytest.fixture
def today() -> dt.date:
    """Fixed date all sessions are anchored to."""
    return dt.date(2024, 3, 4)


@pytest.fixture
def at(today):
    """Build an instant on the fixed date from hours, minutes, seconds."""

    def _at(hour: int, minute: int = 0, second: int = 0) -> dt.datetime:
        return dt.datetime.combine(today, dt.time(hour, minute, second))

    return _at


@pytest.fixture
def hm():
    """Build a Duration from hours and minutes."""

    def _hm(hours: int, minutes: int = 0) -> Duration:
        return Duration.from_components(hours, minutes)

    return _hm


@pytest.fixture(autouse=True)
def cleanup_logging():
    """Remove handlers installed by the command during a test."""
    yield
    reset_logging()


# Pytest configuration for different test types
def pytest_configure(config):
    """Configure pytest with custom markers and settings."""
    config.addinivalue_line(
        "markers", "unit: mark test as a unit test"
    )
    config.addinivalue_line(
        "markers", "cli: mark test as exercising the command line"
    )


def pytest_collection_modifyitems(config, items):
    """Modify test collection to add markers based on location."""
    for item in items:
        if "tests/unit/" in str(item.fspath):
            item.add_marker(pytest.mark.unit)

        if "tests/unit/cli/" in str(item.fspath):
            item.add_marker(pytest.mark.cli)
