"""
Configuration management for the work-time calculator.
"""

from typing import Optional

from dotenv import load_dotenv
from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from worktime.models.duration import Duration
from worktime.models.policy import BreakPolicy
from worktime.readers.time_parser import parse_clock


class WorkTimeConfig(BaseSettings):
    """Configuration settings for the work-time calculator."""

    # Target Configuration
    weekly_target: str = Field(default="39:00", alias="WORKTIME_WEEKLY_TARGET")
    workdays_per_week: int = Field(default=5, gt=0, alias="WORKTIME_WORKDAYS_PER_WEEK")

    # Break Policy Configuration
    short_break_minutes: int = Field(
        default=30, ge=0, alias="WORKTIME_SHORT_BREAK_MINUTES"
    )
    long_break_minutes: int = Field(default=45, ge=0, alias="WORKTIME_LONG_BREAK_MINUTES")
    nine_hours_minutes: int = Field(default=540, gt=0, alias="WORKTIME_NINE_HOURS_MINUTES")
    ten_hours_minutes: int = Field(default=600, gt=0, alias="WORKTIME_TEN_HOURS_MINUTES")

    # Application Configuration
    debug: bool = Field(default=False, alias="DEBUG")
    log_level: str = Field(default="WARNING", alias="LOG_LEVEL")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        validate_default=True,
        extra="ignore",
    )

    @field_validator("weekly_target")
    @classmethod
    def validate_weekly_target(cls, v):
        """Ensure the weekly target is in HH:MM format."""
        parse_clock(v)
        return v.strip()

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v):
        """Ensure log level is valid."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Log level must be one of: {valid_levels}")
        return v.upper()

    @model_validator(mode="after")
    def validate_break_policy(self):
        """Ensure breaks and thresholds are ordered."""
        if self.long_break_minutes < self.short_break_minutes:
            raise ValueError("Long break must not be shorter than the short break")
        if self.ten_hours_minutes < self.nine_hours_minutes:
            raise ValueError("Ten hour cap must not be below the nine hour threshold")
        return self

    def get_break_policy(self) -> BreakPolicy:
        """Build the break policy used by the calculators."""
        return BreakPolicy(
            short_break=Duration.from_minutes(self.short_break_minutes),
            long_break=Duration.from_minutes(self.long_break_minutes),
            nine_hours=Duration.from_minutes(self.nine_hours_minutes),
            ten_hours=Duration.from_minutes(self.ten_hours_minutes),
        )


def load_config(env_file: Optional[str] = None) -> WorkTimeConfig:
    """Load configuration from environment variables and .env file."""
    if env_file:
        load_dotenv(env_file)
    else:
        load_dotenv()

    return WorkTimeConfig()


# Global configuration instance
_config: Optional[WorkTimeConfig] = None


def get_config() -> WorkTimeConfig:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = load_config()
    return _config


def reload_config(env_file: Optional[str] = None) -> WorkTimeConfig:
    """Reload configuration (useful for testing)."""
    global _config
    _config = load_config(env_file)
    return _config
