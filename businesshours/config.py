"""
Configuration management using Pydantic models loaded from YAML.
"""

import logging
from datetime import date
from pathlib import Path
from typing import List, Optional

import pendulum
import yaml
from pydantic import BaseModel, Field, field_validator, model_validator

from .domain.exceptions import ConfigurationError
from .domain.instants import InstantContext, TimezoneContext
from .domain.models import BusinessHoursOptions
from .domain.normalizer import normalize_options

CONFIG_FILE_NAME = "businesshours.yaml"


class CalendarSettings(BaseModel):
    """Business calendar section of the config file."""
    start_of_day: str = "09:00"
    end_of_day: str = "17:00"
    working_days: List[int] = Field(default_factory=lambda: [0, 1, 2, 3, 4])  # Monday to Friday
    holidays: List[date] = Field(default_factory=list)

    @model_validator(mode="after")
    def validate_calendar(self) -> "CalendarSettings":
        """Run the settings through the normalizer so bad files fail on load."""
        try:
            normalize_options(self.to_options())
        except ConfigurationError as exc:
            raise ValueError(str(exc)) from exc
        return self

    def to_options(self, context: Optional[InstantContext] = None) -> BusinessHoursOptions:
        """Convert to options understood by the calendar functions."""
        return BusinessHoursOptions(
            start_of_day=self.start_of_day,
            end_of_day=self.end_of_day,
            working_days=tuple(self.working_days),
            holidays=tuple(self.holidays),
            context=context,
        )


class AppConfig(BaseModel):
    """Application configuration."""
    timezone: Optional[str] = None
    log_level: str = "WARNING"
    calendar: CalendarSettings = Field(default_factory=CalendarSettings)

    @field_validator("timezone")
    @classmethod
    def validate_timezone(cls, value: Optional[str]) -> Optional[str]:
        """Ensure the timezone name is known."""
        if value is None:
            return value
        try:
            pendulum.timezone(value)
        except (KeyError, ValueError) as exc:
            raise ValueError(f"Unknown timezone: {value}") from exc
        return value

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Accept standard logging level names in any case."""
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value}")
        return level

    def get_context(self) -> Optional[InstantContext]:
        """Get the construction context for the configured timezone."""
        if self.timezone is None:
            return None
        return TimezoneContext(self.timezone)

    def build_options(self) -> BusinessHoursOptions:
        """Get the calendar options including the timezone context."""
        return self.calendar.to_options(context=self.get_context())

    @classmethod
    def load_from_yaml(cls, config_path: Path) -> "AppConfig":
        """
        Load configuration from YAML file.

        Args:
            config_path: Path to the YAML config file

        Returns:
            AppConfig instance

        Raises:
            FileNotFoundError: If config file doesn't exist
            ValueError: If config is invalid
        """
        if not config_path.exists():
            raise FileNotFoundError(
                f"Config file not found: {config_path}\n"
                f"See businesshours.example.yaml for reference."
            )

        try:
            with open(config_path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as exc:
            raise ValueError(f"Invalid YAML in {config_path}: {exc}") from exc

        if not isinstance(data, dict):
            raise ValueError("Config file must contain a mapping at the root level.")

        return cls(**data)


def get_default_config_path() -> Path:
    """Get the default configuration file path."""
    # Look for the config in the current directory
    config_path = Path.cwd() / CONFIG_FILE_NAME

    if not config_path.exists():
        # Try in the project root (parent of the package)
        project_root = Path(__file__).parent.parent
        config_path = project_root / CONFIG_FILE_NAME

    return config_path
