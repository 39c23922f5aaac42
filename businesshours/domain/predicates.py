"""
Pure calendar predicates over (instant, config).
"""

from __future__ import annotations

from datetime import date

from pendulum import DateTime

from .models import CalendarConfig


def is_working_day(instant: DateTime, config: CalendarConfig) -> bool:
    """Check if a given datetime falls on a configured working weekday."""
    return instant.weekday() in config.working_days


def is_holiday(instant: DateTime, config: CalendarConfig) -> bool:
    """Check if a given datetime falls on a holiday, ignoring time of day."""
    return date(instant.year, instant.month, instant.day) in config.holidays


def is_business_day(instant: DateTime, config: CalendarConfig) -> bool:
    """A working weekday that is not a holiday."""
    return is_working_day(instant, config) and not is_holiday(instant, config)


def is_within_working_window(instant: DateTime, config: CalendarConfig) -> bool:
    """
    Check if a valid instant lies inside business hours.

    The window is half-open: the start minute is inside, the end minute is not.
    Seconds are ignored, so 16:59:59 is inside a window ending at 17:00.
    """
    if not is_business_day(instant, config):
        return False

    minute_of_day = instant.hour * 60 + instant.minute
    return config.start_minute_of_day <= minute_of_day < config.end_minute_of_day
