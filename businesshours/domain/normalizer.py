"""
Normalization of raw business hours options into a CalendarConfig.

Checks run in a fixed order and the first failure is raised; a config is
never partially applied.
"""

from __future__ import annotations

import re
from collections.abc import Mapping, Set
from typing import Any, Optional, Sequence, Tuple

from .exceptions import (
    ConfigurationRangeError,
    ConfigurationTypeError,
    TimeFormatError,
)
from .instants import to_calendar_day
from .models import BusinessHoursOptions, CalendarConfig

DEFAULT_START_OF_DAY = "09:00"
DEFAULT_END_OF_DAY = "17:00"
DEFAULT_WORKING_DAYS: Tuple[int, ...] = (0, 1, 2, 3, 4)

_TIME_PATTERN = re.compile(r"^(\d+):(\d+)$")


def parse_time_string(value: Any) -> Tuple[int, int]:
    """
    Parse a time string in "HH:MM" format.

    Returns:
        Tuple of (hours, minutes)

    Raises:
        ConfigurationTypeError: If value is not a string
        TimeFormatError: If value is not two colon-separated numbers
        ConfigurationRangeError: If hours are not 0-23 or minutes not 0-59
    """
    if not isinstance(value, str):
        raise ConfigurationTypeError(f"Time must be a string, got {type(value).__name__}")

    match = _TIME_PATTERN.match(value.strip())
    if match is None:
        raise TimeFormatError(f'Invalid time format: "{value}". Expected "HH:MM" format')

    hours, minutes = int(match.group(1)), int(match.group(2))

    if not 0 <= hours <= 23 or not 0 <= minutes <= 59:
        raise ConfigurationRangeError(
            f'Invalid time value: "{value}". Hours must be 0-23 and minutes must be 0-59'
        )

    return hours, minutes


def normalize_options(options: Optional[BusinessHoursOptions] = None) -> CalendarConfig:
    """
    Apply defaults to ``options`` and validate them.

    Args:
        options: Raw options; None means all defaults

    Returns:
        A fresh CalendarConfig

    Raises:
        TimeFormatError: If a time string is malformed
        ConfigurationRangeError: If a value is out of range
        ConfigurationTypeError: If holidays is not a collection
    """
    options = options or BusinessHoursOptions()

    start_of_day = _or_default(options.start_of_day, DEFAULT_START_OF_DAY)
    end_of_day = _or_default(options.end_of_day, DEFAULT_END_OF_DAY)
    working_days = _or_default(options.working_days, DEFAULT_WORKING_DAYS)
    holidays = _or_default(options.holidays, ())

    start_hour, start_minute = parse_time_string(start_of_day)
    end_hour, end_minute = parse_time_string(end_of_day)

    start_minute_of_day = start_hour * 60 + start_minute
    end_minute_of_day = end_hour * 60 + end_minute

    if end_minute_of_day <= start_minute_of_day:
        raise ConfigurationRangeError(
            f'End of day "{end_of_day}" must be after start of day "{start_of_day}"'
        )

    return CalendarConfig(
        start_minute_of_day=start_minute_of_day,
        end_minute_of_day=end_minute_of_day,
        working_days=_validate_working_days(working_days),
        holidays=_normalize_holidays(holidays),
    )


def _or_default(value: Any, default: Any) -> Any:
    return default if value is None else value


def _validate_working_days(value: Any) -> frozenset:
    if isinstance(value, (str, bytes, Mapping)) or not isinstance(value, (Sequence, Set)):
        raise ConfigurationRangeError("working_days must be a non-empty list of weekdays")

    if len(value) == 0:
        raise ConfigurationRangeError("working_days must be a non-empty list of weekdays")

    invalid_days = [
        day for day in value
        if isinstance(day, bool) or not isinstance(day, int) or not 0 <= day <= 6
    ]
    if invalid_days:
        raise ConfigurationRangeError(
            f"working_days must contain integers between 0 (Monday) and 6 (Sunday), "
            f"got {invalid_days}"
        )

    return frozenset(value)


def _normalize_holidays(value: Any) -> frozenset:
    if isinstance(value, (str, bytes, Mapping)) or not isinstance(value, (Sequence, Set)):
        raise ConfigurationTypeError(
            f"holidays must be a list of dates, got {type(value).__name__}"
        )

    days = set()
    for holiday in value:
        try:
            day = to_calendar_day(holiday)
        except TypeError as exc:
            raise ConfigurationTypeError(f"Invalid holiday entry: {holiday!r}") from exc
        if day is None:
            raise ConfigurationRangeError(f"Invalid holiday date: {holiday!r}")
        days.add(day)

    return frozenset(days)
