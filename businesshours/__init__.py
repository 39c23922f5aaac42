"""
businesshours - business hours arithmetic against a working calendar.

Basic usage::

    import pendulum
    from businesshours import add_business_hours, business_hours_in_interval

    friday = pendulum.datetime(2023, 1, 6, 15, 0)
    add_business_hours(friday, 4)                       # Monday 11:00
    business_hours_in_interval((friday, friday.add(days=3)))
"""

from .domain.exceptions import (
    AdvanceLimitExceededError,
    BusinessHoursError,
    ConfigurationError,
    ConfigurationRangeError,
    ConfigurationTypeError,
    IntervalError,
    InvalidIntervalEndError,
    InvalidIntervalStartError,
    InvertedIntervalError,
    IterationLimitExceededError,
    SearchLimitError,
    TimeFormatError,
)
from .domain.instants import InstantContext, TimezoneContext
from .domain.models import BusinessHoursOptions, CalendarConfig
from .services.business_hours import (
    add_business_hours,
    business_hours_in_interval,
    is_within_business_hours,
)

__version__ = "1.0.0"

__all__ = [
    "AdvanceLimitExceededError",
    "BusinessHoursError",
    "BusinessHoursOptions",
    "CalendarConfig",
    "ConfigurationError",
    "ConfigurationRangeError",
    "ConfigurationTypeError",
    "InstantContext",
    "IntervalError",
    "InvalidIntervalEndError",
    "InvalidIntervalStartError",
    "InvertedIntervalError",
    "IterationLimitExceededError",
    "SearchLimitError",
    "TimeFormatError",
    "TimezoneContext",
    "add_business_hours",
    "business_hours_in_interval",
    "is_within_business_hours",
]
