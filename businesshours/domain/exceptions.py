"""
Domain-specific exception hierarchy for the business hours calendar.
"""


class BusinessHoursError(Exception):
    """Base class for all calendar errors."""


class ConfigurationError(BusinessHoursError):
    """Raised when business hours options cannot be normalized."""


class TimeFormatError(ConfigurationError, ValueError):
    """Raised when a time-of-day string is not in "HH:MM" form."""


class ConfigurationRangeError(ConfigurationError, ValueError):
    """Raised when a configured value lies outside its allowed range."""


class ConfigurationTypeError(ConfigurationError, TypeError):
    """Raised when a configured value has the wrong type."""


class IntervalError(BusinessHoursError, ValueError):
    """Raised when an interval cannot be aggregated."""


class InvalidIntervalStartError(IntervalError):
    """Raised when the interval start is not a valid instant."""


class InvalidIntervalEndError(IntervalError):
    """Raised when the interval end is not a valid instant."""


class InvertedIntervalError(IntervalError):
    """Raised when the interval start lies after its end."""


class SearchLimitError(BusinessHoursError, RuntimeError):
    """
    Raised when a calendar walk exceeds one of its hard safety bounds.

    This signals a degenerate calendar (e.g. every day in the search horizon
    is a holiday) and must be treated as a hard failure.
    """


class AdvanceLimitExceededError(SearchLimitError):
    """Raised when no working time is found within the day-advance limit."""


class IterationLimitExceededError(SearchLimitError):
    """Raised when consuming hours takes more iterations than allowed."""
