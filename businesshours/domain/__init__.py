"""
Domain layer - Pure calendar logic without external dependencies.
"""

from .hour_walker import HourWalker
from .interval_aggregator import IntervalAggregator
from .models import BusinessHoursOptions, CalendarConfig, TimeRange
from .normalizer import normalize_options, parse_time_string
from .work_window import resolve_work_window

__all__ = [
    "BusinessHoursOptions",
    "CalendarConfig",
    "HourWalker",
    "IntervalAggregator",
    "TimeRange",
    "normalize_options",
    "parse_time_string",
    "resolve_work_window",
]
