"""
Resolution of per-day work windows.
"""

from __future__ import annotations

import logging
from typing import Iterator

from pendulum import DateTime

from .models import CalendarConfig, TimeRange, WorkWindow
from .predicates import is_business_day

logger = logging.getLogger(__name__)


def at_minute_of_day(day: DateTime, minute_of_day: int) -> DateTime:
    """Return ``day`` with its time of day set to ``minute_of_day``."""
    hour, minute = divmod(minute_of_day, 60)
    return day.set(hour=hour, minute=minute, second=0, microsecond=0)


def resolve_work_window(day: DateTime, config: CalendarConfig) -> WorkWindow:
    """
    Get the working hours range for a specific day.
    Returns None if it's not a working day or it's a holiday.

    A window swallowed by a daylight saving gap (the clock skips past its
    end) also yields None; the day is treated as non-working.
    """
    if not is_business_day(day, config):
        return None

    start = at_minute_of_day(day, config.start_minute_of_day)
    end = at_minute_of_day(day, config.end_minute_of_day)

    if start >= end:
        logger.debug("Work window on %s falls into a DST gap", day.to_date_string())
        return None

    return TimeRange(start=start, end=end)


def iter_work_windows(
    start: DateTime,
    end: DateTime,
    config: CalendarConfig
) -> Iterator[TimeRange]:
    """
    Yield the work window of every business day from ``start``'s calendar
    day through ``end``'s calendar day inclusive.
    """
    current = start.start_of("day")
    last_day = end.start_of("day")

    while current <= last_day:
        window = resolve_work_window(current, config)
        if window is not None:
            yield window
        current = current.add(days=1)
