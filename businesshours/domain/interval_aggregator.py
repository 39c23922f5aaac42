"""
Summation of business hours inside an arbitrary interval.
"""

from __future__ import annotations

import logging
from typing import Optional

from pendulum import DateTime

from .exceptions import (
    InvalidIntervalEndError,
    InvalidIntervalStartError,
    InvertedIntervalError,
)
from .models import CalendarConfig
from .work_window import iter_work_windows

logger = logging.getLogger(__name__)


class IntervalAggregator:
    """
    Sums the overlap between an interval and the daily work windows it spans.

    Algorithm:
    1. Validate the interval
    2. Walk every calendar day from the start's day to the end's day
    3. Clip each business day's work window to the interval
    4. Add up the clipped durations in fractional hours

    Cost is linear in the number of calendar days spanned. Multi-year spans
    should be split into chunks by the caller.
    """

    def __init__(self, config: CalendarConfig):
        self.config = config

    def business_hours(
        self,
        start: Optional[DateTime],
        end: Optional[DateTime]
    ) -> float:
        """
        Calculate the business hours between ``start`` and ``end``.

        Args:
            start: Start of the interval, None if invalid
            end: End of the interval, None if invalid

        Returns:
            Non-negative fractional hours

        Raises:
            InvalidIntervalStartError: If start is not a valid instant
            InvalidIntervalEndError: If end is not a valid instant
            InvertedIntervalError: If start is after end
        """
        if start is None:
            raise InvalidIntervalStartError("Start date is invalid")
        if end is None:
            raise InvalidIntervalEndError("End date is invalid")
        if start > end:
            raise InvertedIntervalError(
                f"Start date {start} must be before or equal to end date {end}"
            )

        total_hours = 0.0
        for window in iter_work_windows(start, end, self.config):
            total_hours += window.overlap_hours(start, end)

        logger.debug("Business hours between %s and %s: %s", start, end, total_hours)
        return total_hours
