"""
Offsetting an instant by a signed number of business hours.

The walk has two phases. First the instant is snapped onto valid working
time in the direction of travel. Then minutes are consumed window by
window, re-snapping every time a window is exhausted. Both phases run
under fixed iteration bounds so that degenerate calendars fail loudly
instead of looping forever.
"""

from __future__ import annotations

import logging
import math
from datetime import timedelta
from numbers import Number
from typing import Any, Optional

from pendulum import DateTime

from .exceptions import AdvanceLimitExceededError, IterationLimitExceededError
from .models import CalendarConfig
from .work_window import at_minute_of_day, resolve_work_window

logger = logging.getLogger(__name__)

FORWARD = 1
BACKWARD = -1


class HourWalker:
    """
    Adds (or subtracts) business hours to an instant.

    ``MAX_DAY_ADVANCE`` bounds how many days a single snap may skip while
    looking for working time; ``MAX_ITERATIONS`` bounds how many work windows
    a single walk may consume. Either can be lowered (or raised) per
    instance, but exceeding them is always an error.
    """

    MAX_DAY_ADVANCE = 366
    MAX_ITERATIONS = 10_000

    def __init__(
        self,
        config: CalendarConfig,
        max_day_advance: Optional[int] = None,
        max_iterations: Optional[int] = None,
    ):
        self.config = config
        self.max_day_advance = (
            self.MAX_DAY_ADVANCE if max_day_advance is None else max_day_advance
        )
        self.max_iterations = (
            self.MAX_ITERATIONS if max_iterations is None else max_iterations
        )

    def add_hours(self, start: Optional[DateTime], amount: Any) -> Optional[DateTime]:
        """
        Offset ``start`` by ``amount`` business hours.

        Args:
            start: Starting instant, None if invalid
            amount: Signed, possibly fractional, number of hours

        Returns:
            The resulting instant, or None when start or amount is invalid

        Raises:
            AdvanceLimitExceededError: If no working time can be found
            IterationLimitExceededError: If the walk does not finish in time
        """
        if start is None or not is_valid_amount(amount):
            return None

        if amount == 0:
            return start

        direction = FORWARD if amount >= 0 else BACKWARD
        remaining = abs(float(amount)) * 60

        current = self.snap_to_working_time(start, direction)

        for _ in range(self.max_iterations):
            window = resolve_work_window(current, self.config)
            if window is None:
                current = self.snap_to_working_time(
                    self._day_boundary(current, direction), direction
                )
                continue

            if direction == FORWARD:
                available = (window.end - current).total_seconds() / 60
            else:
                available = (current - window.start).total_seconds() / 60

            if available >= remaining:
                return current + timedelta(minutes=remaining * direction)

            remaining -= available
            logger.debug(
                "Window %s exhausted, %.3f minutes left to walk", window, remaining
            )
            current = self.snap_to_working_time(
                self._day_boundary(current, direction), direction
            )

        logger.warning(
            "Gave up adding %s business hours to %s after %d windows",
            amount, start, self.max_iterations,
        )
        raise IterationLimitExceededError(
            "Exceeded maximum iterations while adding business hours"
        )

    def snap_to_working_time(self, instant: DateTime, direction: int) -> DateTime:
        """
        Move ``instant`` onto the nearest working moment in ``direction``.

        Going forward an instant before the window snaps to its start and an
        instant at or after its end moves on to the next day. Going backward
        it is the mirror image: at or after the end snaps to the end, before
        the start moves on to the previous day. Instants inside the window
        are returned unchanged.
        """
        current = instant

        for _ in range(self.max_day_advance):
            window = resolve_work_window(current, self.config)

            if window is None:
                current = self._day_boundary(current, direction)
                continue

            if direction == FORWARD:
                if current < window.start:
                    return window.start
                if current >= window.end:
                    current = self._day_boundary(current, FORWARD)
                    continue
                return current

            if current >= window.end:
                return window.end
            if current < window.start:
                current = self._day_boundary(current, BACKWARD)
                continue
            return current

        logger.warning(
            "No working time within %d days of %s", self.max_day_advance, instant
        )
        raise AdvanceLimitExceededError("Unable to find working time within reasonable range")

    def _day_boundary(self, instant: DateTime, direction: int) -> DateTime:
        """Window start of the next day, or window end of the previous day."""
        day = instant.add(days=direction)
        if direction == FORWARD:
            return at_minute_of_day(day, self.config.start_minute_of_day)
        return at_minute_of_day(day, self.config.end_minute_of_day)


def is_valid_amount(amount: Any) -> bool:
    """A finite real number of hours; bools and complex numbers are not."""
    if isinstance(amount, (bool, complex)) or not isinstance(amount, Number):
        return False
    try:
        return math.isfinite(float(amount))
    except (ArithmeticError, ValueError):
        return False
