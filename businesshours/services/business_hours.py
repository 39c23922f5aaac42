"""
Public entry points for business hours calculations.

Each call coerces its inputs, builds a fresh ``CalendarConfig`` from the
options and hands off to the domain layer. No state outlives a call, so the
functions are safe to use from several threads at once.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from datetime import datetime
from typing import Any, Optional, Tuple

from ..domain.hour_walker import HourWalker, is_valid_amount
from ..domain.instants import InstantLike, align_frames, construct_from, to_instant
from ..domain.interval_aggregator import IntervalAggregator
from ..domain.models import BusinessHoursOptions
from ..domain.normalizer import normalize_options
from ..domain.predicates import is_within_working_window


def is_within_business_hours(
    instant: InstantLike,
    options: Optional[BusinessHoursOptions] = None,
    **overrides: Any,
) -> bool:
    """
    Check whether ``instant`` falls inside business hours.

    Invalid instants are never within business hours.

    Example::

        >>> is_within_business_hours(pendulum.datetime(2023, 1, 3, 10))
        True
        >>> is_within_business_hours(pendulum.datetime(2023, 1, 3, 17))
        False
    """
    options = _merge_options(options, overrides)

    current = to_instant(instant, options.context)
    if current is None:
        return False

    return is_within_working_window(current, normalize_options(options))


def business_hours_in_interval(
    interval: Any,
    options: Optional[BusinessHoursOptions] = None,
    **overrides: Any,
) -> float:
    """
    Calculate the business hours within ``interval``.

    Args:
        interval: ``(start, end)`` pair or any object with ``start`` and
            ``end`` attributes. When only one end is naive it is read
            in the other end's timezone
        options: Business hours options
        **overrides: Individual option fields, e.g. ``holidays=[...]``

    Returns:
        Fractional, non-negative hours (8.5 for eight and a half hours)

    Raises:
        IntervalError: If either end is invalid or start is after end
        ConfigurationError: If the options are invalid
    """
    options = _merge_options(options, overrides)
    raw_start, raw_end = _split_interval(interval)

    start = to_instant(raw_start, options.context)
    end = to_instant(raw_end, options.context)
    start, end = align_frames(start, end)

    aggregator = IntervalAggregator(normalize_options(options))
    return aggregator.business_hours(start, end)


def add_business_hours(
    instant: InstantLike,
    amount: float,
    options: Optional[BusinessHoursOptions] = None,
    **overrides: Any,
) -> Optional[datetime]:
    """
    Add ``amount`` business hours to ``instant``.

    Weekends, holidays and time outside the working window are skipped;
    a negative amount walks backwards. The input is never modified.

    Returns:
        A new instant in the same representation as the input, or None when
        the instant is invalid or the amount is not a finite number

    Raises:
        ConfigurationError: If the options are invalid
        SearchLimitError: If the calendar has no reachable working time
    """
    options = _merge_options(options, overrides)

    start = to_instant(instant, options.context)
    if start is None or not is_valid_amount(amount):
        return None
    if amount == 0:
        return construct_from(instant, start, options.context)

    walker = HourWalker(normalize_options(options))
    return construct_from(instant, walker.add_hours(start, amount), options.context)


def _merge_options(
    options: Optional[BusinessHoursOptions],
    overrides: dict,
) -> BusinessHoursOptions:
    options = options or BusinessHoursOptions()
    if overrides:
        options = dataclasses.replace(options, **overrides)
    return options


def _split_interval(interval: Any) -> Tuple[Any, Any]:
    if isinstance(interval, Mapping):
        return interval["start"], interval["end"]
    if hasattr(interval, "start") and hasattr(interval, "end"):
        return interval.start, interval.end

    start, end = interval
    return start, end
