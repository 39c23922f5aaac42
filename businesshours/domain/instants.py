"""
Conversions between loose instant inputs and pendulum values.

The calendar engine only ever works with ``pendulum.DateTime`` values. This
module turns whatever the caller handed in into one of those (or ``None`` when
the input is not a valid point in time) and turns results back into the
caller's representation.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Optional, Protocol, Union

import pendulum
from pendulum import DateTime

InstantLike = Union[DateTime, datetime, str, int, float]


class InstantContext(Protocol):
    """Protocol describing how inputs are read and results are produced."""

    def to_instant(self, value: DateTime) -> DateTime:
        """Move an input instant into the context's frame."""

    def construct(self, value: DateTime) -> datetime:
        """Build the result value handed back to the caller."""


@dataclass(frozen=True)
class TimezoneContext:
    """
    Evaluates the calendar in a fixed timezone.

    Inputs are converted to the timezone before any calendar logic runs, so
    "09:00" means nine o'clock local time in ``timezone``. Results are
    pendulum values in the same timezone.
    """
    timezone: str

    def to_instant(self, value: DateTime) -> DateTime:
        if value.tzinfo is None:
            # Naive values are read as wall-clock time in the context zone
            return pendulum.datetime(
                value.year, value.month, value.day,
                value.hour, value.minute, value.second, value.microsecond,
                tz=self.timezone,
            )
        return value.in_timezone(self.timezone)

    def construct(self, value: DateTime) -> DateTime:
        return self.to_instant(value)


def to_instant(value: Any, context: Optional[InstantContext] = None) -> DateTime | None:
    """
    Coerce ``value`` into a pendulum DateTime.

    Returns None when the value does not denote a valid point in time
    (``None``, NaN or infinite timestamps, unparseable strings).

    Raises:
        TypeError: If the value has a type that cannot denote an instant
    """
    instant = _coerce(value)
    if instant is not None and context is not None:
        instant = context.to_instant(instant)
    return instant


def _coerce(value: Any) -> DateTime | None:
    if value is None:
        return None

    if isinstance(value, DateTime):
        return value

    if isinstance(value, datetime):
        if value.tzinfo is None:
            return pendulum.naive(
                value.year, value.month, value.day,
                value.hour, value.minute, value.second, value.microsecond,
                fold=value.fold,
            )
        return pendulum.instance(value)

    if isinstance(value, bool):
        raise TypeError("A boolean cannot be interpreted as an instant")

    if isinstance(value, (int, float)):
        if not math.isfinite(value):
            return None
        try:
            return pendulum.from_timestamp(value)
        except (OverflowError, OSError, ValueError):
            return None

    if isinstance(value, str):
        try:
            parsed = pendulum.parse(value)
        except ValueError:
            return None
        # Durations, bare times and the like are not points in time
        return parsed if isinstance(parsed, DateTime) else None

    raise TypeError(f"Cannot interpret {type(value).__name__} as an instant")


def to_calendar_day(value: Any) -> date | None:
    """Return the calendar day (year, month, day) of a date-like value."""
    if isinstance(value, datetime):
        return date(value.year, value.month, value.day)
    if isinstance(value, date):
        return date(value.year, value.month, value.day)

    instant = to_instant(value)
    if instant is None:
        return None
    return date(instant.year, instant.month, instant.day)


def construct_from(
    reference: Any,
    value: DateTime,
    context: Optional[InstantContext] = None
) -> datetime:
    """
    Build a result instant in the same representation family as ``reference``.

    A context always wins. Stdlib datetimes come back as stdlib datetimes
    carrying the reference's tzinfo; everything else comes back as pendulum.
    """
    if context is not None:
        return context.construct(value)

    if isinstance(reference, datetime) and not isinstance(reference, DateTime):
        return datetime(
            value.year, value.month, value.day,
            value.hour, value.minute, value.second, value.microsecond,
            tzinfo=reference.tzinfo,
            fold=value.fold,
        )

    return value


def align_frames(
    start: DateTime | None,
    end: DateTime | None
) -> tuple[DateTime | None, DateTime | None]:
    """
    Bring a naive and an aware instant into one frame.

    When exactly one side is naive it is read as wall-clock time in the
    other side's timezone. Invalid (None) sides are passed through.
    """
    if start is None or end is None:
        return start, end

    if start.tzinfo is None and end.tzinfo is not None:
        return start.replace(tzinfo=end.tzinfo), end
    if end.tzinfo is None and start.tzinfo is not None:
        return start, end.replace(tzinfo=start.tzinfo)

    return start, end
