"""
Domain models for business hours calculations.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, time
from typing import Any, FrozenSet, Iterable, Optional, Sequence

from pendulum import DateTime

from .exceptions import ConfigurationRangeError
from .instants import InstantContext

MINUTES_PER_DAY = 24 * 60


@dataclass(frozen=True)
class TimeRange:
    """
    Represents an immutable time range with start and end datetime.

    Used as the work window of a single calendar day.

    Invariant: start must be before end.
    """
    start: DateTime
    end: DateTime

    def __post_init__(self):
        if self.start >= self.end:
            raise ValueError(f"Start time {self.start} must be before end time {self.end}")

    def duration_minutes(self) -> float:
        """Return the duration in (fractional) minutes."""
        return (self.end - self.start).total_seconds() / 60

    def overlap_hours(self, start: DateTime, end: DateTime) -> float:
        """
        Hours of overlap between this range and ``[start, end]``.

        Touching ranges overlap for zero hours.
        """
        overlap_start = max(self.start, start)
        overlap_end = min(self.end, end)

        if overlap_start > overlap_end:
            return 0.0

        return (overlap_end - overlap_start).total_seconds() / 3600

    def __str__(self) -> str:
        return f"{self.start.format('YYYY-MM-DD HH:mm')} - {self.end.format('HH:mm')}"


# A day's work window; None for weekends and holidays
WorkWindow = Optional[TimeRange]


@dataclass(frozen=True)
class BusinessHoursOptions:
    """
    Raw business hours options as supplied by a caller.

    ``None`` for any field means "use the default". Values are only
    checked when normalized into a :class:`CalendarConfig`.

    ``working_days`` counts from Monday: 0=Monday ... 6=Sunday, so the
    Monday to Friday default is ``(0, 1, 2, 3, 4)``. Calendars that number
    from Sunday (where Monday to Friday is ``[1..5]``) must be shifted by
    one, otherwise Saturday becomes a working day and Monday does not.
    """
    start_of_day: Optional[str] = "09:00"
    end_of_day: Optional[str] = "17:00"
    working_days: Optional[Sequence[int]] = (0, 1, 2, 3, 4)  # Monday to Friday
    holidays: Optional[Iterable[Any]] = ()
    context: Optional[InstantContext] = field(default=None, compare=False)


@dataclass(frozen=True)
class CalendarConfig:
    """
    Normalized, validated business hours rules.

    Invariant: the working window opens before it closes.
    """
    start_minute_of_day: int
    end_minute_of_day: int
    working_days: FrozenSet[int]  # 0=Monday, 6=Sunday
    holidays: FrozenSet[date] = frozenset()

    def __post_init__(self):
        if not 0 <= self.start_minute_of_day < MINUTES_PER_DAY:
            raise ConfigurationRangeError(
                f"start_minute_of_day must be between 0 and {MINUTES_PER_DAY - 1}, "
                f"got {self.start_minute_of_day}"
            )
        if not 0 <= self.end_minute_of_day < MINUTES_PER_DAY:
            raise ConfigurationRangeError(
                f"end_minute_of_day must be between 0 and {MINUTES_PER_DAY - 1}, "
                f"got {self.end_minute_of_day}"
            )
        if self.end_minute_of_day <= self.start_minute_of_day:
            raise ConfigurationRangeError("End of day must be after start of day")

    @property
    def start_time(self) -> time:
        """Get start of the working window as time object."""
        return time(*divmod(self.start_minute_of_day, 60))

    @property
    def end_time(self) -> time:
        """Get end of the working window as time object."""
        return time(*divmod(self.end_minute_of_day, 60))

    @property
    def minutes_per_day(self) -> int:
        return self.end_minute_of_day - self.start_minute_of_day

    @property
    def hours_per_day(self) -> float:
        return self.minutes_per_day / 60
