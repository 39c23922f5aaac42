"""
Tests for the interval aggregator.
"""

from datetime import date

import pendulum
import pytest

from businesshours.domain.exceptions import (
    InvalidIntervalEndError,
    InvalidIntervalStartError,
    InvertedIntervalError,
)
from businesshours.domain.interval_aggregator import IntervalAggregator
from businesshours.domain.models import BusinessHoursOptions
from businesshours.domain.normalizer import normalize_options


@pytest.fixture
def aggregator():
    """Aggregator over the default calendar."""
    return IntervalAggregator(normalize_options())


class TestIntervalAggregator:
    """Tests for IntervalAggregator."""

    def test_full_working_day(self, aggregator):
        start = pendulum.datetime(2023, 1, 2, 9, 0)   # Monday
        end = pendulum.datetime(2023, 1, 2, 17, 0)

        assert aggregator.business_hours(start, end) == 8

    def test_partial_day(self, aggregator):
        start = pendulum.datetime(2023, 1, 2, 10, 0)
        end = pendulum.datetime(2023, 1, 2, 15, 30)

        assert aggregator.business_hours(start, end) == 5.5

    def test_clips_to_working_window(self, aggregator):
        # 07:00-12:00 only counts from 09:00
        assert aggregator.business_hours(
            pendulum.datetime(2023, 1, 2, 7, 0),
            pendulum.datetime(2023, 1, 2, 12, 0),
        ) == 3

        # 15:00-20:00 only counts until 17:00
        assert aggregator.business_hours(
            pendulum.datetime(2023, 1, 2, 15, 0),
            pendulum.datetime(2023, 1, 2, 20, 0),
        ) == 2

    def test_outside_working_window_is_zero(self, aggregator):
        assert aggregator.business_hours(
            pendulum.datetime(2023, 1, 2, 18, 0),
            pendulum.datetime(2023, 1, 2, 20, 0),
        ) == 0

    def test_excludes_weekends(self, aggregator):
        # Friday 09:00 to Monday 17:00
        assert aggregator.business_hours(
            pendulum.datetime(2023, 1, 6, 9, 0),
            pendulum.datetime(2023, 1, 9, 17, 0),
        ) == 16

    def test_weekend_only_is_zero(self, aggregator):
        assert aggregator.business_hours(
            pendulum.datetime(2023, 1, 7, 9, 0),
            pendulum.datetime(2023, 1, 8, 17, 0),
        ) == 0

    def test_multiple_weeks(self, aggregator):
        assert aggregator.business_hours(
            pendulum.datetime(2023, 1, 2, 9, 0),
            pendulum.datetime(2023, 1, 13, 17, 0),
        ) == 80  # 10 working days

    def test_starting_and_ending_on_weekend(self, aggregator):
        assert aggregator.business_hours(
            pendulum.datetime(2023, 1, 7, 10, 0),   # Saturday
            pendulum.datetime(2023, 1, 9, 12, 0),   # Monday
        ) == 3
        assert aggregator.business_hours(
            pendulum.datetime(2023, 1, 6, 14, 0),   # Friday
            pendulum.datetime(2023, 1, 8, 10, 0),   # Sunday
        ) == 3

    def test_excludes_multiple_holidays(self):
        aggregator = IntervalAggregator(normalize_options(BusinessHoursOptions(
            holidays=[date(2023, 1, 3), date(2023, 1, 5)],
        )))

        assert aggregator.business_hours(
            pendulum.datetime(2023, 1, 2, 9, 0),
            pendulum.datetime(2023, 1, 6, 17, 0),
        ) == 24

    def test_sub_minute_precision(self, aggregator):
        hours = aggregator.business_hours(
            pendulum.datetime(2023, 1, 2, 10, 0, 0),
            pendulum.datetime(2023, 1, 2, 10, 0, 36),
        )

        assert hours == pytest.approx(0.01)

    def test_zero_length_interval(self, aggregator):
        moment = pendulum.datetime(2023, 1, 2, 10, 0)

        assert aggregator.business_hours(moment, moment) == 0

    def test_invalid_start_raises(self, aggregator):
        with pytest.raises(InvalidIntervalStartError):
            aggregator.business_hours(None, pendulum.datetime(2023, 1, 2, 17))

    def test_invalid_end_raises(self, aggregator):
        with pytest.raises(InvalidIntervalEndError):
            aggregator.business_hours(pendulum.datetime(2023, 1, 2, 9), None)

    def test_inverted_interval_raises(self, aggregator):
        with pytest.raises(InvertedIntervalError):
            aggregator.business_hours(
                pendulum.datetime(2023, 1, 4, 9, 0),
                pendulum.datetime(2023, 1, 2, 17, 0),
            )
