"""Tests for calendar helpers."""

from datetime import date, datetime, timedelta

import pytest

from sevenday.models.week import WeekKey
from sevenday.utils.dates import (
    end_of_week,
    normalize_to_day,
    short_display,
    start_of_week,
    week_range_string,
    weeks_between,
)


class TestStartOfWeek:
    """Tests for start_of_week."""

    @pytest.mark.parametrize("offset", range(0, 21))
    def test_always_monday_and_idempotent(self, offset):
        """Every day maps to a Monday, and mapping twice changes nothing."""
        day = date(2023, 12, 20) + timedelta(days=offset)
        monday = start_of_week(day)

        assert monday.weekday() == 0
        assert monday <= day < monday + timedelta(days=7)
        assert start_of_week(monday) == monday

    def test_sunday_belongs_to_previous_monday(self):
        assert start_of_week(date(2024, 1, 7)) == date(2024, 1, 1)

    def test_crosses_year_boundary(self):
        # 2025-01-01 is a Wednesday
        assert start_of_week(date(2025, 1, 1)) == date(2024, 12, 30)

    def test_accepts_datetime(self):
        assert start_of_week(datetime(2024, 1, 10, 23, 59)) == date(2024, 1, 8)


class TestDayHelpers:
    """Tests for day-level helpers."""

    def test_normalize_strips_time(self):
        assert normalize_to_day(datetime(2024, 3, 5, 7, 30)) == date(2024, 3, 5)

    def test_normalize_leaves_date(self):
        assert normalize_to_day(date(2024, 3, 5)) == date(2024, 3, 5)

    def test_end_of_week_is_sunday(self):
        sunday = end_of_week(date(2024, 1, 3))
        assert sunday == date(2024, 1, 7)
        assert sunday.weekday() == 6


class TestWeeksBetween:
    """Tests for weeks_between."""

    def test_same_week(self):
        assert weeks_between(date(2024, 1, 1), date(2024, 1, 7)) == 0

    def test_forward(self):
        assert weeks_between(date(2024, 1, 7), date(2024, 1, 8)) == 1
        assert weeks_between(date(2024, 1, 1), date(2024, 1, 29)) == 4

    def test_signed(self):
        assert weeks_between(date(2024, 1, 29), date(2024, 1, 1)) == -4


class TestFormatting:
    """Tests for display strings."""

    def test_short_display(self):
        assert short_display(date(2025, 2, 3)) == "Mon, Feb 3"

    def test_week_range_string(self):
        assert week_range_string(date(2025, 2, 3)) == "Feb 3 – Feb 9"

    def test_week_range_across_months(self):
        assert week_range_string(date(2024, 1, 29)) == "Jan 29 – Feb 4"


class TestWeekKey:
    """Tests for WeekKey."""

    def test_same_week_equal(self):
        assert WeekKey(date(2024, 1, 2)) == WeekKey(date(2024, 1, 7))
        assert hash(WeekKey(date(2024, 1, 2))) == hash(WeekKey(date(2024, 1, 7)))

    def test_different_weeks_differ(self):
        assert WeekKey(date(2024, 1, 7)) != WeekKey(date(2024, 1, 8))

    def test_ordering(self):
        keys = [WeekKey(date(2024, 2, 1)), WeekKey(date(2024, 1, 1)), WeekKey(date(2024, 1, 15))]
        assert [k.monday for k in sorted(keys)] == [
            date(2024, 1, 1),
            date(2024, 1, 15),
            date(2024, 1, 29),
        ]

    def test_sunday_and_range(self):
        key = WeekKey(date(2025, 2, 5))
        assert key.monday == date(2025, 2, 3)
        assert key.sunday == date(2025, 2, 9)
        assert key.range_string == "Feb 3 – Feb 9"
