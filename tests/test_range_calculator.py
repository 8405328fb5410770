"""Tests for range calculation."""

from datetime import date, timedelta

import pytest

from workdaycalc.domain.baseline import BASELINE_OVERRIDES
from workdaycalc.engine.classifier import DayClassifier
from workdaycalc.engine.range_calculator import (
    RangeCalculator,
    SequenceSelector,
    calculate_range,
    count_workdays,
    iter_days,
)


@pytest.fixture
def calculator():
    """Range calculator over the published baseline."""
    return RangeCalculator(DayClassifier(BASELINE_OVERRIDES))


class TestIterDays:

    def test_inclusive(self):
        days = list(iter_days(date(2025, 1, 30), date(2025, 2, 2)))
        assert days == [
            date(2025, 1, 30),
            date(2025, 1, 31),
            date(2025, 2, 1),
            date(2025, 2, 2),
        ]

    def test_reversed_is_empty(self):
        assert list(iter_days(date(2025, 2, 2), date(2025, 1, 30))) == []


class TestCalculateRange:
    """Tests for RangeCalculator.calculate_range."""

    def test_single_holiday_override(self, calculator):
        """New Year's Day alone is one overridden holiday."""
        result = calculator.calculate_range(date(2025, 1, 1), date(2025, 1, 1))
        assert result.total_calendar_days == 1
        assert result.holiday_count == 1
        assert result.overridden_holiday_count == 1
        assert result.workday_count == 0
        assert result.weekend_holiday_count == 0

    def test_single_workday_override(self, calculator):
        """The Saturday make-up workday counts as an overridden workday."""
        result = calculator.calculate_range(date(2025, 2, 8), date(2025, 2, 8))
        assert result.workday_count == 1
        assert result.overridden_workday_count == 1
        assert result.overridden_workday_entries[0].date == date(2025, 2, 8)
        assert result.weekend_holiday_count == 0

    def test_january_2025(self, calculator):
        """January 2025: 23 weekdays minus 6 weekday holidays."""
        result = calculator.calculate_range(date(2025, 1, 1), date(2025, 1, 31))
        assert result.total_calendar_days == 31
        assert result.workday_count == 17
        assert result.holiday_count == 14
        assert result.weekend_holiday_count == 8
        assert result.overridden_holiday_count == 6
        assert [e.date for e in result.overridden_holiday_entries] == [
            date(2025, 1, 1),
            date(2025, 1, 27),
            date(2025, 1, 28),
            date(2025, 1, 29),
            date(2025, 1, 30),
            date(2025, 1, 31),
        ]

    def test_week_with_make_up_workday(self, calculator):
        result = calculator.calculate_range(date(2025, 2, 3), date(2025, 2, 9))
        assert result.total_calendar_days == 7
        assert result.workday_count == 6
        assert result.holiday_count == 1
        assert result.weekend_holiday_count == 1
        assert result.overridden_workday_count == 1

    def test_weekend_holiday_override_not_counted_as_weekend(self, calculator):
        """An overridden Saturday holiday is an override, not a weekend day."""
        result = calculator.calculate_range(date(2025, 5, 30), date(2025, 6, 1))
        assert result.holiday_count == 3
        assert result.overridden_holiday_count == 2
        assert result.weekend_holiday_count == 1
        assert result.workday_count == 0

    def test_no_overrides(self):
        result = calculate_range(date(2025, 3, 3), date(2025, 3, 9))
        assert result.workday_count == 5
        assert result.holiday_count == 2
        assert result.weekend_holiday_count == 2
        assert result.overridden_workday_entries == []
        assert result.overridden_holiday_entries == []

    def test_reversed_range_is_all_zero(self, calculator):
        """A reversed range walks no days and returns an empty result."""
        result = calculator.calculate_range(date(2025, 1, 10), date(2025, 1, 1))
        assert result.total_calendar_days == 0
        assert result.workday_count == 0
        assert result.holiday_count == 0
        assert result.overridden_holiday_entries == []

    def test_no_work_hour_fields(self, calculator):
        result = calculator.calculate_range(date(2025, 1, 1), date(2025, 1, 5))
        assert result.work_hours is None
        assert result.total_work_minutes is None
        assert result.per_day_work_detail is None
        assert result.has_work_hours is False

    def test_workdays_plus_holidays_equals_total(self, calculator):
        """The two classifications partition every range."""
        start = date(2025, 1, 1)
        for length in range(0, 400, 37):
            end = start + timedelta(days=length)
            result = calculator.calculate_range(start, end)
            assert result.workday_count + result.holiday_count == result.total_calendar_days
            assert result.total_calendar_days == length + 1

    def test_fresh_result_each_call(self, calculator):
        first = calculator.calculate_range(date(2025, 1, 1), date(2025, 1, 31))
        second = calculator.calculate_range(date(2025, 1, 1), date(2025, 1, 31))
        assert first == second
        assert first is not second
        assert first.overridden_holiday_entries is not second.overridden_holiday_entries


class TestCountWorkdays:

    def test_matches_range_result(self, calculator):
        start, end = date(2025, 1, 1), date(2025, 12, 31)
        assert calculator.count_workdays(start, end) == calculator.calculate_range(start, end).workday_count

    def test_function_form(self):
        assert count_workdays(date(2025, 3, 3), date(2025, 3, 9)) == 5


class TestDaySequenceNumber:
    """Tests for numbering days within a range."""

    START = date(2025, 1, 1)
    END = date(2025, 1, 10)

    def test_workdays(self, calculator):
        assert calculator.day_sequence_number(date(2025, 1, 2), self.START, self.END, SequenceSelector.WORKDAYS) == 1
        assert calculator.day_sequence_number(date(2025, 1, 3), self.START, self.END, SequenceSelector.WORKDAYS) == 2
        assert calculator.day_sequence_number(date(2025, 1, 6), self.START, self.END, SequenceSelector.WORKDAYS) == 3

    def test_unselected_day_is_none(self, calculator):
        assert calculator.day_sequence_number(date(2025, 1, 1), self.START, self.END, SequenceSelector.WORKDAYS) is None
        assert calculator.day_sequence_number(date(2025, 1, 4), self.START, self.END, SequenceSelector.WORKDAYS) is None

    def test_all_days(self, calculator):
        assert calculator.day_sequence_number(date(2025, 1, 4), self.START, self.END) == 4

    def test_outside_range_is_none(self, calculator):
        assert calculator.day_sequence_number(date(2025, 1, 11), self.START, self.END) is None
        assert calculator.day_sequence_number(date(2024, 12, 31), self.START, self.END) is None

    def test_holiday_selectors(self, calculator):
        assert calculator.day_sequence_number(date(2025, 1, 4), self.START, self.END, SequenceSelector.HOLIDAYS) == 2
        assert calculator.day_sequence_number(date(2025, 1, 1), self.START, self.END, SequenceSelector.OVERRIDDEN_HOLIDAYS) == 1
        assert calculator.day_sequence_number(date(2025, 1, 4), self.START, self.END, SequenceSelector.OVERRIDDEN_HOLIDAYS) is None

    def test_work_hours_numbers_like_workdays(self, calculator):
        assert calculator.day_sequence_number(date(2025, 1, 6), self.START, self.END, SequenceSelector.WORK_HOURS) == 3
