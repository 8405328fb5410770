"""Tests for input validation."""

from datetime import date

import pytest

from workdaycalc.domain.errors import InvalidInputError
from workdaycalc.validation.validator import (
    InputValidator,
    ValidationErrorType,
)


class TestInputValidator:
    """Tests for InputValidator."""

    @pytest.fixture
    def validator(self):
        return InputValidator()

    def _types(self, result):
        return [e.error_type for e in result.errors]

    def test_valid_range(self, validator):
        result = validator.validate_range(date(2025, 1, 1), date(2025, 1, 31))
        assert result.is_valid
        assert result.errors == []

    def test_single_day_range_is_valid(self, validator):
        assert validator.validate_range(date(2025, 1, 1), date(2025, 1, 1)).is_valid

    def test_missing_dates(self, validator):
        result = validator.validate_range(None, None)
        assert not result.is_valid
        assert self._types(result) == [ValidationErrorType.MISSING_DATE] * 2
        assert [e.field for e in result.errors] == ["start", "end"]

    def test_start_after_end(self, validator):
        result = validator.validate_range(date(2025, 1, 10), date(2025, 1, 1))
        assert self._types(result) == [ValidationErrorType.START_AFTER_END]

    def test_raise_if_invalid(self, validator):
        result = validator.validate_range(date(2025, 1, 10), date(2025, 1, 1))
        with pytest.raises(InvalidInputError) as exc_info:
            result.raise_if_invalid()
        assert exc_info.value.errors == result.errors

    def test_raise_if_valid_is_noop(self, validator):
        validator.validate_range(date(2025, 1, 1), date(2025, 1, 2)).raise_if_invalid()

    @pytest.mark.parametrize("count", [1, 30, "5", " 12 "])
    def test_valid_duration(self, validator, count):
        assert validator.validate_duration(date(2025, 1, 1), count).is_valid

    @pytest.mark.parametrize("count", [0, -3, "0", "-1", "abc", "", None, 2.5, True])
    def test_invalid_day_count(self, validator, count):
        result = validator.validate_duration(date(2025, 1, 1), count)
        assert self._types(result) == [ValidationErrorType.INVALID_DAY_COUNT]

    def test_duration_missing_start(self, validator):
        result = validator.validate_duration(None, 5)
        assert self._types(result) == [ValidationErrorType.MISSING_DATE]

    def test_valid_work_hours(self, validator):
        result = validator.validate_work_hours(
            date(2025, 1, 6), date(2025, 1, 8), "14:00", "10:00"
        )
        assert result.is_valid

    def test_single_day_needs_start_before_end(self, validator):
        day = date(2025, 1, 6)
        assert validator.validate_work_hours(day, day, "09:00", "17:00").is_valid

        result = validator.validate_work_hours(day, day, "17:00", "09:00")
        assert self._types(result) == [ValidationErrorType.START_NOT_BEFORE_END]

        result = validator.validate_work_hours(day, day, "09:00", "09:00")
        assert self._types(result) == [ValidationErrorType.START_NOT_BEFORE_END]

    @pytest.mark.parametrize("value", ["", None, "09", "09:", ":30", "ab:cd"])
    def test_incomplete_time(self, validator, value):
        result = validator.validate_work_hours(
            date(2025, 1, 6), date(2025, 1, 7), value, "17:00"
        )
        assert self._types(result) == [ValidationErrorType.INCOMPLETE_TIME]
        assert result.errors[0].field == "start_time"

    def test_range_errors_reported_before_times(self, validator):
        result = validator.validate_work_hours(
            date(2025, 1, 7), date(2025, 1, 6), "", ""
        )
        assert self._types(result) == [ValidationErrorType.START_AFTER_END]

    def test_custom_day(self, validator):
        assert validator.validate_custom_day(date(2025, 3, 14), "Company day").is_valid

        result = validator.validate_custom_day(None, "   ")
        assert self._types(result) == [
            ValidationErrorType.MISSING_DATE,
            ValidationErrorType.MISSING_LABEL,
        ]

    def test_error_string(self, validator):
        result = validator.validate_duration(date(2025, 1, 1), 0)
        assert str(result.errors[0]).startswith("[invalid_day_count] day_count:")
