"""Validation of calculation inputs.

The engine is made of total functions and does not re-check its inputs.
This module is the single place where user input is checked before a
calculation is run; every CLI or UI flow should validate first.
"""

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Optional, Union

from workdaycalc.domain.errors import InvalidInputError
from workdaycalc.domain.models import parse_clock


class ValidationErrorType(Enum):
    """Types of validation errors."""

    MISSING_DATE = "missing_date"
    START_AFTER_END = "start_after_end"
    INVALID_DAY_COUNT = "invalid_day_count"
    INCOMPLETE_TIME = "incomplete_time"
    START_NOT_BEFORE_END = "start_not_before_end"
    MISSING_LABEL = "missing_label"


@dataclass
class ValidationError:
    """A single validation error."""

    error_type: ValidationErrorType
    message: str
    field: Optional[str] = None

    def __str__(self) -> str:
        parts = [f"[{self.error_type.value}]"]
        if self.field:
            parts.append(f"{self.field}:")
        parts.append(self.message)
        return " ".join(parts)


@dataclass
class ValidationResult:
    """Result of validating an input."""

    is_valid: bool = True
    errors: list[ValidationError] = field(default_factory=list)

    def add_error(self, error: ValidationError) -> None:
        """Add an error and mark as invalid."""
        self.errors.append(error)
        self.is_valid = False

    def raise_if_invalid(self) -> None:
        """Raise InvalidInputError carrying the errors, if any."""
        if not self.is_valid:
            raise InvalidInputError(self.errors)


class InputValidator:
    """Validates inputs for each calculation flow.

    Example:
        >>> validator = InputValidator()
        >>> result = validator.validate_range(date(2025, 1, 10), date(2025, 1, 1))
        >>> result.is_valid
        False
    """

    def validate_range(
        self,
        start: Optional[date],
        end: Optional[date],
    ) -> ValidationResult:
        """Both dates present and start not after end."""
        result = ValidationResult()
        self._check_range(start, end, result)
        return result

    def validate_duration(
        self,
        start: Optional[date],
        day_count: Union[int, str, None],
    ) -> ValidationResult:
        """Start date present and day count a positive integer."""
        result = ValidationResult()

        if start is None:
            result.add_error(
                ValidationError(
                    error_type=ValidationErrorType.MISSING_DATE,
                    message="Start date is required",
                    field="start",
                )
            )

        count = self._as_int(day_count)
        if count is None or count <= 0:
            result.add_error(
                ValidationError(
                    error_type=ValidationErrorType.INVALID_DAY_COUNT,
                    message=f"Day count must be a positive integer, got {day_count!r}",
                    field="day_count",
                )
            )

        return result

    def validate_work_hours(
        self,
        start: Optional[date],
        end: Optional[date],
        start_time: Optional[str],
        end_time: Optional[str],
    ) -> ValidationResult:
        """Range checks plus complete clock times.

        On a single-day range the start time must be strictly before the
        end time; across several days the times are not compared.
        """
        result = ValidationResult()
        if not self._check_range(start, end, result):
            return result

        parsed = {}
        for name, value in (("start_time", start_time), ("end_time", end_time)):
            try:
                parsed[name] = parse_clock(value or "")
            except ValueError:
                result.add_error(
                    ValidationError(
                        error_type=ValidationErrorType.INCOMPLETE_TIME,
                        message=f"Hour and minute are both required (HH:MM), got {value!r}",
                        field=name,
                    )
                )

        if not result.is_valid or start != end:
            return result

        if parsed["start_time"] >= parsed["end_time"]:
            result.add_error(
                ValidationError(
                    error_type=ValidationErrorType.START_NOT_BEFORE_END,
                    message="On a single day the start time must be before the end time",
                    field="start_time",
                )
            )

        return result

    def validate_custom_day(
        self,
        day: Optional[date],
        label: Optional[str],
    ) -> ValidationResult:
        """Date and label both present."""
        result = ValidationResult()

        if day is None:
            result.add_error(
                ValidationError(
                    error_type=ValidationErrorType.MISSING_DATE,
                    message="Date is required",
                    field="date",
                )
            )

        if not label or not label.strip():
            result.add_error(
                ValidationError(
                    error_type=ValidationErrorType.MISSING_LABEL,
                    message="Label is required",
                    field="label",
                )
            )

        return result

    def _check_range(
        self,
        start: Optional[date],
        end: Optional[date],
        result: ValidationResult,
    ) -> bool:
        """Add range errors to result; return True if the range is usable."""
        for name, value in (("start", start), ("end", end)):
            if value is None:
                result.add_error(
                    ValidationError(
                        error_type=ValidationErrorType.MISSING_DATE,
                        message=f"{name.capitalize()} date is required",
                        field=name,
                    )
                )

        if start is not None and end is not None and start > end:
            result.add_error(
                ValidationError(
                    error_type=ValidationErrorType.START_AFTER_END,
                    message=f"Start date {start} is after end date {end}",
                    field="start",
                )
            )

        return result.is_valid

    @staticmethod
    def _as_int(value: Union[int, str, None]) -> Optional[int]:
        if isinstance(value, bool):
            return None
        if isinstance(value, int):
            return value
        if isinstance(value, str) and value.strip().lstrip("-").isdigit():
            return int(value)
        return None
