"""Exception hierarchy for workday calculations."""

from datetime import date
from typing import Optional


class WorkdayCalcError(Exception):
    """Base exception for all workdaycalc errors."""


class WorkdaySearchExhausted(WorkdayCalcError):
    """No workday found within the bounded end-date search window.

    Signals a configuration problem in the override set (for example every
    day marked as a holiday), not a transient fault.
    """

    def __init__(self, start: date, day_count: int, limit_days: int):
        self.start = start
        self.day_count = day_count
        self.limit_days = limit_days
        super().__init__(
            f"No workday found within {limit_days} days of {start.isoformat()} "
            f"while counting {day_count} workdays"
        )


class StorageError(WorkdayCalcError):
    """Persistence provider is unavailable or failed to write."""


class InvalidInputError(WorkdayCalcError):
    """Caller-side input failed validation."""

    def __init__(self, errors: Optional[list] = None):
        self.errors = list(errors or [])
        message = "; ".join(str(e) for e in self.errors) or "Invalid input"
        super().__init__(message)
