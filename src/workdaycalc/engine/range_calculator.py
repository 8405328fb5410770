"""Range calculation.

Walks a date range day by day and aggregates calendar-day, workday and
holiday counts, including the sub-counts driven by override entries.
"""

from collections.abc import Iterable, Iterator
from datetime import date, timedelta
from enum import Enum
from typing import Optional

from workdaycalc.domain.models import CalculationResult, DayKind, DayVerdict, OverrideEntry
from workdaycalc.engine.classifier import DayClassifier


class SequenceSelector(Enum):
    """Which days of a range get a sequence number."""

    ALL = "all"
    WORKDAYS = "workdays"
    HOLIDAYS = "holidays"
    OVERRIDDEN_HOLIDAYS = "overridden_holidays"
    WORK_HOURS = "work_hours"  # Numbered like workdays

    def matches(self, verdict: DayVerdict) -> bool:
        if self == SequenceSelector.ALL:
            return True
        if self in (SequenceSelector.WORKDAYS, SequenceSelector.WORK_HOURS):
            return verdict.kind == DayKind.WORKDAY
        if self == SequenceSelector.HOLIDAYS:
            return verdict.kind == DayKind.HOLIDAY
        return verdict.kind == DayKind.HOLIDAY and verdict.is_overridden


def iter_days(start: date, end: date) -> Iterator[date]:
    """Yield every calendar day from start to end inclusive.

    Yields nothing when start > end.
    """
    current = start
    while current <= end:
        yield current
        current += timedelta(days=1)


class RangeCalculator:
    """Aggregates day classifications over an inclusive date range.

    A reversed range (start after end) is a no-op walk and yields an
    all-zero result; rejecting it is the caller's job.

    Example:
        >>> calc = RangeCalculator(DayClassifier(BASELINE_OVERRIDES))
        >>> calc.calculate_range(date(2025, 1, 1), date(2025, 1, 1)).holiday_count
        1
    """

    def __init__(self, classifier: DayClassifier):
        self.classifier = classifier

    def calculate_range(self, start: date, end: date) -> CalculationResult:
        """Count the days of [start, end] by classification."""
        total = 0
        workdays = 0
        holidays = 0
        weekend_holidays = 0
        overridden_workdays: list[OverrideEntry] = []
        overridden_holidays: list[OverrideEntry] = []

        for day in iter_days(start, end):
            total += 1
            verdict = self.classifier.classify(day)

            if verdict.kind == DayKind.WORKDAY:
                workdays += 1
            else:
                holidays += 1

            if verdict.is_overridden:
                entry = self.classifier.override_for(day)
                if verdict.kind == DayKind.WORKDAY:
                    overridden_workdays.append(entry)
                else:
                    overridden_holidays.append(entry)
            elif self.classifier.is_weekend(day):
                weekend_holidays += 1

        return CalculationResult(
            total_calendar_days=total,
            workday_count=workdays,
            holiday_count=holidays,
            weekend_holiday_count=weekend_holidays,
            overridden_workday_count=len(overridden_workdays),
            overridden_holiday_count=len(overridden_holidays),
            overridden_workday_entries=overridden_workdays,
            overridden_holiday_entries=overridden_holidays,
        )

    def count_workdays(self, start: date, end: date) -> int:
        return sum(1 for day in iter_days(start, end) if self.classifier.is_workday(day))

    def day_sequence_number(
        self,
        day: date,
        start: date,
        end: date,
        selector: SequenceSelector = SequenceSelector.ALL,
    ) -> Optional[int]:
        """Get the 1-based position of a day among the selected days of a range.

        Args:
            day: The day to number.
            start: First day of the range (inclusive).
            end: Last day of the range (inclusive).
            selector: Which days are counted.

        Returns:
            The ordinal, or None if the day is outside the range or not
            selected.
        """
        if day < start or day > end:
            return None
        if not selector.matches(self.classifier.classify(day)):
            return None

        return sum(
            1
            for d in iter_days(start, day)
            if selector.matches(self.classifier.classify(d))
        )


def calculate_range(
    start: date, end: date, overrides: Iterable[OverrideEntry] = ()
) -> CalculationResult:
    """Count the days of [start, end] against ``overrides``."""
    return RangeCalculator(DayClassifier(overrides)).calculate_range(start, end)


def count_workdays(start: date, end: date, overrides: Iterable[OverrideEntry] = ()) -> int:
    return RangeCalculator(DayClassifier(overrides)).count_workdays(start, end)
