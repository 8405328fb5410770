"""Main calculator interface.

This module provides the high-level WorkdayCalculator class that wires the
classifier, range calculator, end-date solver and work-hour calculator to a
single override set and policy configuration.
"""

from collections.abc import Iterable
from datetime import date, time
from typing import Optional

from workdaycalc.domain.models import (
    CalculationResult,
    DayVerdict,
    DayWorkDetail,
    DurationUnit,
    OverrideEntry,
)
from workdaycalc.domain.policies import (
    DefaultWeekendPolicy,
    DefaultWorkSchedulePolicy,
    WeekendPolicy,
    WorkSchedulePolicy,
)
from workdaycalc.engine.classifier import DayClassifier
from workdaycalc.engine.end_date_solver import EndDateSolver
from workdaycalc.engine.range_calculator import RangeCalculator, SequenceSelector
from workdaycalc.engine.work_hours import WorkHourCalculator


class WorkdayCalculator:
    """High-level calculator over one merged override set.

    Example:
        >>> calculator = WorkdayCalculator(repository.load_merged())
        >>> result = calculator.calculate_range(date(2025, 1, 1), date(2025, 1, 31))
        >>> result.workday_count
        17
    """

    def __init__(
        self,
        overrides: Iterable[OverrideEntry] = (),
        weekend_policy: Optional[WeekendPolicy] = None,
        schedule_policy: Optional[WorkSchedulePolicy] = None,
    ):
        """Initialize calculator with overrides and policies.

        Args:
            overrides: Merged override set (baseline plus personal).
            weekend_policy: Default weekend rule.
            schedule_policy: Daily work periods.
        """
        self.weekend_policy = weekend_policy or DefaultWeekendPolicy()
        self.schedule_policy = schedule_policy or DefaultWorkSchedulePolicy()

        self.classifier = DayClassifier(overrides, self.weekend_policy)
        self.range_calculator = RangeCalculator(self.classifier)
        self.end_date_solver = EndDateSolver(self.classifier)
        self.work_hour_calculator = WorkHourCalculator(
            self.classifier, self.schedule_policy
        )

    def classify(self, day: date) -> DayVerdict:
        return self.classifier.classify(day)

    def is_workday(self, day: date) -> bool:
        return self.classifier.is_workday(day)

    def calculate_range(self, start: date, end: date) -> CalculationResult:
        return self.range_calculator.calculate_range(start, end)

    def count_workdays(self, start: date, end: date) -> int:
        return self.range_calculator.count_workdays(start, end)

    def day_sequence_number(
        self,
        day: date,
        start: date,
        end: date,
        selector: SequenceSelector = SequenceSelector.ALL,
    ) -> Optional[int]:
        return self.range_calculator.day_sequence_number(day, start, end, selector)

    def solve_end_date(
        self,
        start: date,
        day_count: int,
        unit: DurationUnit = DurationUnit.WORKDAY,
        include_start_date: bool = True,
    ) -> date:
        return self.end_date_solver.solve_end_date(start, day_count, unit, include_start_date)

    def calculate_duration(
        self,
        start: date,
        day_count: int,
        unit: DurationUnit = DurationUnit.WORKDAY,
        include_start_date: bool = True,
    ) -> tuple[date, CalculationResult]:
        """Solve the end date of a duration and count the resulting range.

        Returns:
            Tuple of (end date, range result from start to end date).
        """
        end = self.solve_end_date(start, day_count, unit, include_start_date)
        return end, self.calculate_range(start, end)

    def calculate_day_work_minutes(
        self,
        day: date,
        requested_start: Optional[time] = None,
        requested_end: Optional[time] = None,
    ) -> DayWorkDetail:
        return self.work_hour_calculator.calculate_day_work_minutes(
            day, requested_start, requested_end
        )

    def calculate_range_work_hours(
        self,
        start: date,
        end: date,
        requested_start: Optional[time] = None,
        requested_end: Optional[time] = None,
    ) -> CalculationResult:
        return self.work_hour_calculator.calculate_range_work_hours(
            start, end, requested_start, requested_end
        )
