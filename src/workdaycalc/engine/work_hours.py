"""Work-hour calculation.

Intersects a requested clock window with the daily work periods of every
workday in a range and sums the worked minutes.
"""

from collections.abc import Iterable
from dataclasses import replace
from datetime import date, time
from typing import Optional

from workdaycalc.domain.models import (
    CalculationResult,
    DayWorkDetail,
    OverrideEntry,
    WorkedPeriod,
)
from workdaycalc.domain.policies import DefaultWorkSchedulePolicy, WorkSchedulePolicy
from workdaycalc.engine.classifier import DayClassifier
from workdaycalc.engine.range_calculator import RangeCalculator, iter_days


class WorkHourCalculator:
    """Computes worked minutes per day and over a date range.

    Only the first and last day of a range are restricted by the requested
    start and end times; every day in between counts its full schedule.

    Example:
        >>> calc = WorkHourCalculator(DayClassifier())
        >>> calc.calculate_day_work_minutes(date(2025, 3, 3), time(9), time(11)).total_minutes
        120
    """

    def __init__(
        self,
        classifier: DayClassifier,
        schedule_policy: Optional[WorkSchedulePolicy] = None,
    ):
        self.classifier = classifier
        self.schedule_policy = schedule_policy or DefaultWorkSchedulePolicy()
        self.range_calculator = RangeCalculator(classifier)

    def calculate_day_work_minutes(
        self,
        day: date,
        requested_start: Optional[time] = None,
        requested_end: Optional[time] = None,
    ) -> DayWorkDetail:
        """Calculate worked time for a single day.

        Args:
            day: The day to evaluate.
            requested_start: Earliest clock time to count, or None for the
                start of each work period.
            requested_end: Latest clock time to count, or None for the end
                of each work period.

        Returns:
            DayWorkDetail with the worked periods. Holidays always yield
            zero minutes and no periods.
        """
        if not self.classifier.is_workday(day):
            return DayWorkDetail(date=day, hours=0, minutes=0)

        total_minutes = 0
        worked: list[WorkedPeriod] = []

        for period in self.schedule_policy.work_periods():
            window_start = period.start if requested_start is None else requested_start
            window_end = period.end if requested_end is None else requested_end

            overlap_start = max(window_start, period.start)
            overlap_end = min(window_end, period.end)

            if overlap_start < overlap_end:
                worked_period = WorkedPeriod.between(overlap_start, overlap_end)
                total_minutes += worked_period.total_minutes
                worked.append(worked_period)

        hours, minutes = divmod(total_minutes, 60)
        return DayWorkDetail(
            date=day,
            hours=hours,
            minutes=minutes,
            requested_start=requested_start,
            requested_end=requested_end,
            worked_periods=worked,
        )

    def calculate_range_work_hours(
        self,
        start: date,
        end: date,
        requested_start: Optional[time] = None,
        requested_end: Optional[time] = None,
    ) -> CalculationResult:
        """Calculate day counts plus worked time over [start, end].

        Boundary days always appear in ``per_day_work_detail`` (carrying the
        range's requested times even on a holiday); interior days appear
        only when they contribute minutes.
        """
        result = self.range_calculator.calculate_range(start, end)

        total_minutes = 0
        details: list[DayWorkDetail] = []

        for day in iter_days(start, end):
            is_first = day == start
            is_last = day == end

            day_start = requested_start if is_first else None
            day_end = requested_end if is_last else None

            detail = self.calculate_day_work_minutes(day, day_start, day_end)

            if is_first or is_last:
                detail = replace(
                    detail,
                    requested_start=requested_start if is_first else detail.requested_start,
                    requested_end=requested_end if is_last else detail.requested_end,
                )
            elif not detail.has_work_time:
                continue

            details.append(detail)
            total_minutes += detail.total_minutes

        work_hours, work_minutes = divmod(total_minutes, 60)
        return replace(
            result,
            work_hours=work_hours,
            work_minutes=work_minutes,
            total_work_minutes=total_minutes,
            per_day_work_detail=details,
        )


def calculate_day_work_minutes(
    day: date,
    requested_start: Optional[time] = None,
    requested_end: Optional[time] = None,
    overrides: Iterable[OverrideEntry] = (),
) -> DayWorkDetail:
    calc = WorkHourCalculator(DayClassifier(overrides))
    return calc.calculate_day_work_minutes(day, requested_start, requested_end)


def calculate_range_work_hours(
    start: date,
    end: date,
    requested_start: Optional[time] = None,
    requested_end: Optional[time] = None,
    overrides: Iterable[OverrideEntry] = (),
) -> CalculationResult:
    calc = WorkHourCalculator(DayClassifier(overrides))
    return calc.calculate_range_work_hours(start, end, requested_start, requested_end)
