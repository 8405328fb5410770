"""Calculation engine: classification, ranges, end dates and work hours."""

from workdaycalc.engine.calculator import WorkdayCalculator
from workdaycalc.engine.classifier import DayClassifier, classify, is_workday
from workdaycalc.engine.end_date_solver import EndDateSolver, solve_end_date
from workdaycalc.engine.range_calculator import (
    RangeCalculator,
    SequenceSelector,
    calculate_range,
    count_workdays,
    iter_days,
)
from workdaycalc.engine.work_hours import (
    WorkHourCalculator,
    calculate_day_work_minutes,
    calculate_range_work_hours,
)

__all__ = [
    # Facade
    "WorkdayCalculator",
    # Components
    "DayClassifier",
    "EndDateSolver",
    "RangeCalculator",
    "SequenceSelector",
    "WorkHourCalculator",
    # Functions
    "calculate_day_work_minutes",
    "calculate_range",
    "calculate_range_work_hours",
    "classify",
    "count_workdays",
    "is_workday",
    "iter_days",
    "solve_end_date",
]
