"""Domain models and business rules for workday calculations."""

from workdaycalc.domain.baseline import (
    BASELINE_OVERRIDES,
    baseline_holidays,
    baseline_workdays,
    is_baseline_date,
    promote_to_baseline,
)
from workdaycalc.domain.errors import (
    InvalidInputError,
    StorageError,
    WorkdayCalcError,
    WorkdaySearchExhausted,
)
from workdaycalc.domain.models import (
    CalculationMode,
    CalculationResult,
    DayKind,
    DayVerdict,
    DayWorkDetail,
    DurationUnit,
    OverrideEntry,
    WorkedPeriod,
    WorkPeriod,
    format_clock,
    parse_clock,
    parse_date,
)
from workdaycalc.domain.policies import (
    DefaultWeekendPolicy,
    DefaultWorkSchedulePolicy,
    WeekendPolicy,
    WorkSchedulePolicy,
)

__all__ = [
    # Models
    "CalculationMode",
    "CalculationResult",
    "DayKind",
    "DayVerdict",
    "DayWorkDetail",
    "DurationUnit",
    "OverrideEntry",
    "WorkedPeriod",
    "WorkPeriod",
    "format_clock",
    "parse_clock",
    "parse_date",
    # Baseline
    "BASELINE_OVERRIDES",
    "baseline_holidays",
    "baseline_workdays",
    "is_baseline_date",
    "promote_to_baseline",
    # Errors
    "InvalidInputError",
    "StorageError",
    "WorkdayCalcError",
    "WorkdaySearchExhausted",
    # Policies
    "DefaultWeekendPolicy",
    "DefaultWorkSchedulePolicy",
    "WeekendPolicy",
    "WorkSchedulePolicy",
]
