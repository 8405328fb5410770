"""Policy definitions for calendar rules.

This module contains configurable policies that define the business rules
the engine consults: which weekdays are weekend days by default, and which
daily clock intervals count as work time. Policies are kept separate from
the calculation engine to allow independent testing and easy modification.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import date, time
from typing import Optional

from workdaycalc.domain.models import WorkPeriod, parse_clock


class WeekendPolicy(ABC):
    """Abstract base class for the default weekend rule."""

    @abstractmethod
    def is_weekend(self, day: date) -> bool:
        """Check if a day is a weekend day when no override applies."""
        pass


class WorkSchedulePolicy(ABC):
    """Abstract base class for daily work periods."""

    @abstractmethod
    def work_periods(self) -> list[WorkPeriod]:
        """Get the ordered, non-overlapping work periods of a day."""
        pass

    def full_day_minutes(self) -> int:
        """Total minutes of a full, unrestricted workday."""
        return sum(p.minutes for p in self.work_periods())


@dataclass
class DefaultWeekendPolicy(WeekendPolicy):
    """Default weekend policy implementation.

    Saturday and Sunday are holidays unless overridden.
    Weekday numbers follow ``date.weekday()`` (Monday = 0).
    """

    weekend_days: frozenset[int] = frozenset({5, 6})

    def is_weekend(self, day: date) -> bool:
        return day.weekday() in self.weekend_days


@dataclass
class DefaultWorkSchedulePolicy(WorkSchedulePolicy):
    """Default work schedule implementation.

    Two fixed daily periods:
    - Morning: 08:30 - 12:30
    - Afternoon: 13:30 - 17:30

    A full day is therefore 8 hours (480 minutes).
    """

    morning: WorkPeriod = field(
        default_factory=lambda: WorkPeriod(time(8, 30), time(12, 30))
    )
    afternoon: WorkPeriod = field(
        default_factory=lambda: WorkPeriod(time(13, 30), time(17, 30))
    )

    def __post_init__(self):
        if self.morning.end > self.afternoon.start:
            raise ValueError(
                f"Morning period {self.morning} overlaps afternoon period {self.afternoon}"
            )

    def work_periods(self) -> list[WorkPeriod]:
        return [self.morning, self.afternoon]

    @classmethod
    def from_settings(
        cls, default_work_hours: Optional[dict[str, dict[str, str]]]
    ) -> "DefaultWorkSchedulePolicy":
        """Create a policy from the ``default_work_hours`` app setting.

        Args:
            default_work_hours: Mapping like
                ``{"morning": {"start": "08:30", "end": "12:30"}, "afternoon": {...}}``.
                Missing parts fall back to the defaults.
        """
        if not default_work_hours:
            return cls()

        defaults = cls()
        periods = {}
        for name, fallback in (("morning", defaults.morning), ("afternoon", defaults.afternoon)):
            hours = default_work_hours.get(name) or {}
            start = parse_clock(hours["start"]) if hours.get("start") else fallback.start
            end = parse_clock(hours["end"]) if hours.get("end") else fallback.end
            periods[name] = WorkPeriod(start, end)

        return cls(morning=periods["morning"], afternoon=periods["afternoon"])
