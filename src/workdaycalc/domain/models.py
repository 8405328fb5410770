"""Domain models for workday calculations.

This module contains the core data structures used throughout the engine:
override entries, day verdicts, work periods, and calculation results.
All of them are value objects; a recalculation always builds new instances.
"""

from dataclasses import dataclass, field
from datetime import date, datetime, time, timezone
from enum import Enum
from typing import Any, Optional


class DayKind(Enum):
    """Classification of a calendar day."""

    WORKDAY = "workday"
    HOLIDAY = "holiday"


class DurationUnit(Enum):
    """Unit used when counting a duration forward from a start date."""

    WORKDAY = "workday"
    CALENDAR_DAY = "calendar"


class CalculationMode(Enum):
    """Which calculation the user prefers to start with."""

    RANGE = "range"
    DURATION = "duration"
    WORK_HOURS = "workhours"


def parse_date(value: str) -> date:
    """Parse an ISO calendar date (YYYY-MM-DD)."""
    return date.fromisoformat(value)


def parse_clock(value: str) -> time:
    """Parse a zero-padded or unpadded 24-hour "HH:MM" clock time.

    Raises:
        ValueError: If the value is not a valid HH:MM time.
    """
    parts = value.strip().split(":")
    if len(parts) != 2 or not all(p.isdigit() for p in parts):
        raise ValueError(f"Invalid clock time: {value!r}")
    return time(int(parts[0]), int(parts[1]))


def format_clock(value: time) -> str:
    """Format a clock time as zero-padded "HH:MM"."""
    return value.strftime("%H:%M")


def minutes_between(start: time, end: time) -> int:
    """Minutes from start to end on the same day (negative if end < start)."""
    return (end.hour * 60 + end.minute) - (start.hour * 60 + start.minute)


@dataclass(frozen=True)
class OverrideEntry:
    """An exception marking one calendar date as a workday or holiday.

    Attributes:
        date: The calendar date this entry overrides (unique within a set).
        kind: Whether the date is a workday or a holiday.
        label: Display name, e.g. "New Year's Day".
        last_modified: When the entry was last written (UTC).
    """

    date: date
    kind: DayKind
    label: str = ""
    last_modified: datetime = field(
        default_factory=lambda: datetime.now(timezone.utc)
    )

    @property
    def is_holiday(self) -> bool:
        return self.kind == DayKind.HOLIDAY

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the persisted JSON shape."""
        return {
            "id": self.date.isoformat(),
            "date": self.date.isoformat(),
            "type": self.kind.value,
            "name": self.label,
            "updatedAt": self.last_modified.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "OverrideEntry":
        """Build an entry from its persisted JSON shape.

        A missing ``updatedAt`` is filled with the current time.

        Raises:
            KeyError: If ``date`` or ``type`` is missing.
            ValueError: If ``date``, ``type`` or ``updatedAt`` is malformed.
        """
        updated = data.get("updatedAt")
        if updated:
            last_modified = datetime.fromisoformat(updated.replace("Z", "+00:00"))
        else:
            last_modified = datetime.now(timezone.utc)

        return cls(
            date=parse_date(data["date"]),
            kind=DayKind(data["type"]),
            label=data.get("name") or "",
            last_modified=last_modified,
        )


@dataclass(frozen=True)
class DayVerdict:
    """Classification of a single day, derived from overrides and weekday."""

    date: date
    is_overridden: bool
    kind: DayKind
    label: str = ""

    @property
    def is_workday(self) -> bool:
        return self.kind == DayKind.WORKDAY


@dataclass(frozen=True)
class WorkPeriod:
    """A fixed daily clock interval during which work time accrues."""

    start: time
    end: time

    def __post_init__(self):
        if self.start >= self.end:
            raise ValueError(
                f"Work period start {format_clock(self.start)} must be before "
                f"end {format_clock(self.end)}"
            )

    @property
    def minutes(self) -> int:
        return minutes_between(self.start, self.end)

    def __str__(self) -> str:
        return f"{format_clock(self.start)}-{format_clock(self.end)}"


@dataclass(frozen=True)
class WorkedPeriod:
    """The part of a work period actually worked on a given day."""

    start: time
    end: time
    hours: int
    minutes: int

    @classmethod
    def between(cls, start: time, end: time) -> "WorkedPeriod":
        hours, minutes = divmod(minutes_between(start, end), 60)
        return cls(start=start, end=end, hours=hours, minutes=minutes)

    @property
    def total_minutes(self) -> int:
        return self.hours * 60 + self.minutes


@dataclass(frozen=True)
class DayWorkDetail:
    """Worked time for one day of a work-hour calculation.

    ``requested_start`` / ``requested_end`` carry the times the caller asked
    for (on boundary days, the range's original times) so that a display can
    show them even when no minutes were worked.
    """

    date: date
    hours: int
    minutes: int
    requested_start: Optional[time] = None
    requested_end: Optional[time] = None
    worked_periods: list[WorkedPeriod] = field(default_factory=list)

    @property
    def total_minutes(self) -> int:
        return self.hours * 60 + self.minutes

    @property
    def has_work_time(self) -> bool:
        return self.total_minutes > 0


@dataclass(frozen=True)
class CalculationResult:
    """Aggregated counts for a date range.

    The work-hour fields are only populated by work-hour calculations;
    plain range calculations leave them as None.
    """

    total_calendar_days: int = 0
    workday_count: int = 0
    holiday_count: int = 0
    weekend_holiday_count: int = 0
    overridden_workday_count: int = 0
    overridden_holiday_count: int = 0
    overridden_workday_entries: list[OverrideEntry] = field(default_factory=list)
    overridden_holiday_entries: list[OverrideEntry] = field(default_factory=list)
    work_hours: Optional[int] = None
    work_minutes: Optional[int] = None
    total_work_minutes: Optional[int] = None
    per_day_work_detail: Optional[list[DayWorkDetail]] = None

    @property
    def has_work_hours(self) -> bool:
        return self.total_work_minutes is not None

    def get_summary(self) -> dict:
        """Get a flat summary of the result."""
        summary = {
            "total_calendar_days": self.total_calendar_days,
            "workday_count": self.workday_count,
            "holiday_count": self.holiday_count,
            "weekend_holiday_count": self.weekend_holiday_count,
            "overridden_workday_count": self.overridden_workday_count,
            "overridden_holiday_count": self.overridden_holiday_count,
        }
        if self.has_work_hours:
            summary.update({
                "work_hours": self.work_hours,
                "work_minutes": self.work_minutes,
                "total_work_minutes": self.total_work_minutes,
            })
        return summary
