"""Published baseline calendar.

Public holidays and make-up workdays shared by every install. User
overrides are layered on top of this set; the engine only reads it.
"""

from datetime import date, datetime, timezone

from workdaycalc.domain.models import DayKind, OverrideEntry

_PUBLISHED = datetime(2024, 1, 1, tzinfo=timezone.utc)

_H = DayKind.HOLIDAY
_W = DayKind.WORKDAY

_CALENDAR = [
    # 2025
    ("2025-01-01", _H, "New Year's Day"),
    ("2025-01-27", _H, "Lunar New Year adjusted day off"),
    ("2025-01-28", _H, "Lunar New Year's Eve"),
    ("2025-01-29", _H, "Lunar New Year day 1"),
    ("2025-01-30", _H, "Lunar New Year day 2"),
    ("2025-01-31", _H, "Lunar New Year day 3"),
    ("2025-02-08", _W, "Lunar New Year make-up workday"),
    ("2025-02-28", _H, "Peace Memorial Day"),
    ("2025-04-03", _H, "Children's Day / Tomb Sweeping Day observed"),
    ("2025-04-04", _H, "Children's Day / Tomb Sweeping Day"),
    ("2025-05-30", _H, "Dragon Boat Festival observed"),
    ("2025-05-31", _H, "Dragon Boat Festival"),
    ("2025-09-28", _H, "Teachers' Day"),
    ("2025-09-29", _H, "Teachers' Day observed"),
    ("2025-10-06", _H, "Mid-Autumn Festival"),
    ("2025-10-10", _H, "National Day"),
    ("2025-10-24", _H, "Retrocession Day observed"),
    ("2025-10-25", _H, "Retrocession Day"),
    ("2025-12-25", _H, "Constitution Day"),
    # 2026
    ("2026-01-01", _H, "New Year's Day"),
    ("2026-02-16", _H, "Lunar New Year's Eve"),
    ("2026-02-17", _H, "Lunar New Year day 1"),
    ("2026-02-18", _H, "Lunar New Year day 2"),
    ("2026-02-19", _H, "Lunar New Year day 3"),
    ("2026-02-20", _H, "Lunar New Year day 4"),
    ("2026-02-27", _H, "Peace Memorial Day observed"),
    ("2026-02-28", _H, "Peace Memorial Day"),
    ("2026-04-03", _H, "Children's Day observed"),
    ("2026-04-04", _H, "Children's Day"),
    ("2026-04-05", _H, "Tomb Sweeping Day"),
    ("2026-04-06", _H, "Tomb Sweeping Day observed"),
    ("2026-05-01", _H, "Labour Day"),
    ("2026-06-19", _H, "Dragon Boat Festival"),
    ("2026-09-25", _H, "Mid-Autumn Festival"),
    ("2026-09-28", _H, "Teachers' Day"),
    ("2026-10-09", _H, "National Day observed"),
    ("2026-10-10", _H, "National Day"),
    ("2026-10-25", _H, "Retrocession Day"),
    ("2026-10-26", _H, "Retrocession Day observed"),
    ("2026-12-25", _H, "Constitution Day"),
]

BASELINE_OVERRIDES: tuple[OverrideEntry, ...] = tuple(
    OverrideEntry(
        date=date.fromisoformat(day),
        kind=kind,
        label=label,
        last_modified=_PUBLISHED,
    )
    for day, kind, label in _CALENDAR
)

_BASELINE_DATES = frozenset(e.date for e in BASELINE_OVERRIDES)


def baseline_holidays() -> list[OverrideEntry]:
    """Baseline entries that mark a holiday."""
    return [e for e in BASELINE_OVERRIDES if e.kind == DayKind.HOLIDAY]


def baseline_workdays() -> list[OverrideEntry]:
    """Baseline entries that mark a make-up workday."""
    return [e for e in BASELINE_OVERRIDES if e.kind == DayKind.WORKDAY]


def is_baseline_date(day: date) -> bool:
    return day in _BASELINE_DATES


def promote_to_baseline(
    personal: list[OverrideEntry],
    baseline: tuple[OverrideEntry, ...] = BASELINE_OVERRIDES,
) -> tuple[list[OverrideEntry], list[OverrideEntry]]:
    """Fold personal entries into a new baseline candidate.

    Only personal entries whose date is not already in the baseline are
    added; existing baseline entries are never replaced.

    Args:
        personal: User-specific override entries.
        baseline: Current baseline set.

    Returns:
        Tuple of (merged baseline sorted by date, newly added entries).
    """
    known = {e.date for e in baseline}
    new_entries = sorted(
        (e for e in personal if e.date not in known),
        key=lambda e: e.date,
    )
    merged = sorted([*baseline, *new_entries], key=lambda e: e.date)
    return merged, new_entries
