"""Day classification.

Decides whether a calendar day is a workday or a holiday by consulting the
merged override set first and falling back to the weekend rule.
"""

from collections.abc import Iterable
from datetime import date
from typing import Optional

from workdaycalc.domain.models import DayKind, DayVerdict, OverrideEntry
from workdaycalc.domain.policies import DefaultWeekendPolicy, WeekendPolicy


class DayClassifier:
    """Classifies days against an override set.

    Overrides are indexed by date on construction so lookups are O(1).
    If the iterable holds more than one entry for a date, the last one wins.

    Example:
        >>> classifier = DayClassifier(BASELINE_OVERRIDES)
        >>> classifier.classify(date(2025, 1, 1)).kind
        <DayKind.HOLIDAY: 'holiday'>
    """

    def __init__(
        self,
        overrides: Iterable[OverrideEntry] = (),
        weekend_policy: Optional[WeekendPolicy] = None,
    ):
        self.weekend_policy = weekend_policy or DefaultWeekendPolicy()
        self._index: dict[date, OverrideEntry] = {e.date: e for e in overrides}

    @property
    def overrides(self) -> list[OverrideEntry]:
        """The indexed override entries, sorted by date."""
        return [self._index[d] for d in sorted(self._index)]

    def override_for(self, day: date) -> Optional[OverrideEntry]:
        return self._index.get(day)

    def is_weekend(self, day: date) -> bool:
        return self.weekend_policy.is_weekend(day)

    def classify(self, day: date) -> DayVerdict:
        """Classify a single day.

        Total function: every calendar date gets a verdict.
        """
        entry = self._index.get(day)
        if entry is not None:
            return DayVerdict(
                date=day,
                is_overridden=True,
                kind=entry.kind,
                label=entry.label,
            )

        kind = DayKind.HOLIDAY if self.is_weekend(day) else DayKind.WORKDAY
        return DayVerdict(date=day, is_overridden=False, kind=kind, label="")

    def is_workday(self, day: date) -> bool:
        return self.classify(day).kind == DayKind.WORKDAY


def classify(
    day: date,
    overrides: Iterable[OverrideEntry] = (),
    weekend_policy: Optional[WeekendPolicy] = None,
) -> DayVerdict:
    """Classify ``day`` against ``overrides`` without keeping an index."""
    return DayClassifier(overrides, weekend_policy).classify(day)


def is_workday(day: date, overrides: Iterable[OverrideEntry] = ()) -> bool:
    return classify(day, overrides).kind == DayKind.WORKDAY
