"""End-date solving.

Given a start date and a day count, finds the date on which the count is
reached, either in plain calendar days or in workdays.
"""

from collections.abc import Iterable
from datetime import date, timedelta

from workdaycalc.domain.errors import WorkdaySearchExhausted
from workdaycalc.domain.models import DurationUnit, OverrideEntry
from workdaycalc.engine.classifier import DayClassifier

# Slack on top of 7 days per requested workday, enough to cross a long
# holiday break even when only one workday is requested.
SEARCH_PADDING_DAYS = 366


class EndDateSolver:
    """Finds the end date of a duration by simulation.

    Calendar-day durations are plain date arithmetic and ignore overrides.
    Workday durations walk forward one day at a time and count only days
    the classifier calls workdays.
    """

    def __init__(self, classifier: DayClassifier, padding_days: int = SEARCH_PADDING_DAYS):
        self.classifier = classifier
        self.padding_days = padding_days

    def search_limit(self, day_count: int) -> int:
        """Maximum number of calendar days walked for a workday search."""
        return day_count * 7 + self.padding_days

    def solve_end_date(
        self,
        start: date,
        day_count: int,
        unit: DurationUnit = DurationUnit.WORKDAY,
        include_start_date: bool = True,
    ) -> date:
        """Find the date on which the ``day_count``-th counted day falls.

        Args:
            start: Start date.
            day_count: Positive number of days to count. Callers validate it.
            unit: Count workdays or calendar days.
            include_start_date: Whether the start date itself is day 1.

        Returns:
            The last counted day (inclusive).

        Raises:
            WorkdaySearchExhausted: If fewer than ``day_count`` workdays
                exist within the search limit.
        """
        if unit == DurationUnit.CALENDAR_DAY:
            offset = day_count - 1 if include_start_date else day_count
            return start + timedelta(days=offset)

        current = start if include_start_date else start + timedelta(days=1)
        limit = self.search_limit(day_count)
        count = 0

        for _ in range(limit):
            if self.classifier.is_workday(current):
                count += 1
                if count >= day_count:
                    return current
            current += timedelta(days=1)

        raise WorkdaySearchExhausted(start, day_count, limit)


def solve_end_date(
    start: date,
    day_count: int,
    unit: DurationUnit = DurationUnit.WORKDAY,
    overrides: Iterable[OverrideEntry] = (),
    include_start_date: bool = True,
) -> date:
    """Solve an end date against ``overrides``."""
    solver = EndDateSolver(DayClassifier(overrides))
    return solver.solve_end_date(start, day_count, unit, include_start_date)
