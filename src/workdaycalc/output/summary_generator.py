"""Plain-text summary output for calculation results.

This module creates human-readable text showing:
- Day counts by classification
- The override entries that fell inside the range
- Per-day worked time for work-hour calculations
"""

from datetime import date, time
from pathlib import Path
from typing import Optional, Union

from workdaycalc.domain.models import (
    CalculationResult,
    DayWorkDetail,
    OverrideEntry,
    format_clock,
)


def format_work_time(hours: int, minutes: int) -> str:
    """Format a duration like "7h30m", "8h" or "45m"; zero is "0m"."""
    if hours == 0 and minutes == 0:
        return "0m"

    parts = []
    if hours > 0:
        parts.append(f"{hours}h")
    if minutes > 0:
        parts.append(f"{minutes}m")
    return "".join(parts)


def format_work_time_from_minutes(total_minutes: int) -> str:
    hours, minutes = divmod(total_minutes, 60)
    return format_work_time(hours, minutes)


class SummaryGenerator:
    """Generates text summaries of calculation results."""

    def generate(
        self,
        result: CalculationResult,
        start: date,
        end: date,
        output_path: Union[str, Path],
    ) -> str:
        """Generate summary text and save to file.

        Args:
            result: The calculation to summarize.
            start: First day of the calculated range.
            end: Last day of the calculated range.
            output_path: Path to save the text file.

        Returns:
            The generated text content.
        """
        content = self._generate_content(result, start, end)
        Path(output_path).write_text(content, encoding="utf-8")
        return content

    def generate_to_string(
        self,
        result: CalculationResult,
        start: date,
        end: date,
    ) -> str:
        return self._generate_content(result, start, end)

    def _generate_content(
        self,
        result: CalculationResult,
        start: date,
        end: date,
    ) -> str:
        lines = []

        # Header
        lines.append("=" * 72)
        lines.append(f"WORKDAY CALCULATION - {start.isoformat()} to {end.isoformat()}")
        lines.append("=" * 72)
        lines.append("")

        lines.append(f"{'Calendar days:':<26}{result.total_calendar_days:>6}")
        lines.append(f"{'Workdays:':<26}{result.workday_count:>6}")
        lines.append(f"{'Holidays:':<26}{result.holiday_count:>6}")
        lines.append(f"{'  Weekend days:':<26}{result.weekend_holiday_count:>6}")
        lines.append(f"{'  Overridden holidays:':<26}{result.overridden_holiday_count:>6}")
        lines.append(f"{'Overridden workdays:':<26}{result.overridden_workday_count:>6}")

        if result.has_work_hours:
            work_time = format_work_time(result.work_hours, result.work_minutes)
            lines.append(f"{'Work time:':<26}{work_time:>6}")
        lines.append("")

        self._append_entries(lines, "OVERRIDDEN HOLIDAYS", result.overridden_holiday_entries)
        self._append_entries(lines, "OVERRIDDEN WORKDAYS", result.overridden_workday_entries)

        if result.per_day_work_detail:
            lines.append("-" * 72)
            lines.append("WORK DETAIL")
            lines.append("-" * 72)
            lines.append(f"{'Date':<15} {'Worked':>7}  {'Requested':<13} Periods")
            for detail in result.per_day_work_detail:
                lines.append(self._format_detail(detail))
            lines.append("")

        return "\n".join(lines)

    def _append_entries(
        self,
        lines: list[str],
        title: str,
        entries: list[OverrideEntry],
    ) -> None:
        if not entries:
            return
        lines.append("-" * 72)
        lines.append(title)
        lines.append("-" * 72)
        for entry in entries:
            lines.append(f"{entry.date.isoformat()} {entry.date.strftime('%a')}  {entry.label}")
        lines.append("")

    def _format_detail(self, detail: DayWorkDetail) -> str:
        day = f"{detail.date.isoformat()} {detail.date.strftime('%a')}"
        worked = format_work_time(detail.hours, detail.minutes)
        requested = f"{self._clock(detail.requested_start)}-{self._clock(detail.requested_end)}"
        periods = ", ".join(
            f"{format_clock(p.start)}-{format_clock(p.end)}" for p in detail.worked_periods
        ) or "-"
        return f"{day:<15} {worked:>7}  {requested:<13} {periods}"

    @staticmethod
    def _clock(value: Optional[time]) -> str:
        return format_clock(value) if value is not None else "--:--"
