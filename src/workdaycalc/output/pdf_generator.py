"""PDF generation for calculation output.

This module creates printable PDFs showing:
- One month grid per month the range touches, days colored by verdict
  and numbered in sequence
- A summary page with counts, override entries and worked time
"""

import calendar
from datetime import date
from io import BytesIO
from pathlib import Path
from typing import Union

from workdaycalc.domain.models import CalculationResult, DayKind, format_clock
from workdaycalc.engine.calculator import WorkdayCalculator
from workdaycalc.engine.range_calculator import SequenceSelector
from workdaycalc.output.summary_generator import format_work_time

# Color definitions (RGB tuples, 0-1 scale)
COLORS = {
    DayKind.WORKDAY: (0.85, 0.95, 0.85),  # Light green
    DayKind.HOLIDAY: (0.98, 0.85, 0.85),  # Light red
    "overridden": (0.8, 0.5, 0.1),  # Orange border
    "out_of_range": (0.95, 0.95, 0.95),  # Light gray
    "header": (0.3, 0.4, 0.6),  # Slate blue
}

WEEKDAY_HEADERS = ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]


def _months_between(start: date, end: date) -> list[tuple[int, int]]:
    months = []
    year, month = start.year, start.month
    while (year, month) <= (end.year, end.month):
        months.append((year, month))
        year, month = (year + 1, 1) if month == 12 else (year, month + 1)
    return months


class PDFGenerator:
    """Generates printable calendar PDFs for a calculated range.

    Example:
        >>> generator = PDFGenerator()
        >>> generator.generate(calculator, result, start, end, "range.pdf")
    """

    def __init__(
        self,
        page_width: float = 612,  # Letter portrait width (8.5")
        page_height: float = 792,  # Letter portrait height (11")
        margin: float = 36,  # 0.5 inch margins
    ):
        self.page_width = page_width
        self.page_height = page_height
        self.margin = margin

    def generate(
        self,
        calculator: WorkdayCalculator,
        result: CalculationResult,
        start: date,
        end: date,
        output_path: Union[str, Path],
        selector: SequenceSelector = SequenceSelector.WORKDAYS,
        include_summary: bool = True,
    ) -> None:
        """Generate the PDF and save it to a file.

        Args:
            calculator: Calculator holding the override set used for ``result``.
            result: The calculation to print.
            start: First day of the range.
            end: Last day of the range.
            output_path: Path to save the PDF.
            selector: Which days get a sequence number.
            include_summary: Whether to append the summary page.
        """
        canvas = self._canvas_module()
        c = canvas.Canvas(str(output_path), pagesize=(self.page_width, self.page_height))
        self._draw(c, calculator, result, start, end, selector, include_summary)
        c.save()

    def generate_to_buffer(
        self,
        calculator: WorkdayCalculator,
        result: CalculationResult,
        start: date,
        end: date,
        selector: SequenceSelector = SequenceSelector.WORKDAYS,
        include_summary: bool = True,
    ) -> BytesIO:
        """Generate the PDF and return it as a bytes buffer."""
        canvas = self._canvas_module()
        buffer = BytesIO()
        c = canvas.Canvas(buffer, pagesize=(self.page_width, self.page_height))
        self._draw(c, calculator, result, start, end, selector, include_summary)
        c.save()
        buffer.seek(0)
        return buffer

    @staticmethod
    def _canvas_module():
        try:
            from reportlab.pdfgen import canvas
        except ImportError:
            raise ImportError(
                "reportlab is required for PDF generation. "
                "Install with: pip install reportlab"
            )
        return canvas

    def _draw(
        self,
        c,
        calculator: WorkdayCalculator,
        result: CalculationResult,
        start: date,
        end: date,
        selector: SequenceSelector,
        include_summary: bool,
    ) -> None:
        for year, month in _months_between(start, end):
            self._draw_month_page(c, calculator, year, month, start, end, selector)
        if include_summary:
            self._draw_summary_page(c, result, start, end)

    def _draw_month_page(
        self,
        c,
        calculator: WorkdayCalculator,
        year: int,
        month: int,
        start: date,
        end: date,
        selector: SequenceSelector,
    ) -> None:
        """Draw one month grid, weeks starting on Sunday."""
        c.setFillColorRGB(0, 0, 0)
        c.setFont("Helvetica-Bold", 16)
        c.drawString(
            self.margin,
            self.page_height - self.margin - 20,
            f"{calendar.month_name[month]} {year}",
        )
        c.setFont("Helvetica", 10)
        c.drawString(
            self.margin,
            self.page_height - self.margin - 36,
            f"Range: {start.isoformat()} to {end.isoformat()}",
        )

        weeks = calendar.Calendar(firstweekday=6).monthdatescalendar(year, month)
        grid_top = self.page_height - self.margin - 70
        grid_width = self.page_width - 2 * self.margin
        cell_w = grid_width / 7
        cell_h = min(90.0, (grid_top - self.margin - 40) / len(weeks))

        # Weekday header row
        c.setFillColorRGB(*COLORS["header"])
        c.rect(self.margin, grid_top, grid_width, 16, fill=1, stroke=0)
        c.setFillColorRGB(1, 1, 1)
        c.setFont("Helvetica-Bold", 9)
        for i, name in enumerate(WEEKDAY_HEADERS):
            c.drawCentredString(self.margin + i * cell_w + cell_w / 2, grid_top + 4, name)

        for row, week in enumerate(weeks):
            y = grid_top - (row + 1) * cell_h
            for col, day in enumerate(week):
                x = self.margin + col * cell_w
                self._draw_day_cell(c, calculator, day, month, start, end, selector, x, y, cell_w, cell_h)

        self._draw_legend(c, self.margin, self.margin + 10)
        c.showPage()

    def _draw_day_cell(
        self,
        c,
        calculator: WorkdayCalculator,
        day: date,
        month: int,
        start: date,
        end: date,
        selector: SequenceSelector,
        x: float,
        y: float,
        width: float,
        height: float,
    ) -> None:
        in_range = start <= day <= end and day.month == month
        verdict = calculator.classify(day)

        fill = COLORS[verdict.kind] if in_range else COLORS["out_of_range"]
        c.setFillColorRGB(*fill)
        c.setStrokeColorRGB(0.6, 0.6, 0.6)
        c.setLineWidth(0.5)
        c.rect(x, y, width, height, fill=1, stroke=1)

        if in_range and verdict.is_overridden:
            c.setStrokeColorRGB(*COLORS["overridden"])
            c.setLineWidth(2)
            c.rect(x + 1, y + 1, width - 2, height - 2, fill=0, stroke=1)

        # Day of month
        shade = 0 if day.month == month else 0.6
        c.setFillColorRGB(shade, shade, shade)
        c.setFont("Helvetica-Bold", 10)
        c.drawString(x + 4, y + height - 12, str(day.day))

        if not in_range:
            return

        if verdict.label:
            c.setFont("Helvetica", 6)
            c.drawString(x + 4, y + height - 24, verdict.label[:24])

        number = calculator.day_sequence_number(day, start, end, selector)
        if number is not None:
            c.setFont("Helvetica-Bold", 12)
            c.drawRightString(x + width - 4, y + 4, str(number))

    def _draw_legend(self, c, x: float, y: float) -> None:
        """Draw legend for colors."""
        c.setFillColorRGB(0, 0, 0)
        c.setFont("Helvetica-Bold", 8)
        c.drawString(x, y, "Legend:")

        c.setFont("Helvetica", 7)
        current_x = x + 45
        for key, label in ((DayKind.WORKDAY, "Workday"), (DayKind.HOLIDAY, "Holiday")):
            c.setFillColorRGB(*COLORS[key])
            c.setStrokeColorRGB(0.6, 0.6, 0.6)
            c.setLineWidth(0.5)
            c.rect(current_x, y - 2, 12, 10, fill=1, stroke=1)
            c.setFillColorRGB(0, 0, 0)
            c.drawString(current_x + 15, y, label)
            current_x += 70

        c.setStrokeColorRGB(*COLORS["overridden"])
        c.setLineWidth(2)
        c.rect(current_x, y - 2, 12, 10, fill=0, stroke=1)
        c.drawString(current_x + 15, y, "Override")

    def _draw_summary_page(
        self,
        c,
        result: CalculationResult,
        start: date,
        end: date,
    ) -> None:
        """Draw summary page with counts, overrides and worked time."""
        c.setFillColorRGB(0, 0, 0)
        c.setFont("Helvetica-Bold", 16)
        c.drawString(
            self.margin,
            self.page_height - self.margin - 20,
            f"Summary - {start.isoformat()} to {end.isoformat()}",
        )

        y = self.page_height - self.margin - 60
        c.setFont("Helvetica-Bold", 12)
        c.drawString(self.margin, y, "Overview")
        y -= 20

        stats = [
            f"Calendar days: {result.total_calendar_days}",
            f"Workdays: {result.workday_count} "
            f"(overridden: {result.overridden_workday_count})",
            f"Holidays: {result.holiday_count} "
            f"(weekend: {result.weekend_holiday_count}, "
            f"overridden: {result.overridden_holiday_count})",
        ]
        if result.has_work_hours:
            stats.append(f"Work time: {format_work_time(result.work_hours, result.work_minutes)}")

        c.setFont("Helvetica", 10)
        for stat in stats:
            c.drawString(self.margin + 20, y, stat)
            y -= 15

        lines = [
            f"{e.date.isoformat()}  {e.kind.value:<8}  {e.label}"
            for e in sorted(
                result.overridden_holiday_entries + result.overridden_workday_entries,
                key=lambda e: e.date,
            )
        ]
        y = self._draw_section(c, "Overrides in range", lines, y - 20)

        if result.per_day_work_detail:
            detail_lines = []
            for d in result.per_day_work_detail:
                periods = ", ".join(
                    f"{format_clock(p.start)}-{format_clock(p.end)}" for p in d.worked_periods
                ) or "-"
                detail_lines.append(
                    f"{d.date.isoformat()}  {format_work_time(d.hours, d.minutes):>6}  {periods}"
                )
            self._draw_section(c, "Work detail", detail_lines, y - 20)

        c.showPage()

    def _draw_section(self, c, title: str, lines: list[str], y: float) -> float:
        """Draw a titled list, continuing on new pages as needed."""
        if not lines:
            return y

        c.setFont("Helvetica-Bold", 12)
        c.drawString(self.margin, y, title)
        y -= 18

        c.setFont("Courier", 9)
        for line in lines:
            if y < self.margin + 20:
                c.showPage()
                c.setFillColorRGB(0, 0, 0)
                c.setFont("Courier", 9)
                y = self.page_height - self.margin - 20
            c.drawString(self.margin + 20, y, line)
            y -= 13
        return y
