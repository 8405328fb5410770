"""Tests for text and PDF output."""

from datetime import date, time

import pytest

from workdaycalc.domain.baseline import BASELINE_OVERRIDES
from workdaycalc.engine.calculator import WorkdayCalculator
from workdaycalc.engine.range_calculator import SequenceSelector
from workdaycalc.output.pdf_generator import PDFGenerator
from workdaycalc.output.summary_generator import (
    SummaryGenerator,
    format_work_time,
    format_work_time_from_minutes,
)


@pytest.fixture
def calculator():
    return WorkdayCalculator(BASELINE_OVERRIDES)


class TestFormatWorkTime:

    @pytest.mark.parametrize(
        "hours, minutes, expected",
        [(0, 0, "0m"), (8, 0, "8h"), (0, 45, "45m"), (7, 30, "7h30m"), (136, 0, "136h")],
    )
    def test_format(self, hours, minutes, expected):
        assert format_work_time(hours, minutes) == expected

    def test_from_minutes(self):
        assert format_work_time_from_minutes(780) == "13h"
        assert format_work_time_from_minutes(150) == "2h30m"


class TestSummaryGenerator:
    """Tests for SummaryGenerator."""

    def test_range_summary(self, calculator):
        start, end = date(2025, 1, 1), date(2025, 1, 31)
        text = SummaryGenerator().generate_to_string(calculator.calculate_range(start, end), start, end)

        assert "WORKDAY CALCULATION - 2025-01-01 to 2025-01-31" in text
        assert "Workdays:" in text and "17" in text
        assert "OVERRIDDEN HOLIDAYS" in text
        assert "2025-01-01 Wed  New Year's Day" in text
        assert "OVERRIDDEN WORKDAYS" not in text
        assert "Work time:" not in text
        assert "WORK DETAIL" not in text

    def test_work_hours_summary(self, calculator):
        start, end = date(2025, 1, 6), date(2025, 1, 8)
        result = calculator.calculate_range_work_hours(start, end, time(14, 0), time(10, 0))
        text = SummaryGenerator().generate_to_string(result, start, end)

        assert "Work time:" in text
        assert "13h" in text
        assert "WORK DETAIL" in text
        assert "14:00-17:30" in text
        assert "--:--" in text

    def test_generate_writes_file(self, calculator, tmp_path):
        start, end = date(2025, 2, 3), date(2025, 2, 9)
        path = tmp_path / "summary.txt"
        content = SummaryGenerator().generate(calculator.calculate_range(start, end), start, end, path)

        assert path.read_text(encoding="utf-8") == content
        assert "OVERRIDDEN WORKDAYS" in content


class TestPDFGenerator:
    """Tests for PDFGenerator."""

    def test_generate_to_buffer(self, calculator):
        pytest.importorskip("reportlab")
        start, end = date(2025, 1, 20), date(2025, 2, 10)
        result = calculator.calculate_range(start, end)

        buffer = PDFGenerator().generate_to_buffer(calculator, result, start, end)

        assert buffer.getvalue().startswith(b"%PDF")

    def test_generate_work_hours_file(self, calculator, tmp_path):
        pytest.importorskip("reportlab")
        start, end = date(2025, 1, 6), date(2025, 1, 10)
        result = calculator.calculate_range_work_hours(start, end, time(9, 0), time(16, 0))
        path = tmp_path / "hours.pdf"

        PDFGenerator().generate(
            calculator, result, start, end, path, selector=SequenceSelector.WORK_HOURS
        )

        assert path.read_bytes().startswith(b"%PDF")
