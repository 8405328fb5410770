"""Output generation for calculation results (text, PDF)."""

from workdaycalc.output.pdf_generator import PDFGenerator
from workdaycalc.output.summary_generator import (
    SummaryGenerator,
    format_work_time,
    format_work_time_from_minutes,
)

__all__ = [
    "PDFGenerator",
    "SummaryGenerator",
    "format_work_time",
    "format_work_time_from_minutes",
]
