"""Report rendering, display formatting and output sinks."""

from estate_matcher.reports.formatting import (
    Rating,
    format_currency,
    format_percent,
    investment_rating,
    yield_rating,
)
from estate_matcher.reports.report import ReportData, generate_csv_report, generate_html_report
from estate_matcher.reports.sinks import ConsoleSink, ReportFileSink

__all__ = [
    "ConsoleSink",
    "Rating",
    "ReportData",
    "ReportFileSink",
    "format_currency",
    "format_percent",
    "generate_csv_report",
    "generate_html_report",
    "investment_rating",
    "yield_rating",
]
