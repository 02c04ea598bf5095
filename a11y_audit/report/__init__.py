"""JSON and HTML report generation."""

from a11y_audit.report.html import render_html
from a11y_audit.report.writer import (
    ReportPaths,
    file_safe_timestamp,
    format_timestamp,
    write_reports,
)

__all__ = [
    "ReportPaths",
    "file_safe_timestamp",
    "format_timestamp",
    "render_html",
    "write_reports",
]
