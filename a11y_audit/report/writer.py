"""Write JSON and HTML reports for an audit result."""

import logging
import re
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path

from a11y_audit.config import RunConfig
from a11y_audit.errors import AuditError, FilesystemError, RenderError
from a11y_audit.models.result import AuditResult
from a11y_audit.report.html import render_html

log = logging.getLogger(__name__)

REPORT_PREFIX = "a11y-report"
LATEST_NAME = "latest-a11y-report"


@dataclass(frozen=True, kw_only=True)
class ReportPaths:
    """Locations of the reports produced by one run."""

    json: Path
    html: Path
    latest_json: Path
    latest_html: Path


def format_timestamp(moment: datetime) -> str:
    """Format as UTC ISO-8601 with milliseconds (e.g., 2024-01-01T00:00:00.000Z)."""
    utc = moment.astimezone(timezone.utc)
    return utc.strftime("%Y-%m-%dT%H:%M:%S.") + f"{utc.microsecond // 1000:03d}Z"


def file_safe_timestamp(timestamp: str) -> str:
    """Replace characters that are awkward in file names with dashes."""
    return re.sub(r"[:.]", "-", timestamp)


def report_paths(output_dir: Path, timestamp: str) -> ReportPaths:
    """Compute the timestamped and latest report paths."""
    stem = f"{REPORT_PREFIX}-{file_safe_timestamp(timestamp)}"
    return ReportPaths(
        json=output_dir / f"{stem}.json",
        html=output_dir / f"{stem}.html",
        latest_json=output_dir / f"{LATEST_NAME}.json",
        latest_html=output_dir / f"{LATEST_NAME}.html",
    )


def write_text(path: Path, content: str) -> None:
    try:
        path.write_text(content, encoding="utf-8")
    except OSError as exc:
        raise FilesystemError(f"Failed to write {path}: {exc}") from exc


def write_reports(
    result: AuditResult, timestamp: str, config: RunConfig
) -> ReportPaths:
    """Write the JSON and HTML reports into the configured directory.

    Each of the four files is attempted independently: a failure writing one
    does not prevent the others from being written. If the HTML cannot be
    rendered, no HTML file is written at all.

    Args:
        result: Rule engine result
        timestamp: Output of ``format_timestamp`` for this run
        config: Run configuration

    Returns:
        Paths of the written reports

    Raises:
        FilesystemError: If the directory or a report cannot be written
        RenderError: If the HTML report cannot be rendered

    """
    output_dir = config.output_dir
    try:
        output_dir.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise FilesystemError(
            f"Failed to create report directory {output_dir}: {exc}"
        ) from exc

    paths = report_paths(output_dir, timestamp)
    errors: list[AuditError] = []

    def attempt(path: Path, content: str) -> None:
        try:
            write_text(path, content)
        except FilesystemError as exc:
            log.error("Report not written: %s", exc)
            errors.append(exc)

    content = result.to_json()
    attempt(paths.json, content)
    attempt(paths.latest_json, content)

    try:
        html = render_html(result, timestamp, config)
    except RenderError as exc:
        log.error("HTML report not rendered: %s", exc)
        errors.append(exc)
    else:
        attempt(paths.html, html)
        attempt(paths.latest_html, html)

    if errors:
        raise errors[0]

    return paths
