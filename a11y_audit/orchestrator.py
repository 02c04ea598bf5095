"""Audit orchestrator coordinating the browser session and report writing."""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Literal, TypeAlias

from a11y_audit.config import RunConfig
from a11y_audit.drivers.base import DriverFactory
from a11y_audit.errors import AuditError, NavigationError
from a11y_audit.models.result import AuditResult
from a11y_audit.report.writer import ReportPaths, format_timestamp, write_reports

log = logging.getLogger(__name__)

SERVER_HINT = (
    "Make sure your development server is running: "
    "`npm run dev` for development or `npm run preview` for the production build"
)

AuditStatus: TypeAlias = Literal["success", "violations-found", "infrastructure-failure"]


@dataclass(frozen=True, kw_only=True)
class AuditOutcome:
    """Terminal state of one audit run."""

    status: AuditStatus
    result: AuditResult | None = None
    reports: ReportPaths | None = None
    message: str | None = None
    hint: str | None = None

    @property
    def exit_code(self) -> int:
        """Process exit code; anything but a clean page is a failure."""
        return 0 if self.status == "success" else 1


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True, kw_only=True)
class AuditOrchestrator:
    """Runs one audit: browser session, rule engine, reports."""

    config: RunConfig
    driver_factory: DriverFactory
    clock: Callable[[], datetime] = field(default=utc_now)

    async def run(self) -> AuditOutcome:
        """Run the audit once and report how it ended.

        Failures are not retried; they are logged and returned as an
        ``infrastructure-failure`` outcome.
        """
        try:
            result = await self._analyze()
        except AuditError as exc:
            return self._failure(exc)

        timestamp = format_timestamp(self.clock())
        log.info("Writing reports to %s", self.config.output_dir)
        try:
            reports = write_reports(result, timestamp, self.config)
        except AuditError as exc:
            return self._failure(exc, result=result)

        status: AuditStatus = "violations-found" if result.violations else "success"
        return AuditOutcome(status=status, result=result, reports=reports)

    async def _analyze(self) -> AuditResult:
        log.info("Starting accessibility tests against %s", self.config.url)
        async with self.driver_factory(self.config) as driver:
            result = await driver.audit()
        log.info("Analysis completed")
        return result

    def _failure(
        self, exc: AuditError, *, result: AuditResult | None = None
    ) -> AuditOutcome:
        log.error("Error running accessibility tests: %s", exc)
        log.debug("Failure details", exc_info=exc)
        hint = (
            SERVER_HINT
            if isinstance(exc, NavigationError) and exc.connection_refused
            else None
        )
        return AuditOutcome(
            status="infrastructure-failure",
            result=result,
            message=str(exc),
            hint=hint,
        )
