"""Tests for the audit orchestrator."""

from datetime import datetime, timezone
from pathlib import Path
from unittest.mock import AsyncMock, Mock

import pytest

from a11y_audit.config import RunConfig
from a11y_audit.drivers.base import SessionDriver
from a11y_audit.errors import AnalysisError, NavigationError, SessionError
from a11y_audit.models.result import AuditResult
from a11y_audit.orchestrator import SERVER_HINT, AuditOrchestrator, AuditOutcome
from a11y_audit.testing import payloads
from a11y_audit.testing.factories import FindingFactory

NOW = datetime(2024, 1, 1, tzinfo=timezone.utc)


@pytest.fixture
def config(tmp_path: Path) -> RunConfig:
    """Create configuration writing into a temporary directory."""
    return RunConfig(output_dir=tmp_path / "reports")


@pytest.fixture
def driver_mock() -> Mock:
    """Create mock driver returning an empty result."""
    driver = Mock(spec=SessionDriver)
    driver.audit = AsyncMock(
        return_value=AuditResult.model_validate(payloads.axe_results())
    )
    return driver


@pytest.fixture
def driver_cm(driver_mock: Mock) -> AsyncMock:
    """Create mock async context manager that yields the driver."""
    cm = AsyncMock()
    cm.__aenter__.return_value = driver_mock
    cm.__aexit__.return_value = None
    return cm


@pytest.fixture
def orchestrator(config: RunConfig, driver_cm: AsyncMock) -> AuditOrchestrator:
    """Create orchestrator with mock driver factory and fixed clock."""
    return AuditOrchestrator(
        config=config,
        driver_factory=Mock(return_value=driver_cm),
        clock=lambda: NOW,
    )


@pytest.mark.parametrize(
    ("status", "exit_code"),
    [
        ("success", 0),
        ("violations-found", 1),
        ("infrastructure-failure", 1),
    ],
)
def test_outcome_exit_code(status: str, exit_code: int) -> None:
    """Only a clean page exits with zero."""
    assert AuditOutcome(status=status).exit_code == exit_code  # type: ignore[arg-type]


async def test_success_writes_reports(
    orchestrator: AuditOrchestrator, config: RunConfig, driver_cm: AsyncMock
) -> None:
    """A page without violations succeeds and writes all reports."""
    outcome = await orchestrator.run()

    assert outcome.status == "success"
    assert outcome.exit_code == 0
    assert outcome.reports is not None
    assert outcome.reports.json.name == "a11y-report-2024-01-01T00-00-00-000Z.json"
    assert outcome.reports.latest_html.exists()
    orchestrator.driver_factory.assert_called_once_with(config)  # type: ignore[attr-defined]
    driver_cm.__aexit__.assert_awaited_once()


async def test_violations_found(
    orchestrator: AuditOrchestrator, driver_mock: Mock
) -> None:
    """Violations produce a violations-found outcome with reports."""
    driver_mock.audit.return_value = AuditResult(
        violations=FindingFactory.batch(size=2)
    )

    outcome = await orchestrator.run()

    assert outcome.status == "violations-found"
    assert outcome.exit_code == 1
    assert outcome.result is not None
    assert len(outcome.result.violations) == 2
    assert outcome.reports is not None


async def test_connection_refused_adds_hint(
    orchestrator: AuditOrchestrator,
    driver_mock: Mock,
    driver_cm: AsyncMock,
    config: RunConfig,
) -> None:
    """A refused connection fails with a hint and writes nothing."""
    driver_mock.audit.side_effect = NavigationError(
        "net::ERR_CONNECTION_REFUSED", connection_refused=True
    )

    outcome = await orchestrator.run()

    assert outcome.status == "infrastructure-failure"
    assert outcome.exit_code == 1
    assert outcome.hint == SERVER_HINT
    assert outcome.result is None
    assert outcome.reports is None
    assert not config.output_dir.exists()
    driver_cm.__aexit__.assert_awaited_once()


async def test_navigation_timeout_has_no_hint(
    orchestrator: AuditOrchestrator, driver_mock: Mock
) -> None:
    """Timeouts are reported without the server hint."""
    driver_mock.audit.side_effect = NavigationError("Timed out")

    outcome = await orchestrator.run()

    assert outcome.status == "infrastructure-failure"
    assert outcome.message == "Timed out"
    assert outcome.hint is None


async def test_analysis_error(
    orchestrator: AuditOrchestrator, driver_mock: Mock, config: RunConfig
) -> None:
    """Rule engine failures are infrastructure failures."""
    driver_mock.audit.side_effect = AnalysisError("axe-core analysis failed")

    outcome = await orchestrator.run()

    assert outcome.status == "infrastructure-failure"
    assert outcome.message == "axe-core analysis failed"
    assert not config.output_dir.exists()


async def test_session_error(
    config: RunConfig, driver_cm: AsyncMock
) -> None:
    """A browser that cannot start is an infrastructure failure."""
    driver_cm.__aenter__.side_effect = SessionError("Failed to launch browser")
    orchestrator = AuditOrchestrator(
        config=config, driver_factory=Mock(return_value=driver_cm), clock=lambda: NOW
    )

    outcome = await orchestrator.run()

    assert outcome.status == "infrastructure-failure"
    assert outcome.message == "Failed to launch browser"


async def test_page_session_error(
    orchestrator: AuditOrchestrator,
    driver_mock: Mock,
    driver_cm: AsyncMock,
    config: RunConfig,
) -> None:
    """A page that cannot be opened is an infrastructure failure."""
    driver_mock.audit.side_effect = SessionError("Failed to open page: closed")

    outcome = await orchestrator.run()

    assert outcome.status == "infrastructure-failure"
    assert outcome.message == "Failed to open page: closed"
    assert outcome.exit_code == 1
    driver_cm.__aexit__.assert_awaited_once()
    assert not config.output_dir.exists()


async def test_render_error_keeps_result(
    orchestrator: AuditOrchestrator, driver_mock: Mock
) -> None:
    """A report failure is an infrastructure failure that keeps the result."""
    driver_mock.audit.return_value = AuditResult.model_validate(
        payloads.axe_results(violations=[payloads.rule(impact="extreme")])
    )

    outcome = await orchestrator.run()

    assert outcome.status == "infrastructure-failure"
    assert outcome.result is not None
    assert outcome.reports is None
    assert "extreme" in (outcome.message or "")


async def test_unexpected_errors_propagate(
    orchestrator: AuditOrchestrator, driver_mock: Mock, driver_cm: AsyncMock
) -> None:
    """Programming errors are not turned into outcomes."""
    driver_mock.audit.side_effect = ValueError("bug")

    with pytest.raises(ValueError, match="bug"):
        await orchestrator.run()

    driver_cm.__aexit__.assert_awaited_once()
