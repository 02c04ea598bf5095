"""CLI entry point for the accessibility auditor."""

import argparse
import asyncio
import json
import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from a11y_audit.config import RunConfig
from a11y_audit.drivers.base import DriverFactory
from a11y_audit.drivers.playwright import PlaywrightDriver
from a11y_audit.orchestrator import AuditOrchestrator, AuditOutcome

STATUS_SYMBOLS = {
    "success": "🎉",
    "violations-found": "❌",
    "infrastructure-failure": "❗",
}


def log_results_summary(log: logging.Logger, outcome: AuditOutcome) -> None:
    """Log a formatted summary of the audit with per-violation details."""
    log.info("=" * 80)
    log.info("Test Results:")
    log.info("=" * 80)

    if outcome.result is not None:
        counts = outcome.result.counts()
        log.info("✅ Passed: %d", counts.passes)
        log.info("❌ Violations: %d", counts.violations)
        log.info("⚠️ Incomplete: %d", counts.incomplete)
        log.info("⚪ Not Applicable: %d", counts.inapplicable)

        if outcome.result.violations:
            log.info("Violations found:")
        for index, violation in enumerate(outcome.result.violations, start=1):
            log.info(
                "%d. %s (%s): %s [affected elements: %d]",
                index,
                violation.id,
                violation.impact,
                violation.description,
                len(violation.nodes),
            )

    if outcome.reports is not None:
        log.info("Reports generated:")
        log.info("  HTML: %s", outcome.reports.html)
        log.info("  JSON: %s", outcome.reports.json)

    symbol = STATUS_SYMBOLS[outcome.status]
    if outcome.status == "success":
        log.info("%s No accessibility violations found!", symbol)
    elif outcome.status == "violations-found":
        log.info("%s Accessibility violations detected!", symbol)
    else:
        log.error(
            "%s Accessibility tests could not complete: %s", symbol, outcome.message
        )
        if outcome.hint:
            log.info("💡 %s", outcome.hint)


def format_output(outcome: AuditOutcome) -> dict[str, Any]:
    """Format the audit outcome for JSON output."""
    output: dict[str, Any] = {"status": outcome.status, "exit_code": outcome.exit_code}

    if outcome.result is not None:
        counts = outcome.result.counts()
        output["counts"] = {
            "violations": counts.violations,
            "passes": counts.passes,
            "incomplete": counts.incomplete,
            "inapplicable": counts.inapplicable,
        }
        output["violations"] = [
            {
                "id": violation.id,
                "impact": violation.impact,
                "nodes": len(violation.nodes),
            }
            for violation in outcome.result.violations
        ]

    if outcome.reports is not None:
        output["reports"] = {
            "json": str(outcome.reports.json),
            "html": str(outcome.reports.html),
            "latest_json": str(outcome.reports.latest_json),
            "latest_html": str(outcome.reports.latest_html),
        }

    if outcome.message is not None:
        output["error"] = outcome.message
    if outcome.hint is not None:
        output["hint"] = outcome.hint

    return output


async def run(
    config: RunConfig,
    driver_factory: DriverFactory = PlaywrightDriver.from_config,
) -> int:
    """Run the accessibility audit and return exit code."""
    log = logging.getLogger("a11y_audit")

    orchestrator = AuditOrchestrator(config=config, driver_factory=driver_factory)
    outcome = await orchestrator.run()

    log_results_summary(log, outcome)
    print(json.dumps(format_output(outcome), indent=2))

    return outcome.exit_code


def build_config(
    url: str | None = None,
    output_dir: Path | None = None,
    timeout_ms: int | None = None,
) -> RunConfig:
    """Build the run configuration, overriding defaults where given."""
    overrides: dict[str, Any] = {
        "url": url,
        "output_dir": output_dir,
        "timeout_ms": timeout_ms,
    }
    return RunConfig(**{k: v for k, v in overrides.items() if v is not None})


def main(argv: Sequence[str] | None = None) -> None:
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Run axe-core accessibility tests against a running application"
    )
    parser.add_argument(
        "--url",
        help="Page to audit (default: the local preview server)",
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        help="Directory receiving the JSON and HTML reports (default: reports)",
    )
    parser.add_argument(
        "--timeout-ms",
        type=int,
        help="Navigation timeout in milliseconds (default: 30000)",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    try:
        config = build_config(
            url=args.url, output_dir=args.output_dir, timeout_ms=args.timeout_ms
        )
    except ValidationError as exc:
        parser.error(str(exc))

    exit_code = asyncio.run(run(config))
    sys.exit(exit_code)


if __name__ == "__main__":  # pragma: no cover
    main()
