"""Playwright driver running axe-core in headless Chromium."""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from dataclasses import dataclass, field
from typing import Any

from playwright.async_api import Browser, Page, async_playwright
from playwright.async_api import Error as PlaywrightError
from playwright.async_api import TimeoutError as PlaywrightTimeoutError
from pydantic import ValidationError

from a11y_audit.axe_source import ensure_axe_script
from a11y_audit.config import RunConfig
from a11y_audit.drivers.base import SessionDriver
from a11y_audit.errors import AnalysisError, NavigationError, SessionError
from a11y_audit.models.result import AuditResult

log = logging.getLogger(__name__)

BROWSER_ARGS = ("--no-sandbox", "--disable-dev-shm-usage")
CONNECTION_REFUSED = "net::ERR_CONNECTION_REFUSED"

RUN_AXE_SCRIPT = """
async (options) => {
    if (!window.axe || !window.axe.run) {
        throw new Error('axe-core is not loaded');
    }
    return await window.axe.run(document, options);
}
"""


@dataclass(frozen=True, kw_only=True)
class PlaywrightDriver(SessionDriver):
    """Session driver backed by a Playwright Chromium browser."""

    config: RunConfig
    browser: Browser = field(repr=False)

    @classmethod
    @asynccontextmanager
    async def from_config(
        cls, config: RunConfig
    ) -> AsyncGenerator["PlaywrightDriver", None]:
        """Create driver with managed browser lifecycle."""
        try:
            playwright = await async_playwright().start()
        except (PlaywrightError, OSError) as exc:
            raise SessionError(f"Failed to start Playwright: {exc}") from exc

        try:
            try:
                browser = await playwright.chromium.launch(
                    headless=True, args=list(BROWSER_ARGS)
                )
            except PlaywrightError as exc:
                raise SessionError(f"Failed to launch browser: {exc}") from exc

            try:
                yield cls(config=config, browser=browser)
            finally:
                log.debug("Closing browser")
                await browser.close()
        finally:
            await playwright.stop()

    async def audit(self) -> AuditResult:
        """Navigate to the configured URL and run axe-core against it."""
        try:
            page = await self.browser.new_page(
                viewport={
                    "width": self.config.viewport.width,
                    "height": self.config.viewport.height,
                }
            )
        except PlaywrightError as exc:
            raise SessionError(f"Failed to open page: {exc.message}") from exc
        await self.navigate(page)

        log.info("Running axe-core analysis...")
        raw = await self.run_axe(page)

        try:
            return AuditResult.model_validate(raw)
        except ValidationError as exc:
            raise AnalysisError(f"Unexpected axe-core result: {exc}") from exc

    async def navigate(self, page: Page) -> None:
        """Load the page and wait for the network to go idle."""
        log.info("Navigating to %s", self.config.url)
        try:
            await page.goto(
                self.config.url,
                wait_until="networkidle",
                timeout=self.config.timeout_ms,
            )
        except PlaywrightTimeoutError as exc:
            raise NavigationError(
                f"Timed out after {self.config.timeout_ms}ms loading {self.config.url}"
            ) from exc
        except PlaywrightError as exc:
            raise NavigationError(
                f"Failed to load {self.config.url}: {exc.message}",
                connection_refused=CONNECTION_REFUSED in exc.message,
            ) from exc

    async def run_axe(self, page: Page) -> Any:
        """Inject axe-core into the page and return its raw result."""
        script_path = await ensure_axe_script(self.config)
        try:
            await page.add_script_tag(path=script_path)
            return await page.evaluate(
                RUN_AXE_SCRIPT, self.config.axe.to_run_options()
            )
        except PlaywrightError as exc:
            raise AnalysisError(f"axe-core analysis failed: {exc.message}") from exc
