"""Abstract base class for browser session drivers."""

from abc import ABC, abstractmethod
from collections.abc import Callable
from contextlib import AbstractAsyncContextManager
from dataclasses import dataclass
from typing import TypeAlias

from a11y_audit.config import RunConfig
from a11y_audit.models.result import AuditResult


@dataclass(frozen=True, kw_only=True)
class SessionDriver(ABC):
    """Drives one browser session against the configured page.

    Drivers are created through a factory returning an async context manager,
    so the browser is released however the run ends.
    """

    @abstractmethod
    async def audit(self) -> AuditResult:
        """Load the configured page and run the rule engine against it.

        Returns:
            The rule engine result, unmodified

        Raises:
            NavigationError: If the page does not load within the timeout
            AnalysisError: If the rule engine cannot be loaded or fails

        """


DriverFactory: TypeAlias = Callable[[RunConfig], AbstractAsyncContextManager[SessionDriver]]
