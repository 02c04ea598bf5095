"""Browser session drivers."""

from a11y_audit.drivers.base import SessionDriver
from a11y_audit.drivers.playwright import PlaywrightDriver

__all__ = ["PlaywrightDriver", "SessionDriver"]
