"""Exceptions raised while running an accessibility audit."""


class AuditError(Exception):
    """Base class for failures that abort an audit run."""


class SessionError(AuditError):
    """Raised when the browser session cannot be started."""


class NavigationError(AuditError):
    """Raised when the target page fails to load.

    ``connection_refused`` is set when nothing is listening on the target
    address, which usually means the application server is not running.
    """

    def __init__(self, message: str, *, connection_refused: bool = False) -> None:
        super().__init__(message)
        self.connection_refused = connection_refused


class AnalysisError(AuditError):
    """Raised when the rule engine cannot be loaded or its run fails."""


class FilesystemError(AuditError):
    """Raised when a report directory or file cannot be written."""


class RenderError(AuditError):
    """Raised when an audit result cannot be rendered as HTML."""
