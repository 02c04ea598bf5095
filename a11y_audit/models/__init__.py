"""Data models shared across the auditor."""

from a11y_audit.models.result import AffectedNode, AuditResult, Finding

__all__ = ["AffectedNode", "AuditResult", "Finding"]
