"""Models for rule engine results."""

from collections.abc import Sequence
from dataclasses import dataclass

from pydantic import Field

from a11y_audit.models.base import Model

Selector = str | Sequence[str]


class AffectedNode(Model):
    """A DOM location a finding applies to."""

    target: Sequence[Selector] = Field(
        ...,
        description=(
            "Selectors locating the element; nested lists cross shadow DOM "
            "or iframe boundaries"
        ),
    )
    html: str = Field(..., description="Serialized markup of the element")
    failure_summary: str | None = Field(
        default=None, description="Explanation of how to fix the element"
    )


class Finding(Model):
    """One rule-check result for a page load."""

    id: str = Field(..., description="Rule identifier (e.g., 'image-alt')")
    description: str = Field(..., description="What the rule checks")
    impact: str | None = Field(
        default=None, description="Severity, only meaningful on violations"
    )
    help_url: str = Field(..., description="Documentation for the rule")
    nodes: Sequence[AffectedNode] = Field(default_factory=list)


@dataclass(frozen=True, kw_only=True)
class ResultCounts:
    """Number of findings in each result category."""

    violations: int
    passes: int
    incomplete: int
    inapplicable: int


class AuditResult(Model):
    """Complete rule engine output for one page load."""

    violations: Sequence[Finding] = Field(default_factory=list)
    passes: Sequence[Finding] = Field(default_factory=list)
    incomplete: Sequence[Finding] = Field(default_factory=list)
    inapplicable: Sequence[Finding] = Field(default_factory=list)

    def counts(self) -> ResultCounts:
        """Return the size of each result category."""
        return ResultCounts(
            violations=len(self.violations),
            passes=len(self.passes),
            incomplete=len(self.incomplete),
            inapplicable=len(self.inapplicable),
        )

    def to_json(self) -> str:
        """Serialize under the engine's field names with 2-space indentation.

        Fields the engine never sent are left out rather than emitted as
        defaults.
        """
        return self.model_dump_json(indent=2, by_alias=True, exclude_unset=True)
