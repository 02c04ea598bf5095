"""Configuration for an audit run."""

from collections.abc import Sequence
from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, PositiveFloat, PositiveInt

AXE_SCRIPT_URL = "https://cdnjs.cloudflare.com/ajax/libs/axe-core/4.9.1/axe.min.js"


class FrozenConfig(BaseModel):
    """Immutable configuration model."""

    model_config = ConfigDict(frozen=True)


class Viewport(FrozenConfig):
    """Fixed page dimensions so layout-dependent rules are reproducible."""

    width: PositiveInt = 1280
    height: PositiveInt = 720


class RunOnly(FrozenConfig):
    """Rule filter passed to ``axe.run``."""

    type: Literal["tag", "rule"] = "tag"
    values: Sequence[str]


class AxeOptions(FrozenConfig):
    """Rule selection for the axe-core engine."""

    # WCAG 2.1 Level AA
    tags: Sequence[str] = ("wcag2a", "wcag2aa", "wcag21aa")
    run_only: RunOnly | None = RunOnly(
        type="tag", values=("wcag2a", "wcag2aa", "wcag21aa", "best-practice")
    )

    def to_run_options(self) -> dict[str, Any]:
        """Build the options object for ``axe.run``.

        ``run_only`` wins when set, otherwise ``tags`` is used as a tag filter.
        """
        run_only = self.run_only or RunOnly(type="tag", values=self.tags)
        return {"runOnly": {"type": run_only.type, "values": list(run_only.values)}}


class RunConfig(FrozenConfig):
    """Everything an audit run needs, resolved once at startup."""

    url: str = Field(default="http://localhost:4173", description="Page to audit")
    output_dir: Path = Field(
        default=Path("reports"), description="Directory receiving the reports"
    )
    timeout_ms: PositiveInt = Field(
        default=30000, description="Navigation deadline in milliseconds"
    )
    viewport: Viewport = Viewport()
    axe: AxeOptions = AxeOptions()
    axe_script_url: str = AXE_SCRIPT_URL
    axe_cache_dir: Path = Path(".cache") / "a11y-audit"
    axe_download_timeout_s: PositiveFloat = Field(
        default=20.0, description="Deadline for downloading axe-core in seconds"
    )
    standards_label: str = "WCAG 2.1 Level AA"
