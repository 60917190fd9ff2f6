"""Pydantic models for the report handed to renderers (versioned, stable, explicit)."""

from enum import Enum
from typing import List, Optional
from pydantic import BaseModel, Field
from ..analysis.summary import PlanSummary
from ..ingest.models import CanonicalRecord


class OutputFormat(str, Enum):
    """Supported output formats."""
    TERMINAL = "terminal"
    HTML = "html"
    MARKDOWN = "markdown"
    JSON = "json"


class PlanReport(BaseModel):
    """Report contract - canonical records plus derived summary."""
    version: str = Field(default="1.0.0", description="Output contract version")
    resources: List[CanonicalRecord] = Field(default_factory=list, description="Ordered canonical records")
    summary: PlanSummary = Field(default_factory=PlanSummary, description="Per-action counts")
    total_monthly_cost: Optional[float] = Field(default=None, description="Sum of known monthly costs")
    region: Optional[str] = Field(default=None, description="Region used for cost estimates")
    cost_estimated: bool = Field(default=False, description="True when cost data was merged")
    warnings: List[str] = Field(default_factory=list, description="Non-fatal warnings")

    @property
    def destructive(self) -> List[CanonicalRecord]:
        """Records that destroy existing infrastructure."""
        return [r for r in self.resources if r.is_destructive]

    class Config:
        """Pydantic config."""
        use_enum_values = True


class RenderOptions(BaseModel):
    """Presentation options; never affect the core computation."""
    format: OutputFormat = Field(default=OutputFormat.TERMINAL.value, description="Output format")
    out: Optional[str] = Field(default=None, description="Write output to this path instead of stdout")
    cost: bool = Field(default=True, description="Cost estimation enabled")
    summary_only: bool = Field(default=False, description="Hide the per-resource list")
    region: Optional[str] = Field(default=None, description="Region for cost estimates")

    class Config:
        """Pydantic config."""
        use_enum_values = True
