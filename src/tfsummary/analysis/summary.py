"""Reduce canonical records to per-action counts and cost totals."""

from typing import Iterable, Optional, Sequence
from pydantic import BaseModel, Field
from ..ingest.models import CanonicalRecord, ResourceAction


class PlanSummary(BaseModel):
    """Per-action counts over a canonical record list."""
    create: int = Field(0, ge=0, description="Resources to create")
    update: int = Field(0, ge=0, description="Resources to update in place")
    delete: int = Field(0, ge=0, description="Resources to destroy")
    replace: int = Field(0, ge=0, description="Resources to destroy and recreate")
    total: int = Field(0, ge=0, description="Total number of records")


COUNTED_ACTIONS = (
    ResourceAction.CREATE.value,
    ResourceAction.UPDATE.value,
    ResourceAction.DELETE.value,
    ResourceAction.REPLACE.value,
)


def summarize(records: Sequence[CanonicalRecord]) -> PlanSummary:
    """
    Count records per canonical action.
    
    Args:
        records: Canonical records
        
    Returns:
        PlanSummary with per-action counts and the total record count
    """
    counts = {action: 0 for action in COUNTED_ACTIONS}
    for record in records:
        if record.action in counts:
            counts[record.action] += 1
    return PlanSummary(total=len(records), **counts)


def total_monthly_cost(records: Iterable[CanonicalRecord]) -> Optional[float]:
    """Sum known monthly costs; None when no record carries a cost."""
    known = [r.monthly_cost for r in records if r.monthly_cost is not None]
    if not known:
        return None
    return round(sum(known), 2)
