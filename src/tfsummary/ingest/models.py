"""Pydantic models for canonical resource-change records."""

from enum import Enum
from typing import Any, Dict, List, Optional
from pydantic import BaseModel, Field


class ResourceAction(str, Enum):
    """Canonical resource action types (Terraform action tokens)."""
    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"
    REPLACE = "replace"
    READ = "read"
    NO_OP = "no-op"


class DiffKind(str, Enum):
    """Kind of a single field-level difference."""
    ADD = "add"
    REMOVE = "remove"
    CHANGE = "change"


ACTION_LABELS: Dict[str, str] = {
    ResourceAction.NO_OP.value: "no-op",
    ResourceAction.CREATE.value: "create",
    ResourceAction.READ.value: "read",
    ResourceAction.UPDATE.value: "update",
    ResourceAction.DELETE.value: "delete",
    ResourceAction.REPLACE.value: "replace",
}

DESTRUCTIVE_ACTIONS = frozenset({ResourceAction.DELETE.value, ResourceAction.REPLACE.value})


class FieldDiff(BaseModel):
    """Before/after difference of one top-level attribute."""
    field: str = Field(..., description="Attribute name")
    from_: Any = Field(None, alias="from", description="Value before the change (None for add)")
    to: Any = Field(None, description="Value after the change (None for remove)")
    type: DiffKind = Field(..., description="Diff kind: add, remove or change")

    class Config:
        """Pydantic config."""
        populate_by_name = True
        use_enum_values = True


class CanonicalRecord(BaseModel):
    """One actionable resource change, classified and diffed."""
    address: str = Field(..., description="Full Terraform resource address")
    type: str = Field("", description="Resource type, e.g. aws_instance")
    name: str = Field("", description="Resource name")
    provider: str = Field("", description="Provider identifier")
    action: ResourceAction = Field(..., description="Canonical action (create/update/delete/replace)")
    action_label: str = Field(..., description="Human label for the action")
    is_destructive: bool = Field(False, description="True for delete and replace")
    before: Dict[str, Any] = Field(default_factory=dict, description="Attributes before the change")
    after: Dict[str, Any] = Field(default_factory=dict, description="Attributes after the change")
    diffs: List[FieldDiff] = Field(default_factory=list, description="Field diffs (update only)")
    monthly_cost: Optional[float] = Field(None, description="Estimated monthly cost, None when unknown")
    hourly_cost: Optional[float] = Field(None, description="Estimated hourly cost, None when unknown")

    class Config:
        """Pydantic config."""
        use_enum_values = True


class NormalizedPlan(BaseModel):
    """Normalized Terraform plan - ordered collection of canonical records."""
    resources: List[CanonicalRecord] = Field(default_factory=list, description="Ordered canonical records")

    class Config:
        """Pydantic config."""
        use_enum_values = True
