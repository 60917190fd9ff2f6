"""Value formatting shared by all renderers."""

import json
from typing import Any, Optional
from ..analysis.summary import PlanSummary

ACTION_ICONS = {
    "create": "+",
    "update": "~",
    "delete": "-",
    "replace": "±",
}


def format_cost(cost: Optional[float]) -> str:
    """Format a monthly cost as $x.xx/mo; empty string when unknown."""
    if cost is None:
        return ""
    return f"${float(cost):.2f}/mo"


def format_value(value: Any, width: int) -> str:
    """JSON-encode non-string values and truncate to width characters."""
    if not isinstance(value, str):
        value = json.dumps(value, sort_keys=True, default=str)
    if len(value) <= width:
        return value
    return value[:width - 3] + "..."


def summary_parts(summary: PlanSummary):
    """Yield (action, text) for each non-zero action count in display order."""
    if summary.create:
        yield "create", f"+{summary.create} to create"
    if summary.update:
        yield "update", f"~{summary.update} to update"
    if summary.replace:
        yield "replace", f"±{summary.replace} to replace"
    if summary.delete:
        yield "delete", f"-{summary.delete} to destroy"
