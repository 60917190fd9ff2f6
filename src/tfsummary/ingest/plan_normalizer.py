"""Translate Terraform's raw resource_changes into ordered canonical records."""

from typing import Dict, Any, List, Optional
from pydantic import ValidationError
from .action_classifier import classify_action
from .diff_engine import compute_field_diffs
from .models import (
    ACTION_LABELS,
    DESTRUCTIVE_ACTIONS,
    CanonicalRecord,
    NormalizedPlan,
    ResourceAction,
)
from ..utils.errors import NormalizationError
from ..utils.logging import get_logger

logger = get_logger("ingest.plan_normalizer")

# Destructive changes surface first for review.
ACTION_PRIORITY: Dict[str, int] = {
    ResourceAction.DELETE.value: 0,
    ResourceAction.REPLACE.value: 1,
    ResourceAction.CREATE.value: 2,
    ResourceAction.UPDATE.value: 3,
}
UNKNOWN_ACTION_PRIORITY = 9

EXCLUDED_ACTIONS = frozenset({ResourceAction.NO_OP.value, ResourceAction.READ.value})


def _as_mapping(value: Any) -> Dict[str, Any]:
    """Return value if it is an attribute map, otherwise an empty one."""
    return value if isinstance(value, dict) else {}


def _action_priority(record: CanonicalRecord) -> int:
    return ACTION_PRIORITY.get(record.action, UNKNOWN_ACTION_PRIORITY)


def _build_record(resource_change: Dict[str, Any]) -> Optional[CanonicalRecord]:
    """
    Build one canonical record, or None if the entry is not an actionable change.

    Raises:
        ValidationError: If identity fields have the wrong shape
    """
    change = resource_change.get("change")
    if not isinstance(change, dict):
        logger.debug(f"Skipping entry without change payload: {resource_change.get('address', 'unknown')}")
        return None

    actions = change.get("actions")
    if not isinstance(actions, list):
        actions = None
    action = classify_action(actions).value

    if action in EXCLUDED_ACTIONS:
        return None

    address = resource_change.get("address")
    if not address:
        logger.warning("Skipping resource change with no address")
        return None

    before = _as_mapping(change.get("before"))
    after = _as_mapping(change.get("after"))

    return CanonicalRecord(
        address=address,
        type=resource_change.get("type", ""),
        name=resource_change.get("name", ""),
        provider=resource_change.get("provider_name") or "",
        action=action,
        action_label=ACTION_LABELS.get(action, action),
        is_destructive=action in DESTRUCTIVE_ACTIONS,
        before=before,
        after=after,
        diffs=compute_field_diffs(before, after) if action == ResourceAction.UPDATE.value else [],
        monthly_cost=None,
        hourly_cost=None,
    )


def normalize_plan(plan_data: Dict[str, Any]) -> NormalizedPlan:
    """
    Normalize Terraform plan JSON into an ordered list of canonical records.

    This function:
    - Skips entries without a change payload
    - Classifies each entry's actions and drops no-op and read entries
    - Computes field diffs for updates
    - Resolves duplicate addresses last-wins
    - Orders records delete < replace < create < update (stable)

    Args:
        plan_data: Raw Terraform plan JSON dictionary

    Returns:
        NormalizedPlan with ordered canonical records

    Raises:
        NormalizationError: If the plan's top-level structure is not usable
    """
    if not isinstance(plan_data, dict):
        raise NormalizationError(
            f"Failed to normalize plan: expected a JSON object, got {type(plan_data).__name__}"
        )

    resource_changes = plan_data.get("resource_changes")
    if resource_changes is None:
        resource_changes = []
    if not isinstance(resource_changes, list):
        raise NormalizationError(
            f"Failed to normalize plan: 'resource_changes' must be a list, "
            f"got {type(resource_changes).__name__}"
        )

    records: Dict[str, CanonicalRecord] = {}

    for resource_change in resource_changes:
        if not isinstance(resource_change, dict):
            logger.debug(f"Skipping non-object resource change: {resource_change!r}")
            continue

        try:
            record = _build_record(resource_change)
        except ValidationError as e:
            logger.warning(f"Failed to normalize resource {resource_change.get('address', 'unknown')}: {e}")
            continue

        if record is None:
            continue

        if record.address in records:
            logger.warning(f"Duplicate resource address {record.address}; keeping the last entry")
            del records[record.address]
        records[record.address] = record

    ordered = sorted(records.values(), key=_action_priority)

    logger.info(f"Normalized {len(ordered)} resource changes from plan")
    return NormalizedPlan(resources=ordered)
