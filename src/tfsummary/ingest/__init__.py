"""Plan ingestion: loading, validation, classification, diffing and normalization."""

from .action_classifier import classify_action
from .diff_engine import compute_field_diffs
from .plan_loader import load_plan_json, parse_plan_text
from .plan_normalizer import normalize_plan

__all__ = [
    "classify_action",
    "compute_field_diffs",
    "load_plan_json",
    "parse_plan_text",
    "normalize_plan",
]
