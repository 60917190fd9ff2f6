"""Field-level before/after diffs for a single resource's attributes."""

from typing import Any, Dict, List, Mapping, Optional
from .models import DiffKind, FieldDiff


def values_equal(left: Any, right: Any) -> bool:
    """
    Deep structural equality over JSON value trees.
    
    Object key order is ignored, array order is not, and booleans never
    compare equal to numbers (Python's True == 1 does not apply).
    """
    if isinstance(left, bool) or isinstance(right, bool):
        return isinstance(left, bool) and isinstance(right, bool) and left == right
    if isinstance(left, Mapping) and isinstance(right, Mapping):
        if set(left.keys()) != set(right.keys()):
            return False
        return all(values_equal(left[key], right[key]) for key in left)
    if isinstance(left, list) and isinstance(right, list):
        if len(left) != len(right):
            return False
        return all(values_equal(a, b) for a, b in zip(left, right))
    if isinstance(left, (Mapping, list)) or isinstance(right, (Mapping, list)):
        return False
    return left == right


def compute_field_diffs(
    before: Optional[Dict[str, Any]],
    after: Optional[Dict[str, Any]]
) -> List[FieldDiff]:
    """
    Compute field diffs over the union of keys in before and after.
    
    Keys are visited in before's insertion order, followed by keys that only
    appear in after, so output is stable for a given input.
    
    Args:
        before: Attribute map before the change (None treated as empty)
        after: Attribute map after the change (None treated as empty)
        
    Returns:
        List of FieldDiff, one per differing key
    """
    before = before or {}
    after = after or {}
    
    keys = list(before.keys())
    keys.extend(key for key in after.keys() if key not in before)
    
    diffs: List[FieldDiff] = []
    for key in keys:
        in_before = key in before
        in_after = key in after
        
        if in_after and not in_before:
            diffs.append(FieldDiff(field=key, from_=None, to=after[key], type=DiffKind.ADD))
        elif in_before and not in_after:
            diffs.append(FieldDiff(field=key, from_=before[key], to=None, type=DiffKind.REMOVE))
        elif not values_equal(before[key], after[key]):
            diffs.append(FieldDiff(field=key, from_=before[key], to=after[key], type=DiffKind.CHANGE))
    
    return diffs
