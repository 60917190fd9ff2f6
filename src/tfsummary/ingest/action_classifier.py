"""Map a set of Terraform action tokens to one canonical action."""

from typing import Callable, FrozenSet, Iterable, List, Optional, Tuple, Union
from .models import ResourceAction

ActionTokens = FrozenSet[str]

# Ordered decision table, first match wins.
CLASSIFICATION_RULES: List[Tuple[str, Callable[[ActionTokens], bool], ResourceAction]] = [
    ("empty", lambda tokens: not tokens, ResourceAction.NO_OP),
    ("create+delete", lambda tokens: "create" in tokens and "delete" in tokens, ResourceAction.REPLACE),
    ("delete", lambda tokens: "delete" in tokens, ResourceAction.DELETE),
    ("create", lambda tokens: "create" in tokens, ResourceAction.CREATE),
    ("update", lambda tokens: "update" in tokens, ResourceAction.UPDATE),
    ("read", lambda tokens: "read" in tokens, ResourceAction.READ),
]

FALLBACK_ACTION = ResourceAction.NO_OP


def _to_tokens(actions: Optional[Union[str, Iterable[str]]]) -> ActionTokens:
    """Collapse raw actions into a set of string tokens."""
    if actions is None:
        return frozenset()
    if isinstance(actions, str):
        return frozenset({actions})
    return frozenset(token for token in actions if isinstance(token, str))


def classify_action(actions: Optional[Union[str, Iterable[str]]]) -> ResourceAction:
    """
    Classify Terraform action tokens into a single canonical action.
    
    Terraform emits actions such as ["create"], ["update"], ["delete", "create"]
    or ["create", "delete"] (create-before-destroy). Both orderings of the
    create/delete pair are a replacement. Unrecognized tokens are ignored.
    
    Args:
        actions: Iterable of action tokens (or None)
        
    Returns:
        Canonical ResourceAction
    """
    tokens = _to_tokens(actions)
    for _name, predicate, result in CLASSIFICATION_RULES:
        if predicate(tokens):
            return result
    return FALLBACK_ACTION
