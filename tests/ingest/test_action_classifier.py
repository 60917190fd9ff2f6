"""Tests for action classification."""

import pytest
from tfsummary.ingest.action_classifier import CLASSIFICATION_RULES, classify_action
from tfsummary.ingest.models import ResourceAction


class TestClassifyAction:
    """Test the ordered classification rules."""
    
    @pytest.mark.parametrize("actions", [
        ["create", "delete"],
        ["delete", "create"],
        ["delete", "create", "update"],
        ["read", "create", "delete", "no-op"],
    ])
    def test_create_and_delete_is_replace(self, actions):
        """Any token set with both create and delete is a replacement."""
        assert classify_action(actions) == ResourceAction.REPLACE
    
    @pytest.mark.parametrize("actions", [None, [], ["bogus"], ["bogus", "other"], [1, None]])
    def test_empty_or_unrecognized_is_no_op(self, actions):
        """Empty, absent and unrecognized token sets classify as no-op."""
        assert classify_action(actions) == ResourceAction.NO_OP
    
    def test_single_actions(self):
        """Single recognized tokens map to themselves."""
        assert classify_action(["create"]) == ResourceAction.CREATE
        assert classify_action(["update"]) == ResourceAction.UPDATE
        assert classify_action(["delete"]) == ResourceAction.DELETE
        assert classify_action(["read"]) == ResourceAction.READ
        assert classify_action(["no-op"]) == ResourceAction.NO_OP
    
    def test_delete_beats_update(self):
        """Delete takes precedence over update."""
        assert classify_action(["update", "delete"]) == ResourceAction.DELETE
    
    def test_create_beats_update_and_read(self):
        """Create takes precedence over update and read."""
        assert classify_action(["update", "create"]) == ResourceAction.CREATE
        assert classify_action(["read", "create"]) == ResourceAction.CREATE
    
    def test_update_beats_read(self):
        """Update takes precedence over read."""
        assert classify_action(["read", "update"]) == ResourceAction.UPDATE
    
    def test_lone_replace_token_is_not_recognized(self):
        """A bare 'replace' token matches no rule and falls through to no-op."""
        assert classify_action(["replace"]) == ResourceAction.NO_OP
    
    def test_accepts_sets_and_bare_strings(self):
        """Token collections of any kind, and single strings, are accepted."""
        assert classify_action({"delete", "create"}) == ResourceAction.REPLACE
        assert classify_action(("update",)) == ResourceAction.UPDATE
        assert classify_action("delete") == ResourceAction.DELETE
    
    def test_rules_are_ordered(self):
        """Decision table order is the documented precedence."""
        names = [name for name, _, _ in CLASSIFICATION_RULES]
        assert names == ["empty", "create+delete", "delete", "create", "update", "read"]
