"""Tests for plan loader."""

import json
import tempfile
from pathlib import Path
import pytest
from tfsummary.ingest.plan_loader import load_plan_json, parse_plan_text
from tfsummary.ingest.plan_validator import validate_resource_change, get_plan_summary
from tfsummary.utils.errors import PlanLoadError


class TestPlanLoader:
    """Test plan JSON loading."""
    
    def test_load_valid_plan(self):
        """Test loading a valid Terraform plan JSON."""
        plan_data = {
            "format_version": "1.2",
            "resource_changes": [
                {
                    "address": "aws_lb.test",
                    "change": {"actions": ["create"]}
                }
            ]
        }
        
        with tempfile.NamedTemporaryFile(mode='w', suffix='.json', delete=False) as f:
            json.dump(plan_data, f)
            temp_path = f.name
        
        try:
            result = load_plan_json(temp_path)
            assert result == plan_data
        finally:
            Path(temp_path).unlink()
    
    def test_load_missing_file(self):
        """Test loading non-existent file raises error."""
        with pytest.raises(PlanLoadError, match="Plan file not found"):
            load_plan_json("nonexistent.json")
    
    def test_load_directory(self):
        """A directory is not a plan file."""
        with tempfile.TemporaryDirectory() as tmpdir:
            with pytest.raises(PlanLoadError, match="not a file"):
                load_plan_json(tmpdir)
    
    def test_load_invalid_json(self):
        """Test loading invalid JSON raises error."""
        with tempfile.NamedTemporaryFile(mode='w', suffix='.json', delete=False) as f:
            f.write("invalid json {")
            temp_path = f.name
        
        try:
            with pytest.raises(PlanLoadError, match="Invalid JSON"):
                load_plan_json(temp_path)
        finally:
            Path(temp_path).unlink()
    
    def test_load_missing_resource_changes(self):
        """Test loading plan without resource_changes adds empty list."""
        result = parse_plan_text(json.dumps({"format_version": "1.2"}))
        
        assert result["resource_changes"] == []
    
    def test_missing_format_version_is_allowed(self):
        """format_version is recommended, not required."""
        result = parse_plan_text(json.dumps({"resource_changes": []}))
        
        assert result == {"resource_changes": []}
    
    @pytest.mark.parametrize("text", ["[]", "42", "\"plan\""])
    def test_non_object_plan(self, text):
        """Top-level JSON must be an object."""
        with pytest.raises(PlanLoadError, match="Invalid Terraform plan structure"):
            parse_plan_text(text)
    
    def test_resource_changes_must_be_list(self):
        """resource_changes of the wrong type is a structural error."""
        with pytest.raises(PlanLoadError, match="must be a list"):
            parse_plan_text(json.dumps({"format_version": "1.2", "resource_changes": {}}))


class TestPlanValidator:
    """Test per-entry validation helpers."""
    
    def test_validate_resource_change_ok(self):
        """A complete entry has no warnings."""
        entry = {"address": "a.b", "type": "a", "name": "b", "change": {"actions": ["create"]}}
        
        assert validate_resource_change(entry) == []
    
    def test_validate_resource_change_problems(self):
        """Missing fields and bad actions are reported."""
        warnings = validate_resource_change({"address": "a.b", "change": {"actions": "create"}})
        
        assert any("Missing required fields" in w for w in warnings)
        assert any("must be a list" in w for w in warnings)
        assert validate_resource_change("x") == ["Resource change must be an object"]
    
    def test_get_plan_summary(self):
        """Summary reports versions and entry count."""
        summary = get_plan_summary({"format_version": "1.2", "resource_changes": [{}, {}]})
        
        assert summary["format_version"] == "1.2"
        assert summary["terraform_version"] == "unknown"
        assert summary["resource_count"] == 2
