"""Tests for the end-to-end build_report pipeline."""

import pytest
from tfsummary import analyze, build_report
from tfsummary.cost.base import CostProvider
from tfsummary.cost.oiq import OpenInfraQuoteProvider, PriceSheetCache
from tfsummary.utils.errors import ConfigError, CostProviderError, PlanLoadError


class FailingProvider(CostProvider):
    name = "failing"
    
    def estimate(self, records, plan_data, region):
        raise CostProviderError("pricing service unavailable")
    
    def is_available(self):
        return False


class FixedProvider(CostProvider):
    name = "fixed"
    
    def __init__(self):
        self.calls = []
    
    def estimate(self, records, plan_data, region):
        self.calls.append(region)
        return {"resources": [{"address": "aws_instance.web", "monthly_cost": 60.74}]}
    
    def is_available(self):
        return True


class TestBuildReport:
    """Test report assembly."""
    
    def test_without_cost(self, sample_plan):
        report = build_report(sample_plan, with_cost=False)
        
        assert report.summary.total == 4
        assert report.cost_estimated is False
        assert report.region is None
        assert report.total_monthly_cost is None
        assert all(r.monthly_cost is None for r in report.resources)
    
    def test_with_provider(self, sample_plan):
        provider = FixedProvider()
        report = build_report(sample_plan, region="eu-west-1", with_cost=True, provider=provider)
        
        assert provider.calls == ["eu-west-1"]
        assert report.cost_estimated is True
        assert report.region == "eu-west-1"
        assert report.total_monthly_cost == 60.74
        costs = {r.address: r.monthly_cost for r in report.resources}
        assert costs["aws_instance.web"] == 60.74
        assert costs["aws_nat_gateway.main"] is None
    
    def test_provider_failure_degrades(self, sample_plan):
        report = build_report(sample_plan, with_cost=True, provider=FailingProvider())
        
        assert report.cost_estimated is False
        assert report.warnings == ["Cost estimation failed: pricing service unavailable"]
        assert report.summary.total == 4
        assert all(r.monthly_cost is None for r in report.resources)
    
    def test_empty_plan_skips_provider(self):
        provider = FixedProvider()
        report = build_report({"resource_changes": []}, with_cost=True, provider=provider)
        
        assert provider.calls == []
        assert report.resources == []
        assert report.summary.total == 0
    
    def test_unwritable_price_cache_degrades(self, sample_plan, tmp_path):
        """A cache directory that cannot be created becomes a cost warning."""
        blocker = tmp_path / "not-a-dir"
        blocker.write_text("x")
        provider = OpenInfraQuoteProvider(cache=PriceSheetCache(cache_dir=str(blocker / "sub")))
        
        report = build_report(sample_plan, with_cost=True, provider=provider)
        
        assert len(report.warnings) == 1
        assert report.warnings[0].startswith("Cost estimation failed:")
        assert report.cost_estimated is False
        assert len(report.resources) == 4
        assert all(r.monthly_cost is None for r in report.resources)
    
    def test_invalid_merge_config_is_config_error(self, sample_plan):
        """A malformed cost.merge section is reported as a config error."""
        config = {"region": "us-east-1", "cost": {"enabled": True, "merge": {"address_fields": "id"}}}
        
        with pytest.raises(ConfigError, match="cost.merge"):
            build_report(sample_plan, config, with_cost=True, provider=FixedProvider())


class TestAnalyze:
    """Test the file-based entry point."""
    
    def test_analyze_returns_contract(self, sample_plan_path, monkeypatch):
        monkeypatch.setenv("TFSUMMARY_NO_COST", "1")
        
        result = analyze(str(sample_plan_path))
        
        assert result["version"] == "1.0.0"
        assert result["summary"]["total"] == 4
        assert result["resources"][-1]["diffs"][0]["from"] == "t3.micro"
    
    def test_analyze_missing_file(self):
        with pytest.raises(PlanLoadError):
            analyze("does-not-exist.json")
