"""Tests for merging provider cost data onto records."""

import pytest
from tfsummary.cost.merge import CostKeyStrategy, apply_costs, build_cost_lookup
from tfsummary.ingest.models import CanonicalRecord
from tfsummary.utils.errors import ConfigError


def _record(address, action="create"):
    return CanonicalRecord(address=address, action=action, action_label=action)


@pytest.fixture
def records():
    return [_record("aws_instance.a"), _record("aws_instance.b"), _record("aws_instance.c", "update")]


class TestApplyCosts:
    """Test address-keyed cost merge."""
    
    def test_matched_and_unmatched(self, records):
        """Matched records get a cost, unmatched stay unknown."""
        priced = apply_costs(records, [{"address": "aws_instance.a", "monthly_cost": 10.5}])
        
        assert priced == 1
        assert records[0].monthly_cost == 10.5
        assert records[1].monthly_cost is None
        assert records[2].monthly_cost is None
    
    def test_zero_is_not_unknown(self, records):
        """A zero figure is kept as 0.0, distinct from None."""
        apply_costs(records, [{"address": "aws_instance.b", "monthly_cost": 0}])
        
        assert records[1].monthly_cost == 0.0
        assert records[0].monthly_cost is None
    
    def test_unknown_addresses_ignored(self, records):
        """Cost items for addresses not in the record list are dropped."""
        priced = apply_costs(records, [{"address": "aws_instance.zzz", "monthly_cost": 99}])
        
        assert priced == 0
        assert all(r.monthly_cost is None for r in records)
    
    def test_idempotent(self, records):
        """Merging the same data twice gives the same result."""
        cost_data = [{"address": "aws_instance.a", "monthly_cost": 3.25}]
        apply_costs(records, cost_data)
        first = [r.model_dump() for r in records]
        apply_costs(records, cost_data)
        
        assert [r.model_dump() for r in records] == first
    
    def test_does_not_reorder_or_drop(self, records):
        """Order and membership are unchanged."""
        apply_costs(records, [{"address": "aws_instance.c", "monthly_cost": 1}])
        
        assert [r.address for r in records] == ["aws_instance.a", "aws_instance.b", "aws_instance.c"]
    
    def test_resources_wrapper_with_price_range(self, records):
        """oiq-style output: resources list with a min/max price range."""
        cost_data = {
            "resources": [
                {"address": "aws_instance.a", "price": {"min": 8.0, "max": 12.5}},
                {"address": "aws_instance.b", "price": {"min": 4.0}},
            ]
        }
        
        apply_costs(records, cost_data)
        
        assert records[0].monthly_cost == 12.5
        assert records[1].monthly_cost == 4.0
    
    def test_hourly_only(self, records):
        """An hourly figure alone is projected to a monthly one."""
        apply_costs(records, [{"address": "aws_instance.a", "hourly_cost": 0.1}])
        
        assert records[0].hourly_cost == 0.1
        assert records[0].monthly_cost == pytest.approx(73.0)
    
    def test_string_figures(self, records):
        """Numeric strings are accepted, junk is ignored."""
        apply_costs(records, [
            {"address": "aws_instance.a", "monthly_cost": "7.50"},
            {"address": "aws_instance.b", "monthly_cost": "n/a"},
        ])
        
        assert records[0].monthly_cost == 7.5
        assert records[1].monthly_cost is None
    
    @pytest.mark.parametrize("figure", ["nan", "inf", "-Infinity", float("nan"), float("inf")])
    def test_non_finite_figures_ignored(self, records, figure):
        """NaN and infinite figures are not costs."""
        assert apply_costs(records, [{"address": "aws_instance.a", "monthly_cost": figure}]) == 0
        assert records[0].monthly_cost is None
    
    @pytest.mark.parametrize("cost_data", [None, "garbage", 42, {"resources": None}, [None, "x", 3]])
    def test_malformed_cost_data_is_empty(self, records, cost_data):
        """Malformed provider output leaves every cost unknown."""
        assert apply_costs(records, cost_data) == 0
        assert all(r.monthly_cost is None for r in records)


class TestBuildCostLookup:
    """Test lookup construction."""
    
    def test_later_items_win(self):
        lookup = build_cost_lookup([
            {"address": "a", "monthly_cost": 1},
            {"address": "a", "monthly_cost": 2},
        ])
        
        assert lookup == {"a": (2.0, None)}
    
    def test_skips_items_without_address_or_figure(self):
        lookup = build_cost_lookup([
            {"monthly_cost": 1},
            {"address": "b"},
            {"address": "", "monthly_cost": 1},
            {"address": "c", "monthly_cost": True},
        ])
        
        assert lookup == {}
    
    def test_alternate_field_names(self):
        """Default strategy accepts resource/monthly aliases."""
        lookup = build_cost_lookup([{"resource": "a", "monthly": 5}])
        
        assert lookup == {"a": (5.0, None)}
    
    def test_custom_strategy_from_config(self):
        config = {"cost": {"merge": {"address_fields": ["id"], "monthly_fields": ["usd"]}}}
        strategy = CostKeyStrategy.from_config(config)
        
        assert strategy.address_fields == ["id"]
        assert strategy.hourly_fields == ["hourly_cost", "hourly"]
        assert build_cost_lookup([{"id": "a", "usd": 2}], strategy) == {"a": (2.0, None)}
    
    def test_non_finite_falls_back_to_next_field(self):
        lookup = build_cost_lookup([{"address": "a", "monthly_cost": "nan", "monthly": 4}])
        
        assert lookup == {"a": (4.0, None)}
    
    @pytest.mark.parametrize("merge", [
        {"address_fields": "id"},
        {"monthly_fields": [{"nested": 1}]},
        ["address"],
    ])
    def test_malformed_strategy_config(self, merge):
        """A malformed cost.merge section raises ConfigError."""
        with pytest.raises(ConfigError, match="cost.merge"):
            CostKeyStrategy.from_config({"cost": {"merge": merge}})
