"""Offline cost provider backed by a bundled YAML price table."""

from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Sequence
import yaml
from .base import CostProvider
from .merge import HOURS_PER_MONTH
from ..ingest.models import CanonicalRecord, ResourceAction
from ..utils.errors import CostProviderError
from ..utils.logging import get_logger

logger = get_logger("cost.static_pricing")

DEFAULT_PRICE_TABLE = Path(__file__).parent / "prices.yaml"


def load_price_table(path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load a price table from YAML.

    Args:
        path: Price table file (defaults to the bundled prices.yaml)

    Raises:
        CostProviderError: If the table cannot be read
    """
    table_path = Path(path) if path else DEFAULT_PRICE_TABLE
    try:
        with open(table_path, 'r', encoding='utf-8') as f:
            table = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise CostProviderError(f"Failed to load price table {table_path}: {e}")
    if not isinstance(table, dict):
        raise CostProviderError(f"Price table {table_path} must contain a mapping")
    return table


class StaticPriceProvider(CostProvider):
    """
    Rough monthly estimates from list prices, without network access.

    Free resource types are priced at 0.0. Usage-based and unknown types
    are left out, so their cost stays unknown.
    """

    name = "static"

    def __init__(self, price_table: Optional[Dict[str, Any]] = None):
        self.prices = price_table if price_table is not None else load_price_table()
        self.free_types = set(self.prices.get("free_types") or [])
        self.usage_based_types = set(self.prices.get("usage_based_types") or [])
        self._estimators: Dict[str, Callable[[Dict[str, Any], float], Optional[float]]] = {
            "aws_instance": self._estimate_ec2,
            "aws_db_instance": self._estimate_rds,
            "aws_lb": self._estimate_lb,
            "aws_alb": self._estimate_lb,
            "aws_nat_gateway": self._estimate_nat_gateway,
            "aws_ebs_volume": self._estimate_ebs,
            "aws_elasticache_cluster": self._estimate_elasticache,
            "aws_elasticache_replication_group": self._estimate_elasticache,
            "aws_eip": self._estimate_elastic_ip,
        }

    @classmethod
    def from_config(cls, config: Dict[str, Any]) -> "StaticPriceProvider":
        static = (config.get("cost") or {}).get("static") or {}
        return cls(load_price_table(static.get("price_table")))

    def is_available(self) -> bool:
        return bool(self.prices)

    def _section(self, name: str) -> Dict[str, Any]:
        section = self.prices.get(name)
        return section if isinstance(section, dict) else {}

    def region_multiplier(self, region: str) -> float:
        return float(self._section("regional_multipliers").get(region, 1.0))

    def _hourly(self, section: str, key: Optional[str]) -> Optional[float]:
        if not key:
            return None
        return self._section(section).get(key)

    def _estimate_ec2(self, after: Dict[str, Any], multiplier: float) -> Optional[float]:
        hourly = self._hourly("ec2", after.get("instance_type"))
        if not hourly:
            return None
        return hourly * HOURS_PER_MONTH * multiplier

    def _estimate_rds(self, after: Dict[str, Any], multiplier: float) -> Optional[float]:
        instance_class = after.get("instance_class")
        if not instance_class:
            return None

        rds = self._section("rds")
        engine_prices = rds.get(after.get("engine")) or rds.get("postgres") or {}
        hourly = engine_prices.get(instance_class)
        if not hourly:
            return None

        monthly = hourly * HOURS_PER_MONTH * multiplier
        if after.get("multi_az"):
            monthly *= 2

        storage = after.get("allocated_storage")
        ebs = self._section("ebs")
        if storage and ebs:
            per_gb = ebs.get(after.get("storage_type") or "gp3") or ebs.get("gp3")
            if per_gb:
                monthly += storage * per_gb * multiplier
        return monthly

    def _estimate_lb(self, after: Dict[str, Any], multiplier: float) -> Optional[float]:
        key = "nlb" if after.get("load_balancer_type") == "network" else "alb"
        hourly = self._section(key).get("hourly")
        if not hourly:
            return None
        return hourly * HOURS_PER_MONTH * multiplier

    def _estimate_nat_gateway(self, after: Dict[str, Any], multiplier: float) -> Optional[float]:
        hourly = self._section("nat_gateway").get("hourly")
        if not hourly:
            return None
        return hourly * HOURS_PER_MONTH * multiplier

    def _estimate_ebs(self, after: Dict[str, Any], multiplier: float) -> Optional[float]:
        per_gb = self._section("ebs").get(after.get("type") or "gp3")
        if not per_gb:
            return None
        return (after.get("size") or 20) * per_gb * multiplier

    def _estimate_elasticache(self, after: Dict[str, Any], multiplier: float) -> Optional[float]:
        hourly = self._hourly("elasticache", after.get("node_type"))
        if not hourly:
            return None
        nodes = after.get("num_cache_nodes") or after.get("num_cache_clusters") or 1
        return hourly * HOURS_PER_MONTH * nodes * multiplier

    def _estimate_elastic_ip(self, after: Dict[str, Any], multiplier: float) -> Optional[float]:
        monthly = self._section("elastic_ip").get("monthly")
        if not monthly:
            return None
        return monthly * multiplier

    def estimate(
        self,
        records: Sequence[CanonicalRecord],
        plan_data: Dict[str, Any],
        region: str
    ) -> List[Dict[str, Any]]:
        multiplier = self.region_multiplier(region)
        items: List[Dict[str, Any]] = []

        for record in records:
            if record.action == ResourceAction.DELETE.value:
                continue

            if record.type in self.free_types:
                items.append({"address": record.address, "monthly_cost": 0.0})
                continue
            if record.type in self.usage_based_types:
                continue

            estimator = self._estimators.get(record.type)
            if estimator is None:
                continue

            try:
                monthly = estimator(record.after, multiplier)
            except (TypeError, ValueError) as e:
                logger.debug(f"Could not price {record.address}: {e}")
                continue
            if monthly is not None:
                items.append({"address": record.address, "monthly_cost": round(monthly, 2)})

        logger.info(f"Static price table estimated {len(items)} of {len(records)} resource(s)")
        return items
