"""Cost estimation: pluggable providers and the address-keyed cost merge."""

from typing import Any, Dict, Sequence
from .base import CostProvider
from .merge import CostKeyStrategy, apply_costs, build_cost_lookup
from .oiq import OpenInfraQuoteProvider, PriceSheetCache
from .static_pricing import StaticPriceProvider
from ..config.manager import get_cost_config
from ..ingest.models import CanonicalRecord
from ..utils.errors import ConfigError
from ..utils.logging import get_logger

logger = get_logger("cost")

PROVIDERS = {
    OpenInfraQuoteProvider.name: OpenInfraQuoteProvider,
    StaticPriceProvider.name: StaticPriceProvider,
}


def get_cost_provider(config: Dict[str, Any]) -> CostProvider:
    """
    Build the provider named by cost.provider.
    
    Raises:
        ConfigError: If the provider name is unknown
    """
    name = str(get_cost_config(config).get("provider", OpenInfraQuoteProvider.name)).lower()
    provider_cls = PROVIDERS.get(name)
    if provider_cls is None:
        raise ConfigError(
            f"Unknown cost provider '{name}'. Available providers: {', '.join(sorted(PROVIDERS))}"
        )
    return provider_cls.from_config(config)


def estimate_costs(
    records: Sequence[CanonicalRecord],
    plan_data: Dict[str, Any],
    region: str,
    config: Dict[str, Any],
    provider: CostProvider = None
) -> int:
    """
    Run the configured cost provider and merge its output onto records.
    
    Args:
        records: Canonical records (mutated in place)
        plan_data: Raw Terraform plan JSON
        region: Region identifier
        config: Loaded configuration
        provider: Optional provider instance (overrides config)
        
    Returns:
        Number of records that received a cost
        
    Raises:
        CostProviderError: If the provider fails
    """
    provider = provider or get_cost_provider(config)
    logger.info(f"Estimating costs with '{provider.name}' provider for region {region}")
    cost_data = provider.estimate(records, plan_data, region)
    return apply_costs(records, cost_data, CostKeyStrategy.from_config(config))


__all__ = [
    "CostProvider",
    "CostKeyStrategy",
    "OpenInfraQuoteProvider",
    "PriceSheetCache",
    "StaticPriceProvider",
    "apply_costs",
    "build_cost_lookup",
    "estimate_costs",
    "get_cost_provider",
]
