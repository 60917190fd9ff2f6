"""Environment variable overrides for configuration."""

import os
from typing import Any, Dict
from ..utils.logging import get_logger

logger = get_logger("config.environment")

TRUTHY = ("1", "true", "yes", "on")


def apply_environment_overrides(config: Dict[str, Any]) -> Dict[str, Any]:
    """
    Apply TFSUMMARY_* environment variables on top of loaded config (mutates config).
    
    Supported variables:
    - TFSUMMARY_REGION: default region for cost estimates
    - TFSUMMARY_COST_PROVIDER: cost provider name (oiq or static)
    - TFSUMMARY_CACHE_DIR: price sheet cache directory
    - TFSUMMARY_NO_COST: disable cost estimation when truthy
    
    Args:
        config: Configuration dictionary
        
    Returns:
        The same configuration dictionary
    """
    cost = config.setdefault("cost", {})
    
    region = os.getenv("TFSUMMARY_REGION")
    if region:
        config["region"] = region.strip()
        logger.debug(f"Region overridden from environment: {config['region']}")
    
    provider = os.getenv("TFSUMMARY_COST_PROVIDER")
    if provider:
        cost["provider"] = provider.strip().lower()
        logger.debug(f"Cost provider overridden from environment: {cost['provider']}")
    
    cache_dir = os.getenv("TFSUMMARY_CACHE_DIR")
    if cache_dir:
        cost.setdefault("prices", {})["cache_dir"] = cache_dir
        logger.debug(f"Price cache dir overridden from environment: {cache_dir}")
    
    no_cost = os.getenv("TFSUMMARY_NO_COST", "")
    if no_cost.strip().lower() in TRUTHY:
        cost["enabled"] = False
        logger.debug("Cost estimation disabled from environment")
    
    return config
