"""Join externally produced cost figures onto canonical records by address."""

import math
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple
from pydantic import BaseModel, Field, ValidationError
from ..ingest.models import CanonicalRecord
from ..utils.errors import ConfigError
from ..utils.logging import get_logger

logger = get_logger("cost.merge")

HOURS_PER_MONTH = 730


class CostKeyStrategy(BaseModel):
    """
    Field names a cost provider may use for the address and the figures.

    Provider output shapes differ; the first field present on an item wins.
    """
    address_fields: List[str] = Field(default_factory=lambda: ["address", "resource", "name"])
    monthly_fields: List[str] = Field(default_factory=lambda: ["monthly_cost", "monthly", "price"])
    hourly_fields: List[str] = Field(default_factory=lambda: ["hourly_cost", "hourly"])

    @classmethod
    def from_config(cls, config: Optional[Dict[str, Any]] = None) -> "CostKeyStrategy":
        """
        Build a strategy from the cost.merge config section.

        Raises:
            ConfigError: If the section is not a mapping of field-name lists
        """
        merge_config = ((config or {}).get("cost") or {}).get("merge") or {}
        if not isinstance(merge_config, Mapping):
            raise ConfigError(f"cost.merge must be a mapping, got {type(merge_config).__name__}")
        overrides = {key: value for key, value in merge_config.items() if value}
        try:
            return cls(**overrides)
        except ValidationError as e:
            raise ConfigError(f"Invalid cost.merge configuration: {e}")


def _to_number(value: Any) -> Optional[float]:
    """Coerce a cost figure to float; booleans, NaN, infinities and junk give None."""
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return None
    elif isinstance(value, Mapping):
        # Price range, e.g. {"min": 10.0, "max": 12.5}
        return _to_number(value.get("max")) or _to_number(value.get("min")) or 0.0
    else:
        return None
    return number if math.isfinite(number) else None


def _first_figure(item: Mapping[str, Any], fields: Sequence[str]) -> Optional[float]:
    for field in fields:
        if field in item:
            number = _to_number(item[field])
            if number is not None:
                return number
    return None


def _extract_address(item: Mapping[str, Any], fields: Sequence[str]) -> Optional[str]:
    for field in fields:
        value = item.get(field)
        if isinstance(value, str) and value:
            return value
    return None


def _cost_items(cost_data: Any) -> Optional[List[Any]]:
    """Accept a list of items or an object with a 'resources' list; None if neither."""
    if isinstance(cost_data, Mapping):
        cost_data = cost_data.get("resources", [])
    if cost_data is None:
        return []
    if isinstance(cost_data, (str, bytes)):
        return None
    try:
        return list(cost_data)
    except TypeError:
        return None


def build_cost_lookup(
    cost_data: Any,
    strategy: Optional[CostKeyStrategy] = None
) -> Dict[str, Tuple[Optional[float], Optional[float]]]:
    """
    Build address -> (monthly, hourly) lookup from provider output.

    Items without an address or without any usable figure are skipped.
    Later items for the same address win.
    """
    strategy = strategy or CostKeyStrategy()
    items = _cost_items(cost_data)
    if items is None:
        logger.warning(f"Unrecognized cost data of type {type(cost_data).__name__}; ignoring")
        items = []

    lookup: Dict[str, Tuple[Optional[float], Optional[float]]] = {}
    for item in items:
        if not isinstance(item, Mapping):
            continue
        address = _extract_address(item, strategy.address_fields)
        if address is None:
            continue
        monthly = _first_figure(item, strategy.monthly_fields)
        hourly = _first_figure(item, strategy.hourly_fields)
        if monthly is None and hourly is None:
            continue
        if monthly is None:
            monthly = hourly * HOURS_PER_MONTH
        lookup[address] = (monthly, hourly)
    return lookup


def apply_costs(
    records: Iterable[CanonicalRecord],
    cost_data: Any,
    strategy: Optional[CostKeyStrategy] = None
) -> int:
    """
    Merge cost figures onto records in place.

    A matched record gets monthly_cost (and hourly_cost when the provider
    supplied one). Unmatched records keep None, meaning "cost unknown";
    a zero figure is kept as 0.0. Malformed cost data is treated as empty.

    Args:
        records: Canonical records to annotate
        cost_data: Provider output (list of items or {"resources": [...]})
        strategy: Field-name strategy for addresses and figures

    Returns:
        Number of records that received a cost
    """
    lookup = build_cost_lookup(cost_data, strategy)

    priced = 0
    for record in records:
        match = lookup.get(record.address)
        if match is None:
            continue
        monthly, hourly = match
        record.monthly_cost = monthly
        if hourly is not None:
            record.hourly_cost = hourly
        priced += 1

    logger.info(f"Merged cost data onto {priced} resource(s)")
    return priced
