"""Abstract base class for cost providers."""

from abc import ABC, abstractmethod
from typing import Any, Dict, Sequence
from ..ingest.models import CanonicalRecord


class CostProvider(ABC):
    """
    Abstract interface for cost providers.
    
    Cost providers are opaque collaborators. They:
    - Receive the canonical records, the raw plan and a region
    - Return per-address cost data for Cost Merge
    - Raise CostProviderError on any failure
    
    They never mutate records; merging is done by cost.merge.apply_costs.
    """
    
    name: str = "base"
    
    @abstractmethod
    def estimate(
        self,
        records: Sequence[CanonicalRecord],
        plan_data: Dict[str, Any],
        region: str
    ) -> Any:
        """
        Produce cost data for the given records.
        
        Args:
            records: Canonical records from the normalizer
            plan_data: Raw Terraform plan JSON
            region: Region identifier, e.g. us-east-1
            
        Returns:
            Cost data: a list of items or an object with a 'resources' list
            
        Raises:
            CostProviderError: If cost data cannot be produced
        """
        pass
    
    @abstractmethod
    def is_available(self) -> bool:
        """
        Check if this provider can run in the current environment.
        
        Returns:
            True if provider is configured and available
        """
        pass
