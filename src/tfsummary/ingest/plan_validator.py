"""Validate Terraform plan JSON structure."""

from typing import Dict, Any, List
from ..utils.errors import PlanLoadError
from ..utils.logging import get_logger

logger = get_logger("ingest.plan_validator")

SUPPORTED_FORMAT_VERSIONS = ["0.1", "0.2", "1.0", "1.1", "1.2"]


def validate_plan_structure(plan_data: Any) -> None:
    """
    Validate Terraform plan JSON structure.
    
    Only the top-level shape is enforced; individual resource changes are
    checked by the normalizer, which excludes malformed entries.
    
    Args:
        plan_data: Parsed Terraform plan JSON
        
    Raises:
        PlanLoadError: If plan structure is invalid
    """
    if not isinstance(plan_data, dict):
        raise PlanLoadError(
            "Plan JSON must be an object. "
            "Please ensure you're using the output of 'terraform show -json'."
        )
    
    format_version = plan_data.get("format_version")
    if format_version is None:
        logger.warning("Plan JSON has no 'format_version' field; continuing anyway")
    elif not isinstance(format_version, str):
        raise PlanLoadError(
            "Plan 'format_version' must be a string. "
            "This may not be a valid Terraform plan JSON file."
        )
    else:
        version_major_minor = ".".join(format_version.split(".")[:2])
        if version_major_minor not in SUPPORTED_FORMAT_VERSIONS:
            logger.warning(
                f"Plan format version '{format_version}' may not be fully supported. "
                f"Supported versions: {', '.join(SUPPORTED_FORMAT_VERSIONS)}"
            )
    
    resource_changes = plan_data.get("resource_changes")
    if resource_changes is not None and not isinstance(resource_changes, list):
        raise PlanLoadError(
            "Plan 'resource_changes' must be a list. "
            "This may not be a valid Terraform plan JSON file."
        )
    
    terraform_version = plan_data.get("terraform_version")
    if terraform_version is not None and not isinstance(terraform_version, str):
        raise PlanLoadError(
            "Plan 'terraform_version' must be a string. "
            "This may not be a valid Terraform plan JSON file."
        )
    
    logger.debug("Plan structure validation passed")


def validate_resource_change(resource: Any) -> List[str]:
    """
    Validate a single resource change structure.
    
    Args:
        resource: Resource change entry
        
    Returns:
        List of validation warnings (empty if valid)
    """
    warnings = []
    
    if not isinstance(resource, dict):
        warnings.append("Resource change must be an object")
        return warnings
    
    required_fields = ["address", "type", "name", "change"]
    missing_fields = [field for field in required_fields if field not in resource]
    if missing_fields:
        warnings.append(f"Missing required fields: {', '.join(missing_fields)}")
    
    change = resource.get("change")
    if isinstance(change, dict):
        actions = change.get("actions")
        if actions is None:
            warnings.append("Resource change missing 'actions' field")
        elif not isinstance(actions, list):
            warnings.append("Resource change 'actions' must be a list")
    elif change is not None:
        warnings.append("Resource change 'change' must be an object")
    
    return warnings


def get_plan_summary(plan_data: Dict[str, Any]) -> Dict[str, Any]:
    """
    Extract summary information from plan.
    
    Args:
        plan_data: Parsed Terraform plan JSON
        
    Returns:
        Dictionary with plan summary information
    """
    resource_changes = plan_data.get("resource_changes") or []
    
    return {
        "format_version": plan_data.get("format_version", "unknown"),
        "terraform_version": plan_data.get("terraform_version", "unknown"),
        "resource_count": len(resource_changes),
    }
