"""Load and validate Terraform plan JSON."""

import json
from pathlib import Path
from typing import Dict, Any
from ..utils.errors import PlanLoadError
from ..utils.logging import get_logger
from .plan_validator import validate_plan_structure, get_plan_summary

logger = get_logger("ingest.plan_loader")

GENERATE_HINT = "Generate one using: terraform show -json tfplan > plan.json"


def load_plan_json(plan_path: str) -> Dict[str, Any]:
    """
    Load and validate Terraform plan JSON file.
    
    Args:
        plan_path: Path to Terraform plan JSON file
        
    Returns:
        Parsed and validated plan data
        
    Raises:
        PlanLoadError: If file cannot be loaded or is invalid
    """
    path = Path(plan_path)
    
    if not path.exists():
        raise PlanLoadError(
            f"Plan file not found: {plan_path}. "
            "Please check the file path and ensure the file exists. "
            f"{GENERATE_HINT}"
        )
    
    if not path.is_file():
        raise PlanLoadError(
            f"Path is not a file: {plan_path}. "
            "Please provide a valid Terraform plan JSON file."
        )
    
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise PlanLoadError(
            f"Error reading plan file: {e}. "
            "Please check file permissions and try again."
        )
    
    return parse_plan_text(text, source=str(plan_path))


def parse_plan_text(text: str, source: str = "<stdin>") -> Dict[str, Any]:
    """
    Parse and validate Terraform plan JSON text.
    
    Args:
        text: Raw JSON text
        source: Where the text came from, used in messages
        
    Returns:
        Parsed and validated plan data
        
    Raises:
        PlanLoadError: If text is not valid JSON or not a plan
    """
    try:
        plan_data = json.loads(text)
    except json.JSONDecodeError as e:
        raise PlanLoadError(
            f"Invalid JSON input from {source}: {e}. {GENERATE_HINT}"
        )
    
    try:
        validate_plan_structure(plan_data)
    except PlanLoadError as e:
        raise PlanLoadError(f"Invalid Terraform plan structure in {source}: {e}")
    
    if plan_data.get("resource_changes") is None:
        logger.info("Plan JSON has no 'resource_changes' - treating as empty plan")
        plan_data["resource_changes"] = []
    
    summary = get_plan_summary(plan_data)
    logger.info(
        f"Loaded Terraform plan from {source} "
        f"(format: {summary['format_version']}, "
        f"terraform: {summary['terraform_version']}, "
        f"resource changes: {summary['resource_count']})"
    )
    
    return plan_data
