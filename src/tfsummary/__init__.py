"""tfsummary - Human-readable Terraform plan summaries with cost estimates."""

from typing import Any, Dict, Optional
from .ingest.plan_loader import load_plan_json
from .ingest.plan_normalizer import normalize_plan
from .analysis.summary import summarize, total_monthly_cost
from .contracts.plan_report import PlanReport
from .config import load_config
from .cost import CostProvider, estimate_costs
from .utils.logging import setup_logging, get_logger
from .utils.errors import TfSummaryError, CostProviderError

__version__ = "1.0.0"

__all__ = ["analyze", "build_report"]

setup_logging()
logger = get_logger("pipeline")


def build_report(
    plan_data: Dict[str, Any],
    config: Optional[Dict[str, Any]] = None,
    region: Optional[str] = None,
    with_cost: Optional[bool] = None,
    provider: Optional[CostProvider] = None
) -> PlanReport:
    """
    Normalize a loaded plan, optionally merge cost data, and summarize it.

    Cost-provider failures never abort the run: they are logged and recorded
    in the report's warnings, and cost fields stay None.

    Args:
        plan_data: Parsed Terraform plan JSON
        config: Loaded configuration (defaults loaded when None)
        region: Region for cost estimates (config region when None)
        with_cost: Run cost estimation (config cost.enabled when None)
        provider: Optional cost provider instance (overrides config)

    Returns:
        PlanReport

    Raises:
        NormalizationError: If the plan's top-level structure is invalid
    """
    if config is None:
        config = load_config()
    region = region or config.get("region", "us-east-1")
    if with_cost is None:
        with_cost = bool(config.get("cost", {}).get("enabled", True))

    records = normalize_plan(plan_data).resources
    warnings = []
    cost_estimated = False

    if with_cost and records:
        try:
            estimate_costs(records, plan_data, region, config, provider=provider)
            cost_estimated = True
        except CostProviderError as e:
            logger.warning(f"Cost estimation failed: {e}")
            warnings.append(f"Cost estimation failed: {e}")

    report = PlanReport(
        resources=records,
        summary=summarize(records),
        total_monthly_cost=total_monthly_cost(records),
        region=region if with_cost else None,
        cost_estimated=cost_estimated,
        warnings=warnings,
    )
    logger.info(
        f"Plan summary: {report.summary.create} create, {report.summary.update} update, "
        f"{report.summary.replace} replace, {report.summary.delete} delete"
    )
    return report


def analyze(
    plan_json_path: str,
    config_path: Optional[str] = None,
    region: Optional[str] = None,
    with_cost: Optional[bool] = None
) -> Dict[str, Any]:
    """Summarize a Terraform plan JSON file and return the report as a dict."""
    try:
        logger.info(f"Starting summary of plan: {plan_json_path}")

        config = load_config(config_path)
        plan_data = load_plan_json(plan_json_path)
        report = build_report(plan_data, config, region=region, with_cost=with_cost)

        if not report.resources:
            logger.warning("No resource changes found in plan")

        return report.model_dump(by_alias=True)

    except TfSummaryError:
        raise
    except Exception as e:
        logger.error(f"Unexpected error during summary: {e}", exc_info=True)
        raise TfSummaryError(f"Summary failed: {e}") from e
