"""Output contracts shared by the pipeline and the renderers."""

from .plan_report import PlanReport, RenderOptions, OutputFormat

__all__ = ["PlanReport", "RenderOptions", "OutputFormat"]
