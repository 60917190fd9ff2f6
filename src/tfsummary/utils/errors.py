"""Custom exception classes for tfsummary."""


class TfSummaryError(Exception):
    """Base exception for all tfsummary errors."""
    pass


class PlanLoadError(TfSummaryError):
    """Raised when Terraform plan JSON cannot be loaded or is invalid."""
    pass


class NormalizationError(TfSummaryError):
    """Raised when the plan's top-level structure cannot be normalized."""
    pass


class CostProviderError(TfSummaryError):
    """Raised when an external cost provider fails to produce cost data."""
    pass


class ConfigError(TfSummaryError):
    """Raised when configuration is invalid or missing."""
    pass


class RenderError(TfSummaryError):
    """Raised when a report cannot be rendered or written."""
    pass
