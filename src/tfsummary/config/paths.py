"""Config path resolution for two-tier config system."""

from pathlib import Path
from typing import Optional


def get_defaults_path() -> Path:
    """Get the bundled defaults file."""
    return Path(__file__).parent / "defaults.yaml"


def get_user_config_path() -> Path:
    """Get user config path: ~/.tfsummary/config.yaml"""
    return Path.home() / ".tfsummary" / "config.yaml"


def get_project_config_path() -> Optional[Path]:
    """Get project config path: .tfsummary/config.yaml (from current working directory)"""
    project_config = Path.cwd() / ".tfsummary" / "config.yaml"
    if project_config.exists():
        return project_config
    return None


