"""Configuration module: layered YAML config with environment overrides."""

from .manager import load_config, get_cost_config, save_config, read_config_file
from .paths import get_user_config_path, get_project_config_path

__all__ = [
    "load_config",
    "get_cost_config",
    "save_config",
    "read_config_file",
    "get_user_config_path",
    "get_project_config_path",
]
