"""Layered configuration manager (defaults + user + project + explicit file)."""

import yaml
from pathlib import Path
from typing import Dict, Any, Optional
from .environment import apply_environment_overrides
from .paths import get_defaults_path, get_user_config_path, get_project_config_path
from ..utils.errors import ConfigError
from ..utils.logging import get_logger

logger = get_logger("config.manager")


def read_config_file(path: Path) -> Dict[str, Any]:
    """
    Read a YAML config mapping from path.
    
    Raises:
        ConfigError: If the file is unreadable, invalid YAML, or not a mapping
    """
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in config file {path}: {e}")
    except OSError as e:
        raise ConfigError(f"Error reading config file {path}: {e}")
    
    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a mapping")
    return data


def load_config(config_path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load full config tree.
    
    Order (later wins): bundled defaults, user config, project config,
    explicit config_path, then TFSUMMARY_* environment variables.
    
    Args:
        config_path: Optional explicit config file
        
    Returns:
        Configuration dictionary
        
    Raises:
        ConfigError: If the defaults or the explicit config file cannot be loaded
    """
    config = read_config_file(get_defaults_path())
    
    user_config_path = get_user_config_path()
    if user_config_path.exists():
        try:
            _deep_merge(config, read_config_file(user_config_path))
            logger.info(f"Loaded user config from {user_config_path}")
        except ConfigError as e:
            logger.warning(f"Could not load user config from {user_config_path}: {e}")
    
    project_config_path = get_project_config_path()
    if project_config_path:
        try:
            _deep_merge(config, read_config_file(project_config_path))
            logger.info(f"Loaded project config from {project_config_path}")
        except ConfigError as e:
            logger.warning(f"Could not load project config from {project_config_path}: {e}")
    
    if config_path is not None:
        path = Path(config_path)
        if not path.exists():
            raise ConfigError(f"Config file not found: {config_path}")
        _deep_merge(config, read_config_file(path))
        logger.info(f"Loaded configuration from {path}")
    
    return apply_environment_overrides(config)


def get_cost_config(config: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """
    Return cost subsection from loaded config.
    
    Args:
        config: Optional config dict (if None, loads from file)
        
    Returns:
        Cost configuration dictionary
    """
    if config is None:
        config = load_config()
    
    return config.get("cost", {})


def save_config(config: Dict[str, Any], path: Optional[Path] = None) -> None:
    """
    Save config to specified path (defaults to user config).
    
    Args:
        config: Configuration dictionary to save
        path: Optional path to save to (defaults to user config)
    """
    if path is None:
        path = get_user_config_path()
    
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, 'w', encoding='utf-8') as f:
            yaml.safe_dump(config, f, default_flow_style=False, sort_keys=False)
        logger.info(f"Saved config to {path}")
    except OSError as e:
        raise ConfigError(f"Failed to save config to {path}: {e}")


def _deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> None:
    """Deep merge override into base (mutates base)."""
    for key, value in override.items():
        if key in base and isinstance(base[key], dict) and isinstance(value, dict):
            _deep_merge(base[key], value)
        else:
            base[key] = value
