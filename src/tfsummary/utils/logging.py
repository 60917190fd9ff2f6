"""Structured logging setup for tfsummary."""

import logging
import os
import sys
from typing import Optional


def _level_from_env(default: int) -> int:
    """Resolve log level from TFSUMMARY_LOG_LEVEL (name or number)."""
    value = os.environ.get("TFSUMMARY_LOG_LEVEL", "").strip()
    if not value:
        return default
    if value.isdigit():
        return int(value)
    level = logging.getLevelName(value.upper())
    return level if isinstance(level, int) else default


def setup_logging(level: Optional[int] = None, format_string: Optional[str] = None) -> logging.Logger:
    """
    Set up structured logging for tfsummary.
    
    Args:
        level: Logging level (default: TFSUMMARY_LOG_LEVEL or WARNING)
        format_string: Custom format string (optional)
    
    Returns:
        Configured logger instance
    """
    if format_string is None:
        format_string = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    if level is None:
        level = _level_from_env(logging.WARNING)
    
    logging.basicConfig(
        level=level,
        format=format_string,
        stream=sys.stderr,
        datefmt="%Y-%m-%d %H:%M:%S"
    )
    
    logger = logging.getLogger("tfsummary")
    logger.setLevel(level)
    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for a specific module."""
    return logging.getLogger(f"tfsummary.{name}")
