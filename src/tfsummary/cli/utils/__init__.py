"""CLI utilities package."""

import logging
import sys
from typing import Any, Dict, Optional
import click
from ...ingest.plan_loader import load_plan_json, parse_plan_text
from ...utils.errors import PlanLoadError
from ...utils.logging import get_logger
from .file_resolver import resolve_file_path

logger = get_logger("cli.utils")


def format_error(message: str, suggestion: Optional[str] = None) -> str:
    """
    Format error message with optional suggestion.
    
    Args:
        message: Error message
        suggestion: Optional suggestion or help text
        
    Returns:
        Formatted error string
    """
    error = f"Error: {message}"
    if suggestion:
        error += f"\nTip: {suggestion}"
    return error


def read_plan(plan_file: Optional[str]) -> Dict[str, Any]:
    """
    Load plan JSON from a file, or from stdin when no file is given.
    
    Raises:
        PlanLoadError: If the file is missing or the input is not a plan
        click.UsageError: If no file is given and stdin is a terminal
    """
    if plan_file:
        try:
            plan_path = resolve_file_path(plan_file)
        except FileNotFoundError as e:
            raise PlanLoadError(str(e))
        return load_plan_json(str(plan_path))
    
    stdin = click.get_text_stream("stdin")
    if stdin.isatty():
        raise click.UsageError("No plan file given and nothing piped on stdin.")
    return parse_plan_text(stdin.read(), source="<stdin>")


def set_verbosity(verbose: bool) -> None:
    """Lower the tfsummary log level to DEBUG when verbose."""
    if verbose:
        logging.getLogger("tfsummary").setLevel(logging.DEBUG)


def exit_with_error(message: str, suggestion: Optional[str] = None) -> None:
    """Print a formatted error to stderr and exit with status 1."""
    click.echo(format_error(message, suggestion), err=True)
    sys.exit(1)


__all__ = ["resolve_file_path", "read_plan", "format_error", "set_verbosity", "exit_with_error"]
