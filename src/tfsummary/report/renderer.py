"""Format dispatch and output writing for rendered reports."""

import json
from pathlib import Path
from typing import Callable, Dict, Optional
import click
from ..contracts.plan_report import OutputFormat, PlanReport, RenderOptions
from ..presentation.terminal import render_terminal
from ..utils.errors import RenderError
from ..utils.logging import get_logger
from .html import render_html
from .markdown import render_markdown

logger = get_logger("report.renderer")


def render_json(report: PlanReport, options: Optional[RenderOptions] = None) -> str:
    """Dump the report contract as indented JSON (diff keys use 'from'/'to')."""
    return json.dumps(report.model_dump(by_alias=True), indent=2, default=str)


RENDERERS: Dict[str, Callable[[PlanReport, Optional[RenderOptions]], str]] = {
    OutputFormat.TERMINAL.value: render_terminal,
    OutputFormat.HTML.value: render_html,
    OutputFormat.MARKDOWN.value: render_markdown,
    OutputFormat.JSON.value: render_json,
}


def render(report: PlanReport, options: Optional[RenderOptions] = None) -> str:
    """
    Render report in the format selected by options.
    
    Raises:
        RenderError: If the format is not supported
    """
    options = options or RenderOptions()
    renderer = RENDERERS.get(options.format)
    if renderer is None:
        raise RenderError(
            f"Unsupported output format '{options.format}'. "
            f"Supported formats: {', '.join(RENDERERS)}"
        )
    return renderer(report, options)


def write_output(text: str, output_path: str, strip_styles: bool = True) -> Path:
    """
    Write rendered output to a file, creating parent directories.
    
    Args:
        text: Rendered text
        output_path: Destination path
        strip_styles: Remove ANSI styling (terminal output written to files)
        
    Returns:
        Resolved output path
        
    Raises:
        RenderError: If the file cannot be written
    """
    path = Path(output_path).resolve()
    if strip_styles:
        text = click.unstyle(text)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, 'w', encoding='utf-8') as f:
            f.write(text)
    except OSError as e:
        raise RenderError(f"Failed to write output to {path}: {e}")
    logger.info(f"Wrote output to {path}")
    return path
