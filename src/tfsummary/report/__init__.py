"""Report generation module - Markdown, HTML and JSON output surfaces."""

from .html import render_html
from .markdown import render_markdown
from .renderer import render, render_json, write_output

__all__ = [
    "render",
    "render_html",
    "render_json",
    "render_markdown",
    "write_output",
]
