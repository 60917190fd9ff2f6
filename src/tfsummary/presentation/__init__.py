"""Presentation helpers and the terminal renderer."""

from .terminal import render_terminal

__all__ = ["render_terminal"]
