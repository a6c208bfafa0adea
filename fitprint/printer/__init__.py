"""Width-aware document printer."""

from fitprint.printer.options import RenderOptions
from fitprint.printer.renderer import render, render_with_diagnostics

__all__ = [
    "RenderOptions",
    "render",
    "render_with_diagnostics",
]
