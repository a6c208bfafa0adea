"""Render configuration."""

from __future__ import annotations

import shutil
from dataclasses import dataclass

from fitprint.constants import DEFAULT_INDENT, DEFAULT_WIDTH


@dataclass(frozen=True, slots=True)
class RenderOptions:
    """Width budget and indentation step.

    `indent` is consumed when documents are built; the renderer itself only
    reads indentation from `Indent` nodes.
    """

    max_width: int = DEFAULT_WIDTH
    indent: int = DEFAULT_INDENT

    def __post_init__(self):
        if self.max_width < 1:
            raise ValueError("max_width must be >= 1")
        if self.indent < 0:
            raise ValueError("indent cannot be negative")

    @staticmethod
    def from_terminal(fallback: int = DEFAULT_WIDTH, *, indent: int = DEFAULT_INDENT) -> "RenderOptions":
        """Use the current terminal width, or `fallback` when it is unknown."""
        columns = shutil.get_terminal_size((fallback, 24)).columns
        return RenderOptions(max_width=max(columns, 1), indent=indent)
