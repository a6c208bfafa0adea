"""Width-aware pretty printing for nested Python values."""

from fitprint.builders import ListBuilder, MapBuilder, SetBuilder, StructBuilder, TupleBuilder
from fitprint.constants import DEFAULT_INDENT, DEFAULT_WIDTH
from fitprint.describe import Formatter, Pretty, describe
from fitprint.diagnostics import Diagnostic
from fitprint.doc import Document
from fitprint.pipeline import RenderResult, pformat, pformat_result
from fitprint.printer import RenderOptions, render, render_with_diagnostics

__all__ = [
    "DEFAULT_INDENT",
    "DEFAULT_WIDTH",
    "Diagnostic",
    "Document",
    "Formatter",
    "ListBuilder",
    "MapBuilder",
    "Pretty",
    "RenderOptions",
    "RenderResult",
    "SetBuilder",
    "StructBuilder",
    "TupleBuilder",
    "describe",
    "pformat",
    "pformat_result",
    "render",
    "render_with_diagnostics",
]
