"""Describe-and-render entrypoints."""

from fitprint.pipeline.entrypoints import pformat, pformat_result
from fitprint.pipeline.results import RenderResult

__all__ = [
    "RenderResult",
    "pformat",
    "pformat_result",
]
