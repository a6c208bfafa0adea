"""Entrypoints that describe a value and render it in one call."""

from __future__ import annotations

from fitprint.describe import Formatter
from fitprint.diagnostics import collect_diagnostics
from fitprint.pipeline.results import RenderResult
from fitprint.printer import RenderOptions, render_with_diagnostics


def pformat(
    value: object,
    options: RenderOptions | None = None,
    *,
    width: int | None = None,
) -> str:
    """Pretty-format `value` without a trailing newline."""
    return pformat_result(value, options, width=width).text


def pformat_result(
    value: object,
    options: RenderOptions | None = None,
    *,
    width: int | None = None,
) -> RenderResult:
    """Pretty-format `value` and keep the document and diagnostics."""
    resolved = _resolve_options(options, width=width)
    document = Formatter(resolved).describe(value)
    text, render_diagnostics = render_with_diagnostics(document, resolved)
    return RenderResult(
        document=document,
        text=text,
        diagnostics=collect_diagnostics(render_diagnostics),
    )


def _resolve_options(options: RenderOptions | None, *, width: int | None) -> RenderOptions:
    if options is not None:
        if width is not None:
            raise ValueError("Pass either options or width, not both")
        return options
    if width is not None:
        return RenderOptions(max_width=width)
    return RenderOptions()
