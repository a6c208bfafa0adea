"""Diagnostics."""

from fitprint.diagnostics.codes import RENDER_LINE_OVERFLOW, DiagnosticSpec, Severity
from fitprint.diagnostics.diagnostic import Diagnostic
from fitprint.diagnostics.report import collect_diagnostics, has_warnings

__all__ = [
    "RENDER_LINE_OVERFLOW",
    "Diagnostic",
    "DiagnosticSpec",
    "Severity",
    "collect_diagnostics",
    "has_warnings",
]
