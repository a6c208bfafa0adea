"""Diagnostics core types."""

from dataclasses import dataclass

from fitprint.diagnostics.codes import DiagnosticSpec, Severity
from fitprint.text import TextRange


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured, non-fatal report attached to a render result."""

    code: str
    message: str
    range: TextRange
    severity: Severity = "error"
    hint: str | None = None
    category: str | None = None

    @staticmethod
    def from_spec(spec: DiagnosticSpec, range: TextRange, *, message: str | None = None) -> "Diagnostic":
        return Diagnostic(
            code=spec.code,
            message=spec.message if message is None else f"{spec.message} {message}",
            range=range,
            severity=spec.severity,
            hint=spec.hint,
            category=spec.category,
        )
