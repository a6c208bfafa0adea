"""Diagnostic codes and messages."""

from dataclasses import dataclass
from typing import Final, Literal

Severity = Literal["error", "warning"]


@dataclass(frozen=True, slots=True)
class DiagnosticSpec:
    code: str
    message: str
    hint: str | None = None
    severity: Severity = "error"
    category: str | None = None


RENDER_LINE_OVERFLOW: Final[DiagnosticSpec] = DiagnosticSpec(
    code="RENDER_LINE_OVERFLOW",
    message="Rendered line exceeds the maximum width.",
    hint="Atomic text cannot be broken; widen the budget or shorten the value.",
    severity="warning",
    category="render",
)
