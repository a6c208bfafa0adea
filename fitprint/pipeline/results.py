"""Pipeline run result carriers."""

from __future__ import annotations

from dataclasses import dataclass

from fitprint.diagnostics import Diagnostic, has_warnings
from fitprint.doc import Document


@dataclass(frozen=True, slots=True)
class RenderResult:
    """Rendered text together with the document it came from."""

    document: Document
    text: str
    diagnostics: list[Diagnostic]

    @property
    def overflowed(self) -> bool:
        return has_warnings(self.diagnostics)
