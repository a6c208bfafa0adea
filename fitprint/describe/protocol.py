"""Contract for values that describe their own shape."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from fitprint.describe.formatter import Formatter
    from fitprint.doc import Document


@runtime_checkable
class Pretty(Protocol):
    """Value that builds its own document through the formatter's builders.

    Implementations must be idempotent: a value may be described more than once
    per `pformat` call.
    """

    def __pretty__(self, f: Formatter) -> Document: ...
