"""Layout document model."""

from fitprint.doc.model import (
    EMPTY_LINE,
    HARD_LINE,
    NIL,
    SOFT_LINE,
    Concat,
    Document,
    Group,
    IfBroken,
    Indent,
    Line,
    LineKind,
    Text,
    concat,
    is_document,
    is_empty,
    join,
    lines,
)

__all__ = [
    "EMPTY_LINE",
    "HARD_LINE",
    "NIL",
    "SOFT_LINE",
    "Concat",
    "Document",
    "Group",
    "IfBroken",
    "Indent",
    "Line",
    "LineKind",
    "Text",
    "concat",
    "is_document",
    "is_empty",
    "join",
    "lines",
]
