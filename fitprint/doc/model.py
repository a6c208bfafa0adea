"""Immutable layout documents produced by builders and consumed by the renderer."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum
from typing import Final


class LineKind(StrEnum):
    """How a break point renders in flat and broken groups."""

    SOFT = "soft"  # space when flat
    EMPTY = "empty"  # nothing when flat
    HARD = "hard"  # never flat


@dataclass(frozen=True, slots=True)
class Text:
    """Literal content, measured by its character length."""

    text: str

    def __post_init__(self):
        if "\n" in self.text or "\r" in self.text:
            raise ValueError("Text cannot contain line breaks; join pieces with hard lines")


@dataclass(frozen=True, slots=True)
class Concat:
    parts: tuple[Document, ...]


@dataclass(frozen=True, slots=True)
class Group:
    """Unit rendered either entirely flat or entirely broken."""

    child: Document
    breakable: bool = True


@dataclass(frozen=True, slots=True)
class Line:
    kind: LineKind = LineKind.SOFT


@dataclass(frozen=True, slots=True)
class Indent:
    child: Document
    delta: int

    def __post_init__(self):
        if self.delta < 0:
            raise ValueError("Indent delta cannot be negative")


@dataclass(frozen=True, slots=True)
class IfBroken:
    """Content that only appears when the enclosing group is broken, e.g. a trailing comma."""

    child: Document


type Document = Text | Concat | Group | Line | Indent | IfBroken

DOCUMENT_TYPES: Final = (Text, Concat, Group, Line, Indent, IfBroken)

NIL: Final[Concat] = Concat(())
SOFT_LINE: Final[Line] = Line(LineKind.SOFT)
EMPTY_LINE: Final[Line] = Line(LineKind.EMPTY)
HARD_LINE: Final[Line] = Line(LineKind.HARD)


def is_document(value: object) -> bool:
    return isinstance(value, DOCUMENT_TYPES)


def concat(*parts: Document) -> Document:
    if len(parts) == 1:
        return parts[0]
    return Concat(tuple(parts))


def join(separator: Document, docs: Iterable[Document]) -> Document:
    """Interleave `separator` between `docs`."""
    parts: list[Document] = []
    for doc in docs:
        if parts:
            parts.append(separator)
        parts.append(doc)
    return concat(*parts)


def lines(value: str) -> Document:
    """Split multi-line text into literal pieces joined by hard lines."""
    pieces = value.splitlines()
    if len(pieces) <= 1:
        return Text(pieces[0] if pieces else "")
    return join(HARD_LINE, [Text(piece) for piece in pieces])


def is_empty(doc: Document) -> bool:
    match doc:
        case Text(value):
            return value == ""
        case Concat(parts):
            return all(is_empty(part) for part in parts)
        case Group(child) | Indent(child) | IfBroken(child):
            return is_empty(child)
        case _:
            return False
