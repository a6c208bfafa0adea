"""Centralized documents and values used across builder/renderer/describe tests."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import NamedTuple

from fitprint.builders import ListBuilder, StructBuilder
from fitprint.describe import Formatter
from fitprint.doc import Document, Text


@dataclass(frozen=True, slots=True)
class LayoutCase:
    name: str
    document: Document
    width: int
    expected: str


def numbers(*values: int) -> list[Document]:
    return [Text(str(value)) for value in values]


def number_list(*values: int) -> Document:
    return ListBuilder().elements(numbers(*values)).finish()


def point(x: int, y: int) -> Document:
    return StructBuilder("Point").field("x", Text(str(x))).field("y", Text(str(y))).finish()


NESTED_LISTS: Document = ListBuilder().elements(
    [
        number_list(1, 2, 3, 4),
        number_list(5, 6, 7, 8),
        number_list(9, 10, 11, 12),
    ]
).finish()


LAYOUT_CASES: tuple[LayoutCase, ...] = (
    LayoutCase(name="flat_list", document=number_list(1, 2, 3), width=80, expected="[1, 2, 3]"),
    LayoutCase(
        name="broken_list",
        document=number_list(1, 2, 3),
        width=5,
        expected="[\n    1,\n    2,\n    3,\n]",
    ),
    LayoutCase(name="flat_struct", document=point(1, 2), width=80, expected="Point { x: 1, y: 2 }"),
    LayoutCase(
        name="nested_lists_break_outer_only",
        document=NESTED_LISTS,
        width=40,
        expected="[\n    [1, 2, 3, 4],\n    [5, 6, 7, 8],\n    [9, 10, 11, 12],\n]",
    ),
    LayoutCase(name="empty_list", document=ListBuilder().finish(), width=80, expected="[]"),
    LayoutCase(name="empty_list_narrow", document=ListBuilder().finish(), width=1, expected="[]"),
    LayoutCase(
        name="broken_struct",
        document=point(1, 2),
        width=10,
        expected="Point {\n    x: 1,\n    y: 2,\n}",
    ),
)


def case_id(case: LayoutCase) -> str:
    return case.name


class Color(Enum):
    RED = "red"
    GREEN = "green"


class Priority(IntEnum):
    LOW = 1
    HIGH = 2


@dataclass
class Numbers:
    a: list[list[int]]
    b: str


@dataclass
class Account:
    name: str
    password: str = field(repr=False)


@dataclass
class Marker:
    pass


class Pair(NamedTuple):
    left: int
    right: int


class Chunked10:
    """Describes 100 bytes as ten rows of ten."""

    def __init__(self, data: list[int]) -> None:
        self.data = data

    def __pretty__(self, f: Formatter) -> Document:
        rows = [self.data[start : start + 10] for start in range(0, len(self.data), 10)]
        return f.debug_list().elements(f.describe(row) for row in rows).finish()


class Push:
    def __init__(self, value: int) -> None:
        self.value = value

    def __pretty__(self, f: Formatter) -> Document:
        return f.debug_tuple("Push").field(f.describe(self.value)).finish()


class Load:
    def __init__(self, name: str) -> None:
        self.name = name

    def __pretty__(self, f: Formatter) -> Document:
        return f.debug_tuple("Load").field(f.describe(self.name)).finish()


class Mul:
    def __pretty__(self, f: Formatter) -> Document:
        return f.debug_tuple("Mul").finish()


class MultilineRepr:
    def __repr__(self) -> str:
        return "first\nsecond"
