"""Documents for ordinary Python values."""

from __future__ import annotations

import dataclasses
from enum import Enum
from typing import TYPE_CHECKING, cast

from fitprint.doc import Document, Text, is_document, lines

if TYPE_CHECKING:
    from fitprint.describe.formatter import Formatter

_ATOMIC_TYPES = (bool, int, float, complex, str, bytes, bytearray)


def describe_value(value: object, f: Formatter) -> Document:
    if is_document(value):
        return cast(Document, value)
    if value is None:
        return Text("None")
    if isinstance(value, Enum):
        return Text(f"{type(value).__name__}.{value.name}")
    if isinstance(value, _ATOMIC_TYPES):
        return Text(repr(value))
    if isinstance(value, type):
        return lines(repr(value))

    with f.visiting(value) as fresh:
        if not fresh:
            return Text(_recursion(value))
        return _describe_compound(value, f)


def _describe_compound(value: object, f: Formatter) -> Document:
    pretty = getattr(type(value), "__pretty__", None)
    if pretty is not None:
        return pretty(value, f)

    if dataclasses.is_dataclass(value):
        builder = f.debug_struct(type(value).__name__)
        for field in dataclasses.fields(value):
            # `field(repr=False)` also hides the field here.
            if field.repr:
                builder.field(field.name, f.describe(getattr(value, field.name)))
        return builder.finish()

    if isinstance(value, tuple):
        field_names = getattr(type(value), "_fields", None)
        if field_names is not None:
            builder = f.debug_struct(type(value).__name__)
            for name, item in zip(field_names, value):
                builder.field(name, f.describe(item))
            return builder.finish()
        return f.debug_tuple().fields(f.describe(item) for item in value).finish()

    if isinstance(value, list):
        return f.debug_list().elements(f.describe(item) for item in value).finish()

    if isinstance(value, dict):
        return f.debug_map().entries((f.describe(k), f.describe(v)) for k, v in value.items()).finish()

    if isinstance(value, (set, frozenset)):
        return f.debug_set().elements(f.describe(item) for item in _ordered(value)).finish()

    return lines(repr(value))


def _ordered(items: set[object] | frozenset[object]) -> list[object]:
    try:
        return sorted(items)
    except TypeError:
        # Mixed or unorderable members keep iteration order.
        return list(items)


def _recursion(value: object) -> str:
    return f"<Recursion on {type(value).__name__} with id={id(value)}>"
