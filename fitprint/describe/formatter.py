"""Builder factory handed to value producers."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

from fitprint.builders import ListBuilder, MapBuilder, SetBuilder, StructBuilder, TupleBuilder
from fitprint.describe.describe import describe_value
from fitprint.doc import Document
from fitprint.printer.options import RenderOptions


class Formatter:
    """Creates builders with the configured indentation and describes nested values.

    One formatter serves one top-level value; it is not meant to be shared
    between concurrent callers.
    """

    def __init__(self, options: RenderOptions | None = None) -> None:
        self.options = options if options is not None else RenderOptions()
        self._active: set[int] = set()

    def debug_struct(self, name: str) -> StructBuilder:
        return StructBuilder(name, indent=self.options.indent)

    def debug_tuple(self, name: str = "") -> TupleBuilder:
        return TupleBuilder(name, indent=self.options.indent)

    def debug_list(self) -> ListBuilder:
        return ListBuilder(indent=self.options.indent)

    def debug_set(self) -> SetBuilder:
        return SetBuilder(indent=self.options.indent)

    def debug_map(self) -> MapBuilder:
        return MapBuilder(indent=self.options.indent)

    def describe(self, value: object) -> Document:
        """Build the document for a nested value."""
        return describe_value(value, self)

    @contextmanager
    def visiting(self, value: object) -> Iterator[bool]:
        """Mark `value` as being described; yields False if it already is (a cycle)."""
        key = id(value)
        if key in self._active:
            yield False
            return
        self._active.add(key)
        try:
            yield True
        finally:
            self._active.discard(key)


def describe(value: object, f: Formatter | None = None) -> Document:
    """Describe `value` with a fresh formatter unless one is supplied."""
    return (f if f is not None else Formatter()).describe(value)
