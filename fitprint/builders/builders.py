"""Struct/tuple/list/set/map builders that assemble one value's document."""

from __future__ import annotations

from collections.abc import Iterable

from fitprint.constants import DEFAULT_INDENT
from fitprint.doc import (
    EMPTY_LINE,
    SOFT_LINE,
    Concat,
    Document,
    Group,
    IfBroken,
    Indent,
    Text,
    is_document,
    join,
)

_SEPARATOR = Concat((Text(","), SOFT_LINE))
_TRAILING_SEPARATOR = IfBroken(Text(","))
_NON_EXHAUSTIVE = Text("..")
_KEY_SEPARATOR = Text(": ")


def delimited(
    opening: str,
    items: list[Document],
    closing: str,
    *,
    padded: bool,
    indent: int,
    tail: Document | None = None,
    trailing_separator: bool = True,
) -> Group:
    """Lay out `items` between delimiters.

    Flat: `{opening}{pad}a, b{pad}{closing}`.
    Broken: one item per line, indented, each followed by a comma.
    `tail` is placed after the last item without a trailing comma.
    `trailing_separator=False` drops the broken-mode comma after the last item.
    """
    edge = SOFT_LINE if padded else EMPTY_LINE
    body: list[Document] = [edge, join(_SEPARATOR, items)]
    if tail is not None:
        if items:
            body.append(_SEPARATOR)
        body.append(tail)
    elif trailing_separator:
        body.append(_TRAILING_SEPARATOR)
    return Group(
        Concat(
            (
                Text(opening),
                Indent(Concat(tuple(body)), indent),
                edge,
                Text(closing),
            )
        )
    )


def atom(value: str) -> Group:
    """Single literal that is never broken."""
    return Group(Text(value), breakable=False)


class _Builder:
    def __init__(self, *, indent: int = DEFAULT_INDENT) -> None:
        if indent < 0:
            raise ValueError("indent cannot be negative")
        self._indent = indent
        self._items: list[Document] = []
        self._finished = False

    def _check_open(self, operation: str) -> None:
        if self._finished:
            raise RuntimeError(f"{type(self).__name__}.{operation}() called after finish()")

    def _check_document(self, operation: str, doc: Document) -> None:
        if not is_document(doc):
            raise TypeError(
                f"{type(self).__name__}.{operation}() expects a finished Document, got {type(doc).__name__}"
            )

    def _push(self, operation: str, *docs: Document) -> None:
        self._check_open(operation)
        for doc in docs:
            self._check_document(operation, doc)
        self._items.append(docs[0] if len(docs) == 1 else Concat(docs))

    def _close(self, operation: str = "finish") -> list[Document]:
        self._check_open(operation)
        self._finished = True
        return self._items


class StructBuilder(_Builder):
    """Named record: `Name { a: 1, b: 2 }`."""

    def __init__(self, name: str, *, indent: int = DEFAULT_INDENT) -> None:
        super().__init__(indent=indent)
        self._name = name

    def field(self, name: str, value: Document) -> StructBuilder:
        self._push("field", Text(f"{name}: "), value)
        return self

    def finish(self) -> Document:
        items = self._close()
        if not items:
            return atom(self._name)
        return delimited(f"{self._name} {{", items, "}", padded=True, indent=self._indent)

    def finish_non_exhaustive(self) -> Document:
        """Finish with a `..` marker for fields that were left out."""
        items = self._close("finish_non_exhaustive")
        if not items:
            return atom(f"{self._name} {{ .. }}")
        return delimited(
            f"{self._name} {{",
            items,
            "}",
            padded=True,
            indent=self._indent,
            tail=_NON_EXHAUSTIVE,
        )


class TupleBuilder(_Builder):
    """Positional record: `Name(a, b)`. An empty name gives a bare `(a, b)`."""

    def __init__(self, name: str = "", *, indent: int = DEFAULT_INDENT) -> None:
        super().__init__(indent=indent)
        self._name = name

    def field(self, value: Document) -> TupleBuilder:
        self._push("field", value)
        return self

    def fields(self, values: Iterable[Document]) -> TupleBuilder:
        for value in values:
            self.field(value)
        return self

    def finish(self) -> Document:
        items = self._close()
        if not items:
            return atom(self._name if self._name else "()")
        if not self._name and len(items) == 1:
            # `(1,)` must keep its comma when flat to read as a tuple.
            return delimited(
                "(",
                [Concat((items[0], Text(",")))],
                ")",
                padded=False,
                indent=self._indent,
                trailing_separator=False,
            )
        return delimited(f"{self._name}(", items, ")", padded=False, indent=self._indent)


class ListBuilder(_Builder):
    """Sequence: `[a, b]`."""

    _opening = "["
    _closing = "]"

    def element(self, value: Document) -> ListBuilder:
        self._push("element", value)
        return self

    def elements(self, values: Iterable[Document]) -> ListBuilder:
        for value in values:
            self.element(value)
        return self

    def finish(self) -> Document:
        items = self._close()
        if not items:
            return atom(self._opening + self._closing)
        return delimited(self._opening, items, self._closing, padded=False, indent=self._indent)


class SetBuilder(ListBuilder):
    """Unordered collection: `{a, b}`."""

    _opening = "{"
    _closing = "}"


class MapBuilder(_Builder):
    """Associative collection: `{k: v, k2: v2}`.

    Entries are added whole with `entry`, or in two steps with `key` followed
    by `value`.
    """

    def __init__(self, *, indent: int = DEFAULT_INDENT) -> None:
        super().__init__(indent=indent)
        self._pending_key: Document | None = None

    def key(self, key: Document) -> MapBuilder:
        self._check_open("key")
        self._check_no_pending_key("key")
        self._check_document("key", key)
        self._pending_key = key
        return self

    def value(self, value: Document) -> MapBuilder:
        self._check_open("value")
        if self._pending_key is None:
            raise RuntimeError("MapBuilder.value() called before key()")
        self._push("value", self._pending_key, _KEY_SEPARATOR, value)
        self._pending_key = None
        return self

    def entry(self, key: Document, value: Document) -> MapBuilder:
        self._check_open("entry")
        self._check_no_pending_key("entry")
        self._push("entry", key, _KEY_SEPARATOR, value)
        return self

    def entries(self, pairs: Iterable[tuple[Document, Document]]) -> MapBuilder:
        for key, value in pairs:
            self.entry(key, value)
        return self

    def finish(self) -> Document:
        self._check_open("finish")
        self._check_no_pending_key("finish")
        items = self._close()
        if not items:
            return atom("{}")
        return delimited("{", items, "}", padded=False, indent=self._indent)

    def _check_no_pending_key(self, operation: str) -> None:
        if self._pending_key is not None:
            raise RuntimeError(f"MapBuilder.{operation}() called while a key is waiting for its value()")
