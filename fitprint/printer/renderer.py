"""Width-aware renderer: decides flat vs. broken per group and emits text."""

from __future__ import annotations

from fitprint.constants import DEFAULT_WIDTH
from fitprint.diagnostics import RENDER_LINE_OVERFLOW, Diagnostic
from fitprint.doc import (
    Concat,
    Document,
    Group,
    IfBroken,
    Indent,
    Line,
    LineKind,
    Text,
    is_empty,
)
from fitprint.printer.options import RenderOptions
from fitprint.text import TextRange


def render(document: Document, max_width: int = DEFAULT_WIDTH) -> str:
    """Render `document` so that groups stay within `max_width` columns where possible."""
    output, _ = render_with_diagnostics(document, RenderOptions(max_width=max_width))
    return output


def render_with_diagnostics(
    document: Document,
    options: RenderOptions | None = None,
) -> tuple[str, list[Diagnostic]]:
    """Render and report lines that atomic text pushed past the width budget."""
    printer = _Printer((options or RenderOptions()).max_width)
    printer.print(document)
    return printer.output(), printer.diagnostics


# (indent, broken, document); `broken` is the mode of the nearest enclosing group.
type _Command = tuple[int, bool, Document]


class _Printer:
    """Single-use render state: output buffer, column, and pending commands."""

    def __init__(self, max_width: int) -> None:
        self._max_width = max_width
        self._chunks: list[str] = []
        self._offset = 0
        self._column = 0
        self._line_start = 0
        self._reported_line: int | None = None
        self.diagnostics: list[Diagnostic] = []

    def output(self) -> str:
        return "".join(self._chunks)

    def print(self, document: Document) -> None:
        # The root counts as broken: lines outside any group always break.
        stack: list[_Command] = [(0, True, document)]
        while stack:
            indent, broken, doc = stack.pop()
            match doc:
                case Text(value):
                    self._emit_text(value)
                case Concat(parts):
                    stack.extend((indent, broken, part) for part in reversed(parts))
                case Line(kind):
                    if kind == LineKind.HARD or broken:
                        self._newline(indent)
                    elif kind == LineKind.SOFT:
                        self._emit(" ")
                case Indent(child, delta):
                    stack.append((indent + delta, broken, child))
                case IfBroken(child):
                    if broken:
                        stack.append((indent, broken, child))
                case Group(child, breakable):
                    # Inside a flat group every nested group is flat as well.
                    flat = not broken or not breakable or is_empty(child) or self._fits(child, stack)
                    stack.append((indent, not flat, child))
                case _:
                    raise TypeError(f"Not a Document: {type(doc).__name__}")

    def _fits(self, doc: Document, rest: list[_Command]) -> bool:
        """Whether `doc` laid out flat, plus what follows it up to the next break, fits the line.

        A hard line inside `doc` never fits. `rest` is read in its own modes,
        so the first line break there ends the measurement.
        """
        remaining = self._max_width - self._column
        todo: list[tuple[bool, Document]] = [(False, doc)]
        next_command = len(rest)
        in_rest = False
        while remaining >= 0:
            if not todo:
                if next_command == 0:
                    return True
                next_command -= 1
                _, broken, following = rest[next_command]
                todo.append((broken, following))
                in_rest = True
                continue
            broken, current = todo.pop()
            match current:
                case Text(value):
                    remaining -= len(value)
                case Concat(parts):
                    todo.extend((broken, part) for part in reversed(parts))
                case Line(kind):
                    if kind == LineKind.HARD:
                        return in_rest
                    if broken:
                        return True
                    if kind == LineKind.SOFT:
                        remaining -= 1
                case Indent(child) | Group(child):
                    todo.append((broken, child))
                case IfBroken(child):
                    if broken:
                        todo.append((broken, child))
                case _:
                    raise TypeError(f"Not a Document: {type(current).__name__}")
        return False

    def _emit_text(self, value: str) -> None:
        start = self._offset
        self._emit(value)
        if self._column > self._max_width and self._reported_line != self._line_start:
            self._reported_line = self._line_start
            self.diagnostics.append(
                Diagnostic.from_spec(
                    RENDER_LINE_OVERFLOW,
                    TextRange.at(start, len(value)),
                    message=f"Column {self._column} > {self._max_width}.",
                )
            )

    def _emit(self, value: str) -> None:
        if not value:
            return
        self._chunks.append(value)
        self._offset += len(value)
        self._column += len(value)

    def _newline(self, indent: int) -> None:
        self._chunks.append("\n")
        self._offset += 1
        self._line_start = self._offset
        self._column = 0
        self._emit(" " * indent)
