"""Layout defaults shared by builders and the renderer."""

from typing import Final

DEFAULT_WIDTH: Final[int] = 100
"""Column budget used when a caller does not pass one."""

DEFAULT_INDENT: Final[int] = 4
"""Indentation added per nesting level of a broken collection."""
