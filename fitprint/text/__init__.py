"""Offsets into rendered text."""

from fitprint.text.text import TextRange

__all__ = ["TextRange"]
