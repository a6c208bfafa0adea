"""Describing Python values through the builder protocol."""

from fitprint.describe.describe import describe_value
from fitprint.describe.formatter import Formatter, describe
from fitprint.describe.protocol import Pretty

__all__ = [
    "Formatter",
    "Pretty",
    "describe",
    "describe_value",
]
