"""Builder protocol for describing a value's shape."""

from fitprint.builders.builders import (
    ListBuilder,
    MapBuilder,
    SetBuilder,
    StructBuilder,
    TupleBuilder,
    atom,
    delimited,
)

__all__ = [
    "ListBuilder",
    "MapBuilder",
    "SetBuilder",
    "StructBuilder",
    "TupleBuilder",
    "atom",
    "delimited",
]
