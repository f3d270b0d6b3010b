"""Combinators building contracts out of other contracts."""

from .containers import ArrayBound, ObjectBound, RecordBound, array, extend_object, object_, record
from .document import DocumentBound, document
from .modifiers import LazyBound, NullableBound, OptionalBound, lazy, nullable, optional
from .union import UnionBound, union, when

__all__ = [
    "ArrayBound", "ObjectBound", "RecordBound", "array", "extend_object", "object_", "record",
    "DocumentBound", "document",
    "LazyBound", "NullableBound", "OptionalBound", "lazy", "nullable", "optional",
    "UnionBound", "union", "when",
]
