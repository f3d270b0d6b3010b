"""
json-bound - Bidirectional contracts between typed values and JSON literals.

Contracts are composed bottom-up from primitives and combinators; each
one can transform a typed value down to its literal form and restore it
back, reporting failures with the full path to the offending value.
"""

from .combinators import (
    array,
    document,
    extend_object,
    lazy,
    nullable,
    object_,
    optional,
    record,
    union,
    when,
)
from .errors import format_failure, stackwrap
from .primitives import any_, boolean, literal, nil, number, string, validated
from .serialization import (
    JSON_COMPACT,
    JSON_PRETTY,
    get_default_serialization_config,
    set_default_serialization_config,
)
from .types import MISSING, Bound, FailureType, SerializationConfig, Stack, TransformationError

__version__ = "1.0.0"
__all__ = [
    "Bound",
    "Stack",
    "TransformationError",
    "FailureType",
    "SerializationConfig",
    "MISSING",
    "any_",
    "validated",
    "literal",
    "string",
    "number",
    "boolean",
    "nil",
    "object_",
    "array",
    "record",
    "union",
    "when",
    "document",
    "optional",
    "nullable",
    "extend_object",
    "lazy",
    "stackwrap",
    "format_failure",
    "JSON_PRETTY",
    "JSON_COMPACT",
    "get_default_serialization_config",
    "set_default_serialization_config",
]
