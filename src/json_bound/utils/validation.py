"""Validation utilities for literal values."""

from collections.abc import Mapping, Sequence
from typing import Any
from ..types import MISSING


class ValidationUtils:
    """Utility class for classifying and comparing literal values."""

    @staticmethod
    def kind_of(value: Any) -> str:
        """
        Name the literal kind of a value.

        Args:
            value: Value to classify

        Returns:
            One of 'string', 'number', 'boolean', 'null', 'array', 'object',
            'missing', or the Python type name for anything else
        """
        if value is MISSING:
            return "missing"
        if value is None:
            return "null"
        # bool must be checked before int, it is a subclass
        if isinstance(value, bool):
            return "boolean"
        if isinstance(value, (int, float)):
            return "number"
        if isinstance(value, str):
            return "string"
        if ValidationUtils.is_sequence(value):
            return "array"
        if ValidationUtils.is_mapping(value):
            return "object"
        return type(value).__name__

    @staticmethod
    def is_number(value: Any) -> bool:
        """Check for int or float, excluding bool."""
        return isinstance(value, (int, float)) and not isinstance(value, bool)

    @staticmethod
    def is_mapping(value: Any) -> bool:
        """Check whether value is a structured mapping."""
        return isinstance(value, Mapping)

    @staticmethod
    def is_sequence(value: Any) -> bool:
        """Check whether value is an ordered sequence other than text."""
        return (isinstance(value, Sequence)
                and not isinstance(value, (str, bytes, bytearray)))

    @staticmethod
    def strict_equals(left: Any, right: Any) -> bool:
        """
        Deep equality that also compares literal kinds.

        Plain ``==`` treats ``True == 1`` as equal; literal tags must not.

        Args:
            left: First value
            right: Second value

        Returns:
            True if both values have the same kind and equal contents
        """
        left_kind = ValidationUtils.kind_of(left)
        if left_kind != ValidationUtils.kind_of(right):
            return False

        if left_kind == "object":
            if set(left.keys()) != set(right.keys()):
                return False
            return all(ValidationUtils.strict_equals(left[key], right[key]) for key in left)

        if left_kind == "array":
            if len(left) != len(right):
                return False
            return all(ValidationUtils.strict_equals(a, b) for a, b in zip(left, right))

        return left == right
