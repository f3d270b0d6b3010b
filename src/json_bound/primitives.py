"""Leaf contracts for literal primitives."""

from typing import Any, Callable, Optional
from .errors import fail, stackwrap
from .types import Bound, FailureType, Stack
from .utils.validation import ValidationUtils


class Unchecked(Bound):
    """Identity contract. Accepts anything in both directions."""

    def _transform(self, value: Any, stack: Stack) -> Any:
        return value

    def _restore(self, literal: Any, stack: Stack) -> Any:
        return literal

    def __repr__(self) -> str:
        return "any_()"


class Validated(Bound):
    """
    Identity contract guarded by a predicate.

    The same predicate runs on the way down and on the way up, so the
    representation never changes, only the accepted value set narrows.
    """

    def __init__(self, predicate: Callable[[Any], bool],
                 reason: Optional[Callable[[Any], str]] = None,
                 error_type: FailureType = FailureType.VALIDATION):
        super().__init__()
        self.predicate = predicate
        self.reason = reason or (lambda value: "Failed validation")
        self.error_type = error_type

    def _check(self, value: Any, stack: Stack) -> Any:
        if not self.predicate(value):
            fail(self.reason(value), stack, value, self.error_type)
        return value

    def _transform(self, value: Any, stack: Stack) -> Any:
        return self._check(value, stack)

    def _restore(self, literal: Any, stack: Stack) -> Any:
        return self._check(literal, stack)


class LiteralValue(Validated):
    """Accepts only values strictly deep-equal to a fixed constant."""

    def __init__(self, value: Any):
        self.value = value
        super().__init__(
            lambda candidate: ValidationUtils.strict_equals(candidate, value),
            lambda candidate: f"expected literal {value!r}, received {candidate!r}",
            FailureType.LITERAL_MISMATCH,
        )

    def __repr__(self) -> str:
        return f"literal({self.value!r})"


def any_() -> Bound:
    """Represents any value. Bypasses all checks, use with care."""
    return Unchecked()


def validated(predicate: Callable[[Any], bool],
              reason: Optional[Callable[[Any], str]] = None) -> Bound:
    """
    Validate a value with the given functions upon transformation/restoration.

    Args:
        predicate: Returns True for acceptable values
        reason: Builds the failure message from the rejected value

    Returns:
        Validated contract
    """
    return Validated(predicate, reason)


def literal(value: Any) -> Bound:
    """Expresses a fixed literal value, typically a discriminator tag."""
    return stackwrap(LiteralValue(value), "literal")


def _kind_check(kind: str, predicate: Callable[[Any], bool]) -> Validated:
    return Validated(
        predicate,
        lambda value: f"expected '{kind}', received '{ValidationUtils.kind_of(value)}'",
        FailureType.TYPE_MISMATCH,
    )


def string() -> Bound:
    """Expresses a string value."""
    return stackwrap(_kind_check("string", lambda v: isinstance(v, str)), "string")


def number() -> Bound:
    """Expresses a numeric value. Booleans are not numbers."""
    return stackwrap(_kind_check("number", ValidationUtils.is_number), "number")


def boolean() -> Bound:
    """Expresses a boolean value."""
    return stackwrap(_kind_check("boolean", lambda v: isinstance(v, bool)), "boolean")


def nil() -> Bound:
    """Expresses a null value."""
    return stackwrap(_kind_check("null", lambda v: v is None), "nil")
