"""Modifiers rewriting the accepted value set of an inner contract."""

from typing import Any, Callable, Dict, Optional
from ..types import MISSING, Bound, Stack, ensure_bound


class OptionalBound(Bound):
    """Lets an absent value through; marks the field as not required."""

    def __init__(self, inner: Bound):
        super().__init__()
        self.inner = ensure_bound(inner, "Optional contract")

    @property
    def attributes(self) -> Dict[str, Any]:
        # read through so a lazy inner contract is not resolved early
        return {**self.inner.attributes, "optional": True}

    def _transform(self, value: Any, stack: Stack) -> Any:
        if value is MISSING:
            return MISSING
        return self.inner.transform(value, stack)

    def _restore(self, literal: Any, stack: Stack) -> Any:
        if literal is MISSING:
            return MISSING
        return self.inner.restore(literal, stack)

    def __repr__(self) -> str:
        return f"optional({self.inner!r})"


class NullableBound(Bound):
    """Lets ``None`` through untouched."""

    def __init__(self, inner: Bound):
        super().__init__()
        self.inner = ensure_bound(inner, "Nullable contract")

    @property
    def attributes(self) -> Dict[str, Any]:
        return {**self.inner.attributes, "nullable": True}

    def _transform(self, value: Any, stack: Stack) -> Any:
        if value is None:
            return None
        return self.inner.transform(value, stack)

    def _restore(self, literal: Any, stack: Stack) -> Any:
        if literal is None:
            return None
        return self.inner.restore(literal, stack)

    def __repr__(self) -> str:
        return f"nullable({self.inner!r})"


class LazyBound(Bound):
    """
    Deferred contract reference.

    The resolver runs on first use and its result is cached. This lets a
    schema refer to itself, e.g. a tree node whose children are nodes.
    """

    def __init__(self, resolver: Callable[[], Bound]):
        self._resolver = resolver
        self._resolved: Optional[Bound] = None

    def resolve(self) -> Bound:
        if self._resolved is None:
            self._resolved = ensure_bound(self._resolver(), "Lazy contract")
        return self._resolved

    @property
    def attributes(self) -> Dict[str, Any]:
        return self.resolve().attributes

    def _transform(self, value: Any, stack: Stack) -> Any:
        return self.resolve().transform(value, stack)

    def _restore(self, literal: Any, stack: Stack) -> Any:
        return self.resolve().restore(literal, stack)

    def __repr__(self) -> str:
        if self._resolved is None:
            return "lazy(<unresolved>)"
        return f"lazy({self._resolved!r})"


def optional(bound: Bound) -> OptionalBound:
    """
    Expresses a value that may be absent.

    Inside ``object_`` the key becomes non-mandatory; an absent key is
    left out of both the literal and the restored value.
    """
    return OptionalBound(bound)


def nullable(bound: Bound) -> NullableBound:
    """Expresses a value that may be ``None``."""
    return NullableBound(bound)


def lazy(resolver: Callable[[], Bound]) -> LazyBound:
    """
    Expresses a contract resolved at call time.

    Args:
        resolver: Zero-argument callable returning the contract

    Returns:
        LazyBound contract
    """
    return LazyBound(resolver)
