"""Discriminated union combinator."""

import logging
from typing import Any, Callable, List, Tuple, Union
from ..errors import fail
from ..types import Bound, FailureType, Stack, ensure_bound


logger = logging.getLogger(__name__)

Discriminator = Callable[[Any], Union[Bound, bool, None]]


def when(predicate: Callable[[Any], bool], bound: Bound) -> Discriminator:
    """
    Build a discriminator selecting ``bound`` whenever ``predicate`` holds.

    Args:
        predicate: Test applied to the candidate value
        bound: Contract used for matching values

    Returns:
        Discriminator function for ``union``
    """
    bound = ensure_bound(bound, "Union variant")

    def discriminator(value: Any) -> Union[Bound, bool]:
        return bound if predicate(value) else False

    return discriminator


class UnionBound(Bound):
    """
    Discriminated union with first-match semantics.

    Discriminators run strictly in declaration order and the first one
    returning a contract wins, even if later ones would match too.
    """

    def __init__(self, discriminators: List[Discriminator]):
        super().__init__()
        self.discriminators = discriminators

    def _select(self, candidate: Any, stack: Stack, operation: str) -> Tuple[int, Bound]:
        for index, discriminator in enumerate(self.discriminators):
            selected = discriminator(candidate)
            if isinstance(selected, Bound):
                return index, selected
            if selected:
                raise TypeError(
                    f"Union discriminator {index} returned {type(selected).__name__}, "
                    f"expected a Bound or False"
                )

        logger.debug(f"No union discriminator out of {len(self.discriminators)} matched during {operation}")
        fail(
            "No matching union discriminator",
            stack.push(f"union:{operation}"),
            candidate,
            FailureType.NO_DISCRIMINATOR,
        )

    def _transform(self, value: Any, stack: Stack) -> Any:
        index, selected = self._select(value, stack, "transform")
        return selected.transform(value, stack.push(f"union:transform[{index}]"))

    def _restore(self, literal: Any, stack: Stack) -> Any:
        index, selected = self._select(literal, stack, "restore")
        return selected.restore(literal, stack.push(f"union:restore[{index}]"))

    def __repr__(self) -> str:
        return f"union(<{len(self.discriminators)} discriminators>)"


def union(*discriminators: Union[Discriminator, Tuple[Callable[[Any], bool], Bound]]) -> UnionBound:
    """
    Expresses a discriminated union.

    Each discriminator is either a function returning the selected
    contract or a false value (``False``/``None``), or a
    ``(predicate, contract)`` pair. Order matters: the first match wins.

    Args:
        *discriminators: Discriminators in priority order

    Returns:
        UnionBound contract
    """
    normalized = []
    for index, discriminator in enumerate(discriminators):
        if isinstance(discriminator, tuple) and len(discriminator) == 2:
            normalized.append(when(*discriminator))
        elif callable(discriminator) and not isinstance(discriminator, Bound):
            normalized.append(discriminator)
        else:
            raise TypeError(
                f"Union discriminator {index} must be callable or a (predicate, contract) pair, "
                f"got {type(discriminator).__name__}"
            )
    return UnionBound(normalized)
