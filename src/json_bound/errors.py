"""Failure raising, reporting and the stack-labelling contract wrapper."""

import logging
from typing import Any, Dict, NoReturn, Optional
from .types import Bound, FailureType, Stack, TransformationError, ensure_bound
from .utils.validation import ValidationUtils


logger = logging.getLogger(__name__)


def fail(message: str, stack: Stack, offender: Any = None,
         error_type: FailureType = FailureType.VALIDATION,
         cause: Optional[BaseException] = None) -> NoReturn:
    """
    Raise a TransformationError at the given location.

    Args:
        message: Human-readable reason
        stack: Location of the failure
        offender: Value that failed, if any
        error_type: Cause classification
        cause: Exception this failure was converted from

    Raises:
        TransformationError: always
    """
    error = TransformationError(message, stack, offender, error_type)
    logger.debug(f"Transformation failed ({error_type.value}): {error}")
    if cause is not None:
        raise error from cause
    raise error


def format_failure(error: TransformationError) -> str:
    """
    Render a multi-line report for a failure.

    Args:
        error: TransformationError to describe

    Returns:
        Report with message, location and offending value kind
    """
    lines = [f"Error: {error.message}"]
    lines.append(f"Type: {error.error_type.value}")
    if error.location:
        lines.append(f"Location: {error.location}")
    else:
        lines.append("Location: <root>")
    if error.offender is not None:
        lines.append(f"Offender: {error.offender!r} ({ValidationUtils.kind_of(error.offender)})")
    return "\n".join(lines)


class StackWrapped(Bound):
    """Pushes a fixed label onto the stack before delegating."""

    def __init__(self, upstream: Bound, label: str):
        super().__init__()
        self.upstream = ensure_bound(upstream, "Wrapped contract")
        self.label = label

    @property
    def attributes(self) -> Dict[str, Any]:
        return self.upstream.attributes

    def _transform(self, value: Any, stack: Stack) -> Any:
        return self.upstream.transform(value, stack.push(self.label))

    def _restore(self, literal: Any, stack: Stack) -> Any:
        return self.upstream.restore(literal, stack.push(self.label))

    def __repr__(self) -> str:
        return f"stackwrap({self.upstream!r}, {self.label!r})"


def stackwrap(upstream: Bound, label: str) -> Bound:
    """Convenience wrapper labelling simple alias contracts."""
    return StackWrapped(upstream, label)
