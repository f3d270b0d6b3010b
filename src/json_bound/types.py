"""Core type definitions for json-bound."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, List, Optional, Tuple, Union


Primitive = Union[str, int, float, bool, None]
Literal = Union[Primitive, List[Any], Dict[str, Any]]


class FailureType(Enum):
    """Enumeration of transformation failure causes."""
    TYPE_MISMATCH = "type_mismatch"
    VALIDATION = "validation"
    LITERAL_MISMATCH = "literal_mismatch"
    MALFORMED_CONTAINER = "malformed_container"
    MISSING_KEY = "missing_key"
    NO_DISCRIMINATOR = "no_discriminator"
    SERIALIZATION = "serialization"


class _Missing:
    """Marker for a value that is absent, as opposed to ``None``."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "MISSING"

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self


MISSING = _Missing()


@dataclass(frozen=True)
class Stack:
    """
    Immutable breadcrumb trail of location tags.

    Each combinator pushes a tag describing the step it delegates
    through, so a failure deep inside a nested structure can report
    exactly where it happened.
    """

    frames: Tuple[Any, ...] = ()

    def push(self, tag: Any) -> 'Stack':
        """Return a new stack with ``tag`` appended."""
        return Stack(self.frames + (tag,))

    def render(self) -> str:
        """Render the trail as an arrow-joined string, empty at the root."""
        if not self.frames:
            return ""
        return " -> ".join(str(frame) for frame in self.frames) + "(!!)"

    def __len__(self) -> int:
        return len(self.frames)


class TransformationError(Exception):
    """Raised when a value does not fit the contract it is passed through."""

    def __init__(self, message: str, stack: Optional[Stack] = None,
                 offender: Any = None,
                 error_type: FailureType = FailureType.VALIDATION):
        self.message = message
        self.stack = stack if stack is not None else Stack()
        self.location = self.stack.render()
        self.offender = offender
        self.error_type = error_type
        super().__init__(str(self))

    def __str__(self) -> str:
        if self.location:
            return f"{self.message} at {self.location}"
        return self.message


@dataclass(frozen=True)
class SerializationConfig:
    """Codec pair used by document contracts."""
    serializer: Callable[[Any], Any]
    deserializer: Callable[[Any], Any]
    name: str = "custom"


class Bound(ABC):
    """
    A bidirectional contract between a typed value and its literal form.

    ``transform`` flattens a typed value into its literal representation,
    ``restore`` validates a literal and rebuilds the typed value. Both
    either return a complete result or raise ``TransformationError``.
    Contracts hold no per-call state; everything call-specific travels
    in the ``Stack`` argument.
    """

    def __init__(self, attributes: Optional[Dict[str, Any]] = None):
        self._attributes: Dict[str, Any] = dict(attributes or {})

    @property
    def attributes(self) -> Dict[str, Any]:
        """Modifier flags such as ``optional``."""
        return self._attributes

    def transform(self, value: Any, stack: Optional[Stack] = None) -> Any:
        """Map a typed value down to its literal representation."""
        return self._transform(value, stack if stack is not None else Stack())

    def restore(self, literal: Any, stack: Optional[Stack] = None) -> Any:
        """Map a literal representation back up to a typed value."""
        return self._restore(literal, stack if stack is not None else Stack())

    @property
    def is_optional(self) -> bool:
        return self.attributes.get("optional") is True

    @abstractmethod
    def _transform(self, value: Any, stack: Stack) -> Any:
        pass

    @abstractmethod
    def _restore(self, literal: Any, stack: Stack) -> Any:
        pass


def ensure_bound(candidate: Any, role: str) -> 'Bound':
    """Reject anything that is not a contract at construction time."""
    if not isinstance(candidate, Bound):
        raise TypeError(f"{role} must be a Bound, got {type(candidate).__name__}")
    return candidate
