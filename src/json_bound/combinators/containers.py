"""Container combinators: fixed-shape objects, arrays and records."""

from types import MappingProxyType
from typing import Any, Callable, Dict, Mapping, NoReturn, Optional
from ..errors import fail
from ..types import MISSING, Bound, FailureType, Stack, ensure_bound
from ..utils.validation import ValidationUtils


def _not_an_object(literal: Any, stack: Stack) -> NoReturn:
    fail(
        f"Not an object. Expected 'object', got '{ValidationUtils.kind_of(literal)}'",
        stack,
        literal,
        FailureType.MALFORMED_CONTAINER,
    )


class ObjectBound(Bound):
    """
    Object with a known set of keys.

    Declared keys define the complete key set of the literal; anything
    else on the input is dropped. Required keys are enforced only on
    restore, transform trusts the shape of the typed value.
    """

    def __init__(self, fields: Mapping[str, Bound],
                 factory: Optional[Callable[..., Any]] = None):
        super().__init__()
        self._fields: Dict[str, Bound] = {
            key: ensure_bound(child, f"Field '{key}'") for key, child in fields.items()
        }
        self.factory = factory

    @property
    def fields(self) -> Mapping[str, Bound]:
        """Declared fields, read-only."""
        return MappingProxyType(self._fields)

    @staticmethod
    def _read(value: Any, key: str, child: Bound) -> Any:
        if ValidationUtils.is_mapping(value):
            return value.get(key, MISSING)
        found = getattr(value, key, MISSING)
        # attribute objects spell an absent optional field as None
        if found is None and child.is_optional and not child.attributes.get("nullable"):
            return MISSING
        return found

    def _transform(self, value: Any, stack: Stack) -> Dict[str, Any]:
        result = {}
        for key, child in self._fields.items():
            transformed = child.transform(self._read(value, key, child), stack.push(f"object:transform['{key}']"))
            if transformed is not MISSING:
                result[key] = transformed
        return result

    def _restore(self, literal: Any, stack: Stack) -> Any:
        if not ValidationUtils.is_mapping(literal):
            _not_an_object(literal, stack.push("object:restore"))

        for key, child in self._fields.items():
            if key not in literal and not child.is_optional:
                fail(
                    f"Missing required object key '{key}'",
                    stack.push("object:restore"),
                    literal,
                    FailureType.MISSING_KEY,
                )

        result = {}
        for key, child in self._fields.items():
            restored = child.restore(literal.get(key, MISSING), stack.push(f"object:restore['{key}']"))
            if restored is not MISSING:
                result[key] = restored

        if self.factory is not None:
            return self.factory(**result)
        return result

    def __repr__(self) -> str:
        return f"object_({', '.join(self._fields)})"


class ArrayBound(Bound):
    """Sequence of items all typed alike."""

    def __init__(self, item: Bound):
        super().__init__()
        self.item = ensure_bound(item, "Array item")

    def _transform(self, value: Any, stack: Stack) -> list:
        return [
            self.item.transform(element, stack.push(f"array:transform[{index}]"))
            for index, element in enumerate(value)
        ]

    def _restore(self, literal: Any, stack: Stack) -> list:
        if not ValidationUtils.is_sequence(literal):
            fail("Not an array", stack.push("array:restore"), literal, FailureType.MALFORMED_CONTAINER)

        return [
            self.item.restore(element, stack.push(f"array:restore[{index}]"))
            for index, element in enumerate(literal)
        ]

    def __repr__(self) -> str:
        return f"array({self.item!r})"


class RecordBound(Bound):
    """Mapping with unknown keys; every entry shares one key and one value contract."""

    def __init__(self, key: Bound, value: Bound):
        super().__init__()
        self.key = ensure_bound(key, "Record key")
        self.value = ensure_bound(value, "Record value")

    def _map_entries(self, mapping: Any, stack: Stack, operation: str) -> Dict[Any, Any]:
        result = {}
        for key, value in mapping.items():
            mapped_key = getattr(self.key, operation)(key, stack.push(f"record:{operation}['key of {key}']"))
            mapped_value = getattr(self.value, operation)(value, stack.push(f"record:{operation}[value of '{key}']"))
            result[mapped_key] = mapped_value
        return result

    def _transform(self, value: Any, stack: Stack) -> Dict[Any, Any]:
        return self._map_entries(value, stack, "transform")

    def _restore(self, literal: Any, stack: Stack) -> Dict[Any, Any]:
        if not ValidationUtils.is_mapping(literal):
            _not_an_object(literal, stack.push("record:restore"))
        return self._map_entries(literal, stack, "restore")

    def __repr__(self) -> str:
        return f"record({self.key!r}, {self.value!r})"


def object_(fields: Mapping[str, Bound], factory: Optional[Callable[..., Any]] = None) -> ObjectBound:
    """
    Expresses an object with a known structure.

    For objects with unknown keys, use ``record``.

    Args:
        fields: Mapping of key name to the contract for its value
        factory: Optional callable building the typed value from the
            restored fields, e.g. a dataclass

    Returns:
        ObjectBound contract
    """
    return ObjectBound(fields, factory)


def array(item: Bound) -> ArrayBound:
    """
    Expresses a list of items all typed alike.

    For lists mixing several types, use ``union`` as the item contract.
    """
    return ArrayBound(item)


def record(key: Bound, value: Bound) -> RecordBound:
    """
    Expresses a mapping with unknown keys.

    Args:
        key: Contract for every key
        value: Contract for every value

    Returns:
        RecordBound contract
    """
    return RecordBound(key, value)


def extend_object(base: ObjectBound, extension: ObjectBound,
                  factory: Optional[Callable[..., Any]] = None) -> ObjectBound:
    """
    Merge two object contracts into one.

    The result declares the union of both key sets. When both declare
    the same key, the extension's contract wins.

    Args:
        base: Object contract being extended
        extension: Object contract adding or overriding fields
        factory: Optional factory for the merged object

    Returns:
        New ObjectBound; neither argument is modified
    """
    for role, candidate in (("base", base), ("extension", extension)):
        if not isinstance(candidate, ObjectBound):
            raise TypeError(f"extend_object {role} must be an object contract, got {type(candidate).__name__}")

    fields = dict(base.fields)
    fields.update(extension.fields)
    return ObjectBound(fields, factory)
