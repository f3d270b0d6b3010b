"""Embedded document combinator."""

import logging
from typing import Any, Optional
from ..errors import fail
from ..serialization import get_default_serialization_config
from ..types import Bound, FailureType, SerializationConfig, Stack, ensure_bound


logger = logging.getLogger(__name__)


class DocumentBound(Bound):
    """
    Serialized value matching an inner schema.

    Transform runs the inner contract and serializes the resulting
    literal; restore deserializes first and then restores through the
    inner contract. To the surrounding structure a document is a leaf
    whose literal is the serialized medium, usually a string.
    """

    def __init__(self, schema: Bound, config: Optional[SerializationConfig] = None):
        super().__init__()
        self.schema = ensure_bound(schema, "Document schema")
        # captured now so later default swaps leave this contract alone
        self.config = config if config is not None else get_default_serialization_config()
        self.codec_name = getattr(self.config, "name", "custom")

    def _transform(self, value: Any, stack: Stack) -> Any:
        location = stack.push("document:transform")
        literal = self.schema.transform(value, location)
        try:
            return self.config.serializer(literal)
        except (TypeError, ValueError) as e:
            logger.debug(f"Serializer {self.codec_name} rejected literal: {e}")
            fail(f"Serialization failed: {e}", location, literal, FailureType.SERIALIZATION, e)

    def _restore(self, literal: Any, stack: Stack) -> Any:
        location = stack.push("document:restore")
        try:
            unpacked = self.config.deserializer(literal)
        except (TypeError, ValueError) as e:
            logger.debug(f"Deserializer {self.codec_name} rejected input: {e}")
            fail(f"Deserialization failed: {e}", location, literal, FailureType.SERIALIZATION, e)
        return self.schema.restore(unpacked, location)

    def __repr__(self) -> str:
        return f"document({self.schema!r}, {self.codec_name})"


def document(schema: Bound, config: Optional[SerializationConfig] = None) -> DocumentBound:
    """
    Express a serialized string that matches a specific schema.

    Args:
        schema: Contract for the embedded value
        config: Codec to use; defaults to the process-wide default as it
            is at construction time

    Returns:
        DocumentBound contract
    """
    return DocumentBound(schema, config)
