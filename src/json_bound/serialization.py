"""Codec presets for document contracts and the process-wide default."""

import json
import logging
from typing import Any
from .types import SerializationConfig


logger = logging.getLogger(__name__)


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Invalid JSON constant: {name}")


def _json_loads(text: Any) -> Any:
    """Strict JSON parsing: NaN and Infinity are not JSON."""
    return json.loads(text, parse_constant=_reject_constant)


def _json_dumps_pretty(literal: Any) -> str:
    return json.dumps(literal, indent=2, ensure_ascii=False, allow_nan=False)


def _json_dumps_compact(literal: Any) -> str:
    return json.dumps(literal, separators=(",", ":"), ensure_ascii=False, allow_nan=False)


JSON_PRETTY = SerializationConfig(
    serializer=_json_dumps_pretty,
    deserializer=_json_loads,
    name="json-pretty",
)

JSON_COMPACT = SerializationConfig(
    serializer=_json_dumps_compact,
    deserializer=_json_loads,
    name="json-compact",
)

_default_config: SerializationConfig = JSON_PRETTY


def get_default_serialization_config() -> SerializationConfig:
    """Return the codec used by documents built without an explicit config."""
    return _default_config


def set_default_serialization_config(config: SerializationConfig) -> None:
    """
    Replace the process-wide default codec.

    Document contracts capture the default when they are constructed,
    so contracts that already exist keep the codec they were built with.

    Args:
        config: SerializationConfig to install
    """
    global _default_config

    if not isinstance(config, SerializationConfig):
        raise TypeError(f"Expected SerializationConfig, got {type(config).__name__}")

    logger.info(f"Default serialization config replaced: {_default_config.name} -> {config.name}")
    _default_config = config
