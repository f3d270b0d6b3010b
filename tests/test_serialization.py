"""Tests for codec presets and the process-wide default."""

import json
import logging

import pytest

import json_bound as jb
from json_bound.serialization import (
    JSON_COMPACT,
    JSON_PRETTY,
    get_default_serialization_config,
    set_default_serialization_config,
)
from json_bound.types import SerializationConfig


class TestPresets:
    """Tests for the JSON presets."""

    def test_pretty(self):
        """Test pretty-printed output."""
        assert JSON_PRETTY.serializer({"a": [1, 2]}) == json.dumps({"a": [1, 2]}, indent=2)

    def test_compact(self):
        """Test whitespace-free output."""
        assert JSON_COMPACT.serializer({"a": [1, 2]}) == '{"a":[1,2]}'

    def test_unicode_kept(self):
        """Test that non-ASCII text is not escaped."""
        assert JSON_COMPACT.serializer({"city": "Kraków"}) == '{"city":"Kraków"}'

    def test_strict_parsing(self):
        """Test that non-JSON constants are rejected."""
        for text in ("NaN", "Infinity", "-Infinity"):
            with pytest.raises(ValueError):
                JSON_PRETTY.deserializer(text)

    def test_same_literal_from_both(self):
        """Test that both presets decode each other's output."""
        literal = {"a": {"b": [True, None, 1.5, "x"]}}
        assert JSON_PRETTY.deserializer(JSON_COMPACT.serializer(literal)) == literal
        assert JSON_COMPACT.deserializer(JSON_PRETTY.serializer(literal)) == literal


class TestDefaultConfig:
    """Tests for the default accessor pair."""

    def test_pretty_is_default(self):
        """Test the initial default."""
        assert get_default_serialization_config() is JSON_PRETTY

    def test_set_default(self):
        """Test replacing the default."""
        set_default_serialization_config(JSON_COMPACT)
        assert get_default_serialization_config() is JSON_COMPACT

    def test_existing_documents_unaffected(self):
        """Test that documents keep the codec captured at construction."""
        before = jb.document(jb.object_({"a": jb.number()}))
        set_default_serialization_config(JSON_COMPACT)
        after = jb.document(jb.object_({"a": jb.number()}))

        assert before.config is JSON_PRETTY
        assert after.config is JSON_COMPACT
        assert before.transform({"a": 1}) == '{\n  "a": 1\n}'
        assert after.transform({"a": 1}) == '{"a":1}'

    def test_custom_default(self):
        """Test installing a custom codec."""
        upper = SerializationConfig(
            serializer=lambda lit: json.dumps(lit).upper(),
            deserializer=lambda text: json.loads(text.lower()),
            name="shouting",
        )
        set_default_serialization_config(upper)

        schema = jb.document(jb.object_({"a": jb.string()}))
        assert schema.transform({"a": "x"}) == '{"A": "X"}'
        assert schema.restore('{"A": "X"}') == {"a": "x"}

    def test_rejects_non_config(self):
        """Test that only SerializationConfig instances are accepted."""
        with pytest.raises(TypeError):
            set_default_serialization_config((json.dumps, json.loads))
        assert get_default_serialization_config() is JSON_PRETTY

    def test_replacement_is_logged(self, caplog):
        """Test the info log on replacement."""
        with caplog.at_level(logging.INFO, logger="json_bound.serialization"):
            set_default_serialization_config(JSON_COMPACT)

        assert "json-pretty -> json-compact" in caplog.text
