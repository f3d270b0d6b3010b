"""Pytest configuration and fixtures."""

import json
import tempfile
from pathlib import Path

import pytest

import json_bound as jb
from json_bound.serialization import JSON_PRETTY, set_default_serialization_config


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmp_dir:
        yield Path(tmp_dir)


@pytest.fixture(autouse=True)
def restore_default_config():
    """Put the pretty JSON codec back as default after every test."""
    yield
    set_default_serialization_config(JSON_PRETTY)


@pytest.fixture
def component_schema():
    """Union of two component kinds, one carrying nested documents."""
    filter_schema = jb.object_({"filterData": jb.string()})
    one_config_schema = jb.object_({
        "metaConfig": jb.string(),
        "remote": jb.array(jb.object_({"filters": jb.document(filter_schema)})),
    })
    one_component = jb.object_({
        "Type": jb.literal("One"),
        "Config": jb.document(one_config_schema),
    })
    two_component = jb.object_({"Type": jb.literal("Two")})

    return jb.union(
        lambda v: v.get("Type") == "One" and one_component,
        lambda v: v.get("Type") == "Two" and two_component,
    )


@pytest.fixture
def entity_schema(component_schema):
    """Document holding a record of named components."""
    return jb.document(jb.record(jb.string(), component_schema))


@pytest.fixture
def sample_entity():
    """Entity whose first component embeds two levels of JSON documents."""
    return {
        "my_one": {
            "Type": "One",
            "Config": json.dumps({
                "metaConfig": "test",
                "remote": [
                    {"filters": json.dumps({"filterData": "test"})},
                    {"filters": json.dumps({"filterData": "toast"})},
                ],
            }),
        },
        "my_two": {"Type": "Two"},
    }
