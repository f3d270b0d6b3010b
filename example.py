#!/usr/bin/env python3
"""
Example usage of json-bound.

This script declares a schema for a record of components, one of which
embeds JSON documents inside its string fields, and walks a value through
restore and transform.
"""

import json
import logging

import json_bound as jb


filter_schema = jb.object_({"filterData": jb.string()})

one_component = jb.object_({
    "Type": jb.literal("One"),
    "Config": jb.document(jb.object_({
        "metaConfig": jb.string(),
        "remote": jb.array(jb.object_({"filters": jb.document(filter_schema)})),
    })),
})

two_component = jb.object_({"Type": jb.literal("Two")})

entity_schema = jb.document(jb.record(
    jb.string(),
    jb.union(
        lambda v: v.get("Type") == "One" and one_component,
        lambda v: v.get("Type") == "Two" and two_component,
    ),
))


def build_entity(filter_data):
    """Serialize an entity whose innermost filter holds the given value."""
    return json.dumps({
        "my_one": {
            "Type": "One",
            "Config": json.dumps({
                "metaConfig": "test",
                "remote": [{"filters": json.dumps({"filterData": filter_data})}],
            }),
        },
        "my_two": {"Type": "Two"},
    })


def main():
    """Main example function."""
    logging.basicConfig(level=logging.INFO)

    print("json-bound Example")
    print("=" * 50)

    serialized = build_entity("test")

    restored = entity_schema.restore(serialized)
    print("Restored value:")
    print(restored)

    print("\nTransformed back to text:")
    print(entity_schema.transform(restored))

    print("\nA failing document:")
    broken = build_entity(1)
    try:
        entity_schema.restore(broken)
    except jb.TransformationError as e:
        print(jb.format_failure(e))


if __name__ == "__main__":
    main()
