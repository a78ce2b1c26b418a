#!/usr/bin/env python3
"""Field inspection example.

Demonstrates how a serializer walks an object through yamlbind:
- Enumerating the public fields of a class
- Reading values together with their resolved types
- Forcing a type with a type override
- Populating a fresh instance during deserialization
- Looking up metadata attached with ``typing.Annotated``
"""

from dataclasses import dataclass, field
from typing import Annotated, List, Optional

import yaml

from yamlbind import FieldsTypeInspector, InspectorConfig, configure_logging


# -----------------------------------------------------------------------------
# Domain Classes
# -----------------------------------------------------------------------------


class YamlAlias:
    """Metadata naming the YAML key a field is written under."""

    def __init__(self, key: str):
        self.key = key


class Shape:
    pass


@dataclass
class Circle(Shape):
    radius: float = 1.0


@dataclass
class Layer:
    name: Annotated[str, YamlAlias("layer-name")]
    shape: Optional[Shape] = None
    tags: List[str] = field(default_factory=list)


# -----------------------------------------------------------------------------
# Examples
# -----------------------------------------------------------------------------


def to_plain(inspector: FieldsTypeInspector, obj):
    """Turn an object into nested dicts, following resolved types."""
    if obj is None or isinstance(obj, (str, int, float, bool)):
        return obj
    if isinstance(obj, list):
        return [to_plain(inspector, item) for item in obj]

    result = {}
    for member in inspector.get_members(type(obj), obj):
        described = member.read(obj)
        alias = member.get_metadata(YamlAlias)
        key = alias.key if alias else member.name
        result[key] = to_plain(inspector, described.value)
    return result


def enumeration_example(inspector: FieldsTypeInspector) -> None:
    print("=== Enumerating fields ===")
    for member in inspector.get_members(Layer):
        print(f"  {member.name}: {member.declared_type} (writable={member.can_write})")


def read_example(inspector: FieldsTypeInspector) -> None:
    print("\n=== Reading with dynamic types ===")
    layer = Layer(name="background", shape=Circle(radius=2.5), tags=["base"])
    shape = inspector.get_member(Layer, layer, "shape")
    described = shape.read(layer)
    print(f"  declared: {described.static_type}")
    print(f"  resolved: {described.type.__name__}")

    shape.type_override = Shape
    print(f"  with override: {shape.read(layer).type.__name__}")

    print("\n=== Emitting YAML ===")
    print(yaml.safe_dump(to_plain(inspector, layer), sort_keys=False))


def write_example(inspector: FieldsTypeInspector) -> None:
    print("=== Populating an instance ===")
    data = {"name": "overlay", "tags": ["top", "hud"]}
    layer = Layer(name="")
    for member in inspector.get_members(Layer):
        if member.name in data and member.can_write:
            member.write(layer, data[member.name])
    print(f"  {layer}")


def main():
    configure_logging()
    config = InspectorConfig.from_yaml_string("yamlbind:\n  type_resolver: dynamic\n")
    inspector = config.create_type_inspector()

    enumeration_example(inspector)
    read_example(inspector)
    write_example(inspector)

    print("\n=== Examples Complete ===")


if __name__ == "__main__":
    main()
