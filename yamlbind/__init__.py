"""yamlbind - type introspection for YAML object serialization.

yamlbind tells a serializer which members of an arbitrary class can be
serialized, and reads and writes them uniformly.

Example:
    >>> from dataclasses import dataclass
    >>> from yamlbind import DynamicTypeResolver, FieldsTypeInspector
    >>> @dataclass
    ... class Point:
    ...     x: int
    ...     y: int
    >>> inspector = FieldsTypeInspector(DynamicTypeResolver())
    >>> [m.name for m in inspector.get_members(Point)]
    ['x', 'y']
"""

__version__ = "0.1.0"

from yamlbind.config import InspectorConfig, TypeResolverMode
from yamlbind.exceptions import (
    YamlBindException,
    IllegalArgumentException,
    ConfigurationException,
    SerializationException,
)
from yamlbind.logging import configure_logging, get_logger
from yamlbind.serialization import (
    TypeResolver,
    ObjectDescriptor,
    PropertyDescriptor,
    TypeInspector,
    FieldInfo,
    get_public_instance_fields,
    StaticTypeResolver,
    DynamicTypeResolver,
    TypeInspectorSkeleton,
    FieldsTypeInspector,
)

__all__ = [
    "__version__",
    "InspectorConfig",
    "TypeResolverMode",
    "YamlBindException",
    "IllegalArgumentException",
    "ConfigurationException",
    "SerializationException",
    "configure_logging",
    "get_logger",
    "TypeResolver",
    "ObjectDescriptor",
    "PropertyDescriptor",
    "TypeInspector",
    "FieldInfo",
    "get_public_instance_fields",
    "StaticTypeResolver",
    "DynamicTypeResolver",
    "TypeInspectorSkeleton",
    "FieldsTypeInspector",
]
