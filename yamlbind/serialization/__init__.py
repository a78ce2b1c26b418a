"""yamlbind serialization package."""

from yamlbind.serialization.api import (
    TypeResolver,
    ObjectDescriptor,
    PropertyDescriptor,
    TypeInspector,
)
from yamlbind.serialization.reflection import (
    FieldInfo,
    get_public_instance_fields,
)
from yamlbind.serialization.type_resolvers import (
    StaticTypeResolver,
    DynamicTypeResolver,
)
from yamlbind.serialization.type_inspectors import (
    TypeInspectorSkeleton,
    FieldsTypeInspector,
)

__all__ = [
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
