"""Type inspector implementations."""

from typing import Any, Iterator, Optional, Type, TypeVar

from yamlbind.exceptions import IllegalArgumentException, SerializationException
from yamlbind.logging import get_logger
from yamlbind.serialization.api import (
    ObjectDescriptor,
    PropertyDescriptor,
    TypeInspector,
    TypeResolver,
)
from yamlbind.serialization.reflection import FieldInfo, get_public_instance_fields

_logger = get_logger("type_inspectors")

T = TypeVar("T")


class TypeInspectorSkeleton(TypeInspector):
    """Base for inspectors, providing member lookup by name."""

    def get_member(
        self,
        type_: type,
        container: Any,
        name: str,
        ignore_unmatched: bool = False,
    ) -> Optional[PropertyDescriptor]:
        candidates = [
            member for member in self.get_members(type_, container) if member.name == name
        ]

        if not candidates:
            if ignore_unmatched:
                return None
            raise SerializationException(
                f"Property '{name}' not found on type '{type_.__qualname__}'."
            )

        if len(candidates) > 1:
            raise SerializationException(
                f"Multiple properties with the name '{name}' exist on type "
                f"'{type_.__qualname__}': "
                + ", ".join(repr(c) for c in candidates)
            )

        return candidates[0]


class FieldsTypeInspector(TypeInspectorSkeleton):
    """Returns the public instance fields of a type.

    Fields are the public names a class declares for its instances:
    annotations in the class body and ``__slots__`` entries, including
    those of base classes. Attributes a plain class only assigns in
    ``__init__`` are not declared anywhere and yield no members.

    Args:
        type_resolver: Resolver shared by every descriptor this inspector
            creates.

    Raises:
        IllegalArgumentException: If ``type_resolver`` is None.
    """

    def __init__(self, type_resolver: TypeResolver):
        if type_resolver is None:
            raise IllegalArgumentException("type_resolver must not be None")
        self._type_resolver = type_resolver

    @property
    def type_resolver(self) -> TypeResolver:
        return self._type_resolver

    def get_members(self, type_: type, container: Any = None) -> Iterator[PropertyDescriptor]:
        if type_ is None:
            raise IllegalArgumentException("type_ must not be None")
        if not isinstance(type_, type):
            raise IllegalArgumentException(f"type_ must be a class, got {type_!r}")

        fields = get_public_instance_fields(type_)
        _logger.debug("Found %d public fields on %s", len(fields), type_.__qualname__)
        return (_ReflectionFieldDescriptor(f, self._type_resolver) for f in fields)


class _ReflectionFieldDescriptor(PropertyDescriptor):
    """Descriptor reading and writing a field by attribute access."""

    def __init__(self, field_info: FieldInfo, type_resolver: TypeResolver):
        self._field_info = field_info
        self._type_resolver = type_resolver
        self._type_override = None

    @property
    def name(self) -> str:
        return self._field_info.name

    @property
    def declared_type(self) -> Any:
        return self._field_info.field_type

    @property
    def type_override(self) -> Optional[Any]:
        return self._type_override

    @type_override.setter
    def type_override(self, value: Optional[Any]) -> None:
        self._type_override = value

    @property
    def can_write(self) -> bool:
        return True

    def write(self, target: Any, value: Any) -> None:
        setattr(target, self._field_info.name, value)

    def get_metadata(self, kind: Type[T]) -> Optional[T]:
        for item in self._field_info.metadata:
            if isinstance(item, kind):
                return item
        return None

    def read(self, target: Any) -> ObjectDescriptor:
        value = getattr(target, self._field_info.name)
        actual_type = self._type_override
        if actual_type is None:
            actual_type = self._type_resolver.resolve(self.declared_type, value)
        return ObjectDescriptor(value, actual_type, self.declared_type)

    def __repr__(self) -> str:
        return (
            f"ReflectionFieldDescriptor(name={self.name!r}, declared_type={self.declared_type!r}, "
            f"type_override={self._type_override!r})"
        )
