"""Type introspection API interfaces.

This module defines the contracts a serializer uses to look inside
arbitrary Python classes. A :class:`TypeInspector` turns a class into a
sequence of :class:`PropertyDescriptor` objects; each descriptor reads
and writes one member of an instance, resolving the type the value
should be serialized as through a :class:`TypeResolver`.

Example:
    Walking the members of an object::

        from yamlbind.serialization import DynamicTypeResolver, FieldsTypeInspector

        inspector = FieldsTypeInspector(DynamicTypeResolver())
        for descriptor in inspector.get_members(type(obj), obj):
            described = descriptor.read(obj)
            emit(descriptor.name, described.value, described.type)
"""

from abc import ABC, abstractmethod
from typing import Any, Iterator, Optional, Type, TypeVar

T = TypeVar("T")


class TypeResolver(ABC):
    """Interface for choosing the type a value is serialized as.

    The static type is what the member declares; the resolved type must
    be consistent with it and describe the runtime value, which matters
    when the declared type is abstract, a protocol, ``object``, or a
    union.
    """

    @abstractmethod
    def resolve(self, static_type: Any, value: Any) -> Any:
        """Resolve the type that represents a value.

        Args:
            static_type: The declared type of the member holding the value.
            value: The runtime value, possibly None.

        Returns:
            The type downstream serialization should use.
        """
        pass


class ObjectDescriptor:
    """A value read from a member, together with its types.

    Args:
        value: The raw value.
        type_: The resolved type to serialize the value as.
        static_type: The declared type of the member the value came from.
    """

    __slots__ = ("_value", "_type", "_static_type")

    def __init__(self, value: Any, type_: Any, static_type: Any):
        self._value = value
        self._type = type_
        self._static_type = static_type

    @property
    def value(self) -> Any:
        """Get the raw value."""
        return self._value

    @property
    def type(self) -> Any:
        """Get the resolved (dynamic) type."""
        return self._type

    @property
    def static_type(self) -> Any:
        """Get the declared type."""
        return self._static_type

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ObjectDescriptor):
            return False
        return (
            self._value == other._value
            and self._type == other._type
            and self._static_type == other._static_type
        )

    def __repr__(self) -> str:
        return (
            f"ObjectDescriptor(value={self._value!r}, type={self._type!r}, "
            f"static_type={self._static_type!r})"
        )


class PropertyDescriptor(ABC):
    """Uniform view over one serializable member of a type.

    Implementations decide how the member is stored; callers only see the
    name, the declared type, and read/write operations.

    The ``type_override`` attribute is meant to be set once by the caller
    that owns the descriptor, before it is read. Descriptors do no locking.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Get the member name."""
        pass

    @property
    @abstractmethod
    def declared_type(self) -> Any:
        """Get the declared (static) type of the member."""
        pass

    @property
    @abstractmethod
    def type_override(self) -> Optional[Any]:
        """Get the type forced by the caller, or None."""
        pass

    @type_override.setter
    @abstractmethod
    def type_override(self, value: Optional[Any]) -> None:
        pass

    @property
    @abstractmethod
    def can_write(self) -> bool:
        """Whether :meth:`write` is supported."""
        pass

    @abstractmethod
    def read(self, target: Any) -> ObjectDescriptor:
        """Read the member from an instance.

        Args:
            target: The instance to read from.

        Returns:
            The value with its resolved and declared types. The resolved
            type is ``type_override`` when set.
        """
        pass

    @abstractmethod
    def write(self, target: Any, value: Any) -> None:
        """Store a value into the member of an instance.

        Args:
            target: The instance to write to.
            value: The value to store, unchecked and unconverted.
        """
        pass

    @abstractmethod
    def get_metadata(self, kind: Type[T]) -> Optional[T]:
        """Look up a metadata object attached to the member.

        Args:
            kind: The class of metadata to find.

        Returns:
            The first attached instance of ``kind``, or None.
        """
        pass


class TypeInspector(ABC):
    """Strategy that enumerates the serializable members of a type."""

    @abstractmethod
    def get_members(self, type_: type, container: Any = None) -> Iterator[PropertyDescriptor]:
        """Get the members of a type.

        Args:
            type_: The class to inspect. Must not be None.
            container: Optional instance for strategies whose member set
                depends on live state.

        Returns:
            A single-pass iterator over newly created descriptors.

        Raises:
            IllegalArgumentException: If ``type_`` is None or not a class.
        """
        pass

    @abstractmethod
    def get_member(
        self,
        type_: type,
        container: Any,
        name: str,
        ignore_unmatched: bool = False,
    ) -> Optional[PropertyDescriptor]:
        """Get the member of a type with the given name.

        Args:
            type_: The class to inspect.
            container: Optional instance, passed through to :meth:`get_members`.
            name: The member name.
            ignore_unmatched: Return None instead of raising when absent.

        Returns:
            The matching descriptor, or None if absent and ignored.

        Raises:
            SerializationException: If no member, or more than one member,
                has the name.
        """
        pass
