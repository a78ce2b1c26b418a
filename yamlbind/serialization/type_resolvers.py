"""Stock type resolvers."""

from typing import Any

from yamlbind.serialization.api import TypeResolver


class StaticTypeResolver(TypeResolver):
    """Resolves every value to the type its member declares."""

    def resolve(self, static_type: Any, value: Any) -> Any:
        return static_type

    def __repr__(self) -> str:
        return "StaticTypeResolver()"


class DynamicTypeResolver(TypeResolver):
    """Resolves a value to its runtime class.

    None carries no runtime type worth serializing, so it resolves to
    the declared type.
    """

    def resolve(self, static_type: Any, value: Any) -> Any:
        if value is not None:
            return type(value)
        return static_type

    def __repr__(self) -> str:
        return "DynamicTypeResolver()"
