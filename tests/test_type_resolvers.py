"""Tests for type resolvers and ObjectDescriptor."""

import pytest
from typing import List, Optional

from yamlbind.serialization.api import ObjectDescriptor, TypeResolver
from yamlbind.serialization.type_resolvers import DynamicTypeResolver, StaticTypeResolver


class Animal:
    pass


class Dog(Animal):
    pass


class TestStaticTypeResolver:
    """Tests for StaticTypeResolver."""

    def test_returns_static_type(self):
        resolver = StaticTypeResolver()
        assert resolver.resolve(Animal, Dog()) is Animal

    def test_returns_static_type_for_none(self):
        assert StaticTypeResolver().resolve(Optional[int], None) == Optional[int]

    def test_is_type_resolver(self):
        assert isinstance(StaticTypeResolver(), TypeResolver)


class TestDynamicTypeResolver:
    """Tests for DynamicTypeResolver."""

    def test_returns_runtime_type(self):
        assert DynamicTypeResolver().resolve(Animal, Dog()) is Dog

    def test_object_slot(self):
        assert DynamicTypeResolver().resolve(object, 3) is int

    def test_generic_static_type(self):
        assert DynamicTypeResolver().resolve(List[int], [1, 2]) is list

    def test_none_returns_static_type(self):
        assert DynamicTypeResolver().resolve(Animal, None) is Animal


class TestTypeResolverContract:
    """Tests for the abstract TypeResolver."""

    def test_cannot_instantiate(self):
        with pytest.raises(TypeError):
            TypeResolver()


class TestObjectDescriptor:
    """Tests for ObjectDescriptor."""

    def test_properties(self):
        descriptor = ObjectDescriptor(5, int, object)
        assert descriptor.value == 5
        assert descriptor.type is int
        assert descriptor.static_type is object

    def test_equality(self):
        assert ObjectDescriptor(5, int, object) == ObjectDescriptor(5, int, object)
        assert ObjectDescriptor(5, int, object) != ObjectDescriptor(6, int, object)
        assert ObjectDescriptor(5, int, object) != 5

    def test_immutable(self):
        descriptor = ObjectDescriptor(5, int, object)
        with pytest.raises(AttributeError):
            descriptor.value = 6

    def test_repr(self):
        assert "value=5" in repr(ObjectDescriptor(5, int, object))
