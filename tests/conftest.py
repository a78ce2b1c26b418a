"""Shared pytest fixtures for yamlbind tests."""

import pytest

from yamlbind.config import InspectorConfig
from yamlbind.serialization.type_inspectors import FieldsTypeInspector
from yamlbind.serialization.type_resolvers import DynamicTypeResolver


@pytest.fixture
def default_config():
    """Create a default InspectorConfig."""
    return InspectorConfig()


@pytest.fixture
def inspector():
    """Create a field inspector with dynamic type resolution."""
    return FieldsTypeInspector(DynamicTypeResolver())
