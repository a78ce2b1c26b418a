"""yamlbind configuration."""

from enum import Enum
from typing import Union
import os

import yaml

from yamlbind.exceptions import ConfigurationException
from yamlbind.logging import get_logger
from yamlbind.serialization.api import TypeInspector, TypeResolver
from yamlbind.serialization.type_inspectors import FieldsTypeInspector
from yamlbind.serialization.type_resolvers import DynamicTypeResolver, StaticTypeResolver

_logger = get_logger("config")

ROOT_KEY = "yamlbind"


class TypeResolverMode(Enum):
    """How read values are mapped to the type they serialize as."""
    DYNAMIC = "DYNAMIC"
    STATIC = "STATIC"


class InspectorConfig:
    """Configuration for building a type inspector.

    Args:
        type_resolver: Resolver policy, as a :class:`TypeResolverMode` or
            its name (case-insensitive).
        ignore_unmatched: Whether member lookups by name should return None
            rather than raise when the name is unknown. Consumers pass it to
            :meth:`~yamlbind.serialization.api.TypeInspector.get_member`.

    Raises:
        ConfigurationException: If a value is invalid.
    """

    def __init__(
        self,
        type_resolver: Union[TypeResolverMode, str] = TypeResolverMode.DYNAMIC,
        ignore_unmatched: bool = False,
    ):
        self._type_resolver = self._parse_mode(type_resolver)
        self._ignore_unmatched = self._parse_flag(ignore_unmatched)

    @staticmethod
    def _parse_mode(value: Union[TypeResolverMode, str]) -> TypeResolverMode:
        if isinstance(value, TypeResolverMode):
            return value
        if isinstance(value, str):
            try:
                return TypeResolverMode(value.upper())
            except ValueError:
                pass
        valid = ", ".join(m.value for m in TypeResolverMode)
        raise ConfigurationException(
            f"type_resolver must be one of {valid}, got {value!r}"
        )

    @staticmethod
    def _parse_flag(value: bool) -> bool:
        if not isinstance(value, bool):
            raise ConfigurationException(
                f"ignore_unmatched must be a boolean, got {value!r}"
            )
        return value

    @property
    def type_resolver(self) -> TypeResolverMode:
        """Get the type resolver mode."""
        return self._type_resolver

    @type_resolver.setter
    def type_resolver(self, value: Union[TypeResolverMode, str]) -> None:
        self._type_resolver = self._parse_mode(value)

    @property
    def ignore_unmatched(self) -> bool:
        """Get whether unknown member names are ignored."""
        return self._ignore_unmatched

    @ignore_unmatched.setter
    def ignore_unmatched(self, value: bool) -> None:
        self._ignore_unmatched = self._parse_flag(value)

    def create_type_resolver(self) -> TypeResolver:
        """Create the configured type resolver."""
        if self._type_resolver is TypeResolverMode.STATIC:
            return StaticTypeResolver()
        return DynamicTypeResolver()

    def create_type_inspector(self) -> TypeInspector:
        """Create a field inspector backed by the configured resolver."""
        return FieldsTypeInspector(self.create_type_resolver())

    @classmethod
    def from_dict(cls, data: dict) -> "InspectorConfig":
        """Create InspectorConfig from a dictionary."""
        if not isinstance(data, dict):
            raise ConfigurationException(
                f"Configuration must be a mapping, got {type(data).__name__}"
            )

        config = cls()

        if "type_resolver" in data:
            config.type_resolver = data["type_resolver"]

        if "ignore_unmatched" in data:
            config.ignore_unmatched = data["ignore_unmatched"]

        return config

    @classmethod
    def from_yaml(cls, yaml_path: str) -> "InspectorConfig":
        """Load configuration from a YAML file.

        Args:
            yaml_path: Path to the YAML configuration file.

        Returns:
            InspectorConfig instance.

        Raises:
            ConfigurationException: If the file cannot be read or parsed.
        """
        if not os.path.exists(yaml_path):
            raise ConfigurationException(f"Configuration file not found: {yaml_path}")

        try:
            with open(yaml_path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigurationException(f"Failed to parse YAML: {e}", cause=e)
        except IOError as e:
            raise ConfigurationException(f"Failed to read configuration file: {e}", cause=e)

        _logger.debug("Loaded configuration from %s", yaml_path)
        return cls._from_document(data)

    @classmethod
    def from_yaml_string(cls, yaml_content: str) -> "InspectorConfig":
        """Load configuration from a YAML string.

        Raises:
            ConfigurationException: If the YAML cannot be parsed.
        """
        try:
            data = yaml.safe_load(yaml_content)
        except yaml.YAMLError as e:
            raise ConfigurationException(f"Failed to parse YAML: {e}", cause=e)

        return cls._from_document(data)

    @classmethod
    def _from_document(cls, data) -> "InspectorConfig":
        if data is None:
            data = {}

        if isinstance(data, dict) and ROOT_KEY in data:
            data = data[ROOT_KEY] or {}

        return cls.from_dict(data)

    def __repr__(self) -> str:
        return (
            f"InspectorConfig(type_resolver={self._type_resolver.value}, "
            f"ignore_unmatched={self._ignore_unmatched})"
        )
