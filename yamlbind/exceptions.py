"""yamlbind exceptions.

This module defines the exception hierarchy for yamlbind.
All exceptions inherit from :class:`YamlBindException`.

Errors raised while reading or writing a member (``AttributeError``,
``TypeError``, ``dataclasses.FrozenInstanceError``) and errors raised by a
type resolver are not wrapped; they reach the caller unchanged.

Example:
    Handling yamlbind exceptions::

        from yamlbind.exceptions import (
            YamlBindException,
            SerializationException,
        )

        try:
            descriptor = inspector.get_member(Point, None, "z")
        except SerializationException:
            print("Point has no field 'z'")
        except YamlBindException as e:
            print(f"yamlbind error: {e}")
"""


class YamlBindException(Exception):
    """Base class for all yamlbind exceptions.

    Args:
        message: The error message describing the exception.
        cause: The underlying exception that caused this error, if any.

    Attributes:
        cause: The underlying cause of this exception, if any.
    """

    def __init__(self, message: str = "", cause: Exception = None):
        super().__init__(message)
        self.cause = cause


class IllegalArgumentException(YamlBindException):
    """Raised when an illegal or inappropriate argument is passed.

    Example:
        - Passing None where a class is required
        - Constructing an inspector without a type resolver
    """
    pass


class ConfigurationException(YamlBindException):
    """Raised when there is a configuration error.

    Example:
        - Unknown type resolver mode
        - Unreadable or malformed YAML configuration
    """
    pass


class SerializationException(YamlBindException):
    """Raised when a member cannot be located for serialization.

    Example:
        - Looking up a field name the type does not declare
        - Several members answering to the same name
    """
    pass
