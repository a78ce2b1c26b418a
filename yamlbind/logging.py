"""Logging for yamlbind.

Every component logs through a child of the ``yamlbind`` logger. That
logger carries a :class:`logging.NullHandler`, so yamlbind stays silent
until the application sets up logging, either on its own or through
:func:`configure_logging`.

Example:
    >>> import logging
    >>> from yamlbind.logging import configure_logging
    >>> configure_logging(level=logging.DEBUG)
"""

import logging
from typing import Optional


YAMLBIND_ROOT_LOGGER = "yamlbind"

logging.getLogger(YAMLBIND_ROOT_LOGGER).addHandler(logging.NullHandler())


def get_logger(name: str = "") -> logging.Logger:
    """Get the logger of a yamlbind component, or the root one if empty."""
    if name:
        return logging.getLogger(f"{YAMLBIND_ROOT_LOGGER}.{name}")
    return logging.getLogger(YAMLBIND_ROOT_LOGGER)


def configure_logging(
    level: int = logging.INFO,
    format_string: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handler: Optional[logging.Handler] = None,
) -> logging.Logger:
    """Send yamlbind log records to a handler.

    The handler is only added if the root yamlbind logger has no handler
    besides its NullHandler, so repeated calls just change the level.

    Args:
        level: Logging level for the yamlbind logger and the new handler.
        format_string: Format string for log messages.
        handler: Optional custom handler. If None, a StreamHandler is used.

    Returns:
        The root yamlbind logger.
    """
    logger = get_logger()
    logger.setLevel(level)

    if all(isinstance(h, logging.NullHandler) for h in logger.handlers):
        if handler is None:
            handler = logging.StreamHandler()
        handler.setLevel(level)
        handler.setFormatter(logging.Formatter(format_string))
        logger.addHandler(handler)

    return logger
