"""Logging setup for beangen.

Every module obtains its logger through :func:`get_logger` so that all output
lives under the ``beangen`` namespace and can be configured in one place.
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

ROOT_LOGGER_NAME = "beangen"

_handler: Optional[RichHandler] = None


def get_logger(name: str) -> logging.Logger:
    """Return a logger nested under the ``beangen`` namespace.

    Args:
        name: Usually ``__name__`` of the calling module.

    Returns:
        The logger instance.
    """
    if name != ROOT_LOGGER_NAME and not name.startswith(ROOT_LOGGER_NAME + "."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def configure_logging(
    level: int | str = logging.WARNING, console: Optional[Console] = None
) -> logging.Logger:
    """Install a rich handler on the package logger.

    Calling this more than once only updates the level.

    Args:
        level: Logging level for the package logger.
        console: Console to log to; defaults to stderr.

    Returns:
        The configured package logger.
    """
    global _handler

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(level)

    if _handler is None:
        _handler = RichHandler(
            console=console or Console(stderr=True),
            show_path=False,
            markup=False,
        )
        _handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(_handler)

    return logger
