"""Logging configuration for tsbind.

All modules obtain their logger through :func:`get_logger` so that a single
call to :func:`setup_logging` controls level and output for the package.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler

PACKAGE_LOGGER = "tsbind"


def setup_logging(level: str | int = "WARNING", console: Console | None = None) -> None:
    """Install a rich handler on the package logger.

    Args:
        level: Logging level name or number.
        console: Console to log to (defaults to stderr).
    """
    logger = logging.getLogger(PACKAGE_LOGGER)

    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            raise ValueError(f"Unknown log level: {level}")
        level = resolved

    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))

    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False


def get_logger(name: str) -> logging.Logger:
    """Get a logger below the package namespace.

    Args:
        name: Module name, usually ``__name__``.

    Returns:
        The configured logger.
    """
    if name != PACKAGE_LOGGER and not name.startswith(f"{PACKAGE_LOGGER}."):
        name = f"{PACKAGE_LOGGER}.{name}"
    return logging.getLogger(name)
