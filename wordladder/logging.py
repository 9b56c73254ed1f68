"""Logging setup shared by every wordladder module.

All package loggers hang below the ``wordladder`` logger, which owns the only
handler. Records go to stderr so that the command's stdout carries nothing
but the ladder report.
"""

import logging
import sys
from typing import Optional

ROOT_LOGGER_NAME = "wordladder"

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_configured = False


def setup_root_logger(
    level: int = logging.INFO,
    format_string: Optional[str] = None,
    handler: Optional[logging.Handler] = None,
) -> None:
    """Attach a single handler to the ``wordladder`` logger.

    Calling it again is a no-op until ``reset_logging()`` runs.

    Args:
        level: Level of the package logger.
        format_string: Record format. Defaults to ``DEFAULT_FORMAT``.
        handler: Handler to install, e.g. one writing to a buffer in tests.
            Defaults to a stderr stream handler.
    """
    global _configured

    if _configured:
        return

    package_logger = logging.getLogger(ROOT_LOGGER_NAME)
    package_logger.setLevel(level)
    package_logger.handlers.clear()

    if handler is None:
        handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(format_string or DEFAULT_FORMAT))
    package_logger.addHandler(handler)

    # pytest's caplog listens on the logging root.
    package_logger.propagate = True

    _configured = True


def get_logger(name: str) -> logging.Logger:
    """Return a package logger that inherits the ``wordladder`` configuration.

    Args:
        name: Logger name, usually ``__name__`` of the caller.

    Returns:
        The logger, with its own level left at NOTSET.
    """
    setup_root_logger()

    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    return logger


def set_global_log_level(level: int) -> None:
    """Set the level of the package logger and of its handlers."""
    setup_root_logger()

    package_logger = logging.getLogger(ROOT_LOGGER_NAME)
    package_logger.setLevel(level)
    for handler in package_logger.handlers:
        handler.setLevel(level)


def enable_debug_logging() -> None:
    """Switch the whole package to DEBUG."""
    set_global_log_level(logging.DEBUG)


def disable_debug_logging() -> None:
    """Switch the whole package back to INFO."""
    set_global_log_level(logging.INFO)


def reset_logging() -> None:
    """Drop handlers and forget the setup (used by tests)."""
    global _configured
    _configured = False

    package_logger = logging.getLogger(ROOT_LOGGER_NAME)
    package_logger.handlers.clear()
    package_logger.setLevel(logging.NOTSET)


setup_root_logger()
