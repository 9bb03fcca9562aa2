"""Logging switches for brentsolver.

The library is silent by default (the ``brentsolver`` logger only has a
NullHandler). Trace output goes through :class:`brentsolver.diagnostics.LoggingSink`,
so turning it on is a matter of attaching a handler:

    import brentsolver
    brentsolver.enable_console_logging(level="DEBUG")

Environment variables (see configure_from_env):
    BRENTSOLVER_LOGGING: log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Literal, Optional, Union

from brentsolver.diagnostics import LOGGER_NAME

__all__ = [
    "configure_from_env",
    "disable_logging",
    "enable_console_logging",
    "set_level",
]

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
ENV_VAR = "BRENTSOLVER_LOGGING"

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def _get_logger() -> logging.Logger:
    return logging.getLogger(LOGGER_NAME)


def _to_level(level: Union[LogLevel, int]) -> int:
    if isinstance(level, int):
        return level
    value = logging.getLevelName(level.upper())
    if not isinstance(value, int):
        raise ValueError(f"Unknown log level: {level!r}")
    return value


def _clear_handlers(logger: logging.Logger) -> None:
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()


def enable_console_logging(
    level: Union[LogLevel, int] = "INFO",
    format: Optional[str] = None,
) -> logging.Handler:
    """Send solver diagnostics to stderr. Replaces previously attached handlers."""
    logger = _get_logger()
    _clear_handlers(logger)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(format or DEFAULT_FORMAT, DEFAULT_DATE_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(_to_level(level))
    return handler


def disable_logging() -> None:
    """Back to the silent default."""
    logger = _get_logger()
    _clear_handlers(logger)
    logger.addHandler(logging.NullHandler())
    logger.setLevel(logging.NOTSET)


def set_level(level: Union[LogLevel, int]) -> None:
    _get_logger().setLevel(_to_level(level))


def configure_from_env() -> bool:
    """Enable console logging when BRENTSOLVER_LOGGING is set.

    Returns True when logging was configured.
    """
    level = os.environ.get(ENV_VAR, "").strip()
    if not level:
        return False
    enable_console_logging(level=level.upper())
    return True
