"""Logging configuration using loguru.

Only the worker logs; the calendar engine reports failures by raising.
Log records go to stderr because stdout carries the worker protocol.
"""

from __future__ import annotations

import os
import sys

from loguru import logger

#: Level used when neither --log-level nor GREGOR_LOG_LEVEL is given.
DEFAULT_LOG_LEVEL = "INFO"

#: Environment variable overriding the default level.
LOG_LEVEL_ENV = "GREGOR_LOG_LEVEL"


def resolve_log_level(level: str | None = None) -> str:
    """Return the effective log level name.

    An explicit level wins over the environment, which wins over
    DEFAULT_LOG_LEVEL.
    """
    if level:
        return level.upper()
    return os.environ.get(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).upper()


def setup_logger(level: str | None = None) -> None:
    """
    Configure loguru to write to stderr.

    Args:
        level: Minimum level name (DEBUG, INFO, WARNING...). Defaults to
            the GREGOR_LOG_LEVEL environment variable, then INFO.
    """
    # Remove default handler
    logger.remove()

    logger.add(
        sys.stderr,
        format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} | {message}",
        level=resolve_log_level(level),
        colorize=False,
    )


__all__ = [
    "DEFAULT_LOG_LEVEL",
    "LOG_LEVEL_ENV",
    "resolve_log_level",
    "setup_logger",
]
