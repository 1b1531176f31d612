"""Logging setup for the console game.

Game output goes to stdout, so log records are written to stderr.
"""

import logging
import os
import sys
from typing import Optional, Union

from .config import ENV_LOG_LEVEL

LOG_FORMAT = "[%(levelname)s] %(message)s"
DEBUG_LOG_FORMAT = "[%(levelname)s] [%(name)s:%(lineno)d] %(message)s"
PACKAGE_LOGGER = "mastermind"


def resolve_log_level(value: Union[str, int, None] = None) -> int:
    """Turn a level name ("debug", "INFO") or number ("10") into a logging level.

    Falls back to MASTERMIND_LOG_LEVEL, then WARNING. Unknown names map to WARNING.
    """
    if value is None:
        value = os.environ.get(ENV_LOG_LEVEL)
    if value is None or value == "":
        return logging.WARNING
    if isinstance(value, int):
        return value
    text = value.strip().upper()
    if text.isdigit():
        return int(text)
    level = logging.getLevelName(text)
    if isinstance(level, int):
        return level
    return logging.WARNING


def setup_logging(level: Optional[Union[str, int]] = None) -> logging.Handler:
    """Configure the package logger and return its stderr handler.

    Each call replaces the previous handler, so the format follows the new level
    and records go to whatever sys.stderr is at that moment.
    """
    resolved = resolve_log_level(level)
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(resolved)

    for old in list(logger.handlers):
        logger.removeHandler(old)
        old.close()

    handler = logging.StreamHandler(sys.stderr)
    fmt = DEBUG_LOG_FORMAT if resolved <= logging.DEBUG else LOG_FORMAT
    handler.setFormatter(logging.Formatter(fmt))
    logger.addHandler(handler)
    logger.propagate = False
    return handler
