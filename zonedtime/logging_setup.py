"""
Logging configuration for zonedtime.

The library itself only creates module loggers; init_logging is for the
CLI and for applications that want zonedtime's diagnostics on the console.
"""

import logging
import os
import sys
from typing import Optional

from colorlog import ColoredFormatter

_TRUTHY = ("1", "true", "yes", "on")
_LEVEL_NAMES = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def init_logging(level_name: Optional[str]) -> None:
    """Initialize root logging to stream to stderr.

    Installs a colorized handler only if the root logger has none, then sets
    the root level. ZONEDTIME_DEBUG set to a truthy value forces DEBUG.
    """
    debug_env = os.environ.get("ZONEDTIME_DEBUG", "")
    if debug_env.strip().lower() in _TRUTHY:
        level_name = "DEBUG"

    root = logging.getLogger()
    if not root.handlers:
        handler = logging.StreamHandler(stream=sys.stderr)
        # HH:MM:SS  LEVEL   logger.name: message
        fmt = "%(asctime)s %(log_color)s%(levelname)-7s%(reset)s %(name)s: %(message)s"
        log_colors = {
            "DEBUG": "cyan",
            "INFO": "green",
            "WARNING": "yellow",
            "ERROR": "red",
            "CRITICAL": "bold_red",
        }
        handler.setFormatter(ColoredFormatter(fmt, datefmt="%H:%M:%S", log_colors=log_colors))
        root.addHandler(handler)

    level = logging.INFO
    if isinstance(level_name, str) and level_name.upper() in _LEVEL_NAMES:
        level = getattr(logging, level_name.upper())
    root.setLevel(level)
    logging.getLogger(__name__).debug(
        "Logging initialized at level %s", logging.getLevelName(level)
    )
