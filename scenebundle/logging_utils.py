"""Mini README: Application-wide logging helpers for scenebundle.

Structure:
    * level_from_name - parse a level name such as ``"warning"``.
    * configure_root_logger - install the shared handler and level once.
    * get_logger - factory returning module loggers with baseline configuration.

Usage:
    Modules declare ``LOGGER = get_logger(__name__)`` at import time. The
    root handler is installed exactly once so drivers (CLI, web service) can
    raise or lower verbosity without duplicating output.
"""

from __future__ import annotations

import logging
from typing import Optional, Union

_LOGGER_INITIALISED = False


def level_from_name(name: str) -> int:
    """Map ``"debug"`` style names to logging levels; unknown names raise ``ValueError``."""

    level = logging.getLevelName(name.strip().upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level {name!r}")
    return level


def configure_root_logger(level: Union[int, str] = logging.INFO) -> None:
    """Configure the root logger with a readable, timestamped formatter.

    ``level`` may be a numeric level or a name such as ``"DEBUG"``. A later
    call only adjusts the level; the handler is never added twice.
    """

    global _LOGGER_INITIALISED
    if isinstance(level, str):
        level = level_from_name(level)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    if _LOGGER_INITIALISED:
        return

    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter(
            "[%(asctime)s] [%(levelname)s] %(name)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    root_logger.addHandler(handler)
    _LOGGER_INITIALISED = True


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a module-specific logger ensuring baseline configuration."""

    if not _LOGGER_INITIALISED:
        configure_root_logger()
    return logging.getLogger(name)
