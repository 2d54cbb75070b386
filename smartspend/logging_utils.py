"""Mini README: Application-wide logging helpers for SmartSpend.

Structure:
    * get_logger - factory returning module loggers with baseline configuration.
    * configure_root_logger - installs the shared handler exactly once.
    * set_root_level - applies a configured level to the root logger.

Usage:
    Modules call ``get_logger(__name__)`` once at import time. The CLI and
    the application factory call ``set_root_level`` with the level from
    settings, so the configured level survives later module imports and is
    applied again in uvicorn's reload worker.
"""

from __future__ import annotations

import logging
from typing import Optional, Union

_LOGGER_INITIALISED = False


def configure_root_logger(level: int = logging.INFO) -> None:
    """Configure the root logger with a rich, debugging friendly formatter."""

    global _LOGGER_INITIALISED
    if _LOGGER_INITIALISED:
        return

    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter(
            "[%(asctime)s] [%(levelname)s] %(name)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.addHandler(handler)
    _LOGGER_INITIALISED = True


def set_root_level(level: Union[int, str]) -> None:
    """Set the root logger level, accepting names such as ``"DEBUG"``."""

    configure_root_logger()
    if isinstance(level, str):
        level = level.upper()
    logging.getLogger().setLevel(level)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a module-specific logger ensuring baseline configuration."""

    configure_root_logger()
    return logging.getLogger(name)
