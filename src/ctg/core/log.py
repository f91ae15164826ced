"""Logging setup for the ctg package."""
from __future__ import annotations

import logging
import os

LOGGER_NAME = "ctg"
_FORMAT = "ctg | %(levelname)s | %(name)s | %(message)s"


def debug_enabled() -> bool:
    """Return True only when CTG_DEBUG is explicitly set to '1'."""
    return os.getenv("CTG_DEBUG") == "1"


def configure_logging(debug: bool | None = None) -> logging.Logger:
    """Attach a single stream handler to the package logger.

    Calling this more than once only updates the level.
    """
    if debug is None:
        debug = debug_enabled()
    logger = logging.getLogger(LOGGER_NAME)
    if not any(getattr(handler, "_ctg_handler", False) for handler in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_FORMAT))
        handler._ctg_handler = True  # type: ignore[attr-defined]
        logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if debug else logging.WARNING)
    return logger
