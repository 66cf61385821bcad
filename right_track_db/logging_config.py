"""Logging setup for the right_track_db package."""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
HANDLER_NAME = "right_track_db"


def setup_logging(level: int | str = logging.INFO) -> logging.Logger:
    """Attach a stream handler to the package logger (once) and set its level."""
    logger = logging.getLogger("right_track_db")
    if isinstance(level, str):
        level = level.upper()
    logger.setLevel(level)
    if not any(h.get_name() == HANDLER_NAME for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler.set_name(HANDLER_NAME)
        logger.addHandler(handler)
    return logger
