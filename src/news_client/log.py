"""Opt-in logging setup for applications embedding the client."""

from __future__ import annotations

import logging

from news_client.config import get_settings

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging(level: str | None = None) -> logging.Logger:
    """Attach a stream handler to the package logger and set its level.

    ``level`` defaults to ``Settings.log_level``. Calling this more than once
    only updates the level.
    """

    logger = logging.getLogger("news_client")
    if not any(type(handler) is logging.StreamHandler for handler in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    logger.setLevel((level or get_settings().log_level).upper())
    return logger
