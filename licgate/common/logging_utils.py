"""
Logging setup shared by the CLI and the examples.
"""

from __future__ import annotations

import logging

from licgate.common.config import Config

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_LEVEL_NAMES = ("DEBUG", "INFO", "WARNING", "ERROR")
HANDLER_NAME = "licgate-stderr"


def level_from_name(name: str | None) -> int:
    """Map a level name such as ``"debug"`` to its value, or the default level."""
    if not name:
        return Config.LOG_LEVEL
    return logging.getLevelName(name.upper())


def setup_logger(
    log_level: int, logger: logging.Logger | None = None
) -> logging.Logger:
    """
    Route ``logger`` (the ``licgate`` package logger by default) to stderr.

    Repeated calls reuse the handler installed by the first one and only move
    it to the new level, so the CLI can be invoked several times per process.

    Args:
        log_level: Level for the logger and its stderr handler
        logger: Logger to configure instead of the package logger

    Returns:
        The configured logger
    """
    logger = logger or logging.getLogger(Config.APP_NAME)
    logger.setLevel(log_level)
    handler = next((h for h in logger.handlers if h.name == HANDLER_NAME), None)
    if handler is None:
        handler = logging.StreamHandler()
        handler.set_name(HANDLER_NAME)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    handler.setLevel(log_level)
    return logger
