"""
Compiled-in settings for the licensing gate.
"""

from __future__ import annotations

import logging


class Config:
    """Central configuration class for compiled defaults."""

    # Application name, used for user directories and the default database
    APP_NAME: str = "licgate"

    # Network defaults
    DEFAULT_HOST: str = "0.0.0.0"  # noqa: S104
    DEFAULT_PORT: int = 8080

    # Environment variables that override the config file
    HOST_ENV: str = "HOST"
    PORT_ENV: str = "PORT"

    # Layout under the user data directory
    DATABASE_SUBDIR: str = "db"
    DATABASE_FILENAME: str = "licgate.db"
    STORAGE_SUBDIR: str = "data"

    # License artifact format
    LICENSE_DELIMITER: bytes = b":"

    # Logging
    LOG_LEVEL: int = logging.INFO
