"""
Platform user directories.

Each helper resolves the per-user directory for the platform, appends the
application name and makes sure the directory exists. Results are memoised,
so each directory kind is created at most once per process. Another process
creating the same directory concurrently is not an error.
"""

from __future__ import annotations

import functools
import logging
import os
import sys
from pathlib import Path

from licgate.common.config import Config
from licgate.common.exceptions import IoError

logger = logging.getLogger(__name__)


def _home() -> Path:
    try:
        return Path.home()
    except RuntimeError as err:
        msg = "failed to find user home directory"
        raise IoError(msg) from err


def _platform_cache_dir() -> Path:
    if sys.platform == "darwin":
        return _home() / "Library" / "Caches"
    if sys.platform == "win32":
        local_appdata = os.environ.get("LOCALAPPDATA")
        if local_appdata:
            return Path(local_appdata)
        return _home() / "AppData" / "Local"
    xdg_cache = os.environ.get("XDG_CACHE_HOME")
    if xdg_cache and Path(xdg_cache).is_absolute():
        return Path(xdg_cache)
    return _home() / ".cache"


def _platform_data_dir() -> Path:
    if sys.platform == "darwin":
        return _home() / "Library" / "Application Support"
    if sys.platform == "win32":
        appdata = os.environ.get("APPDATA")
        if appdata:
            return Path(appdata)
        return _home() / "AppData" / "Roaming"
    xdg_data = os.environ.get("XDG_DATA_HOME")
    if xdg_data and Path(xdg_data).is_absolute():
        return Path(xdg_data)
    return _home() / ".local" / "share"


def ensure_dir(path: Path, kind: str) -> Path:
    """Create ``path`` and its parents, treating an existing directory as success."""
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as err:
        msg = f"failed to create {Config.APP_NAME} {kind} directory in {path}"
        raise IoError(msg) from err
    logger.debug("Using %s directory %s", kind, path)
    return path


@functools.lru_cache(maxsize=None)
def cache_dir_default() -> Path:
    """Return the user cache directory for the application, creating it."""
    return ensure_dir(_platform_cache_dir() / Config.APP_NAME, "cache")


@functools.lru_cache(maxsize=None)
def data_dir_default() -> Path:
    """Return the user data directory for the application, creating it."""
    return ensure_dir(_platform_data_dir() / Config.APP_NAME, "data")


@functools.lru_cache(maxsize=None)
def database_url_default() -> str:
    """Return the default database url, a sqlite file in the user data directory."""
    db_dir = ensure_dir(data_dir_default() / Config.DATABASE_SUBDIR, "database")
    return f"sqlite:{db_dir / Config.DATABASE_FILENAME}"


def reset_path_cache() -> None:
    """Forget memoised directories."""
    cache_dir_default.cache_clear()
    data_dir_default.cache_clear()
    database_url_default.cache_clear()
