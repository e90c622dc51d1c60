import sys
from pathlib import Path

import pytest

from licgate.common import paths
from licgate.common.exceptions import IoError

pytestmark = pytest.mark.skipif(
    sys.platform in ("darwin", "win32"), reason="XDG layout only"
)


def test_data_dir_default_created(isolated_env: Path) -> None:
    data_dir = paths.data_dir_default()
    assert data_dir == isolated_env / ".local" / "share" / "licgate"
    assert data_dir.is_dir()


def test_cache_dir_default_created(isolated_env: Path) -> None:
    cache_dir = paths.cache_dir_default()
    assert cache_dir == isolated_env / ".cache" / "licgate"
    assert cache_dir.is_dir()


def test_database_url_default(isolated_env: Path) -> None:
    url = paths.database_url_default()
    db_path = isolated_env / ".local" / "share" / "licgate" / "db" / "licgate.db"
    assert url == f"sqlite:{db_path}"
    assert db_path.parent.is_dir()


def test_existing_directory_is_not_an_error(isolated_env: Path) -> None:
    existing = isolated_env / ".local" / "share" / "licgate"
    existing.mkdir(parents=True)
    assert paths.data_dir_default() == existing


def test_helpers_are_memoised(isolated_env: Path, monkeypatch) -> None:
    first = paths.data_dir_default()
    monkeypatch.setenv("XDG_DATA_HOME", str(isolated_env / "elsewhere"))
    assert paths.data_dir_default() == first


def test_relative_xdg_is_ignored(isolated_env: Path, monkeypatch) -> None:
    monkeypatch.setenv("XDG_CACHE_HOME", "relative/cache")
    assert paths.cache_dir_default() == isolated_env / ".cache" / "licgate"


def test_creation_failure_raises_io_error(isolated_env: Path, monkeypatch) -> None:
    blocker = isolated_env / "not-a-dir"
    blocker.write_text("")
    monkeypatch.setenv("XDG_DATA_HOME", str(blocker))
    with pytest.raises(IoError, match="failed to create licgate data directory"):
        paths.data_dir_default()
