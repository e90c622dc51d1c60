"""
Configuration resolution.

Values come from three places, merged per field with a fixed precedence:
environment variables, an optional JSON config file and compiled defaults.
``ConfigResolver.load`` does all reading and parsing; ``resolve`` is a pure
merge over what was loaded.
"""

from __future__ import annotations

import ipaddress
import logging
import os
import re
from dataclasses import dataclass
from ipaddress import IPv4Address, IPv6Address
from typing import TYPE_CHECKING, TypeVar, Union

from pydantic import ValidationError

from licgate.common import paths
from licgate.common.config import Config
from licgate.common.exceptions import ConfigParseError, InvalidEnvValue, IoError
from licgate.common.models import (
    AppConfig,
    DatabaseOptions,
    LocalStorageConfig,
    LocalStorageOptions,
    ResolvedOptions,
    S3StorageOptions,
    SmtpOptions,
    StorageOptions,
)

if TYPE_CHECKING:
    from collections.abc import Mapping
    from pathlib import Path

IPAddress = Union[IPv4Address, IPv6Address]
T = TypeVar("T")

_PORT_RE = re.compile(r"[0-9]{1,5}")


@dataclass(frozen=True)
class ConfigSources:
    """Everything read from the outside world, already parsed."""

    file: AppConfig | None = None
    env_host: IPAddress | None = None
    env_port: int | None = None

    @property
    def config(self) -> AppConfig:
        return self.file or AppConfig()


@dataclass(frozen=True)
class Defaults:
    """Compiled defaults that depend on user directories.

    A field is ``None`` when the sources already provide the value, so the
    matching directory is never created.
    """

    database_url: str | None = None
    storage_path: Path | None = None
    cache_path: Path | None = None


@dataclass(frozen=True)
class CandidateOptions:
    """Merged options before the license gate has run."""

    options: ResolvedOptions
    auth_requested: bool
    license_path: Path | None


def parse_host(value: str) -> IPAddress:
    # Scoped IPv6 literals such as fe80::1%eth0 are not bind addresses here.
    if "%" in value:
        raise InvalidEnvValue(Config.HOST_ENV, value, "an unscoped IP address")
    try:
        return ipaddress.ip_address(value)
    except ValueError as err:
        raise InvalidEnvValue(Config.HOST_ENV, value, "an IP address") from err


def parse_port(value: str) -> int:
    if not _PORT_RE.fullmatch(value) or int(value) > 65535:  # noqa: PLR2004
        raise InvalidEnvValue(Config.PORT_ENV, value, "a port number 0-65535")
    return int(value)


class ConfigResolver:
    """Loads configuration sources and merges them into options."""

    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        self.environ = os.environ if environ is None else environ
        self.logger = logging.getLogger(__name__)

    def load(self, config_path: Path | None = None) -> ConfigSources:
        """Read environment overrides and, if given, the config file.

        Raises:
            IoError: the config file cannot be read.
            ConfigParseError: the config file is not valid JSON for the schema.
            InvalidEnvValue: ``HOST`` or ``PORT`` is set but unparsable.
        """
        file_config = self._load_file(config_path) if config_path else None

        host_value = self.environ.get(Config.HOST_ENV)
        port_value = self.environ.get(Config.PORT_ENV)
        env_host = parse_host(host_value) if host_value is not None else None
        env_port = parse_port(port_value) if port_value is not None else None

        return ConfigSources(file=file_config, env_host=env_host, env_port=env_port)

    def _load_file(self, config_path: Path) -> AppConfig:
        try:
            content = config_path.read_bytes()
        except OSError as err:
            msg = f"failed to read config file {config_path}: {err.strerror or err}"
            raise IoError(msg) from err
        try:
            config = AppConfig.model_validate_json(content)
        except ValidationError as err:
            msg = f"invalid config file {config_path}: {err}"
            raise ConfigParseError(msg) from err
        self.logger.info("Loaded configuration from %s", config_path)
        return config

    @staticmethod
    def defaults_for(sources: ConfigSources) -> Defaults:
        """Compute only the directory-backed defaults that ``sources`` leave open."""
        config = sources.config
        storage = config.storage
        return Defaults(
            database_url=(
                paths.database_url_default() if config.database is None else None
            ),
            storage_path=(
                paths.data_dir_default() / Config.STORAGE_SUBDIR
                if storage is None
                else None
            ),
            cache_path=(
                paths.cache_dir_default()
                if storage is not None
                and not isinstance(storage, LocalStorageConfig)
                and storage.cache_path is None
                else None
            ),
        )

    @staticmethod
    def resolve(sources: ConfigSources, defaults: Defaults) -> CandidateOptions:
        """Merge ``sources`` over ``defaults``. Performs no I/O."""
        config = sources.config

        if sources.env_host is not None:
            host = sources.env_host
        elif config.host is not None:
            host = config.host
        else:
            host = ipaddress.ip_address(Config.DEFAULT_HOST)
        if sources.env_port is not None:
            port = sources.env_port
        elif config.port is not None:
            port = config.port
        else:
            port = Config.DEFAULT_PORT

        if config.database is not None:
            database = DatabaseOptions(
                url=config.database.url,
                max_connections=config.database.max_connections,
            )
        else:
            database = DatabaseOptions(
                url=_required(defaults.database_url, "database url")
            )

        smtp = (
            SmtpOptions(
                host=config.smtp.host,
                username=config.smtp.username,
                password=config.smtp.password,
            )
            if config.smtp is not None
            else None
        )

        options = ResolvedOptions(
            cookie_domain=config.cookie_domain,
            database=database,
            host=host,
            port=port,
            smtp=smtp,
            storage=_resolve_storage(config, defaults),
            url=config.url,
        )
        return CandidateOptions(
            options=options,
            auth_requested=config.auth_requested,
            license_path=config.license,
        )


def _resolve_storage(config: AppConfig, defaults: Defaults) -> StorageOptions:
    storage = config.storage
    if storage is None:
        return LocalStorageOptions(
            path=_required(defaults.storage_path, "storage path")
        )
    if isinstance(storage, LocalStorageConfig):
        return LocalStorageOptions(path=storage.path)
    return S3StorageOptions(
        access_key=storage.access_key,
        secret_key=storage.secret_key,
        endpoint=storage.endpoint,
        bucket=storage.bucket,
        region=storage.region,
        cache_path=storage.cache_path or _required(defaults.cache_path, "cache path"),
    )


def _required(value: T | None, name: str) -> T:
    if value is None:
        msg = f"no default {name} was provided"
        raise ValueError(msg)
    return value
