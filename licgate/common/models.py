"""
Pydantic models for the configuration file and the resolved options.
"""

from __future__ import annotations

from ipaddress import IPv4Address, IPv6Address
from pathlib import Path
from typing import Annotated, Literal, Union
from urllib.parse import urlsplit

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    IPvAnyAddress,
    field_validator,
    model_validator,
)

from licgate.app import _build
from licgate.license.outcome import OutcomeStatus, VerificationOutcome


def _check_url(value: str) -> str:
    parts = urlsplit(value)
    if not parts.scheme:
        msg = f"relative URL without a base: {value!r}"
        raise ValueError(msg)
    return value


# Config file schema. Unknown keys are ignored at every level; values are
# never coerced from another JSON type.


class _StrictConfig(BaseModel):
    model_config = ConfigDict(strict=True)


class AuthConfig(_StrictConfig):
    enable: bool


class DatabaseConfig(_StrictConfig):
    url: str
    max_connections: int | None = Field(default=None, ge=0)

    @field_validator("url")
    @classmethod
    def validate_url(cls, value: str) -> str:
        return _check_url(value)


class SmtpConfig(_StrictConfig):
    host: str
    username: str
    password: str = Field(repr=False)


class LocalStorageConfig(_StrictConfig):
    type: Literal["local"]
    path: Path


class S3StorageConfig(_StrictConfig):
    type: Literal["s3"]
    access_key: str
    secret_key: str = Field(repr=False)
    endpoint: str
    bucket: str
    region: str
    cache_path: Path | None = None


StorageConfig = Annotated[
    Union[LocalStorageConfig, S3StorageConfig], Field(discriminator="type")
]


class AppConfig(_StrictConfig):
    auth: AuthConfig | None = None
    cookie_domain: str | None = None
    database: DatabaseConfig | None = None
    host: IPvAnyAddress | None = None
    license: Path | None = None
    port: int | None = Field(default=None, ge=0, le=65535)
    smtp: SmtpConfig | None = None
    storage: StorageConfig | None = None
    url: str | None = None

    @field_validator("host")
    @classmethod
    def validate_host(
        cls, value: IPv4Address | IPv6Address | None
    ) -> IPv4Address | IPv6Address | None:
        if getattr(value, "scope_id", None) is not None:
            msg = f"scoped address not allowed: {value}"
            raise ValueError(msg)
        return value

    @field_validator("url")
    @classmethod
    def validate_url(cls, value: str | None) -> str | None:
        if value is None:
            return None
        parts = urlsplit(value)
        if not parts.scheme or not parts.netloc:
            msg = f"invalid public url: {value!r}"
            raise ValueError(msg)
        return value

    @property
    def auth_requested(self) -> bool:
        return self.auth is not None and self.auth.enable


# Options handed to the rest of the system. Immutable once built.


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


class AuthOptions(_Frozen):
    pass


class DatabaseOptions(_Frozen):
    url: str
    max_connections: int | None = None


class SmtpOptions(_Frozen):
    host: str
    username: str
    password: str = Field(repr=False)


class LocalStorageOptions(_Frozen):
    type: Literal["local"] = "local"
    path: Path


class S3StorageOptions(_Frozen):
    type: Literal["s3"] = "s3"
    access_key: str
    secret_key: str = Field(repr=False)
    endpoint: str
    bucket: str
    region: str
    cache_path: Path


StorageOptions = Union[LocalStorageOptions, S3StorageOptions]


class ResolvedOptions(_Frozen):
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    auth: AuthOptions | None = None
    cookie_domain: str | None = None
    database: DatabaseOptions
    host: IPv4Address | IPv6Address
    port: int
    smtp: SmtpOptions | None = None
    storage: StorageOptions
    url: str | None = None
    license_outcome: VerificationOutcome = Field(
        default_factory=VerificationOutcome.not_attempted
    )

    @model_validator(mode="after")
    def check_auth_gated(self) -> ResolvedOptions:
        """Auth needs a verified license, or no license in a development build."""
        if self.auth is None or self.license_outcome.is_verified:
            return self
        if (
            self.license_outcome.status is OutcomeStatus.NOT_ATTEMPTED
            and _build.ALLOW_UNVERIFIED_AUTH
        ):
            return self
        msg = f"auth cannot be enabled with license {self.license_outcome.status.value}"
        raise ValueError(msg)

    @property
    def auth_enabled(self) -> bool:
        return self.auth is not None
