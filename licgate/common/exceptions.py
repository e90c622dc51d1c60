"""
Custom exceptions for the licensing gate.

Every error here is terminal at startup: the CLI reports the message and
exits before a listener is bound.
"""

from __future__ import annotations


class LicgateError(Exception):
    """Base class for startup failures."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class IoError(LicgateError):
    """Filesystem access failure or undiscoverable platform directory."""


class ConfigParseError(LicgateError):
    """The configuration document is not valid JSON matching the schema."""


class InvalidEnvValue(LicgateError):
    """An environment override is present but cannot be parsed."""

    def __init__(self, name: str, value: str, expected: str) -> None:
        super().__init__(f"invalid value {value!r} for {name}: expected {expected}")
        self.name = name
        self.value = value


class LicenseError(LicgateError):
    """Base class for license gate failures."""


class LicenseRejected(LicenseError):
    """A license was configured but did not verify."""

    def __init__(self) -> None:
        # One message for malformed and forged artifacts alike.
        super().__init__("failed to verify license")


class LicenseRequired(LicenseError):
    """Authentication was requested without a license."""

    def __init__(self) -> None:
        super().__init__("a license is required to enable authentication")
