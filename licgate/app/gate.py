"""
License gate and startup sequence.

Authentication is only enabled when a license verifies. A configured license
that fails to verify, or a missing license while authentication is
requested, stops startup. Only a development build may run authentication
without a license.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from licgate.app import _build
from licgate.app.resolver import ConfigResolver
from licgate.common.exceptions import LicenseRejected, LicenseRequired
from licgate.common.models import AuthOptions, ResolvedOptions
from licgate.license.outcome import OutcomeStatus, VerificationOutcome
from licgate.license.verifier import LicenseVerifier

if TYPE_CHECKING:
    from collections.abc import Mapping
    from pathlib import Path

logger = logging.getLogger(__name__)


def apply_gate(
    auth_requested: bool,  # noqa: FBT001
    outcome: VerificationOutcome,
    *,
    allow_unverified: bool | None = None,
) -> AuthOptions | None:
    """Decide whether authentication is enabled.

    Args:
        auth_requested: ``auth.enable`` from the config file
        outcome: result of verifying the configured license
        allow_unverified: development-build override; defaults to the
            packaged build mode

    Raises:
        LicenseRejected: auth requested and the license did not verify
        LicenseRequired: auth requested and no license is configured
    """
    if allow_unverified is None:
        allow_unverified = _build.ALLOW_UNVERIFIED_AUTH

    if not auth_requested:
        return None

    if outcome.status is OutcomeStatus.VERIFIED:
        return AuthOptions()
    if outcome.status is OutcomeStatus.REJECTED:
        logger.debug("License gate closed: %s", outcome.reason)
        raise LicenseRejected
    if allow_unverified:
        logger.warning(
            "Authentication enabled without a license (development build)"
        )
        return AuthOptions()
    raise LicenseRequired


def bootstrap(
    config_path: Path | None = None,
    environ: Mapping[str, str] | None = None,
    verifier: LicenseVerifier | None = None,
) -> ResolvedOptions:
    """Resolve configuration and run the license gate.

    Returns the final immutable options. Any failure raises a
    ``LicgateError`` subclass; nothing is retried.
    """
    resolver = ConfigResolver(environ)
    sources = resolver.load(config_path)
    candidate = resolver.resolve(sources, resolver.defaults_for(sources))

    if candidate.license_path is not None:
        verifier = verifier or LicenseVerifier()
        outcome = verifier.verify(candidate.license_path)
        logger.info("License check: %s", outcome.status.value)
    else:
        outcome = VerificationOutcome.not_attempted()

    auth = apply_gate(candidate.auth_requested, outcome)
    options = ResolvedOptions.model_validate(
        {**dict(candidate.options), "auth": auth, "license_outcome": outcome}
    )
    logger.info(
        "Resolved options: host=%s port=%s auth=%s",
        options.host,
        options.port,
        "enabled" if options.auth_enabled else "disabled",
    )
    return options
