"""
Offline license verification against the embedded trust anchor.
"""

from __future__ import annotations

import hashlib
import hmac
import logging
from typing import TYPE_CHECKING

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives.asymmetric import padding

from licgate.common.exceptions import IoError
from licgate.license.artifact import MalformedArtifact, parse_artifact
from licgate.license.outcome import RejectReason, VerificationOutcome
from licgate.license.trust_anchor import TrustAnchor, get_trust_anchor

if TYPE_CHECKING:
    from pathlib import Path


class LicenseVerifier:
    """Verifies ``<base64(payload)>:<base64(signature)>`` license artifacts.

    The signature is RSA PKCS#1 v1.5 over the bare SHA-256 digest of the
    payload (no DigestInfo prefix). The verifier holds no state between
    calls, so verifying the same artifact twice gives the same outcome.
    """

    def __init__(self, trust_anchor: TrustAnchor | None = None) -> None:
        self.trust_anchor = trust_anchor or get_trust_anchor()
        self.logger = logging.getLogger(__name__)

    def verify(self, path: Path | None) -> VerificationOutcome:
        """Verify the artifact at ``path``, or report that none was configured."""
        if path is None:
            self.logger.debug("No license configured")
            return VerificationOutcome.not_attempted()
        return self.verify_path(path)

    def verify_path(self, path: Path) -> VerificationOutcome:
        """Read and verify an artifact file.

        Raises:
            IoError: the file cannot be read.
        """
        try:
            data = path.read_bytes()
        except OSError as err:
            msg = f"failed to read license file {path}: {err.strerror or err}"
            raise IoError(msg) from err
        self.logger.debug("License artifact read from %s (%d bytes)", path, len(data))
        return self.verify_bytes(data)

    def verify_bytes(self, data: bytes) -> VerificationOutcome:
        """Verify a raw artifact. Never raises for malformed input."""
        try:
            parsed = parse_artifact(data)
        except MalformedArtifact as err:
            self.logger.debug("License rejected: %s", err)
            return VerificationOutcome.rejected(RejectReason.MALFORMED_ARTIFACT)
        self.logger.debug("License parsed")

        digest = hashlib.sha256(parsed.payload).digest()
        self.logger.debug("License payload digested")

        if not self._signature_matches(parsed.signature, digest):
            self.logger.debug("License rejected: signature does not match")
            return VerificationOutcome.rejected(RejectReason.INVALID_SIGNATURE)

        self.logger.debug("License verified")
        return VerificationOutcome.verified()

    def _signature_matches(self, signature: bytes, digest: bytes) -> bool:
        try:
            recovered = self.trust_anchor.public_key.recover_data_from_signature(
                signature, padding.PKCS1v15(), None
            )
        except (InvalidSignature, ValueError):
            return False
        return hmac.compare_digest(recovered, digest)
