# licgate: offline license verification and startup gating

from licgate.app.gate import bootstrap
from licgate.license.verifier import LicenseVerifier, VerificationOutcome

__all__ = [
    "LicenseVerifier",
    "VerificationOutcome",
    "bootstrap",
]
