# License artifact parsing and verification
from licgate.license.artifact import ParsedLicense as ParsedLicense
from licgate.license.artifact import parse_artifact as parse_artifact
from licgate.license.outcome import OutcomeStatus as OutcomeStatus
from licgate.license.outcome import RejectReason as RejectReason
from licgate.license.outcome import VerificationOutcome as VerificationOutcome
from licgate.license.trust_anchor import TrustAnchor as TrustAnchor
from licgate.license.trust_anchor import get_trust_anchor as get_trust_anchor
from licgate.license.verifier import LicenseVerifier as LicenseVerifier

__all__ = [
    "LicenseVerifier",
    "OutcomeStatus",
    "ParsedLicense",
    "RejectReason",
    "TrustAnchor",
    "VerificationOutcome",
    "get_trust_anchor",
    "parse_artifact",
]
