"""
Result of a single license verification attempt.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class OutcomeStatus(str, Enum):
    VERIFIED = "verified"
    REJECTED = "rejected"
    NOT_ATTEMPTED = "not_attempted"


class RejectReason(str, Enum):
    MALFORMED_ARTIFACT = "malformed_artifact"
    INVALID_SIGNATURE = "invalid_signature"


@dataclass(frozen=True)
class VerificationOutcome:
    """Three-valued verification result.

    ``reason`` is set exactly when ``status`` is ``REJECTED``.
    """

    status: OutcomeStatus
    reason: RejectReason | None = None

    def __post_init__(self) -> None:
        if (self.status is OutcomeStatus.REJECTED) != (self.reason is not None):
            msg = "reason must be given for, and only for, rejected outcomes"
            raise ValueError(msg)

    @classmethod
    def verified(cls) -> VerificationOutcome:
        return cls(OutcomeStatus.VERIFIED)

    @classmethod
    def rejected(cls, reason: RejectReason) -> VerificationOutcome:
        return cls(OutcomeStatus.REJECTED, reason)

    @classmethod
    def not_attempted(cls) -> VerificationOutcome:
        return cls(OutcomeStatus.NOT_ATTEMPTED)

    @property
    def is_verified(self) -> bool:
        return self.status is OutcomeStatus.VERIFIED

    @property
    def is_rejected(self) -> bool:
        return self.status is OutcomeStatus.REJECTED
