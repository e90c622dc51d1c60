"""
License artifact envelope: ``<base64(payload)>:<base64(signature)>``.

Leading and trailing ASCII whitespace of the whole artifact is ignored, so a
file saved with a trailing newline still parses. Whitespace anywhere inside
a segment is invalid base64 and rejects the artifact.
"""

from __future__ import annotations

import base64
import binascii
from dataclasses import dataclass

from licgate.common.config import Config


class MalformedArtifact(ValueError):
    """The artifact does not match the two-segment base64 envelope."""


@dataclass(frozen=True)
class ParsedLicense:
    payload: bytes
    signature: bytes


def _decode_segment(segment: bytes, name: str) -> bytes:
    try:
        return base64.b64decode(segment, validate=True)
    except (binascii.Error, ValueError) as err:
        msg = f"{name} segment is not valid base64"
        raise MalformedArtifact(msg) from err


def parse_artifact(data: bytes) -> ParsedLicense:
    """Split and decode a raw license artifact.

    Raises:
        MalformedArtifact: the artifact does not contain exactly one
            delimiter, or a segment fails to decode.
    """
    segments = data.strip().split(Config.LICENSE_DELIMITER)
    if len(segments) != 2:  # noqa: PLR2004
        msg = f"expected 2 segments, found {len(segments)}"
        raise MalformedArtifact(msg)
    payload_segment, signature_segment = segments
    return ParsedLicense(
        payload=_decode_segment(payload_segment, "payload"),
        signature=_decode_segment(signature_segment, "signature"),
    )


def encode_artifact(payload: bytes, signature: bytes) -> bytes:
    """Build an artifact from its decoded parts."""
    return (
        base64.b64encode(payload)
        + Config.LICENSE_DELIMITER
        + base64.b64encode(signature)
    )
