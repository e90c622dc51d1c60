import pytest

from licgate.license.artifact import (
    MalformedArtifact,
    ParsedLicense,
    encode_artifact,
    parse_artifact,
)


def test_parse_artifact_decodes_both_segments() -> None:
    parsed = parse_artifact(b"aGVsbG8=:c2ln")
    assert parsed == ParsedLicense(payload=b"hello", signature=b"sig")


def test_parse_artifact_empty_payload() -> None:
    parsed = parse_artifact(b":c2ln")
    assert parsed.payload == b""
    assert parsed.signature == b"sig"


def test_parse_artifact_strips_outer_whitespace() -> None:
    assert parse_artifact(b"\taGVsbG8=:c2ln\n").payload == b"hello"


@pytest.mark.parametrize("data", [b"aGVsbG8=", b"a:b:c", b"aGVsbG8=:c2ln:"])
def test_parse_artifact_segment_count(data: bytes) -> None:
    with pytest.raises(MalformedArtifact, match="segments"):
        parse_artifact(data)


@pytest.mark.parametrize(
    ("data", "segment"),
    [(b"aGVsbG8:c2ln", "payload"), (b"aGVsbG8=:c2l n", "signature")],
)
def test_parse_artifact_invalid_base64(data: bytes, segment: str) -> None:
    with pytest.raises(MalformedArtifact, match=segment):
        parse_artifact(data)


def test_encode_artifact_format() -> None:
    assert encode_artifact(b"hello", b"sig") == b"aGVsbG8=:c2ln"
