import pytest
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import ec

from licgate.license.trust_anchor import (
    LICENSE_PUBLIC_KEY_PEM,
    TrustAnchor,
    get_trust_anchor,
    pem_body_to_der,
)


def test_embedded_anchor_is_rsa_2048() -> None:
    anchor = get_trust_anchor()
    assert anchor.key_size == 2048  # noqa: PLR2004
    assert anchor.public_key.public_numbers().e == 65537  # noqa: PLR2004


def test_embedded_anchor_parsed_once() -> None:
    assert get_trust_anchor() is get_trust_anchor()


def test_pem_armor_is_stripped() -> None:
    der = pem_body_to_der(LICENSE_PUBLIC_KEY_PEM)
    expected = (
        serialization.load_pem_public_key(LICENSE_PUBLIC_KEY_PEM.strip().encode())
        .public_bytes(
            encoding=serialization.Encoding.DER,
            format=serialization.PublicFormat.PKCS1,
        )
    )
    assert der == expected


def test_from_pem_matches_generated_key(license_key) -> None:
    pem = license_key.public_key().public_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PublicFormat.PKCS1,
    )
    anchor = TrustAnchor.from_pem(pem.decode())
    assert (
        anchor.public_key.public_numbers()
        == license_key.public_key().public_numbers()
    )


def test_invalid_pem_body() -> None:
    pem = "-----BEGIN RSA PUBLIC KEY-----\nnot base64!\n-----END RSA PUBLIC KEY-----"
    with pytest.raises(ValueError, match="base64"):
        TrustAnchor.from_pem(pem)


def test_non_rsa_key_refused() -> None:
    key = ec.generate_private_key(ec.SECP256R1()).public_key()
    with pytest.raises(TypeError):
        TrustAnchor(key)  # type: ignore[arg-type]


def test_repr_does_not_dump_key() -> None:
    assert repr(get_trust_anchor()) == "TrustAnchor(rsa-2048)"
