"""
The compiled-in public key that all licenses are verified against.
"""

from __future__ import annotations

import base64
import binascii
import functools
from typing import cast

from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric.rsa import RSAPublicKey

LICENSE_PUBLIC_KEY_PEM = """
-----BEGIN RSA PUBLIC KEY-----
MIIBCgKCAQEAq+JphywG8wCe6cX+bx4xKH8xphMhaI5BgYefQHUXwp8xavoor6Fy
B54yZba/pkfTnao+P9BvPT0PlSJ1L9aGzq45lcQCcaT+ZdPC5qUogTrKu4eB2qSj
yTt5pGnPsna+/7yh2sDhC/SHMvTPKt4oHgobWYkH3/039Rj7z5X2WGq69gJzSknX
/lraNlVUqCWi3yCnMP9QOV5Tou5gQi4nxlfEJO3razrif5jHw1NufQ+xpx1GCpN9
WhFBU2R4GFZsxlEXV9g1Os1ZpyVuoOe9BnenuS57TixU9SC8kFUHAyAWRSiuLjoP
xAmGGm4wQ4FlMAt+Bj/K6rvdG3FJUu5ttQIDAQAB
-----END RSA PUBLIC KEY-----
"""


def pem_body_to_der(pem: str) -> bytes:
    """Strip the armor lines from a PEM block and decode the base64 body."""
    body = "".join(
        line.strip()
        for line in pem.strip().splitlines()
        if line.strip() and not line.startswith("-")
    )
    try:
        return base64.b64decode(body, validate=True)
    except binascii.Error as err:
        msg = "trust anchor PEM body is not valid base64"
        raise ValueError(msg) from err


class TrustAnchor:
    """An immutable RSA public key used to verify license signatures."""

    __slots__ = ("_key",)

    def __init__(self, key: RSAPublicKey) -> None:
        if not isinstance(key, RSAPublicKey):
            msg = "trust anchor must be an RSA public key"
            raise TypeError(msg)
        self._key = key

    @classmethod
    def from_der(cls, der: bytes) -> TrustAnchor:
        """Load a PKCS#1 ``RSAPublicKey`` DER structure."""
        key = serialization.load_der_public_key(der)
        return cls(cast("RSAPublicKey", key))

    @classmethod
    def from_pem(cls, pem: str) -> TrustAnchor:
        return cls.from_der(pem_body_to_der(pem))

    @property
    def public_key(self) -> RSAPublicKey:
        return self._key

    @property
    def key_size(self) -> int:
        return self._key.key_size

    def __repr__(self) -> str:
        return f"TrustAnchor(rsa-{self.key_size})"


@functools.lru_cache(maxsize=1)
def get_trust_anchor() -> TrustAnchor:
    """Return the embedded trust anchor, parsed once per process."""
    return TrustAnchor.from_pem(LICENSE_PUBLIC_KEY_PEM)
