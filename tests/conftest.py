import hashlib
import logging
from pathlib import Path
from collections.abc import Iterator
from typing import Any, Callable

import pytest
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa
from cryptography.hazmat.primitives.asymmetric.rsa import RSAPrivateKey

from licgate.common.paths import reset_path_cache
from licgate.license.artifact import encode_artifact
from licgate.license.trust_anchor import TrustAnchor


def sign_digest(private_key: RSAPrivateKey, payload: bytes) -> bytes:
    """Sign SHA-256(payload) with bare PKCS#1 v1.5 padding, as the issuer does."""
    digest = hashlib.sha256(payload).digest()
    numbers = private_key.private_numbers()
    k = (private_key.key_size + 7) // 8
    block = b"\x00\x01" + b"\xff" * (k - 3 - len(digest)) + b"\x00" + digest
    signature = pow(int.from_bytes(block, "big"), numbers.d, numbers.public_numbers.n)
    return signature.to_bytes(k, "big")


@pytest.fixture(scope="session")
def license_key() -> RSAPrivateKey:
    return rsa.generate_private_key(public_exponent=65537, key_size=2048)


@pytest.fixture(scope="session")
def foreign_key() -> RSAPrivateKey:
    return rsa.generate_private_key(public_exponent=65537, key_size=2048)


@pytest.fixture(scope="session")
def trust_anchor(license_key: RSAPrivateKey) -> TrustAnchor:
    """Test anchor loaded through the same PEM path as the embedded one."""
    pem = license_key.public_key().public_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PublicFormat.PKCS1,
    )
    return TrustAnchor.from_pem(pem.decode())


@pytest.fixture(scope="session")
def make_artifact(license_key: RSAPrivateKey) -> Callable[..., bytes]:
    def _make(payload: bytes, key: RSAPrivateKey | None = None) -> bytes:
        return encode_artifact(payload, sign_digest(key or license_key, payload))

    return _make


@pytest.fixture
def write_file(tmp_path: Path) -> Callable[[str, Any], Path]:
    def _write(name: str, content: str | bytes) -> Path:
        path = tmp_path / name
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_text(content)
        return path

    return _write


@pytest.fixture(autouse=True)
def isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    """Point user directories at a temporary home and clear overrides."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("XDG_DATA_HOME", str(home / ".local" / "share"))
    monkeypatch.setenv("XDG_CACHE_HOME", str(home / ".cache"))
    monkeypatch.setenv("APPDATA", str(home / "AppData" / "Roaming"))
    monkeypatch.setenv("LOCALAPPDATA", str(home / "AppData" / "Local"))
    monkeypatch.delenv("HOST", raising=False)
    monkeypatch.delenv("PORT", raising=False)
    reset_path_cache()
    yield home
    reset_path_cache()
    logging.getLogger("licgate").handlers.clear()
