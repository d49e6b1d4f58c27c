"""Shared test fixtures for fxa-crypto."""

import pytest

from fxa_crypto.crypto.keypair import KeyPair
from fxa_crypto.crypto.keys import generate_keypair
from fxa_crypto.crypto.types import GeneratedKeyPair


@pytest.fixture(autouse=True)
def _clear_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep host FXA_* variables out of settings under test."""
    for name in (
        "FXA_SECRET_KEY_FILE",
        "FXA_PUBLIC_KEY_FILE",
        "FXA_SECRET_KEY_ID",
        "FXA_AUDIENCE",
        "FXA_JKU",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(scope="session")
def rsa_keys() -> GeneratedKeyPair:
    """One RSA keypair reused across tests that only need some key."""
    return generate_keypair()


@pytest.fixture
def key_pair(rsa_keys: GeneratedKeyPair) -> KeyPair:
    """A KeyPair preloaded with the session keys."""
    return KeyPair(secret_key=rsa_keys.secret_key, public_key=rsa_keys.public_key)
