"""RSA signing key generation, PEM (de)serialization, and JWK conversion."""

import logging

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa
from jwt.algorithms import RSAAlgorithm

from fxa_crypto.crypto.encoding import int_to_base64url
from fxa_crypto.crypto.errors import (
    DeserializationError,
    GenerationError,
    SigningError,
)
from fxa_crypto.crypto.types import GeneratedKeyPair, JWKEntry, PublicKey

logger = logging.getLogger(__name__)

RSA_ALGORITHM = "RS"
# browserid keysize: modulus length in bytes
RSA_KEYSIZE = 256
RSA_PUBLIC_EXPONENT = 65537

_RS256 = RSAAlgorithm(RSAAlgorithm.SHA256)


class RSAPublicKey:
    """RSA public key backed by ``cryptography``."""

    def __init__(self, key: rsa.RSAPublicKey) -> None:
        self._key = key

    @property
    def n(self) -> int:
        """RSA modulus."""
        return self._key.public_numbers().n

    @property
    def e(self) -> int:
        """RSA public exponent."""
        return self._key.public_numbers().e

    def serialize(self) -> str:
        """Serialize as a SubjectPublicKeyInfo PEM string."""
        return self._key.public_bytes(
            encoding=serialization.Encoding.PEM,
            format=serialization.PublicFormat.SubjectPublicKeyInfo,
        ).decode()


class RSASecretKey:
    """RSA private key backed by ``cryptography``."""

    def __init__(self, key: rsa.RSAPrivateKey) -> None:
        self._key = key

    def sign(self, message: bytes | str) -> bytes:
        """Sign with RSASSA-PKCS1-v1_5 over SHA-256."""
        if isinstance(message, str):
            message = message.encode()
        try:
            return _RS256.sign(message, self._key)
        except (ValueError, TypeError, UnsupportedAlgorithm) as exc:
            raise SigningError(f"RS256 signing failed: {exc}") from exc

    def serialize(self) -> str:
        """Serialize as an unencrypted PKCS8 PEM string."""
        return self._key.private_bytes(
            encoding=serialization.Encoding.PEM,
            format=serialization.PrivateFormat.PKCS8,
            encryption_algorithm=serialization.NoEncryption(),
        ).decode()

    def public_key(self) -> RSAPublicKey:
        """Return the matching public key."""
        return RSAPublicKey(self._key.public_key())


def generate_keypair(
    algorithm: str = RSA_ALGORITHM, keysize: int = RSA_KEYSIZE
) -> GeneratedKeyPair:
    """Generate a new RSA keypair; ``keysize`` is the modulus length in bytes."""
    if algorithm != RSA_ALGORITHM:
        raise GenerationError(f"unsupported algorithm: {algorithm}")
    logger.debug("Generating RSA-%d keypair", keysize * 8)
    try:
        private_key = rsa.generate_private_key(
            public_exponent=RSA_PUBLIC_EXPONENT,
            key_size=keysize * 8,
        )
    except (ValueError, UnsupportedAlgorithm) as exc:
        raise GenerationError(f"RSA key generation failed: {exc}") from exc
    secret_key = RSASecretKey(private_key)
    return GeneratedKeyPair(secret_key=secret_key, public_key=secret_key.public_key())


def load_secret_key(data: bytes) -> RSASecretKey:
    """Load a PEM-encoded RSA private key."""
    try:
        loaded = serialization.load_pem_private_key(data, password=None)
    except (ValueError, TypeError, UnsupportedAlgorithm) as exc:
        raise DeserializationError(f"invalid secret key: {exc}") from exc
    if not isinstance(loaded, rsa.RSAPrivateKey):
        raise DeserializationError("secret key is not an RSA key")
    return RSASecretKey(loaded)


def load_public_key(data: bytes) -> RSAPublicKey:
    """Load a PEM-encoded RSA public key."""
    try:
        loaded = serialization.load_pem_public_key(data)
    except (ValueError, UnsupportedAlgorithm) as exc:
        raise DeserializationError(f"invalid public key: {exc}") from exc
    if not isinstance(loaded, rsa.RSAPublicKey):
        raise DeserializationError("public key is not an RSA key")
    return RSAPublicKey(loaded)


def public_key_to_jwk_entry(public_key: PublicKey, kid: str) -> JWKEntry:
    """Convert a public key to JWK format."""
    return JWKEntry(
        kid=kid,
        n=int_to_base64url(public_key.n),
        e=int_to_base64url(public_key.e),
    )
