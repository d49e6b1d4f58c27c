"""Type definitions for signing keys, JWKS, and preverified email tokens."""

from typing import NamedTuple, Protocol

from pydantic import BaseModel, ConfigDict

TOKEN_SIGNING_ALG = "RS256"
PREVERIFIED_EMAIL_TOKEN_TYPE = "mozilla/fxa/preVerifyToken/v1"


class PublicKey(Protocol):
    """Verifier-side half of a keypair."""

    @property
    def n(self) -> int: ...

    @property
    def e(self) -> int: ...

    def serialize(self) -> str: ...


class SecretKey(Protocol):
    """Signing half of a keypair."""

    def sign(self, message: bytes | str) -> bytes: ...

    def serialize(self) -> str: ...


class GeneratedKeyPair(NamedTuple):
    """A secret key and its matching public key."""

    secret_key: SecretKey
    public_key: PublicKey


class JWKEntry(BaseModel):
    """Single JWK entry in a JWKS response."""

    kid: str
    use: str = "sig"
    kty: str = "RSA"
    n: str
    e: str


class JWKSResponse(BaseModel):
    """JSON Web Key Set response."""

    keys: list[JWKEntry]


class TokenHeader(BaseModel):
    """JOSE header of a preverified email token."""

    model_config = ConfigDict(frozen=True)

    alg: str = TOKEN_SIGNING_ALG
    jku: str
    kid: str


class PreverifiedTokenClaims(BaseModel):
    """Payload of a preverified email token."""

    model_config = ConfigDict(frozen=True)

    exp: int
    aud: str
    sub: str
    typ: str = PREVERIFIED_EMAIL_TOKEN_TYPE
