"""Preverified email token creation using RS256."""

import logging
import time

from fxa_crypto.crypto.encoding import b64
from fxa_crypto.crypto.errors import ConfigurationError
from fxa_crypto.crypto.keypair import KeyPair
from fxa_crypto.crypto.types import PreverifiedTokenClaims, SecretKey, TokenHeader

logger = logging.getLogger(__name__)

TOKEN_VALIDITY_MS = 1000 * 60 * 60 * 6


def _milliseconds_to_seconds(milliseconds: int) -> int:
    return milliseconds // 1000


def _now_ms() -> int:
    return int(time.time() * 1000)


def generate_token(
    email: str,
    jku: str,
    secret_key: SecretKey,
    kid: str,
    audience: str,
    validity_ms: int = TOKEN_VALIDITY_MS,
) -> str:
    """Build and sign a compact ``header.payload.signature`` token."""
    header = b64(TokenHeader(jku=jku, kid=kid).model_dump_json())
    claims = PreverifiedTokenClaims(
        exp=_milliseconds_to_seconds(_now_ms() + validity_ms),
        aud=audience,
        sub=email,
    )
    payload = b64(claims.model_dump_json())
    signing_input = f"{header}.{payload}"
    signature = secret_key.sign(signing_input)
    return f"{signing_input}.{b64(signature)}"


class PreverifiedEmailTokenGenerator:
    """Mints preverified email tokens signed by a shared KeyPair."""

    def __init__(
        self,
        *,
        key_pair: KeyPair | None = None,
        secret_key_id: str | None = None,
        audience: str | None = None,
        jku: str | None = None,
    ) -> None:
        if key_pair is None:
            raise ConfigurationError("key_pair must be specified")
        if not secret_key_id:
            raise ConfigurationError("secret_key_id must be specified")
        if not audience:
            raise ConfigurationError("audience must be specified")
        if not jku:
            raise ConfigurationError("jku must be specified")
        self._key_pair = key_pair
        self._secret_key_id = secret_key_id
        self._audience = audience
        self._jku = jku

    @property
    def secret_key_id(self) -> str:
        """Key id placed in the token header."""
        return self._secret_key_id

    @property
    def audience(self) -> str:
        """Intended consumer of issued tokens."""
        return self._audience

    @property
    def jku(self) -> str:
        """URL where the public key set is published."""
        return self._jku

    async def generate(self, email: str) -> str:
        """Generate a preverified email token for ``email``.

        The address is embedded as the ``sub`` claim verbatim; callers are
        responsible for having verified it.
        """
        secret_key = await self._key_pair.get_secret_key()
        token = generate_token(
            email,
            self._jku,
            secret_key,
            self._secret_key_id,
            self._audience,
        )
        logger.debug(
            "Issued preverified email token kid=%s aud=%s",
            self._secret_key_id,
            self._audience,
        )
        return token
