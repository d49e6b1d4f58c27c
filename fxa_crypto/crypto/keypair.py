"""RSA keypair holder with lazy, single-flight ephemeral generation."""

import asyncio
import logging
import os
from pathlib import Path

from fxa_crypto.crypto.keys import (
    RSA_ALGORITHM,
    RSA_KEYSIZE,
    generate_keypair,
    load_public_key,
    load_secret_key,
    public_key_to_jwk_entry,
)
from fxa_crypto.crypto.types import (
    GeneratedKeyPair,
    JWKEntry,
    JWKSResponse,
    PublicKey,
    SecretKey,
)

logger = logging.getLogger(__name__)

StrPath = str | os.PathLike[str]


def _log_generation_failure(task: asyncio.Future[GeneratedKeyPair]) -> None:
    if not task.cancelled() and task.exception() is not None:
        logger.debug("Keypair generation failed: %s", task.exception())


class KeyPair:
    """Owns an RSA secret/public key pair.

    Keys come from direct objects or PEM files given at construction. A
    secret key alone also yields its public half. Otherwise, when either half
    is missing, the first accessor generates an ephemeral pair; concurrent
    callers share that one generation.
    """

    def __init__(
        self,
        *,
        secret_key: SecretKey | None = None,
        secret_key_file: StrPath | None = None,
        public_key: PublicKey | None = None,
        public_key_file: StrPath | None = None,
    ) -> None:
        self._secret_key = secret_key
        if self._secret_key is None and secret_key_file is not None:
            self._secret_key = load_secret_key(Path(secret_key_file).read_bytes())
            logger.debug("Loaded secret key from %s", secret_key_file)

        self._public_key = public_key
        if self._public_key is None and public_key_file is not None:
            self._public_key = load_public_key(Path(public_key_file).read_bytes())
            logger.debug("Loaded public key from %s", public_key_file)

        derive_public_key = getattr(self._secret_key, "public_key", None)
        if self._public_key is None and derive_public_key is not None:
            self._public_key = derive_public_key()
            logger.debug("Derived public key from secret key")

        self._pending: asyncio.Future[GeneratedKeyPair] | None = None

    async def generate(self) -> GeneratedKeyPair:
        """Generate a brand-new keypair without touching stored keys."""
        return await asyncio.to_thread(generate_keypair, RSA_ALGORITHM, RSA_KEYSIZE)

    async def resolve(self) -> GeneratedKeyPair:
        """Return the stored keypair, generating an ephemeral one once."""
        if self._secret_key is not None and self._public_key is not None:
            return GeneratedKeyPair(self._secret_key, self._public_key)
        if self._pending is None:
            self._pending = asyncio.ensure_future(self._generate_and_store())
            self._pending.add_done_callback(_log_generation_failure)
        return await asyncio.shield(self._pending)

    async def _generate_and_store(self) -> GeneratedKeyPair:
        if self._secret_key is not None or self._public_key is not None:
            logger.warning("Incomplete keypair supplied, generating an ephemeral one")
        try:
            keypair = await self.generate()
            self._secret_key = keypair.secret_key
            self._public_key = keypair.public_key
            logger.debug("Ephemeral keypair ready")
            return keypair
        finally:
            self._pending = None

    async def get_public_key(self) -> PublicKey:
        """Return the public key, generating a keypair if needed."""
        keypair = await self.resolve()
        return keypair.public_key

    async def get_secret_key(self) -> SecretKey:
        """Return the secret key, generating a keypair if needed."""
        keypair = await self.resolve()
        return keypair.secret_key

    async def serialize_public_key(self) -> str:
        """Serialize the public key as PEM text."""
        keypair = await self.resolve()
        return keypair.public_key.serialize()

    async def serialize_secret_key(self) -> str:
        """Serialize the secret key as PEM text."""
        keypair = await self.resolve()
        return keypair.secret_key.serialize()

    async def write_public_key(self, path: StrPath) -> str:
        """Write the serialized public key to ``path``, replacing any file."""
        serialized = await self.serialize_public_key()
        await asyncio.to_thread(Path(path).write_bytes, serialized.encode())
        logger.debug("Wrote public key to %s", path)
        return serialized

    async def write_secret_key(self, path: StrPath) -> str:
        """Write the serialized secret key to ``path``, replacing any file."""
        serialized = await self.serialize_secret_key()
        await asyncio.to_thread(Path(path).write_bytes, serialized.encode())
        logger.debug("Wrote secret key to %s", path)
        return serialized

    async def to_public_key_set_entry(self, kid: str) -> JWKEntry:
        """Describe the public key as a JWK for verifiers."""
        public_key = await self.get_public_key()
        return public_key_to_jwk_entry(public_key, kid)

    async def to_public_key_set(self, kid: str) -> JWKSResponse:
        """Wrap the public key in a one-entry JWKS."""
        entry = await self.to_public_key_set_entry(kid)
        return JWKSResponse(keys=[entry])
