"""Factory wiring a KeyPair and token generator from settings."""

from fxa_crypto.core.settings import TokenSettings
from fxa_crypto.crypto.keypair import KeyPair
from fxa_crypto.preverified.token_generator import PreverifiedEmailTokenGenerator


def create_key_pair(settings: TokenSettings) -> KeyPair:
    """Load persisted keys when configured, otherwise start empty."""
    return KeyPair(
        secret_key_file=settings.secret_key_file,
        public_key_file=settings.public_key_file,
    )


def create_token_generator(
    settings: TokenSettings | None = None,
) -> PreverifiedEmailTokenGenerator:
    """Build a token generator from settings (environment by default)."""
    settings = settings or TokenSettings()
    return PreverifiedEmailTokenGenerator(
        key_pair=create_key_pair(settings),
        secret_key_id=settings.secret_key_id,
        audience=settings.audience,
        jku=settings.jku,
    )
