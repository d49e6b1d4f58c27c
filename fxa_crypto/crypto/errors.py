"""Exceptions raised by key management and token issuance."""


class FxaCryptoError(Exception):
    """Base exception for fxa-crypto errors."""


class ConfigurationError(FxaCryptoError):
    """A required setting is missing."""


class DeserializationError(FxaCryptoError):
    """Persisted key material could not be parsed."""


class GenerationError(FxaCryptoError):
    """Keypair generation failed."""


class SigningError(FxaCryptoError):
    """Signing a token failed."""
