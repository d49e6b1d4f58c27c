"""Token issuer settings loaded from environment variables."""

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class TokenSettings(BaseSettings):
    """Key files and issuance parameters for preverified email tokens."""

    model_config = SettingsConfigDict(env_prefix="FXA_")

    secret_key_file: Path | None = None
    public_key_file: Path | None = None
    secret_key_id: str = ""
    audience: str = ""
    jku: str = ""
