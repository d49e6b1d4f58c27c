"""Tests for settings-driven generator construction."""

from pathlib import Path

import jwt
import pytest

from fxa_crypto.core.factory import create_token_generator
from fxa_crypto.core.settings import TokenSettings
from fxa_crypto.crypto.errors import ConfigurationError
from fxa_crypto.crypto.keypair import KeyPair


class TestTokenSettings:
    """Tests for environment-driven settings."""

    def test_defaults(self) -> None:
        settings = TokenSettings()
        assert settings.secret_key_file is None
        assert settings.public_key_file is None
        assert settings.secret_key_id == ""

    def test_reads_prefixed_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("FXA_SECRET_KEY_ID", "dev-1")
        monkeypatch.setenv("FXA_AUDIENCE", "https://accounts.firefox.com")
        monkeypatch.setenv("FXA_JKU", "http://x/keys")
        monkeypatch.setenv("FXA_SECRET_KEY_FILE", "/tmp/secret-key.pem")
        settings = TokenSettings()
        assert settings.secret_key_id == "dev-1"
        assert settings.audience == "https://accounts.firefox.com"
        assert settings.jku == "http://x/keys"
        assert settings.secret_key_file == Path("/tmp/secret-key.pem")


class TestCreateTokenGenerator:
    """Tests for create_token_generator."""

    def test_blank_settings_rejected(self) -> None:
        with pytest.raises(ConfigurationError, match="secret_key_id"):
            create_token_generator()

    async def test_from_env_with_ephemeral_keys(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("FXA_SECRET_KEY_ID", "dev-1")
        monkeypatch.setenv("FXA_AUDIENCE", "https://aud")
        monkeypatch.setenv("FXA_JKU", "http://x/keys")
        generator = create_token_generator()
        assert generator.secret_key_id == "dev-1"
        token = await generator.generate("a@b.com")
        assert len(token.split(".")) == 3

    async def test_loads_key_files(self, key_pair: KeyPair, tmp_path: Path) -> None:
        secret_file = tmp_path / "secret-key.pem"
        public_file = tmp_path / "public-key.pem"
        await key_pair.write_secret_key(secret_file)
        await key_pair.write_public_key(public_file)

        generator = create_token_generator(
            TokenSettings(
                secret_key_file=secret_file,
                public_key_file=public_file,
                secret_key_id="dev-1",
                audience="https://aud",
                jku="http://x/keys",
            )
        )
        token = await generator.generate("a@b.com")
        claims = jwt.decode(
            token,
            await key_pair.serialize_public_key(),
            algorithms=["RS256"],
            audience="https://aud",
        )
        assert claims["sub"] == "a@b.com"

    async def test_secret_key_file_alone_signs_with_persisted_key(
        self, key_pair: KeyPair, tmp_path: Path
    ) -> None:
        secret_file = tmp_path / "secret-key.pem"
        await key_pair.write_secret_key(secret_file)

        generator = create_token_generator(
            TokenSettings(
                secret_key_file=secret_file,
                secret_key_id="dev-1",
                audience="https://aud",
                jku="http://x/keys",
            )
        )
        token = await generator.generate("a@b.com")
        claims = jwt.decode(
            token,
            await key_pair.serialize_public_key(),
            algorithms=["RS256"],
            audience="https://aud",
        )
        assert claims["sub"] == "a@b.com"
