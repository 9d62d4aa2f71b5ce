"""Tests for standia.core.config - configuration management.

Tests cover:
- Default values for all configuration fields.
- Environment variable overrides via the STANDIA_ prefix.
- The API key aliases (STANDIA_GEMINI_API_KEY, GEMINI_API_KEY, API_KEY).
- Pydantic validation constraints (port range, timeout range, log level).
"""

from __future__ import annotations

import pytest
from pydantic import ValidationError as PydanticValidationError

from standia.core.config import StandiaConfig
from standia.core.exceptions import ConfigurationError, MissingCredentialsError

_KEY_VARS = ("STANDIA_GEMINI_API_KEY", "GEMINI_API_KEY", "API_KEY")


@pytest.fixture
def clean_env(monkeypatch):
    """Remove every variable that could supply an API key."""
    for name in _KEY_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestConfigDefaults:
    """Verify that StandiaConfig provides sensible defaults."""

    def test_default_model(self, clean_env):
        cfg = StandiaConfig(_env_file=None)
        assert cfg.model_id == "gemini-2.5-flash-image"

    def test_default_timeout(self, clean_env):
        cfg = StandiaConfig(_env_file=None)
        assert cfg.request_timeout_ms == 300_000

    def test_default_server_settings(self, clean_env):
        cfg = StandiaConfig(_env_file=None)
        assert cfg.gradio_server_name == "0.0.0.0"
        assert cfg.gradio_server_port == 7860
        assert cfg.gradio_share is False

    def test_default_log_level(self, clean_env):
        assert StandiaConfig(_env_file=None).log_level == "INFO"

    def test_no_key_by_default(self, clean_env):
        cfg = StandiaConfig(_env_file=None)
        assert cfg.gemini_api_key is None
        assert cfg.has_credentials() is False


class TestEnvironmentOverrides:
    """Verify that STANDIA_* environment variables override defaults."""

    def test_model_override(self, clean_env):
        clean_env.setenv("STANDIA_MODEL_ID", "gemini-3-pro-image-preview")
        assert StandiaConfig(_env_file=None).model_id == "gemini-3-pro-image-preview"

    def test_port_override(self, clean_env):
        clean_env.setenv("STANDIA_GRADIO_SERVER_PORT", "8080")
        assert StandiaConfig(_env_file=None).gradio_server_port == 8080

    @pytest.mark.parametrize("var", _KEY_VARS)
    def test_api_key_aliases(self, clean_env, var):
        """Each supported variable name supplies the key."""
        clean_env.setenv(var, "from-env")
        cfg = StandiaConfig(_env_file=None)
        assert cfg.require_api_key() == "from-env"

    def test_prefixed_key_wins(self, clean_env):
        clean_env.setenv("GEMINI_API_KEY", "generic")
        clean_env.setenv("STANDIA_GEMINI_API_KEY", "specific")
        assert StandiaConfig(_env_file=None).require_api_key() == "specific"

    def test_key_from_env_file(self, clean_env, temp_dir):
        env_file = temp_dir / ".env"
        env_file.write_text("GEMINI_API_KEY=file-key\n")
        assert StandiaConfig(_env_file=env_file).require_api_key() == "file-key"


class TestCredentials:
    """Verify the missing-credential precondition."""

    def test_require_api_key_missing(self, clean_env):
        cfg = StandiaConfig(_env_file=None)
        with pytest.raises(MissingCredentialsError):
            cfg.require_api_key()

    def test_blank_key_counts_as_missing(self, clean_env):
        cfg = StandiaConfig(_env_file=None, gemini_api_key="   ")
        assert cfg.has_credentials() is False
        with pytest.raises(ConfigurationError):
            cfg.require_api_key()

    def test_key_passed_by_field_name(self, clean_env):
        cfg = StandiaConfig(_env_file=None, gemini_api_key="direct")
        assert cfg.require_api_key() == "direct"

    def test_key_is_not_exposed_in_repr(self, clean_env):
        cfg = StandiaConfig(_env_file=None, gemini_api_key="super-secret")
        assert "super-secret" not in repr(cfg)


class TestConfigValidation:
    """Verify Pydantic validation constraints on config fields."""

    def test_port_too_low(self, clean_env):
        with pytest.raises(PydanticValidationError):
            StandiaConfig(_env_file=None, gradio_server_port=80)

    def test_timeout_too_high(self, clean_env):
        with pytest.raises(PydanticValidationError):
            StandiaConfig(_env_file=None, request_timeout_ms=10_000_000)

    def test_invalid_log_level(self, clean_env):
        with pytest.raises(PydanticValidationError):
            StandiaConfig(_env_file=None, log_level="TRACE")
