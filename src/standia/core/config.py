"""Configuration management for Stand IA.

This module provides centralized configuration management using Pydantic Settings.
Configuration is loaded from environment variables with the STANDIA_ prefix,
allowing easy customization without code changes.

Environment Variable Loading
-----------------------------
Configuration values are loaded in the following priority order:
1. Environment variables (STANDIA_* prefix)
2. .env file in the project root
3. Default values defined in StandiaConfig

The Gemini API key is the one exception to the prefix rule: it is read from
the first of ``STANDIA_GEMINI_API_KEY``, ``GEMINI_API_KEY`` or ``API_KEY``
that is set, so an existing Gemini environment works unchanged.

Example .env file:
    GEMINI_API_KEY=your-key-here
    STANDIA_MODEL_ID=gemini-2.5-flash-image
    STANDIA_REQUEST_TIMEOUT_MS=300000
    STANDIA_GRADIO_SERVER_PORT=7860

Usage Example
-------------
    from standia.core.config import config

    print(config.model_id)
    api_key = config.require_api_key()  # raises if the key is missing
"""

from typing import Literal

from pydantic import AliasChoices, Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import MissingCredentialsError


class StandiaConfig(BaseSettings):
    """Main configuration for Stand IA.

    Attributes
    ----------
    Credentials:
        gemini_api_key : SecretStr | None
            Ambient Gemini API key. Without it no generation can be attempted.

    Generation Settings:
        model_id : str
            Gemini image model used for every phase
        request_timeout_ms : int
            HTTP timeout for a single generation request, in milliseconds

    UI Settings:
        gradio_server_name : str
            Server bind address (0.0.0.0 for local network)
        gradio_server_port : int
            Server port (1024-65535)
        gradio_share : bool
            Create public gradio.live link (keep False for local-only)
        log_level : Literal["DEBUG", "INFO", "WARNING", "ERROR"]
            Root logging level used by the UI entry point

    Examples
    --------
    Create a custom configuration:

        >>> custom_config = StandiaConfig(gemini_api_key="test-key", gradio_server_port=8080)
        >>> custom_config.has_credentials()
        True
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="STANDIA_",
        case_sensitive=False,
        populate_by_name=True,
        extra="ignore",
    )

    # Credentials
    gemini_api_key: SecretStr | None = Field(
        default=None,
        validation_alias=AliasChoices("STANDIA_GEMINI_API_KEY", "GEMINI_API_KEY", "API_KEY"),
        description="Gemini API key (STANDIA_GEMINI_API_KEY, GEMINI_API_KEY or API_KEY)",
    )

    # Generation settings
    model_id: str = Field(
        default="gemini-2.5-flash-image",
        description="Gemini model used for image generation",
    )
    request_timeout_ms: int = Field(
        default=300_000,
        description="HTTP timeout for one generation request (milliseconds)",
        ge=1_000,
        le=900_000,
    )

    # UI settings
    gradio_server_name: str = Field(
        default="0.0.0.0",
        description="Server bind address (0.0.0.0 for local network)",
    )
    gradio_server_port: int = Field(
        default=7860,
        description="Server port",
        ge=1024,
        le=65535,
    )
    gradio_share: bool = Field(
        default=False,
        description="Create public gradio.live link (keep False for local-only)",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        description="Logging level for the application",
    )

    def has_credentials(self) -> bool:
        """Check whether a non-blank API key is configured."""
        return bool(self.gemini_api_key and self.gemini_api_key.get_secret_value().strip())

    def require_api_key(self) -> str:
        """Return the API key, failing fast when it is missing.

        Returns:
            The API key as plain text

        Raises:
            MissingCredentialsError: If no key is configured
        """
        if not self.has_credentials():
            raise MissingCredentialsError(
                "Gemini API key is not set. "
                "Set GEMINI_API_KEY (or STANDIA_GEMINI_API_KEY) in the environment or .env file."
            )
        return self.gemini_api_key.get_secret_value().strip()


# Global configuration instance
# Loaded once at import time from the environment and .env file.
config = StandiaConfig()
