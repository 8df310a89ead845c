"""
Configuration management for partnerad.

This module handles the API key, model selection, endpoint and timeout settings.
"""

import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

from partnerad.logging_config import get_logger
from partnerad.utils.exceptions import ConfigurationError, MissingCredentialError

logger = get_logger(__name__)

# Load environment variables from .env file
load_dotenv()

DEFAULT_IMAGE_MODEL = "gemini-3-pro-image-preview"
DEFAULT_API_BASE_URL = "https://generativelanguage.googleapis.com/v1beta"
DEFAULT_GENERATION_TIMEOUT = 180


@dataclass
class Config:
    """Configuration for partnerad."""

    # Excluded from repr to avoid leaking secrets
    gemini_api_key: str = field(default="", repr=False)
    api_base_url: str = DEFAULT_API_BASE_URL
    image_model: str = DEFAULT_IMAGE_MODEL

    # Transport timeout in seconds; not retried on expiry
    generation_timeout: int = DEFAULT_GENERATION_TIMEOUT

    # Overrides the bundled default base prompt when non-empty
    base_prompt: str = ""

    # Log request/response payloads with image data truncated
    debug_api: bool = False

    _validated: bool = field(default=False, repr=False)

    @classmethod
    def from_env(cls) -> "Config":
        """
        Create a Config instance from environment variables.

        Environment variables:
            GEMINI_API_KEY: API key (GOOGLE_API_KEY is used as a fallback)
            PARTNERAD_MODEL: Image model id
            PARTNERAD_BASE_URL: API base URL
            PARTNERAD_TIMEOUT: Request timeout in seconds
            PARTNERAD_BASE_PROMPT: Base prompt override
            PARTNERAD_DEBUG_API: Log truncated payloads when 1/true/yes

        Returns:
            Config instance populated from environment
        """
        api_key = os.getenv("GEMINI_API_KEY") or os.getenv("GOOGLE_API_KEY") or ""

        timeout_raw = os.getenv("PARTNERAD_TIMEOUT", "").strip()
        try:
            timeout = int(timeout_raw) if timeout_raw else DEFAULT_GENERATION_TIMEOUT
        except ValueError as e:
            raise ConfigurationError(
                f"PARTNERAD_TIMEOUT must be an integer number of seconds, got {timeout_raw!r}."
            ) from e

        debug_api = os.getenv("PARTNERAD_DEBUG_API", "").strip().lower() in ("1", "true", "yes")

        return cls(
            gemini_api_key=api_key.strip(),
            api_base_url=os.getenv("PARTNERAD_BASE_URL", DEFAULT_API_BASE_URL).rstrip("/"),
            image_model=os.getenv("PARTNERAD_MODEL", DEFAULT_IMAGE_MODEL),
            generation_timeout=timeout,
            base_prompt=os.getenv("PARTNERAD_BASE_PROMPT", "").strip(),
            debug_api=debug_api,
        )

    def validate(self, require_api_key: bool = True) -> None:
        """
        Validate the configuration.

        Args:
            require_api_key: Also require a configured key. The UI passes False
                because the key can be connected interactively.

        Raises:
            ConfigurationError: If a setting is invalid
            MissingCredentialError: If require_api_key and no key is configured
        """
        logger.debug("Validating config")

        if self.generation_timeout <= 0:
            raise ConfigurationError(
                f"generation_timeout must be positive, got {self.generation_timeout}."
            )
        if not self.image_model:
            raise ConfigurationError("image_model cannot be empty.")
        if not self.api_base_url:
            raise ConfigurationError("api_base_url cannot be empty.")
        if require_api_key and not self.gemini_api_key:
            raise MissingCredentialError(
                "Gemini API key is required. Set GEMINI_API_KEY or connect a key."
            )

        self._validated = True

    def is_valid(self) -> bool:
        """Return True if validate() has been called successfully."""
        return self._validated

    def set_api_key(self, api_key: str) -> None:
        """
        Set the Gemini API key.

        Raises:
            ConfigurationError: If api_key is empty
        """
        if not api_key or not api_key.strip():
            raise ConfigurationError("API key cannot be empty")

        self.gemini_api_key = api_key.strip()
        self._validated = False

    def set_image_model(self, model: str) -> None:
        """
        Set the image generation model.

        Raises:
            ConfigurationError: If model is empty
        """
        if not model:
            raise ConfigurationError("Model ID cannot be empty")

        self.image_model = model


# Global configuration instance
_global_config: Config | None = None


def get_config() -> Config:
    """Return the shared Config, created from the environment on first use."""
    global _global_config
    if _global_config is None:
        _global_config = Config.from_env()
    return _global_config


def set_config(config: Config) -> None:
    """Replace the shared Config."""
    global _global_config
    _global_config = config
