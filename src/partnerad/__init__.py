"""
partnerad - AI advertisement generator for retail partners

A Python package that turns a partner's idea or product photo into a portrait
(9:16) advertisement image via Google's Gemini image model.

Library usage:
- Build a GenerationRequest and call generate_ad(). Configuration can be passed per
  call (generate_ad(..., config=my_config)) or via the shared config: use
  get_config() / set_config() and omit the config argument.
- The API key comes from a CredentialSource. EnvCredentialSource reads GEMINI_API_KEY
  (or .env); SessionCredentialSource holds a key connected at runtime.
- SessionState and run_generation() model the ad builder form for UIs.
- Logging: control verbosity with set_verbosity(0|1|2) or configure_logging(verbose_level, quiet);
  PARTNERAD_VERBOSITY env (0/1/2) is read when the CLI runs or when logging is configured.
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("partnerad")
except PackageNotFoundError:
    # Package is not installed (e.g., running from source in development)
    __version__ = "0.0.0.dev"

from partnerad.core.composer import ComposedPrompt, InlineImage, compose_prompt, validate_request
from partnerad.core.config import (
    DEFAULT_API_BASE_URL,
    DEFAULT_IMAGE_MODEL,
    Config,
    get_config,
    set_config,
)
from partnerad.core.credentials import (
    CredentialSource,
    EnvCredentialSource,
    SessionCredentialSource,
    resolve_credential,
)
from partnerad.core.image_gen import generate_ad
from partnerad.core.models import (
    MAX_SAVED_PROMPTS,
    AdSettings,
    GeneratedAd,
    GenerationMode,
    GenerationRequest,
    SavedPrompt,
)
from partnerad.core.prompts_loader import get_business_types, get_default_base_prompt
from partnerad.core.reference import load_image_data_url
from partnerad.core.session import ImageSlot, SessionState, new_session, run_generation
from partnerad.logging_config import configure_logging, set_verbosity
from partnerad.utils.exceptions import (
    APIError,
    ConfigurationError,
    ImageProcessingError,
    InvalidInputError,
    MissingCredentialError,
    NetworkError,
    NoImageGeneratedError,
    PartnerAdError,
    RequestTimeoutError,
    TransportError,
)

__all__ = [
    "APIError",
    "AdSettings",
    "ComposedPrompt",
    "Config",
    "ConfigurationError",
    "CredentialSource",
    "DEFAULT_API_BASE_URL",
    "DEFAULT_IMAGE_MODEL",
    "EnvCredentialSource",
    "GeneratedAd",
    "GenerationMode",
    "GenerationRequest",
    "ImageProcessingError",
    "ImageSlot",
    "InlineImage",
    "InvalidInputError",
    "MAX_SAVED_PROMPTS",
    "MissingCredentialError",
    "NetworkError",
    "NoImageGeneratedError",
    "PartnerAdError",
    "RequestTimeoutError",
    "SavedPrompt",
    "SessionCredentialSource",
    "SessionState",
    "TransportError",
    "compose_prompt",
    "configure_logging",
    "generate_ad",
    "get_business_types",
    "get_config",
    "get_default_base_prompt",
    "load_image_data_url",
    "new_session",
    "resolve_credential",
    "run_generation",
    "set_config",
    "set_verbosity",
    "validate_request",
]
