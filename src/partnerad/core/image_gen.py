"""
Ad generation entry point.

generate_ad() is the single-shot path from a GenerationRequest to a
GeneratedAd: validate, obtain the credential, compose, send one request.
Input and credential problems are raised before any network I/O.
"""

import time

from partnerad.core.composer import compose_prompt, validate_request
from partnerad.core.config import Config, get_config
from partnerad.core.credentials import CredentialSource, EnvCredentialSource, resolve_credential
from partnerad.core.models import GeneratedAd, GenerationMode, GenerationRequest, now_millis
from partnerad.core.providers.base import ImageGenerationProvider
from partnerad.core.providers.gemini import GeminiProvider
from partnerad.logging_config import get_logger

logger = get_logger(__name__)


def generate_ad(
    request: GenerationRequest,
    *,
    credentials: CredentialSource | None = None,
    provider: ImageGenerationProvider | None = None,
    config: Config | None = None,
    model: str | None = None,
    timeout: int | None = None,
    interactive: bool = False,
) -> GeneratedAd:
    """
    Generate one ad image for request.

    Args:
        request: The submission to generate for
        credentials: Where the API key comes from (defaults to configuration)
        provider: Image service backend (defaults to GeminiProvider)
        config: Optional config; if None, uses the shared config from get_config()
        model: Model id (defaults to config.image_model)
        timeout: Transport timeout in seconds (defaults to config.generation_timeout)
        interactive: Allow the credential source's interactive flow when no key is available

    Returns:
        GeneratedAd holding the image as a PNG data URI

    Raises:
        InvalidInputError: If a field required by the request's mode is missing
        MissingCredentialError: If no key is available
        NoImageGeneratedError: If the service returned no image
        APIError, NetworkError, RequestTimeoutError: On transport or service failure
    """
    validate_request(request)

    config = config or get_config()
    credentials = credentials or EnvCredentialSource(config)
    api_key = resolve_credential(credentials, interactive=interactive)

    composed = compose_prompt(request)
    provider = provider or GeminiProvider()

    start_time = time.time()
    image_data = provider.generate(
        composed,
        model or config.image_model,
        api_key,
        timeout if timeout is not None else config.generation_timeout,
        config,
    )
    logger.info(
        "Generated in %.1fs mode=%s",
        time.time() - start_time,
        GenerationMode(request.mode).value,
    )

    return GeneratedAd(
        image_data=image_data,
        prompt_used=request.user_prompt,
        timestamp=now_millis(),
    )
