"""
Gemini image generation provider.

Handles HTTP communication with the Gemini ``generateContent`` endpoint:
one request carrying the composed text and inline images, with the output
locked to a 9:16 portrait at the 1K size tier.
"""

import json
import time
from typing import Any

import requests

from partnerad.core.composer import ComposedPrompt
from partnerad.core.config import Config
from partnerad.core.reference import create_image_data_url
from partnerad.logging_config import get_logger, log_prompts, prompt_for_log, redact_payload
from partnerad.utils.exceptions import (
    APIError,
    NetworkError,
    NoImageGeneratedError,
    RequestTimeoutError,
)

logger = get_logger(__name__)

# Platform requirements for story ads; not user-configurable
ASPECT_RATIO = "9:16"
IMAGE_SIZE = "1K"

RESULT_MIME_TYPE = "image/png"


def _inline_data(part: dict[str, Any]) -> dict[str, Any] | None:
    """Return the inline data object of a content part (camelCase or snake_case keys)."""
    data = part.get("inlineData") or part.get("inline_data")
    return data if isinstance(data, dict) else None


class GeminiProvider:
    """Image generation provider for the Gemini API."""

    def _build_payload(self, composed: ComposedPrompt) -> dict[str, Any]:
        """Build the generateContent body: text part first, then images in order."""
        parts: list[dict[str, Any]] = [{"text": composed.text}]
        for image in composed.images:
            parts.append({"inlineData": {"mimeType": image.mime_type, "data": image.data}})
        return {
            "contents": [{"role": "user", "parts": parts}],
            "generationConfig": {
                "imageConfig": {"aspectRatio": ASPECT_RATIO, "imageSize": IMAGE_SIZE},
            },
        }

    def _first_candidate_parts(
        self, result: dict[str, Any], response: requests.Response
    ) -> list[dict[str, Any]]:
        """
        Return the dict parts of the first candidate ([] when there is no candidate).

        Raises:
            APIError: If candidates, content or parts have the wrong type, or no part is an object
        """

        def shape_error() -> APIError:
            return APIError(
                "Unexpected API response shape",
                status_code=response.status_code,
                response=response.text,
            )

        candidates = result.get("candidates") or []
        if not isinstance(candidates, list):
            raise shape_error()
        if not candidates:
            return []
        first = candidates[0]
        if not isinstance(first, dict):
            raise shape_error()
        content = first.get("content") or {}
        if not isinstance(content, dict):
            raise shape_error()
        parts = content.get("parts") or []
        if not isinstance(parts, list):
            raise shape_error()
        dict_parts = [p for p in parts if isinstance(p, dict)]
        if parts and not dict_parts:
            raise shape_error()
        return dict_parts

    def _parse_response(self, response: requests.Response) -> str:
        """Return the first inline image of the first candidate as a PNG data URI."""
        try:
            result = response.json()
        except ValueError as e:
            raise APIError(
                f"Failed to parse API response as JSON: {str(e)}",
                status_code=response.status_code,
                response=response.text,
            ) from e
        if not isinstance(result, dict):
            raise APIError("Unexpected API response shape", response=str(result))

        for part in self._first_candidate_parts(result, response):
            inline = _inline_data(part)
            if inline and inline.get("data"):
                return create_image_data_url(inline["data"], RESULT_MIME_TYPE)

        feedback = result.get("promptFeedback")
        block_reason = feedback.get("blockReason") if isinstance(feedback, dict) else None
        message = "No image generated in response."
        if block_reason:
            message = f"No image generated in response (blocked: {block_reason})."
        raise NoImageGeneratedError(message, response=json.dumps(redact_payload(result)))

    def _check_status(self, response: requests.Response, model: str) -> None:
        """Map non-success status codes to APIError."""
        if response.status_code in (401, 403):
            raise APIError(
                "Authentication failed. Please check your Gemini API key.",
                status_code=response.status_code,
                response=response.text,
            )
        if response.status_code == 404:
            raise APIError(
                f"Model not found or endpoint unavailable: {model}",
                status_code=404,
                response=response.text,
            )
        if response.status_code == 429:
            raise APIError(
                "Rate limit exceeded. Please wait before making more requests.",
                status_code=429,
                response=response.text,
            )
        if response.status_code >= 500:
            raise APIError(
                f"Gemini service error: {response.status_code}",
                status_code=response.status_code,
                response=response.text,
            )
        if response.status_code != 200:
            raise APIError(
                f"API request failed with status {response.status_code}: {response.text}",
                status_code=response.status_code,
                response=response.text,
            )

    def _do_request(
        self,
        url: str,
        headers: dict[str, str],
        payload: dict[str, Any],
        timeout: int,
        model: str,
        debug: bool,
    ) -> str:
        """Perform the HTTP POST and parse the response."""
        logger.debug("API request url=%s model=%s timeout=%s", url, model, timeout)
        if debug:
            logger.info(
                "API request payload (image data truncated): %s",
                json.dumps(redact_payload(payload), indent=2, default=str),
            )
        start_time = time.time()
        response = requests.post(url, headers=headers, json=payload, timeout=timeout)
        elapsed = time.time() - start_time
        logger.debug(
            "API response status=%s content_type=%s time=%.2fs",
            response.status_code,
            response.headers.get("content-type", ""),
            elapsed,
        )
        if debug:
            try:
                logger.info(
                    "API response (image data truncated): %s",
                    json.dumps(redact_payload(response.json()), indent=2, default=str),
                )
            except ValueError:
                text = response.text
                if len(text) > 2000:
                    text = text[:2000] + f"... <truncated, {len(response.text)} chars total>"
                logger.info("API response (raw text): %s", text)

        self._check_status(response, model)
        return self._parse_response(response)

    def generate(
        self,
        composed: ComposedPrompt,
        model: str,
        api_key: str,
        timeout: int,
        config: Config,
    ) -> str:
        """Generate one ad image via the Gemini API."""
        url = f"{config.api_base_url}/models/{model}:generateContent"
        headers = {
            "x-goog-api-key": api_key,
            "Content-Type": "application/json",
        }
        payload = self._build_payload(composed)

        logger.info("Generating image model=%s images=%d", model, len(composed.images))
        if log_prompts():
            logger.info("Prompt (used): %s", prompt_for_log(composed.text))

        try:
            return self._do_request(url, headers, payload, timeout, model, config.debug_api)
        except requests.exceptions.Timeout as e:
            raise RequestTimeoutError(
                f"Request timed out after {timeout} seconds. "
                "The generation may be taking longer than expected."
            ) from e
        except requests.exceptions.ConnectionError as e:
            raise NetworkError(
                "Failed to connect to the Gemini API. Please check your internet connection.",
                original_error=e,
            ) from e
        except requests.exceptions.RequestException as e:
            raise NetworkError(
                f"Network error during API request: {str(e)}", original_error=e
            ) from e
