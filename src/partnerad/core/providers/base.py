"""
Provider protocol for image generation.

Defines the interface an image service backend implements.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from partnerad.core.config import Config

if TYPE_CHECKING:
    from partnerad.core.composer import ComposedPrompt


class ImageGenerationProvider(Protocol):
    """Protocol for image generation providers.

    A provider sends one composed request to its backend and returns the
    first generated image as a data URI.
    """

    def generate(
        self,
        composed: ComposedPrompt,
        model: str,
        api_key: str,
        timeout: int,
        config: Config,
    ) -> str:
        """Send one request and return ``data:image/png;base64,...``.

        May raise NoImageGeneratedError, APIError, NetworkError or
        RequestTimeoutError. Never retries.
        """
        ...
