"""
Image generation providers: protocol and the Gemini implementation.
"""

from partnerad.core.providers.base import ImageGenerationProvider as ImageGenerationProvider
from partnerad.core.providers.gemini import ASPECT_RATIO, IMAGE_SIZE, GeminiProvider

__all__ = [
    "ASPECT_RATIO",
    "IMAGE_SIZE",
    "GeminiProvider",
    "ImageGenerationProvider",
]
