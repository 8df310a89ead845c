"""
Data model for partner ad generation.

All types are frozen dataclasses: a request is built fresh per submission,
settings and results are replaced rather than mutated.
"""

import base64
import binascii
import time
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from partnerad.utils.exceptions import ImageProcessingError

MAX_SAVED_PROMPTS = 5

DOWNLOAD_FILENAME_PREFIX = "partner-ad-"


class GenerationMode(str, Enum):
    """What the partner starts from: a free-text idea or a product photo."""

    TEXT = "text"
    PRODUCT = "product"


@dataclass(frozen=True)
class GenerationRequest:
    """One submission. Image fields hold base64 with or without a data URI prefix."""

    mode: GenerationMode
    user_prompt: str
    base_prompt: str
    location_type: str | None = None
    product_image: str | None = None
    logo_image: str | None = None
    reference_scene_image: str | None = None

    @property
    def image_count(self) -> int:
        """Number of images that will be embedded for this request."""
        count = 0
        if self.mode == GenerationMode.PRODUCT and self.product_image:
            count += 1
        if self.logo_image:
            count += 1
        if self.reference_scene_image:
            count += 1
        return count


def now_millis() -> int:
    """Current time in milliseconds since the epoch."""
    return int(time.time() * 1000)


@dataclass(frozen=True)
class GeneratedAd:
    """A generated image held in UI state until the next generation replaces it."""

    image_data: str  # data URI, data:image/png;base64,...
    prompt_used: str
    timestamp: int = field(default_factory=now_millis)

    @property
    def image_bytes(self) -> bytes:
        """Decoded PNG bytes of the image."""
        _, sep, payload = self.image_data.partition(",")
        if not sep:
            payload = self.image_data
        try:
            return base64.b64decode(payload, validate=True)
        except (binascii.Error, ValueError) as e:
            raise ImageProcessingError(f"Generated image is not valid base64: {e}") from e

    @property
    def filename(self) -> str:
        """Download file name, e.g. partner-ad-1718000000000.png."""
        return f"{DOWNLOAD_FILENAME_PREFIX}{self.timestamp}.png"

    def save(self, directory: str | Path, filename: str | None = None) -> Path:
        """Write the PNG into directory and return its path."""
        path = Path(directory) / (filename or self.filename)
        path.write_bytes(self.image_bytes)
        return path


@dataclass(frozen=True)
class SavedPrompt:
    """A named base prompt an admin can switch to."""

    id: str
    name: str
    prompt: str


@dataclass(frozen=True)
class AdSettings:
    """Session-level admin settings. See partnerad.core.settings for transitions."""

    base_prompt: str
    saved_prompts: tuple[SavedPrompt, ...] = ()
    active_prompt_id: str | None = None

    def find(self, prompt_id: str) -> SavedPrompt | None:
        """Return the saved prompt with prompt_id, or None."""
        for saved in self.saved_prompts:
            if saved.id == prompt_id:
                return saved
        return None

    @property
    def active_prompt(self) -> SavedPrompt | None:
        if self.active_prompt_id is None:
            return None
        return self.find(self.active_prompt_id)

    @property
    def can_add_prompt(self) -> bool:
        return len(self.saved_prompts) < MAX_SAVED_PROMPTS
