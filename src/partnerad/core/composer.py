"""
Prompt composition for partner ads.

Builds the single prompt string and the ordered inline images sent with it.
Annotations are positional: each one tells the model that "the following
image" is a logo or a store photo, so text and images are built together from
one ordered list of (annotation, image) pairs.
"""

from dataclasses import dataclass

from partnerad.core.models import GenerationMode, GenerationRequest
from partnerad.core.prompts_loader import (
    get_annotation,
    get_business_type_directive,
    get_partner_details_line,
)
from partnerad.core.reference import mime_type_from_data_url, strip_data_url_prefix
from partnerad.logging_config import get_logger
from partnerad.utils.exceptions import InvalidInputError

logger = get_logger(__name__)

BLOCK_SEPARATOR = "\n\n"


@dataclass(frozen=True)
class InlineImage:
    """One image content part: MIME type and raw base64 payload (no data URI prefix)."""

    mime_type: str
    data: str

    @classmethod
    def from_value(cls, value: str) -> "InlineImage":
        """Build from base64 with or without a data URI prefix."""
        return cls(mime_type=mime_type_from_data_url(value), data=strip_data_url_prefix(value))


@dataclass(frozen=True)
class ComposedPrompt:
    """Final prompt text and the images to send after it, in order."""

    text: str
    images: tuple[InlineImage, ...] = ()


def validate_request(request: GenerationRequest) -> None:
    """
    Check that the fields required by the request's mode are present.

    Raises:
        InvalidInputError: With field set to the missing input
    """
    if request.mode == GenerationMode.TEXT:
        if not request.user_prompt or not request.user_prompt.strip():
            raise InvalidInputError("Please describe your ad.", field="user_prompt")
        if not request.location_type or not request.location_type.strip():
            raise InvalidInputError("Please choose a business type.", field="location_type")
    elif request.mode == GenerationMode.PRODUCT:
        if not request.product_image:
            raise InvalidInputError("Please upload a product image.", field="product_image")
    else:
        raise InvalidInputError(f"Unknown generation mode: {request.mode!r}", field="mode")


def _attachments(request: GenerationRequest) -> list[tuple[str | None, str]]:
    """Ordered (annotation, image) pairs; the product photo carries no annotation."""
    pairs: list[tuple[str | None, str]] = []
    if request.mode == GenerationMode.PRODUCT and request.product_image:
        pairs.append((None, request.product_image))
    if request.logo_image:
        pairs.append((get_annotation("logo"), request.logo_image))
    if request.reference_scene_image:
        pairs.append((get_annotation("reference_scene"), request.reference_scene_image))
    return pairs


def compose_prompt(request: GenerationRequest) -> ComposedPrompt:
    """
    Compose the prompt text and inline images for a request.

    Order: base prompt, business type directive (text mode only), partner
    details, then one annotation per optional reference image. Images follow
    the same order: product photo, logo, store photo.
    """
    blocks = [request.base_prompt]
    if request.mode == GenerationMode.TEXT and request.location_type:
        blocks.append(get_business_type_directive(request.location_type))
    blocks.append(get_partner_details_line(request.user_prompt))

    images: list[InlineImage] = []
    for annotation, value in _attachments(request):
        if annotation is not None:
            blocks.append(annotation)
        images.append(InlineImage.from_value(value))

    composed = ComposedPrompt(text=BLOCK_SEPARATOR.join(blocks), images=tuple(images))
    logger.debug(
        "Composed prompt mode=%s chars=%d images=%d",
        GenerationMode(request.mode).value,
        len(composed.text),
        len(composed.images),
    )
    return composed
