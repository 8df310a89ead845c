"""
Explicit session state for the ad builder.

SessionState is an immutable snapshot of everything the form holds: inputs,
uploaded images, admin settings, the busy flag, the last result and the
current error. Transitions are plain functions returning a new snapshot.
While a generation is in flight the form is locked: input and settings
transitions return the busy snapshot unchanged, so the completion snapshot
never discards an edit.

run_generation() drives one submission and yields the snapshots the UI should
show: a busy snapshot while the request is in flight, then the final one.
Only one generation runs at a time; submitting while busy changes nothing.
"""

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any

from partnerad.core.composer import validate_request
from partnerad.core.config import Config, get_config
from partnerad.core.image_gen import generate_ad
from partnerad.core.models import AdSettings, GeneratedAd, GenerationMode, GenerationRequest
from partnerad.core.prompts_loader import get_business_types
from partnerad.core.settings import default_settings
from partnerad.logging_config import get_logger
from partnerad.utils.exceptions import (
    InvalidInputError,
    MissingCredentialError,
    NoImageGeneratedError,
    PartnerAdError,
)

logger = get_logger(__name__)

GENERIC_FAILURE_MESSAGE = "Failed to generate ad. Please try again."
MISSING_CREDENTIAL_MESSAGE = "No API key connected. Connect your Gemini API key to create ads."


class ImageSlot(str, Enum):
    """The three independent image inputs of the form."""

    PRODUCT = "product"
    LOGO = "logo"
    REFERENCE_SCENE = "reference_scene"


_SLOT_FIELDS = {
    ImageSlot.PRODUCT: "product_image",
    ImageSlot.LOGO: "logo_image",
    ImageSlot.REFERENCE_SCENE: "reference_scene_image",
}


@dataclass(frozen=True)
class SessionState:
    """One snapshot of the ad builder. Images are data URIs."""

    settings: AdSettings = field(default_factory=default_settings)
    mode: GenerationMode = GenerationMode.TEXT
    location_type: str = ""
    user_prompt: str = ""
    product_image: str | None = None
    logo_image: str | None = None
    reference_scene_image: str | None = None
    is_generating: bool = False
    result: GeneratedAd | None = None
    error: str | None = None

    def image(self, slot: ImageSlot) -> str | None:
        return getattr(self, _SLOT_FIELDS[ImageSlot(slot)])


def new_session(config: Config | None = None) -> SessionState:
    """Initial state: text mode, first business type, configured or bundled base prompt."""
    config = config or get_config()
    return SessionState(
        settings=default_settings(config.base_prompt or None),
        location_type=get_business_types()[0],
    )


def set_mode(state: SessionState, mode: GenerationMode | str) -> SessionState:
    if state.is_generating:
        return state
    return replace(state, mode=GenerationMode(mode))


def set_location_type(state: SessionState, location_type: str) -> SessionState:
    if state.is_generating:
        return state
    return replace(state, location_type=location_type)


def set_user_prompt(state: SessionState, user_prompt: str) -> SessionState:
    if state.is_generating:
        return state
    return replace(state, user_prompt=user_prompt)


def set_image(state: SessionState, slot: ImageSlot | str, value: str | None) -> SessionState:
    """Store (or with None, remove) the data URI for one image slot. No-op while busy."""
    if state.is_generating:
        return state
    return replace(state, **{_SLOT_FIELDS[ImageSlot(slot)]: value or None})


def clear_image(state: SessionState, slot: ImageSlot | str) -> SessionState:
    return set_image(state, slot, None)


def set_settings(state: SessionState, settings: AdSettings) -> SessionState:
    if state.is_generating:
        return state
    return replace(state, settings=settings)


def dismiss_error(state: SessionState) -> SessionState:
    return replace(state, error=None)


def build_request(state: SessionState) -> GenerationRequest:
    """Build a fresh GenerationRequest; the business type only applies in text mode."""
    return GenerationRequest(
        mode=state.mode,
        user_prompt=state.user_prompt.strip(),
        base_prompt=state.settings.base_prompt,
        location_type=state.location_type if state.mode == GenerationMode.TEXT else None,
        product_image=state.product_image,
        logo_image=state.logo_image,
        reference_scene_image=state.reference_scene_image,
    )


def begin_generation(state: SessionState) -> SessionState:
    """Mark a generation in flight. The previous result stays visible."""
    return replace(state, is_generating=True, error=None)


def complete_generation(state: SessionState, ad: GeneratedAd) -> SessionState:
    return replace(state, is_generating=False, result=ad, error=None)


def fail_generation(state: SessionState, message: str) -> SessionState:
    """Clear the busy flag and show message; the previous result is kept."""
    return replace(state, is_generating=False, error=message)


def describe_error(exc: BaseException) -> str:
    """Map an exception to the short message shown inline in the form."""
    if isinstance(exc, InvalidInputError):
        return exc.args[0] if exc.args else "Please check your input."
    if isinstance(exc, MissingCredentialError):
        return MISSING_CREDENTIAL_MESSAGE
    if isinstance(exc, NoImageGeneratedError):
        return GENERIC_FAILURE_MESSAGE
    if isinstance(exc, PartnerAdError):
        # Configuration, image and transport errors carry a user-readable message
        return exc.args[0] if exc.args else GENERIC_FAILURE_MESSAGE
    return str(exc) if exc.args else GENERIC_FAILURE_MESSAGE


def run_generation(
    state: SessionState,
    generate: Callable[..., GeneratedAd] = generate_ad,
    **generate_kwargs: Any,
) -> Iterator[SessionState]:
    """
    Run one submission from state and yield the snapshots to display.

    Yields the unchanged state when a generation is already in flight; an
    error snapshot without a network call when a required input is missing;
    otherwise a busy snapshot followed by a success or error snapshot.

    Args:
        state: Current session snapshot
        generate: Generation callable (defaults to generate_ad)
        **generate_kwargs: Passed to generate (credentials, config, provider, ...)
    """
    if state.is_generating:
        logger.debug("Generation already in flight; ignoring submit")
        yield state
        return

    request = build_request(state)
    try:
        validate_request(request)
    except InvalidInputError as e:
        logger.debug("Rejected submission field=%s", e.field)
        yield fail_generation(state, describe_error(e))
        return

    logger.info(
        "Generate requested mode=%s images=%d",
        GenerationMode(request.mode).value,
        request.image_count,
    )
    busy = begin_generation(state)
    yield busy

    try:
        ad = generate(request, **generate_kwargs)
    except PartnerAdError as e:
        logger.warning("Generation failed: %s", e)
        yield fail_generation(busy, describe_error(e))
        return

    yield complete_generation(busy, ad)
