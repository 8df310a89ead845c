"""
Admin settings transitions.

Every function takes an AdSettings and returns a new one. At most
MAX_SAVED_PROMPTS prompts are kept; active_prompt_id always points at a saved
prompt or is None, and is cleared when that prompt is edited or deleted.
"""

import uuid
from dataclasses import replace

from partnerad.core.models import MAX_SAVED_PROMPTS, AdSettings, SavedPrompt
from partnerad.core.prompts_loader import get_default_base_prompt
from partnerad.logging_config import get_logger
from partnerad.utils.exceptions import InvalidInputError

logger = get_logger(__name__)


def default_settings(base_prompt: str | None = None) -> AdSettings:
    """Settings with the bundled base prompt (or base_prompt when given) and no saved prompts."""
    return AdSettings(base_prompt=base_prompt or get_default_base_prompt())


def _require_text(value: str, field: str, label: str) -> str:
    text = (value or "").strip()
    if not text:
        raise InvalidInputError(f"{label} cannot be empty.", field=field)
    return text


def update_base_prompt(settings: AdSettings, base_prompt: str) -> AdSettings:
    """
    Replace the base prompt.

    The active saved prompt stays active only while the base prompt still
    equals its text.
    """
    text = _require_text(base_prompt, "base_prompt", "Base prompt")
    active = settings.active_prompt
    active_id = active.id if active is not None and active.prompt == text else None
    return replace(settings, base_prompt=text, active_prompt_id=active_id)


def reset_base_prompt(settings: AdSettings) -> AdSettings:
    """Restore the bundled default base prompt."""
    return replace(settings, base_prompt=get_default_base_prompt(), active_prompt_id=None)


def add_saved_prompt(settings: AdSettings, name: str, prompt: str) -> AdSettings:
    """
    Append a saved prompt with a fresh id.

    Once MAX_SAVED_PROMPTS are saved this is a no-op and returns settings unchanged.
    """
    if not settings.can_add_prompt:
        logger.debug("Saved prompt limit (%d) reached; not adding", MAX_SAVED_PROMPTS)
        return settings
    saved = SavedPrompt(
        id=uuid.uuid4().hex,
        name=_require_text(name, "name", "Prompt name"),
        prompt=_require_text(prompt, "prompt", "Prompt text"),
    )
    return replace(settings, saved_prompts=(*settings.saved_prompts, saved))


def update_saved_prompt(
    settings: AdSettings, prompt_id: str, name: str, prompt: str
) -> AdSettings:
    """
    Edit a saved prompt in place (same id and position).

    Raises:
        InvalidInputError: If prompt_id is unknown or name/prompt is empty
    """
    if settings.find(prompt_id) is None:
        raise InvalidInputError(f"Unknown saved prompt: {prompt_id}", field="prompt_id")
    edited = SavedPrompt(
        id=prompt_id,
        name=_require_text(name, "name", "Prompt name"),
        prompt=_require_text(prompt, "prompt", "Prompt text"),
    )
    saved_prompts = tuple(edited if p.id == prompt_id else p for p in settings.saved_prompts)
    active_id = None if settings.active_prompt_id == prompt_id else settings.active_prompt_id
    return replace(settings, saved_prompts=saved_prompts, active_prompt_id=active_id)


def delete_saved_prompt(settings: AdSettings, prompt_id: str) -> AdSettings:
    """Remove a saved prompt. Unknown ids leave settings unchanged."""
    saved_prompts = tuple(p for p in settings.saved_prompts if p.id != prompt_id)
    if len(saved_prompts) == len(settings.saved_prompts):
        return settings
    active_id = None if settings.active_prompt_id == prompt_id else settings.active_prompt_id
    return replace(settings, saved_prompts=saved_prompts, active_prompt_id=active_id)


def activate_saved_prompt(settings: AdSettings, prompt_id: str) -> AdSettings:
    """
    Use a saved prompt as the base prompt and mark it active.

    Raises:
        InvalidInputError: If prompt_id is unknown
    """
    saved = settings.find(prompt_id)
    if saved is None:
        raise InvalidInputError(f"Unknown saved prompt: {prompt_id}", field="prompt_id")
    return replace(settings, base_prompt=saved.prompt, active_prompt_id=saved.id)
