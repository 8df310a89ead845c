"""
Load prompt texts from the bundled prompts.yaml file.

Prompts are defined in src/partnerad/prompts.yaml and loaded once per process.
"""

import importlib.resources
from typing import Any

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from partnerad.utils.exceptions import ConfigurationError

# Module-level cache for parsed prompts
_prompts_data: dict[str, Any] | None = None


class Annotations(BaseModel):
    """Sentences placed in the prompt right before each optional reference image."""

    logo: str = Field(..., min_length=1)
    reference_scene: str = Field(..., min_length=1)


class PromptsSchema(BaseModel):
    """Schema for prompts.yaml."""

    model_config = {"extra": "allow"}

    base_prompt: str = Field(..., min_length=1, description="Default hidden context")
    business_types: list[str] = Field(..., min_length=1)
    business_type_directive: str
    partner_details: str
    annotations: Annotations

    @field_validator("business_type_directive")
    @classmethod
    def _directive_has_placeholder(cls, v: str) -> str:
        if "{location_type}" not in v:
            raise ValueError("must contain {location_type} placeholder")
        return v

    @field_validator("partner_details")
    @classmethod
    def _details_has_placeholder(cls, v: str) -> str:
        if "{user_prompt}" not in v:
            raise ValueError("must contain {user_prompt} placeholder")
        return v


def _load_prompts() -> dict[str, Any]:
    """Load and validate prompts.yaml from the package. Cached after first call.

    Raises:
        ConfigurationError: If YAML is missing, malformed, or fails validation.
    """
    global _prompts_data
    if _prompts_data is not None:
        return _prompts_data

    try:
        with (
            importlib.resources.files("partnerad")
            .joinpath("prompts.yaml")
            .open(encoding="utf-8") as f
        ):
            raw = f.read()
    except FileNotFoundError as e:
        raise ConfigurationError(
            "prompts.yaml not found. This file is required and should be bundled with the package."
        ) from e

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ConfigurationError(
            f"Failed to parse prompts.yaml: {e}. Check YAML syntax and formatting."
        ) from e

    if data is None:
        raise ConfigurationError("prompts.yaml is empty.")

    try:
        PromptsSchema(**data)
    except ValidationError as e:
        errors = "\n".join(
            f"  - {'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors()
        )
        raise ConfigurationError(f"Invalid prompts.yaml structure:\n{errors}") from e

    _prompts_data = data
    return _prompts_data


def get_prompt(key: str, subkey: str | None = None) -> str | None:
    """
    Get a prompt string from prompts.yaml.

    Args:
        key: Top-level key (e.g. "annotations").
        subkey: Optional subkey (e.g. "logo") for nested value.

    Returns:
        The prompt string, or None if not found.
    """
    data = _load_prompts()
    value = data.get(key)
    if value is None:
        return None
    if subkey is not None:
        value = value.get(subkey) if isinstance(value, dict) else None
    return value if isinstance(value, str) else None


def get_default_base_prompt() -> str:
    """Return the default base prompt (hidden context prepended to every request)."""
    return _load_prompts()["base_prompt"].strip()


def get_business_types() -> list[str]:
    """Return the business types offered in the form, default first."""
    return list(_load_prompts()["business_types"])


def get_business_type_directive(location_type: str) -> str:
    """Return the business type directive formatted for location_type."""
    return _load_prompts()["business_type_directive"].strip().format(location_type=location_type)


def get_partner_details_line(user_prompt: str) -> str:
    """Return the line carrying the partner's free-text input."""
    return _load_prompts()["partner_details"].strip().format(user_prompt=user_prompt)


def get_annotation(kind: str) -> str:
    """
    Return the annotation placed before an optional reference image.

    Args:
        kind: "logo" or "reference_scene".

    Raises:
        ConfigurationError: If the annotation is not defined.
    """
    text = get_prompt("annotations", kind)
    if not text:
        raise ConfigurationError(f"annotations.{kind} not found in prompts.yaml.")
    return text.strip()
