"""
Logging configuration for partnerad.

Logging is configured lazily: library users who never call set_verbosity or
configure_logging get no output unless they configure logging themselves.

Verbosity levels:
- 0 (default): INFO; submissions, timing, failures
- 1: INFO + composed prompt text
- 2: DEBUG + prompt text; request/response summaries and state transitions

PARTNERAD_VERBOSITY (0/1/2) is read when the CLI or UI starts; CLI flags override it.
Request and response payloads pass through redact_payload() before logging so
base64 image data and credentials never reach the log.
"""

import logging
import os
from typing import Any

LOG_FORMAT = "%(levelname)s [%(name)s] %(message)s"
ROOT_LOGGER_NAME = "partnerad"

# Prompts longer than this are cut when logged
PROMPT_LOG_MAX = 50_000

_REDACT_THRESHOLD = 200
_NEVER_REDACT_KEYS = frozenset({"text", "message"})
_SECRET_KEYS = frozenset({"key", "api_key", "x-goog-api-key"})

_log_prompts: bool = False
_configured: bool = False


def _ensure_handler() -> None:
    global _configured
    if _configured:
        return
    root = logging.getLogger(ROOT_LOGGER_NAME)
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)
    _configured = True


def set_verbosity(level: int) -> None:
    """Set logging verbosity: 0 (INFO), 1 (INFO + prompts), 2 (DEBUG + prompts)."""
    global _log_prompts
    _ensure_handler()
    root = logging.getLogger(ROOT_LOGGER_NAME)
    if level <= 0:
        root.setLevel(logging.INFO)
        _log_prompts = False
    elif level == 1:
        root.setLevel(logging.INFO)
        _log_prompts = True
    else:
        root.setLevel(logging.DEBUG)
        _log_prompts = True


def log_prompts() -> bool:
    """Return True if composed prompt text should be logged."""
    return _log_prompts


def configure_logging(verbose_level: int = 0, quiet: bool = False) -> None:
    """
    Configure logging from the CLI or UI entry points.

    quiet=True sets WARNING and disables prompt logging; otherwise delegates
    to set_verbosity(verbose_level).
    """
    global _log_prompts
    _ensure_handler()
    if quiet:
        logging.getLogger(ROOT_LOGGER_NAME).setLevel(logging.WARNING)
        _log_prompts = False
        return
    set_verbosity(verbose_level)


def get_verbosity_from_env() -> int:
    """Read PARTNERAD_VERBOSITY (0, 1 or 2); anything else is 0."""
    raw = os.environ.get("PARTNERAD_VERBOSITY", "0").strip()
    if raw in ("1", "2"):
        return int(raw)
    return 0


def get_logger(name: str) -> logging.Logger:
    """Return a child logger under partnerad (e.g. partnerad.core.image_gen)."""
    if name.startswith(ROOT_LOGGER_NAME + ".") or name == ROOT_LOGGER_NAME:
        return logging.getLogger(name)
    return logging.getLogger(ROOT_LOGGER_NAME + "." + name)


def prompt_for_log(prompt: str) -> str:
    """Return prompt text cut to PROMPT_LOG_MAX characters."""
    if len(prompt) <= PROMPT_LOG_MAX:
        return prompt
    return prompt[:PROMPT_LOG_MAX] + "..."


def redact_payload(obj: Any, parent_key: str | None = None) -> Any:
    """
    Recursively replace long base64 strings and secrets with placeholders.

    Text parts are kept whole; any value under a key that looks like a
    credential is replaced regardless of length.
    """
    if isinstance(obj, dict):
        return {k: redact_payload(v, k) for k, v in obj.items()}
    if isinstance(obj, list):
        return [redact_payload(v) for v in obj]
    if isinstance(obj, str):
        if parent_key is not None and parent_key.lower() in _SECRET_KEYS:
            return "<redacted>"
        if len(obj) >= _REDACT_THRESHOLD and parent_key not in _NEVER_REDACT_KEYS:
            if obj.startswith("data:"):
                return f"<data URL, {len(obj)} chars>"
            return f"<string, {len(obj)} chars>"
    return obj


__all__ = [
    "PROMPT_LOG_MAX",
    "configure_logging",
    "get_logger",
    "get_verbosity_from_env",
    "log_prompts",
    "prompt_for_log",
    "redact_payload",
    "set_verbosity",
]
