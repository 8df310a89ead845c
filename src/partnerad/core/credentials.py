"""
Credential sources for the image service.

The generation client only needs two things from a credential source: whether
a key is available now, and the key itself. Sources may also offer an
interactive flow (a UI field, a terminal prompt) to connect a key.
"""

from collections.abc import Callable
from typing import Protocol

from partnerad.core.config import Config, get_config
from partnerad.logging_config import get_logger
from partnerad.utils.exceptions import MissingCredentialError

logger = get_logger(__name__)


class CredentialSource(Protocol):
    """Capability interface for obtaining an API key."""

    def check_available(self) -> bool:
        """Return True if a key can be obtained right now."""
        ...

    def request_interactive(self) -> None:
        """Ask the user to connect a key. May do nothing if the source has no such flow."""
        ...

    def obtain(self) -> str:
        """Return the key. Raises MissingCredentialError if none is available."""
        ...


class EnvCredentialSource:
    """Key from configuration (GEMINI_API_KEY / .env). No interactive flow."""

    def __init__(self, config: Config | None = None) -> None:
        self._config = config

    @property
    def config(self) -> Config:
        return self._config or get_config()

    def check_available(self) -> bool:
        return bool(self.config.gemini_api_key)

    def request_interactive(self) -> None:
        logger.debug("Environment credential source has no interactive flow")

    def obtain(self) -> str:
        key = self.config.gemini_api_key
        if not key:
            raise MissingCredentialError(
                "No Gemini API key configured. Set GEMINI_API_KEY or connect a key."
            )
        return key


class SessionCredentialSource:
    """
    Key connected at runtime and held in memory for the session.

    Falls back to a key from configuration when one is set there. The
    optional prompt callable implements the interactive flow (e.g. a hidden
    terminal prompt); it returns the entered key, or None/"" when the user
    gives up.
    """

    def __init__(
        self,
        api_key: str | None = None,
        prompt: Callable[[], str | None] | None = None,
        fallback: CredentialSource | None = None,
    ) -> None:
        self._api_key = (api_key or "").strip()
        self._prompt = prompt
        self._fallback = fallback

    def connect(self, api_key: str) -> None:
        """Store a key for the rest of the session. Empty keys are ignored."""
        key = (api_key or "").strip()
        if key:
            self._api_key = key
            logger.info("API key connected for this session")

    def disconnect(self) -> None:
        self._api_key = ""

    def check_available(self) -> bool:
        if self._api_key:
            return True
        return self._fallback is not None and self._fallback.check_available()

    def request_interactive(self) -> None:
        if self._prompt is None:
            return
        entered = self._prompt()
        if entered:
            self.connect(entered)

    def obtain(self) -> str:
        if self._api_key:
            return self._api_key
        if self._fallback is not None:
            return self._fallback.obtain()
        raise MissingCredentialError("No API key connected. Connect a Gemini API key to continue.")


def resolve_credential(source: CredentialSource, interactive: bool = False) -> str:
    """
    Return a key from source, running its interactive flow once if allowed.

    Availability is checked again after the interactive flow instead of
    assuming it succeeded; a flow that closes without connecting a key ends
    in MissingCredentialError.

    Raises:
        MissingCredentialError: If no key is available
    """
    if not source.check_available():
        if not interactive:
            raise MissingCredentialError(
                "No Gemini API key available. Set GEMINI_API_KEY or connect a key."
            )
        logger.info("No API key available; requesting one interactively")
        source.request_interactive()
        if not source.check_available():
            raise MissingCredentialError("No API key was connected.")
    return source.obtain()
