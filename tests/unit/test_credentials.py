"""Unit tests for credential sources."""

from unittest.mock import MagicMock

import pytest

from partnerad.core.config import Config
from partnerad.core.credentials import (
    EnvCredentialSource,
    SessionCredentialSource,
    resolve_credential,
)
from partnerad.utils.exceptions import MissingCredentialError


@pytest.mark.unit
class TestEnvCredentialSource:
    def test_available_with_key(self):
        source = EnvCredentialSource(Config(gemini_api_key="AIza-env"))
        assert source.check_available() is True
        assert source.obtain() == "AIza-env"

    def test_missing_key(self):
        source = EnvCredentialSource(Config(gemini_api_key=""))
        assert source.check_available() is False
        with pytest.raises(MissingCredentialError):
            source.obtain()

    def test_request_interactive_is_noop(self):
        source = EnvCredentialSource(Config(gemini_api_key=""))
        source.request_interactive()
        assert source.check_available() is False


@pytest.mark.unit
class TestSessionCredentialSource:
    def test_connected_key(self):
        source = SessionCredentialSource(api_key=" AIza-session ")
        assert source.check_available() is True
        assert source.obtain() == "AIza-session"

    def test_connect_and_disconnect(self):
        source = SessionCredentialSource()
        assert source.check_available() is False
        source.connect("AIza-new")
        assert source.obtain() == "AIza-new"
        source.disconnect()
        assert source.check_available() is False

    def test_connect_ignores_empty(self):
        source = SessionCredentialSource(api_key="AIza-kept")
        source.connect("   ")
        assert source.obtain() == "AIza-kept"

    def test_fallback_used_when_not_connected(self):
        fallback = EnvCredentialSource(Config(gemini_api_key="AIza-env"))
        source = SessionCredentialSource(fallback=fallback)
        assert source.check_available() is True
        assert source.obtain() == "AIza-env"

    def test_connected_key_wins_over_fallback(self):
        fallback = EnvCredentialSource(Config(gemini_api_key="AIza-env"))
        source = SessionCredentialSource(api_key="AIza-session", fallback=fallback)
        assert source.obtain() == "AIza-session"

    def test_obtain_without_key_raises(self):
        with pytest.raises(MissingCredentialError):
            SessionCredentialSource().obtain()

    def test_interactive_prompt_connects(self):
        source = SessionCredentialSource(prompt=lambda: "AIza-typed")
        source.request_interactive()
        assert source.obtain() == "AIza-typed"


@pytest.mark.unit
class TestResolveCredential:
    def test_available_key_returned(self):
        source = SessionCredentialSource(api_key="AIza-ok")
        assert resolve_credential(source) == "AIza-ok"

    def test_missing_without_interactive_raises(self):
        prompt = MagicMock(return_value="AIza-typed")
        source = SessionCredentialSource(prompt=prompt)
        with pytest.raises(MissingCredentialError):
            resolve_credential(source, interactive=False)
        prompt.assert_not_called()

    def test_interactive_flow_success(self):
        prompt = MagicMock(return_value="AIza-typed")
        source = SessionCredentialSource(prompt=prompt)
        assert resolve_credential(source, interactive=True) == "AIza-typed"
        prompt.assert_called_once()

    def test_interactive_flow_closed_without_key_raises(self):
        """A flow that returns without connecting a key is re-checked, not trusted."""
        source = SessionCredentialSource(prompt=lambda: None)
        with pytest.raises(MissingCredentialError):
            resolve_credential(source, interactive=True)

    def test_custom_source_rechecked_after_flow(self):
        source = MagicMock()
        source.check_available.side_effect = [False, False]
        with pytest.raises(MissingCredentialError):
            resolve_credential(source, interactive=True)
        source.request_interactive.assert_called_once()
        source.obtain.assert_not_called()
