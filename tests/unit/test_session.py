"""Unit tests for session state and the generation lifecycle."""

from dataclasses import replace
from unittest.mock import MagicMock, patch

import pytest

from partnerad.core.config import Config
from partnerad.core.models import GeneratedAd, GenerationMode
from partnerad.core.session import (
    GENERIC_FAILURE_MESSAGE,
    MISSING_CREDENTIAL_MESSAGE,
    ImageSlot,
    SessionState,
    begin_generation,
    build_request,
    clear_image,
    complete_generation,
    describe_error,
    dismiss_error,
    fail_generation,
    new_session,
    run_generation,
    set_image,
    set_location_type,
    set_mode,
    set_settings,
    set_user_prompt,
)
from partnerad.core.settings import add_saved_prompt, default_settings
from partnerad.utils.exceptions import (
    APIError,
    InvalidInputError,
    MissingCredentialError,
    NoImageGeneratedError,
)

AD = GeneratedAd(image_data="data:image/png;base64,AAAA", prompt_used="p", timestamp=1)


def _ready_state(**kwargs) -> SessionState:
    state = SessionState(
        settings=default_settings("Base."),
        location_type="Spätkauf / Kiosk",
        user_prompt="Cold drinks",
    )
    return replace(state, **kwargs)


@pytest.mark.unit
class TestTransitions:
    def test_new_session_defaults(self):
        state = new_session(Config(gemini_api_key=""))
        assert state.mode == GenerationMode.TEXT
        assert state.location_type == "Spätkauf / Kiosk"
        assert state.is_generating is False
        assert state.result is None
        assert state.error is None

    def test_new_session_uses_configured_base_prompt(self):
        state = new_session(Config(base_prompt="From env"))
        assert state.settings.base_prompt == "From env"

    def test_setters_return_new_state(self):
        state = SessionState()
        updated = set_user_prompt(set_location_type(state, "Schlüsseldienst"), "Open 24/7")
        assert updated.location_type == "Schlüsseldienst"
        assert updated.user_prompt == "Open 24/7"
        assert state.user_prompt == ""

    def test_set_mode_accepts_string(self):
        assert set_mode(SessionState(), "product").mode == GenerationMode.PRODUCT

    def test_image_slots_independent(self):
        state = set_image(SessionState(), ImageSlot.LOGO, "data:image/png;base64,LOGO")
        state = set_image(state, "reference_scene", "data:image/png;base64,SCENE")
        assert state.image(ImageSlot.LOGO) == "data:image/png;base64,LOGO"
        assert state.reference_scene_image == "data:image/png;base64,SCENE"
        assert state.product_image is None
        state = clear_image(state, ImageSlot.LOGO)
        assert state.logo_image is None
        assert state.reference_scene_image == "data:image/png;base64,SCENE"

    def test_build_request_text_mode(self):
        state = set_user_prompt(_ready_state(), "  Cold drinks  ")
        request = build_request(state)
        assert request.user_prompt == "Cold drinks"
        assert request.base_prompt == "Base."
        assert request.location_type == "Spätkauf / Kiosk"

    def test_build_request_product_mode_drops_location(self):
        state = set_mode(_ready_state(), GenerationMode.PRODUCT)
        assert build_request(state).location_type is None

    def test_lifecycle_keeps_previous_result(self):
        state = complete_generation(begin_generation(SessionState()), AD)
        assert state.result == AD
        busy = begin_generation(state)
        assert busy.is_generating is True
        assert busy.result == AD
        failed = fail_generation(busy, "boom")
        assert failed.is_generating is False
        assert failed.error == "boom"
        assert failed.result == AD

    def test_begin_clears_error(self):
        state = fail_generation(SessionState(), "boom")
        assert begin_generation(state).error is None

    def test_dismiss_error(self):
        assert dismiss_error(fail_generation(SessionState(), "boom")).error is None


@pytest.mark.unit
class TestDescribeError:
    def test_invalid_input_message(self):
        assert describe_error(InvalidInputError("Please describe your ad.")) == (
            "Please describe your ad."
        )

    def test_missing_credential(self):
        assert describe_error(MissingCredentialError("x")) == MISSING_CREDENTIAL_MESSAGE

    def test_no_image_is_generic(self):
        assert describe_error(NoImageGeneratedError("No image")) == GENERIC_FAILURE_MESSAGE

    def test_api_error_message(self):
        assert describe_error(APIError("Rate limit exceeded.")) == "Rate limit exceeded."

    def test_unknown_without_args(self):
        assert describe_error(RuntimeError()) == GENERIC_FAILURE_MESSAGE


@pytest.mark.unit
class TestRunGeneration:
    def test_success_yields_busy_then_result(self):
        generate = MagicMock(return_value=AD)
        snapshots = list(run_generation(_ready_state(), generate=generate))
        assert [s.is_generating for s in snapshots] == [True, False]
        assert snapshots[-1].result == AD
        assert snapshots[-1].error is None
        request = generate.call_args.args[0]
        assert request.user_prompt == "Cold drinks"

    def test_kwargs_forwarded(self):
        generate = MagicMock(return_value=AD)
        source = object()
        list(run_generation(_ready_state(), generate=generate, credentials=source))
        assert generate.call_args.kwargs == {"credentials": source}

    def test_missing_prompt_fails_without_call(self):
        generate = MagicMock()
        snapshots = list(run_generation(_ready_state(user_prompt="  "), generate=generate))
        assert len(snapshots) == 1
        assert snapshots[0].error == "Please describe your ad."
        assert snapshots[0].is_generating is False
        generate.assert_not_called()

    def test_product_mode_without_image_fails_without_call(self):
        generate = MagicMock()
        state = set_mode(_ready_state(), GenerationMode.PRODUCT)
        snapshots = list(run_generation(state, generate=generate))
        assert snapshots[-1].error == "Please upload a product image."
        generate.assert_not_called()

    def test_busy_state_ignores_submit(self):
        generate = MagicMock()
        busy = begin_generation(_ready_state())
        assert list(run_generation(busy, generate=generate)) == [busy]
        generate.assert_not_called()

    def test_failure_keeps_previous_result(self):
        generate = MagicMock(side_effect=NoImageGeneratedError("No image generated in response."))
        state = _ready_state(result=AD)
        final = list(run_generation(state, generate=generate))[-1]
        assert final.error == GENERIC_FAILURE_MESSAGE
        assert final.result == AD
        assert final.is_generating is False

    def test_missing_credential_message(self):
        generate = MagicMock(side_effect=MissingCredentialError("none"))
        final = list(run_generation(_ready_state(), generate=generate))[-1]
        assert final.error == MISSING_CREDENTIAL_MESSAGE

    def test_new_success_replaces_result(self):
        newer = GeneratedAd(image_data="data:image/png;base64,BBBB", prompt_used="p", timestamp=2)
        generate = MagicMock(return_value=newer)
        final = list(run_generation(_ready_state(result=AD), generate=generate))[-1]
        assert final.result == newer

    @patch("partnerad.core.providers.gemini.requests.post")
    def test_default_generate_with_missing_key(self, mock_post):
        """The default generate path reports a missing key without any network call."""
        from partnerad.core.config import set_config

        set_config(Config(gemini_api_key=""))
        final = list(run_generation(_ready_state()))[-1]
        assert final.error == MISSING_CREDENTIAL_MESSAGE
        mock_post.assert_not_called()


@pytest.mark.unit
class TestLockedWhileGenerating:
    def test_input_transitions_are_noops_while_busy(self):
        busy = begin_generation(_ready_state())
        assert set_image(busy, ImageSlot.LOGO, "data:image/png;base64,eA==") is busy
        assert clear_image(busy, ImageSlot.LOGO) is busy
        assert set_mode(busy, GenerationMode.PRODUCT) is busy
        assert set_location_type(busy, "Bäckerei") is busy
        assert set_user_prompt(busy, "Other idea") is busy
        assert set_settings(busy, add_saved_prompt(busy.settings, "n", "p")) is busy

    def test_edit_during_generation_cannot_be_lost(self):
        generate = MagicMock(return_value=AD)
        gen = run_generation(_ready_state(), generate=generate)
        busy = next(gen)
        edited = set_image(busy, ImageSlot.LOGO, "data:image/png;base64,eA==")
        final = next(gen)

        assert edited.logo_image is None
        assert final.logo_image is None
        assert final.result == AD

    def test_edits_allowed_again_after_completion(self):
        generate = MagicMock(return_value=AD)
        final = list(run_generation(_ready_state(), generate=generate))[-1]
        state = set_image(final, ImageSlot.LOGO, "data:image/png;base64,eA==")
        assert state.logo_image == "data:image/png;base64,eA=="
        assert list(run_generation(state, generate=generate))[-1].result == AD
        assert generate.call_args.args[0].logo_image == "data:image/png;base64,eA=="
