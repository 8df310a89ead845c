"""
Integration tests for Gemini ad generation.

These tests call the real Gemini API. They are slow and cost money.
Run rarely and only when you need to verify the live API path.

To run:
  PARTNERAD_RUN_INTEGRATION_TESTS=1 GEMINI_API_KEY=... pytest -m integration --run-slow
"""

import io
import os
from pathlib import Path

import pytest
from PIL import Image

from partnerad.core.config import Config
from partnerad.core.image_gen import generate_ad
from partnerad.core.models import GenerationMode, GenerationRequest
from partnerad.core.prompts_loader import get_business_types, get_default_base_prompt

# Project root (tests/integration -> tests -> project root)
_PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
_TMP_DIR = _PROJECT_ROOT / "tmp"


def _integration_enabled() -> bool:
    return os.getenv("PARTNERAD_RUN_INTEGRATION_TESTS", "").strip() == "1"


@pytest.mark.integration
@pytest.mark.slow
class TestGeminiAdGeneration:
    """Real Gemini ad generation (requires API key and opt-in env)."""

    @pytest.fixture(autouse=True)
    def _require_opt_in(self) -> None:
        if not _integration_enabled():
            pytest.skip(
                "Integration tests are disabled. "
                "Set PARTNERAD_RUN_INTEGRATION_TESTS=1 to run (slow, costs money)."
            )
        if not Config.from_env().gemini_api_key:
            pytest.skip("GEMINI_API_KEY not set. Set it in .env or environment to run.")

    def test_text_mode_returns_portrait_png(self) -> None:
        config = Config.from_env()
        request = GenerationRequest(
            mode=GenerationMode.TEXT,
            user_prompt="Ice-cold drinks for a hot summer evening",
            base_prompt=get_default_base_prompt(),
            location_type=get_business_types()[0],
        )
        ad = generate_ad(request, config=config)

        assert ad.image_data.startswith("data:image/png;base64,")
        with Image.open(io.BytesIO(ad.image_bytes)) as image:
            width, height = image.size
        assert height > width

        _TMP_DIR.mkdir(parents=True, exist_ok=True)
        ad.save(_TMP_DIR)
