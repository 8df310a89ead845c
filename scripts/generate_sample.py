#!/usr/bin/env python
"""
Generate a sample ad for testing.

Usage:
    python scripts/generate_sample.py [--output-dir DIR] [--prompt TEXT] [--business-type NAME]
"""

import argparse
import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from partnerad.core.config import Config
from partnerad.core.image_gen import generate_ad
from partnerad.core.models import GenerationMode, GenerationRequest
from partnerad.core.prompts_loader import get_business_types, get_default_base_prompt
from partnerad.utils.exceptions import PartnerAdError


def main() -> None:
    """Generate a sample ad."""
    parser = argparse.ArgumentParser(description="Generate a sample partner ad")
    parser.add_argument(
        "--output-dir",
        default=".",
        help="Directory for the partner-ad-<timestamp>.png file (default: current directory)",
    )
    parser.add_argument(
        "--prompt",
        default="Ice-cold drinks and snacks for a warm summer evening",
        help="What the ad should be about",
    )
    parser.add_argument(
        "--business-type",
        default=None,
        help="Business type (default: first bundled type)",
    )

    args = parser.parse_args()
    business_type = args.business_type or get_business_types()[0]

    print(f"Generating ad for {business_type!r}: {args.prompt}")
    print()

    config = Config.from_env()

    try:
        config.validate()
        request = GenerationRequest(
            mode=GenerationMode.TEXT,
            user_prompt=args.prompt,
            base_prompt=config.base_prompt or get_default_base_prompt(),
            location_type=business_type,
        )
        ad = generate_ad(request, config=config)
        path = ad.save(args.output_dir)

        print("✓ Ad generated successfully!")
        print(f"  - Saved to: {path}")
        print(f"  - Model: {config.image_model}")

    except PartnerAdError as e:
        print(f"❌ Generation failed: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
