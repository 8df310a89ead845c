"""
Click command definitions for the partnerad CLI.

This module contains the Click command group and all CLI commands
(generate, business-types, ui).
"""

import os
import sys
import time
from pathlib import Path

import click

from partnerad import (
    Config,
    EnvCredentialSource,
    GeneratedAd,
    GenerationMode,
    GenerationRequest,
    SessionCredentialSource,
    __version__,
    generate_ad,
    get_business_types,
    get_default_base_prompt,
    load_image_data_url,
    resolve_credential,
    validate_request,
)
from partnerad.cli import progress
from partnerad.cli.handlers import run_with_error_handling
from partnerad.cli.utils import default_output_path
from partnerad.logging_config import configure_logging, get_verbosity_from_env


def _prompt_for_api_key() -> str | None:
    """Hidden terminal prompt for the interactive credential flow."""
    entered = click.prompt(
        "Gemini API key (leave empty to cancel)",
        default="",
        show_default=False,
        hide_input=True,
        err=True,
    )
    return entered.strip() or None


def _load_optional_image(path: Path | None) -> str | None:
    return load_image_data_url(path) if path is not None else None


@click.group(
    help=f"""Create portrait (9:16) ads for retail partners with Gemini.

\b
Version: {__version__}
"""
)
@click.version_option(version=__version__, package_name="partnerad")
@click.pass_context
def cli(ctx: click.Context) -> None:
    ctx.color = True


@cli.command()
@click.option(
    "--mode",
    "-m",
    type=click.Choice([m.value for m in GenerationMode], case_sensitive=False),
    default=GenerationMode.TEXT.value,
    show_default=True,
    help="'text' (Creativity: idea + business type) or 'product' (Product Boost: product photo).",
)
@click.option(
    "--business-type",
    "-b",
    help="Business type for text mode (default: first of `partnerad business-types`).",
)
@click.option("--prompt", "-p", default="", help="Describe your ad (required in text mode).")
@click.option(
    "--product",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Product photo (required in product mode).",
)
@click.option(
    "--logo",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Business logo to place in the ad.",
)
@click.option(
    "--reference",
    "-r",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Photo of the store to use as the scene reference.",
)
@click.option(
    "--base-prompt",
    help="Base prompt to use instead of PARTNERAD_BASE_PROMPT or the bundled default.",
)
@click.option("--out", "-o", type=click.Path(path_type=Path), help="Output file path.")
@click.option("--model", help="Gemini image model ID (default from config).")
@click.option(
    "--api-key",
    envvar="GEMINI_API_KEY",
    help="Gemini API key (overrides GEMINI_API_KEY environment variable).",
)
@click.option(
    "--quiet",
    "-q",
    is_flag=True,
    help="Minimize progress messages; only print result path or errors.",
)
@click.option(
    "--verbose",
    "-v",
    "verbose_count",
    count=True,
    help="Increase verbosity: -v also show prompts, -vv show API detail.",
)
@click.option(
    "--debug-api",
    is_flag=True,
    help="Log raw API request payload and response (image data truncated) for debugging.",
)
def generate(
    mode: str,
    business_type: str | None,
    prompt: str,
    product: Path | None,
    logo: Path | None,
    reference: Path | None,
    base_prompt: str | None,
    out: Path | None,
    model: str | None,
    api_key: str | None,
    quiet: bool,
    verbose_count: int,
    debug_api: bool,
) -> None:
    """Generate one ad image and save it as PNG."""
    # CLI flags override PARTNERAD_VERBOSITY
    verbose_level = min(verbose_count, 2) if verbose_count > 0 else get_verbosity_from_env()
    configure_logging(verbose_level=verbose_level, quiet=quiet)

    def do_generate() -> None:
        # 1. Load and validate config; the key is checked separately below
        config = Config.from_env()
        if api_key:
            config.set_api_key(api_key)
        if model:
            config.set_image_model(model)
        if debug_api:
            config.debug_api = True
        config.validate(require_api_key=False)

        # 2. Build and validate the request before touching credentials
        gen_mode = GenerationMode(mode.lower())
        location_type = None
        if gen_mode == GenerationMode.TEXT:
            location_type = business_type or get_business_types()[0]
        request = GenerationRequest(
            mode=gen_mode,
            user_prompt=prompt.strip(),
            base_prompt=base_prompt or config.base_prompt or get_default_base_prompt(),
            location_type=location_type,
            product_image=_load_optional_image(product),
            logo_image=_load_optional_image(logo),
            reference_scene_image=_load_optional_image(reference),
        )
        validate_request(request)

        # 3. Credential: configured key, else a hidden prompt on a terminal
        interactive = not quiet and sys.stdin.isatty()
        source = SessionCredentialSource(
            prompt=_prompt_for_api_key if interactive else None,
            fallback=EnvCredentialSource(config),
        )
        key = resolve_credential(source, interactive=interactive)

        # 4. Generate
        start_time = time.time()
        ad: GeneratedAd
        if not quiet:
            with progress.generation_progress(
                gen_mode, model=config.image_model, image_count=request.image_count
            ):
                ad = generate_ad(
                    request, credentials=SessionCredentialSource(api_key=key), config=config
                )
        else:
            ad = generate_ad(
                request, credentials=SessionCredentialSource(api_key=key), config=config
            )
        elapsed = time.time() - start_time

        # 5. Save
        out_path = out if out is not None else default_output_path(ad.timestamp)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        ad.save(out_path.parent, out_path.name)

        # 6. Print result
        if not quiet:
            progress.print_success_result(
                output_path=out_path,
                generation_time=elapsed,
                model_used=config.image_model,
                mode=gen_mode,
                prompt_used=ad.prompt_used,
                location_type=location_type,
                image_count=request.image_count,
            )
        # Path on stdout for scriptability
        click.echo(str(out_path))

    run_with_error_handling(do_generate, quiet=quiet, debug=verbose_level >= 2)


@cli.command("business-types")
def business_types() -> None:
    """List the business types available in text mode."""
    for name in get_business_types():
        click.echo(name)


@cli.command()
@click.option(
    "--port",
    "-p",
    type=int,
    default=None,
    envvar="PARTNERAD_UI_PORT",
    help="Port for the Gradio server (default: 7860 or PARTNERAD_UI_PORT).",
)
@click.option(
    "--host",
    "host",
    type=str,
    default=None,
    envvar="PARTNERAD_UI_HOST",
    help="Host to bind (default: 127.0.0.1 or PARTNERAD_UI_HOST). Use 0.0.0.0 for LAN.",
)
@click.option(
    "--share",
    is_flag=True,
    default=None,
    help="Create a public share link (e.g. gradio.live). Overrides PARTNERAD_UI_SHARE.",
)
@click.option(
    "--debug-api",
    is_flag=True,
    help="Log raw API request/response (image data truncated) when generating from the UI.",
)
def ui(port: int | None, host: str | None, share: bool | None, debug_api: bool) -> None:
    """Launch the Gradio web UI (the ad builder form)."""
    from partnerad.ui.gradio_app import launch as launch_ui

    configure_logging(verbose_level=get_verbosity_from_env(), quiet=False)

    if debug_api:
        os.environ["PARTNERAD_DEBUG_API"] = "1"

    share_val = share
    if share_val is None:
        env_share = os.environ.get("PARTNERAD_UI_SHARE", "").lower()
        share_val = env_share in ("1", "true", "yes")
    launch_ui(server_name=host, server_port=port, share=share_val)


def main() -> None:
    """Entry point for the partnerad console script."""
    cli()


__all__ = ["cli", "main", "generate", "business_types", "ui"]
