"""
Gradio web UI for partnerad.

Single-page ad builder: choose Creativity (free-text idea for a business type)
or Product Boost (product photo), optionally add a logo and a store photo,
generate one 9:16 ad, view and download it. Admin settings (base prompt and up
to five saved prompts) live in an accordion below the form.

All form data is held in a per-browser SessionState; handlers are plain
functions over it so they can be tested without a running server.
Uses only the public API: from partnerad import ...
"""

import argparse
import atexit
import contextlib
import io
import os
import shutil
import tempfile
from collections.abc import Generator
from pathlib import Path
from typing import Any, cast

import gradio as gr

from partnerad import (
    MAX_SAVED_PROMPTS,
    EnvCredentialSource,
    GenerationMode,
    ImageSlot,
    InvalidInputError,
    PartnerAdError,
    SessionCredentialSource,
    SessionState,
    __version__,
    generate_ad,
    get_business_types,
    get_config,
    load_image_data_url,
    new_session,
    run_generation,
)
from partnerad.core import session as session_ops
from partnerad.core import settings as settings_ops
from partnerad.core.models import AdSettings, GeneratedAd
from partnerad.logging_config import get_logger

logger = get_logger(__name__)

# Default server port; overridable via PARTNERAD_UI_PORT
DEFAULT_UI_PORT = 7860
DEFAULT_UI_HOST = "127.0.0.1"

BASE_PAGE_TITLE = "partnerad - partner ad builder"

_UI_CONCURRENCY_ID = "partnerad_ui"

MODE_LABELS = {
    GenerationMode.TEXT: "Creativity",
    GenerationMode.PRODUCT: "Product Boost",
}

_PROMPT_PLACEHOLDERS = {
    GenerationMode.TEXT: "Describe your ad, e.g. 'Cold drinks on a hot summer evening'…",
    GenerationMode.PRODUCT: "Optional: anything to add about the product or the offer…",
}

# Temp files and directories we create (result PNGs); cleaned on process exit
_temp_paths: set[str] = set()
_temp_dirs: set[str] = set()
# Result file per generated ad, so re-renders reuse the same file. Equal ads have
# identical image bytes and file name, so they may share one file.
_result_paths: dict[GeneratedAd, str] = {}

BUSY_MESSAGE = "Please wait until the current ad is finished."


def _cleanup_temp_paths() -> None:
    for path in _temp_paths:
        with contextlib.suppress(OSError):
            Path(path).unlink(missing_ok=True)
    for directory in _temp_dirs:
        shutil.rmtree(directory, ignore_errors=True)


atexit.register(_cleanup_temp_paths)


def _mode_from_label(label: str | None) -> GenerationMode:
    for mode, mode_label in MODE_LABELS.items():
        if label == mode_label:
            return mode
    return GenerationMode(label) if label else GenerationMode.TEXT


def _exception_to_message(exc: BaseException) -> str:
    """Map library and known exceptions to a short user-facing message."""
    if isinstance(exc, FileNotFoundError):
        return "Image file not found. Please upload it again."
    return session_ops.describe_error(exc)


def _format_status(message: str, status_type: str = "info") -> str:
    """
    Format a status message with color and icon.

    Args:
        message: The status message text.
        status_type: One of "info", "success", "error", "warning", "idle".

    Returns:
        HTML-formatted status string ("" for idle or an empty message).
    """
    if status_type == "success":
        icon = "✅"
        color = "#10b981"  # green-500
        bg_color = "#d1fae5"  # green-100
    elif status_type == "error":
        icon = "❌"
        color = "#ef4444"  # red-500
        bg_color = "#fee2e2"  # red-100
    elif status_type == "warning":
        icon = "⚠️"
        color = "#f59e0b"  # amber-500
        bg_color = "#fef3c7"  # amber-100
    elif status_type == "info":
        icon = "ℹ️"
        color = "#3b82f6"  # blue-500
        bg_color = "#dbeafe"  # blue-100
    else:  # idle
        return ""
    if not message:
        return ""

    return f"""<div style="padding: 12px 16px; border-radius: 8px; background-color: {bg_color}; border-left: 4px solid {color}; margin: 8px 0;">
    <span style="font-size: 16px; margin-right: 8px;">{icon}</span>
    <span style="color: {color}; font-weight: 500;">{message}</span>
</div>"""


def _image_source(value: Any) -> str | bytes | None:
    """
    Normalize a Gradio Image value to something load_image_data_url accepts.

    Gradio can return a path str, a dict with 'path' or 'url' (data URL), or a
    PIL Image depending on version and component type.
    """
    if value is None:
        return None
    if hasattr(value, "size") and hasattr(value, "save"):
        buf = io.BytesIO()
        value.save(buf, "PNG")
        return buf.getvalue()
    if isinstance(value, str):
        return value if value.strip() else None
    if isinstance(value, dict):
        for key in ("path", "url"):
            candidate = value.get(key)
            if isinstance(candidate, str) and candidate.strip():
                return candidate
        return None
    return str(value)


def _credentials_for(api_key: str | None) -> SessionCredentialSource:
    """Credential source for one browser session: a connected key, else configuration."""
    return SessionCredentialSource(api_key=api_key, fallback=EnvCredentialSource())


def _env_has_api_key() -> bool:
    return EnvCredentialSource(get_config()).check_available()


# --- Result rendering ---------------------------------------------------------


def _result_path(ad: GeneratedAd | None) -> str | None:
    """Write the ad to a temp file named for download (partner-ad-<ts>.png)."""
    if ad is None:
        return None
    cached = _result_paths.get(ad)
    if cached is not None and Path(cached).is_file():
        return cached
    directory = tempfile.mkdtemp(prefix="partnerad_")
    _temp_dirs.add(directory)
    path = str(ad.save(directory))
    _temp_paths.add(path)
    _result_paths[ad] = path
    return path


def _release_result(ad: GeneratedAd) -> None:
    """Delete the temp file of a result that is no longer shown."""
    path = _result_paths.pop(ad, None)
    if path is None:
        return
    _temp_paths.discard(path)
    directory = str(Path(path).parent)
    _temp_dirs.discard(directory)
    shutil.rmtree(directory, ignore_errors=True)


def _status_for(state: SessionState) -> str:
    if state.is_generating:
        return _format_status("Creating your ad… this can take a little while.", "info")
    if state.error:
        return _format_status(state.error, "error")
    return ""


def _render(state: SessionState) -> tuple[Any, ...]:
    """(status_html, dismiss_btn, generate_btn, result_image, download_btn) for a snapshot."""
    path = _result_path(state.result)
    return (
        _status_for(state),
        gr.update(visible=bool(state.error) and not state.is_generating),
        gr.update(
            interactive=not state.is_generating,
            value="Generating…" if state.is_generating else "Generate Ad",
        ),
        path,
        gr.update(value=path, visible=path is not None),
    )


# --- Form handlers ------------------------------------------------------------


def _generate_click_handler(
    state: SessionState,
    user_prompt: str,
    location_type: str,
    api_key: str | None = None,
) -> Generator[tuple[Any, ...], None, None]:
    """Generate button logic: sync text inputs, run one generation, yield updates. Used by UI and tests."""
    logger.debug("Generate clicked")
    state = session_ops.set_user_prompt(state, user_prompt or "")
    state = session_ops.set_location_type(state, location_type or "")
    previous = state.result
    try:
        for snapshot in run_generation(
            state,
            generate=generate_ad,
            credentials=_credentials_for(api_key),
        ):
            state = snapshot
            if previous is not None and state.result is not previous:
                _release_result(previous)
                previous = None
            yield (state, *_render(state))
    except Exception as e:
        logger.exception("Unexpected error during generation")
        state = session_ops.fail_generation(state, _exception_to_message(e))
        yield (state, *_render(state))


def _dismiss_error_handler(state: SessionState) -> tuple[Any, ...]:
    state = session_ops.dismiss_error(state)
    return state, "", gr.update(visible=False)


def _mode_change_handler(state: SessionState, label: str) -> tuple[Any, ...]:
    """Switch mode: business type only in Creativity, product photo only in Product Boost."""
    state = session_ops.set_mode(state, _mode_from_label(label))
    mode = state.mode
    is_text = mode == GenerationMode.TEXT
    return (
        state,
        gr.update(visible=is_text),
        gr.update(visible=not is_text),
        gr.update(
            label="Your idea" if is_text else "Extra details (optional)",
            placeholder=_PROMPT_PLACEHOLDERS[mode],
        ),
    )


def _image_upload_handler(
    state: SessionState, slot: ImageSlot | str, value: Any
) -> tuple[SessionState, str]:
    """Store an uploaded image as a data URI, or clear the slot when value is empty."""
    if state.is_generating:
        return state, _format_status(BUSY_MESSAGE, "warning")
    source = _image_source(value)
    if source is None:
        return session_ops.clear_image(state, slot), ""
    try:
        data_url = load_image_data_url(source)
    except (PartnerAdError, FileNotFoundError) as e:
        logger.warning("Rejected %s image: %s", ImageSlot(slot).value, e)
        return session_ops.clear_image(state, slot), _format_status(
            _exception_to_message(e), "error"
        )
    logger.debug("Stored %s image (%d chars)", ImageSlot(slot).value, len(data_url))
    return session_ops.set_image(state, slot, data_url), ""


def _image_remove_handler(state: SessionState, slot: ImageSlot | str) -> tuple[SessionState, Any]:
    if state.is_generating:
        return state, gr.update()
    return session_ops.clear_image(state, slot), None


def _connect_key_handler(api_key_input: str, current_key: str | None) -> tuple[Any, ...]:
    """Connect a key for this browser session. Returns (key_state, key_textbox, status)."""
    key = (api_key_input or "").strip()
    if not key:
        return current_key, "", _format_status("Enter your Gemini API key to connect.", "warning")
    source = _credentials_for(key)
    if not source.check_available():
        return current_key, "", _format_status("The API key could not be connected.", "error")
    return key, "", _format_status("API key connected for this session.", "success")


def _disconnect_key_handler() -> tuple[Any, ...]:
    return None, _format_status("API key disconnected.", "info")


def _lock_form(count: int) -> tuple[Any, ...]:
    """Disable the form's input and settings controls while a generation runs."""
    return tuple(gr.update(interactive=False) for _ in range(count))


def _unlock_form(state: SessionState, count: int) -> tuple[Any, ...]:
    """Re-enable the locked controls; the last one is the Add prompt button (capped)."""
    updates = [gr.update(interactive=True) for _ in range(count - 1)]
    updates.append(gr.update(interactive=state.settings.can_add_prompt))
    return tuple(updates)


# --- Admin settings handlers --------------------------------------------------


def _saved_prompt_choices(settings: AdSettings) -> list[tuple[str, str]]:
    """Dropdown (label, id) pairs; the active prompt is marked."""
    choices = []
    for saved in settings.saved_prompts:
        label = f"{saved.name} (active)" if saved.id == settings.active_prompt_id else saved.name
        choices.append((label, saved.id))
    return choices


def _settings_view(
    state: SessionState,
    message: str = "",
    status_type: str = "idle",
    selected_id: str | None = None,
) -> tuple[Any, ...]:
    """(state, base_prompt_tb, saved_dd, add_btn, settings_status) for a snapshot."""
    settings = state.settings
    if selected_id is not None and settings.find(selected_id) is None:
        selected_id = None
    return (
        state,
        settings.base_prompt,
        gr.update(choices=_saved_prompt_choices(settings), value=selected_id),
        gr.update(interactive=settings.can_add_prompt and not state.is_generating),
        _format_status(message, status_type),
    )


def _save_base_prompt_handler(state: SessionState, base_prompt: str) -> tuple[Any, ...]:
    if state.is_generating:
        return _settings_view(state, BUSY_MESSAGE, "warning")
    try:
        settings = settings_ops.update_base_prompt(state.settings, base_prompt)
    except InvalidInputError as e:
        return _settings_view(state, _exception_to_message(e), "error")
    state = session_ops.set_settings(state, settings)
    return _settings_view(state, "Base prompt saved.", "success", settings.active_prompt_id)


def _reset_base_prompt_handler(state: SessionState) -> tuple[Any, ...]:
    if state.is_generating:
        return _settings_view(state, BUSY_MESSAGE, "warning")
    state = session_ops.set_settings(state, settings_ops.reset_base_prompt(state.settings))
    return _settings_view(state, "Base prompt reset to default.", "info")


def _add_prompt_handler(state: SessionState, name: str, prompt: str) -> tuple[Any, ...]:
    if state.is_generating:
        return _settings_view(state, BUSY_MESSAGE, "warning")
    if not state.settings.can_add_prompt:
        return _settings_view(
            state, f"You can save up to {MAX_SAVED_PROMPTS} prompts.", "warning"
        )
    try:
        settings = settings_ops.add_saved_prompt(state.settings, name, prompt)
    except InvalidInputError as e:
        return _settings_view(state, _exception_to_message(e), "error")
    state = session_ops.set_settings(state, settings)
    return _settings_view(state, "Prompt saved.", "success", settings.saved_prompts[-1].id)


def _update_prompt_handler(
    state: SessionState, prompt_id: str | None, name: str, prompt: str
) -> tuple[Any, ...]:
    if state.is_generating:
        return _settings_view(state, BUSY_MESSAGE, "warning")
    if not prompt_id:
        return _settings_view(state, "Select a saved prompt to update.", "warning")
    try:
        settings = settings_ops.update_saved_prompt(state.settings, prompt_id, name, prompt)
    except InvalidInputError as e:
        return _settings_view(state, _exception_to_message(e), "error", prompt_id)
    state = session_ops.set_settings(state, settings)
    return _settings_view(state, "Prompt updated.", "success", prompt_id)


def _delete_prompt_handler(state: SessionState, prompt_id: str | None) -> tuple[Any, ...]:
    if state.is_generating:
        return _settings_view(state, BUSY_MESSAGE, "warning")
    if not prompt_id:
        return _settings_view(state, "Select a saved prompt to delete.", "warning")
    state = session_ops.set_settings(
        state, settings_ops.delete_saved_prompt(state.settings, prompt_id)
    )
    return _settings_view(state, "Prompt deleted.", "info")


def _apply_prompt_handler(state: SessionState, prompt_id: str | None) -> tuple[Any, ...]:
    if state.is_generating:
        return _settings_view(state, BUSY_MESSAGE, "warning")
    if not prompt_id:
        return _settings_view(state, "Select a saved prompt to use.", "warning")
    try:
        settings = settings_ops.activate_saved_prompt(state.settings, prompt_id)
    except InvalidInputError as e:
        return _settings_view(state, _exception_to_message(e), "error")
    state = session_ops.set_settings(state, settings)
    return _settings_view(state, "Saved prompt is now the base prompt.", "success", prompt_id)


def _select_prompt_handler(state: SessionState, prompt_id: str | None) -> tuple[str, str]:
    """Fill the name and text fields from the selected saved prompt."""
    saved = state.settings.find(prompt_id) if prompt_id else None
    if saved is None:
        return "", ""
    return saved.name, saved.prompt


# --- Layout -------------------------------------------------------------------


def _build_blocks() -> gr.Blocks:
    """Build the Gradio Blocks UI."""
    initial = new_session()
    business_types = get_business_types()
    needs_key = not _env_has_api_key()

    header_html = """
<div style="margin-bottom: 24px;">
    <h1 style="
        font-size: 2.2em;
        font-weight: 700;
        margin: 0;
        background: linear-gradient(135deg, #f97316 0%, #db2777 100%);
        -webkit-background-clip: text;
        -webkit-text-fill-color: transparent;
        background-clip: text;
        letter-spacing: -0.02em;
    ">partnerad</h1>
    <p style="font-size: 1.1em; color: #6b7280; margin: 4px 0 0 0;">Create a portrait ad for your shop in one click</p>
</div>
"""

    with gr.Blocks(title=BASE_PAGE_TITLE) as app:
        gr.HTML(header_html)
        session_state = gr.State(value=initial)
        api_key_state = gr.State(value=None)

        with gr.Group(visible=needs_key):
            gr.Markdown(
                "**Connect your Gemini API key** to create ads. "
                "The key is kept only for this browser session."
            )
            with gr.Row():
                api_key_tb = gr.Textbox(
                    label="Gemini API key",
                    type="password",
                    placeholder="AIza…",
                    scale=4,
                )
                connect_btn = gr.Button("Connect", variant="secondary", scale=1)
                disconnect_btn = gr.Button("Disconnect", scale=1)
            connect_status = gr.HTML(value="")

        with gr.Row():
            with gr.Column():
                mode_radio = gr.Radio(
                    label="What do you want to start from?",
                    choices=list(MODE_LABELS.values()),
                    value=MODE_LABELS[initial.mode],
                )
                location_dd = gr.Dropdown(
                    label="Business type",
                    choices=business_types,
                    value=initial.location_type,
                    visible=initial.mode == GenerationMode.TEXT,
                )
                with gr.Column(visible=initial.mode == GenerationMode.PRODUCT) as product_col:
                    product_image = gr.Image(
                        label="Product photo",
                        type="filepath",
                        sources=["upload", "clipboard"],
                    )
                    product_remove_btn = gr.Button("Remove product photo", size="sm")
                prompt_tb = gr.Textbox(
                    label="Your idea",
                    placeholder=_PROMPT_PLACEHOLDERS[initial.mode],
                    lines=4,
                    max_lines=10,
                )
                with gr.Row():
                    with gr.Column():
                        logo_image = gr.Image(
                            label="Logo (optional)",
                            type="filepath",
                            sources=["upload", "clipboard"],
                        )
                        logo_remove_btn = gr.Button("Remove logo", size="sm")
                    with gr.Column():
                        scene_image = gr.Image(
                            label="Store photo (optional)",
                            type="filepath",
                            sources=["upload", "clipboard"],
                        )
                        scene_remove_btn = gr.Button("Remove store photo", size="sm")
                generate_btn = gr.Button("Generate Ad", variant="primary")
                status_html = gr.HTML(value="")
                dismiss_btn = gr.Button("Dismiss", size="sm", visible=False)
            with gr.Column():
                out_image = gr.Image(
                    label="Your ad",
                    type="filepath",
                    height="70vh",
                    interactive=False,
                    elem_id="partnerad-output-image",
                )
                download_btn = gr.DownloadButton("Download", visible=False)

        with gr.Accordion("Admin settings", open=False):
            base_prompt_tb = gr.Textbox(
                label="Base prompt",
                value=initial.settings.base_prompt,
                lines=8,
                max_lines=16,
            )
            with gr.Row():
                save_base_btn = gr.Button("Save base prompt", variant="secondary")
                reset_base_btn = gr.Button("Reset to default")
            saved_dd = gr.Dropdown(
                label=f"Saved prompts (up to {MAX_SAVED_PROMPTS})",
                choices=_saved_prompt_choices(initial.settings),
                value=None,
            )
            saved_name_tb = gr.Textbox(label="Prompt name")
            saved_prompt_tb = gr.Textbox(label="Prompt text", lines=6, max_lines=12)
            with gr.Row():
                add_btn = gr.Button("Add", interactive=initial.settings.can_add_prompt)
                update_btn = gr.Button("Update")
                delete_btn = gr.Button("Delete")
                apply_btn = gr.Button("Use as base prompt", variant="secondary")
            settings_status = gr.HTML(value="")

        # Form wiring
        connect_btn.click(
            fn=_connect_key_handler,
            inputs=[api_key_tb, api_key_state],
            outputs=[api_key_state, api_key_tb, connect_status],
        )
        disconnect_btn.click(
            fn=_disconnect_key_handler,
            inputs=[],
            outputs=[api_key_state, connect_status],
        )
        mode_radio.change(
            fn=_mode_change_handler,
            inputs=[session_state, mode_radio],
            outputs=[session_state, location_dd, product_col, prompt_tb],
        )

        image_slots = [
            (ImageSlot.PRODUCT, product_image, product_remove_btn),
            (ImageSlot.LOGO, logo_image, logo_remove_btn),
            (ImageSlot.REFERENCE_SCENE, scene_image, scene_remove_btn),
        ]
        for slot, image_component, remove_btn in image_slots:
            image_component.change(
                fn=lambda st, value, slot=slot: _image_upload_handler(st, slot, value),
                inputs=[session_state, image_component],
                outputs=[session_state, status_html],
            )
            remove_btn.click(
                fn=lambda st, slot=slot: _image_remove_handler(st, slot),
                inputs=[session_state],
                outputs=[session_state, image_component],
            )

        # Controls disabled while a generation runs; add_btn must stay last
        locked_controls = [
            mode_radio,
            location_dd,
            product_image,
            product_remove_btn,
            prompt_tb,
            logo_image,
            logo_remove_btn,
            scene_image,
            scene_remove_btn,
            base_prompt_tb,
            save_base_btn,
            reset_base_btn,
            saved_dd,
            update_btn,
            delete_btn,
            apply_btn,
            add_btn,
        ]
        generate_btn.click(
            fn=lambda: _lock_form(len(locked_controls)),
            inputs=[],
            outputs=locked_controls,
            queue=False,
        ).then(
            fn=_generate_click_handler,
            inputs=[session_state, prompt_tb, location_dd, api_key_state],
            outputs=[
                session_state,
                status_html,
                dismiss_btn,
                generate_btn,
                out_image,
                download_btn,
            ],
            concurrency_id=_UI_CONCURRENCY_ID,
        ).then(
            fn=lambda st: _unlock_form(st, len(locked_controls)),
            inputs=[session_state],
            outputs=locked_controls,
        )
        dismiss_btn.click(
            fn=_dismiss_error_handler,
            inputs=[session_state],
            outputs=[session_state, status_html, dismiss_btn],
        )

        # Admin settings wiring
        _settings_outputs = [session_state, base_prompt_tb, saved_dd, add_btn, settings_status]
        save_base_btn.click(
            fn=_save_base_prompt_handler,
            inputs=[session_state, base_prompt_tb],
            outputs=_settings_outputs,
        )
        reset_base_btn.click(
            fn=_reset_base_prompt_handler,
            inputs=[session_state],
            outputs=_settings_outputs,
        )
        add_btn.click(
            fn=_add_prompt_handler,
            inputs=[session_state, saved_name_tb, saved_prompt_tb],
            outputs=_settings_outputs,
        )
        update_btn.click(
            fn=_update_prompt_handler,
            inputs=[session_state, saved_dd, saved_name_tb, saved_prompt_tb],
            outputs=_settings_outputs,
        )
        delete_btn.click(
            fn=_delete_prompt_handler,
            inputs=[session_state, saved_dd],
            outputs=_settings_outputs,
        )
        apply_btn.click(
            fn=_apply_prompt_handler,
            inputs=[session_state, saved_dd],
            outputs=_settings_outputs,
        )
        saved_dd.change(
            fn=_select_prompt_handler,
            inputs=[session_state, saved_dd],
            outputs=[saved_name_tb, saved_prompt_tb],
        )

        gr.HTML(f"""
<div style="text-align: center; margin: 40px 0 20px 0; padding-top: 20px; border-top: 1px solid #e5e7eb;">
    <p style="font-size: 0.9em; color: #9ca3af; margin: 0;">partnerad v{__version__}</p>
</div>
""")

    return cast(gr.Blocks, app)


def launch(
    server_name: str | None = None,
    server_port: int | None = None,
    share: bool = False,
) -> None:
    """
    Build the Gradio app and launch the server.

    Args:
        server_name: Host to bind (default: PARTNERAD_UI_HOST or 127.0.0.1).
        server_port: Port (default: PARTNERAD_UI_PORT or 7860).
        share: If True, create a public share link (e.g. gradio.live).
    """
    host = server_name or os.getenv("PARTNERAD_UI_HOST", DEFAULT_UI_HOST)
    port = server_port
    if port is None:
        try:
            port = int(os.getenv("PARTNERAD_UI_PORT", str(DEFAULT_UI_PORT)))
        except ValueError:
            port = DEFAULT_UI_PORT
    print(f"partnerad ui is starting (v{__version__}) on http://{host}:{port}...")
    app = _build_blocks()
    app.launch(server_name=host, server_port=port, share=share, inbrowser=True)


def main() -> None:
    """Entry point for the partnerad-ui console script. Parses --port, --host, --share."""
    parser = argparse.ArgumentParser(
        description="Launch the partnerad Gradio web UI for creating partner ads.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument(
        "--port",
        type=int,
        default=None,
        metavar="PORT",
        help=f"Port to bind (default: PARTNERAD_UI_PORT or {DEFAULT_UI_PORT}).",
    )
    parser.add_argument(
        "--host",
        type=str,
        default=None,
        metavar="HOST",
        help=f"Host to bind (default: PARTNERAD_UI_HOST or {DEFAULT_UI_HOST}). Use 0.0.0.0 for LAN.",
    )
    parser.add_argument(
        "--share",
        action="store_true",
        default=None,
        help="Create a public share link (e.g. gradio.live). Overrides PARTNERAD_UI_SHARE.",
    )
    args = parser.parse_args()
    share_val = args.share
    if share_val is None:
        env_share = os.environ.get("PARTNERAD_UI_SHARE", "").lower()
        share_val = env_share in ("1", "true", "yes")
    launch(
        server_name=args.host,
        server_port=args.port,
        share=share_val,
    )
