"""
Error handling for the CLI.

Maps library exceptions to exit codes and user-facing messages so command
bodies can stay free of try/except for known errors.
"""

import sys
from collections.abc import Callable

import click

from partnerad import (
    ConfigurationError,
    ImageProcessingError,
    InvalidInputError,
    MissingCredentialError,
    NoImageGeneratedError,
    PartnerAdError,
    TransportError,
)
from partnerad.cli import progress
from partnerad.cli.utils import EXIT_API_OR_NETWORK, EXIT_INPUT_OR_CONFIG


def map_exception_to_exit(exc: BaseException) -> tuple[int, str]:
    """Map library and known exceptions to (exit_code, user_message)."""
    if isinstance(exc, InvalidInputError):
        msg = exc.args[0] if exc.args else "Invalid input."
        if exc.field:
            msg = f"{msg} (field: {exc.field})"
        return (EXIT_INPUT_OR_CONFIG, msg)
    if isinstance(exc, MissingCredentialError):
        return (
            EXIT_INPUT_OR_CONFIG,
            exc.args[0] if exc.args else "No API key available. Set GEMINI_API_KEY.",
        )
    if isinstance(exc, ConfigurationError):
        return (EXIT_INPUT_OR_CONFIG, exc.args[0] if exc.args else "Invalid configuration.")
    if isinstance(exc, ImageProcessingError):
        return (EXIT_INPUT_OR_CONFIG, exc.args[0] if exc.args else "Image processing failed.")
    if isinstance(exc, FileNotFoundError):
        return (EXIT_INPUT_OR_CONFIG, str(exc) if exc.args else "File not found.")
    if isinstance(exc, NoImageGeneratedError):
        return (EXIT_API_OR_NETWORK, exc.args[0] if exc.args else "No image generated.")
    if isinstance(exc, TransportError):
        return (EXIT_API_OR_NETWORK, exc.args[0] if exc.args else "API or network error.")
    if isinstance(exc, PartnerAdError):
        return (EXIT_API_OR_NETWORK, exc.args[0] if exc.args else "An error occurred.")
    # Unhandled
    return (EXIT_API_OR_NETWORK, str(exc) if exc.args else "An unexpected error occurred.")


def _report(msg: str, quiet: bool) -> None:
    if quiet:
        click.echo(msg, err=True)
    else:
        progress.print_error(msg)


def run_with_error_handling(
    fn: Callable[[], None],
    *,
    quiet: bool = False,
    debug: bool = False,
) -> None:
    """
    Run fn(); on exception map to exit code and message, print and sys.exit.
    With debug, unexpected exceptions propagate with their traceback.
    """
    try:
        fn()
    except (PartnerAdError, FileNotFoundError) as e:
        code, msg = map_exception_to_exit(e)
        _report(msg, quiet)
        sys.exit(code)
    except Exception as e:
        if debug:
            raise
        code, msg = map_exception_to_exit(e)
        _report(msg, quiet)
        sys.exit(code)


__all__ = [
    "map_exception_to_exit",
    "run_with_error_handling",
]
