"""
Utility functions for the CLI.

This module contains helper functions used by CLI commands,
such as path generation and exit code constants.
"""

from pathlib import Path

from partnerad.core.models import DOWNLOAD_FILENAME_PREFIX

# Exit codes
EXIT_SUCCESS = 0
EXIT_API_OR_NETWORK = 1
EXIT_INPUT_OR_CONFIG = 2


def default_output_path(timestamp: int) -> Path:
    """Return default output path: partner-ad-<millis>.png in the current directory."""
    return Path(f"{DOWNLOAD_FILENAME_PREFIX}{timestamp}.png")


__all__ = [
    "EXIT_SUCCESS",
    "EXIT_API_OR_NETWORK",
    "EXIT_INPUT_OR_CONFIG",
    "default_output_path",
]
