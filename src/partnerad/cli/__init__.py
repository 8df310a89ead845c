"""
Command-line interface for partnerad.

This package contains CLI implementations using Click.
Uses only the public API: from partnerad import ...
"""

from partnerad.cli.commands import cli, main

__all__ = ["cli", "main"]
