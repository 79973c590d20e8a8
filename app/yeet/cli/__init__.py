"""CLI package for yeet.

This package contains the Typer application and its display helpers.
"""

from yeet.cli.main import app

__all__ = ["app"]
