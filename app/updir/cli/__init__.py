"""CLI package for updir.

This package contains the Typer application and all subcommands.
"""

from updir.cli.main import app

__all__ = ["app"]
