"""CLI application setup using Typer.

Provides the command-line interface for Mindbridge operations.
"""

from mindbridge.cli.main import app

__all__ = ["app"]
