"""Command-line interface for matelink."""

from matelink.cli.main import cli, main

__all__ = ["cli", "main"]
