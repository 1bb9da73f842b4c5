"""Installation validation command."""

from __future__ import annotations

import sys

import click

from matelink import __version__
from matelink.cli.exit_codes import EXIT_ERROR
from matelink.utils.validators import validate_installation


@click.command()
def validate() -> None:
    """Validate matelink installation and dependencies."""
    click.echo("Validating matelink installation...")

    issues = validate_installation()
    if not issues:
        click.echo("All checks passed!")
        click.echo(f"  matelink version: {__version__}")
        return

    click.echo("Issues found:")
    for issue in issues:
        click.echo(f"  - {issue}")
    sys.exit(EXIT_ERROR)
