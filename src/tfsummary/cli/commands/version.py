"""Version command - show tfsummary version."""

import click
from ... import __version__


@click.command()
def version():
    """Show tfsummary version."""
    click.echo(f"tfsummary version {__version__}")
