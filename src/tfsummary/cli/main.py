"""Main CLI entry point for tfsummary."""

import click
from .. import __version__
from .commands.config import config
from .commands.prices import prices
from .commands.render import render
from .commands.summary import summary
from .commands.version import version as version_command


@click.group()
@click.version_option(version=__version__, prog_name="tfsummary", message="%(prog)s version %(version)s")
def cli():
    """tfsummary - Beautify Terraform plan output with cost estimates."""
    pass


cli.add_command(render)
cli.add_command(summary)
cli.add_command(prices)
cli.add_command(config)
cli.add_command(version_command)
