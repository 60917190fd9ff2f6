"""Prices command - refresh the OpenInfraQuote price sheet cache."""

import click
from ...config import load_config
from ...cost.oiq import OpenInfraQuoteProvider
from ...utils.errors import TfSummaryError
from ..utils import exit_with_error


@click.command()
@click.option('--force', is_flag=True, help='Download even if the cached sheet is fresh')
@click.option('--config', 'config_path', type=click.Path(), help='Path to a config YAML file')
def prices(force, config_path):
    """Download or refresh the cached price sheet used by oiq."""
    try:
        provider = OpenInfraQuoteProvider.from_config(load_config(config_path))
        cache = provider.cache
        if not force and not cache.is_stale():
            click.echo(f"Price sheet is up to date: {cache.path}")
            return
        path = cache.download()
        click.echo(f"Price sheet saved to {path}")
        if not provider.is_available():
            click.echo("Note: oiq binary not found; cost estimation will fail until it is installed.", err=True)
    except TfSummaryError as e:
        exit_with_error(str(e))
