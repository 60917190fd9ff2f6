"""Config commands - show effective configuration and write overrides."""

from pathlib import Path
import click
import yaml
from ...config import load_config, save_config, read_config_file, get_user_config_path
from ...utils.errors import TfSummaryError
from ..utils import exit_with_error


@click.group()
def config():
    """Inspect and edit tfsummary configuration."""
    pass


@config.command()
@click.option('--config', 'config_path', type=click.Path(), help='Path to a config YAML file')
def show(config_path):
    """Print the effective configuration as YAML."""
    try:
        click.echo(yaml.safe_dump(load_config(config_path), default_flow_style=False, sort_keys=False))
    except TfSummaryError as e:
        exit_with_error(str(e))


@config.command()
@click.option('--region', help='Default region for cost estimates')
@click.option('--provider', type=click.Choice(["oiq", "static"]), help='Cost provider')
@click.option('--cache-dir', type=click.Path(), help='Price sheet cache directory')
@click.option('--project', is_flag=True, help='Write .tfsummary/config.yaml in the current directory')
def init(region, provider, cache_dir, project):
    """Write region and cost settings to the user (or project) config."""
    path = Path.cwd() / ".tfsummary" / "config.yaml" if project else get_user_config_path()
    try:
        data = read_config_file(path) if path.exists() else {}
        if region:
            data["region"] = region
        if provider:
            data.setdefault("cost", {})["provider"] = provider
        if cache_dir:
            data.setdefault("cost", {}).setdefault("prices", {})["cache_dir"] = cache_dir
        save_config(data, path)
        click.echo(f"Saved config to {path}")
    except TfSummaryError as e:
        exit_with_error(str(e))
