"""Render command - summarize a Terraform plan with optional cost estimates."""

import sys
import click
from ... import build_report
from ...config import load_config
from ...contracts.plan_report import OutputFormat, RenderOptions
from ...report.renderer import render as render_report, write_output
from ...utils.errors import TfSummaryError
from ...utils.logging import get_logger
from ..utils import read_plan, set_verbosity, exit_with_error

logger = get_logger("cli.render")

FORMAT_CHOICES = [f.value for f in OutputFormat]


@click.command()
@click.argument('plan_file', required=False, type=click.Path(exists=False))
@click.option('--format', '-f', 'output_format', type=click.Choice(FORMAT_CHOICES),
              help='Output format (default from config: terminal)')
@click.option('--out', '-o', type=click.Path(), help='Write output to file instead of stdout')
@click.option('--region', '-r', help='Region for cost estimates (default from config: us-east-1)')
@click.option('--cost/--no-cost', default=None, help='Enable or skip cost estimation')
@click.option('--summary-only', is_flag=True, help='Show only the summary, hide per-resource list')
@click.option('--config', 'config_path', type=click.Path(), help='Path to a config YAML file')
@click.option('--quiet', is_flag=True, help='Suppress progress messages')
@click.option('--verbose', is_flag=True, help='Enable debug logging')
@click.pass_context
def render(ctx, plan_file, output_format, out, region, cost, summary_only, config_path, quiet, verbose):
    """
    Summarize a Terraform plan (from PLAN_FILE or stdin).

    Generate the input with: terraform show -json tfplan > plan.json
    """
    set_verbosity(verbose)
    try:
        config = load_config(config_path)
        output_config = config.get("output", {})
        options = RenderOptions(
            format=output_format or output_config.get("format", OutputFormat.TERMINAL.value),
            out=out,
            cost=cost if cost is not None else bool(config.get("cost", {}).get("enabled", True)),
            summary_only=summary_only or bool(output_config.get("summary_only", False)),
            region=region or config.get("region", "us-east-1"),
        )

        try:
            plan_data = read_plan(plan_file)
        except click.UsageError:
            click.echo(ctx.get_help(), err=True)
            sys.exit(1)

        report = build_report(plan_data, config, region=options.region, with_cost=options.cost)

        for warning in report.warnings:
            click.echo(f"Warning: {warning}", err=True)

        output_text = render_report(report, options)

        if options.out:
            output_path = write_output(output_text, options.out)
            if not quiet:
                click.echo(f"Output written to {output_path}", err=True)
        else:
            click.echo(output_text)

    except TfSummaryError as e:
        exit_with_error(str(e))
    except Exception as e:
        logger.error(f"Unexpected error: {e}", exc_info=True)
        exit_with_error(f"Render failed: {e}")
