"""Summary command - print per-action counts only."""

import json
import click
from ...analysis.summary import summarize
from ...ingest.plan_normalizer import normalize_plan
from ...presentation.formatting import summary_parts
from ...utils.errors import TfSummaryError
from ...utils.logging import get_logger
from ..utils import read_plan, exit_with_error

logger = get_logger("cli.summary")


@click.command()
@click.argument('plan_file', required=False, type=click.Path(exists=False))
@click.option('--json', 'as_json', is_flag=True, help='Output counts as JSON')
def summary(plan_file, as_json):
    """Print change counts for a Terraform plan (no cost estimation)."""
    try:
        plan_data = read_plan(plan_file)
        counts = summarize(normalize_plan(plan_data).resources)
        
        if as_json:
            click.echo(json.dumps(counts.model_dump(), indent=2))
        else:
            parts = [text for _, text in summary_parts(counts)] or ["No changes"]
            click.echo(f"Plan: {', '.join(parts)} ({counts.total} total)")
    
    except click.UsageError:
        raise
    except TfSummaryError as e:
        exit_with_error(str(e))
    except Exception as e:
        logger.error(f"Unexpected error: {e}", exc_info=True)
        exit_with_error(f"Summary failed: {e}")
