"""Terminal renderer - colored plain-text summary for reviewers."""

from typing import List, Optional
import click
from ..contracts.plan_report import PlanReport, RenderOptions
from .formatting import ACTION_ICONS, format_cost, format_value, summary_parts

WIDTH = 72
VALUE_WIDTH = 40
DIFF_INDENT = " " * 15

ACTION_COLORS = {
    "create": "green",
    "update": "yellow",
    "delete": "red",
    "replace": "magenta",
}


def _rule() -> str:
    return click.style("─" * WIDTH, dim=True)


def _diff_lines(record) -> List[str]:
    lines = []
    for diff in record.diffs:
        from_str = format_value(diff.from_, VALUE_WIDTH)
        to_str = format_value(diff.to, VALUE_WIDTH)
        if diff.type == "add":
            lines.append(click.style(f"{DIFF_INDENT}+ {diff.field} = {to_str}", fg="green"))
        elif diff.type == "remove":
            lines.append(click.style(f"{DIFF_INDENT}- {diff.field} = {from_str}", fg="red"))
        else:
            lines.append(click.style(f"{DIFF_INDENT}~ {diff.field}: {from_str} → {to_str}", fg="yellow"))
    return lines


def render_terminal(report: PlanReport, options: Optional[RenderOptions] = None) -> str:
    """
    Render a PlanReport for a terminal.
    
    Styles are ANSI escapes from click.style; click.echo strips them when
    stdout is not a terminal.
    
    Args:
        report: Report to render
        options: Render options (summary_only hides the resource list)
        
    Returns:
        Rendered text
    """
    options = options or RenderOptions()
    lines = ["", click.style("Terraform Plan Summary", bold=True), _rule()]
    
    destructive = report.destructive
    if destructive:
        lines.append("")
        lines.append(click.style(" ⚠  DESTRUCTIVE CHANGES ", bg="red", fg="white", bold=True))
        for record in destructive:
            color = ACTION_COLORS.get(record.action)
            lines.append(click.style(
                f"  {ACTION_ICONS.get(record.action, ' ')} [{record.action_label}] {record.address}", fg=color
            ))
        lines.append("")
    
    if not options.summary_only:
        lines.extend(["", click.style("Resources:", bold=True), ""])
        for record in report.resources:
            color = ACTION_COLORS.get(record.action, "white")
            icon = ACTION_ICONS.get(record.action, " ")
            cost = ""
            if record.monthly_cost is not None:
                cost = click.style(f" ({format_cost(record.monthly_cost)})", fg="cyan")
            lines.append(click.style(f"  {icon} [{record.action_label:<7}] {record.address}", fg=color) + cost)
            lines.extend(_diff_lines(record))
    
    if report.total_monthly_cost:
        lines.extend(["", _rule()])
        lines.append(click.style(
            f"  Estimated monthly cost: ${report.total_monthly_cost:.2f}/mo", fg="cyan", bold=True
        ))
    
    lines.extend(["", _rule()])
    parts = [click.style(text, fg=ACTION_COLORS[action]) for action, text in summary_parts(report.summary)]
    if not parts:
        parts = ["No changes"]
    lines.append(f"  {click.style('Plan:', bold=True)} {', '.join(parts)} ({report.summary.total} total)")
    lines.append("")
    
    return "\n".join(lines)
