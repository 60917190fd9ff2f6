"""Markdown report generation from PlanReport."""

from typing import Optional
from ..contracts.plan_report import PlanReport, RenderOptions
from ..presentation.formatting import ACTION_ICONS, format_cost, format_value, summary_parts

VALUE_WIDTH = 60


def _code(value: str) -> str:
    """Inline code span that survives backticks in the value."""
    fence = "``" if "`" in value else "`"
    return f"{fence}{value}{fence}"


def render_markdown(report: PlanReport, options: Optional[RenderOptions] = None) -> str:
    """
    Render a PlanReport as Markdown (suitable for PR comments).
    
    Args:
        report: Report to render
        options: Render options (summary_only hides the resource list)
        
    Returns:
        Markdown text
    """
    options = options or RenderOptions()
    summary = report.summary
    sections = []
    
    sections.append("# Terraform Plan Summary")
    sections.append("")
    
    sections.append("## Summary")
    sections.append("")
    sections.append("| Action | Count |")
    sections.append("| --- | ---: |")
    sections.append(f"| Create | {summary.create} |")
    sections.append(f"| Update | {summary.update} |")
    sections.append(f"| Replace | {summary.replace} |")
    sections.append(f"| Destroy | {summary.delete} |")
    sections.append(f"| **Total** | **{summary.total}** |")
    sections.append("")
    
    destructive = report.destructive
    if destructive:
        sections.append("## ⚠ Destructive Changes")
        sections.append("")
        for record in destructive:
            sections.append(f"- **{record.action_label}** {_code(record.address)}")
        sections.append("")
    
    if not options.summary_only:
        sections.append("## Resources")
        sections.append("")
        if not report.resources:
            sections.append("No changes.")
            sections.append("")
        for record in report.resources:
            icon = ACTION_ICONS.get(record.action, " ")
            line = f"- `{icon}` **{record.action_label}** {_code(record.address)}"
            if record.monthly_cost is not None:
                line += f" ({format_cost(record.monthly_cost)})"
            sections.append(line)
            for diff in record.diffs:
                from_str = _code(format_value(diff.from_, VALUE_WIDTH))
                to_str = _code(format_value(diff.to, VALUE_WIDTH))
                if diff.type == "add":
                    sections.append(f"  - + {_code(diff.field)} = {to_str}")
                elif diff.type == "remove":
                    sections.append(f"  - - {_code(diff.field)} = {from_str}")
                else:
                    sections.append(f"  - ~ {_code(diff.field)}: {from_str} → {to_str}")
        sections.append("")
    
    if report.total_monthly_cost:
        sections.append(f"**Estimated monthly cost:** ${report.total_monthly_cost:.2f}/mo")
        sections.append("")
    
    parts = [text for _, text in summary_parts(summary)] or ["No changes"]
    sections.append(f"**Plan:** {', '.join(parts)} ({summary.total} total)")
    sections.append("")
    
    return "\n".join(sections)
