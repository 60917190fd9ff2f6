"""Self-contained HTML report from PlanReport."""

from html import escape
from typing import List, Optional
from ..contracts.plan_report import PlanReport, RenderOptions
from ..presentation.formatting import format_cost, format_value

VALUE_WIDTH = 60

ACTION_COLORS = {
    "create": "#22c55e",
    "update": "#eab308",
    "delete": "#ef4444",
    "replace": "#a855f7",
}

STYLE = """
  * { margin: 0; padding: 0; box-sizing: border-box; }
  body { font-family: 'SF Mono', 'Fira Code', monospace; background: #0d1117; color: #c9d1d9; padding: 2rem; line-height: 1.6; }
  .container { max-width: 960px; margin: 0 auto; }
  h1 { font-size: 1.5rem; color: #f0f6fc; margin-bottom: 0.5rem; }
  .divider { border: none; border-top: 1px solid #21262d; margin: 1rem 0; }
  .warning { background: #3d1214; border: 1px solid #f85149; border-radius: 6px; padding: 1rem; margin: 1rem 0; }
  .warning-title { color: #f85149; font-weight: bold; margin-bottom: 0.5rem; }
  .warning-item { color: #f85149; margin-left: 1rem; }
  .resource { border: 1px solid #21262d; border-radius: 6px; margin: 0.5rem 0; padding: 0.75rem 1rem; background: #161b22; }
  .resource-header { display: flex; justify-content: space-between; align-items: center; }
  .action-badge { display: inline-block; padding: 0.15rem 0.5rem; border-radius: 4px; font-size: 0.75rem; font-weight: bold; color: #0d1117; margin-right: 0.5rem; }
  .address { color: #f0f6fc; }
  .cost { color: #58a6ff; font-size: 0.85rem; }
  .diffs { margin-top: 0.5rem; padding-top: 0.5rem; border-top: 1px solid #21262d; font-size: 0.85rem; }
  .diff-add { color: #3fb950; }
  .diff-remove { color: #f85149; }
  .diff-change { color: #d29922; }
  .summary-bar { display: flex; gap: 1.5rem; padding: 1rem; background: #161b22; border-radius: 6px; margin-top: 1rem; }
  .summary-item { font-weight: bold; }
  .cost-total { color: #58a6ff; font-size: 1.1rem; font-weight: bold; margin: 1rem 0; }
  .footer { margin-top: 2rem; color: #484f58; font-size: 0.75rem; }
"""


def _resource_card(record) -> List[str]:
    color = ACTION_COLORS.get(record.action, "#c9d1d9")
    cost = format_cost(record.monthly_cost)
    parts = [
        '  <div class="resource">',
        '    <div class="resource-header">',
        f'      <div><span class="action-badge" style="background:{color}">{escape(record.action_label)}</span>'
        f'<span class="address">{escape(record.address)}</span></div>',
    ]
    if cost:
        parts.append(f'      <span class="cost">{escape(cost)}</span>')
    parts.append('    </div>')
    
    if record.diffs:
        parts.append('    <div class="diffs">')
        for diff in record.diffs:
            field = escape(diff.field)
            from_str = escape(format_value(diff.from_, VALUE_WIDTH))
            to_str = escape(format_value(diff.to, VALUE_WIDTH))
            if diff.type == "add":
                parts.append(f'      <div class="diff-add">+ {field} = {to_str}</div>')
            elif diff.type == "remove":
                parts.append(f'      <div class="diff-remove">- {field} = {from_str}</div>')
            else:
                parts.append(f'      <div class="diff-change">~ {field}: {from_str} → {to_str}</div>')
        parts.append('    </div>')
    
    parts.append('  </div>')
    return parts


def render_html(report: PlanReport, options: Optional[RenderOptions] = None) -> str:
    """
    Render a PlanReport as a standalone HTML page.
    
    All plan-derived strings are HTML-escaped.
    """
    options = options or RenderOptions()
    summary = report.summary
    
    parts = [
        "<!DOCTYPE html>",
        '<html lang="en">',
        "<head>",
        '<meta charset="UTF-8">',
        '<meta name="viewport" content="width=device-width, initial-scale=1.0">',
        "<title>Terraform Plan Summary</title>",
        f"<style>{STYLE}</style>",
        "</head>",
        "<body>",
        '<div class="container">',
        "  <h1>Terraform Plan Summary</h1>",
        '  <hr class="divider">',
    ]
    
    destructive = report.destructive
    if destructive:
        parts.append('  <div class="warning">')
        parts.append('    <div class="warning-title">⚠ DESTRUCTIVE CHANGES</div>')
        for record in destructive:
            parts.append(
                f'    <div class="warning-item">{escape(record.action_label)} {escape(record.address)}</div>'
            )
        parts.append('  </div>')
    
    if not options.summary_only:
        for record in report.resources:
            parts.extend(_resource_card(record))
    
    if report.total_monthly_cost:
        parts.append(
            f'  <div class="cost-total">Estimated monthly cost: ${report.total_monthly_cost:.2f}/mo</div>'
        )
    
    bar = []
    if summary.create:
        bar.append(f'<span class="summary-item" style="color:{ACTION_COLORS["create"]}">+{summary.create} create</span>')
    if summary.update:
        bar.append(f'<span class="summary-item" style="color:{ACTION_COLORS["update"]}">~{summary.update} update</span>')
    if summary.replace:
        bar.append(f'<span class="summary-item" style="color:{ACTION_COLORS["replace"]}">±{summary.replace} replace</span>')
    if summary.delete:
        bar.append(f'<span class="summary-item" style="color:{ACTION_COLORS["delete"]}">-{summary.delete} destroy</span>')
    bar.append(f'<span class="summary-item" style="color:#8b949e">{summary.total} total</span>')
    
    parts.append(f'  <div class="summary-bar">{"".join(bar)}</div>')
    parts.append('  <div class="footer">Generated by tfsummary</div>')
    parts.append("</div>")
    parts.append("</body>")
    parts.append("</html>")
    
    return "\n".join(parts)
