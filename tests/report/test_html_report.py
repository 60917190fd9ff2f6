"""Tests for HTML report generation."""

from tfsummary.contracts.plan_report import PlanReport, RenderOptions
from tfsummary.ingest.models import CanonicalRecord
from tfsummary.analysis.summary import summarize
from tfsummary.report.html import render_html


class TestHtmlReport:
    """Test HTML report output."""
    
    def test_page_structure(self, sample_report):
        html = render_html(sample_report)
        
        assert html.startswith("<!DOCTYPE html>")
        assert "<title>Terraform Plan Summary</title>" in html
        assert "⚠ DESTRUCTIVE CHANGES" in html
        assert "Estimated monthly cost: $93.59/mo" in html
        assert "4 total" in html
        assert "Generated by tfsummary" in html
        assert html.rstrip().endswith("</html>")
    
    def test_escapes_plan_strings(self):
        record = CanonicalRecord(
            address='aws_instance.x["<script>"]',
            action="update",
            action_label="update",
            diffs=[{"field": "user_data", "from": "<b>", "to": "&", "type": "change"}],
        )
        report = PlanReport(resources=[record], summary=summarize([record]))
        
        html = render_html(report)
        
        assert "<script>" not in html
        assert "&lt;script&gt;" in html
        assert "&lt;b&gt;" in html
        assert "&amp;" in html
    
    def test_summary_only_hides_cards(self, sample_report):
        full = render_html(sample_report)
        compact = render_html(sample_report, RenderOptions(summary_only=True))
        
        assert "aws_nat_gateway.main" in full
        assert "aws_nat_gateway.main" not in compact
    
    def test_no_warning_without_destructive(self):
        assert "DESTRUCTIVE" not in render_html(PlanReport())
