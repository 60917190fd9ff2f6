"""Shared fixtures."""

import json
from pathlib import Path
import pytest
from tfsummary.analysis.summary import summarize, total_monthly_cost
from tfsummary.contracts.plan_report import PlanReport
from tfsummary.ingest.plan_normalizer import normalize_plan

FIXTURES = Path(__file__).parent / "fixtures"

ENV_VARS = ("TFSUMMARY_REGION", "TFSUMMARY_COST_PROVIDER", "TFSUMMARY_CACHE_DIR", "TFSUMMARY_NO_COST")


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path, monkeypatch):
    """Keep user/project config and TFSUMMARY_* variables out of tests."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    work = tmp_path / "work"
    work.mkdir()
    monkeypatch.chdir(work)


@pytest.fixture
def sample_plan_path():
    return FIXTURES / "plan.sample.json"


@pytest.fixture
def sample_plan(sample_plan_path):
    with open(sample_plan_path, 'r', encoding='utf-8') as f:
        return json.load(f)


@pytest.fixture
def sample_report(sample_plan):
    """Report for the sample plan with costs on two resources."""
    records = normalize_plan(sample_plan).resources
    for record in records:
        if record.address == "aws_nat_gateway.main":
            record.monthly_cost = 32.85
        elif record.address == "aws_instance.web":
            record.monthly_cost = 60.74
    return PlanReport(
        resources=records,
        summary=summarize(records),
        total_monthly_cost=total_monthly_cost(records),
        region="us-east-1",
        cost_estimated=True,
    )
