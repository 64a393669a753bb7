"""Test fixtures for fabric-readiness-assessment.

Provides two reference answer records used across the suite:

    scenario A: Azure + Power BI shop with heavy Power BI use and a tight
                budget (overall score 79, Good fit)
    scenario B: no Microsoft footprint, minimal needs, loose budget
                (overall score 8.5, Not recommended)
"""

from typing import Any

import pytest

from fabric_readiness_assessment.core.catalogs import (
    DATA_TYPE_SEMI_STRUCTURED,
    DATA_TYPE_STRUCTURED,
)
from fabric_readiness_assessment.core.engine import AssessmentEngine
from fabric_readiness_assessment.core.models import AssessmentInput, BusinessParameters
from fabric_readiness_assessment.settings import Settings


def make_answers(**overrides: Any) -> dict[str, Any]:
    """Build a neutral answer mapping with every scale at 5 and no selections.

    Args:
        **overrides: Field values to replace.

    Returns:
        Answer dict keyed by snake_case field name.
    """
    answers: dict[str, Any] = {
        "current_infrastructure": frozenset(),
        "data_warehouse_solution": "",
        "business_intelligence_tool": "",
        "data_types": frozenset(),
        "data_volume": 5,
        "real_time_needs": 5,
        "microsoft_investments": frozenset(),
        "power_bi_usage": 5,
        "budget_constraint": 5,
        "time_to_implementation": 5,
        "compliance_requirements": frozenset(),
        "data_sovereignty_needs": 5,
        "industry": "general",
    }
    answers.update(overrides)
    return answers


def make_input(**overrides: Any) -> AssessmentInput:
    """Build a validated AssessmentInput from make_answers defaults plus overrides."""
    return AssessmentInput(**make_answers(**overrides))


# ---------------------------------------------------------------------------
# Reference scenarios
# ---------------------------------------------------------------------------


@pytest.fixture()
def scenario_a() -> AssessmentInput:
    """Microsoft-centric organisation: overall score 79."""
    return make_input(
        current_infrastructure=frozenset({"Azure", "SQL Server"}),
        data_warehouse_solution="Azure Synapse",
        business_intelligence_tool="Power BI",
        data_types=frozenset({DATA_TYPE_STRUCTURED, DATA_TYPE_SEMI_STRUCTURED}),
        data_volume=8,
        real_time_needs=5,
        microsoft_investments=frozenset({"Azure", "Power BI"}),
        power_bi_usage=8,
        budget_constraint=3,
        time_to_implementation=6,
        compliance_requirements=frozenset({"GDPR"}),
        data_sovereignty_needs=4,
    )


@pytest.fixture()
def scenario_b() -> AssessmentInput:
    """Organisation with no Microsoft footprint: overall score 8.5."""
    return make_input(
        current_infrastructure=frozenset({"On-premises servers"}),
        data_warehouse_solution="Oracle",
        business_intelligence_tool="Tableau",
        data_types=frozenset({DATA_TYPE_STRUCTURED}),
        data_volume=1,
        real_time_needs=1,
        microsoft_investments=frozenset(),
        power_bi_usage=1,
        budget_constraint=10,
        time_to_implementation=2,
        compliance_requirements=frozenset({"GDPR", "HIPAA", "SOX", "PCI DSS"}),
        data_sovereignty_needs=9,
    )


# ---------------------------------------------------------------------------
# Engine and parameters
# ---------------------------------------------------------------------------


@pytest.fixture()
def settings() -> Settings:
    """Settings with the stock defaults, independent of the environment."""
    return Settings(
        default_organization_size=500,
        default_current_annual_costs=500_000.0,
        default_average_hourly_rate=75.0,
        default_industry="general",
        default_competitor="aws",
        report_template_version="1.0",
    )


@pytest.fixture()
def default_params() -> BusinessParameters:
    """Value-calculator defaults: 500 employees, 500,000 annual cost, 75/hour."""
    return BusinessParameters()


@pytest.fixture()
def engine(settings: Settings) -> AssessmentEngine:
    """Provide an AssessmentEngine bound to the stock settings."""
    return AssessmentEngine(settings)


@pytest.fixture()
def input_factory() -> Any:
    """Provide make_input so tests can build variations of the neutral record."""
    return make_input


@pytest.fixture()
def answers_factory() -> Any:
    """Provide make_answers for tests that validate raw mappings."""
    return make_answers
