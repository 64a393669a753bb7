"""Fabric suitability scoring.

Implements the additive point model behind the readiness questionnaire:

    overall score      0-100 composite of Microsoft investments, Power BI usage,
                       real-time needs, data volume, and budget pressure
    category scores    four independent 0-10 scorers (Data, Analytics,
                       Governance, Culture)
    radar axes         Microsoft ecosystem fit and implementation readiness
                       (0-10) plus the six-axis suitability profile

Every scorer accumulates points and clamps once at the end. All functions are
pure and total over a valid AssessmentInput; unknown catalog strings simply
never match a rule.
"""

from fabric_readiness_assessment.core.arithmetic import clamp
from fabric_readiness_assessment.core.catalogs import (
    DATA_TYPE_SEMI_STRUCTURED,
    DATA_TYPE_STREAMING,
    DATA_TYPE_STRUCTURED,
    DATA_TYPE_UNSTRUCTURED,
    MS_365,
    MS_AZURE,
    MS_DYNAMICS_365,
    MS_POWER_BI,
)
from fabric_readiness_assessment.core.models import AssessmentInput, CategoryScores, RadarAxis

OVERALL_SCORE_MAX: float = 100.0
CATEGORY_SCORE_MAX: float = 10.0

# Composite score points per Microsoft investment
INVESTMENT_POINTS: dict[str, float] = {
    MS_AZURE: 15.0,
    MS_POWER_BI: 15.0,
    MS_DYNAMICS_365: 10.0,
    MS_365: 5.0,
}

POWER_BI_USAGE_FACTOR: float = 2.0
REAL_TIME_FACTOR: float = 1.5
BUDGET_FACTOR: float = 1.5

# Data volume tiers (inclusive lower bound -> points); last entry is the floor
_DATA_VOLUME_TIERS: list[tuple[int, float]] = [
    (7, 15.0),
    (4, 10.0),
    (1, 5.0),
]

# Data scorer: warehouse tiers
_MODERN_WAREHOUSES: frozenset[str] = frozenset({"Azure Synapse", "Azure SQL Data Warehouse"})
_LEGACY_MICROSOFT_WAREHOUSE = "SQL Server"
_NO_WAREHOUSE: frozenset[str] = frozenset({"None", ""})

# Data scorer: one point per recognised data type flag
_SCORED_DATA_TYPES: tuple[str, ...] = (
    DATA_TYPE_STRUCTURED,
    DATA_TYPE_SEMI_STRUCTURED,
    DATA_TYPE_UNSTRUCTURED,
    DATA_TYPE_STREAMING,
)

# Analytics scorer: BI tool tiers
_BI_TOOL_POINTS: dict[str, float] = {
    "Power BI": 3.0,
    "SQL Server Reporting Services": 2.0,
    "Excel": 2.0,
    "None": 1.0,
}

_ANALYTICS_INVESTMENT_POINTS: dict[str, float] = {
    MS_POWER_BI: 2.0,
    MS_AZURE: 1.0,
    MS_DYNAMICS_365: 1.0,
}

_GOVERNANCE_INVESTMENT_POINTS: dict[str, float] = {
    MS_AZURE: 2.0,
    MS_365: 1.0,
    MS_DYNAMICS_365: 1.0,
}

_GOVERNANCE_INFRASTRUCTURE_POINTS: dict[str, float] = {
    "Azure Data Factory": 1.0,
}

_ECOSYSTEM_INVESTMENT_POINTS: dict[str, float] = {
    MS_AZURE: 2.0,
    MS_POWER_BI: 1.0,
    MS_365: 1.0,
    MS_DYNAMICS_365: 1.0,
}

# Slider value that maps to one full point on a 3-point sub-scale (10 / 3)
_THIRD_OF_SCALE: float = 3.33

# Platform reference values on the suitability profile axes
PLATFORM_CAPABILITY_PROFILE: dict[str, float] = {
    "Microsoft Ecosystem Fit": 10.0,
    "Data Volume Capability": 9.0,
    "Real-Time Processing": 9.0,
    "Cost Efficiency": 7.0,
    "Security & Compliance": 9.0,
    "Integration Ease": 10.0,
}


def _points_for(values: frozenset[str], table: dict[str, float]) -> float:
    """Sum the points for every table entry present in values."""
    return sum(points for option, points in table.items() if option in values)


def data_volume_points(data_volume: int) -> float:
    """Return the composite-score points for a 1-10 data volume answer.

    Args:
        data_volume: Data volume slider value.

    Returns:
        15 for volumes of 7 and above, 10 for 4-6, otherwise 5.
    """
    for threshold, points in _DATA_VOLUME_TIERS:
        if data_volume >= threshold:
            return points
    return _DATA_VOLUME_TIERS[-1][1]


def compute_overall_score(assessment: AssessmentInput) -> float:
    """Compute the 0-100 Fabric suitability score.

    Args:
        assessment: Completed questionnaire answers.

    Returns:
        Composite suitability score clamped to 0.0-100.0.
    """
    score = _points_for(assessment.microsoft_investments, INVESTMENT_POINTS)
    score += assessment.power_bi_usage * POWER_BI_USAGE_FACTOR
    score += assessment.real_time_needs * REAL_TIME_FACTOR
    score += data_volume_points(assessment.data_volume)
    # Inverted scale: 1 is the tightest budget and earns the most points
    score += (10 - assessment.budget_constraint) * BUDGET_FACTOR
    return clamp(score, 0.0, OVERALL_SCORE_MAX)


# ---------------------------------------------------------------------------
# Category scorers
# ---------------------------------------------------------------------------


def score_data(assessment: AssessmentInput) -> float:
    """Data Integration score: warehouse fit, data variety, volume and velocity."""
    score = 0.0
    warehouse = assessment.data_warehouse_solution
    if warehouse in _MODERN_WAREHOUSES:
        score += 3.0
    elif warehouse == _LEGACY_MICROSOFT_WAREHOUSE:
        score += 2.0
    elif warehouse in _NO_WAREHOUSE:
        score += 1.0

    score += sum(1.0 for data_type in _SCORED_DATA_TYPES if data_type in assessment.data_types)
    score += min(2.0, assessment.data_volume / 5)
    score += min(2.0, assessment.real_time_needs / 5)
    return clamp(score, 0.0, CATEGORY_SCORE_MAX)


def score_analytics(assessment: AssessmentInput) -> float:
    """Analytics Capabilities score: BI tool, Power BI centrality, Microsoft analytics stack."""
    score = _BI_TOOL_POINTS.get(assessment.business_intelligence_tool, 0.0)
    score += min(3.0, assessment.power_bi_usage / _THIRD_OF_SCALE)
    score += _points_for(assessment.microsoft_investments, _ANALYTICS_INVESTMENT_POINTS)
    return clamp(score, 0.0, CATEGORY_SCORE_MAX)


def score_governance(assessment: AssessmentInput) -> float:
    """Governance Framework score.

    Fewer compliance regimes and lower sovereignty pressure make governance on
    the platform easier; Microsoft ecosystem products bring governance tooling
    the organisation already operates.
    """
    compliance_count = len(assessment.compliance_requirements)
    if compliance_count == 0:
        score = 2.0
    else:
        score = max(0.0, 2.0 - compliance_count * 0.5)

    score += min(3.0, (10 - assessment.data_sovereignty_needs) / _THIRD_OF_SCALE)
    score += _points_for(assessment.microsoft_investments, _GOVERNANCE_INVESTMENT_POINTS)
    score += _points_for(assessment.current_infrastructure, _GOVERNANCE_INFRASTRUCTURE_POINTS)
    return clamp(score, 0.0, CATEGORY_SCORE_MAX)


def score_culture(assessment: AssessmentInput) -> float:
    """Organizational Culture score.

    Microsoft adoption and Power BI centrality stand in for data culture; a
    longer runway and a looser budget leave room for change management.
    """
    score = min(3.0, float(len(assessment.microsoft_investments)))
    score += min(3.0, assessment.power_bi_usage / _THIRD_OF_SCALE)
    score += min(2.0, assessment.time_to_implementation / 5)
    score += min(2.0, assessment.budget_constraint / 5)
    return clamp(score, 0.0, CATEGORY_SCORE_MAX)


def compute_category_scores(assessment: AssessmentInput) -> CategoryScores:
    """Run all four category scorers.

    Args:
        assessment: Completed questionnaire answers.

    Returns:
        CategoryScores with each score in 0.0-10.0.
    """
    return CategoryScores(
        data=score_data(assessment),
        analytics=score_analytics(assessment),
        governance=score_governance(assessment),
        culture=score_culture(assessment),
    )


# ---------------------------------------------------------------------------
# Radar axes
# ---------------------------------------------------------------------------


def ecosystem_fit_score(assessment: AssessmentInput) -> float:
    """Microsoft Ecosystem Fit on a 0-10 scale."""
    score = assessment.power_bi_usage / 2
    score += _points_for(assessment.microsoft_investments, _ECOSYSTEM_INVESTMENT_POINTS)
    return clamp(score, 0.0, CATEGORY_SCORE_MAX)


def implementation_readiness_score(assessment: AssessmentInput) -> float:
    """Implementation Readiness on a 0-10 scale, centred on 5.

    Budget and timeline each swing the score by up to 2.5 points. Very high
    volume, very high real-time needs and heavy compliance each cost a point;
    broad Microsoft adoption and strong Power BI usage each add one.
    """
    score = 5.0
    score += (assessment.budget_constraint - 5) / 2
    score += (assessment.time_to_implementation - 5) / 2

    if assessment.data_volume > 8:
        score -= 1.0
    if assessment.real_time_needs > 8:
        score -= 1.0
    if len(assessment.compliance_requirements) > 3:
        score -= 1.0

    if len(assessment.microsoft_investments) >= 3:
        score += 1.0
    if assessment.power_bi_usage >= 7:
        score += 1.0

    return clamp(score, 0.0, CATEGORY_SCORE_MAX)


def readiness_radar(
    assessment: AssessmentInput,
    category_scores: CategoryScores,
) -> tuple[RadarAxis, ...]:
    """Build the six-axis readiness radar, each value rounded to one decimal.

    Args:
        assessment: Completed questionnaire answers.
        category_scores: Scores from compute_category_scores for the same input.

    Returns:
        Axes in display order: the four categories, ecosystem fit, and
        implementation readiness.
    """
    values = [
        ("Data Integration", category_scores.data),
        ("Analytics Capabilities", category_scores.analytics),
        ("Governance Framework", category_scores.governance),
        ("Organizational Culture", category_scores.culture),
        ("Microsoft Ecosystem Fit", ecosystem_fit_score(assessment)),
        ("Implementation Readiness", implementation_readiness_score(assessment)),
    ]
    return tuple(RadarAxis(label=label, value=round(value, 1)) for label, value in values)


def suitability_profile(assessment: AssessmentInput) -> tuple[RadarAxis, ...]:
    """Build the six-axis organisation profile paired with the platform reference.

    Args:
        assessment: Completed questionnaire answers.

    Returns:
        Axes in display order, each carrying the platform capability value as
        its reference.
    """
    investment_count = len(assessment.microsoft_investments)
    values = {
        "Microsoft Ecosystem Fit": min(
            10.0, investment_count * 1.5 + assessment.power_bi_usage / 2
        ),
        "Data Volume Capability": float(assessment.data_volume),
        "Real-Time Processing": float(assessment.real_time_needs),
        "Cost Efficiency": float(max(1, 11 - assessment.budget_constraint)),
        "Security & Compliance": min(
            10.0,
            5 + len(assessment.compliance_requirements) + assessment.data_sovereignty_needs / 2,
        ),
        "Integration Ease": float(min(10, investment_count + 2)),
    }
    return tuple(
        RadarAxis(label=label, value=value, reference=PLATFORM_CAPABILITY_PROFILE[label])
        for label, value in values.items()
    )
