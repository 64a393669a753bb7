"""Business value projections for a Fabric adoption.

Derives the value-calculator figures from the answer record, the overall
suitability score, and the user-tunable BusinessParameters:

    cost savings            share of current annual costs, tiered by warehouse
    time-to-value           months to first value, floored at 3
    productivity hours      annual hours saved across knowledge workers
    3-year ROI              benefit versus estimated platform cost over 3 years
    risk reduction          5-10 score from compliance and ecosystem signals
    data-driven benefit     1-10 score from the overall score

Industry multipliers scale cost savings, time-to-value, and productivity.
All rounding is half-up.
"""

from fabric_readiness_assessment.core.arithmetic import clamp, round_half_up
from fabric_readiness_assessment.core.catalogs import MS_365, MS_AZURE, MS_POWER_BI
from fabric_readiness_assessment.core.industries import (
    IndustryMultipliers,
    get_industry_multipliers,
)
from fabric_readiness_assessment.core.models import (
    AssessmentInput,
    BusinessParameters,
    ValueMetrics,
)
from fabric_readiness_assessment.errors import ComputationError

# Warehouse tiers for the cost-savings base rate
LEGACY_WAREHOUSES: frozenset[str] = frozenset(
    {"SQL Server", "Oracle", "Legacy System", "Legacy Data Warehouse"}
)
COMPETITOR_WAREHOUSES: frozenset[str] = frozenset(
    {"Snowflake", "AWS Redshift", "Google BigQuery", "Competitor Platform", "Databricks"}
)

ECOSYSTEM_SAVINGS_BONUS: float = 0.05

BASELINE_TIME_TO_VALUE_MONTHS: float = 12.0
MIN_TIME_TO_VALUE_MONTHS: int = 3

# Hours saved per knowledge worker per year (overall score lower bound -> hours)
_PRODUCTIVITY_HOURS_TIERS: list[tuple[float, int]] = [
    (80.0, 52),  # one hour a week
    (60.0, 26),  # thirty minutes a week
    (0.0, 13),  # fifteen minutes a week
]

KNOWLEDGE_WORKER_FRACTION: float = 0.30

PROJECTION_YEARS: int = 3
IMPLEMENTATION_COST_FRACTION: float = 0.5
RUN_COST_FRACTION: float = 0.8

BASELINE_RISK_REDUCTION: int = 5
MAX_RISK_REDUCTION: int = 10


def cost_savings_percent(assessment: AssessmentInput, overall_score: float) -> float:
    """Return the projected annual saving as a fraction of current costs.

    Args:
        assessment: Completed questionnaire answers.
        overall_score: Fabric suitability score (0-100).

    Returns:
        Savings fraction before the industry multiplier is applied.
    """
    warehouse = assessment.data_warehouse_solution
    if warehouse in LEGACY_WAREHOUSES:
        percent = 0.25 + overall_score / 400
    elif warehouse in COMPETITOR_WAREHOUSES:
        percent = 0.15 + overall_score / 500
    else:
        percent = 0.10 + overall_score / 1000

    if MS_AZURE in assessment.microsoft_investments:
        percent += ECOSYSTEM_SAVINGS_BONUS
    if MS_POWER_BI in assessment.microsoft_investments:
        percent += ECOSYSTEM_SAVINGS_BONUS
    return percent


def time_to_value_months(
    assessment: AssessmentInput,
    multipliers: IndustryMultipliers,
) -> int:
    """Estimate months until the platform delivers value.

    Args:
        assessment: Completed questionnaire answers.
        multipliers: Industry scaling triple.

    Returns:
        Whole months, never below MIN_TIME_TO_VALUE_MONTHS.
    """
    months = BASELINE_TIME_TO_VALUE_MONTHS

    if MS_AZURE in assessment.microsoft_investments:
        months -= 2
    if MS_POWER_BI in assessment.microsoft_investments:
        months -= 1
    if assessment.power_bi_usage > 7:
        months -= 2

    if assessment.data_volume > 8:
        months += 2
    if assessment.real_time_needs > 8:
        months += 1
    if len(assessment.compliance_requirements) > 3:
        months += 2

    months *= multipliers.time_to_value
    return max(MIN_TIME_TO_VALUE_MONTHS, round_half_up(months))


def hours_per_knowledge_worker(overall_score: float) -> int:
    """Annual hours saved per knowledge worker for an overall score."""
    for threshold, hours in _PRODUCTIVITY_HOURS_TIERS:
        if overall_score >= threshold:
            return hours
    return _PRODUCTIVITY_HOURS_TIERS[-1][1]


def annual_productivity_hours(
    overall_score: float,
    organization_size: int,
    multipliers: IndustryMultipliers,
) -> int:
    """Annual hours saved across the organisation's knowledge workers."""
    hours = (
        organization_size
        * KNOWLEDGE_WORKER_FRACTION
        * hours_per_knowledge_worker(overall_score)
        * multipliers.productivity
    )
    return round_half_up(hours)


def three_year_roi(
    cost_savings: float,
    productivity_hours: int,
    parameters: BusinessParameters,
) -> int:
    """Return the 3-year ROI as a whole, signed percentage.

    Benefit is three years of cost savings plus productivity value. Cost is a
    one-off implementation charge of half the current annual cost plus three
    years of running cost at 80% of the remaining spend.

    Args:
        cost_savings: Projected annual cost savings.
        productivity_hours: Projected annual productivity hours.
        parameters: Business parameters supplying costs and hourly rate.

    Returns:
        ROI percentage rounded half-up.

    Raises:
        ComputationError: If the projected 3-year cost is zero or negative.
    """
    annual_costs = parameters.current_annual_costs
    productivity_value = productivity_hours * parameters.average_hourly_rate
    benefit = PROJECTION_YEARS * (cost_savings + productivity_value)
    cost = (
        IMPLEMENTATION_COST_FRACTION * annual_costs
        + PROJECTION_YEARS * RUN_COST_FRACTION * (annual_costs - cost_savings)
    )
    if cost <= 0:
        raise ComputationError(
            f"3-year platform cost must be positive to compute ROI, got {cost!r} "
            f"(current_annual_costs={annual_costs!r}, cost_savings={cost_savings!r})"
        )
    return round_half_up(100 * (benefit - cost) / cost)


def risk_reduction_score(assessment: AssessmentInput) -> int:
    """Risk reduction on a 5-10 scale."""
    score = BASELINE_RISK_REDUCTION
    if len(assessment.compliance_requirements) > 2:
        score += 1
    if assessment.data_sovereignty_needs > 7:
        score += 1
    if MS_AZURE in assessment.microsoft_investments:
        score += 1
    if MS_365 in assessment.microsoft_investments:
        score += 1
    if assessment.power_bi_usage > 7:
        score += 1
    return min(MAX_RISK_REDUCTION, score)


def data_driven_benefit_score(overall_score: float) -> int:
    """Data-driven decision benefit on a 1-10 scale."""
    return int(clamp(round_half_up(overall_score / 20 + 2), 1, 10))


def compute_value_metrics(
    assessment: AssessmentInput,
    overall_score: float,
    parameters: BusinessParameters,
) -> ValueMetrics:
    """Compute every value-calculator figure for one answer record.

    Args:
        assessment: Completed questionnaire answers; its industry selects the
            multipliers.
        overall_score: Fabric suitability score from compute_overall_score.
        parameters: Validated business parameters.

    Returns:
        ValueMetrics for the given inputs.

    Raises:
        ComputationError: If the ROI denominator is not positive.
    """
    multipliers = get_industry_multipliers(assessment.industry)

    savings_percent = cost_savings_percent(assessment, overall_score)
    cost_savings = round_half_up(
        parameters.current_annual_costs * savings_percent * multipliers.cost_savings
    )
    productivity_hours = annual_productivity_hours(
        overall_score, parameters.organization_size, multipliers
    )
    productivity_value = productivity_hours * parameters.average_hourly_rate

    return ValueMetrics(
        cost_savings_percent=savings_percent,
        cost_savings=cost_savings,
        time_to_value_months=time_to_value_months(assessment, multipliers),
        annual_productivity_hours=productivity_hours,
        productivity_value=productivity_value,
        three_year_roi=three_year_roi(cost_savings, productivity_hours, parameters),
        risk_reduction=risk_reduction_score(assessment),
        data_driven_benefit_score=data_driven_benefit_score(overall_score),
        annual_opportunity_cost=cost_savings + productivity_value,
    )
