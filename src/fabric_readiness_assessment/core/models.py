"""Input and result models for the Fabric readiness assessment.

AssessmentInput is the single answer record produced by the questionnaire.
Every derived record is frozen: scores are computed once per input and never
mutated afterwards.
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator
from pydantic.alias_generators import to_camel

from fabric_readiness_assessment.core.arithmetic import round_half_up
from fabric_readiness_assessment.core.catalogs import SCALE_MAX, SCALE_MIN
from fabric_readiness_assessment.core.industries import DEFAULT_INDUSTRY
from fabric_readiness_assessment.errors import InvalidParameterError

# Maximum of the four summed category scores (4 x 10)
CATEGORY_TOTAL_MAX: float = 40.0


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------


class Tier(str, Enum):
    """Suitability tier selected from the overall score."""

    EXCELLENT_FIT = "excellent_fit"
    GOOD_FIT = "good_fit"
    PARTIAL_FIT = "partial_fit"
    NOT_RECOMMENDED = "not_recommended"


class ReadinessLevel(str, Enum):
    """Readiness banding of the summed category scores."""

    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"


class RiskLevel(str, Enum):
    """Adoption risk banding of a single category score."""

    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"
    EXTREME = "Extreme"


class ComparisonOutcome(str, Enum):
    """Result of comparing the overall score with one competitor score."""

    SIGNIFICANTLY_BETTER = "significantly_better"
    SOMEWHAT_BETTER = "somewhat_better"
    COMPARABLE = "comparable"
    SIGNIFICANTLY_WORSE = "significantly_worse"


class Category(str, Enum):
    """The four readiness categories."""

    DATA = "data"
    ANALYTICS = "analytics"
    GOVERNANCE = "governance"
    CULTURE = "culture"


# ---------------------------------------------------------------------------
# Input model
# ---------------------------------------------------------------------------

ScaleValue = Annotated[int, Field(ge=SCALE_MIN, le=SCALE_MAX)]


class AssessmentInput(BaseModel):
    """A completed questionnaire answer record.

    Set-valued answers are stored as frozensets; any string is accepted but
    only catalog values match scoring rules. Scale answers are integers 1-10.
    Accepts either snake_case field names or the questionnaire's camelCase
    keys (e.g., ``currentInfrastructure``).
    """

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        alias_generator=to_camel,
    )

    current_infrastructure: frozenset[str]
    data_warehouse_solution: str
    business_intelligence_tool: str
    data_types: frozenset[str]
    data_volume: ScaleValue
    real_time_needs: ScaleValue
    microsoft_investments: frozenset[str]
    power_bi_usage: ScaleValue
    budget_constraint: ScaleValue
    time_to_implementation: ScaleValue
    compliance_requirements: frozenset[str]
    data_sovereignty_needs: ScaleValue
    industry: str = DEFAULT_INDUSTRY

    @field_validator("industry", mode="before")
    @classmethod
    def default_industry(cls, value: Any) -> Any:
        """Treat a missing or blank industry as the general profile."""
        if value is None or (isinstance(value, str) and not value.strip()):
            return DEFAULT_INDUSTRY
        return value

    @field_validator("data_warehouse_solution", "business_intelligence_tool", mode="before")
    @classmethod
    def blank_choice(cls, value: Any) -> Any:
        """An unanswered single-select question is stored as an empty string."""
        return "" if value is None else value


# ---------------------------------------------------------------------------
# Derived score records
# ---------------------------------------------------------------------------


class CategoryScores(BaseModel):
    """The four 0-10 category scores."""

    model_config = ConfigDict(frozen=True)

    data: float = Field(..., ge=0.0, le=10.0)
    analytics: float = Field(..., ge=0.0, le=10.0)
    governance: float = Field(..., ge=0.0, le=10.0)
    culture: float = Field(..., ge=0.0, le=10.0)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def total(self) -> float:
        """Sum of the four category scores (0-40)."""
        return self.data + self.analytics + self.governance + self.culture

    @computed_field  # type: ignore[prop-decorator]
    @property
    def percentage(self) -> int:
        """Summed category scores as a whole percentage of the 40-point maximum."""
        return round_half_up(self.total / CATEGORY_TOTAL_MAX * 100)

    def as_dict(self) -> dict[Category, float]:
        """Return the scores keyed by Category, in display order."""
        return {
            Category.DATA: self.data,
            Category.ANALYTICS: self.analytics,
            Category.GOVERNANCE: self.governance,
            Category.CULTURE: self.culture,
        }


class CompetitorScore(BaseModel):
    """Fit score for one alternative platform plus its static profile."""

    model_config = ConfigDict(frozen=True)

    key: str
    name: str
    score: float = Field(..., ge=0.0, le=100.0)
    strengths: tuple[str, ...]
    weaknesses: tuple[str, ...]
    consider_if: tuple[str, ...]


@dataclass(frozen=True)
class BusinessParameters:
    """User-tunable inputs of the value calculator.

    Attributes:
        organization_size: Number of employees (> 0).
        current_annual_costs: Current annual data platform spend (> 0).
        average_hourly_rate: Loaded hourly cost of a knowledge worker (> 0).
    """

    organization_size: int = 500
    current_annual_costs: float = 500_000.0
    average_hourly_rate: float = 75.0

    def __post_init__(self) -> None:
        """Reject non-positive or non-finite parameters before any metric is computed.

        Raises:
            InvalidParameterError: If any parameter is zero, negative, NaN or infinite.
        """
        for name in ("organization_size", "current_annual_costs", "average_hourly_rate"):
            value = getattr(self, name)
            if not math.isfinite(value) or value <= 0:
                raise InvalidParameterError(
                    f"{name} must be a finite number greater than 0, got {value!r}"
                )

    @classmethod
    def clamped(
        cls,
        organization_size: float,
        current_annual_costs: float,
        average_hourly_rate: float,
    ) -> "BusinessParameters":
        """Build parameters from raw slider values, clamping each to at least 1.

        Args:
            organization_size: Raw employee count; truncated to an integer.
            current_annual_costs: Raw annual cost.
            average_hourly_rate: Raw hourly rate.

        Returns:
            A valid BusinessParameters instance.

        Raises:
            InvalidParameterError: If any raw value is NaN or infinite.
        """
        raw = (organization_size, current_annual_costs, average_hourly_rate)
        if not all(math.isfinite(value) for value in raw):
            raise InvalidParameterError(f"Business parameters must be finite, got {raw!r}")
        return cls(
            organization_size=max(1, int(organization_size)),
            current_annual_costs=max(1.0, float(current_annual_costs)),
            average_hourly_rate=max(1.0, float(average_hourly_rate)),
        )


class ValueMetrics(BaseModel):
    """Business-case projections derived from the answers and overall score."""

    model_config = ConfigDict(frozen=True)

    cost_savings_percent: float
    cost_savings: int
    time_to_value_months: int = Field(..., ge=3)
    annual_productivity_hours: int = Field(..., ge=0)
    productivity_value: float
    three_year_roi: int
    risk_reduction: int = Field(..., ge=0, le=10)
    data_driven_benefit_score: int = Field(..., ge=1, le=10)
    annual_opportunity_cost: float


class RadarAxis(BaseModel):
    """One axis of a radar profile.

    Attributes:
        label: Axis display label.
        value: Organisation value on a 0-10 scale.
        reference: Optional platform reference value on the same scale.
    """

    model_config = ConfigDict(frozen=True)

    label: str
    value: float = Field(..., ge=0.0, le=10.0)
    reference: float | None = None


class ExecutiveSummary(BaseModel):
    """Headline readiness findings derived from the category scores."""

    model_config = ConfigDict(frozen=True)

    readiness_level: ReadinessLevel
    readiness_percentage: int
    top_strength: str
    top_opportunity: str
    roi_outlook: str
    key_recommendations: tuple[str, ...]


@dataclass(frozen=True)
class TierRecommendation:
    """Recommendation copy selected for an overall score.

    Attributes:
        tier: Suitability tier.
        label: Display label (e.g., 'Good fit').
        recommendation_text: Recommendation prose for the tier.
        next_steps: Ordered next-step list for the score's next-step band.
    """

    tier: Tier
    label: str
    recommendation_text: str
    next_steps: tuple[str, ...]


class AssessmentResult(BaseModel):
    """Everything the dashboards, comparison view and report consume."""

    model_config = ConfigDict(frozen=True)

    input: AssessmentInput
    parameters: BusinessParameters
    overall_score: float = Field(..., ge=0.0, le=100.0)
    category_scores: CategoryScores
    competitor_scores: tuple[CompetitorScore, ...]
    value_metrics: ValueMetrics
    tier: TierRecommendation
    category_risks: dict[Category, RiskLevel]
    readiness_radar: tuple[RadarAxis, ...]
    suitability_profile: tuple[RadarAxis, ...]
    fit_factors: tuple[str, ...]
    executive_summary: ExecutiveSummary
    narrative: tuple[str, ...]
