"""Tier, readiness, and recommendation copy for the Fabric assessment.

All prose lives in declarative tables keyed by enum; the selector functions
only threshold scores and look entries up.

Overall-score tiers (inclusive lower bound):
    80-100 -> Excellent fit
    60-79  -> Good fit
    40-59  -> Partial fit
    0-39   -> Not recommended

Next-step bands use their own thresholds (70 and 50). Readiness banding of
the summed category scores uses 80% / 60%. Per-category risk banding uses
7.5 / 5 / 2.5.
"""

from dataclasses import dataclass
from enum import Enum

from fabric_readiness_assessment.core.models import (
    AssessmentInput,
    Category,
    CategoryScores,
    ExecutiveSummary,
    ReadinessLevel,
    RiskLevel,
    Tier,
    TierRecommendation,
)

# ---------------------------------------------------------------------------
# Overall-score tiers
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class TierDefinition:
    """Static copy for one suitability tier."""

    label: str
    recommendation_text: str


_TIER_THRESHOLDS: list[tuple[float, Tier]] = [
    (80.0, Tier.EXCELLENT_FIT),
    (60.0, Tier.GOOD_FIT),
    (40.0, Tier.PARTIAL_FIT),
    (0.0, Tier.NOT_RECOMMENDED),
]

TIER_DEFINITIONS: dict[Tier, TierDefinition] = {
    Tier.EXCELLENT_FIT: TierDefinition(
        label="Excellent fit",
        recommendation_text=(
            "Microsoft Fabric is an excellent fit for your organization. Your strong "
            "Microsoft ecosystem presence, data needs, and requirements align very well "
            "with Fabric's capabilities."
        ),
    ),
    Tier.GOOD_FIT: TierDefinition(
        label="Good fit",
        recommendation_text=(
            "Microsoft Fabric is a good fit for your organization. With some adjustments "
            "or additional considerations, Fabric could provide significant value to your "
            "data strategy."
        ),
    ),
    Tier.PARTIAL_FIT: TierDefinition(
        label="Partial fit",
        recommendation_text=(
            "Microsoft Fabric might be suitable for parts of your data strategy, but you "
            "should carefully evaluate specific use cases. Consider a hybrid approach with "
            "other technologies."
        ),
    ),
    Tier.NOT_RECOMMENDED: TierDefinition(
        label="Not recommended",
        recommendation_text=(
            "Microsoft Fabric may not be the optimal solution for your current needs. Other "
            "data platforms might better align with your requirements and existing "
            "infrastructure."
        ),
    ),
}


class NextStepBand(str, Enum):
    """Next-step list selected from the overall score."""

    ADOPT = "adopt"
    EVALUATE = "evaluate"
    EXPLORE_ALTERNATIVES = "explore_alternatives"


_NEXT_STEP_THRESHOLDS: list[tuple[float, NextStepBand]] = [
    (70.0, NextStepBand.ADOPT),
    (50.0, NextStepBand.EVALUATE),
    (0.0, NextStepBand.EXPLORE_ALTERNATIVES),
]

NEXT_STEPS: dict[NextStepBand, tuple[str, ...]] = {
    NextStepBand.ADOPT: (
        "Schedule a Microsoft Fabric demonstration with a Microsoft representative",
        "Identify a small pilot project to test Fabric capabilities",
        "Evaluate current data assets for migration to Microsoft Fabric",
        "Review Microsoft Fabric pricing and licensing options",
        "Develop a phased implementation plan",
    ),
    NextStepBand.EVALUATE: (
        "Conduct a deeper technical evaluation of Microsoft Fabric against specific use cases",
        "Compare Microsoft Fabric with alternative solutions for your priority scenarios",
        "Consider a hybrid approach using Fabric alongside existing solutions",
        "Identify skill gaps and training needs for potential Fabric adoption",
        "Evaluate total cost of ownership for a partial Fabric implementation",
    ),
    NextStepBand.EXPLORE_ALTERNATIVES: (
        "Explore alternative data platforms that better match your requirements",
        "Consider Microsoft Fabric only for specific use cases where it excels",
        "Maintain awareness of Microsoft Fabric roadmap for future re-evaluation",
        "Evaluate how to better leverage your existing data platform investments",
        "Consider consulting with a data platform specialist for targeted recommendations",
    ),
}


def tier_for_score(overall_score: float) -> Tier:
    """Map an overall score to its suitability tier."""
    for threshold, tier in _TIER_THRESHOLDS:
        if overall_score >= threshold:
            return tier
    return Tier.NOT_RECOMMENDED


def next_step_band(overall_score: float) -> NextStepBand:
    """Map an overall score to its next-step list."""
    for threshold, band in _NEXT_STEP_THRESHOLDS:
        if overall_score >= threshold:
            return band
    return NextStepBand.EXPLORE_ALTERNATIVES


def select_tier(overall_score: float) -> TierRecommendation:
    """Select the tier label, recommendation prose, and next steps for a score.

    Args:
        overall_score: Fabric suitability score (0-100).

    Returns:
        TierRecommendation for the score.
    """
    tier = tier_for_score(overall_score)
    definition = TIER_DEFINITIONS[tier]
    return TierRecommendation(
        tier=tier,
        label=definition.label,
        recommendation_text=definition.recommendation_text,
        next_steps=NEXT_STEPS[next_step_band(overall_score)],
    )


# ---------------------------------------------------------------------------
# Readiness and risk banding
# ---------------------------------------------------------------------------

_READINESS_THRESHOLDS: list[tuple[int, ReadinessLevel]] = [
    (80, ReadinessLevel.HIGH),
    (60, ReadinessLevel.MEDIUM),
]

_RISK_THRESHOLDS: list[tuple[float, RiskLevel]] = [
    (7.5, RiskLevel.LOW),
    (5.0, RiskLevel.MEDIUM),
    (2.5, RiskLevel.HIGH),
]

CATEGORY_LABELS: dict[Category, str] = {
    Category.DATA: "Data Integration",
    Category.ANALYTICS: "Analytics Capabilities",
    Category.GOVERNANCE: "Governance Framework",
    Category.CULTURE: "Organizational Culture",
}


def readiness_level(category_scores: CategoryScores) -> ReadinessLevel:
    """Band the summed category scores (as a percentage of 40) into High/Medium/Low."""
    for threshold, level in _READINESS_THRESHOLDS:
        if category_scores.percentage >= threshold:
            return level
    return ReadinessLevel.LOW


def risk_level(category_score: float) -> RiskLevel:
    """Band one 0-10 category score into an adoption risk level."""
    for threshold, level in _RISK_THRESHOLDS:
        if category_score >= threshold:
            return level
    return RiskLevel.EXTREME


def category_risks(category_scores: CategoryScores) -> dict[Category, RiskLevel]:
    """Return the adoption risk level for every category."""
    return {category: risk_level(score) for category, score in category_scores.as_dict().items()}


# ---------------------------------------------------------------------------
# Executive summary
# ---------------------------------------------------------------------------

# Category score below which a category gets a targeted recommendation
IMPROVEMENT_THRESHOLD: float = 7.0

CATEGORY_RECOMMENDATIONS: dict[Category, str] = {
    Category.DATA: (
        "Enhance data integration capabilities through Microsoft Fabric's Data Factory "
        "and lakehouse architecture"
    ),
    Category.ANALYTICS: (
        "Implement Power BI reporting and Synapse Analytics to strengthen analytical "
        "capabilities"
    ),
    Category.GOVERNANCE: (
        "Establish robust data governance utilizing Microsoft Purview integration with Fabric"
    ),
    Category.CULTURE: (
        "Develop a data culture transformation program with skill development tracks"
    ),
}

MAINTAIN_EXCELLENCE_RECOMMENDATION = (
    "Focus on optimizing Microsoft Fabric implementation to maintain current excellence"
)

_ROI_OUTLOOKS: list[tuple[int, str]] = [
    (75, "High ROI potential within 6-12 months"),
    (50, "Moderate ROI potential within 12-18 months"),
    (0, "Long-term ROI potential, 18+ months with proper implementation"),
]


def roi_outlook(readiness_percentage: int) -> str:
    """Return the qualitative ROI outlook for a category readiness percentage."""
    for threshold, outlook in _ROI_OUTLOOKS:
        if readiness_percentage >= threshold:
            return outlook
    return _ROI_OUTLOOKS[-1][1]


def executive_summary(category_scores: CategoryScores) -> ExecutiveSummary:
    """Summarise readiness, strongest and weakest categories, and recommendations.

    Ties for strongest or weakest category resolve to the earlier category in
    display order (Data, Analytics, Governance, Culture).

    Args:
        category_scores: Output of compute_category_scores.

    Returns:
        ExecutiveSummary for the scores.
    """
    scores = category_scores.as_dict()
    top_strength = max(scores, key=lambda category: scores[category])
    top_opportunity = min(scores, key=lambda category: scores[category])

    recommendations = tuple(
        CATEGORY_RECOMMENDATIONS[category]
        for category, score in scores.items()
        if score < IMPROVEMENT_THRESHOLD
    )

    return ExecutiveSummary(
        readiness_level=readiness_level(category_scores),
        readiness_percentage=category_scores.percentage,
        top_strength=CATEGORY_LABELS[top_strength],
        top_opportunity=CATEGORY_LABELS[top_opportunity],
        roi_outlook=roi_outlook(category_scores.percentage),
        key_recommendations=recommendations or (MAINTAIN_EXCELLENCE_RECOMMENDATION,),
    )


# ---------------------------------------------------------------------------
# Findings copy
# ---------------------------------------------------------------------------


def fit_factors(assessment: AssessmentInput) -> tuple[str, ...]:
    """List the answers that argue in favour of Fabric adoption."""
    factors: list[str] = []
    if assessment.microsoft_investments:
        investments = ", ".join(sorted(assessment.microsoft_investments))
        factors.append(f"Existing Microsoft investments: {investments}")
    if assessment.power_bi_usage > 7:
        factors.append("Strong Power BI utilization is a significant advantage for Fabric adoption")
    if assessment.data_volume > 7:
        factors.append(
            "Your high data volume aligns well with Fabric's enterprise-scale capabilities"
        )
    if assessment.real_time_needs > 7:
        factors.append(
            "Your real-time analytics needs match Fabric's streaming analytics capabilities"
        )
    if assessment.budget_constraint < 5:
        factors.append(
            "Microsoft Fabric could provide cost efficiencies for your budget constraints"
        )
    return tuple(factors)


def assessment_narrative(assessment: AssessmentInput) -> tuple[str, ...]:
    """Return the four findings paragraphs of the detailed report.

    Paragraphs cover, in order: Microsoft ecosystem, data volume, real-time
    analytics, and compliance (with a sovereignty caveat when needed).
    """
    if len(assessment.microsoft_investments) > 2:
        ecosystem = (
            "Your organization has significant Microsoft investments, which enhances the "
            "value proposition of Microsoft Fabric."
        )
    else:
        ecosystem = (
            "Your organization has limited Microsoft investments, which may reduce the "
            "immediate benefits of Microsoft Fabric."
        )

    if assessment.data_volume > 7:
        volume = (
            "Your high data volume requirements align well with Microsoft Fabric's "
            "scalable architecture."
        )
    elif assessment.data_volume > 4:
        volume = (
            "Your moderate data volume needs can be effectively addressed by Microsoft Fabric."
        )
    else:
        volume = (
            "Your lower data volume needs might be served by simpler solutions than "
            "Microsoft Fabric."
        )

    if assessment.real_time_needs > 7:
        real_time = (
            "Your significant real-time analytics requirements match well with Microsoft "
            "Fabric's streaming capabilities."
        )
    else:
        real_time = (
            "Your moderate to low real-time analytics needs can be met by Microsoft Fabric, "
            "though this may not be a decisive factor."
        )

    if len(assessment.compliance_requirements) > 3:
        compliance = (
            "Your extensive compliance requirements can be addressed by Microsoft Fabric's "
            "governance capabilities."
        )
    else:
        compliance = (
            "Your compliance requirements appear manageable within Microsoft Fabric's "
            "framework."
        )
    if assessment.data_sovereignty_needs > 8:
        compliance += (
            " High data sovereignty needs may require careful consideration of Microsoft's "
            "regional datacenter availability."
        )

    return (ecosystem, volume, real_time, compliance)
