"""Alternative-platform scoring and comparison for the Fabric assessment.

Each alternative has its own base score and an independent set of bonus
rules evaluated against the same answer record:

    AWS           cloud generalist, base 65
    Snowflake     cloud-agnostic warehouse, base 70
    Databricks    data-science-oriented lakehouse, base 60
    On-Premise    self-hosted option, base 40

Strengths, weaknesses, and "consider if" guidance are static copy keyed by
competitor; only the score is derived from the answers.
"""

from collections.abc import Callable, Sequence
from dataclasses import dataclass

from fabric_readiness_assessment.core.arithmetic import clamp
from fabric_readiness_assessment.core.catalogs import (
    DATA_TYPE_SEMI_STRUCTURED,
    DATA_TYPE_UNSTRUCTURED,
)
from fabric_readiness_assessment.core.models import (
    AssessmentInput,
    ComparisonOutcome,
    CompetitorScore,
)
from fabric_readiness_assessment.errors import InvalidParameterError

PLATFORM_NAME = "Microsoft Fabric"

# Overall-vs-competitor gap beyond which the difference is called significant
SIGNIFICANCE_MARGIN: float = 15.0


@dataclass(frozen=True)
class PlatformProfile:
    """Static description of a data platform.

    Attributes:
        key: Stable identifier (e.g., 'aws').
        name: Display name.
        strengths: Headline strengths.
        weaknesses: Headline weaknesses.
        consider_if: Situations in which this platform is the better choice.
    """

    key: str
    name: str
    strengths: tuple[str, ...]
    weaknesses: tuple[str, ...]
    consider_if: tuple[str, ...]


PLATFORM_PROFILE = PlatformProfile(
    key="fabric",
    name=PLATFORM_NAME,
    strengths=(
        "Unified analytics platform",
        "Seamless Power BI integration",
        "Microsoft ecosystem synergy",
        "OneLake data storage efficiency",
        "Simplified governance",
    ),
    weaknesses=(
        "Relatively new platform",
        "Microsoft-centric approach",
        "Evolving feature set",
        "Cloud-only solution",
    ),
    consider_if=(
        "You have significant Microsoft investments",
        "Power BI is central to your analytics",
        "You want a unified platform experience",
        "You need simplified governance",
        "You prefer a single vendor solution",
    ),
)

COMPETITOR_PROFILES: dict[str, PlatformProfile] = {
    "aws": PlatformProfile(
        key="aws",
        name="AWS",
        strengths=(
            "Comprehensive cloud ecosystem",
            "Strong market presence",
            "Wide range of specialized services",
            "Global infrastructure",
        ),
        weaknesses=(
            "Less integrated with Microsoft products",
            "Can require more specialized skills",
            "Potential higher costs for complex scenarios",
            "Less unified experience than Fabric",
        ),
        consider_if=(
            "You're already heavily invested in AWS",
            "You need specialized AWS services",
            "You prefer more granular service selection",
        ),
    ),
    "snowflake": PlatformProfile(
        key="snowflake",
        name="Snowflake",
        strengths=(
            "Excellent data warehouse solution",
            "Cloud-agnostic deployment",
            "Separation of storage and compute",
            "Strong data sharing capabilities",
        ),
        weaknesses=(
            "Less integrated with Microsoft products",
            "Not a comprehensive analytics platform",
            "Can be expensive at scale",
            "Limited native ETL capabilities",
        ),
        consider_if=(
            "You need a cloud-agnostic solution",
            "Data sharing is a primary requirement",
            "You need pure data warehouse performance",
        ),
    ),
    "databricks": PlatformProfile(
        key="databricks",
        name="Databricks",
        strengths=(
            "Excellent for complex data science",
            "Strong Spark-based processing",
            "Good for unstructured data",
            "Advanced ML capabilities",
        ),
        weaknesses=(
            "Steeper learning curve",
            "Can be more expensive",
            "Less integrated with Microsoft ecosystem",
            "Less comprehensive than Fabric",
        ),
        consider_if=(
            "Advanced ML/AI is your primary focus",
            "You need deep data science capabilities",
            "You're heavily invested in Spark",
        ),
    ),
    "on-premise": PlatformProfile(
        key="on-premise",
        name="On-Premise",
        strengths=(
            "Complete data sovereignty control",
            "Can be more cost-effective long-term",
            "No internet dependency",
            "Potential for higher security",
        ),
        weaknesses=(
            "Higher upfront investment",
            "Maintenance overhead",
            "Scaling difficulties",
            "Less modern capabilities",
        ),
        consider_if=(
            "Data sovereignty is non-negotiable",
            "You have strict air-gap requirements",
            "You have existing datacenter investments",
        ),
    ),
}


# ---------------------------------------------------------------------------
# Per-competitor rule sets
# ---------------------------------------------------------------------------


def score_aws(assessment: AssessmentInput) -> float:
    """AWS fit: existing AWS footprint, Redshift, real-time needs, little Microsoft."""
    score = 65.0
    if "AWS" in assessment.current_infrastructure:
        score += 15.0
    if assessment.data_warehouse_solution == "AWS Redshift":
        score += 10.0
    if assessment.real_time_needs > 7:
        score += 5.0
    if len(assessment.microsoft_investments) < 2:
        score += 10.0
    return clamp(score, 0.0, 100.0)


def score_snowflake(assessment: AssessmentInput) -> float:
    """Snowflake fit: large volumes, incumbent Snowflake, budget headroom."""
    score = 70.0
    if assessment.data_volume > 7:
        score += 10.0
    if assessment.data_warehouse_solution == "Snowflake":
        score += 15.0
    if assessment.budget_constraint > 7:
        score += 5.0
    if len(assessment.microsoft_investments) < 3:
        score += 5.0
    return clamp(score, 0.0, 100.0)


def score_databricks(assessment: AssessmentInput) -> float:
    """Databricks fit: semi-structured and unstructured data, streaming, budget headroom."""
    score = 60.0
    if DATA_TYPE_SEMI_STRUCTURED in assessment.data_types:
        score += 10.0
    if DATA_TYPE_UNSTRUCTURED in assessment.data_types:
        score += 10.0
    if assessment.real_time_needs > 8:
        score += 10.0
    if assessment.budget_constraint > 6:
        score += 5.0
    return clamp(score, 0.0, 100.0)


def score_on_premise(assessment: AssessmentInput) -> float:
    """On-premise fit: existing servers, sovereignty, heavy compliance; tight budgets penalised."""
    score = 40.0
    if "On-premises servers" in assessment.current_infrastructure:
        score += 15.0
    if assessment.data_sovereignty_needs > 8:
        score += 15.0
    if len(assessment.compliance_requirements) > 3:
        score += 10.0
    if assessment.budget_constraint < 4:
        score -= 10.0
    return clamp(score, 0.0, 100.0)


# Display order of the comparison view
COMPETITOR_SCORERS: dict[str, Callable[[AssessmentInput], float]] = {
    "aws": score_aws,
    "snowflake": score_snowflake,
    "databricks": score_databricks,
    "on-premise": score_on_premise,
}


def compute_competitor_scores(assessment: AssessmentInput) -> tuple[CompetitorScore, ...]:
    """Score every alternative platform against the answers.

    Args:
        assessment: Completed questionnaire answers.

    Returns:
        One CompetitorScore per alternative, in display order, each in 0-100.
    """
    results: list[CompetitorScore] = []
    for key, scorer in COMPETITOR_SCORERS.items():
        profile = COMPETITOR_PROFILES[key]
        results.append(
            CompetitorScore(
                key=key,
                name=profile.name,
                score=scorer(assessment),
                strengths=profile.strengths,
                weaknesses=profile.weaknesses,
                consider_if=profile.consider_if,
            )
        )
    return tuple(results)


def get_competitor(scores: Sequence[CompetitorScore], key: str | None) -> CompetitorScore:
    """Select the competitor to show, defaulting to the first one.

    Args:
        scores: Output of compute_competitor_scores.
        key: Competitor key or display name (case-insensitive).

    Returns:
        The matching CompetitorScore, or the first entry when key is unknown.

    Raises:
        InvalidParameterError: If scores is empty.
    """
    if not scores:
        raise InvalidParameterError("No competitor scores to select from")
    wanted = (key or "").strip().lower()
    for competitor in scores:
        if wanted in (competitor.key, competitor.name.lower()):
            return competitor
    return scores[0]


# ---------------------------------------------------------------------------
# Platform-versus-competitor verdict
# ---------------------------------------------------------------------------

_COMPARISON_TEXT: dict[ComparisonOutcome, str] = {
    ComparisonOutcome.SIGNIFICANTLY_BETTER: (
        "{platform} appears to be a significantly better fit than {competitor} for your "
        "specific needs, primarily due to your existing Microsoft investments and "
        "requirements alignment."
    ),
    ComparisonOutcome.SOMEWHAT_BETTER: (
        "{platform} appears to be a somewhat better fit than {competitor} for your "
        "organization, though the difference is not dramatic. Consider evaluating specific "
        "capabilities that are most important to you."
    ),
    ComparisonOutcome.SIGNIFICANTLY_WORSE: (
        "{competitor} appears to be a significantly better fit than {platform} for your "
        "specific needs. Consider your specific use cases and long-term strategy when "
        "making a decision."
    ),
    ComparisonOutcome.COMPARABLE: (
        "Both {platform} and {competitor} could work for your organization with similar "
        "expected outcomes. Your specific priorities and use cases should guide your "
        "final decision."
    ),
}


def compare_with_competitor(overall_score: float, competitor_score: float) -> ComparisonOutcome:
    """Classify the overall score against one competitor score.

    Args:
        overall_score: Fabric suitability score (0-100).
        competitor_score: The competitor's score (0-100).

    Returns:
        SIGNIFICANTLY_BETTER when Fabric leads by more than the margin,
        SOMEWHAT_BETTER when it leads at all, SIGNIFICANTLY_WORSE when it
        trails by more than the margin, otherwise COMPARABLE.
    """
    if overall_score > competitor_score + SIGNIFICANCE_MARGIN:
        return ComparisonOutcome.SIGNIFICANTLY_BETTER
    if overall_score > competitor_score:
        return ComparisonOutcome.SOMEWHAT_BETTER
    if overall_score + SIGNIFICANCE_MARGIN < competitor_score:
        return ComparisonOutcome.SIGNIFICANTLY_WORSE
    return ComparisonOutcome.COMPARABLE


def comparison_text(outcome: ComparisonOutcome, competitor_name: str) -> str:
    """Render the recommendation sentence for a comparison outcome."""
    return _COMPARISON_TEXT[outcome].format(platform=PLATFORM_NAME, competitor=competitor_name)
