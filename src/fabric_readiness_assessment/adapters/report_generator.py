"""Report generation adapter for the Fabric Readiness Assessment engine.

Compiles an AssessmentResult, the selected competitor comparison, and the
industry profile into structured report content. The output is a plain,
JSON-serialisable dict; rendering it to PDF or another document format is
left to the caller.
"""

from datetime import datetime, timezone
from typing import Any

from fabric_readiness_assessment.core.catalogs import (
    CHOICE_FIELD_CATALOGS,
    SET_FIELD_CATALOGS,
    is_known_option,
)
from fabric_readiness_assessment.core.competitors import (
    compare_with_competitor,
    comparison_text,
    get_competitor,
)
from fabric_readiness_assessment.core.industries import get_industry_profile
from fabric_readiness_assessment.core.models import AssessmentInput, AssessmentResult
from fabric_readiness_assessment.core.recommendations import (
    CATEGORY_LABELS,
    CATEGORY_RECOMMENDATIONS,
    IMPROVEMENT_THRESHOLD,
)
from fabric_readiness_assessment.observability import get_logger
from fabric_readiness_assessment.settings import Settings

logger = get_logger(__name__)

NONE_SPECIFIED = "None specified"
NO_INFRASTRUCTURE = "No infrastructure specified"
NO_MICROSOFT_PRODUCTS = "No Microsoft products specified"


def _join_or(values: frozenset[str], fallback: str) -> str:
    return ", ".join(sorted(values)) if values else fallback


def _unrecognized_answers(answers: AssessmentInput) -> dict[str, list[str]]:
    """Collect answers outside the option catalogs, keyed by field name.

    Such answers are accepted but never match a scoring rule.
    """
    unrecognized: dict[str, list[str]] = {}
    for field_name in SET_FIELD_CATALOGS:
        values: frozenset[str] = getattr(answers, field_name)
        unknown = sorted(v for v in values if not is_known_option(field_name, v))
        if unknown:
            unrecognized[field_name] = unknown
    for field_name in CHOICE_FIELD_CATALOGS:
        value: str = getattr(answers, field_name)
        if value and not is_known_option(field_name, value):
            unrecognized[field_name] = [value]
    return unrecognized


class ReportGenerator:
    """Structured report content generator.

    Assembles the executive summary, answer echo, findings, category analysis,
    competitor comparison, value proposition and next steps into one dict.
    """

    def __init__(self, settings: Settings | None = None) -> None:
        """Initialise with service settings.

        Args:
            settings: Settings with the default competitor and template version.
        """
        self._settings = settings or Settings()

    def generate(
        self,
        result: AssessmentResult,
        selected_competitor: str | None = None,
    ) -> dict[str, Any]:
        """Generate structured report content from an assessment result.

        Args:
            result: Output of AssessmentEngine.assess.
            selected_competitor: Competitor key or name for the comparison
                section. Falls back to the configured default competitor, then
                to the first competitor.

        Returns:
            Dict with generated_at, industry, sections and metadata.
        """
        now = datetime.now(tz=timezone.utc)
        profile = get_industry_profile(result.input.industry)

        content: dict[str, Any] = {
            "generated_at": now.isoformat(),
            "industry": profile.name,
            "sections": {
                "executive_summary": self._build_executive_summary(result),
                "assessment_summary": self._build_assessment_summary(result),
                "findings": self._build_findings(result),
                "category_analysis": self._build_category_analysis(result),
                "comparison": self._build_comparison(
                    result, selected_competitor or self._settings.default_competitor
                ),
                "value_proposition": self._build_value_proposition(result),
                "next_steps": {
                    "title": "Recommended Next Steps",
                    "steps": list(result.tier.next_steps),
                },
            },
            "metadata": {
                "overall_score": result.overall_score,
                "tier": result.tier.tier.value,
                "template_version": self._settings.report_template_version,
            },
        }

        logger.debug(
            "Report content generated",
            overall_score=result.overall_score,
            tier=result.tier.tier.value,
            industry=profile.key,
            section_count=len(content["sections"]),
        )
        return content

    def _build_executive_summary(self, result: AssessmentResult) -> dict[str, Any]:
        """Build the executive summary section.

        Args:
            result: Assessment result.

        Returns:
            Executive summary section dict.
        """
        summary = result.executive_summary
        return {
            "title": "Executive Summary",
            "overall_score": result.overall_score,
            "tier": result.tier.tier.value,
            "tier_label": result.tier.label,
            "headline": (
                f"Microsoft Fabric suitability: {result.tier.label} "
                f"with an overall score of {result.overall_score:.1f}/100."
            ),
            "recommendation": result.tier.recommendation_text,
            "readiness_level": summary.readiness_level.value,
            "readiness_percentage": summary.readiness_percentage,
            "top_strength": summary.top_strength,
            "top_opportunity": summary.top_opportunity,
            "roi_outlook": summary.roi_outlook,
            "key_recommendations": list(summary.key_recommendations),
        }

    def _build_assessment_summary(self, result: AssessmentResult) -> dict[str, Any]:
        """Echo the answers, substituting fallbacks for unanswered questions."""
        answers = result.input
        return {
            "title": "Assessment Summary",
            "current_infrastructure": _join_or(answers.current_infrastructure, NO_INFRASTRUCTURE),
            "data_warehouse_solution": answers.data_warehouse_solution or NONE_SPECIFIED,
            "business_intelligence_tool": answers.business_intelligence_tool or NONE_SPECIFIED,
            "data_types": _join_or(answers.data_types, NONE_SPECIFIED),
            "data_volume": answers.data_volume,
            "real_time_needs": answers.real_time_needs,
            "microsoft_investments": _join_or(
                answers.microsoft_investments, NO_MICROSOFT_PRODUCTS
            ),
            "power_bi_usage": answers.power_bi_usage,
            "budget_constraint": answers.budget_constraint,
            "time_to_implementation": answers.time_to_implementation,
            "compliance_requirements": _join_or(answers.compliance_requirements, NONE_SPECIFIED),
            "data_sovereignty_needs": answers.data_sovereignty_needs,
            "unrecognized_answers": _unrecognized_answers(answers),
        }

    def _build_findings(self, result: AssessmentResult) -> dict[str, Any]:
        return {
            "title": "Key Findings",
            "fit_factors": list(result.fit_factors),
            "paragraphs": list(result.narrative),
        }

    def _build_category_analysis(self, result: AssessmentResult) -> dict[str, Any]:
        """Build the category-by-category analysis section.

        Args:
            result: Assessment result with category scores and risk levels.

        Returns:
            Category analysis section dict keyed by category value.
        """
        categories: dict[str, Any] = {}
        for category, score in result.category_scores.as_dict().items():
            categories[category.value] = {
                "label": CATEGORY_LABELS[category],
                "score": round(score, 1),
                "risk_level": result.category_risks[category].value,
                "recommendation": (
                    CATEGORY_RECOMMENDATIONS[category] if score < IMPROVEMENT_THRESHOLD else None
                ),
            }
        return {
            "title": "Readiness by Category",
            "total": round(result.category_scores.total, 1),
            "percentage": result.category_scores.percentage,
            "categories": categories,
            "radar": [axis.model_dump() for axis in result.readiness_radar],
        }

    def _build_comparison(self, result: AssessmentResult, competitor_key: str) -> dict[str, Any]:
        """Build the platform-versus-competitor section.

        Args:
            result: Assessment result with competitor scores.
            competitor_key: Key or display name of the competitor to feature.

        Returns:
            Comparison section dict.
        """
        competitor = get_competitor(result.competitor_scores, competitor_key)
        outcome = compare_with_competitor(result.overall_score, competitor.score)
        return {
            "title": "Platform Comparison",
            "competitor": competitor.name,
            "competitor_score": competitor.score,
            "overall_score": result.overall_score,
            "outcome": outcome.value,
            "summary": comparison_text(outcome, competitor.name),
            "strengths": list(competitor.strengths),
            "weaknesses": list(competitor.weaknesses),
            "consider_if": list(competitor.consider_if),
            "all_scores": {c.name: c.score for c in result.competitor_scores},
            "suitability_profile": [axis.model_dump() for axis in result.suitability_profile],
        }

    def _build_value_proposition(self, result: AssessmentResult) -> dict[str, Any]:
        """Build the business value section from the value metrics and industry profile."""
        metrics = result.value_metrics
        profile = get_industry_profile(result.input.industry)
        return {
            "title": "Value Proposition",
            "industry": profile.name,
            "industry_benefits": list(profile.key_benefits),
            "industry_considerations": list(profile.specific_considerations),
            "annual_cost_savings": metrics.cost_savings,
            "time_to_value_months": metrics.time_to_value_months,
            "annual_productivity_hours": metrics.annual_productivity_hours,
            "productivity_value": metrics.productivity_value,
            "three_year_roi_percent": metrics.three_year_roi,
            "risk_reduction": metrics.risk_reduction,
            "data_driven_benefit_score": metrics.data_driven_benefit_score,
            "annual_opportunity_cost": metrics.annual_opportunity_cost,
        }
