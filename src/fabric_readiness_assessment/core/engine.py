"""End-to-end assessment pipeline.

AssessmentEngine runs every scorer once over a validated answer record and
bundles the outputs into a single AssessmentResult. The individual stage
functions are re-exported here so callers can compose them directly.
"""

from collections.abc import Mapping
from typing import Any

from fabric_readiness_assessment.core.competitors import compute_competitor_scores
from fabric_readiness_assessment.core.models import (
    AssessmentInput,
    AssessmentResult,
    BusinessParameters,
)
from fabric_readiness_assessment.core.recommendations import (
    assessment_narrative,
    category_risks,
    executive_summary,
    fit_factors,
    select_tier,
)
from fabric_readiness_assessment.core.scoring import (
    compute_category_scores,
    compute_overall_score,
    readiness_radar,
    suitability_profile,
)
from fabric_readiness_assessment.core.value_metrics import compute_value_metrics
from fabric_readiness_assessment.observability import get_logger
from fabric_readiness_assessment.settings import Settings

__all__ = [
    "AssessmentEngine",
    "compute_category_scores",
    "compute_competitor_scores",
    "compute_overall_score",
    "compute_value_metrics",
    "select_tier",
]

logger = get_logger(__name__)


class AssessmentEngine:
    """Rule-based Fabric suitability engine.

    Stateless apart from its settings: the same input and parameters always
    produce an equal result.
    """

    def __init__(self, settings: Settings | None = None) -> None:
        """Initialise with service settings.

        Args:
            settings: Settings supplying default business parameters and the
                default industry. A fresh Settings() is read from the
                environment when omitted.
        """
        self._settings = settings or Settings()

    @property
    def settings(self) -> Settings:
        """Settings in use by this engine."""
        return self._settings

    def default_parameters(self) -> BusinessParameters:
        """Return the configured value-calculator defaults."""
        return BusinessParameters(
            organization_size=self._settings.default_organization_size,
            current_annual_costs=self._settings.default_current_annual_costs,
            average_hourly_rate=self._settings.default_average_hourly_rate,
        )

    def assess(
        self,
        assessment: AssessmentInput,
        params: BusinessParameters | None = None,
    ) -> AssessmentResult:
        """Score one answer record end to end.

        Args:
            assessment: Validated questionnaire answers.
            params: Business parameters for the value calculator; the
                configured defaults are used when omitted.

        Returns:
            AssessmentResult bundling scores, metrics, tier and report copy.

        Raises:
            ComputationError: If the ROI projection has no positive cost base.
        """
        parameters = params or self.default_parameters()

        overall_score = compute_overall_score(assessment)
        category_scores = compute_category_scores(assessment)
        logger.debug(
            "Scores computed",
            overall_score=overall_score,
            category_scores=category_scores.as_dict(),
        )

        competitor_scores = compute_competitor_scores(assessment)
        logger.debug(
            "Competitor scores computed",
            competitor_scores={c.key: c.score for c in competitor_scores},
        )

        value_metrics = compute_value_metrics(assessment, overall_score, parameters)
        logger.debug(
            "Value metrics computed",
            industry=assessment.industry,
            cost_savings=value_metrics.cost_savings,
            three_year_roi=value_metrics.three_year_roi,
        )

        tier = select_tier(overall_score)

        result = AssessmentResult(
            input=assessment,
            parameters=parameters,
            overall_score=overall_score,
            category_scores=category_scores,
            competitor_scores=competitor_scores,
            value_metrics=value_metrics,
            tier=tier,
            category_risks=category_risks(category_scores),
            readiness_radar=readiness_radar(assessment, category_scores),
            suitability_profile=suitability_profile(assessment),
            fit_factors=fit_factors(assessment),
            executive_summary=executive_summary(category_scores),
            narrative=assessment_narrative(assessment),
        )

        logger.info(
            "Assessment scored",
            overall_score=overall_score,
            tier=tier.tier.value,
            readiness_level=result.executive_summary.readiness_level.value,
            industry=assessment.industry,
        )
        return result

    def assess_answers(
        self,
        answers: Mapping[str, Any],
        params: BusinessParameters | None = None,
    ) -> AssessmentResult:
        """Validate a raw answer mapping and score it.

        Args:
            answers: Answers keyed by snake_case field name or camelCase alias.
                A missing or blank industry takes the configured default.
            params: Optional business parameters.

        Returns:
            AssessmentResult for the validated answers.

        Raises:
            pydantic.ValidationError: If the answers do not form a valid record.
        """
        payload = dict(answers)
        industry = payload.get("industry")
        if industry is None or (isinstance(industry, str) and not industry.strip()):
            payload["industry"] = self._settings.default_industry
        return self.assess(AssessmentInput.model_validate(payload), params)
