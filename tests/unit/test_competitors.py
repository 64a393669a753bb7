"""Unit tests for alternative-platform scoring and comparison."""

import pytest

from fabric_readiness_assessment.core.catalogs import (
    DATA_TYPE_SEMI_STRUCTURED,
    DATA_TYPE_UNSTRUCTURED,
)
from fabric_readiness_assessment.core.competitors import (
    COMPETITOR_PROFILES,
    compare_with_competitor,
    comparison_text,
    compute_competitor_scores,
    get_competitor,
    score_aws,
    score_databricks,
    score_on_premise,
    score_snowflake,
)
from fabric_readiness_assessment.core.models import ComparisonOutcome
from fabric_readiness_assessment.errors import InvalidParameterError


class TestCompetitorScorers:
    """Verify each competitor's base score and bonus rules."""

    def test_aws_rules(self, input_factory) -> None:
        """65 + 15 AWS + 10 Redshift + 5 real-time + 10 light Microsoft clamps to 100."""
        assessment = input_factory(
            current_infrastructure=frozenset({"AWS"}),
            data_warehouse_solution="AWS Redshift",
            real_time_needs=8,
        )
        assert score_aws(assessment) == 100.0

    def test_aws_base_with_microsoft_footprint(self, input_factory) -> None:
        """Two or more Microsoft investments remove the 10-point bonus."""
        assessment = input_factory(microsoft_investments=frozenset({"Azure", "Power BI"}))
        assert score_aws(assessment) == 65.0

    def test_snowflake_rules(self, scenario_a) -> None:
        """70 + 10 (volume 8) + 5 (fewer than 3 investments) = 85."""
        assert score_snowflake(scenario_a) == 85.0

    def test_snowflake_incumbent_bonus(self, input_factory) -> None:
        """An incumbent Snowflake warehouse adds 15."""
        assessment = input_factory(data_warehouse_solution="Snowflake", budget_constraint=8)
        assert score_snowflake(assessment) == 95.0

    def test_databricks_rules(self, input_factory) -> None:
        """60 + 10 + 10 + 10 + 5 = 95."""
        assessment = input_factory(
            data_types=frozenset({DATA_TYPE_SEMI_STRUCTURED, DATA_TYPE_UNSTRUCTURED}),
            real_time_needs=9,
            budget_constraint=7,
        )
        assert score_databricks(assessment) == 95.0

    def test_on_premise_rules(self, scenario_b) -> None:
        """40 + 15 servers + 15 sovereignty + 10 compliance = 80."""
        assert score_on_premise(scenario_b) == 80.0

    def test_on_premise_tight_budget_penalty(self, input_factory) -> None:
        """A budget answer below 4 costs 10 points."""
        assert score_on_premise(input_factory(budget_constraint=3)) == 30.0


class TestComputeCompetitorScores:
    """Verify the bundled competitor list."""

    def test_display_order_and_profiles(self, scenario_a) -> None:
        """Competitors appear as AWS, Snowflake, Databricks, On-Premise with static copy."""
        scores = compute_competitor_scores(scenario_a)
        assert [c.key for c in scores] == ["aws", "snowflake", "databricks", "on-premise"]
        for competitor in scores:
            profile = COMPETITOR_PROFILES[competitor.key]
            assert competitor.name == profile.name
            assert competitor.strengths == profile.strengths
            assert competitor.weaknesses == profile.weaknesses
            assert competitor.consider_if == profile.consider_if

    def test_scenario_a_scores(self, scenario_a) -> None:
        """Scenario A: AWS 65, Snowflake 85, Databricks 70, On-Premise 30."""
        scores = {c.key: c.score for c in compute_competitor_scores(scenario_a)}
        assert scores == {"aws": 65.0, "snowflake": 85.0, "databricks": 70.0, "on-premise": 30.0}

    def test_all_within_range(self, scenario_a, scenario_b, input_factory) -> None:
        """Every competitor score stays within 0-100."""
        for assessment in (scenario_a, scenario_b, input_factory()):
            for competitor in compute_competitor_scores(assessment):
                assert 0.0 <= competitor.score <= 100.0


class TestGetCompetitor:
    """Verify competitor selection for the comparison view."""

    def test_matches_key_or_name(self, scenario_a) -> None:
        """Lookup is case-insensitive on key or display name."""
        scores = compute_competitor_scores(scenario_a)
        assert get_competitor(scores, "snowflake").key == "snowflake"
        assert get_competitor(scores, "On-Premise").key == "on-premise"
        assert get_competitor(scores, " DATABRICKS ").key == "databricks"

    def test_unknown_falls_back_to_first(self, scenario_a) -> None:
        """Unknown or missing keys select the first competitor."""
        scores = compute_competitor_scores(scenario_a)
        assert get_competitor(scores, "oracle-cloud").key == "aws"
        assert get_competitor(scores, None).key == "aws"

    def test_empty_raises(self) -> None:
        """An empty score list is a caller error."""
        with pytest.raises(InvalidParameterError):
            get_competitor((), "aws")


class TestComparison:
    """Verify the platform-versus-competitor verdict."""

    @pytest.mark.parametrize(
        ("overall", "competitor", "expected"),
        [
            (90.0, 70.0, ComparisonOutcome.SIGNIFICANTLY_BETTER),
            (85.0, 70.0, ComparisonOutcome.SOMEWHAT_BETTER),
            (79.0, 65.0, ComparisonOutcome.SOMEWHAT_BETTER),
            (70.0, 70.0, ComparisonOutcome.COMPARABLE),
            (55.0, 70.0, ComparisonOutcome.COMPARABLE),
            (54.0, 70.0, ComparisonOutcome.SIGNIFICANTLY_WORSE),
        ],
    )
    def test_outcomes(self, overall: float, competitor: float, expected: ComparisonOutcome) -> None:
        """A 15-point margin separates significant from modest differences."""
        assert compare_with_competitor(overall, competitor) is expected

    def test_text_names_both_platforms(self) -> None:
        """The rendered sentence mentions Microsoft Fabric and the competitor."""
        text = comparison_text(ComparisonOutcome.SIGNIFICANTLY_WORSE, "Snowflake")
        assert text.startswith(
            "Snowflake appears to be a significantly better fit than Microsoft Fabric"
        )
