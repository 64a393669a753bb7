"""Unit tests for the questionnaire wizard state machine."""

import pytest

from fabric_readiness_assessment.core.catalogs import TOTAL_STEPS
from fabric_readiness_assessment.core.models import AssessmentInput
from fabric_readiness_assessment.core.wizard import (
    ChoiceField,
    Continue,
    NextStep,
    Phase,
    PreviousStep,
    Restart,
    ScaleField,
    SelectIndustry,
    SetChoice,
    SetField,
    SetScale,
    Submit,
    ToggleOption,
    WizardState,
    reduce,
)
from fabric_readiness_assessment.errors import InvalidParameterError, WizardStateError


def _at_last_step(state: WizardState) -> WizardState:
    for _ in range(TOTAL_STEPS - 1):
        state = reduce(state, NextStep())
    return state


@pytest.fixture()
def submitted() -> WizardState:
    """A wizard that has just been submitted with default answers."""
    return reduce(_at_last_step(WizardState()), Submit())


class TestDefaults:
    """Verify the initial state."""

    def test_defaults(self) -> None:
        """Scales default to 5, sets to empty, choices to '', industry to general."""
        state = WizardState()
        assert state.phase is Phase.ASSESSMENT
        assert state.step == 1
        assert state.current_step.title == "Infrastructure"
        for field in ScaleField:
            assert getattr(state, field.value) == 5
        for field in SetField:
            assert getattr(state, field.value) == frozenset()
        for field in ChoiceField:
            assert getattr(state, field.value) == ""
        assert state.industry == "general"
        assert state.submitted is None


class TestAnswerActions:
    """Verify answer-editing actions."""

    def test_toggle_adds_then_removes(self) -> None:
        """Toggling an option twice restores the original set."""
        action = ToggleOption(SetField.MICROSOFT_INVESTMENTS, "Azure")
        once = reduce(WizardState(), action)
        assert once.microsoft_investments == frozenset({"Azure"})
        twice = reduce(once, action)
        assert twice.microsoft_investments == frozenset()

    def test_toggle_does_not_mutate_previous_state(self) -> None:
        """Reducing returns a new state and leaves the old one intact."""
        original = WizardState()
        reduce(original, ToggleOption(SetField.DATA_TYPES, "Audio"))
        assert original.data_types == frozenset()

    def test_set_scale(self) -> None:
        """Scale values within 1-10 are stored."""
        state = reduce(WizardState(), SetScale(ScaleField.POWER_BI_USAGE, 9))
        assert state.power_bi_usage == 9

    @pytest.mark.parametrize("value", [0, 11, -3])
    def test_set_scale_out_of_range(self, value: int) -> None:
        """Scale values outside 1-10 are rejected."""
        with pytest.raises(InvalidParameterError):
            reduce(WizardState(), SetScale(ScaleField.DATA_VOLUME, value))

    def test_set_choice(self) -> None:
        """Single-select answers replace the previous value."""
        state = reduce(WizardState(), SetChoice(ChoiceField.DATA_WAREHOUSE_SOLUTION, "Snowflake"))
        state = reduce(state, SetChoice(ChoiceField.DATA_WAREHOUSE_SOLUTION, "Oracle"))
        assert state.data_warehouse_solution == "Oracle"


class TestNavigation:
    """Verify step navigation."""

    def test_steps_are_bounded(self) -> None:
        """Previous on step 1 and Next on the last step stay put."""
        state = reduce(WizardState(), PreviousStep())
        assert state.step == 1
        state = _at_last_step(state)
        assert state.step == TOTAL_STEPS
        assert reduce(state, NextStep()).step == TOTAL_STEPS

    def test_progress(self) -> None:
        """Progress is the share of steps reached."""
        assert WizardState().progress == 25
        assert _at_last_step(WizardState()).progress == 100

    def test_submit_before_last_step_rejected(self) -> None:
        """Submit is only valid on the final questionnaire step."""
        with pytest.raises(WizardStateError):
            reduce(WizardState(), Submit())


class TestPhases:
    """Verify phase transitions."""

    def test_submit_validates_draft(self) -> None:
        """Submit produces an AssessmentInput from the draft answers."""
        state = reduce(WizardState(), ToggleOption(SetField.MICROSOFT_INVESTMENTS, "Power BI"))
        state = reduce(state, SetScale(ScaleField.BUDGET_CONSTRAINT, 2))
        state = reduce(_at_last_step(state), Submit())
        assert state.phase is Phase.RESULTS
        assert isinstance(state.submitted, AssessmentInput)
        assert state.submitted.microsoft_investments == frozenset({"Power BI"})
        assert state.submitted.budget_constraint == 2

    def test_continue_through_views(self, submitted: WizardState) -> None:
        """Continue moves results -> comparison -> report, then stops."""
        comparison = reduce(submitted, Continue())
        assert comparison.phase is Phase.COMPARISON
        report = reduce(comparison, Continue())
        assert report.phase is Phase.REPORT
        with pytest.raises(WizardStateError):
            reduce(report, Continue())

    def test_continue_not_allowed_during_assessment(self) -> None:
        """Continue needs a submitted assessment."""
        with pytest.raises(WizardStateError):
            reduce(WizardState(), Continue())

    @pytest.mark.parametrize(
        "action",
        [
            ToggleOption(SetField.DATA_TYPES, "Audio"),
            SetScale(ScaleField.DATA_VOLUME, 3),
            SetChoice(ChoiceField.BUSINESS_INTELLIGENCE_TOOL, "Excel"),
            NextStep(),
            PreviousStep(),
            Submit(),
        ],
    )
    def test_answer_actions_locked_after_submit(self, submitted: WizardState, action) -> None:
        """Answers cannot change once the assessment is submitted."""
        with pytest.raises(WizardStateError):
            reduce(submitted, action)

    def test_select_industry_updates_submitted_input(self, submitted: WizardState) -> None:
        """Changing industry on the results view re-targets the submitted record."""
        state = reduce(submitted, SelectIndustry("healthcare"))
        assert state.industry == "healthcare"
        assert state.submitted is not None
        assert state.submitted.industry == "healthcare"

    def test_blank_industry_is_general(self) -> None:
        """A blank industry key selects the general profile."""
        assert reduce(WizardState(), SelectIndustry("  ")).industry == "general"

    def test_restart_from_report(self, submitted: WizardState) -> None:
        """Restart discards everything from any phase."""
        report = reduce(reduce(submitted, Continue()), Continue())
        assert reduce(report, Restart()) == WizardState()

    def test_default_industry_from_settings(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """The configured default industry survives blank selections and Restart."""
        monkeypatch.setenv("FABRIC_ASSESSMENT_DEFAULT_INDUSTRY", "healthcare")
        state = WizardState.from_settings()
        assert state.industry == "healthcare"
        retail = reduce(state, SelectIndustry("retail"))
        assert reduce(retail, SelectIndustry("")).industry == "healthcare"
        restarted = reduce(retail, Restart())
        assert restarted.industry == "healthcare"
        assert restarted.phase is Phase.ASSESSMENT
