"""Questionnaire wizard state machine.

The wizard walks through four assessment steps, then the results, comparison
and report views:

    ASSESSMENT (steps 1-4) --Submit--> RESULTS --Continue--> COMPARISON
        --Continue--> REPORT

Restart returns to a fresh ASSESSMENT state from any phase, keeping the
configured default industry. State values are
frozen; ``reduce`` always returns a new WizardState.
"""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any

from fabric_readiness_assessment.core.catalogs import (
    SCALE_DEFAULT,
    SCALE_MAX,
    SCALE_MIN,
    TOTAL_STEPS,
    WIZARD_STEPS,
    WizardStep,
)
from fabric_readiness_assessment.core.industries import DEFAULT_INDUSTRY
from fabric_readiness_assessment.core.models import AssessmentInput
from fabric_readiness_assessment.errors import InvalidParameterError, WizardStateError
from fabric_readiness_assessment.settings import Settings


class Phase(str, Enum):
    """Top-level view of the wizard."""

    ASSESSMENT = "assessment"
    RESULTS = "results"
    COMPARISON = "comparison"
    REPORT = "report"


class SetField(str, Enum):
    """Multi-select questions."""

    CURRENT_INFRASTRUCTURE = "current_infrastructure"
    DATA_TYPES = "data_types"
    MICROSOFT_INVESTMENTS = "microsoft_investments"
    COMPLIANCE_REQUIREMENTS = "compliance_requirements"


class ScaleField(str, Enum):
    """1-10 slider questions."""

    DATA_VOLUME = "data_volume"
    REAL_TIME_NEEDS = "real_time_needs"
    POWER_BI_USAGE = "power_bi_usage"
    BUDGET_CONSTRAINT = "budget_constraint"
    TIME_TO_IMPLEMENTATION = "time_to_implementation"
    DATA_SOVEREIGNTY_NEEDS = "data_sovereignty_needs"


class ChoiceField(str, Enum):
    """Single-select questions."""

    DATA_WAREHOUSE_SOLUTION = "data_warehouse_solution"
    BUSINESS_INTELLIGENCE_TOOL = "business_intelligence_tool"


# Phase reached by each Continue action
_NEXT_PHASE: dict[Phase, Phase] = {
    Phase.RESULTS: Phase.COMPARISON,
    Phase.COMPARISON: Phase.REPORT,
}


# ---------------------------------------------------------------------------
# Actions
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ToggleOption:
    """Add the option to a multi-select answer, or remove it if present."""

    field: SetField
    value: str


@dataclass(frozen=True)
class SetScale:
    """Set a slider answer to a value in 1-10."""

    field: ScaleField
    value: int


@dataclass(frozen=True)
class SetChoice:
    """Set a single-select answer."""

    field: ChoiceField
    value: str


@dataclass(frozen=True)
class SelectIndustry:
    """Choose the industry profile used by the value calculator."""

    key: str


@dataclass(frozen=True)
class NextStep:
    """Advance one questionnaire step."""


@dataclass(frozen=True)
class PreviousStep:
    """Go back one questionnaire step."""


@dataclass(frozen=True)
class Submit:
    """Validate the draft answers and show the results."""


@dataclass(frozen=True)
class Continue:
    """Move from results to comparison, or from comparison to the report."""


@dataclass(frozen=True)
class Restart:
    """Discard all answers and start over."""


Action = (
    ToggleOption
    | SetScale
    | SetChoice
    | SelectIndustry
    | NextStep
    | PreviousStep
    | Submit
    | Continue
    | Restart
)


# ---------------------------------------------------------------------------
# State
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class WizardState:
    """Snapshot of the questionnaire.

    Attributes:
        phase: Current top-level view.
        step: Current questionnaire step (1-4); kept after submission.
        industry: Selected industry profile key.
        default_industry: Industry restored by Restart and by a blank selection.
        submitted: Answer record validated on Submit, None before that.
    """

    phase: Phase = Phase.ASSESSMENT
    step: int = 1

    current_infrastructure: frozenset[str] = field(default_factory=frozenset)
    data_warehouse_solution: str = ""
    business_intelligence_tool: str = ""
    data_types: frozenset[str] = field(default_factory=frozenset)
    data_volume: int = SCALE_DEFAULT
    real_time_needs: int = SCALE_DEFAULT
    microsoft_investments: frozenset[str] = field(default_factory=frozenset)
    power_bi_usage: int = SCALE_DEFAULT
    budget_constraint: int = SCALE_DEFAULT
    time_to_implementation: int = SCALE_DEFAULT
    compliance_requirements: frozenset[str] = field(default_factory=frozenset)
    data_sovereignty_needs: int = SCALE_DEFAULT

    industry: str = DEFAULT_INDUSTRY
    default_industry: str = DEFAULT_INDUSTRY
    submitted: AssessmentInput | None = None

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> "WizardState":
        """Return a fresh state preselecting the configured default industry."""
        settings = settings or Settings()
        return cls(industry=settings.default_industry, default_industry=settings.default_industry)

    @property
    def current_step(self) -> WizardStep:
        """The questionnaire step currently displayed."""
        return WIZARD_STEPS[self.step - 1]

    @property
    def progress(self) -> int:
        """Questionnaire completion as a whole percentage."""
        return self.step * 100 // TOTAL_STEPS

    def draft(self) -> dict[str, Any]:
        """Return the draft answers keyed by input-model field name."""
        answers: dict[str, Any] = {}
        for member in (*SetField, *ScaleField, *ChoiceField):
            answers[member.value] = getattr(self, member.value)
        answers["industry"] = self.industry
        return answers


def _require_phase(state: WizardState, action: Action, *phases: Phase) -> None:
    if state.phase not in phases:
        raise WizardStateError(
            f"{type(action).__name__} is not allowed in phase {state.phase.value!r}"
        )


def reduce(state: WizardState, action: Action) -> WizardState:
    """Apply one action to the wizard state.

    Args:
        state: Current state.
        action: Action to apply.

    Returns:
        The next state.

    Raises:
        WizardStateError: If the action does not apply to the current phase,
            or Submit is dispatched before the last step.
        InvalidParameterError: If SetScale carries a value outside 1-10.
    """
    if isinstance(action, Restart):
        return WizardState(industry=state.default_industry, default_industry=state.default_industry)

    if isinstance(action, SelectIndustry):
        industry = action.key.strip() or state.default_industry
        submitted = state.submitted
        if submitted is not None:
            submitted = submitted.model_copy(update={"industry": industry})
        return replace(state, industry=industry, submitted=submitted)

    if isinstance(action, ToggleOption):
        _require_phase(state, action, Phase.ASSESSMENT)
        current: frozenset[str] = getattr(state, action.field.value)
        updated = current - {action.value} if action.value in current else current | {action.value}
        return replace(state, **{action.field.value: updated})

    if isinstance(action, SetScale):
        _require_phase(state, action, Phase.ASSESSMENT)
        if not SCALE_MIN <= action.value <= SCALE_MAX:
            raise InvalidParameterError(
                f"{action.field.value} must be between {SCALE_MIN} and {SCALE_MAX}, "
                f"got {action.value!r}"
            )
        return replace(state, **{action.field.value: action.value})

    if isinstance(action, SetChoice):
        _require_phase(state, action, Phase.ASSESSMENT)
        return replace(state, **{action.field.value: action.value})

    if isinstance(action, NextStep):
        _require_phase(state, action, Phase.ASSESSMENT)
        return replace(state, step=min(TOTAL_STEPS, state.step + 1))

    if isinstance(action, PreviousStep):
        _require_phase(state, action, Phase.ASSESSMENT)
        return replace(state, step=max(1, state.step - 1))

    if isinstance(action, Submit):
        _require_phase(state, action, Phase.ASSESSMENT)
        if state.step != TOTAL_STEPS:
            raise WizardStateError(
                f"Submit is only allowed on step {TOTAL_STEPS}, current step is {state.step}"
            )
        submitted = AssessmentInput.model_validate(state.draft())
        return replace(state, phase=Phase.RESULTS, submitted=submitted)

    if isinstance(action, Continue):
        _require_phase(state, action, *_NEXT_PHASE)
        return replace(state, phase=_NEXT_PHASE[state.phase])

    raise WizardStateError(f"Unknown wizard action: {action!r}")
