"""Error taxonomy for the Fabric Readiness Assessment engine.

Unknown catalog values are never errors: they simply contribute nothing to
the rules they would have matched.
"""


class AssessmentError(Exception):
    """Base class for all assessment engine errors."""


class InvalidParameterError(AssessmentError, ValueError):
    """A numeric parameter is outside its declared domain.

    Raised at the boundary, before any score is computed.
    """


class ComputationError(AssessmentError, ArithmeticError):
    """A derived metric could not be computed from otherwise valid inputs.

    The only source today is a non-positive 3-year cost denominator in the
    ROI projection.
    """


class WizardStateError(AssessmentError):
    """A wizard action was dispatched in a phase that does not accept it."""
