"""Exception hierarchy for the beam analysis and design engine."""

from __future__ import annotations


class BeamError(Exception):
    """Base class for every error raised by the engine."""

    kind = "beam_error"


class InputValidationError(BeamError, ValueError):
    """Invalid geometry, material, support, load or design input."""

    kind = "invalid_input"


class NumericalInfeasibilityError(BeamError, RuntimeError):
    """A computation step found the problem has no admissible solution."""

    kind = "infeasible"


class SingularMatrixError(NumericalInfeasibilityError):
    """The stiffness matrix is singular (ill-posed support configuration)."""

    kind = "singular_matrix"


class UnstableSupportError(NumericalInfeasibilityError):
    """The support combination cannot carry transverse load (mechanism)."""

    kind = "unstable_supports"


class FlexuralDesignError(NumericalInfeasibilityError):
    """No flexural reinforcement satisfies the factored moment."""

    kind = "flexure"


class ShearCapacityError(NumericalInfeasibilityError):
    """Shear demand exceeds the maximum the section can carry."""

    kind = "shear"


class BarFitError(NumericalInfeasibilityError):
    """No bar diameter / layer combination fits the section width."""

    kind = "bar_fit"
