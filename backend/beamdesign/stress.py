"""Cross-section stresses from internal forces."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum

from .errors import InputValidationError
from .section import SectionProperties
from .units import MM_TO_M, PA_TO_MPA

SAFE_FACTOR = 1.5
MARGINAL_FACTOR = 1.0


@dataclass(frozen=True)
class StressState:
    """Extreme-fibre stresses at one section (MPa)."""

    normal: float
    shear: float
    torsional: float
    von_mises: float


class StressStatus(Enum):
    SAFE = "safe"
    MARGINAL = "marginal"
    UNSAFE = "unsafe"


@dataclass(frozen=True)
class StressCheck:
    safety_factor: float
    status: StressStatus


def stresses_at(
    section: SectionProperties,
    width_mm: float,
    height_mm: float,
    moment: float,
    shear: float,
    torsion: float,
) -> StressState:
    """Stresses for M (N·m), V (N) and T (N·m) on a rectangular section.

    σ = M/S, τ = 3V/(2bh), τt = T·h/(2J), σvm = √(σ² + 3(τ² + τt²)).
    """
    b = width_mm * MM_TO_M
    h = height_mm * MM_TO_M
    sigma = moment / section.section_modulus
    tau = 3 * shear / (2 * b * h)
    tau_t = torsion * h / (2 * section.torsional_constant)
    vm = math.sqrt(sigma**2 + 3 * (tau**2 + tau_t**2))
    return StressState(
        normal=sigma * PA_TO_MPA,
        shear=tau * PA_TO_MPA,
        torsional=tau_t * PA_TO_MPA,
        von_mises=vm * PA_TO_MPA,
    )


def stress_check(state: StressState, yield_strength: float) -> StressCheck:
    """Compare the von Mises stress against the yield strength (MPa)."""
    if not math.isfinite(yield_strength) or yield_strength <= 0:
        raise InputValidationError("Yield strength must be positive")
    if state.von_mises <= 0:
        return StressCheck(math.inf, StressStatus.SAFE)
    factor = yield_strength / state.von_mises
    if factor >= SAFE_FACTOR:
        status = StressStatus.SAFE
    elif factor >= MARGINAL_FACTOR:
        status = StressStatus.MARGINAL
    else:
        status = StressStatus.UNSAFE
    return StressCheck(factor, status)
