"""One-way shear design with vertical stirrups (ACI 318-19 §22.5, §9.7.6)."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from ..errors import InputValidationError, ShearCapacityError
from .constants import PHI_SHEAR, STIRRUP_LEGS

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ShearDesign:
    V_c: float                # N
    V_s_req: float            # N
    V_s_max: float            # N
    A_v: float | None = None  # mm² (all legs)
    s_req: float | None = None    # mm, from strength
    s_av_min: float | None = None  # mm, minimum-reinforcement limit
    s_max: float | None = None     # mm, detailing limit
    s: float | None = None         # mm, governing spacing
    message: str = ""

    @property
    def required(self) -> bool:
        return self.s is not None


def concrete_shear_strength(f_c: float, b: float, d: float) -> float:
    """V_c = 0.17·√f'c·b·d (N)."""
    return 0.17 * math.sqrt(f_c) * b * d


def stirrup_area(stirrup_dia: float, legs: int = STIRRUP_LEGS) -> float:
    return legs * math.pi * stirrup_dia**2 / 4


def shear_design(
    f_c: float,
    f_y: float,
    b: float,
    d: float,
    V_u: float,
    stirrup_dia: float,
    phi: float = PHI_SHEAR,
    legs: int = STIRRUP_LEGS,
) -> ShearDesign:
    """Stirrup spacing for the factored shear ``V_u`` (N).

    Raises:
        ShearCapacityError: V_s exceeds 0.66·√f'c·b·d.
    """
    if V_u < 0:
        raise InputValidationError("Design shear must be non-negative")

    V_c = concrete_shear_strength(f_c, b, d)
    V_s_max = 0.66 * math.sqrt(f_c) * b * d

    if V_u <= 0.5 * phi * V_c:
        return ShearDesign(V_c, 0.0, V_s_max, message="No shear reinforcement required")

    V_s = max(0.0, V_u / phi - V_c)
    if V_s > V_s_max:
        raise ShearCapacityError(
            f"Shear too high (V_s = {V_s / 1e3:.1f} kN > {V_s_max / 1e3:.1f} kN) "
            "- increase section dimensions"
        )

    A_v = stirrup_area(stirrup_dia, legs)
    s_req = A_v * f_y * d / V_s if V_s > 0 else math.inf
    s_av_min = min(A_v * f_y / (0.062 * math.sqrt(f_c) * b), A_v * f_y / (0.35 * b))
    if V_s <= 0.33 * math.sqrt(f_c) * b * d:
        s_max = min(d / 2, 600.0)
    else:
        s_max = min(d / 4, 300.0)
    s = min(s_req, s_av_min, s_max)

    message = "" if V_s > 0 else "Minimum shear reinforcement"
    logger.debug("Shear: V_c = %.0f N, V_s = %.0f N, s = %.0f mm", V_c, V_s, s)
    return ShearDesign(V_c, V_s, V_s_max, A_v, s_req, s_av_min, s_max, s, message)
