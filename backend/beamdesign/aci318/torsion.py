"""Torsion reinforcement for rectangular beams (ACI 318-19 §22.7)."""

from __future__ import annotations

import math
from dataclasses import dataclass

from ..errors import InputValidationError
from .constants import PHI_TORSION, STIRRUP_LEGS, TORSION_COVER_OFFSET


@dataclass(frozen=True)
class TorsionDesign:
    A_c: float         # mm², area enclosed by the stirrup centreline
    p_c: float         # mm, its perimeter
    A_t_over_s: float  # mm²/mm, one leg
    A_t: float         # mm², one leg of the chosen stirrup
    s_t: float         # mm
    n_legs: int
    A_lt: float        # mm², longitudinal torsion steel
    s_max: float       # mm
    message: str = ""


def torsion_design(
    f_c: float,
    f_y: float,
    b: float,
    h: float,
    T_u: float,
    stirrup_dia: float,
    phi: float = PHI_TORSION,
    offset: float = TORSION_COVER_OFFSET,
) -> TorsionDesign | None:
    """Closed-stirrup design for ``T_u`` (N·mm); None when there is no torsion.

    From T_u/φ = 2·A_t·f_y·A_c/(s·p_c).
    """
    if T_u <= 0:
        return None
    if b <= 2 * offset or h <= 2 * offset:
        raise InputValidationError("Section too small for closed torsion stirrups")

    x1 = b - 2 * offset
    y1 = h - 2 * offset
    A_c = x1 * y1
    p_c = 2 * (x1 + y1)

    A_t_over_s = (T_u / phi) * p_c / (2 * f_y * A_c)
    A_t = math.pi * stirrup_dia**2 / 4
    s_t = A_t / A_t_over_s
    s_max = min(p_c / 8, 300.0)

    message = ""
    if s_t > s_max:
        s_t = s_max
        message = f"Spacing limited to {s_max:.0f} mm (p_h/8 or 300 mm)"

    A_lt = 0.42 * A_c * f_c / f_y
    return TorsionDesign(A_c, p_c, A_t_over_s, A_t, s_t, STIRRUP_LEGS, A_lt, s_max, message)
