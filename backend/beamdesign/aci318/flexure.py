"""Flexural design of rectangular sections (ACI 318-19 §9.6.1, §22.2).

Units: N, mm, MPa, N·mm.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from ..errors import FlexuralDesignError, InputValidationError
from .constants import E_S, EPS_CU, EPS_T_TENSION, PHI_FLEXURE

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SteelLimits:
    rho_min: float
    rho_max: float
    A_s_min: float         # mm²
    A_s_max_singly: float  # mm²


@dataclass(frozen=True)
class FlexuralDesign:
    """Required steel for a factored moment.

    ``A_s_req`` is the total tension steel; ``A_s_prime`` the compression
    steel (zero for singly reinforced sections).
    """

    d: float
    A_s_req: float
    A_s_min: float
    A_s_max_singly: float
    A_s_prime: float = 0.0
    is_doubly: bool = False
    d_prime: float = 0.0
    f_s_prime: float = 0.0  # stress in the compression steel (MPa)
    M_u2: float = 0.0       # moment carried by the steel couple (N·mm)


def effective_depth(h: float, cover: float, stirrup_dia: float, bar_dia: float) -> float:
    """d = h − cover − stirrup − bar/2 for a single layer of bars."""
    d = h - cover - stirrup_dia - bar_dia / 2
    if d <= 0:
        raise InputValidationError("Cover and bar sizes leave no effective depth")
    return d


def beta1(f_c: float) -> float:
    """Stress-block depth factor β1 (Table 22.2.2.4.3)."""
    if f_c <= 28:
        return 0.85
    return max(0.65, 0.85 - 0.05 * (f_c - 28) / 7)


def steel_limits(f_c: float, f_y: float, b: float, d: float) -> SteelLimits:
    rho_min = max(0.25 * math.sqrt(f_c) / f_y, 1.4 / f_y)
    # neutral axis at the tension-controlled strain limit
    rho_max = 0.85 * beta1(f_c) * (f_c / f_y) * EPS_CU / (EPS_CU + EPS_T_TENSION)
    return SteelLimits(rho_min, rho_max, rho_min * b * d, rho_max * b * d)


def required_steel_area(
    M_u: float, f_c: float, f_y: float, b: float, d: float, phi: float = PHI_FLEXURE
) -> float:
    """Smallest A_s with φ·A_s·f_y·(d − A_s·f_y/(1.7·f'c·b)) = M_u."""
    A = phi * f_y * f_y / (1.7 * f_c * b)
    B = -phi * f_y * d
    C = M_u
    disc = B * B - 4 * A * C
    if disc < 0:
        raise FlexuralDesignError(
            "No flexural solution - increase dimensions or material strength"
        )
    return (-B - math.sqrt(disc)) / (2 * A)


def compression_steel_depth(cover: float, stirrup_dia: float, bar_dia: float) -> float:
    return cover + stirrup_dia + bar_dia / 2


def neutral_axis_elastic(
    f_c: float, f_y: float, b: float, A_s: float, A_s_prime: float, d_prime: float
) -> float:
    """Neutral axis depth with elastic compression steel.

    Positive root of 0.85·f'c·β1·b·c² + (Es·εcu·A's − A_s·f_y)·c − Es·εcu·A's·d' = 0.
    """
    k = E_S * EPS_CU
    qa = 0.85 * f_c * beta1(f_c) * b
    qb = k * A_s_prime - A_s * f_y
    qc = -k * A_s_prime * d_prime
    return (-qb + math.sqrt(qb * qb - 4 * qa * qc)) / (2 * qa)


def flexural_design(
    M_u: float,
    f_c: float,
    f_y: float,
    b: float,
    d: float,
    phi: float = PHI_FLEXURE,
    d_prime: float = 60.0,
) -> FlexuralDesign:
    """Singly or doubly reinforced design for ``M_u`` (N·mm)."""
    if M_u < 0:
        raise InputValidationError("Design moment must be non-negative")
    limits = steel_limits(f_c, f_y, b, d)
    A_s = max(required_steel_area(M_u, f_c, f_y, b, d, phi), limits.A_s_min)

    if A_s <= limits.A_s_max_singly:
        logger.debug("Singly reinforced: A_s = %.1f mm²", A_s)
        return FlexuralDesign(d, A_s, limits.A_s_min, limits.A_s_max_singly)

    # ── Doubly reinforced ────────────────────────────────────────────
    b1 = beta1(f_c)
    a_max = b1 * 0.375 * d
    M_n1 = 0.85 * f_c * a_max * b * (d - a_max / 2)
    M_u2 = M_u - phi * M_n1
    if M_u2 <= 0:
        return FlexuralDesign(d, limits.A_s_max_singly, limits.A_s_min, limits.A_s_max_singly)
    if d - d_prime <= 0:
        raise InputValidationError("Compression steel depth must be less than d")

    A_s2 = M_u2 / (phi * f_y * (d - d_prime))
    A_s_total = limits.A_s_max_singly + A_s2
    A_s_prime = A_s2
    f_s_prime = f_y

    c = neutral_axis_elastic(f_c, f_y, b, A_s_total, A_s_prime, d_prime)
    eps_s_prime = EPS_CU * (c - d_prime) / c
    if eps_s_prime < f_y / E_S:
        f_s_prime = E_S * eps_s_prime
        if f_s_prime <= 0:
            raise FlexuralDesignError(
                "Compression steel lies below the neutral axis - increase section depth"
            )
        # same steel couple, carried by a lower compression stress
        A_s_prime = M_u2 / (phi * f_s_prime * (d - d_prime))

    logger.debug(
        "Doubly reinforced: A_s = %.1f mm², A's = %.1f mm² (f's = %.1f MPa)",
        A_s_total, A_s_prime, f_s_prime,
    )
    return FlexuralDesign(
        d=d,
        A_s_req=A_s_total,
        A_s_min=limits.A_s_min,
        A_s_max_singly=limits.A_s_max_singly,
        A_s_prime=A_s_prime,
        is_doubly=True,
        d_prime=d_prime,
        f_s_prime=f_s_prime,
        M_u2=M_u2,
    )
