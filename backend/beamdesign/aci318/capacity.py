"""Nominal moment capacity of a reinforced rectangular section."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from ..errors import InputValidationError
from .constants import (
    E_S,
    EPS_CU,
    EPS_T_COMPRESSION,
    EPS_T_TENSION,
    PHI_COMPRESSION,
    PHI_FLEXURE,
)
from .flexure import beta1, neutral_axis_elastic


class FailureMode(Enum):
    TENSION_CONTROLLED = "tension_controlled"
    TRANSITION = "transition"
    COMPRESSION_CONTROLLED = "compression_controlled"


@dataclass(frozen=True)
class NominalMomentCapacity:
    c: float            # mm, neutral axis depth
    a: float            # mm, stress block depth
    eps_t: float
    eps_s_prime: float
    f_s_prime: float    # MPa
    M_n: float          # N·mm
    phi: float
    phi_M_n: float      # N·mm
    failure_mode: FailureMode


def strength_reduction_factor(eps_t: float) -> tuple[float, FailureMode]:
    """φ by net tensile strain (Table 21.2.2)."""
    if eps_t >= EPS_T_TENSION:
        return PHI_FLEXURE, FailureMode.TENSION_CONTROLLED
    if eps_t <= EPS_T_COMPRESSION:
        return PHI_COMPRESSION, FailureMode.COMPRESSION_CONTROLLED
    phi = PHI_COMPRESSION + (eps_t - EPS_T_COMPRESSION) * (
        (PHI_FLEXURE - PHI_COMPRESSION) / (EPS_T_TENSION - EPS_T_COMPRESSION)
    )
    return phi, FailureMode.TRANSITION


def nominal_moment_capacity(
    b: float,
    d: float,
    d_prime: float,
    A_s: float,
    A_s_prime: float,
    f_c: float,
    f_y: float,
) -> NominalMomentCapacity:
    """M_n and φM_n from force equilibrium and strain compatibility."""
    if A_s <= 0:
        raise InputValidationError("Tension steel area must be positive")
    if A_s_prime < 0:
        raise InputValidationError("Compression steel area must be non-negative")

    b1 = beta1(f_c)
    eps_y = f_y / E_S
    f_s_prime = 0.0
    eps_s_prime = 0.0

    if A_s_prime > 0:
        # try yielding compression steel first
        c = (A_s - A_s_prime) * f_y / (0.85 * f_c * b1 * b)
        eps_s_prime = EPS_CU * (c - d_prime) / c if c > 0 else -1.0
        if eps_s_prime >= eps_y:
            f_s_prime = f_y
        else:
            c = neutral_axis_elastic(f_c, f_y, b, A_s, A_s_prime, d_prime)
            eps_s_prime = EPS_CU * (c - d_prime) / c
            f_s_prime = E_S * eps_s_prime
    else:
        c = A_s * f_y / (0.85 * f_c * b1 * b)

    a = b1 * c
    M_n = 0.85 * f_c * a * b * (d - a / 2) + A_s_prime * f_s_prime * (d - d_prime)
    eps_t = EPS_CU * (d - c) / c
    phi, mode = strength_reduction_factor(eps_t)
    return NominalMomentCapacity(
        c=c,
        a=a,
        eps_t=eps_t,
        eps_s_prime=eps_s_prime,
        f_s_prime=f_s_prime,
        M_n=M_n,
        phi=phi,
        phi_M_n=phi * M_n,
        failure_mode=mode,
    )
