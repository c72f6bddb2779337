"""Adequacy check of a given reinforced section against applied actions."""

from __future__ import annotations

import math
from dataclasses import dataclass

from ..errors import InputValidationError
from .capacity import NominalMomentCapacity, nominal_moment_capacity
from .constants import PHI_COMPRESSION, PHI_FLEXURE, PHI_SHEAR, PHI_TORSION, STIRRUP_LEGS
from .flexure import compression_steel_depth, effective_depth
from .shear import concrete_shear_strength, stirrup_area


@dataclass(frozen=True)
class RCSection:
    """Rectangular section with a known reinforcement arrangement (mm, MPa)."""

    b: float
    h: float
    f_c: float
    f_y: float
    cover: float
    tension_bar_dia: float
    tension_bar_count: int
    compression_bar_dia: float = 0.0
    compression_bar_count: int = 0
    stirrup_dia: float = 10.0
    stirrup_spacing: float | None = None  # mm; None = no shear reinforcement
    stirrup_legs: int = STIRRUP_LEGS
    phi_axial: float = PHI_COMPRESSION
    phi_flexure: float = PHI_FLEXURE
    phi_shear: float = PHI_SHEAR
    phi_torsion: float = PHI_TORSION

    def __post_init__(self) -> None:
        for name in ("b", "h", "f_c", "f_y", "tension_bar_dia"):
            value = getattr(self, name)
            if not math.isfinite(value) or value <= 0:
                raise InputValidationError(f"{name} must be positive")
        if self.tension_bar_count < 1:
            raise InputValidationError("At least one tension bar is required")
        if self.compression_bar_count < 0 or self.cover < 0:
            raise InputValidationError("Cover and bar counts must be non-negative")
        if self.stirrup_spacing is not None and self.stirrup_spacing <= 0:
            raise InputValidationError("Stirrup spacing must be positive")

    @property
    def gross_area(self) -> float:
        return self.b * self.h

    @property
    def tension_steel(self) -> float:
        return self.tension_bar_count * math.pi * self.tension_bar_dia**2 / 4

    @property
    def compression_steel(self) -> float:
        return self.compression_bar_count * math.pi * self.compression_bar_dia**2 / 4

    @property
    def d(self) -> float:
        return effective_depth(self.h, self.cover, self.stirrup_dia, self.tension_bar_dia)

    @property
    def d_prime(self) -> float:
        return compression_steel_depth(self.cover, self.stirrup_dia, self.compression_bar_dia)


@dataclass(frozen=True)
class SectionDemand:
    """Applied actions: N (axial, shear) and N·mm (moment, torsion)."""

    axial: float = 0.0
    shear: float = 0.0
    moment: float = 0.0
    torsion: float = 0.0


@dataclass(frozen=True)
class SectionCapacity:
    axial: float    # φP_n, N
    shear: float    # φ(V_c + V_s), N
    moment: float   # φM_n, N·mm
    torsion: float  # φT_th, N·mm
    axial_ratio: float
    shear_ratio: float
    bending_ratio: float
    torsion_ratio: float
    combined_ratio: float
    utilization: float
    adequate: bool
    moment_detail: NominalMomentCapacity


def _ratio(demand: float, capacity: float) -> float:
    return abs(demand) / capacity if capacity > 0 else 0.0


def evaluate_section_capacity(section: RCSection, demand: SectionDemand) -> SectionCapacity:
    """Capacities, demand/capacity ratios and an SRSS utilization."""
    s = section
    A_st = s.tension_steel + s.compression_steel
    P_n = 0.85 * s.f_c * (s.gross_area - A_st) + s.f_y * A_st
    phi_P_n = s.phi_axial * P_n

    d = s.d
    V_c = concrete_shear_strength(s.f_c, s.b, d)
    V_s = 0.0
    if s.stirrup_spacing is not None:
        V_s = stirrup_area(s.stirrup_dia, s.stirrup_legs) * s.f_y * d / s.stirrup_spacing
        V_s = min(V_s, 0.66 * math.sqrt(s.f_c) * s.b * d)
    phi_V_n = s.phi_shear * (V_c + V_s)

    moment = nominal_moment_capacity(
        s.b, d, s.d_prime, s.tension_steel, s.compression_steel, s.f_c, s.f_y
    )

    A_cp = s.gross_area
    p_cp = 2 * (s.b + s.h)
    phi_T = s.phi_torsion * 0.33 * math.sqrt(s.f_c) * A_cp**2 / p_cp

    axial_ratio = _ratio(demand.axial, phi_P_n)
    shear_ratio = _ratio(demand.shear, phi_V_n)
    bending_ratio = _ratio(demand.moment, moment.phi_M_n)
    torsion_ratio = _ratio(demand.torsion, phi_T)
    ratios = (axial_ratio, shear_ratio, bending_ratio, torsion_ratio)
    combined = math.sqrt(sum(r * r for r in ratios))

    return SectionCapacity(
        axial=phi_P_n,
        shear=phi_V_n,
        moment=moment.phi_M_n,
        torsion=phi_T,
        axial_ratio=axial_ratio,
        shear_ratio=shear_ratio,
        bending_ratio=bending_ratio,
        torsion_ratio=torsion_ratio,
        combined_ratio=combined,
        utilization=min(max(combined, 0.0), 1.0),
        adequate=combined <= 1.0,
        moment_detail=moment,
    )
