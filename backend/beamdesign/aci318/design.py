"""ACI 318-19 reinforcement design of a rectangular beam section.

Implements Steps 1-9 of the design workflow:
  1. Effective depth
  2. β1
  3. Steel limits
  4. Required steel (quadratic)
  5. Singly / doubly reinforced
  6. Bar selection (re-run with the layout's actual d until stable)
  7. Shear
  8. Torsion
  9. Moment capacity and capacity ratio
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field

from .. import catalog
from ..errors import InputValidationError
from ..units import N_TO_KN, NMM_TO_KNM
from .bars import BarLayout, select_bars
from .capacity import NominalMomentCapacity, nominal_moment_capacity
from .constants import DEFAULT_MAX_LAYERS, PHI_FLEXURE, PHI_SHEAR, PHI_TORSION
from .flexure import (
    FlexuralDesign,
    beta1,
    compression_steel_depth,
    effective_depth,
    flexural_design,
)
from .shear import ShearDesign, shear_design
from .torsion import TorsionDesign, torsion_design

logger = logging.getLogger(__name__)

MAX_LAYOUT_ITERATIONS = 10


@dataclass(frozen=True)
class ReinforcementInput:
    """Design input (N, mm, MPa, N·mm)."""

    f_c: float = 28.0
    f_y: float = 420.0
    b: float = 300.0
    h: float = 600.0
    cover: float = 40.0
    stirrup_dia: float = 10.0
    tension_bar_dia: float = 25.0
    compression_bar_dia: float = 20.0
    M_u: float = 350e6
    V_u: float = 250e3
    T_u: float = 0.0
    bar_areas: dict[float, float] = field(default_factory=catalog.bar_areas)
    stirrup_sizes: list[float] = field(default_factory=catalog.stirrup_sizes)
    phi_flexure: float = PHI_FLEXURE
    phi_shear: float = PHI_SHEAR
    phi_torsion: float = PHI_TORSION
    use_side_bars: bool = False
    side_bar_dia: float | None = None
    max_layers: int = DEFAULT_MAX_LAYERS
    fixed_bar_dia: bool = False  # only use tension_bar_dia in selection

    def __post_init__(self) -> None:
        positive = ("f_c", "f_y", "b", "h", "stirrup_dia", "tension_bar_dia", "compression_bar_dia")
        for name in positive:
            value = getattr(self, name)
            if not math.isfinite(value) or value <= 0:
                raise InputValidationError(f"{name} must be positive")
        for name in ("cover", "M_u", "V_u", "T_u"):
            value = getattr(self, name)
            if not math.isfinite(value) or value < 0:
                raise InputValidationError(f"{name} must be non-negative")
        for name in ("phi_flexure", "phi_shear", "phi_torsion"):
            if not 0 < getattr(self, name) <= 1:
                raise InputValidationError(f"{name} must lie in (0, 1]")
        if not self.bar_areas:
            raise InputValidationError("Bar catalog is empty")
        if self.stirrup_sizes and self.stirrup_dia not in self.stirrup_sizes:
            raise InputValidationError(f"Stirrup diameter {self.stirrup_dia:g} mm is not available")
        if self.max_layers < 1:
            raise InputValidationError("max_layers must be at least 1")


@dataclass
class ReinforcementDesign:
    """Composed result of the design pipeline."""

    inp: ReinforcementInput
    d_initial: float
    d: float
    beta1: float
    flexure: FlexuralDesign
    tension: BarLayout
    compression: BarLayout | None
    d_prime: float
    shear: ShearDesign
    torsion: TorsionDesign | None
    capacity: NominalMomentCapacity
    iterations: int = 1

    @property
    def capacity_ratio(self) -> float:
        """φM_n / M_u (inf when there is no moment)."""
        if self.inp.M_u <= 0:
            return math.inf
        return self.capacity.phi_M_n / self.inp.M_u

    @property
    def flexure_ok(self) -> bool:
        return self.capacity_ratio >= 1.0

    @property
    def overall_ok(self) -> bool:
        # shear and torsion failures raise; flexure is the only soft check
        return self.flexure_ok

    def print_summary(self) -> None:
        P = "PASS"
        F = "FAIL"
        inp = self.inp
        t = self.tension
        print(f"\n{'='*64}")
        print(f"  ACI 318-19 Beam Design — {inp.b:.0f} x {inp.h:.0f} mm")
        print(f"{'='*64}")
        print(f"  f'c = {inp.f_c:.0f} MPa   fy = {inp.f_y:.0f} MPa   β1 = {self.beta1:.3f}")
        print(f"  Mu = {inp.M_u * NMM_TO_KNM:.2f} kNm   Vu = {inp.V_u * N_TO_KN:.2f} kN"
              f"   Tu = {inp.T_u * NMM_TO_KNM:.2f} kNm")
        print(f"  d = {self.d:.1f} mm (initial {self.d_initial:.1f} mm, "
              f"{self.iterations} iteration(s))")
        print(f"{'─'*64}")
        kind = "doubly" if self.flexure.is_doubly else "singly"
        print(f"  Flexure ({kind})  As,req = {self.flexure.A_s_req:>8.0f} mm²"
              f"   As,min = {self.flexure.A_s_min:.0f}")
        side = ""
        if t.n_side_bars:
            side = f" + {t.n_side_bars}Ø{t.side_bar_dia:g} side"
        print(f"  Tension bars  {t.n_bars}Ø{t.bar_dia:g}{side} in {t.n_layers} layer(s)"
              f"   As,prov = {t.A_s_prov:.0f} mm²   width {t.width_required:.0f} mm")
        if self.compression is not None:
            c = self.compression
            print(f"  Compr. bars   {c.n_bars}Ø{c.bar_dia:g} in {c.n_layers} layer(s)"
                  f"   A's,prov = {c.A_s_prov:.0f} mm²   d' = {self.d_prime:.1f} mm")
        s = self.shear
        if s.required:
            print(f"  Shear         Vc = {s.V_c * N_TO_KN:.1f} kN   Vs = {s.V_s_req * N_TO_KN:.1f} kN"
                  f"   Ø{inp.stirrup_dia:g} @ {s.s:.0f} mm")
        else:
            print(f"  Shear         Vc = {s.V_c * N_TO_KN:.1f} kN   {s.message}")
        if self.torsion is not None:
            tr = self.torsion
            print(f"  Torsion       At/s = {tr.A_t_over_s:.3f} mm²/mm   s = {tr.s_t:.0f} mm"
                  f"   Al = {tr.A_lt:.0f} mm²")
            if tr.message:
                print(f"                {tr.message}")
        cap = self.capacity
        print(f"  Capacity      φMn = {cap.phi_M_n * NMM_TO_KNM:>8.2f} kNm   φ = {cap.phi:.3f}"
              f"   εt = {cap.eps_t:.4f} ({cap.failure_mode.value})")
        print(f"                ratio = {self.capacity_ratio:.3f}  {P if self.flexure_ok else F}")
        print(f"{'─'*64}")
        print(f"  OVERALL: {P if self.overall_ok else F}")
        print(f"{'='*64}")


def _same_layout(a: BarLayout, b: BarLayout) -> bool:
    return (a.bar_dia, a.n_bars, a.n_layers, a.n_side_bars) == (
        b.bar_dia, b.n_bars, b.n_layers, b.n_side_bars
    )


def design_reinforcement(inp: ReinforcementInput) -> ReinforcementDesign:
    """Run the full design pipeline; any failing step raises a typed error."""
    d_initial = effective_depth(inp.h, inp.cover, inp.stirrup_dia, inp.tension_bar_dia)
    d_prime = compression_steel_depth(inp.cover, inp.stirrup_dia, inp.compression_bar_dia)
    bar_dia = inp.tension_bar_dia if inp.fixed_bar_dia else None

    d = d_initial
    layout: BarLayout | None = None
    iterations = 0
    for iterations in range(1, MAX_LAYOUT_ITERATIONS + 1):
        flexure = flexural_design(inp.M_u, inp.f_c, inp.f_y, inp.b, d, inp.phi_flexure, d_prime)
        new_layout = select_bars(
            flexure.A_s_req,
            inp.bar_areas,
            inp.b,
            inp.cover,
            inp.stirrup_dia,
            max_layers=inp.max_layers,
            bar_dia=bar_dia,
            use_side_bars=inp.use_side_bars,
            side_bar_dia=inp.side_bar_dia,
        )
        d_new = inp.h - new_layout.centroid_offset
        stable = layout is not None and _same_layout(layout, new_layout)
        layout = new_layout
        if stable or abs(d_new - d) < 1e-6:
            d = d_new
            break
        d = d_new
    else:
        logger.warning("Bar layout did not settle after %d iterations", MAX_LAYOUT_ITERATIONS)

    # final flexural state at the settled depth
    flexure = flexural_design(inp.M_u, inp.f_c, inp.f_y, inp.b, d, inp.phi_flexure, d_prime)
    if flexure.A_s_req > layout.A_s_prov:
        layout = select_bars(
            flexure.A_s_req,
            inp.bar_areas,
            inp.b,
            inp.cover,
            inp.stirrup_dia,
            max_layers=inp.max_layers,
            bar_dia=bar_dia,
            use_side_bars=inp.use_side_bars,
            side_bar_dia=inp.side_bar_dia,
        )
        d = inp.h - layout.centroid_offset

    compression: BarLayout | None = None
    if flexure.is_doubly and flexure.A_s_prime > 0:
        compression = select_bars(
            flexure.A_s_prime,
            inp.bar_areas,
            inp.b,
            inp.cover,
            inp.stirrup_dia,
            is_compression=True,
            max_layers=inp.max_layers,
            bar_dia=inp.compression_bar_dia if inp.fixed_bar_dia else None,
        )
        d_prime = compression.centroid_offset

    shear = shear_design(inp.f_c, inp.f_y, inp.b, d, inp.V_u, inp.stirrup_dia, inp.phi_shear)
    torsion = torsion_design(
        inp.f_c, inp.f_y, inp.b, inp.h, inp.T_u, inp.stirrup_dia, inp.phi_torsion
    )
    capacity = nominal_moment_capacity(
        inp.b,
        d,
        d_prime,
        layout.A_s_prov,
        compression.A_s_prov if compression is not None else 0.0,
        inp.f_c,
        inp.f_y,
    )

    result = ReinforcementDesign(
        inp=inp,
        d_initial=d_initial,
        d=d,
        beta1=beta1(inp.f_c),
        flexure=flexure,
        tension=layout,
        compression=compression,
        d_prime=d_prime,
        shear=shear,
        torsion=torsion,
        capacity=capacity,
        iterations=iterations,
    )
    logger.info(
        "Design %gx%g: %dØ%g tension, φMn = %.1f kNm, ratio %.3f",
        inp.b, inp.h, layout.n_bars, layout.bar_dia,
        capacity.phi_M_n * NMM_TO_KNM, result.capacity_ratio,
    )
    return result
