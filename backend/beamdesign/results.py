"""Analysis results container."""

from __future__ import annotations

from dataclasses import dataclass, field

from .beam import Beam
from .diagrams import DiagramPoint
from .errors import InputValidationError
from .statics import Reactions, equilibrium_residuals
from .stress import StressCheck, StressState, stress_check
from .units import N_TO_KN


@dataclass
class AnalysisResults:
    """Stores analysis output: reactions and the sampled diagram."""

    beam: Beam
    reactions: Reactions
    diagram: list[DiagramPoint] = field(default_factory=list)

    def _extreme(self, attr: str) -> tuple[float, float]:
        best_value = 0.0
        best_x = 0.0
        for pt in self.diagram:
            value = getattr(pt, attr)
            if abs(value) > abs(best_value):
                best_value = value
                best_x = pt.position
        return best_value, best_x

    def max_shear(self) -> tuple[float, float]:
        """Max absolute shear force as (V_N, x_m)."""
        return self._extreme("shear")

    def max_moment(self) -> tuple[float, float]:
        """Max absolute bending moment as (M_Nm, x_m)."""
        return self._extreme("moment")

    def max_torsion(self) -> tuple[float, float]:
        return self._extreme("torsion")

    def max_deflection(self) -> tuple[float, float]:
        """Max absolute deflection as (deflection_mm, x_m)."""
        return self._extreme("deflection")

    def max_von_mises(self) -> tuple[float, float]:
        return self._extreme("von_mises_stress")

    def equilibrium(self) -> tuple[float, float]:
        """Residual (ΣF in N, ΣM in N·m); both ~0 for a balanced solution."""
        return equilibrium_residuals(self.beam, self.reactions)

    def stress_check(self, yield_strength: float | None = None) -> StressCheck:
        """Safety check of the governing station against the yield strength.

        Falls back to the material's yield strength when none is given.
        """
        fy = yield_strength if yield_strength is not None else self.beam.material.yield_strength
        if fy is None:
            raise InputValidationError("No yield strength given and the material defines none")
        if not self.diagram:
            raise InputValidationError("No diagram to check")
        governing = max(self.diagram, key=lambda pt: pt.von_mises_stress)
        state = StressState(
            normal=governing.normal_stress,
            shear=governing.shear_stress,
            torsional=governing.torsional_stress,
            von_mises=governing.von_mises_stress,
        )
        return stress_check(state, fy)

    def print_reactions(self) -> None:
        """Print reaction forces and fixing moments at each support."""
        r = self.reactions
        print("\n=== Reactions ===")
        print(f"{'Support':<10} {'Type':<8} {'x (m)':>8} {'R (kN)':>12} {'M (kNm)':>12}")
        print("-" * 54)
        rows = (
            ("A", self.beam.start_support, r.reaction_a, r.moment_a),
            ("B", self.beam.end_support, r.reaction_b, r.moment_b),
        )
        for name, sup, force, moment in rows:
            print(
                f"{name:<10} {sup.support_type.value:<8} {sup.position:>8.3f}"
                f" {force * N_TO_KN:>12.2f} {moment * N_TO_KN:>12.2f}"
            )
        sum_f, sum_m = self.equilibrium()
        print("-" * 54)
        print(f"{'Residual':<10} {'':<8} {'':>8} {sum_f * N_TO_KN:>12.2e} {sum_m * N_TO_KN:>12.2e}")

    def print_extremes(self) -> None:
        """Print the governing values of each diagram quantity."""
        print("\n=== Extremes ===")
        print(f"{'Quantity':<18} {'Value':>14} {'@ x (m)':>10}")
        print("-" * 44)
        v, xv = self.max_shear()
        m, xm = self.max_moment()
        t, xt = self.max_torsion()
        d, xd = self.max_deflection()
        s, xs = self.max_von_mises()
        print(f"{'Shear (kN)':<18} {v * N_TO_KN:>14.2f} {xv:>10.3f}")
        print(f"{'Moment (kNm)':<18} {m * N_TO_KN:>14.2f} {xm:>10.3f}")
        print(f"{'Torsion (kNm)':<18} {t * N_TO_KN:>14.2f} {xt:>10.3f}")
        print(f"{'Deflection (mm)':<18} {d:>14.4f} {xd:>10.3f}")
        print(f"{'von Mises (MPa)':<18} {s:>14.2f} {xs:>10.3f}")
