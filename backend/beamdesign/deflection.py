"""Deflection of a beam, by FEM or closed-form cantilever superposition."""

from __future__ import annotations

import logging
from functools import singledispatch

import numpy as np

from .beam import Beam
from .errors import UnstableSupportError
from .fem import DEFAULT_NUM_ELEMENTS, FemSolution, solve_fem
from .load import DistributedLoad, MomentLoad, PointLoad, TorsionLoad
from .support import SupportType
from .units import M_TO_MM

logger = logging.getLogger(__name__)

_GAUSS_POINTS, _GAUSS_WEIGHTS = np.polynomial.legendre.leggauss(3)


# ── Cantilever closed forms (u, a measured from the fixed end) ───────


def _point_deflection(u: float, a: float, P: float, EI: float) -> float:
    if u <= a:
        return P * u * u * (3 * a - u) / (6 * EI)
    return P * a * a * (3 * u - a) / (6 * EI)


def _couple_deflection(u: float, a: float, C: float, EI: float) -> float:
    if u <= a:
        return C * u * u / (2 * EI)
    return C * a * (2 * u - a) / (2 * EI)


@singledispatch
def _cantilever_deflection(load, root: float, x: float, EI: float) -> float:
    raise TypeError(f"Unsupported load type: {type(load).__name__}")


def _side(root: float, x: float) -> float:
    # each side of the fixed support is an independent cantilever
    return 1.0 if x >= root else -1.0


@_cantilever_deflection.register
def _(load: PointLoad, root: float, x: float, EI: float) -> float:
    side = _side(root, x)
    a = (load.position - root) * side
    if a <= 0:
        return 0.0
    return _point_deflection(abs(x - root), a, load.magnitude, EI)


@_cantilever_deflection.register
def _(load: MomentLoad, root: float, x: float, EI: float) -> float:
    side = _side(root, x)
    a = (load.position - root) * side
    if a <= 0:
        return 0.0
    # mirroring the beam reverses the sense of the couple
    return side * _couple_deflection(abs(x - root), a, load.signed_magnitude, EI)


@_cantilever_deflection.register
def _(load: DistributedLoad, root: float, x: float, EI: float) -> float:
    side = _side(root, x)
    u = abs(x - root)
    lo, hi = sorted(((load.position - root) * side, (load.end - root) * side))
    lo = max(lo, 0.0)
    if hi <= lo:
        return 0.0

    # the point kernel has a kink at a = u: integrate each side separately
    total = 0.0
    for a0, a1 in ((lo, min(hi, u)), (max(lo, u), hi)):
        if a1 <= a0:
            continue
        half = (a1 - a0) / 2
        mid = (a1 + a0) / 2
        for xi, weight in zip(_GAUSS_POINTS, _GAUSS_WEIGHTS):
            a = mid + half * float(xi)
            total += _point_deflection(u, a, load.magnitude * half * float(weight), EI)
    return total


@_cantilever_deflection.register
def _(load: TorsionLoad, root: float, x: float, EI: float) -> float:
    return 0.0


class DeflectionSolver:
    """Deflection of a beam as a function of position, in mm.

    Build with :meth:`for_beam`; the FEM system is solved once there and
    every call afterwards is an interpolation.
    """

    def __init__(self, beam: Beam, fem: FemSolution | None = None) -> None:
        self.beam = beam
        self.fem = fem

    @classmethod
    def for_beam(cls, beam: Beam, num_elements: int = DEFAULT_NUM_ELEMENTS) -> DeflectionSolver:
        start = beam.start_support.support_type
        end = beam.end_support.support_type
        if beam.is_cantilever:
            return cls(beam)
        if start is SupportType.FREE and end is SupportType.FREE:
            logger.warning("Beam has no supports; deflection is reported as zero")
            return cls(beam)
        if SupportType.FREE in (start, end):
            raise UnstableSupportError(
                f"A {start.value}/{end.value} support pair cannot resist rotation (mechanism)"
            )
        return cls(beam, solve_fem(beam, num_elements))

    def __call__(self, x: float) -> float:
        if x < 0.0 or x > self.beam.length:
            return 0.0
        if self.fem is not None:
            return self.fem.deflection_at(x)
        if not self.beam.is_cantilever:
            return 0.0
        return self._cantilever(x)

    def _cantilever(self, x: float) -> float:
        fixed = self.beam.start_support
        if fixed.support_type is not SupportType.FIXED:
            fixed = self.beam.end_support
        EI = self.beam.flexural_rigidity
        v = sum(
            (_cantilever_deflection(ld, fixed.position, x, EI) for ld in self.beam.loads),
            0.0,
        )
        return v * M_TO_MM

    def max_deflection(self, points: int = 200) -> tuple[float, float]:
        """Largest |deflection| sampled over the span as (mm, x_m)."""
        best_v, best_x = 0.0, 0.0
        for k in range(points + 1):
            x = self.beam.length * k / points
            v = self(x)
            if abs(v) > abs(best_v):
                best_v, best_x = v, x
        return best_v, best_x
