"""Support reactions of a single-span beam.

Sign convention:
    reaction_a, reaction_b  upward positive (N)
    moment_a                fixing couple at A, equal to the internal moment
                            just right of A (sagging positive, N·m)
    moment_b                internal moment just left of B, i.e. minus the
                            clockwise fixing couple at B (N·m)

Two-support beams are solved by superposing closed-form beam-table
solutions, one kernel per load; cantilevers by direct statics at the fixed
end.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from functools import singledispatch

import numpy as np

from .beam import Beam
from .errors import UnstableSupportError
from .load import DistributedLoad, MomentLoad, PointLoad, TorsionLoad
from .support import SupportType

logger = logging.getLogger(__name__)

# 3-point Gauss-Legendre integrates the cubic point-load kernels exactly
_GAUSS_POINTS, _GAUSS_WEIGHTS = np.polynomial.legendre.leggauss(3)


@dataclass(frozen=True)
class Reactions:
    reaction_a: float = 0.0
    reaction_b: float = 0.0
    moment_a: float = 0.0
    moment_b: float = 0.0

    def __add__(self, other: Reactions) -> Reactions:
        return Reactions(
            self.reaction_a + other.reaction_a,
            self.reaction_b + other.reaction_b,
            self.moment_a + other.moment_a,
            self.moment_b + other.moment_b,
        )

    def as_tuple(self) -> tuple[float, float, float, float]:
        return self.reaction_a, self.reaction_b, self.moment_a, self.moment_b


class PartialLoadModel(Enum):
    """How fixed-fixed beams treat distributed loads not covering the span."""

    EXACT = "exact"        # integrate the point-load kernel
    CENTROID = "centroid"  # equivalent point load at the load centroid


class _SpanMode(Enum):
    SIMPLE = "simple"
    FIXED_FIXED = "fixed_fixed"
    FIXED_START = "fixed_start"  # fixed at A, pin/roller at B
    FIXED_END = "fixed_end"      # pin/roller at A, fixed at B


# ── Beam-table kernels (a measured from A, span L) ───────────────────


def _point_kernel(mode: _SpanMode, L: float, a: float, P: float) -> Reactions:
    b = L - a
    if mode is _SpanMode.SIMPLE:
        return Reactions(P * b / L, P * a / L)
    if mode is _SpanMode.FIXED_FIXED:
        return Reactions(
            P * b * b * (3 * a + b) / L**3,
            P * a * a * (a + 3 * b) / L**3,
            -P * a * b * b / L**2,
            -P * a * a * b / L**2,
        )
    if mode is _SpanMode.FIXED_START:
        rb = P * a * a * (3 * L - a) / (2 * L**3)
        return Reactions(P - rb, rb, -P * a * b * (L + b) / (2 * L**2), 0.0)
    ra = P * b * b * (3 * L - b) / (2 * L**3)
    return Reactions(ra, P - ra, 0.0, -P * a * b * (L + a) / (2 * L**2))


def _couple_kernel(mode: _SpanMode, L: float, a: float, C: float) -> Reactions:
    """Clockwise couple ``C`` at ``a``."""
    b = L - a
    if mode is _SpanMode.SIMPLE:
        return Reactions(-C / L, C / L)
    if mode is _SpanMode.FIXED_FIXED:
        ra = -6 * C * a * b / L**3
        return Reactions(
            ra,
            -ra,
            C * b * (2 * a - b) / L**2,
            C * a * (a - 2 * b) / L**2,
        )
    if mode is _SpanMode.FIXED_START:
        ra = -3 * C * (L * L - b * b) / (2 * L**3)
        return Reactions(ra, -ra, C * (L * L - 3 * b * b) / (2 * L**2), 0.0)
    ra = -3 * C * (L * L - a * a) / (2 * L**3)
    return Reactions(ra, -ra, 0.0, C * (3 * a * a - L * L) / (2 * L**2))


class _TwoSupportSolver:
    """Superposition context shared by the per-load kernels."""

    def __init__(self, beam: Beam, mode: _SpanMode, partial_model: PartialLoadModel) -> None:
        self.start = beam.start_support.position
        self.end = beam.end_support.position
        self.span = self.end - self.start
        self.mode = mode
        self.partial_model = partial_model

    def force(self, x: float, P: float) -> Reactions:
        """Vertical force at absolute position ``x`` (overhangs transferred)."""
        if x < self.start:
            return self._transfer(0.0, P, P * (x - self.start))
        if x > self.end:
            return self._transfer(self.span, P, P * (x - self.end))
        return _point_kernel(self.mode, self.span, x - self.start, P)

    def couple(self, x: float, C: float) -> Reactions:
        # a couple on a rigid overhang acts unchanged at the support
        a = min(max(x - self.start, 0.0), self.span)
        return _couple_kernel(self.mode, self.span, a, C)

    def _transfer(self, a: float, P: float, C: float) -> Reactions:
        return _point_kernel(self.mode, self.span, a, P) + _couple_kernel(
            self.mode, self.span, a, C
        )

    def uniform(self, x0: float, x1: float, w: float) -> Reactions:
        """Uniform load ``w`` over [x0, x1]."""
        total = Reactions()
        # overhang parts are statically determinate: resultant at centroid
        for lo, hi in ((x0, min(x1, self.start)), (max(x0, self.end), x1)):
            if hi > lo:
                total = total + self.force((lo + hi) / 2, w * (hi - lo))

        lo, hi = max(x0, self.start), min(x1, self.end)
        if hi <= lo:
            return total

        if (
            self.mode is _SpanMode.FIXED_FIXED
            and self.partial_model is PartialLoadModel.CENTROID
            and not (lo == self.start and hi == self.end)
        ):
            return total + self.force((lo + hi) / 2, w * (hi - lo))

        half = (hi - lo) / 2
        mid = (hi + lo) / 2
        for xi, weight in zip(_GAUSS_POINTS, _GAUSS_WEIGHTS):
            a = mid + half * float(xi) - self.start
            total = total + _point_kernel(self.mode, self.span, a, w * half * float(weight))
        return total


# ── Per-load dispatch ────────────────────────────────────────────────


@singledispatch
def _load_reactions(load, solver: _TwoSupportSolver) -> Reactions:
    raise TypeError(f"Unsupported load type: {type(load).__name__}")


@_load_reactions.register
def _(load: PointLoad, solver: _TwoSupportSolver) -> Reactions:
    return solver.force(load.position, load.magnitude)


@_load_reactions.register
def _(load: DistributedLoad, solver: _TwoSupportSolver) -> Reactions:
    return solver.uniform(load.position, load.end, load.magnitude)


@_load_reactions.register
def _(load: MomentLoad, solver: _TwoSupportSolver) -> Reactions:
    return solver.couple(load.position, load.signed_magnitude)


@_load_reactions.register
def _(load: TorsionLoad, solver: _TwoSupportSolver) -> Reactions:
    return Reactions()


# ── Cantilever statics ───────────────────────────────────────────────


def _cantilever_reactions(beam: Beam) -> Reactions:
    fixed_at_start = beam.start_support.support_type is SupportType.FIXED
    root = beam.start_support.position if fixed_at_start else beam.end_support.position

    force = 0.0
    moment = 0.0  # clockwise moment of the loads about the fixed end
    for ld in beam.loads:
        force += ld.resultant
        moment += ld.resultant * (ld.centroid - root)
        if isinstance(ld, MomentLoad):
            moment += ld.signed_magnitude

    if fixed_at_start:
        return Reactions(reaction_a=force, moment_a=-moment)
    # moment_b is minus the clockwise fixing couple, which balances the loads
    return Reactions(reaction_b=force, moment_b=moment)


def _span_mode(start: SupportType, end: SupportType) -> _SpanMode:
    if start is SupportType.FIXED and end is SupportType.FIXED:
        return _SpanMode.FIXED_FIXED
    if start is SupportType.FIXED:
        return _SpanMode.FIXED_START
    if end is SupportType.FIXED:
        return _SpanMode.FIXED_END
    return _SpanMode.SIMPLE


def solve_reactions(
    beam: Beam, partial_model: PartialLoadModel = PartialLoadModel.EXACT
) -> Reactions:
    """Compute the support reactions of ``beam`` at full precision."""
    start = beam.start_support.support_type
    end = beam.end_support.support_type

    if start is SupportType.FREE and end is SupportType.FREE:
        if beam.loads:
            logger.warning("Beam has no supports; loads are ignored and reactions are zero")
        return Reactions()

    if beam.is_cantilever:
        reactions = _cantilever_reactions(beam)
        logger.debug("Cantilever reactions: %s", reactions)
        return reactions

    if SupportType.FREE in (start, end):
        raise UnstableSupportError(
            f"A {start.value}/{end.value} support pair cannot resist rotation (mechanism)"
        )

    solver = _TwoSupportSolver(beam, _span_mode(start, end), partial_model)
    reactions = Reactions()
    for ld in beam.loads:
        reactions = reactions + _load_reactions(ld, solver)
    logger.debug("Reactions (%s): %s", solver.mode.value, reactions)
    return reactions


def equilibrium_residuals(beam: Beam, reactions: Reactions) -> tuple[float, float]:
    """Return (ΣF, ΣM) of the loaded beam; ΣM about x = 0, anticlockwise positive."""
    xa = beam.start_support.position
    xb = beam.end_support.position
    sum_f = reactions.reaction_a + reactions.reaction_b
    sum_m = (
        reactions.reaction_a * xa
        + reactions.reaction_b * xb
        - reactions.moment_a
        + reactions.moment_b
    )
    for ld in beam.loads:
        sum_f -= ld.resultant
        sum_m -= ld.resultant * ld.centroid
        if isinstance(ld, MomentLoad):
            sum_m -= ld.signed_magnitude
    return sum_f, sum_m
