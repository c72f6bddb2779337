"""Shear, bending moment and torsion at a section (left free body).

Reactions are always passed in; nothing here solves the beam again. Both
support reactions act from their own station onwards. The fixing couple at B
acts only strictly to the right of B, so a fixed end at x = L still shows
its end moment.
"""

from __future__ import annotations

from .beam import Beam
from .statics import Reactions


def _outside(beam: Beam, x: float) -> bool:
    return x < 0.0 or x > beam.length


def shear_at(beam: Beam, reactions: Reactions, x: float) -> float:
    """Shear force V(x) in N."""
    if _outside(beam, x):
        return 0.0
    v = 0.0
    if x >= beam.start_support.position:
        v += reactions.reaction_a
    if x >= beam.end_support.position:
        v += reactions.reaction_b
    for ld in beam.loads:
        v += ld.shear_at(x)
    return v


def moment_at(beam: Beam, reactions: Reactions, x: float) -> float:
    """Bending moment M(x) in N·m, sagging positive."""
    if _outside(beam, x):
        return 0.0
    xa = beam.start_support.position
    xb = beam.end_support.position
    m = 0.0
    if x >= xa:
        m += reactions.reaction_a * (x - xa) + reactions.moment_a
    if x >= xb:
        m += reactions.reaction_b * (x - xb)
    if x > xb:
        m -= reactions.moment_b
    for ld in beam.loads:
        m += ld.moment_at(x)
    return m


def torsion_at(beam: Beam, x: float) -> float:
    """Torsional moment T(x) in N·m."""
    if _outside(beam, x):
        return 0.0
    return sum((ld.torsion_at(x) for ld in beam.loads), 0.0)
