"""Sampling of internal forces, deflection and stresses along the beam."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass

from .beam import Beam
from .deflection import DeflectionSolver
from .errors import InputValidationError
from .internal_forces import moment_at, shear_at, torsion_at
from .statics import Reactions, solve_reactions
from .stress import stresses_at

DEFAULT_DIAGRAM_POINTS = 100


@dataclass(frozen=True)
class DiagramPoint:
    position: float          # m
    shear: float             # N
    moment: float            # N·m
    torsion: float           # N·m
    deflection: float        # mm
    normal_stress: float     # MPa
    shear_stress: float      # MPa
    torsional_stress: float  # MPa
    von_mises_stress: float  # MPa


def generate_diagram(
    beam: Beam,
    points: int = DEFAULT_DIAGRAM_POINTS,
    reactions: Reactions | None = None,
    deflection: Callable[[float], float] | None = None,
) -> Iterator[DiagramPoint]:
    """Yield ``points + 1`` evenly spaced diagram stations over [0, L].

    Reactions, section properties and the deflection solution are computed
    once here (unless supplied) and reused for every station.
    """
    if points < 1:
        raise InputValidationError("Diagram needs at least one interval")
    if reactions is None:
        reactions = solve_reactions(beam)
    if deflection is None:
        deflection = DeflectionSolver.for_beam(beam)
    section = beam.section
    width, height = beam.geometry.width, beam.geometry.height

    for i in range(points + 1):
        x = beam.length * i / points
        v = shear_at(beam, reactions, x)
        m = moment_at(beam, reactions, x)
        t = torsion_at(beam, x)
        s = stresses_at(section, width, height, m, v, t)
        yield DiagramPoint(
            position=x,
            shear=v,
            moment=m,
            torsion=t,
            deflection=deflection(x),
            normal_stress=s.normal,
            shear_stress=s.shear,
            torsional_stress=s.torsional,
            von_mises_stress=s.von_mises,
        )
