"""Rectangular cross-section properties."""

from __future__ import annotations

import math
from dataclasses import dataclass

from .errors import InputValidationError
from .units import MM_TO_M, NEGLIGIBLE


@dataclass(frozen=True)
class SectionProperties:
    """Elastic properties of a solid rectangle (m-units).

    ``moment_of_inertia`` and ``section_modulus`` refer to the major
    (bending) axis; the ``_minor`` fields to the axis through the depth.
    """

    area: float                     # m²
    moment_of_inertia: float        # m⁴
    section_modulus: float          # m³
    polar_moment_of_inertia: float  # m⁴
    torsional_constant: float       # m⁴
    moment_of_inertia_minor: float = 0.0  # m⁴
    section_modulus_minor: float = 0.0    # m³
    radius_of_gyration: float = 0.0       # m
    radius_of_gyration_minor: float = 0.0 # m
    plastic_modulus: float = 0.0          # m³
    plastic_modulus_minor: float = 0.0    # m³


def roark_torsional_constant(width: float, height: float) -> float:
    """St Venant torsion constant of a rectangle (Roark's approximation).

    J = a·b³·(1/3 − 0.21·(b/a)·(1 − (b/a)⁴/12)),  a = long side, b = short side.
    """
    a = max(width, height)
    b = min(width, height)
    r = b / a
    return a * b**3 * (1.0 / 3.0 - 0.21 * r * (1.0 - r**4 / 12.0))


def rectangular_section(width_mm: float, height_mm: float) -> SectionProperties:
    """Compute section properties for a ``width_mm`` × ``height_mm`` rectangle."""
    if not (math.isfinite(width_mm) and width_mm > 0):
        raise InputValidationError("Beam width must be positive")
    if not (math.isfinite(height_mm) and height_mm > 0):
        raise InputValidationError("Beam height must be positive")

    b = width_mm * MM_TO_M
    h = height_mm * MM_TO_M

    area = b * h
    inertia = b * h**3 / 12.0
    inertia_minor = h * b**3 / 12.0
    modulus = inertia / (h / 2.0)
    modulus_minor = inertia_minor / (b / 2.0)

    def floor(value: float) -> float:
        # only degenerate (underflowed) results are replaced
        return value if value > 0.0 else NEGLIGIBLE

    return SectionProperties(
        area=floor(area),
        moment_of_inertia=floor(inertia),
        section_modulus=floor(modulus),
        # thin rectangle approximation
        polar_moment_of_inertia=floor(2.0 * inertia),
        torsional_constant=floor(roark_torsional_constant(b, h)),
        moment_of_inertia_minor=floor(inertia_minor),
        section_modulus_minor=floor(modulus_minor),
        radius_of_gyration=math.sqrt(inertia / area),
        radius_of_gyration_minor=math.sqrt(inertia_minor / area),
        plastic_modulus=floor(b * h**2 / 4.0),
        plastic_modulus_minor=floor(h * b**2 / 4.0),
    )
