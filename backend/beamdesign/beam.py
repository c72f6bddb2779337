"""Beam definition: geometry, material, two supports and a load set."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from .errors import InputValidationError
from .load import Load, check_distributed_overlap
from .material import MaterialProperties
from .section import SectionProperties, rectangular_section
from .support import Support, SupportType


@dataclass(frozen=True)
class BeamGeometry:
    length: float  # m
    height: float  # mm
    width: float   # mm

    def __post_init__(self) -> None:
        for name in ("length", "height", "width"):
            value = getattr(self, name)
            if not math.isfinite(value) or value <= 0:
                raise InputValidationError(f"Beam {name} must be positive")


@dataclass(frozen=True)
class Beam:
    """A single prismatic rectangular beam on two supports.

    The whole definition is validated on construction, so every algorithm
    downstream can assume a consistent beam.
    """

    geometry: BeamGeometry
    material: MaterialProperties
    start_support: Support
    end_support: Support
    loads: tuple[Load, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        # accept any iterable of loads but store an immutable tuple
        object.__setattr__(self, "loads", tuple(self.loads))

        length = self.geometry.length
        start, end = self.start_support.position, self.end_support.position
        if not (math.isfinite(start) and math.isfinite(end)):
            raise InputValidationError("Support positions must be finite")
        if start < 0 or end > length:
            raise InputValidationError(
                f"Supports must be within beam length (0 to {length:g})"
            )
        if start >= end:
            raise InputValidationError("Start support must be left of end support")

        for ld in self.loads:
            ld.validate(length)
        check_distributed_overlap(self.loads)

    @property
    def length(self) -> float:
        return self.geometry.length

    @property
    def supports(self) -> tuple[Support, Support]:
        return self.start_support, self.end_support

    @property
    def is_cantilever(self) -> bool:
        types = {self.start_support.support_type, self.end_support.support_type}
        return types == {SupportType.FIXED, SupportType.FREE}

    @property
    def section(self) -> SectionProperties:
        return rectangular_section(self.geometry.width, self.geometry.height)

    @property
    def flexural_rigidity(self) -> float:
        """EI in N·m²."""
        return self.material.elastic_modulus_pa * self.section.moment_of_inertia
