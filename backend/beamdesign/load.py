"""Load classes for single-span beams.

Vertical loads are positive downward. Applied moments and torsions carry a
rotation direction; clockwise is positive.

Every load knows its own effect on the internal forces of a section at
``x`` (left free body), so the internal force evaluator is a plain sum.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Union

from .errors import InputValidationError

# Loads with |magnitude| below this are treated as zero (invalid)
MIN_LOAD_MAGNITUDE = 1e-3


class RotationDirection(Enum):
    CLOCKWISE = "clockwise"
    ANTICLOCKWISE = "anticlockwise"

    @property
    def sign(self) -> float:
        return 1.0 if self is RotationDirection.CLOCKWISE else -1.0


@dataclass(frozen=True)
class _BaseLoad:
    position: float   # m from the left end
    magnitude: float

    kind = ""

    def validate(self, beam_length: float) -> None:
        if not (math.isfinite(self.position) and math.isfinite(self.magnitude)):
            raise InputValidationError(f"{self.kind.capitalize()} load values must be finite")
        if self.position < 0 or self.position > beam_length:
            raise InputValidationError(
                f"Load position must be within beam length (0 to {beam_length:g})"
            )
        if abs(self.magnitude) < MIN_LOAD_MAGNITUDE:
            raise InputValidationError("Load magnitude cannot be zero")

    # Effects on the left free body at x; overridden where non-zero.
    def shear_at(self, x: float) -> float:
        return 0.0

    def moment_at(self, x: float) -> float:
        return 0.0

    def torsion_at(self, x: float) -> float:
        return 0.0

    @property
    def resultant(self) -> float:
        """Total vertical force (N, downward positive)."""
        return 0.0

    @property
    def centroid(self) -> float:
        return self.position


@dataclass(frozen=True)
class PointLoad(_BaseLoad):
    """Concentrated vertical force P (N)."""

    kind = "point"

    def shear_at(self, x: float) -> float:
        return -self.magnitude if x >= self.position else 0.0

    def moment_at(self, x: float) -> float:
        return -self.magnitude * (x - self.position) if x >= self.position else 0.0

    @property
    def resultant(self) -> float:
        return self.magnitude


@dataclass(frozen=True)
class DistributedLoad(_BaseLoad):
    """Uniform load w (N/m) from ``position`` over ``length`` (m)."""

    length: float = 0.0

    kind = "distributed"

    @property
    def end(self) -> float:
        return self.position + self.length

    def validate(self, beam_length: float) -> None:
        super().validate(beam_length)
        if not math.isfinite(self.length) or self.length <= 0:
            raise InputValidationError("Distributed load length must be positive")
        if self.end > beam_length + 1e-9:
            raise InputValidationError("Distributed load must be within beam length")

    def overlap(self, x: float) -> float:
        """Loaded length between the load start and ``x``."""
        return max(0.0, min(x, self.end) - self.position)

    def shear_at(self, x: float) -> float:
        return -self.magnitude * self.overlap(x)

    def moment_at(self, x: float) -> float:
        l_eff = self.overlap(x)
        if l_eff <= 0:
            return 0.0
        return -self.magnitude * l_eff * (x - self.position - l_eff / 2)

    @property
    def resultant(self) -> float:
        return self.magnitude * self.length

    @property
    def centroid(self) -> float:
        return self.position + self.length / 2


@dataclass(frozen=True)
class MomentLoad(_BaseLoad):
    """Applied bending couple (N·m)."""

    direction: RotationDirection = RotationDirection.CLOCKWISE

    kind = "moment"

    @property
    def signed_magnitude(self) -> float:
        return self.magnitude * self.direction.sign

    def moment_at(self, x: float) -> float:
        # a clockwise couple on the left free body raises the sagging moment
        return self.signed_magnitude if x >= self.position else 0.0


@dataclass(frozen=True)
class TorsionLoad(_BaseLoad):
    """Applied torque about the beam axis (N·m)."""

    direction: RotationDirection = RotationDirection.CLOCKWISE

    kind = "torsion"

    @property
    def signed_magnitude(self) -> float:
        return self.magnitude * self.direction.sign

    def torsion_at(self, x: float) -> float:
        return self.signed_magnitude if x > self.position else 0.0


Load = Union[PointLoad, DistributedLoad, MomentLoad, TorsionLoad]


def check_distributed_overlap(loads: list[Load] | tuple[Load, ...]) -> None:
    """Raise if any two distributed loads share a loaded interval."""
    spans = sorted(
        (ld.position, ld.end) for ld in loads if isinstance(ld, DistributedLoad)
    )
    for (_, prev_end), (start, _) in zip(spans, spans[1:]):
        if start < prev_end - 1e-9:
            raise InputValidationError("Distributed loads must not overlap")
