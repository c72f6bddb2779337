"""Material dataclass for beam analysis."""

from __future__ import annotations

import math
from dataclasses import dataclass

from .errors import InputValidationError
from .units import MPA_TO_PA


@dataclass(frozen=True)
class MaterialProperties:
    """Linear elastic material."""

    elastic_modulus: float  # E (MPa)
    shear_modulus: float    # G (MPa)
    yield_strength: float | None = None     # fy (MPa)
    ultimate_strength: float | None = None  # fu (MPa)

    def __post_init__(self) -> None:
        if not math.isfinite(self.elastic_modulus) or self.elastic_modulus <= 0:
            raise InputValidationError("Elastic modulus must be positive")
        if not math.isfinite(self.shear_modulus) or self.shear_modulus <= 0:
            raise InputValidationError("Shear modulus must be positive")
        for name in ("yield_strength", "ultimate_strength"):
            value = getattr(self, name)
            if value is not None and (not math.isfinite(value) or value <= 0):
                raise InputValidationError(f"{name.replace('_', ' ').capitalize()} must be positive")

    @property
    def elastic_modulus_pa(self) -> float:
        return self.elastic_modulus * MPA_TO_PA
