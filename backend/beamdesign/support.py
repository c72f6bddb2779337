"""Support types and dataclass for boundary conditions."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class SupportType(Enum):
    """Support conditions of a single-span beam."""

    PIN = "pin"        # fixed displacement; free rotation
    ROLLER = "roller"  # fixed displacement; free rotation and sliding
    FIXED = "fixed"    # fixed displacement and rotation
    FREE = "free"      # no restraint

    @property
    def restrains_displacement(self) -> bool:
        return self is not SupportType.FREE

    @property
    def restrains_rotation(self) -> bool:
        return self is SupportType.FIXED

    @property
    def is_simple(self) -> bool:
        return self in (SupportType.PIN, SupportType.ROLLER)


@dataclass(frozen=True)
class Support:
    """A support at a position along the beam (m from the left end)."""

    support_type: SupportType
    position: float
