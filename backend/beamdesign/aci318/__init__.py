"""ACI 318-19 reinforced concrete beam design."""

from .bars import BarLayout, select_bars
from .capacity import FailureMode, NominalMomentCapacity, nominal_moment_capacity
from .design import ReinforcementDesign, ReinforcementInput, design_reinforcement
from .flexure import (
    FlexuralDesign,
    SteelLimits,
    beta1,
    effective_depth,
    flexural_design,
    required_steel_area,
    steel_limits,
)
from .section_check import RCSection, SectionCapacity, SectionDemand, evaluate_section_capacity
from .shear import ShearDesign, shear_design
from .torsion import TorsionDesign, torsion_design

__all__ = [
    "BarLayout",
    "FailureMode",
    "FlexuralDesign",
    "NominalMomentCapacity",
    "RCSection",
    "ReinforcementDesign",
    "ReinforcementInput",
    "SectionCapacity",
    "SectionDemand",
    "ShearDesign",
    "SteelLimits",
    "TorsionDesign",
    "beta1",
    "design_reinforcement",
    "effective_depth",
    "evaluate_section_capacity",
    "flexural_design",
    "nominal_moment_capacity",
    "required_steel_area",
    "select_bars",
    "shear_design",
    "steel_limits",
    "torsion_design",
]
