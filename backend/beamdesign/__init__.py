"""beamdesign — single-span beam analysis and ACI 318-19 RC design."""

from .aci318 import (
    RCSection,
    ReinforcementDesign,
    ReinforcementInput,
    SectionDemand,
    design_reinforcement,
    evaluate_section_capacity,
)
from .beam import Beam, BeamGeometry
from .catalog import bar_areas, get_bar, list_bars, stirrup_sizes
from .deflection import DeflectionSolver
from .designer import design_from_analysis
from .diagrams import DiagramPoint, generate_diagram
from .errors import (
    BarFitError,
    BeamError,
    FlexuralDesignError,
    InputValidationError,
    NumericalInfeasibilityError,
    ShearCapacityError,
    SingularMatrixError,
    UnstableSupportError,
)
from .internal_forces import moment_at, shear_at, torsion_at
from .load import DistributedLoad, MomentLoad, PointLoad, RotationDirection, TorsionLoad
from .logging_setup import setup_logging
from .material import MaterialProperties
from .model import BeamModel
from .results import AnalysisResults
from .section import SectionProperties, rectangular_section
from .statics import PartialLoadModel, Reactions, equilibrium_residuals, solve_reactions
from .stress import StressState, stress_check, stresses_at
from .support import Support, SupportType

__all__ = [
    "AnalysisResults",
    "BarFitError",
    "Beam",
    "BeamError",
    "BeamGeometry",
    "BeamModel",
    "DeflectionSolver",
    "DiagramPoint",
    "DistributedLoad",
    "FlexuralDesignError",
    "InputValidationError",
    "MaterialProperties",
    "MomentLoad",
    "NumericalInfeasibilityError",
    "PartialLoadModel",
    "PointLoad",
    "RCSection",
    "Reactions",
    "ReinforcementDesign",
    "ReinforcementInput",
    "RotationDirection",
    "SectionDemand",
    "SectionProperties",
    "ShearCapacityError",
    "SingularMatrixError",
    "StressState",
    "Support",
    "SupportType",
    "TorsionLoad",
    "UnstableSupportError",
    "bar_areas",
    "design_from_analysis",
    "design_reinforcement",
    "equilibrium_residuals",
    "evaluate_section_capacity",
    "generate_diagram",
    "get_bar",
    "list_bars",
    "moment_at",
    "rectangular_section",
    "setup_logging",
    "shear_at",
    "solve_reactions",
    "stress_check",
    "stresses_at",
    "stirrup_sizes",
    "torsion_at",
]
