"""Converts JSON input into BeamModel and design calls."""

from __future__ import annotations

from beamdesign import (
    AnalysisResults,
    BeamModel,
    PartialLoadModel,
    RCSection,
    ReinforcementInput,
    RotationDirection,
    SectionDemand,
    SupportType,
)

from .schemas import BeamInput, DemandInput, DesignInput, RCSectionInput


# ── Analysis ──────────────────────────────────────────────────


def build_model(data: BeamInput) -> BeamModel:
    """Create a BeamModel from input data (validated load by load)."""
    m = BeamModel(data.name, length=data.length, height=data.height, width=data.width)
    mat = data.material
    m.set_material(
        elastic_modulus=mat.elastic_modulus,
        shear_modulus=mat.shear_modulus,
        yield_strength=mat.yield_strength,
        ultimate_strength=mat.ultimate_strength,
    )
    m.add_support(SupportType(data.start_support.type), data.start_support.position)
    m.add_support(SupportType(data.end_support.type), data.end_support.position)

    for ld in data.loads:
        direction = RotationDirection(ld.direction)
        if ld.type == "point":
            m.add_point_load(ld.position, ld.magnitude)
        elif ld.type == "distributed":
            m.add_distributed_load(ld.position, ld.magnitude, ld.length or 0.0)
        elif ld.type == "moment":
            m.add_moment(ld.position, ld.magnitude, direction)
        else:
            m.add_torsion(ld.position, ld.magnitude, direction)
    return m


def build_and_analyze(data: BeamInput, points: int = 100) -> AnalysisResults:
    """Build a beam from input data and run the analysis."""
    m = build_model(data)
    return m.analyze(points=points, partial_model=PartialLoadModel(data.partial_load_model))


# ── Design ────────────────────────────────────────────────────


def build_design_input(data: DesignInput) -> ReinforcementInput:
    values = data.model_dump()
    # absent catalog entries fall back to the bundled bar catalog
    for key in ("bar_areas", "stirrup_sizes"):
        if values[key] is None:
            del values[key]
    return ReinforcementInput(**values)


def build_section(data: RCSectionInput) -> RCSection:
    return RCSection(**data.model_dump())


def build_demand(data: DemandInput) -> SectionDemand:
    return SectionDemand(**data.model_dump())
