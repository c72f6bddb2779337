"""Pydantic request/response models for the API."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field


# ── Request Models ────────────────────────────────────────────


class MaterialInput(BaseModel):
    elastic_modulus: float = 200_000.0  # MPa
    shear_modulus: float = 80_000.0     # MPa
    yield_strength: float | None = None     # MPa
    ultimate_strength: float | None = None  # MPa


class SupportInput(BaseModel):
    type: Literal["pin", "roller", "fixed", "free"]
    position: float  # metres


class LoadInput(BaseModel):
    type: Literal["point", "distributed", "moment", "torsion"]
    position: float  # metres
    magnitude: float  # N, N/m or N·m
    length: float | None = None  # metres (distributed only)
    direction: Literal["clockwise", "anticlockwise"] = "clockwise"


class BeamInput(BaseModel):
    name: str = "Beam"
    length: float  # metres
    height: float  # mm
    width: float   # mm
    material: MaterialInput = Field(default_factory=MaterialInput)
    start_support: SupportInput
    end_support: SupportInput
    loads: list[LoadInput] = []
    partial_load_model: Literal["exact", "centroid"] = "exact"


class DiagramRequest(BaseModel):
    beam: BeamInput
    num_points: int = Field(default=100, ge=1, le=2000)


class DesignInput(BaseModel):
    """ACI design input (N, mm, MPa, N·mm)."""

    f_c: float = 28.0
    f_y: float = 420.0
    b: float = 300.0
    h: float = 600.0
    cover: float = 40.0
    stirrup_dia: float = 10.0
    tension_bar_dia: float = 25.0
    compression_bar_dia: float = 20.0
    M_u: float = 350e6
    V_u: float = 250e3
    T_u: float = 0.0
    bar_areas: dict[float, float] | None = None
    stirrup_sizes: list[float] | None = None
    phi_flexure: float = 0.9
    phi_shear: float = 0.75
    phi_torsion: float = 0.75
    use_side_bars: bool = False
    side_bar_dia: float | None = None
    max_layers: int = 4
    fixed_bar_dia: bool = False


class DesignRequest(BaseModel):
    design: DesignInput = Field(default_factory=DesignInput)
    # When given, M_u, V_u, T_u, b and h come from analysing this beam
    beam: BeamInput | None = None
    load_factor: float = 1.0


class RCSectionInput(BaseModel):
    b: float
    h: float
    f_c: float
    f_y: float
    cover: float
    tension_bar_dia: float
    tension_bar_count: int
    compression_bar_dia: float = 0.0
    compression_bar_count: int = 0
    stirrup_dia: float = 10.0
    stirrup_spacing: float | None = None
    stirrup_legs: int = 2


class DemandInput(BaseModel):
    axial: float = 0.0    # N
    shear: float = 0.0    # N
    moment: float = 0.0   # N·mm
    torsion: float = 0.0  # N·mm


class SectionCheckRequest(BaseModel):
    section: RCSectionInput
    demand: DemandInput = Field(default_factory=DemandInput)


class SectionPropertiesRequest(BaseModel):
    width_mm: float
    height_mm: float
    refined: bool = False


# ── Response Models ───────────────────────────────────────────


class ErrorOutput(BaseModel):
    error: str
    message: str


class ReactionOutput(BaseModel):
    reaction_a: float  # N
    reaction_b: float  # N
    moment_a: float    # N·m
    moment_b: float    # N·m


class ExtremeOutput(BaseModel):
    value: float
    x: float  # metres


class AnalysisOutput(BaseModel):
    name: str
    reactions: ReactionOutput
    equilibrium_force: float   # N
    equilibrium_moment: float  # N·m
    max_shear: ExtremeOutput       # N
    max_moment: ExtremeOutput      # N·m
    max_torsion: ExtremeOutput     # N·m
    max_deflection: ExtremeOutput  # mm
    max_von_mises: ExtremeOutput   # MPa
    safety_factor: float | None = None
    stress_status: Literal["safe", "marginal", "unsafe"] | None = None


class DiagramOutput(BaseModel):
    x: list[float]
    shear: list[float]
    moment: list[float]
    torsion: list[float]
    deflection: list[float]
    normal_stress: list[float]
    shear_stress: list[float]
    torsional_stress: list[float]
    von_mises_stress: list[float]


class BarLayoutOutput(BaseModel):
    bar_dia: float
    n_bars: int
    A_s_prov: float
    width_required: float
    n_layers: int
    bars_per_layer: int
    side_bar_dia: float | None = None
    n_side_bars: int = 0


class ShearOutput(BaseModel):
    V_c: float
    V_s_req: float
    A_v: float | None
    s: float | None
    message: str


class TorsionOutput(BaseModel):
    A_c: float
    p_c: float
    A_t_over_s: float
    s_t: float
    n_legs: int
    A_lt: float
    message: str


class MomentCapacityOutput(BaseModel):
    c: float
    a: float
    eps_t: float
    f_s_prime: float
    M_n: float      # N·mm
    phi: float
    phi_M_n: float  # N·mm
    failure_mode: str


class DesignOutput(BaseModel):
    M_u: float
    V_u: float
    T_u: float
    d_initial: float
    d: float
    beta1: float
    is_doubly: bool
    A_s_req: float
    A_s_min: float
    A_s_max_singly: float
    A_s_prime: float
    tension: BarLayoutOutput
    compression: BarLayoutOutput | None
    d_prime: float
    shear: ShearOutput
    torsion: TorsionOutput | None
    capacity: MomentCapacityOutput
    capacity_ratio: float | None
    overall_ok: bool
    iterations: int


class SectionCheckOutput(BaseModel):
    axial_capacity: float    # N
    shear_capacity: float    # N
    moment_capacity: float   # N·mm
    torsion_capacity: float  # N·mm
    axial_ratio: float
    shear_ratio: float
    bending_ratio: float
    torsion_ratio: float
    combined_ratio: float
    utilization: float
    adequate: bool
    failure_mode: str


class RefinedSectionOutput(BaseModel):
    area_mm2: float
    ixx_mm4: float
    iyy_mm4: float
    j_mm4: float | None
    j_roark_mm4: float
    torsion_error: float | None
    warnings: list[str]


class SectionPropertiesOutput(BaseModel):
    area: float                     # m²
    moment_of_inertia: float        # m⁴
    section_modulus: float          # m³
    polar_moment_of_inertia: float  # m⁴
    torsional_constant: float       # m⁴
    moment_of_inertia_minor: float
    section_modulus_minor: float
    radius_of_gyration: float
    radius_of_gyration_minor: float
    plastic_modulus: float
    plastic_modulus_minor: float
    refined: RefinedSectionOutput | None = None


class BarInfo(BaseModel):
    designation: str
    diameter: int
    area: float
    mass_per_metre: float
    roles: list[str]
