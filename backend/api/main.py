"""FastAPI application — beam analysis and RC design API."""

from __future__ import annotations

import logging
import math
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from beamdesign import (
    BeamError,
    design_from_analysis,
    design_reinforcement,
    evaluate_section_capacity,
    list_bars,
    rectangular_section,
    setup_logging,
)
from beamdesign.aci318 import BarLayout, ReinforcementDesign

from .builder import (
    build_and_analyze,
    build_demand,
    build_design_input,
    build_section,
)
from .diagrams import compute_diagrams
from .schemas import (
    AnalysisOutput,
    BarInfo,
    BarLayoutOutput,
    BeamInput,
    DesignOutput,
    DesignRequest,
    DiagramOutput,
    DiagramRequest,
    ErrorOutput,
    ExtremeOutput,
    MomentCapacityOutput,
    ReactionOutput,
    RefinedSectionOutput,
    SectionCheckOutput,
    SectionCheckRequest,
    SectionPropertiesOutput,
    SectionPropertiesRequest,
    ShearOutput,
    TorsionOutput,
)

logger = logging.getLogger("beamdesign.api")


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging(
        log_dir=os.getenv("BEAMDESIGN_LOG_DIR", "logs"),
        level=os.getenv("BEAMDESIGN_LOG_LEVEL", "INFO").upper(),
    )
    yield


app = FastAPI(title="Beam Design API", version="0.1.0", lifespan=lifespan)


def _cors_origins() -> list[str]:
    raw_origins = os.getenv("CORS_ORIGINS", "")
    parsed = [origin.strip() for origin in raw_origins.split(",") if origin.strip()]

    if parsed == ["*"]:
        return ["*"]

    defaults = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
    ]
    return [*defaults, *parsed]


app.add_middleware(
    CORSMiddleware,
    allow_origins=_cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(BeamError)
async def beam_error_handler(request: Request, exc: BeamError) -> JSONResponse:
    """Engine failures become an explicit failed-analysis body."""
    logger.info("%s %s failed: %s (%s)", request.method, request.url.path, exc, exc.kind)
    body = ErrorOutput(error=exc.kind, message=str(exc))
    return JSONResponse(status_code=422, content=body.model_dump())


def _r(value: float, ndigits: int = 3) -> float:
    return round(value, ndigits)


# ── Analysis ──────────────────────────────────────────────────


@app.post("/api/analyze", response_model=AnalysisOutput)
def analyze(data: BeamInput) -> AnalysisOutput:
    """Reactions, equilibrium residuals and governing diagram values."""
    results = build_and_analyze(data)
    r = results.reactions
    sum_f, sum_m = results.equilibrium()

    def extreme(pair: tuple[float, float], ndigits: int = 3) -> ExtremeOutput:
        value, x = pair
        return ExtremeOutput(value=_r(value, ndigits), x=_r(x, 4))

    safety_factor = None
    stress_status = None
    if data.material.yield_strength is not None:
        check = results.stress_check()
        safety_factor = _r(check.safety_factor) if math.isfinite(check.safety_factor) else None
        stress_status = check.status.value

    return AnalysisOutput(
        name=data.name,
        reactions=ReactionOutput(
            reaction_a=_r(r.reaction_a),
            reaction_b=_r(r.reaction_b),
            moment_a=_r(r.moment_a),
            moment_b=_r(r.moment_b),
        ),
        equilibrium_force=_r(sum_f, 6),
        equilibrium_moment=_r(sum_m, 6),
        max_shear=extreme(results.max_shear()),
        max_moment=extreme(results.max_moment()),
        max_torsion=extreme(results.max_torsion()),
        max_deflection=extreme(results.max_deflection(), 4),
        max_von_mises=extreme(results.max_von_mises()),
        safety_factor=safety_factor,
        stress_status=stress_status,
    )


@app.post("/api/diagram", response_model=DiagramOutput)
def diagram(data: DiagramRequest) -> DiagramOutput:
    """Shear, moment, torsion, deflection and stress arrays along the beam."""
    results = build_and_analyze(data.beam, points=data.num_points)
    return compute_diagrams(results)


# ── Design ────────────────────────────────────────────────────


def _layout_output(layout: BarLayout | None) -> BarLayoutOutput | None:
    if layout is None:
        return None
    return BarLayoutOutput(
        bar_dia=layout.bar_dia,
        n_bars=layout.n_bars,
        A_s_prov=_r(layout.A_s_prov, 1),
        width_required=_r(layout.width_required, 1),
        n_layers=layout.n_layers,
        bars_per_layer=layout.bars_per_layer,
        side_bar_dia=layout.side_bar_dia,
        n_side_bars=layout.n_side_bars,
    )


def _design_output(res: ReinforcementDesign) -> DesignOutput:
    fl = res.flexure
    sh = res.shear
    tr = res.torsion
    cap = res.capacity
    ratio = res.capacity_ratio
    return DesignOutput(
        M_u=res.inp.M_u,
        V_u=res.inp.V_u,
        T_u=res.inp.T_u,
        d_initial=_r(res.d_initial, 2),
        d=_r(res.d, 2),
        beta1=_r(res.beta1, 4),
        is_doubly=fl.is_doubly,
        A_s_req=_r(fl.A_s_req, 1),
        A_s_min=_r(fl.A_s_min, 1),
        A_s_max_singly=_r(fl.A_s_max_singly, 1),
        A_s_prime=_r(fl.A_s_prime, 1),
        tension=_layout_output(res.tension),
        compression=_layout_output(res.compression),
        d_prime=_r(res.d_prime, 2),
        shear=ShearOutput(
            V_c=_r(sh.V_c, 1),
            V_s_req=_r(sh.V_s_req, 1),
            A_v=None if sh.A_v is None else _r(sh.A_v, 2),
            s=None if sh.s is None else _r(sh.s, 1),
            message=sh.message,
        ),
        torsion=None if tr is None else TorsionOutput(
            A_c=_r(tr.A_c, 1),
            p_c=_r(tr.p_c, 1),
            A_t_over_s=_r(tr.A_t_over_s, 5),
            s_t=_r(tr.s_t, 1),
            n_legs=tr.n_legs,
            A_lt=_r(tr.A_lt, 1),
            message=tr.message,
        ),
        capacity=MomentCapacityOutput(
            c=_r(cap.c, 2),
            a=_r(cap.a, 2),
            eps_t=_r(cap.eps_t, 6),
            f_s_prime=_r(cap.f_s_prime, 2),
            M_n=_r(cap.M_n, 0),
            phi=_r(cap.phi, 4),
            phi_M_n=_r(cap.phi_M_n, 0),
            failure_mode=cap.failure_mode.value,
        ),
        capacity_ratio=_r(ratio, 4) if math.isfinite(ratio) else None,
        overall_ok=res.overall_ok,
        iterations=res.iterations,
    )


@app.post("/api/design", response_model=DesignOutput)
def design(data: DesignRequest) -> DesignOutput:
    """ACI 318-19 reinforcement design, optionally driven by a beam analysis."""
    inp = build_design_input(data.design)
    if data.beam is not None:
        results = build_and_analyze(data.beam)
        res = design_from_analysis(results, inp, data.load_factor)
    else:
        res = design_reinforcement(inp)
    return _design_output(res)


@app.post("/api/section-check", response_model=SectionCheckOutput)
def section_check(data: SectionCheckRequest) -> SectionCheckOutput:
    """Capacity and utilisation of a given reinforced section."""
    cap = evaluate_section_capacity(build_section(data.section), build_demand(data.demand))
    return SectionCheckOutput(
        axial_capacity=_r(cap.axial, 1),
        shear_capacity=_r(cap.shear, 1),
        moment_capacity=_r(cap.moment, 0),
        torsion_capacity=_r(cap.torsion, 0),
        axial_ratio=_r(cap.axial_ratio, 4),
        shear_ratio=_r(cap.shear_ratio, 4),
        bending_ratio=_r(cap.bending_ratio, 4),
        torsion_ratio=_r(cap.torsion_ratio, 4),
        combined_ratio=_r(cap.combined_ratio, 4),
        utilization=_r(cap.utilization, 4),
        adequate=cap.adequate,
        failure_mode=cap.moment_detail.failure_mode.value,
    )


# ── Sections & catalog ────────────────────────────────────────


@app.post("/api/section-properties", response_model=SectionPropertiesOutput)
def section_properties(data: SectionPropertiesRequest) -> SectionPropertiesOutput:
    """Closed-form rectangle properties, optionally checked by FE analysis."""
    props = rectangular_section(data.width_mm, data.height_mm)
    refined = None
    if data.refined:
        from beamdesign.section_properties import refined_section_properties

        fe = refined_section_properties(data.width_mm, data.height_mm)
        refined = RefinedSectionOutput(
            area_mm2=fe.area_mm2,
            ixx_mm4=fe.ixx_mm4,
            iyy_mm4=fe.iyy_mm4,
            j_mm4=fe.j_mm4,
            j_roark_mm4=fe.j_roark_mm4,
            torsion_error=fe.torsion_error,
            warnings=fe.warnings,
        )
    return SectionPropertiesOutput(
        area=props.area,
        moment_of_inertia=props.moment_of_inertia,
        section_modulus=props.section_modulus,
        polar_moment_of_inertia=props.polar_moment_of_inertia,
        torsional_constant=props.torsional_constant,
        moment_of_inertia_minor=props.moment_of_inertia_minor,
        section_modulus_minor=props.section_modulus_minor,
        radius_of_gyration=props.radius_of_gyration,
        radius_of_gyration_minor=props.radius_of_gyration_minor,
        plastic_modulus=props.plastic_modulus,
        plastic_modulus_minor=props.plastic_modulus_minor,
        refined=refined,
    )


@app.get("/api/bars", response_model=list[BarInfo])
def get_bars(role: str | None = None) -> list[BarInfo]:
    """List reinforcing bars, optionally filtered by role (main, stirrup)."""
    return [
        BarInfo(
            designation=bar.designation,
            diameter=bar.diameter,
            area=bar.area,
            mass_per_metre=bar.mass_per_metre,
            roles=sorted(bar.roles),
        )
        for bar in list_bars(role)
    ]


@app.get("/health")
def health() -> dict[str, str]:
    """Lightweight healthcheck for deployment platforms."""
    return {"status": "ok"}


def serve() -> None:
    """Serve the API with uvicorn (``pip install .[api]``).

    Host and port come from ``BEAMDESIGN_HOST`` and ``BEAMDESIGN_PORT``.
    """
    import uvicorn

    uvicorn.run(
        "api.main:app",
        host=os.getenv("BEAMDESIGN_HOST", "127.0.0.1"),
        port=int(os.getenv("BEAMDESIGN_PORT", "8000")),
    )


if __name__ == "__main__":
    serve()
