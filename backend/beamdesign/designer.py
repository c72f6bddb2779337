"""Analysis + ACI design in one call."""

from __future__ import annotations

import dataclasses
import logging

from .aci318.design import ReinforcementDesign, ReinforcementInput, design_reinforcement
from .errors import InputValidationError
from .results import AnalysisResults
from .units import N_TO_KN, NM_TO_NMM, NMM_TO_KNM

logger = logging.getLogger(__name__)


def design_actions(results: AnalysisResults, load_factor: float = 1.0) -> tuple[float, float, float]:
    """Governing (M_u N·mm, V_u N, T_u N·mm) from an analysis diagram."""
    if load_factor <= 0:
        raise InputValidationError("Load factor must be positive")
    m, _ = results.max_moment()
    v, _ = results.max_shear()
    t, _ = results.max_torsion()
    return (
        abs(m) * NM_TO_NMM * load_factor,
        abs(v) * load_factor,
        abs(t) * NM_TO_NMM * load_factor,
    )


def design_from_analysis(
    results: AnalysisResults,
    template: ReinforcementInput | None = None,
    load_factor: float = 1.0,
) -> ReinforcementDesign:
    """Design the analysed beam's section for its governing actions.

    Section dimensions come from the beam geometry; materials, cover, bar
    choices and φ factors from ``template``.
    """
    template = template or ReinforcementInput()
    M_u, V_u, T_u = design_actions(results, load_factor)
    geometry = results.beam.geometry
    inp = dataclasses.replace(
        template,
        b=geometry.width,
        h=geometry.height,
        M_u=M_u,
        V_u=V_u,
        T_u=T_u,
    )
    logger.info(
        "Designing from analysis: Mu = %.1f kNm, Vu = %.1f kN, Tu = %.1f kNm",
        M_u * NMM_TO_KNM, V_u * N_TO_KN, T_u * NMM_TO_KNM,
    )
    return design_reinforcement(inp)
