"""Compute diagram arrays from AnalysisResults."""

from __future__ import annotations

from beamdesign import AnalysisResults

from .schemas import DiagramOutput


def compute_diagrams(results: AnalysisResults) -> DiagramOutput:
    """Transpose the sampled diagram points into per-quantity arrays."""
    pts = results.diagram
    return DiagramOutput(
        x=[p.position for p in pts],
        shear=[p.shear for p in pts],
        moment=[p.moment for p in pts],
        torsion=[p.torsion for p in pts],
        deflection=[p.deflection for p in pts],
        normal_stress=[p.normal_stress for p in pts],
        shear_stress=[p.shear_stress for p in pts],
        torsional_stress=[p.torsional_stress for p in pts],
        von_mises_stress=[p.von_mises_stress for p in pts],
    )
