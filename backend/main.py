"""Demo: Simply supported RC beam — analysis + ACI 318-19 reinforcement design.

The HTTP API is served separately with ``beamdesign-api`` (or
``python -m api.main`` from this folder).
"""

from beamdesign import (
    BeamModel,
    ReinforcementInput,
    RotationDirection,
    SupportType,
    design_from_analysis,
    setup_logging,
)


def main():
    setup_logging()

    # ── Analysis ──────────────────────────────────────────────────
    m = BeamModel("Simply Supported Beam", length=6.0, height=600, width=300)
    m.set_material(elastic_modulus=25_000, shear_modulus=10_400)  # C28 concrete

    m.add_support(SupportType.PIN, 0.0)
    m.add_support(SupportType.ROLLER, 6.0)
    m.add_distributed_load(0.0, 40_000, length=6.0)  # 40 kN/m downward
    m.add_point_load(2.0, 60_000)                    # 60 kN
    m.add_torsion(3.0, 8_000, RotationDirection.CLOCKWISE)

    results = m.analyze()
    results.print_reactions()
    results.print_extremes()

    # ── ACI 318-19 Design ─────────────────────────────────────────
    template = ReinforcementInput(f_c=28, f_y=420, cover=40, stirrup_dia=10)
    design = design_from_analysis(results, template, load_factor=1.4)
    design.print_summary()


if __name__ == "__main__":
    main()
