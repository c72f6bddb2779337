"""Central BeamModel class — the single entry point for users."""

from __future__ import annotations

import logging

from .beam import Beam, BeamGeometry
from .deflection import DeflectionSolver
from .diagrams import DEFAULT_DIAGRAM_POINTS, generate_diagram
from .errors import InputValidationError
from .fem import DEFAULT_NUM_ELEMENTS
from .load import (
    DistributedLoad,
    Load,
    MomentLoad,
    PointLoad,
    RotationDirection,
    TorsionLoad,
)
from .material import MaterialProperties
from .results import AnalysisResults
from .statics import PartialLoadModel, solve_reactions
from .support import Support, SupportType

logger = logging.getLogger(__name__)


class BeamModel:
    """Single-span beam analysis model.

    Usage:
        m = BeamModel("Floor beam", length=6.0, height=500, width=300)
        m.set_material(elastic_modulus=30_000, shear_modulus=12_500)
        m.add_support(SupportType.PIN, 0.0)
        m.add_support(SupportType.ROLLER, 6.0)
        m.add_distributed_load(0.0, 20_000, length=6.0)
        results = m.analyze()
        results.print_reactions()
    """

    def __init__(
        self,
        name: str = "Beam",
        length: float = 10.0,
        height: float = 300.0,
        width: float = 200.0,
    ) -> None:
        self.name = name
        self.geometry = BeamGeometry(length=length, height=height, width=width)
        # structural steel by default, as a typical starting point
        self.material = MaterialProperties(elastic_modulus=200_000, shear_modulus=80_000)

        self._supports: list[Support] = []
        self._loads: list[Load] = []

        self._results: AnalysisResults | None = None

    # ── Material ─────────────────────────────────────────────────────

    def set_material(
        self,
        elastic_modulus: float,
        shear_modulus: float,
        yield_strength: float | None = None,
        ultimate_strength: float | None = None,
    ) -> MaterialProperties:
        self.material = MaterialProperties(
            elastic_modulus=elastic_modulus,
            shear_modulus=shear_modulus,
            yield_strength=yield_strength,
            ultimate_strength=ultimate_strength,
        )
        return self.material

    # ── Supports ─────────────────────────────────────────────────────

    def add_support(self, support_type: SupportType, position: float) -> Support:
        if len(self._supports) == 2:
            raise InputValidationError("A single-span beam takes exactly two supports")
        sup = Support(support_type=support_type, position=position)
        self._supports.append(sup)
        return sup

    # ── Loads ────────────────────────────────────────────────────────

    def add_point_load(self, position: float, magnitude: float) -> PointLoad:
        return self._add(PointLoad(position=position, magnitude=magnitude))

    def add_distributed_load(
        self, position: float, magnitude: float, length: float
    ) -> DistributedLoad:
        return self._add(DistributedLoad(position=position, magnitude=magnitude, length=length))

    def add_moment(
        self,
        position: float,
        magnitude: float,
        direction: RotationDirection = RotationDirection.CLOCKWISE,
    ) -> MomentLoad:
        return self._add(MomentLoad(position=position, magnitude=magnitude, direction=direction))

    def add_torsion(
        self,
        position: float,
        magnitude: float,
        direction: RotationDirection = RotationDirection.CLOCKWISE,
    ) -> TorsionLoad:
        return self._add(TorsionLoad(position=position, magnitude=magnitude, direction=direction))

    def _add(self, load):
        # fail at the call that introduced the bad load
        load.validate(self.geometry.length)
        self._loads.append(load)
        return load

    # ── Analysis ─────────────────────────────────────────────────────

    def build(self) -> Beam:
        """Freeze the current definition into a validated Beam."""
        if len(self._supports) != 2:
            raise InputValidationError("Define a start and an end support before analysis")
        start, end = sorted(self._supports, key=lambda s: s.position)
        return Beam(
            geometry=self.geometry,
            material=self.material,
            start_support=start,
            end_support=end,
            loads=tuple(self._loads),
        )

    def analyze(
        self,
        points: int = DEFAULT_DIAGRAM_POINTS,
        num_elements: int = DEFAULT_NUM_ELEMENTS,
        partial_model: PartialLoadModel = PartialLoadModel.EXACT,
    ) -> AnalysisResults:
        """Solve reactions and deflection once, then sample the diagram."""
        beam = self.build()
        reactions = solve_reactions(beam, partial_model)
        deflection = DeflectionSolver.for_beam(beam, num_elements)
        diagram = list(
            generate_diagram(beam, points, reactions=reactions, deflection=deflection)
        )
        logger.info(
            "Analyzed %s: %d loads, R_A=%.3f N, R_B=%.3f N",
            self.name, len(beam.loads), reactions.reaction_a, reactions.reaction_b,
        )
        self._results = AnalysisResults(beam=beam, reactions=reactions, diagram=diagram)
        return self._results

    @property
    def results(self) -> AnalysisResults | None:
        return self._results
