"""Finite-element deflection solver for two-support beams.

The span [0, L] is divided into equal Euler-Bernoulli elements with two
DOFs per node (transverse displacement v, rotation θ = dv/dx). v is
positive downward, so downward loads and clockwise couples are positive
nodal actions.
"""

from __future__ import annotations

import logging
import warnings
from dataclasses import dataclass
from functools import singledispatch

import numpy as np
from scipy.linalg import LinAlgWarning, lu_factor, lu_solve

from ._frame_math import beam_element_stiffness, hermite_integrals, hermite_shape_functions
from .beam import Beam
from .errors import SingularMatrixError
from .load import DistributedLoad, MomentLoad, PointLoad, TorsionLoad
from .units import M_TO_MM

logger = logging.getLogger(__name__)

DEFAULT_NUM_ELEMENTS = 50
PIVOT_TOLERANCE = 1e-9


def solve_linear_system(
    K: np.ndarray, F: np.ndarray, pivot_tolerance: float = PIVOT_TOLERANCE
) -> np.ndarray:
    """Solve K·U = F by LU decomposition with partial pivoting.

    Rows are equilibrated first so the pivot threshold is relative to the
    magnitude of each equation.

    Raises:
        SingularMatrixError: a pivot of the equilibrated matrix falls below
            ``pivot_tolerance``.
    """
    K = np.asarray(K, dtype=float)
    F = np.asarray(F, dtype=float)
    scale = np.abs(K).max(axis=1)
    if np.any(scale == 0.0):
        raise SingularMatrixError("Stiffness matrix has an empty row (unrestrained DOF)")

    Ks = K / scale[:, None]
    Fs = F / scale

    with warnings.catch_warnings():
        # exact zero pivots are reported below as SingularMatrixError
        warnings.simplefilter("ignore", LinAlgWarning)
        lu, piv = lu_factor(Ks)

    pivots = np.abs(np.diag(lu))
    if pivots.min() < pivot_tolerance:
        raise SingularMatrixError(
            f"Singular stiffness matrix (pivot {pivots.min():.3e} at row {int(pivots.argmin())}); "
            "check the support configuration"
        )
    return lu_solve((lu, piv), Fs)


@dataclass(frozen=True)
class FemSolution:
    """Nodal displacements of a solved beam mesh."""

    dx: float
    num_elements: int
    displacements: np.ndarray  # [v0, θ0, v1, θ1, ...] in m and rad

    def deflection_at(self, x: float) -> float:
        """Deflection at ``x`` (m) in mm, downward positive."""
        if x <= 0.0:
            e, xi = 0, 0.0
        else:
            e = min(int(x / self.dx), self.num_elements - 1)
            xi = min(max((x - e * self.dx) / self.dx, 0.0), 1.0)
        u = self.displacements[2 * e : 2 * e + 4]
        H = hermite_shape_functions(xi, self.dx)
        return float(np.dot(H, u)) * M_TO_MM

    @property
    def nodal_deflections_mm(self) -> np.ndarray:
        return self.displacements[0::2] * M_TO_MM


# ── Equivalent nodal forces ──────────────────────────────────────────


@singledispatch
def _add_nodal_forces(load, F: np.ndarray, dx: float, n: int) -> None:
    raise TypeError(f"Unsupported load type: {type(load).__name__}")


@_add_nodal_forces.register
def _(load: PointLoad, F: np.ndarray, dx: float, n: int) -> None:
    e = min(int(load.position / dx), n - 1)
    xi = (load.position - e * dx) / dx
    F[2 * e] += load.magnitude * (1 - xi)
    F[2 * (e + 1)] += load.magnitude * xi


@_add_nodal_forces.register
def _(load: DistributedLoad, F: np.ndarray, dx: float, n: int) -> None:
    w = load.magnitude
    first = max(int(load.position / dx), 0)
    last = min(int(np.ceil(load.end / dx)), n)
    for e in range(first, last):
        x0 = e * dx
        alpha = max(load.position - x0, 0.0) / dx
        beta = min(load.end - x0, dx) / dx
        if beta <= alpha:
            continue
        lo = hermite_integrals(alpha, dx)
        hi = hermite_integrals(beta, dx)
        F[2 * e : 2 * e + 4] += w * (np.array(hi) - np.array(lo))


@_add_nodal_forces.register
def _(load: MomentLoad, F: np.ndarray, dx: float, n: int) -> None:
    node = min(int(round(load.position / dx)), n)
    F[2 * node + 1] += load.signed_magnitude


@_add_nodal_forces.register
def _(load: TorsionLoad, F: np.ndarray, dx: float, n: int) -> None:
    # torsion does not bend the beam
    return None


# ── Assembly and solve ───────────────────────────────────────────────


def solve_fem(beam: Beam, num_elements: int = DEFAULT_NUM_ELEMENTS) -> FemSolution:
    """Assemble, constrain and solve the beam mesh."""
    L = beam.length
    n = num_elements
    dx = L / n
    ndof = 2 * (n + 1)

    ke = beam_element_stiffness(beam.flexural_rigidity, dx)
    K = np.zeros((ndof, ndof))
    for e in range(n):
        K[2 * e : 2 * e + 4, 2 * e : 2 * e + 4] += ke

    F = np.zeros(ndof)
    for ld in beam.loads:
        _add_nodal_forces(ld, F, dx, n)

    # constraints are applied after loads so restrained DOFs carry no force
    for support in beam.supports:
        node = min(int(round(support.position / dx)), n)
        restrained = []
        if support.support_type.restrains_displacement:
            restrained.append(2 * node)
        if support.support_type.restrains_rotation:
            restrained.append(2 * node + 1)
        for dof in restrained:
            K[dof, :] = 0.0
            K[dof, dof] = 1.0
            F[dof] = 0.0

    logger.debug("FEM: %d elements, %d DOFs, |F| = %.3e", n, ndof, np.abs(F).sum())
    U = solve_linear_system(K, F)
    return FemSolution(dx=dx, num_elements=n, displacements=U)
