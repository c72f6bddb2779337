"""Shared Euler-Bernoulli element helpers (Hermite shape functions)."""

from __future__ import annotations

import numpy as np


def hermite_shape_functions(xi: float, L: float) -> tuple[float, float, float, float]:
    """Cubic Hermite shape functions at ``xi`` = x/L on an element of length L.

    DOF order: (v_i, θ_i, v_j, θ_j).
    """
    H1 = 1 - 3 * xi**2 + 2 * xi**3
    H2 = L * (xi - 2 * xi**2 + xi**3)
    H3 = 3 * xi**2 - 2 * xi**3
    H4 = L * (-(xi**2) + xi**3)
    return H1, H2, H3, H4


def hermite_integrals(xi: float, L: float) -> tuple[float, float, float, float]:
    """Antiderivatives of the Hermite functions w.r.t. x, evaluated at ``xi``.

    ∫₀^ξ N dx = L·∫₀^ξ N dξ, so a uniform load w over [α, β] contributes
    w·(F(β) − F(α)) to each DOF.
    """
    F1 = L * (xi - xi**3 + xi**4 / 2)
    F2 = L * L * (xi**2 / 2 - 2 * xi**3 / 3 + xi**4 / 4)
    F3 = L * (xi**3 - xi**4 / 2)
    F4 = L * L * (-(xi**3) / 3 + xi**4 / 4)
    return F1, F2, F3, F4


def beam_element_stiffness(EI: float, L: float) -> np.ndarray:
    """4×4 bending stiffness matrix of a prismatic element."""
    return (EI / L**3) * np.array(
        [
            [12.0, 6 * L, -12.0, 6 * L],
            [6 * L, 4 * L * L, -6 * L, 2 * L * L],
            [-12.0, -6 * L, 12.0, -6 * L],
            [6 * L, 2 * L * L, -6 * L, 4 * L * L],
        ]
    )
