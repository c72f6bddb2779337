"""ACI 318-19 material constants and default factors (N, mm, MPa)."""

from __future__ import annotations

E_S = 200_000.0   # MPa, §20.2.2.2
EPS_CU = 0.003    # concrete crushing strain, §22.2.2.1
EPS_T_TENSION = 0.005   # tension-controlled limit, Table 21.2.2
EPS_T_COMPRESSION = 0.002  # compression-controlled limit (Grade 420)

# Strength reduction factors, Table 21.2.1
PHI_FLEXURE = 0.90
PHI_SHEAR = 0.75
PHI_TORSION = 0.75
PHI_COMPRESSION = 0.65

# Detailing
MIN_CLEAR_SPACING = 25.0  # mm, §25.2.1
DEFAULT_MAX_LAYERS = 4
STIRRUP_LEGS = 2
TORSION_COVER_OFFSET = 40.0  # mm from face to stirrup centreline
