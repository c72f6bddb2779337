"""Unit conversion constants.

Analysis works in N, m and MPa at its boundary; ACI design works in N, mm
and MPa.
"""

from __future__ import annotations

MM_TO_M = 1e-3
M_TO_MM = 1e3
MPA_TO_PA = 1e6
PA_TO_MPA = 1e-6
NM_TO_NMM = 1e3   # N·m → N·mm
NMM_TO_KNM = 1e-6  # N·mm → kN·m
N_TO_KN = 1e-3

# Floor substituted for pathological section results (avoids division by zero)
NEGLIGIBLE = 1e-9
