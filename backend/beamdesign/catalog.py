"""Reinforcing bar catalog — loads metric bar sizes from CSV data."""

from __future__ import annotations

import csv
from dataclasses import dataclass
from pathlib import Path

_DATA_DIR = Path(__file__).parent / "data"
_DEFAULT_CSV = _DATA_DIR / "rebar_metric.csv"


@dataclass(frozen=True)
class RebarSize:
    designation: str
    diameter: int          # mm
    area: float            # mm² (nominal, as tabulated)
    mass_per_metre: float  # kg/m
    roles: frozenset[str]


_BARS: dict[int, RebarSize] = {}


def _load_csv(path: Path) -> dict[int, RebarSize]:
    """Parse a bar CSV file into a diameter → RebarSize dict."""
    bars: dict[int, RebarSize] = {}
    with open(path, encoding="utf-8-sig") as f:
        reader = csv.DictReader(f)
        for row in reader:
            dia = int(row["dia[mm]"])
            bars[dia] = RebarSize(
                designation=row["Bar"].strip(),
                diameter=dia,
                area=float(row["A[mm2]"]),
                mass_per_metre=float(row["mass[kg/m]"]),
                roles=frozenset(r.strip() for r in row["role"].split("|")),
            )
    return bars


def _ensure_loaded() -> None:
    """Load the CSV file on first access."""
    if _BARS:
        return
    _BARS.update(_load_csv(_DEFAULT_CSV))


def get_bar(diameter: int) -> RebarSize:
    """Look up a bar by nominal diameter (mm)."""
    _ensure_loaded()
    if diameter not in _BARS:
        raise KeyError(f"Bar diameter {diameter} mm not found in catalog")
    return _BARS[diameter]


def list_bars(role: str | None = None) -> list[RebarSize]:
    """Return all bars, optionally only those usable in ``role``."""
    _ensure_loaded()
    bars = sorted(_BARS.values(), key=lambda b: b.diameter)
    if role is None:
        return bars
    return [b for b in bars if role in b.roles]


def bar_areas(role: str = "main") -> dict[int, float]:
    """Diameter → area map for the design routines."""
    return {b.diameter: b.area for b in list_bars(role)}


def stirrup_sizes() -> list[int]:
    return [b.diameter for b in list_bars("stirrup")]


def load_catalog(path: str | Path) -> dict[int, RebarSize]:
    """Read an alternative bar catalog without touching the default one."""
    return _load_csv(Path(path))
