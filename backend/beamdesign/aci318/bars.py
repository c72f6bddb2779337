"""Bar selection and layout across the beam width."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from ..errors import BarFitError, InputValidationError
from .constants import DEFAULT_MAX_LAYERS, MIN_CLEAR_SPACING

logger = logging.getLogger(__name__)

MIN_BARS = 2


@dataclass(frozen=True)
class BarLayout:
    bar_dia: float
    n_bars: int              # main bars
    A_s_prov: float          # mm², side bars included
    width_required: float    # mm
    n_layers: int
    bars_per_layer: int
    clear_spacing: float     # mm
    centroid_offset: float   # mm from the near face to the steel centroid
    side_bar_dia: float | None = None
    n_side_bars: int = 0

    @property
    def total_bars(self) -> int:
        return self.n_bars + self.n_side_bars


def _row_width(cover: float, stirrup_dia: float, dias: list[float], clear: float) -> float:
    return 2 * cover + 2 * stirrup_dia + sum(dias) + (len(dias) - 1) * clear


def _layer_centroid(
    cover: float, stirrup_dia: float, dia: float, n_bars: int, per_layer: int, clear: float
) -> float:
    """Centroid of stacked layers measured from the near face."""
    first = cover + stirrup_dia + dia / 2
    pitch = dia + clear
    moment = 0.0
    remaining = n_bars
    layer = 0
    while remaining > 0:
        count = min(per_layer, remaining)
        moment += count * (first + layer * pitch)
        remaining -= count
        layer += 1
    return moment / n_bars


def _candidates(
    bar_areas: dict[float, float], is_compression: bool, bar_dia: float | None
) -> list[tuple[float, float]]:
    if bar_dia is not None:
        if bar_dia not in bar_areas:
            raise InputValidationError(f"Bar diameter {bar_dia:g} mm is not in the catalog")
        return [(bar_dia, bar_areas[bar_dia])]
    # compression steel prefers the smallest bars, tension the largest
    return sorted(bar_areas.items(), reverse=not is_compression)


def select_bars(
    A_s_req: float,
    bar_areas: dict[float, float],
    b: float,
    cover: float,
    stirrup_dia: float,
    is_compression: bool = False,
    max_layers: int = DEFAULT_MAX_LAYERS,
    bar_dia: float | None = None,
    use_side_bars: bool = False,
    side_bar_dia: float | None = None,
) -> BarLayout:
    """Pick the first bar size (and layer count) that fits the width.

    Raises:
        BarFitError: no diameter fits within ``max_layers`` layers.
    """
    if A_s_req < 0:
        raise InputValidationError("Required steel area must be non-negative")
    if max_layers < 1:
        raise InputValidationError("At least one bar layer is required")

    if use_side_bars:
        return _select_with_side_bars(
            A_s_req, bar_areas, b, cover, stirrup_dia, bar_dia, side_bar_dia
        )

    for dia, area in _candidates(bar_areas, is_compression, bar_dia):
        n_bars = max(MIN_BARS, math.ceil(A_s_req / area))
        clear = max(MIN_CLEAR_SPACING, dia)
        for layers in range(1, max_layers + 1):
            per_layer = math.ceil(n_bars / layers)
            if per_layer < MIN_BARS:
                break
            width = _row_width(cover, stirrup_dia, [dia] * per_layer, clear)
            if width <= b:
                logger.debug(
                    "Selected %d x %g mm bars in %d layer(s), width %.0f mm",
                    n_bars, dia, layers, width,
                )
                return BarLayout(
                    bar_dia=dia,
                    n_bars=n_bars,
                    A_s_prov=n_bars * area,
                    width_required=width,
                    n_layers=layers,
                    bars_per_layer=per_layer,
                    clear_spacing=clear,
                    centroid_offset=_layer_centroid(
                        cover, stirrup_dia, dia, n_bars, per_layer, clear
                    ),
                )

    kind = "compression" if is_compression else "tension"
    raise BarFitError(
        f"Cannot fit {kind} bars in width even with {max_layers} layer(s) "
        "- increase b or use smaller bars"
    )


def _select_with_side_bars(
    A_s_req: float,
    bar_areas: dict[float, float],
    b: float,
    cover: float,
    stirrup_dia: float,
    bar_dia: float | None,
    side_bar_dia: float | None,
) -> BarLayout:
    """One layer: two side bars at the stirrup corners plus main bars between."""
    side_dia = side_bar_dia if side_bar_dia is not None else min(bar_areas)
    if side_dia not in bar_areas:
        raise InputValidationError(f"Side bar diameter {side_dia:g} mm is not in the catalog")
    n_side = 2
    A_side = n_side * bar_areas[side_dia]

    for dia, area in _candidates(bar_areas, False, bar_dia):
        n_main = math.ceil(max(A_s_req - A_side, 0.0) / area)
        clear = max(MIN_CLEAR_SPACING, dia, side_dia)
        width = _row_width(cover, stirrup_dia, [dia] * n_main + [side_dia] * n_side, clear)
        if width > b:
            continue
        A_main = n_main * area
        base = cover + stirrup_dia
        centroid = (A_main * (base + dia / 2) + A_side * (base + side_dia / 2)) / (A_main + A_side)
        return BarLayout(
            bar_dia=dia,
            n_bars=n_main,
            A_s_prov=A_main + A_side,
            width_required=width,
            n_layers=1,
            bars_per_layer=n_main + n_side,
            clear_spacing=clear,
            centroid_offset=centroid,
            side_bar_dia=side_dia,
            n_side_bars=n_side,
        )

    raise BarFitError("Cannot fit bars in width with side bars - increase b or use smaller bars")
