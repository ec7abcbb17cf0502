from __future__ import annotations

"""Adaptive ramp synthesis.

The seed is placed on the target lightness curve at its nearest weight.
Its deviation from the curve at that weight is then carried across every
weight, so the ramp follows the hand-tuned curves while still containing
(approximately) the seed itself.
"""

import logging
from typing import List, Tuple

from common import settings

from .color_types import Color
from .curves import Weight, WeightTable
from .engine import HSL, ColorEngine
from .palette import RampEntry

logger = logging.getLogger(__name__)


def _clamp01(x: float) -> float:
    return max(0.0, min(1.0, x))


def nearest_weight(lightness: float, table: WeightTable) -> Weight:
    """Return the weight whose target lightness is closest to ``lightness``.

    Weights are scanned in table order and only a strictly smaller
    difference replaces the current best, so ties keep the earlier weight.
    """
    best = table.weights[0]
    best_diff = float("inf")
    for weight, target_l, _ in table:
        diff = abs(lightness - target_l)
        if diff < best_diff:
            best_diff = diff
            best = weight
    return best


def ramp_deltas(hsl: HSL, table: WeightTable, base_weight: Weight) -> Tuple[float, float]:
    """Return (lightness_delta, saturation_delta) of the seed at ``base_weight``.

    The saturation delta is relative to the seed's own saturation:
    ``S - target_saturation[base] * S``.
    """
    _, s, l = hsl
    lightness_delta = l - table.target_lightness(base_weight)
    saturation_delta = s - table.target_saturation(base_weight) * s
    return lightness_delta, saturation_delta


def synthesize(
    hsl: HSL,
    table: WeightTable,
    engine: ColorEngine,
) -> Tuple[Weight, float, float, List[RampEntry]]:
    """Synthesize ramp entries from a seed given in HSL.

    Returns (base_weight, lightness_delta, saturation_delta, entries).
    """
    h, s, l = hsl
    base_weight = nearest_weight(l, table)
    lightness_delta, saturation_delta = ramp_deltas(hsl, table, base_weight)
    debug = settings.get().DEBUG_RAMP

    entries: List[RampEntry] = []
    for weight, target_l, target_s in table:
        new_l = _clamp01(target_l + lightness_delta)
        new_s = _clamp01(target_s * s + saturation_delta)
        r, g, b = engine.hsl_to_rgb(h, new_s, new_l)
        color = Color.from_rgb(r, g, b, engine)
        entries.append(RampEntry(weight=weight, color=color, target_hsl=(h, new_s, new_l)))
        if debug:
            logger.debug("weight %s: s=%.4f l=%.4f -> %s", weight, new_s, new_l, color.hex)

    return base_weight, lightness_delta, saturation_delta, entries
