from __future__ import annotations

"""High-level public API for generating tonal ramps.

This module provides a single function, :func:`generate_ramp`, which
parses the seed, converts it to HSL, and runs the adaptive synthesizer
over a weight table to produce a :class:`palette.Ramp`.
"""

import logging
from typing import Optional, Union

from .color_types import Color
from .curves import DEFAULT_WEIGHTS, WeightTable
from .engine import ColorEngine, DefaultColorEngine
from .palette import Ramp
from .ramp import synthesize

logger = logging.getLogger(__name__)


def generate_ramp(
    seed: Union[str, Color],
    weights: WeightTable = DEFAULT_WEIGHTS,
    *,
    name: Optional[str] = None,
    engine: Optional[ColorEngine] = None,
) -> Ramp:
    """Generate a tonal ramp from a seed color.

    Parameters
    ----------
    seed:
        Hex string ("#RGB" / "#RRGGBB", '#' optional) or a Color.
    weights:
        Ordered weight table. Defaults to the 11-step 50..950 table.
    name:
        Optional label carried on the ramp for token naming. It does not
        influence the colors.
    engine:
        Optional ColorEngine for color space conversions. If None,
        DefaultColorEngine is used.

    Returns
    -------
    Ramp
        One entry per table weight, lightest first, all sharing the
        seed's hue.

    Raises
    ------
    InvalidFormatError
        If ``seed`` is a string that is not a 3- or 6-digit hex color.
        Nothing is computed in that case.
    """
    if engine is None:
        engine = DefaultColorEngine()

    seed_color = seed if isinstance(seed, Color) else Color.from_hex(seed, engine)
    base_weight, dl, ds, entries = synthesize(seed_color.hsl, weights, engine)
    logger.debug(
        "ramp %s from %s: base weight %s (dl=%.4f, ds=%.4f)",
        name or "<unnamed>",
        seed_color.hex,
        base_weight,
        dl,
        ds,
    )
    return Ramp(
        seed=seed_color,
        base_weight=base_weight,
        lightness_delta=dl,
        saturation_delta=ds,
        entries=tuple(entries),
        name=name,
    )
