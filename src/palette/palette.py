from __future__ import annotations

"""Container types for generated tonal ramps.

This module defines :class:`RampEntry` and :class:`Ramp`, which group the
seed color, the matched base weight, the deviation terms and the list of
generated colors.
"""

from dataclasses import dataclass
from typing import Iterator, Optional, Tuple

from .color_types import Color
from .curves import Weight
from .engine import HSL


@dataclass(frozen=True)
class RampEntry:
    """One step of a ramp.

    Attributes
    ----------
    weight:
        Weight label (50..950).
    color:
        Rendered 8-bit color.
    target_hsl:
        Clamped (h, s, l) that was converted into ``color``. Unlike
        ``color.hsl`` it is free of 8-bit quantization.
    """

    weight: Weight
    color: Color
    target_hsl: HSL


@dataclass(frozen=True)
class Ramp:
    """Generated tonal ramp.

    Attributes
    ----------
    seed:
        Seed color the ramp was derived from.
    base_weight:
        Weight whose target lightness is closest to the seed's lightness.
    lightness_delta, saturation_delta:
        Seed deviation from the target curves at ``base_weight``; added to
        every step.
    entries:
        Steps in table order (lightest first).
    name:
        Optional label used by hosts to name tokens ("<name>/<weight>").
    """

    seed: Color
    base_weight: Weight
    lightness_delta: float
    saturation_delta: float
    entries: Tuple[RampEntry, ...]
    name: Optional[str] = None

    def __iter__(self) -> Iterator[Tuple[Weight, Color]]:
        return ((e.weight, e.color) for e in self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def __getitem__(self, weight: Weight) -> Color:
        for e in self.entries:
            if e.weight == weight:
                return e.color
        raise KeyError(weight)

    @property
    def weights(self) -> Tuple[Weight, ...]:
        return tuple(e.weight for e in self.entries)

    @property
    def colors(self) -> Tuple[Color, ...]:
        return tuple(e.color for e in self.entries)

    @property
    def hue(self) -> float:
        """Hue shared by every step (the seed's hue)."""
        return self.seed.hsl[0]
