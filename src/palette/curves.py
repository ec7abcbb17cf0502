from __future__ import annotations

"""Target lightness/saturation curves for the 11-step tonal ramp.

The values are hand-tuned design constants: lightness falls from 0.97 at
weight 50 to 0.06 at weight 950, saturation rises from 0.80 to a 1.00
plateau across 400-600 and settles at 0.85 for the darkest weight.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterator, Mapping, Optional, Sequence, Tuple


Weight = int

ALL_WEIGHTS: Tuple[Weight, ...] = (50, 100, 200, 300, 400, 500, 600, 700, 800, 900, 950)

TARGET_LIGHTNESS: Mapping[Weight, float] = MappingProxyType(
    {
        50: 0.97,
        100: 0.94,
        200: 0.86,
        300: 0.76,
        400: 0.65,
        500: 0.54,
        600: 0.43,
        700: 0.32,
        800: 0.22,
        900: 0.13,
        950: 0.06,
    }
)
TARGET_SATURATION: Mapping[Weight, float] = MappingProxyType(
    {
        50: 0.80,
        100: 0.85,
        200: 0.90,
        300: 0.95,
        400: 1.00,
        500: 1.00,
        600: 1.00,
        700: 0.98,
        800: 0.95,
        900: 0.90,
        950: 0.85,
    }
)


@dataclass(frozen=True)
class WeightTable:
    """Ordered table of (weight, target lightness, target saturation).

    Table order is the scan order used for nearest-weight matching and the
    order of the generated ramp.
    """

    weights: Tuple[Weight, ...]
    lightness: Tuple[float, ...]
    saturation: Tuple[float, ...]

    def __post_init__(self) -> None:
        n = len(self.weights)
        if n == 0:
            raise ValueError("WeightTable needs at least one weight.")
        if len(self.lightness) != n or len(self.saturation) != n:
            raise ValueError("weights, lightness and saturation must have the same length.")
        if len(set(self.weights)) != n:
            raise ValueError("weights must be unique.")
        for value in (*self.lightness, *self.saturation):
            if not 0.0 <= value <= 1.0:
                raise ValueError(f"target values must be in [0, 1], got {value}.")
        for upper, lower in zip(self.lightness, self.lightness[1:]):
            if not lower < upper:
                raise ValueError("target lightness must strictly decrease in table order.")

    @classmethod
    def from_mappings(
        cls,
        lightness: Mapping[Weight, float],
        saturation: Mapping[Weight, float],
        order: Optional[Sequence[Weight]] = None,
    ) -> "WeightTable":
        """Build a table from two weight-keyed mappings.

        ``order`` defaults to the iteration order of ``lightness``. Both
        mappings must cover exactly the same weights.
        """
        weights = tuple(order) if order is not None else tuple(lightness)
        if set(weights) != set(lightness) or set(weights) != set(saturation):
            raise ValueError("lightness and saturation must cover the same weights.")
        return cls(
            weights=weights,
            lightness=tuple(float(lightness[w]) for w in weights),
            saturation=tuple(float(saturation[w]) for w in weights),
        )

    def target_lightness(self, weight: Weight) -> float:
        return self.lightness[self._index(weight)]

    def target_saturation(self, weight: Weight) -> float:
        return self.saturation[self._index(weight)]

    def _index(self, weight: Weight) -> int:
        try:
            return self.weights.index(weight)
        except ValueError:
            raise KeyError(weight) from None

    def __iter__(self) -> Iterator[Tuple[Weight, float, float]]:
        return iter(zip(self.weights, self.lightness, self.saturation))

    def __len__(self) -> int:
        return len(self.weights)


DEFAULT_WEIGHTS = WeightTable.from_mappings(TARGET_LIGHTNESS, TARGET_SATURATION, ALL_WEIGHTS)
