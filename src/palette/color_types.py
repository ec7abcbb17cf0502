from __future__ import annotations

"""Core color type used by the ramp generator.

This module defines :class:`Color`, an immutable value that keeps the
8-bit RGB channels together with their HSL and hex representations, so
consumers never have to re-run conversions.
"""

from dataclasses import dataclass
from typing import Tuple

from util.color import hex_to_rgb, rgb_to_hex, to_unit_rgb

from .engine import HSL, RGB8, ColorEngine, DefaultColorEngine


SRGB = Tuple[float, float, float]


@dataclass(frozen=True)
class Color:
    """Concrete color representation in 8-bit RGB and HSL.

    Attributes
    ----------
    rgb:
        Tuple of (r, g, b) integer channels in [0, 255].
    hsl:
        Tuple of (h, s, l). h is in [0, 1), s and l in [0, 1]. Always the
        HSL of ``rgb`` (not of whatever value the color was built from).
    hex:
        Hex representation "#rrggbb".
    """

    rgb: RGB8
    hsl: HSL
    hex: str

    @property
    def srgb(self) -> SRGB:
        """Return (r, g, b) normalized to [0, 1]."""
        return to_unit_rgb(self.rgb)

    def to_hex(self) -> str:
        return self.hex

    @classmethod
    def from_rgb(
        cls,
        r: int,
        g: int,
        b: int,
        engine: ColorEngine | None = None,
    ) -> "Color":
        """Create a Color from 8-bit channels.

        Raises ValueError when a channel is not an int in [0, 255].
        """
        if engine is None:
            engine = DefaultColorEngine()
        hex_value = rgb_to_hex(r, g, b)
        return cls(rgb=(r, g, b), hsl=engine.rgb_to_hsl(r, g, b), hex=hex_value)

    @classmethod
    def from_hex(cls, hex_str: str, engine: ColorEngine | None = None) -> "Color":
        """Create a Color from "#RGB" / "#RRGGBB" (leading '#' optional).

        Raises InvalidFormatError for anything else.
        """
        r, g, b = hex_to_rgb(hex_str)
        return cls.from_rgb(r, g, b, engine)

    @classmethod
    def from_hsl(
        cls,
        h: float,
        s: float,
        l: float,
        engine: ColorEngine | None = None,
    ) -> "Color":
        """Create a Color from HSL; s and l are clamped to [0, 1]."""
        if engine is None:
            engine = DefaultColorEngine()
        s = max(0.0, min(1.0, s))
        l = max(0.0, min(1.0, l))
        r, g, b = engine.hsl_to_rgb(engine.normalize_hue(h), s, l)
        return cls.from_rgb(r, g, b, engine)

    def __str__(self) -> str:
        return self.hex
