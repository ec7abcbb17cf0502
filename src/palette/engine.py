from __future__ import annotations

"""Color conversion engine for HSL and 8-bit RGB.

This module defines the :class:`ColorEngine` protocol and a default
implementation of the standard RGB <-> HSL conversions. Hue is expressed
as a fraction of a turn in [0, 1); saturation and lightness in [0, 1].
"""

import math
from typing import Protocol, Tuple


HSL = Tuple[float, float, float]
RGB8 = Tuple[int, int, int]


class ColorEngine(Protocol):
    """Protocol abstracting color space conversions."""

    def rgb_to_hsl(self, r: int, g: int, b: int) -> HSL: ...

    def hsl_to_rgb(self, h: float, s: float, l: float) -> RGB8: ...

    def normalize_hue(self, h: float) -> float: ...


class DefaultColorEngine:
    """Default implementation of the textbook HSL model."""

    def normalize_hue(self, h: float) -> float:
        """Normalize hue into [0, 1)."""
        h = h % 1.0
        # -1e-17 % 1.0 == 1.0 in floating point
        return 0.0 if h >= 1.0 else h

    def rgb_to_hsl(self, r: int, g: int, b: int) -> HSL:
        """Convert 8-bit RGB to HSL.

        Achromatic inputs (all channels equal) report hue 0 and saturation 0.
        """
        rf, gf, bf = r / 255.0, g / 255.0, b / 255.0
        mx = max(rf, gf, bf)
        mn = min(rf, gf, bf)
        l = (mx + mn) / 2.0
        if mx == mn:
            return (0.0, 0.0, l)

        d = mx - mn
        s = d / (2.0 - mx - mn) if l > 0.5 else d / (mx + mn)
        if mx == rf:
            h = (gf - bf) / d + (6.0 if gf < bf else 0.0)
        elif mx == gf:
            h = (bf - rf) / d + 2.0
        else:
            h = (rf - gf) / d + 4.0
        return (self.normalize_hue(h / 6.0), s, l)

    def hsl_to_rgb(self, h: float, s: float, l: float) -> RGB8:
        """Convert HSL to 8-bit RGB, rounding each channel half-up."""
        if s == 0:
            v = _to_byte(l)
            return (v, v, v)

        q = l * (1.0 + s) if l < 0.5 else l + s - l * s
        p = 2.0 * l - q
        r = _hue_to_channel(p, q, h + 1.0 / 3.0)
        g = _hue_to_channel(p, q, h)
        b = _hue_to_channel(p, q, h - 1.0 / 3.0)
        return (_to_byte(r), _to_byte(g), _to_byte(b))


def _hue_to_channel(p: float, q: float, t: float) -> float:
    if t < 0.0:
        t += 1.0
    if t > 1.0:
        t -= 1.0
    if t < 1.0 / 6.0:
        return p + (q - p) * 6.0 * t
    if t < 1.0 / 2.0:
        return q
    if t < 2.0 / 3.0:
        return p + (q - p) * (2.0 / 3.0 - t) * 6.0
    return p


def _to_byte(c: float) -> int:
    v = int(math.floor(c * 255.0 + 0.5))
    return max(0, min(255, v))
