"""
どこで: `util.color`。
何を: Hex ⇔ 8bit RGB の相互変換と、RGB(0–1) への正規化を一元化。
なぜ: palette/layout/host 全体で同一の受理仕様とエラー型を提供するため。
"""

from __future__ import annotations

import re
from typing import Sequence

_HEX_RE = re.compile(r"#?([0-9a-fA-F]{3}|[0-9a-fA-F]{6})")


class InvalidFormatError(ValueError):
    """色文字列が 3 桁/6 桁の Hex として解釈できない。"""

    def __init__(self, value: object) -> None:
        super().__init__(f"invalid hex color: {value!r} (expected #RGB or #RRGGBB)")
        self.value = value


def _clamp01(x: float) -> float:
    return 0.0 if x < 0.0 else 1.0 if x > 1.0 else float(x)


def hex_to_rgb(s: str) -> tuple[int, int, int]:
    """Hex 文字列から 8bit RGB を返す。

    受理形式: "#RGB", "#RRGGBB", "RGB", "RRGGBB"（大文字/小文字は不問、空白を含むものは不正）。
    3 桁は各桁を複製して 6 桁へ展開する（"#0f0" -> "#00ff00"）。
    """
    if not isinstance(s, str):
        raise InvalidFormatError(s)
    m = _HEX_RE.fullmatch(s)
    if m is None:
        raise InvalidFormatError(s)
    digits = m.group(1)
    if len(digits) == 3:
        digits = "".join(ch * 2 for ch in digits)
    return (int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))


def rgb_to_hex(r: int, g: int, b: int) -> str:
    """8bit RGB から "#rrggbb"（小文字）を返す。"""
    for name, v in (("r", r), ("g", g), ("b", b)):
        if isinstance(v, bool) or not isinstance(v, int) or not 0 <= v <= 255:
            raise ValueError(f"{name} must be an int in [0, 255], got {v!r}")
    return f"#{r:02x}{g:02x}{b:02x}"


def to_unit_rgb(rgb: Sequence[int]) -> tuple[float, float, float]:
    """8bit RGB を RGB(0–1) へ変換する。"""
    r, g, b = rgb
    return (r / 255.0, g / 255.0, b / 255.0)


def normalize_color(value: object) -> tuple[float, float, float]:
    """色を RGB(0–1) へ正規化する。

    - 受理: Hex 文字列, (r,g,b) （0–1 または 0–255）
    - 返値: (r,g,b) （0–1）
    """
    if isinstance(value, str):
        return to_unit_rgb(hex_to_rgb(value))
    if not isinstance(value, (list, tuple)) or len(value) != 3:
        raise ValueError(f"unsupported color value: {value!r}")
    fseq = [float(v) for v in value]
    # まず 0–1 とみなし、範囲外なら 0–255 として丸める
    if all(0.0 <= x <= 1.0 for x in fseq):
        r, g, b = fseq
        return (_clamp01(r), _clamp01(g), _clamp01(b))
    r8, g8, b8 = (max(0, min(255, int(round(x)))) for x in fseq)
    return to_unit_rgb((r8, g8, b8))


__all__ = [
    "InvalidFormatError",
    "hex_to_rgb",
    "rgb_to_hex",
    "to_unit_rgb",
    "normalize_color",
]
