"""
どこで: `layout.bento`。
何を: プリセット + 寸法パラメータから、カード矩形/塗り/影/ラベルを持つレイアウトを生成する。
なぜ: host 側は生成結果をノードへ写すだけにし、配置計算をここで完結させるため。
"""

from __future__ import annotations

import logging
import math
from dataclasses import asdict, dataclass, fields
from typing import Any, Mapping

from common.base_registry import BaseRegistry
from util.utils import config_section

from .composition import compute_rects
from .fills import RGB01, fill_for, get_fill_palette
from .registry import get_preset

logger = logging.getLogger(__name__)

LABEL_STYLES = ("none", "numbers", "letters")


@dataclass(frozen=True)
class DropShadow:
    """カードに付ける柔らかいドロップシャドウ。"""

    color: tuple[float, float, float, float] = (0.0, 0.0, 0.0, 0.08)
    offset: tuple[float, float] = (0.0, 6.0)
    radius: float = 16.0
    spread: float = 0.0
    visible: bool = True
    blend_mode: str = "NORMAL"


CARD_SHADOW = DropShadow()


@dataclass(frozen=True)
class BentoParams:
    """レイアウト生成パラメータ。

    属性:
        preset: プリセット名（"grid", "golden", "heroRight" など。キーは正規化される）。
        width, height: 親フレームの寸法。
        rows, cols: grid プリセットの行数/列数（固定プリセットでは無視）。
        gap: セル間の隙間。
        padding: フレーム内側の余白。
        radius: カードの角丸。
        add_shadow: True でカードにドロップシャドウを付ける。
        palette: 塗りパレット名。
        label_style: "none" / "numbers" / "letters"。
    """

    preset: str = "grid"
    width: float = 960.0
    height: float = 640.0
    rows: int = 3
    cols: int = 3
    gap: float = 16.0
    padding: float = 24.0
    radius: float = 16.0
    add_shadow: bool = True
    palette: str = "neutral"
    label_style: str = "numbers"

    def __post_init__(self) -> None:
        for name in ("width", "height", "gap", "padding", "radius"):
            if not math.isfinite(getattr(self, name)):
                raise ValueError(f"{name} must be a finite number, got {getattr(self, name)!r}")
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"frame size must be positive, got {self.width}x{self.height}")
        if self.gap < 0 or self.padding < 0 or self.radius < 0:
            raise ValueError("gap, padding and radius must be non-negative")
        if self.label_style not in LABEL_STYLES:
            raise ValueError(f"label_style must be one of {LABEL_STYLES}, got {self.label_style!r}")
        # 未知名はここで KeyError にする
        get_preset(self.preset)
        get_fill_palette(self.palette)

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any] | None = None) -> "BentoParams":
        """UI ペイロード（camelCase 可）から生成する。

        優先順: ペイロード > 設定ファイル `bento` 節 > 既定値。未知のキーは無視する。
        """
        merged: dict[str, Any] = {}
        for source in (config_section("bento"), values or {}):
            for raw_key, value in source.items():
                key = BaseRegistry.normalize_key(str(raw_key))
                if key not in _FIELD_TYPES:
                    logger.debug("ignoring unknown bento option %r", raw_key)
                    continue
                merged[key] = value
        return cls(**{k: _coerce(k, v) for k, v in merged.items()})


_FIELD_TYPES: dict[str, Any] = {f.name: f.type for f in fields(BentoParams)}


def _coerce(key: str, value: Any) -> Any:
    kind = _FIELD_TYPES[key]
    if kind == "bool":
        if isinstance(value, str):
            return value.strip().lower() in {"1", "true", "yes", "on"}
        return bool(value)
    if kind == "str":
        return str(value)
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise ValueError(f"bento option {key!r} must be a number, got {value!r}") from None
    if not math.isfinite(number):
        raise ValueError(f"bento option {key!r} must be finite, got {value!r}")
    if kind == "int":
        # 小数は切り捨てず拒否する
        if not number.is_integer():
            raise ValueError(f"bento option {key!r} must be a whole number, got {value!r}")
        return int(number)
    return number


@dataclass(frozen=True)
class Card:
    """1 枚のカード（座標はフレーム左上基準）。"""

    name: str
    x: float
    y: float
    width: float
    height: float
    radius: float
    fill: RGB01
    shadow: DropShadow | None = None
    label: str | None = None


@dataclass(frozen=True)
class BentoLayout:
    """生成済みレイアウト（親フレーム + カード列）。"""

    width: float
    height: float
    cards: tuple[Card, ...]
    name: str = "Bento"
    fill: RGB01 = (1.0, 1.0, 1.0)
    corner_radius: float = 16.0

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def card_label(index: int, style: str) -> str | None:
    """カード `index`（0 始まり）のラベル。letters は Z の次を AA, AB... と続ける。"""
    if style == "none":
        return None
    if style == "numbers":
        return str(index + 1)
    n = index + 1
    out = ""
    while n > 0:
        n, rem = divmod(n - 1, 26)
        out = chr(65 + rem) + out
    return out


def generate_bento(params: BentoParams) -> BentoLayout:
    """パラメータからレイアウトを生成する。"""
    composition = get_preset(params.preset)(params.rows, params.cols)
    rects = compute_rects(composition, params.width, params.height, params.gap, params.padding)
    shadow = CARD_SHADOW if params.add_shadow else None

    cards = []
    for i, (x, y, w, h) in enumerate(rects.tolist()):
        cards.append(
            Card(
                name=f"Card {i + 1}",
                x=x,
                y=y,
                width=w,
                height=h,
                radius=params.radius,
                fill=fill_for(params.palette, i),
                shadow=shadow,
                label=card_label(i, params.label_style),
            )
        )
    logger.debug(
        "bento %s: %dx%d grid, %d cards", params.preset, composition.rows, composition.cols, len(cards)
    )
    return BentoLayout(width=params.width, height=params.height, cards=tuple(cards))


__all__ = [
    "BentoParams",
    "BentoLayout",
    "Card",
    "DropShadow",
    "CARD_SHADOW",
    "LABEL_STYLES",
    "card_label",
    "generate_bento",
]
