"""
どこで: `layout` パッケージ。
何を: ビルトインプリセットを import 副作用で登録し、ベントーレイアウト生成を公開する。
なぜ: プリセット表・塗り・配置計算を host から独立した純粋な層にまとめるため。
"""

# プリセット定義を import して登録（副作用）
from . import presets as _register_presets  # noqa: F401
from .bento import BentoLayout, BentoParams, Card, DropShadow, card_label, generate_bento
from .composition import CellSpan, Composition, compute_rects
from .fills import fill_for, get_fill_palette, list_fill_palettes
from .registry import get_preset, is_preset_registered, list_presets, preset  # re-export

__all__ = [
    "BentoLayout",
    "BentoParams",
    "Card",
    "CellSpan",
    "Composition",
    "DropShadow",
    "card_label",
    "compute_rects",
    "fill_for",
    "generate_bento",
    "get_fill_palette",
    "get_preset",
    "is_preset_registered",
    "list_fill_palettes",
    "list_presets",
    "preset",
]
