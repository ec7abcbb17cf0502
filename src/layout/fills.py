"""
どこで: `layout.fills`。
何を: カードの塗りに使う 5 色パレット（neutral/mono/sunset/mint/ocean/grape）。
なぜ: カード i に palette[i % 5] を割り当て、隣接カードの見分けをつけるため。
"""

from __future__ import annotations

from common.base_registry import BaseRegistry
from util.color import normalize_color

RGB01 = tuple[float, float, float]

_fill_registry = BaseRegistry("fill palette")


def _gray(v: float) -> RGB01:
    return (v, v, v)


def _hexes(*values: str) -> tuple[RGB01, ...]:
    return tuple(normalize_color(v) for v in values)


_fill_registry.add("neutral", tuple(_gray(v) for v in (0.95, 0.9, 0.85, 0.8, 0.75)))
_fill_registry.add("mono", tuple(_gray(v) for v in (0.1, 0.18, 0.26, 0.34, 0.42)))
_fill_registry.add("sunset", _hexes("#FF7A59", "#FFB65C", "#FFD36A", "#E86BF5", "#9A6BFF"))
_fill_registry.add("mint", _hexes("#00EBA8", "#7FFFD4", "#2ED7A6", "#A6FFE3", "#11C5A1"))
_fill_registry.add("ocean", _hexes("#0EA5E9", "#38BDF8", "#22D3EE", "#0284C7", "#14B8A6"))
_fill_registry.add("grape", _hexes("#8B5CF6", "#A78BFA", "#C084FC", "#7C3AED", "#6D28D9"))


def get_fill_palette(name: str) -> tuple[RGB01, ...]:
    """塗りパレットを取得（未登録は KeyError）。"""
    return _fill_registry.get(name)


def list_fill_palettes() -> list[str]:
    return _fill_registry.list_all()


def fill_for(name: str, index: int) -> RGB01:
    """カード `index` の塗り色（パレットを循環）。"""
    colors = get_fill_palette(name)
    return colors[index % len(colors)]


__all__ = ["get_fill_palette", "list_fill_palettes", "fill_for"]
