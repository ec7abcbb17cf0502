"""
どこで: `layout.presets`。
何を: ビルトインのベントー構成（grid / golden / hero_right / hero_left / masonry6）。
なぜ: 手作業で調整したスパン表を、(rows, cols) を受け取る関数として一様に扱うため。

固定プリセットは rows/cols を無視する。
"""

from __future__ import annotations

from common import settings

from .composition import CellSpan, Composition
from .registry import preset


def _cells(*spans: tuple[int, int, int, int]) -> tuple[CellSpan, ...]:
    return tuple(CellSpan(r, c, rs, cs) for r, c, rs, cs in spans)


@preset
def grid(rows: int, cols: int) -> Composition:
    """`rows x cols` の 1x1 セルを行優先で並べる。"""
    rows_i, cols_i = int(rows), int(cols)
    if rows_i < 1 or cols_i < 1:
        raise ValueError(f"grid needs rows/cols >= 1, got {rows}x{cols}")
    limit = settings.get().MAX_GRID_CELLS
    if rows_i * cols_i > limit:
        raise ValueError(f"grid {rows_i}x{cols_i} exceeds {limit} cells (BTK_MAX_GRID_CELLS)")
    cells = tuple(CellSpan(i // cols_i, i % cols_i) for i in range(rows_i * cols_i))
    return Composition(rows=rows_i, cols=cols_i, cells=cells)


@preset
def golden(rows: int = 3, cols: int = 3) -> Composition:
    """3x3、左上に 2x2 のヒーロー。"""
    return Composition(
        rows=3,
        cols=3,
        cells=_cells(
            (0, 0, 2, 2),  # hero
            (0, 2, 1, 1),
            (1, 2, 1, 1),
            (2, 0, 1, 1),
            (2, 1, 1, 1),
            (2, 2, 1, 1),
        ),
    )


@preset
def hero_right(rows: int = 3, cols: int = 4) -> Composition:
    """3x4、右側に 3 行 x 2 列のヒーロー。"""
    return Composition(
        rows=3,
        cols=4,
        cells=_cells(
            (0, 2, 3, 2),  # hero
            (0, 0, 1, 1),
            (0, 1, 1, 1),
            (1, 0, 1, 2),
            (2, 0, 1, 1),
            (2, 1, 1, 1),
        ),
    )


@preset
def hero_left(rows: int = 3, cols: int = 4) -> Composition:
    """3x4、左側に 3 行 x 2 列のヒーロー。"""
    return Composition(
        rows=3,
        cols=4,
        cells=_cells(
            (0, 0, 3, 2),  # hero
            (0, 2, 1, 1),
            (0, 3, 1, 1),
            (1, 2, 1, 2),
            (2, 2, 1, 1),
            (2, 3, 1, 1),
        ),
    )


@preset
def masonry6(rows: int = 3, cols: int = 4) -> Composition:
    """3x4、スパンの異なる 6 枚。"""
    return Composition(
        rows=3,
        cols=4,
        cells=_cells(
            (0, 0, 2, 2),
            (0, 2, 1, 2),
            (1, 2, 1, 1),
            (1, 3, 2, 1),
            (2, 0, 1, 1),
            (2, 1, 1, 1),
        ),
    )


__all__ = ["grid", "golden", "hero_right", "hero_left", "masonry6"]
