from __future__ import annotations

"""
どこで: `layout.composition`。
何を: セル定義（行/列/スパン）と、スパンから絶対座標の矩形への変換。
なぜ: プリセット表と描画先（host）の間を純粋な数値計算だけで繋ぐため。
"""

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class CellSpan:
    """0 始まりの行/列位置とスパン。"""

    row: int
    col: int
    row_span: int = 1
    col_span: int = 1


@dataclass(frozen=True)
class Composition:
    """`rows x cols` のグリッド上に並べたセル群。"""

    rows: int
    cols: int
    cells: tuple[CellSpan, ...]

    def __post_init__(self) -> None:
        if self.rows < 1 or self.cols < 1:
            raise ValueError(f"composition needs rows/cols >= 1, got {self.rows}x{self.cols}")
        for c in self.cells:
            if c.row_span < 1 or c.col_span < 1:
                raise ValueError(f"cell spans must be >= 1: {c}")
            if c.row < 0 or c.col < 0 or c.row + c.row_span > self.rows or c.col + c.col_span > self.cols:
                raise ValueError(f"cell {c} does not fit a {self.rows}x{self.cols} grid")

    def as_array(self) -> np.ndarray:
        """セルを `(n, 4)` の int 配列 `[row, col, row_span, col_span]` で返す。"""
        if not self.cells:
            return np.empty((0, 4), dtype=np.int64)
        return np.array(
            [(c.row, c.col, c.row_span, c.col_span) for c in self.cells], dtype=np.int64
        )


def unit_size(
    composition: Composition, width: float, height: float, gap: float, padding: float
) -> tuple[float, float]:
    """1 セル分の幅/高さを返す。余白とギャップで埋まる場合は ValueError。"""
    grid_w = width - padding * 2 - gap * (composition.cols - 1)
    grid_h = height - padding * 2 - gap * (composition.rows - 1)
    unit_w = grid_w / composition.cols
    unit_h = grid_h / composition.rows
    if unit_w <= 0 or unit_h <= 0:
        raise ValueError(
            f"{width}x{height} frame leaves no room for a {composition.rows}x{composition.cols} grid "
            f"(gap={gap}, padding={padding})"
        )
    return unit_w, unit_h


def compute_rects(
    composition: Composition, width: float, height: float, gap: float, padding: float
) -> np.ndarray:
    """各セルの矩形 `[x, y, w, h]` を `(n, 4)` の float64 配列で返す（フレーム左上基準）。"""
    unit_w, unit_h = unit_size(composition, width, height, gap, padding)
    cells = composition.as_array().astype(np.float64)
    rects = np.empty((cells.shape[0], 4), dtype=np.float64)
    rects[:, 0] = padding + cells[:, 1] * (unit_w + gap)  # x
    rects[:, 1] = padding + cells[:, 0] * (unit_h + gap)  # y
    rects[:, 2] = cells[:, 3] * unit_w + (cells[:, 3] - 1) * gap  # w
    rects[:, 3] = cells[:, 2] * unit_h + (cells[:, 2] - 1) * gap  # h
    return rects


__all__ = ["CellSpan", "Composition", "unit_size", "compute_rects"]
