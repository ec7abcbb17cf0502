from __future__ import annotations

import numpy as np
import pytest

from common import settings
from layout import (
    CellSpan,
    Composition,
    compute_rects,
    get_preset,
    is_preset_registered,
    list_presets,
    preset,
)
from layout.registry import unregister

FIXED = ["golden", "hero_right", "hero_left", "masonry6"]


def _occupancy(comp: Composition) -> np.ndarray:
    occ = np.zeros((comp.rows, comp.cols), dtype=np.int64)
    for c in comp.cells:
        occ[c.row : c.row + c.row_span, c.col : c.col + c.col_span] += 1
    return occ


def test_builtin_presets_registered_in_order() -> None:
    assert list_presets() == ["grid", "golden", "hero_right", "hero_left", "masonry6"]
    # UI からの camelCase キーも解決できる
    assert get_preset("heroRight") is get_preset("hero_right")
    assert is_preset_registered("heroLeft")
    with pytest.raises(KeyError):
        get_preset("spiral")


@pytest.mark.parametrize("name", FIXED)
def test_fixed_presets_ignore_rows_cols_and_never_overlap(name: str) -> None:
    comp = get_preset(name)(10, 10)
    assert len(comp.cells) == 6
    assert (comp.rows, comp.cols) == ((3, 3) if name == "golden" else (3, 4))
    assert _occupancy(comp).max() == 1


@pytest.mark.parametrize("name", ["golden", "hero_right", "hero_left"])
def test_hero_presets_cover_the_whole_grid(name: str) -> None:
    assert _occupancy(get_preset(name)(0, 0)).min() == 1


def test_masonry6_leaves_one_gap() -> None:
    occ = _occupancy(get_preset("masonry6")(0, 0))
    assert int(occ.sum()) == 11
    assert occ[2, 2] == 0


def test_grid_is_row_major() -> None:
    comp = get_preset("grid")(2, 3)
    assert (comp.rows, comp.cols) == (2, 3)
    assert comp.cells[4] == CellSpan(1, 1)
    assert all(c.row_span == c.col_span == 1 for c in comp.cells)


def test_grid_rejects_bad_sizes(monkeypatch: pytest.MonkeyPatch) -> None:
    with pytest.raises(ValueError):
        get_preset("grid")(0, 3)
    monkeypatch.setenv("BTK_MAX_GRID_CELLS", "4")
    settings.reload_from_env()
    with pytest.raises(ValueError, match="exceeds 4 cells"):
        get_preset("grid")(3, 3)
    assert len(get_preset("grid")(2, 2).cells) == 4


def test_composition_validates_cells() -> None:
    with pytest.raises(ValueError):
        Composition(rows=1, cols=1, cells=(CellSpan(0, 0, 1, 2),))
    with pytest.raises(ValueError):
        Composition(rows=2, cols=2, cells=(CellSpan(0, 0, 0, 1),))
    with pytest.raises(ValueError):
        Composition(rows=0, cols=2, cells=())


def test_compute_rects_golden() -> None:
    rects = compute_rects(get_preset("golden")(0, 0), 360, 360, gap=15, padding=30)
    assert rects.shape == (6, 4)
    # 単位セル (360 - 60 - 30) / 3 = 90
    np.testing.assert_allclose(rects[0], [30, 30, 195, 195])
    np.testing.assert_allclose(rects[-1], [240, 240, 90, 90])


def test_compute_rects_hero_right_touches_padding() -> None:
    rects = compute_rects(get_preset("hero_right")(0, 0), 480, 320, gap=20, padding=20)
    # unit_w = (480 - 40 - 60) / 4 = 95, unit_h = (320 - 40 - 40) / 3 = 80
    np.testing.assert_allclose(rects[0], [250, 20, 210, 280])
    right = rects[:, 0] + rects[:, 2]
    bottom = rects[:, 1] + rects[:, 3]
    assert right.max() == pytest.approx(460)
    assert bottom.max() == pytest.approx(300)
    assert rects[:, 0].min() == pytest.approx(20)


def test_compute_rects_rejects_frames_without_room() -> None:
    with pytest.raises(ValueError, match="no room"):
        compute_rects(get_preset("golden")(0, 0), 100, 100, gap=10, padding=60)


def test_custom_preset_registration() -> None:
    @preset("Single")
    def _single(rows: int, cols: int) -> Composition:
        return Composition(rows=1, cols=1, cells=(CellSpan(0, 0),))

    try:
        assert get_preset("single") is _single
        rects = compute_rects(get_preset("single")(0, 0), 100, 50, gap=0, padding=10)
        np.testing.assert_allclose(rects, [[10, 10, 80, 30]])
    finally:
        unregister("single")
    assert not is_preset_registered("single")


def test_preset_decorator_rejects_non_functions() -> None:
    with pytest.raises(TypeError):
        preset("bad")(object())
