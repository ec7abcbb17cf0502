from __future__ import annotations

import pytest

from layout import BentoParams, card_label, fill_for, generate_bento, get_fill_palette, list_fill_palettes
from layout.bento import CARD_SHADOW


def test_fill_palettes() -> None:
    assert list_fill_palettes() == ["neutral", "mono", "sunset", "mint", "ocean", "grape"]
    assert get_fill_palette("neutral")[0] == (0.95, 0.95, 0.95)
    assert fill_for("sunset", 5) == fill_for("sunset", 0)
    assert fill_for("sunset", 0) == pytest.approx((1.0, 0x7A / 255, 0x59 / 255))
    for name in list_fill_palettes():
        assert len(get_fill_palette(name)) == 5
    with pytest.raises(KeyError):
        get_fill_palette("rainbow")


@pytest.mark.parametrize(
    "index, style, expected",
    [
        (0, "numbers", "1"),
        (11, "numbers", "12"),
        (0, "letters", "A"),
        (25, "letters", "Z"),
        (26, "letters", "AA"),
        (51, "letters", "AZ"),
        (52, "letters", "BA"),
        (3, "none", None),
    ],
)
def test_card_label(index: int, style: str, expected: str | None) -> None:
    assert card_label(index, style) == expected


def test_params_defaults() -> None:
    p = BentoParams.from_mapping({})
    assert p == BentoParams()
    assert (p.preset, p.rows, p.cols, p.label_style) == ("grid", 3, 3, "numbers")


def test_params_from_camel_case_payload() -> None:
    p = BentoParams.from_mapping(
        {
            "preset": "heroLeft",
            "addShadow": "false",
            "labelStyle": "letters",
            "rows": "2",
            "gap": 8,
            "unknownKey": 1,
        }
    )
    assert p.preset == "heroLeft"
    assert p.add_shadow is False
    assert p.label_style == "letters"
    assert p.rows == 2
    assert p.gap == 8.0


@pytest.mark.parametrize(
    "values, exc",
    [
        ({"label_style": "roman"}, ValueError),
        ({"width": 0}, ValueError),
        ({"gap": -1}, ValueError),
        ({"preset": "spiral"}, KeyError),
        ({"palette": "rainbow"}, KeyError),
    ],
)
def test_params_validation(values, exc) -> None:
    with pytest.raises(exc):
        BentoParams.from_mapping(values)


def test_generate_default_grid() -> None:
    layout = generate_bento(BentoParams())
    assert layout.name == "Bento"
    assert layout.fill == (1.0, 1.0, 1.0)
    assert layout.corner_radius == 16.0
    assert [c.name for c in layout.cards] == [f"Card {i}" for i in range(1, 10)]
    assert [c.label for c in layout.cards] == [str(i) for i in range(1, 10)]
    assert all(c.shadow is CARD_SHADOW for c in layout.cards)
    assert layout.cards[5].fill == fill_for("neutral", 0)
    first = layout.cards[0]
    assert (first.x, first.y) == (24.0, 24.0)
    # unit_w = (960 - 48 - 32) / 3
    assert first.width == pytest.approx(880 / 3)


def test_generate_preset_without_shadow_or_labels() -> None:
    layout = generate_bento(
        BentoParams(preset="masonry6", add_shadow=False, label_style="none", palette="grape", radius=8)
    )
    assert len(layout.cards) == 6
    assert all(c.shadow is None and c.label is None for c in layout.cards)
    assert all(c.radius == 8 for c in layout.cards)
    assert layout.cards[0].fill == get_fill_palette("grape")[0]


def test_layout_to_dict_is_plain_data() -> None:
    data = generate_bento(BentoParams(preset="golden", label_style="letters")).to_dict()
    assert data["name"] == "Bento"
    assert [c["label"] for c in data["cards"]] == ["A", "B", "C", "D", "E", "F"]
    assert data["cards"][0]["shadow"]["offset"] == (0.0, 6.0)


def test_params_integral_values_only() -> None:
    assert BentoParams.from_mapping({"rows": 3.0, "cols": "4"}).cols == 4
    with pytest.raises(ValueError, match="whole number"):
        BentoParams.from_mapping({"rows": 3.7})


@pytest.mark.parametrize("value", [float("nan"), float("inf")])
def test_params_reject_non_finite_sizes(value: float) -> None:
    with pytest.raises(ValueError):
        BentoParams(width=value)
    with pytest.raises(ValueError):
        BentoParams.from_mapping({"radius": value})
