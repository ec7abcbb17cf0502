from __future__ import annotations

import pytest

from util.color import InvalidFormatError, hex_to_rgb, normalize_color, rgb_to_hex, to_unit_rgb


def _approx_tuple(t):
    return tuple(round(v, 6) for v in t)


def test_hex_to_rgb_valid_variants() -> None:
    assert hex_to_rgb("#112233") == (0x11, 0x22, 0x33)
    assert hex_to_rgb("112233") == (0x11, 0x22, 0x33)
    assert hex_to_rgb("#AbCdEf") == (0xAB, 0xCD, 0xEF)


def test_hex_to_rgb_shorthand_expands_digits() -> None:
    assert hex_to_rgb("#0f0") == (0, 255, 0)
    assert rgb_to_hex(*hex_to_rgb("#0f0")) == "#00ff00"
    assert hex_to_rgb("abc") == (0xAA, 0xBB, 0xCC)


@pytest.mark.parametrize(
    "value",
    [
        "not-a-color", "", "#", "#12", "#1234", "#12345", "#1234567", "#11223g", "##112233", "0x112233", "#１２３",
        # 前後の空白も不正
        " #fff", "0f0\n", "\t#3B82F6 ",
    ],
)
def test_hex_to_rgb_invalid(value: str) -> None:
    with pytest.raises(InvalidFormatError) as info:
        hex_to_rgb(value)
    assert info.value.value == value


def test_invalid_format_is_value_error() -> None:
    with pytest.raises(ValueError):
        hex_to_rgb(None)  # type: ignore[arg-type]


def test_rgb_to_hex_zero_pads_and_validates() -> None:
    assert rgb_to_hex(0, 10, 255) == "#000aff"
    with pytest.raises(ValueError):
        rgb_to_hex(256, 0, 0)
    with pytest.raises(ValueError):
        rgb_to_hex(1.0, 0, 0)  # type: ignore[arg-type]


def test_normalize_color_variants() -> None:
    assert _approx_tuple(normalize_color("#FF8000")) == _approx_tuple((1.0, 128 / 255, 0.0))
    assert _approx_tuple(normalize_color((0.1, 0.2, 0.3))) == (0.1, 0.2, 0.3)
    assert _approx_tuple(normalize_color((255, 128, 0))) == _approx_tuple((1.0, 128 / 255, 0.0))
    with pytest.raises(ValueError):
        normalize_color((1, 2))
    assert to_unit_rgb((0, 51, 255)) == (0.0, 0.2, 1.0)
