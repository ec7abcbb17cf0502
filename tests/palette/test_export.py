from __future__ import annotations

import pytest

from palette import (
    EXPORT_FORMAT_OPTIONS,
    ExportFormat,
    Ramp,
    export_ramp,
    export_tokens,
    generate_ramp,
    token_name,
)


def test_export_formats_have_one_value_per_weight(blue_ramp: Ramp) -> None:
    for _, fmt in EXPORT_FORMAT_OPTIONS:
        assert len(export_ramp(blue_ramp, fmt)) == 11


def test_export_hex_and_srgb_agree(blue_ramp: Ramp) -> None:
    hexes = export_ramp(blue_ramp, "hex")
    rgb255 = export_ramp(blue_ramp, ExportFormat.SRGB_255)
    rgb01 = export_ramp(blue_ramp, ExportFormat.SRGB_01)
    for h, c255, c01 in zip(hexes, rgb255, rgb01):
        assert h == "#{:02x}{:02x}{:02x}".format(*c255)
        assert c01 == pytest.approx(tuple(v / 255 for v in c255))
    hsl = export_ramp(blue_ramp, ExportFormat.HSL)
    assert all(0.0 <= v <= 1.0 for triple in hsl for v in triple)


def test_export_format_from_value() -> None:
    assert ExportFormat.from_value("srgb_01") is ExportFormat.SRGB_01
    with pytest.raises(ValueError):
        ExportFormat.from_value("cmyk")
    with pytest.raises(ValueError):
        export_ramp(generate_ramp("#123"), "cmyk")


@pytest.mark.parametrize(
    "name, expected",
    [("Primary", "Primary/500"), ("  Brand Blue ", "Brand Blue/500"), ("/Accent/", "Accent/500")],
)
def test_token_name(name: str, expected: str) -> None:
    assert token_name(name, 500) == expected


@pytest.mark.parametrize("name", ["", "   ", "/"])
def test_token_name_rejects_blank(name: str) -> None:
    with pytest.raises(ValueError):
        token_name(name, 500)


def test_export_tokens_uses_ramp_name_and_order(blue_ramp: Ramp) -> None:
    tokens = export_tokens(blue_ramp)
    assert list(tokens) == [f"Primary/{w}" for w in blue_ramp.weights]
    assert tokens["Primary/400"] == blue_ramp[400].hex


def test_export_tokens_name_override_and_missing_name() -> None:
    ramp = generate_ramp("#0f0")
    tokens = export_tokens(ramp, "Green", "srgb_255")
    assert tokens["Green/50"] == ramp[50].rgb
    with pytest.raises(ValueError):
        export_tokens(ramp)
