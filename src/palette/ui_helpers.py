from __future__ import annotations

"""Helper utilities for handing ramps to hosts and external UIs.

This module exposes label/enum pairs for export formats, an
`export_ramp` helper that converts Ramp objects into simple color lists
(HEX/sRGB/HSL), and the "<name>/<weight>" token naming used when a host
registers the ramp as styles or variables.
"""

from enum import Enum
from typing import Dict, List

from .curves import Weight
from .palette import Ramp


class ExportFormat(Enum):
    """Supported output formats for exported color lists."""

    HEX = "hex"
    SRGB_01 = "srgb_01"
    SRGB_255 = "srgb_255"
    HSL = "hsl"

    @classmethod
    def from_value(cls, value: str) -> "ExportFormat":
        for fmt in cls:
            if fmt.value == value:
                return fmt
        raise ValueError(f"Unknown export format: {value}")


# Label/Enum pairs for UI choices
EXPORT_FORMAT_OPTIONS: List[tuple[str, ExportFormat]] = [
    ("HEX", ExportFormat.HEX),
    ("sRGB (0-1)", ExportFormat.SRGB_01),
    ("sRGB (0-255)", ExportFormat.SRGB_255),
    ("HSL", ExportFormat.HSL),
]


def export_ramp(ramp: Ramp, fmt: ExportFormat | str) -> List[object]:
    """Convert a Ramp to a list of colors in the desired format (table order)."""
    export_fmt = fmt if isinstance(fmt, ExportFormat) else ExportFormat.from_value(fmt)
    if export_fmt == ExportFormat.HEX:
        return [c.hex for c in ramp.colors]
    if export_fmt == ExportFormat.SRGB_01:
        return [c.srgb for c in ramp.colors]
    if export_fmt == ExportFormat.SRGB_255:
        return [c.rgb for c in ramp.colors]
    if export_fmt == ExportFormat.HSL:
        return [c.hsl for c in ramp.colors]
    raise ValueError(f"Unsupported export format: {fmt}")


def token_name(name: str, weight: Weight) -> str:
    """Hierarchical token name, e.g. ``token_name("Primary", 500) == "Primary/500"``."""
    label = name.strip().strip("/").strip()
    if not label:
        raise ValueError("token name must not be blank.")
    return f"{label}/{weight}"


def export_tokens(
    ramp: Ramp,
    name: str | None = None,
    fmt: ExportFormat | str = ExportFormat.HEX,
) -> Dict[str, object]:
    """Map "<name>/<weight>" to the exported color, in table order.

    ``name`` defaults to the ramp's own name.
    """
    label = name if name is not None else ramp.name
    if label is None:
        raise ValueError("a token name is required (ramp has no name).")
    values = export_ramp(ramp, fmt)
    return {token_name(label, w): v for w, v in zip(ramp.weights, values)}


__all__ = [
    "ExportFormat",
    "EXPORT_FORMAT_OPTIONS",
    "export_ramp",
    "export_tokens",
    "token_name",
]
