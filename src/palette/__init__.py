"""Public entrypoint for the tonal ramp library.

This module re-exports the main user-facing types and functions so that
applications can simply import from ``palette`` instead of individual
submodules.
"""

from util.color import InvalidFormatError

from .color_types import Color
from .curves import (
    ALL_WEIGHTS,
    DEFAULT_WEIGHTS,
    TARGET_LIGHTNESS,
    TARGET_SATURATION,
    WeightTable,
)
from .engine import ColorEngine, DefaultColorEngine
from .palette import Ramp, RampEntry
from .ramp import nearest_weight, synthesize
from .api import generate_ramp
from .ui_helpers import (
    EXPORT_FORMAT_OPTIONS,
    ExportFormat,
    export_ramp,
    export_tokens,
    token_name,
)

__all__ = [
    "Color",
    "ColorEngine",
    "DefaultColorEngine",
    "InvalidFormatError",
    "Ramp",
    "RampEntry",
    "WeightTable",
    "ALL_WEIGHTS",
    "DEFAULT_WEIGHTS",
    "TARGET_LIGHTNESS",
    "TARGET_SATURATION",
    "generate_ramp",
    "nearest_weight",
    "synthesize",
    "ExportFormat",
    "export_ramp",
    "export_tokens",
    "token_name",
    "EXPORT_FORMAT_OPTIONS",
]
