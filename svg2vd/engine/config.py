"""Converter configuration — per-call options for one conversion."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

ColorMode = Literal["android", "legacy"]
ElementOrder = Literal["type", "document"]


@dataclass(frozen=True)
class ConverterConfig:
    """Controls the output dialect of a conversion."""

    # "android": ARGB8 table with #FF373737 default; "legacy": pass-through table, #000000 default
    color_mode: ColorMode = "android"
    # "type": path*, circle*, rect*, line*, g*; "document": source order
    element_order: ElementOrder = "type"

    # Fallback size when neither viewBox nor width/height is usable
    default_size: float = 100.0

    # feDropShadow defaults
    shadow_dx: float = 0.0
    shadow_dy: float = 0.0
    shadow_std_deviation: float = 2.0
    shadow_flood_color: str = "#000000"
    shadow_flood_opacity: float = 0.2

    # Bezier control-point factor for quarter circles
    circle_kappa: float = 0.552285
