"""Color codec — SVG color tokens to Android color strings.

Android colors are ``#AARRGGBB``. Two tables exist:

* ``android`` (canonical): named colors and hex are normalised to ARGB8,
  anything unusable becomes ``DEFAULT_COLOR``.
* ``legacy``: the older pass-through table. Hex, ``rgb(...)`` and a handful
  of names are copied verbatim, anything else becomes ``#000000``.
"""

from __future__ import annotations

import math
import re
from typing import NamedTuple

from svg2vd.engine.config import ColorMode
from svg2vd.utils.numbers import round_half_up

DEFAULT_COLOR = "#FF373737"
LEGACY_DEFAULT_COLOR = "#000000"
TRANSPARENT = "@android:color/transparent"

NAMED_COLORS = {
    "white": "#FFFFFFFF",
    "black": "#FF000000",
    "red": "#FFFF0000",
    "blue": "#FF0000FF",
    "green": "#FF008000",
}

_LEGACY_NAMES = ("black", "red", "blue", "green")

_SHORTHAND_RE = re.compile(r"^#?([a-f\d])([a-f\d])([a-f\d])$", re.IGNORECASE)
_HEX6_RE = re.compile(r"^#?([a-f\d]{2})([a-f\d]{2})([a-f\d]{2})$", re.IGNORECASE)
_HEX8_RE = re.compile(r"^#[a-f\d]{8}$", re.IGNORECASE)
_RGB_RE = re.compile(r"^rgb\(\s*(\d+)\s*,\s*(\d+)\s*,\s*(\d+)\s*\)$", re.IGNORECASE)


class RGBColor(NamedTuple):
    r: int
    g: int
    b: int

    def hex(self) -> str:
        return f"{self.r:02x}{self.g:02x}{self.b:02x}"


def hex_to_rgb(hex_color: str) -> RGBColor | None:
    """Decode "#ff5733" or shorthand "#f53". Returns None when not well-formed."""
    expanded = _SHORTHAND_RE.sub(lambda m: m.group(1) * 2 + m.group(2) * 2 + m.group(3) * 2, hex_color.strip())
    m = _HEX6_RE.match(expanded)
    if not m:
        return None
    return RGBColor(int(m.group(1), 16), int(m.group(2), 16), int(m.group(3), 16))


def rgb_function_to_rgb(token: str) -> RGBColor | None:
    """Decode "rgb(255, 0, 0)"; channels outside 0..255 are rejected."""
    m = _RGB_RE.match(token.strip())
    if not m:
        return None
    channels = [int(v) for v in m.groups()]
    if any(c > 255 for c in channels):
        return None
    return RGBColor(*channels)


def _to_rgb(token: str) -> RGBColor | None:
    token = token.strip()
    named = NAMED_COLORS.get(token.lower())
    if named is not None:
        return hex_to_rgb("#" + named[3:])
    if token.startswith("#"):
        return hex_to_rgb(token)
    return rgb_function_to_rgb(token)


def resolve_color(token: str | None, mode: ColorMode = "android") -> str:
    """Convert an SVG color token to an Android color string."""
    if mode == "legacy":
        return _resolve_legacy(token)

    if token is None or not token.strip():
        return DEFAULT_COLOR
    token = token.strip()
    if token.lower() == "none":
        return TRANSPARENT
    if _HEX8_RE.match(token):
        return token
    rgb = _to_rgb(token)
    if rgb is None:
        return DEFAULT_COLOR
    return "#FF" + rgb.hex().upper()


def _resolve_legacy(token: str | None) -> str:
    if not token:
        return LEGACY_DEFAULT_COLOR
    if token.startswith("#") or token.startswith("rgb") or token in _LEGACY_NAMES:
        return token
    return LEGACY_DEFAULT_COLOR


def resolve_color_with_opacity(color: str, opacity: str | float) -> str:
    """Prefix the color's RGB with an alpha byte: ("#ff0000", "0.5") → "#80ff0000".

    Unusable input is returned unchanged.
    """
    try:
        value = float(opacity)
    except (TypeError, ValueError):
        return color
    if math.isnan(value):
        return color
    rgb = _to_rgb(color)
    if rgb is None:
        return color
    alpha = min(max(round_half_up(value * 255), 0), 255)
    return f"#{alpha:02x}{rgb.hex()}"


def opacity_to_alpha(raw: str | None) -> float | None:
    """Parse an SVG opacity ("0.5", "50%") into 0..1. None when absent or malformed."""
    if raw is None or not raw.strip():
        return None
    text = raw.strip()
    try:
        value = float(text[:-1]) / 100 if text.endswith("%") else float(text)
    except ValueError:
        return None
    if math.isnan(value):
        return None
    return min(max(value, 0.0), 1.0)
