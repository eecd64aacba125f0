"""Number helpers — parsing SVG numeric tokens and formatting drawable numbers. No engine imports."""

from __future__ import annotations

import math
import re

# Trailing CSS/SVG length unit, e.g. "24px", "1.5em"
_UNIT_RE = re.compile(r"^\s*([-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?)\s*([a-zA-Z%]*)\s*$")

_MAX_DECIMALS = 6


def parse_number(raw: str | None, default: float = 0.0) -> float:
    """Parse a numeric SVG attribute.

    Absent or blank text gives ``default``; anything that is not a number gives NaN.
    """
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError:
        return math.nan


def split_unit(raw: str | None) -> tuple[float, str] | None:
    """Split "24px" → (24.0, "px"). Returns None when the text is not a length."""
    if raw is None:
        return None
    m = _UNIT_RE.match(raw)
    if not m:
        return None
    return float(m.group(1)), m.group(2)


def format_number(value: float) -> str:
    """Shortest fixed-point rendering: 50.0 → "50", 72.0914 → "72.0914", -0.0 → "0"."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    text = f"{value:.{_MAX_DECIMALS}f}".rstrip("0").rstrip(".")
    if text in ("-0", ""):
        return "0"
    return text


def round_half_up(value: float) -> int:
    """Round .5 away from zero for positives (127.5 → 128, 76.5 → 77)."""
    return math.floor(value + 0.5)
