"""Transform parser — rotation (and optional pivot) from an SVG transform attribute.

Only rotate() is converted. Every other transform function is reported and
dropped.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass

from svg2vd.utils.numbers import parse_number

_ROTATE_RE = re.compile(r"rotate\s*\(([^)]*)\)")
_FUNCTION_RE = re.compile(r"([a-zA-Z]+)\s*\(")
_ARG_SPLIT_RE = re.compile(r"[\s,]+")


@dataclass(frozen=True)
class TransformResult:
    rotation: float = 0.0
    # Both set or both None; None means Android's default pivot (0, 0)
    pivot_x: float | None = None
    pivot_y: float | None = None

    @property
    def has_pivot(self) -> bool:
        return self.pivot_x is not None and self.pivot_y is not None

    @property
    def needs_group(self) -> bool:
        # NaN != 0, so a malformed angle still gets a wrapper and shows up as NaN
        return self.rotation != 0


def parse_transform(raw: str | None) -> TransformResult:
    """rotate(a) / rotate(a cx cy) / rotate(a, cx, cy) → TransformResult."""
    if not raw:
        return TransformResult()
    m = _ROTATE_RE.search(raw)
    if not m:
        return TransformResult()

    args = [a for a in _ARG_SPLIT_RE.split(m.group(1).strip()) if a]
    if not args:
        return TransformResult()

    rotation = parse_number(args[0], math.nan)
    if len(args) >= 3:
        return TransformResult(
            rotation=rotation,
            pivot_x=parse_number(args[1], math.nan),
            pivot_y=parse_number(args[2], math.nan),
        )
    return TransformResult(rotation=rotation)


def unsupported_functions(raw: str | None) -> list[str]:
    """Names of transform functions other than rotate, in order of appearance."""
    if not raw:
        return []
    return [name for name in _FUNCTION_RE.findall(raw) if name != "rotate"]
