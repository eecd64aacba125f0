"""SVG <animate>/<animateTransform> → <objectAnimator>."""

from __future__ import annotations

import re

from svg2vd.engine.context import ConversionContext
from svg2vd.models.drawable import GroupNode, ObjectAnimatorNode
from svg2vd.models.svg_document import AnimationElement
from svg2vd.utils.numbers import format_number, round_half_up

PROPERTY_MAP = {
    "opacity": "alpha",
    "transform": "rotation",
    "cx": "x",
    "cy": "y",
    "r": "radius",
}

_DEFAULT_DURATION = "1000"
_CLOCK_RE = re.compile(r"^\s*(\d+(?:\.\d+)?|\.\d+)\s*(ms|s|min|h)?\s*$")
_UNIT_MS = {"ms": 1, "s": 1000, "min": 60_000, "h": 3_600_000}


def property_name(svg_attribute: str) -> str:
    return PROPERTY_MAP.get(svg_attribute, svg_attribute)


def duration_ms(dur: str | None) -> str | None:
    """SMIL clock value ("1s", "250ms", "2") → milliseconds. None when unparseable."""
    if dur is None or not dur.strip():
        return _DEFAULT_DURATION
    m = _CLOCK_RE.match(dur)
    if not m:
        return None
    # Bare numbers are seconds in SMIL
    unit = m.group(2) or "s"
    return str(round_half_up(float(m.group(1)) * _UNIT_MS[unit]))


def repeat_count(raw: str | None) -> str:
    if raw is None or raw.strip() in ("", "indefinite"):
        return "infinite"
    return raw.strip()


def animation_to_node(anim: AnimationElement, ctx: ConversionContext) -> ObjectAnimatorNode:
    name = anim.tag
    duration = duration_ms(anim.dur)
    if duration is None:
        ctx.warn("malformed_value", name, f"dur={anim.dur!r} is not a clock value, using {_DEFAULT_DURATION}")
        duration = _DEFAULT_DURATION
    if anim.tag == "animateTransform":
        value_from = _first_number(anim.from_value, "0")
        value_to = _first_number(anim.to_value, "1")
    else:
        value_from = anim.from_value or "0"
        value_to = anim.to_value or "1"
    return ObjectAnimatorNode(
        property_name=property_name(anim.attribute_name),
        duration=duration,
        value_from=value_from,
        value_to=value_to,
        repeat_count=repeat_count(anim.repeat_count),
    )


def _first_number(raw: str | None, default: str) -> str:
    """animateTransform rotate values are "angle cx cy"; floatType takes the angle only."""
    if not raw or not raw.strip():
        return default
    head = re.split(r"[\s,]+", raw.strip())[0]
    try:
        return format_number(float(head))
    except ValueError:
        return raw


def animations_group(animations: list[AnimationElement], ctx: ConversionContext) -> GroupNode | None:
    if not animations:
        return None
    return GroupNode(nodes=[animation_to_node(a, ctx) for a in animations])
