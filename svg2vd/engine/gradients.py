"""Gradient resolution — fill="url(#id)" to an aapt:attr <gradient> block."""

from __future__ import annotations

import re

from svg2vd.engine.color import resolve_color, resolve_color_with_opacity
from svg2vd.engine.context import ConversionContext
from svg2vd.models.drawable import GradientItemNode, GradientNode
from svg2vd.models.svg_document import GradientDefinition

_URL_RE = re.compile(r"^\s*url\(\s*['\"]?#([^)'\"]+)['\"]?\s*\)\s*$")

# SVG's initial stop-color
_STOP_DEFAULT_COLOR = "#000000"


def reference_id(value: str | None) -> str | None:
    """'url(#grad1)' → 'grad1'; anything else → None."""
    if not value:
        return None
    m = _URL_RE.match(value)
    return m.group(1).strip() if m else None


def resolve_fill_gradient(fill: str | None, element: str, ctx: ConversionContext) -> GradientNode | None:
    """Look up a url(#id) fill. None (with a warning) when it cannot be rendered."""
    gradient_id = reference_id(fill)
    if gradient_id is None:
        return None
    gradient = ctx.gradients.get(gradient_id)
    if gradient is not None:
        return gradient_to_node(gradient, ctx)
    if gradient_id in ctx.radial_gradient_ids:
        ctx.warn("unsupported_construct", element, f"radial gradient #{gradient_id} is not supported, using a flat fill")
    else:
        ctx.warn("unresolved_reference", element, f"fill references missing gradient #{gradient_id}")
    return None


def gradient_to_node(gradient: GradientDefinition, ctx: ConversionContext) -> GradientNode:
    mode = ctx.config.color_mode
    items = []
    for stop in gradient.stops:
        color = stop.color or _STOP_DEFAULT_COLOR
        if stop.opacity is not None and stop.opacity.strip():
            item_color = resolve_color_with_opacity(color, stop.opacity)
        else:
            item_color = resolve_color(color, mode)
        items.append(GradientItemNode(offset=stop.offset, color=item_color))
    if not items:
        ctx.warn("malformed_value", f"linearGradient#{gradient.id}", "gradient has no stops")
    return GradientNode(
        type="linear",
        start_x=gradient.x1 or "0%",
        start_y=gradient.y1 or "0%",
        end_x=gradient.x2 or "100%",
        end_y=gradient.y2 or "0%",
        items=items,
    )
