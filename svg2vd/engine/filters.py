"""Shadow compositor — drop-shadow filters as a tinted, offset copy of the shape.

Vector drawables have no blur, so the blur radius is folded into the vertical
offset: the copy is translated by (dx, dy + stdDeviation).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from svg2vd.engine.color import TRANSPARENT, resolve_color_with_opacity
from svg2vd.engine.context import ConversionContext
from svg2vd.engine.gradients import reference_id
from svg2vd.models.drawable import GroupNode, PathNode
from svg2vd.utils.numbers import format_number as fmt

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ShadowSpec:
    color: str
    translate_x: float
    translate_y: float


def resolve_shadow(filter_ref: str | None, element: str, ctx: ConversionContext) -> ShadowSpec | None:
    """Turn filter="url(#id)" into shadow parameters, or None when there is nothing to draw."""
    filter_id = reference_id(filter_ref)
    if filter_id is None:
        if filter_ref and filter_ref.strip().lower() != "none":
            ctx.warn("unsupported_construct", element, f"filter={filter_ref!r} is not a url(#id) reference")
        return None

    definition = ctx.filters.get(filter_id)
    if definition is None:
        ctx.warn("unresolved_reference", element, f"filter references missing filter #{filter_id}")
        return None
    if definition.drop_shadow is None:
        ctx.warn("unsupported_construct", element, f"filter #{filter_id} has no feDropShadow")
        return None

    cfg = ctx.config
    ds = definition.drop_shadow
    name = f"filter#{filter_id}"
    dx = ctx.number(ds.dx, cfg.shadow_dx, name, "dx")
    dy = ctx.number(ds.dy, cfg.shadow_dy, name, "dy")
    blur = ctx.number(ds.std_deviation, cfg.shadow_std_deviation, name, "stdDeviation")
    flood_color = ds.flood_color or cfg.shadow_flood_color
    flood_opacity = ds.flood_opacity if ds.flood_opacity is not None else cfg.shadow_flood_opacity
    color = resolve_color_with_opacity(flood_color, flood_opacity)
    return ShadowSpec(color=color, translate_x=dx, translate_y=dy + blur)


def shadow_copy(primary: PathNode, shadow: ShadowSpec) -> GroupNode:
    """Same geometry as ``primary``, painted in the shadow color, inside a translate group."""
    paints_fill = primary.fill_gradient is not None or (
        primary.fill_color is not None and primary.fill_color != TRANSPARENT
    )
    paints_stroke = primary.stroke_color is not None and primary.stroke_color != TRANSPARENT
    copy = PathNode(
        path_data=primary.path_data,
        fill_color=shadow.color if paints_fill else primary.fill_color,
        stroke_color=shadow.color if paints_stroke else primary.stroke_color,
        stroke_width=primary.stroke_width,
        fill_type=primary.fill_type,
        stroke_line_cap=primary.stroke_line_cap,
        stroke_line_join=primary.stroke_line_join,
    )
    logger.debug("Shadow copy %s offset (%s, %s)", shadow.color, shadow.translate_x, shadow.translate_y)
    return GroupNode(
        translate_x=fmt(shadow.translate_x),
        translate_y=fmt(shadow.translate_y),
        nodes=[copy],
    )
