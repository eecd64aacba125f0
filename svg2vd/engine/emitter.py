"""Element emitter and group walker — document elements to drawable nodes.

Each shape independently decides, in order:
  (a) a rotation wrapper group when its transform rotates,
  (b) a shadow copy in front of it when its filter is a drop shadow,
  (c) an aapt:attr gradient block instead of a flat fill color.
"""

from __future__ import annotations

import logging

from svg2vd.engine import geometry  # noqa: F401  (registers the shape synthesizers)
from svg2vd.engine.color import opacity_to_alpha, resolve_color
from svg2vd.engine.config import ConverterConfig
from svg2vd.engine.context import ConversionContext, label_of
from svg2vd.engine.filters import resolve_shadow, shadow_copy
from svg2vd.engine.gradients import resolve_fill_gradient
from svg2vd.engine.registry import get_registry
from svg2vd.engine.transform import TransformResult, parse_transform, unsupported_functions
from svg2vd.models.drawable import DrawableNode, GroupNode, PathNode
from svg2vd.models.svg_document import Element, GroupElement, ShapeBase
from svg2vd.utils.numbers import format_number as fmt
from svg2vd.utils.numbers import split_unit

logger = logging.getLogger(__name__)

# Emission order for "type" ordering
TYPE_ORDER = {"path": 0, "circle": 1, "rect": 2, "line": 3, "g": 4}

_FILL_TYPES = {"evenodd": "evenOdd", "nonzero": "nonZero"}
_LINE_CAPS = {"butt", "round", "square"}
_LINE_JOINS = {"miter", "round", "bevel"}


def order_elements(elements: list[Element], config: ConverterConfig) -> list[Element]:
    """Stable sort into path*, circle*, rect*, line*, g* unless document order is requested."""
    if config.element_order == "document":
        return list(elements)
    return sorted(elements, key=lambda el: TYPE_ORDER[el.kind])


def emit_element(el: Element, ctx: ConversionContext, inherited_filter: str | None = None) -> list[DrawableNode]:
    if isinstance(el, GroupElement):
        return [walk_group(el, ctx, inherited_filter)]
    return emit_shape(el, ctx, inherited_filter)


def emit_shape(el: ShapeBase, ctx: ConversionContext, inherited_filter: str | None = None) -> list[DrawableNode]:
    """One shape → [shadow group?, path], optionally inside a rotation group."""
    spec = get_registry().get(el.kind)
    name = label_of(el)

    path_data = spec.fn(el, ctx)
    if not path_data.strip():
        ctx.warn("malformed_value", name, "empty path data, element skipped")
        return []

    primary = PathNode(path_data=path_data)
    _apply_paint(primary, el, spec.fillable, name, ctx)

    nodes: list[DrawableNode] = []
    shadow = resolve_shadow(el.filter or inherited_filter, name, ctx)
    if shadow is not None:
        nodes.append(shadow_copy(primary, shadow))
    nodes.append(primary)

    rotation = _transform_of(el.transform, name, ctx)
    if rotation.needs_group:
        return [_rotation_group(rotation, nodes)]
    return nodes


def walk_group(group: GroupElement, ctx: ConversionContext, inherited_filter: str | None = None) -> GroupNode:
    """Depth-first: every <g> becomes a <group>, rotated when its own transform rotates."""
    name = label_of(group)
    effective_filter = group.filter or inherited_filter
    children: list[DrawableNode] = []
    for child in order_elements(group.children, ctx.config):
        children.extend(emit_element(child, ctx, effective_filter))
    logger.debug("%s: %d nodes", name, len(children))

    rotation = _transform_of(group.transform, name, ctx)
    if rotation.needs_group:
        return _rotation_group(rotation, children)
    return GroupNode(nodes=children)


def _rotation_group(rotation: TransformResult, nodes: list[DrawableNode]) -> GroupNode:
    group = GroupNode(rotation=fmt(rotation.rotation), nodes=nodes)
    if rotation.has_pivot:
        group.pivot_x = fmt(rotation.pivot_x)
        group.pivot_y = fmt(rotation.pivot_y)
    return group


def _transform_of(raw: str | None, name: str, ctx: ConversionContext) -> TransformResult:
    for fn_name in unsupported_functions(raw):
        ctx.warn("unsupported_construct", name, f"transform {fn_name}() is ignored; only rotate() is converted")
    return parse_transform(raw)


def _apply_paint(node: PathNode, el: ShapeBase, fillable: bool, name: str, ctx: ConversionContext) -> None:
    mode = ctx.config.color_mode

    if fillable:
        node.fill_gradient = resolve_fill_gradient(el.fill, name, ctx)
        if node.fill_gradient is None:
            node.fill_color = resolve_color(el.fill, mode)
        node.fill_alpha = _alpha(el.fill_opacity, name, "fill-opacity", ctx)
        node.fill_type = _keyword(el.fill_rule, _FILL_TYPES, name, "fill-rule", ctx)
        if el.stroke:
            node.stroke_color = resolve_color(el.stroke, mode)
        if el.stroke_width:
            node.stroke_width = _length(el.stroke_width, name, "stroke-width", ctx)
    else:
        # Open shapes are stroke-only; a stroke width is always present
        node.stroke_color = resolve_color(el.stroke, mode)
        node.stroke_width = _length(el.stroke_width or "1", name, "stroke-width", ctx)

    node.stroke_alpha = _alpha(el.stroke_opacity, name, "stroke-opacity", ctx)
    node.stroke_line_cap = _keyword(el.stroke_linecap, {v: v for v in _LINE_CAPS}, name, "stroke-linecap", ctx)
    node.stroke_line_join = _keyword(el.stroke_linejoin, {v: v for v in _LINE_JOINS}, name, "stroke-linejoin", ctx)


def _length(raw: str, name: str, attr: str, ctx: ConversionContext) -> str:
    parsed = split_unit(raw)
    if parsed is None:
        ctx.warn("malformed_value", name, f"{attr}={raw!r} is not a length")
        return "NaN"
    value, unit = parsed
    if unit not in ("", "px"):
        ctx.warn("unsupported_construct", name, f"{attr} unit {unit!r} treated as user units")
    return fmt(value)


def _alpha(raw: str | None, name: str, attr: str, ctx: ConversionContext) -> str | None:
    if raw is None:
        return None
    alpha = opacity_to_alpha(raw)
    if alpha is None:
        ctx.warn("malformed_value", name, f"{attr}={raw!r} is not an opacity")
        return None
    return fmt(alpha)


def _keyword(raw: str | None, table: dict[str, str], name: str, attr: str, ctx: ConversionContext) -> str | None:
    if raw is None:
        return None
    value = table.get(raw.strip())
    if value is None:
        ctx.warn("unsupported_construct", name, f"{attr}={raw!r} is not supported")
    return value
