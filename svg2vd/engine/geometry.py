"""Geometry synthesizer — shape primitives to Android pathData strings.

Path data uses the spaced flavor ("M 10 10 h 80 ...") throughout; only lines
keep the comma-paired "M10,10 L90,90" form.
"""

from __future__ import annotations

from svg2vd.engine.context import ConversionContext, label_of
from svg2vd.engine.registry import shape
from svg2vd.models.svg_document import CircleShape, LineShape, PathShape, RectShape
from svg2vd.utils.numbers import format_number as fmt


@shape("path", description="Passthrough of the d attribute")
def path_data(el: PathShape, ctx: ConversionContext) -> str:
    return el.d


@shape("circle", description="Four cubic Bezier arcs, top → right → bottom → left")
def circle_path(el: CircleShape, ctx: ConversionContext) -> str:
    name = label_of(el)
    cx = ctx.number(el.cx, 0.0, name, "cx")
    cy = ctx.number(el.cy, 0.0, name, "cy")
    r = ctx.number(el.r, 0.0, name, "r")
    if r < 0:
        ctx.warn("malformed_value", name, f"negative radius {el.r!r}, using 0")
        r = 0.0
    return circle_to_path(cx, cy, r, ctx.config.circle_kappa)


def circle_to_path(cx: float, cy: float, r: float, kappa: float = 0.552285) -> str:
    """Cubic approximation of a circle; not exact, within ~0.03% of r."""
    k = kappa * r
    segments = [
        f"M {fmt(cx)} {fmt(cy - r)}",
        f"C {fmt(cx + k)} {fmt(cy - r)} {fmt(cx + r)} {fmt(cy - k)} {fmt(cx + r)} {fmt(cy)}",
        f"C {fmt(cx + r)} {fmt(cy + k)} {fmt(cx + k)} {fmt(cy + r)} {fmt(cx)} {fmt(cy + r)}",
        f"C {fmt(cx - k)} {fmt(cy + r)} {fmt(cx - r)} {fmt(cy + k)} {fmt(cx - r)} {fmt(cy)}",
        f"C {fmt(cx - r)} {fmt(cy - k)} {fmt(cx - k)} {fmt(cy - r)} {fmt(cx)} {fmt(cy - r)}",
        "Z",
    ]
    return " ".join(segments)


@shape("rect", description="Axis-aligned box, quadratic corners when rx/ry are set")
def rect_path(el: RectShape, ctx: ConversionContext) -> str:
    name = label_of(el)
    x = ctx.number(el.x, 0.0, name, "x")
    y = ctx.number(el.y, 0.0, name, "y")
    w = ctx.number(el.width, 0.0, name, "width")
    h = ctx.number(el.height, 0.0, name, "height")
    rx = ctx.number(el.rx, 0.0, name, "rx")
    ry = ctx.number(el.ry, rx, name, "ry")
    return rect_to_path(x, y, w, h, rx, ry)


def rect_to_path(x: float, y: float, w: float, h: float, rx: float = 0.0, ry: float = 0.0) -> str:
    # SVG clamps corner radii to half the side
    rx = min(max(rx, 0.0), abs(w) / 2)
    ry = min(max(ry, 0.0), abs(h) / 2)
    if rx == 0 and ry == 0:
        return f"M {fmt(x)} {fmt(y)} h {fmt(w)} v {fmt(h)} h {fmt(-w)} Z"
    return (
        f"M {fmt(x + rx)} {fmt(y)} "
        f"L {fmt(x + w - rx)} {fmt(y)} "
        f"Q {fmt(x + w)} {fmt(y)} {fmt(x + w)} {fmt(y + ry)} "
        f"L {fmt(x + w)} {fmt(y + h - ry)} "
        f"Q {fmt(x + w)} {fmt(y + h)} {fmt(x + w - rx)} {fmt(y + h)} "
        f"L {fmt(x + rx)} {fmt(y + h)} "
        f"Q {fmt(x)} {fmt(y + h)} {fmt(x)} {fmt(y + h - ry)} "
        f"L {fmt(x)} {fmt(y + ry)} "
        f"Q {fmt(x)} {fmt(y)} {fmt(x + rx)} {fmt(y)} Z"
    )


@shape("line", fillable=False, description="Single straight segment, stroke only")
def line_path(el: LineShape, ctx: ConversionContext) -> str:
    name = label_of(el)
    x1 = ctx.number(el.x1, 0.0, name, "x1")
    y1 = ctx.number(el.y1, 0.0, name, "y1")
    x2 = ctx.number(el.x2, 0.0, name, "x2")
    y2 = ctx.number(el.y2, 0.0, name, "y2")
    return f"M{fmt(x1)},{fmt(y1)} L{fmt(x2)},{fmt(y2)}"
