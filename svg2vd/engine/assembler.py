"""Document assembler — SVG text in, Vector Drawable XML out.

Parse, build registries, emit, serialize. The output file is written once,
after the whole document has been built.
"""

from __future__ import annotations

import logging
import math
import re
import time
from pathlib import Path

from svg2vd.engine.animation import animations_group
from svg2vd.engine.config import ConverterConfig
from svg2vd.engine.context import ConversionContext
from svg2vd.engine.emitter import emit_element, order_elements
from svg2vd.models.diagnostics import ConversionResult
from svg2vd.models.drawable import DrawableNode, VectorNode
from svg2vd.models.svg_document import SvgDocument
from svg2vd.svg.parser import SvgParseError, parse_svg
from svg2vd.svg.serializer import serialize_vector
from svg2vd.utils.numbers import format_number, split_unit

logger = logging.getLogger(__name__)

_VIEWBOX_SPLIT_RE = re.compile(r"[\s,]+")


def convert_svg(svg_text: str | bytes, config: ConverterConfig | None = None) -> ConversionResult:
    """Convert SVG markup to Android Vector Drawable XML. Raises SvgParseError."""
    start = time.perf_counter()
    doc = parse_svg(svg_text)
    ctx = ConversionContext.from_document(doc, config)
    try:
        root = build_vector(doc, ctx)
        xml = serialize_vector(root)
    except RecursionError as e:
        raise SvgParseError("Malformed SVG: <g> nesting too deep") from e
    elapsed = (time.perf_counter() - start) * 1000
    logger.info(
        "Converted SVG: %d paths, %d warnings in %.1fms",
        len(root.iter_paths()),
        len(ctx.warnings),
        elapsed,
    )
    return ConversionResult(xml=xml, warnings=ctx.warnings)


def build_vector(doc: SvgDocument, ctx: ConversionContext) -> VectorNode:
    """Emit the drawable tree: animations first, then elements in configured order."""
    viewport_w, viewport_h = _viewport(doc, ctx)
    width = _dp_size(doc.width, viewport_w, "width", ctx)
    height = _dp_size(doc.height, viewport_h, "height", ctx)

    nodes: list[DrawableNode] = []
    animations = animations_group(doc.animations, ctx)
    if animations is not None:
        nodes.append(animations)
    for element in order_elements(doc.elements, ctx.config):
        nodes.extend(emit_element(element, ctx))

    return VectorNode(
        width=width,
        height=height,
        viewport_width=format_number(viewport_w),
        viewport_height=format_number(viewport_h),
        nodes=nodes,
    )


def _viewport(doc: SvgDocument, ctx: ConversionContext) -> tuple[float, float]:
    """viewBox size, else width/height, else the configured default."""
    if doc.view_box:
        parts = [p for p in _VIEWBOX_SPLIT_RE.split(doc.view_box.strip()) if p]
        try:
            numbers = [float(p) for p in parts]
        except ValueError:
            numbers = []
        if len(numbers) == 4 and not any(math.isnan(n) for n in numbers) and numbers[2] > 0 and numbers[3] > 0:
            return numbers[2], numbers[3]
        ctx.warn("malformed_value", "svg", f"viewBox={doc.view_box!r} is not four numbers with a positive size")

    default = ctx.config.default_size
    return _length_or(doc.width, default), _length_or(doc.height, default)


def _length_or(raw: str | None, default: float) -> float:
    parsed = split_unit(raw)
    if parsed is None or parsed[1] == "%" or parsed[0] <= 0:
        return default
    return parsed[0]


def _dp_size(raw: str | None, fallback: float, attr: str, ctx: ConversionContext) -> str:
    """Header width/height in dp: the attribute with "px" stripped, else the viewport size."""
    if raw is None:
        return format_number(fallback)
    parsed = split_unit(raw)
    if parsed is None or parsed[1] == "%":
        ctx.warn("malformed_value", "svg", f"{attr}={raw!r} is not an absolute length, using the viewport size")
        return format_number(fallback)
    value, unit = parsed
    if unit not in ("", "px"):
        ctx.warn("unsupported_construct", "svg", f"{attr} unit {unit!r} treated as dp")
    return format_number(value)


def output_path_for(input_path: str | Path) -> Path:
    """icon.svg → icon.xml in the same directory; other names get ".xml" appended."""
    path = Path(input_path)
    if path.suffix.lower() == ".svg":
        return path.with_suffix(".xml")
    return path.with_name(path.name + ".xml")


def convert_svg_to_android_vector(
    input_path: str | Path,
    output_path: str | Path,
    config: ConverterConfig | None = None,
) -> ConversionResult | None:
    """Convert one file. Returns None, writing nothing, when the SVG does not parse.

    OSError from reading or writing propagates.
    """
    svg_text = Path(input_path).read_bytes()
    try:
        result = convert_svg(svg_text, config)
    except SvgParseError as e:
        logger.error("Error parsing SVG %s: %s", input_path, e)
        return None

    Path(output_path).write_text(result.xml, encoding="utf-8")
    logger.info("Wrote %s", output_path)
    return result
