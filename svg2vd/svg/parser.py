"""SVG parser — facade over xml.etree.

Converts raw SVG text → SvgDocument. Only well-formedness is checked; elements
outside the supported set are recorded in ``SvgDocument.ignored`` and skipped.
"""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from typing import Any

from svg2vd.models.svg_document import (
    AnimationElement,
    CircleShape,
    DropShadow,
    Element,
    FilterDefinition,
    GradientDefinition,
    GradientStop,
    GroupElement,
    LineShape,
    PathShape,
    RectShape,
    SvgDocument,
)

logger = logging.getLogger(__name__)


class SvgParseError(ValueError):
    """The input is not well-formed XML or not an <svg> document."""


_SHAPE_MODELS = {
    "path": (PathShape, ("d",)),
    "rect": (RectShape, ("x", "y", "width", "height", "rx", "ry")),
    "circle": (CircleShape, ("cx", "cy", "r")),
    "line": (LineShape, ("x1", "y1", "x2", "y2")),
}

# SVG presentation attribute → model field; these may also come from style="..."
_PRESENTATION = {
    "fill": "fill",
    "stroke": "stroke",
    "stroke-width": "stroke_width",
    "fill-opacity": "fill_opacity",
    "stroke-opacity": "stroke_opacity",
    "fill-rule": "fill_rule",
    "stroke-linecap": "stroke_linecap",
    "stroke-linejoin": "stroke_linejoin",
    "filter": "filter",
}

_DEFINITION_TAGS = {"linearGradient", "radialGradient", "filter"}
_ANIMATION_TAGS = {"animate", "animateTransform"}
# Skipped without being reported
_SILENT_TAGS = {"title", "desc", "metadata"}


def parse_svg(svg_text: str | bytes) -> SvgDocument:
    """Parse raw SVG text into an SvgDocument. Raises SvgParseError.

    Bytes are decoded by the XML parser, honouring the encoding declaration.
    """
    try:
        root = ET.fromstring(svg_text)
    except ET.ParseError as e:
        raise SvgParseError(f"Malformed SVG: {e}") from e

    if _local(root.tag) != "svg":
        raise SvgParseError(f"Root element is <{_local(root.tag)}>, expected <svg>")

    collected: dict[str, list[Any]] = {
        "gradients": [],
        "filters": [],
        "animations": [],
        "ignored": [],
    }
    elements: list[Element] = []

    try:
        for child in root:
            tag = _local(child.tag)
            if tag == "defs":
                for definition in child:
                    _collect_definition(definition, collected)
            elif tag in _DEFINITION_TAGS:
                _collect_definition(child, collected)
            elif tag in _ANIMATION_TAGS:
                collected["animations"].append(_animation(child))
            else:
                element = _element(child, collected["ignored"])
                if element is not None:
                    elements.append(element)
    except RecursionError as e:
        raise SvgParseError("Malformed SVG: <g> nesting too deep") from e

    doc = SvgDocument(
        width=root.get("width"),
        height=root.get("height"),
        view_box=root.get("viewBox"),
        elements=elements,
        **collected,
    )
    logger.info(
        "Parsed SVG: %d top-level elements, %d gradients, %d filters, %d animations",
        len(doc.elements),
        len(doc.gradients),
        len(doc.filters),
        len(doc.animations),
    )
    return doc


def _local(tag: Any) -> str:
    """Strip the namespace: '{http://www.w3.org/2000/svg}rect' → 'rect'."""
    if not isinstance(tag, str):
        # Comments and processing instructions
        return ""
    return tag.split("}")[-1]


def parse_style(style: str | None) -> dict[str, str]:
    """'fill:red; stroke-width: 2' → {'fill': 'red', 'stroke-width': '2'}."""
    declarations: dict[str, str] = {}
    if not style:
        return declarations
    for part in style.split(";"):
        if ":" not in part:
            continue
        key, value = part.split(":", 1)
        key, value = key.strip(), value.strip()
        if key and value:
            declarations[key] = value
    return declarations


def _presentation(el: ET.Element) -> dict[str, str | None]:
    fields: dict[str, str | None] = {field: el.get(attr) for attr, field in _PRESENTATION.items()}
    # Inline style wins over presentation attributes
    for prop, value in parse_style(el.get("style")).items():
        if prop in _PRESENTATION:
            fields[_PRESENTATION[prop]] = value
    return fields


def _element(el: ET.Element, ignored: list[str]) -> Element | None:
    tag = _local(el.tag)
    if not tag or tag in _SILENT_TAGS:
        return None
    if tag == "g":
        children: list[Element] = []
        for child in el:
            element = _element(child, ignored)
            if element is not None:
                children.append(element)
        return GroupElement(
            id=el.get("id"),
            transform=el.get("transform"),
            filter=_presentation(el)["filter"],
            children=children,
        )
    if tag in _SHAPE_MODELS:
        model, geometry_attrs = _SHAPE_MODELS[tag]
        values: dict[str, Any] = {name: el.get(name) for name in geometry_attrs}
        if tag == "path":
            values["d"] = el.get("d") or ""
        return model(
            id=el.get("id"),
            transform=el.get("transform"),
            **_presentation(el),
            **values,
        )
    ignored.append(tag)
    return None


def _collect_definition(el: ET.Element, collected: dict[str, list[Any]]) -> None:
    tag = _local(el.tag)
    if not tag or tag in _SILENT_TAGS:
        return
    element_id = el.get("id")
    if tag in ("linearGradient", "radialGradient"):
        if not element_id:
            collected["ignored"].append(tag)
            return
        collected["gradients"].append(_gradient(el, element_id, tag))
    elif tag == "filter":
        if not element_id:
            collected["ignored"].append(tag)
            return
        collected["filters"].append(_filter(el, element_id))
    else:
        collected["ignored"].append(tag)


def _gradient(el: ET.Element, element_id: str, tag: str) -> GradientDefinition:
    stops = []
    for stop in el:
        if _local(stop.tag) != "stop":
            continue
        style = parse_style(stop.get("style"))
        stops.append(
            GradientStop(
                offset=stop.get("offset") or "0",
                color=style.get("stop-color", stop.get("stop-color")),
                opacity=style.get("stop-opacity", stop.get("stop-opacity")),
            )
        )
    return GradientDefinition(
        id=element_id,
        type="linear" if tag == "linearGradient" else "radial",
        x1=el.get("x1"),
        y1=el.get("y1"),
        x2=el.get("x2"),
        y2=el.get("y2"),
        cx=el.get("cx"),
        cy=el.get("cy"),
        r=el.get("r"),
        stops=stops,
    )


def _filter(el: ET.Element, element_id: str) -> FilterDefinition:
    shadow = None
    for primitive in el:
        if _local(primitive.tag) == "feDropShadow":
            style = parse_style(primitive.get("style"))
            shadow = DropShadow(
                dx=primitive.get("dx"),
                dy=primitive.get("dy"),
                std_deviation=primitive.get("stdDeviation"),
                flood_color=style.get("flood-color", primitive.get("flood-color")),
                flood_opacity=style.get("flood-opacity", primitive.get("flood-opacity")),
            )
            # Only the first drop shadow is used
            break
    return FilterDefinition(id=element_id, drop_shadow=shadow)


def _animation(el: ET.Element) -> AnimationElement:
    return AnimationElement(
        tag=_local(el.tag),
        attribute_name=el.get("attributeName") or "",
        dur=el.get("dur"),
        from_value=el.get("from"),
        to_value=el.get("to"),
        repeat_count=el.get("repeatCount"),
    )
