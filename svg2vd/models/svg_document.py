"""Parsed SVG document model.

Attribute values are kept as the raw strings found in the markup; the engine
interprets them (and records warnings) during conversion.
"""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


class ShapeBase(_Frozen):
    """Presentation attributes shared by every shape primitive."""

    id: str | None = None
    fill: str | None = None
    stroke: str | None = None
    stroke_width: str | None = None
    transform: str | None = None
    filter: str | None = None
    fill_opacity: str | None = None
    stroke_opacity: str | None = None
    fill_rule: str | None = None
    stroke_linecap: str | None = None
    stroke_linejoin: str | None = None


class PathShape(ShapeBase):
    kind: Literal["path"] = "path"
    d: str = ""


class RectShape(ShapeBase):
    kind: Literal["rect"] = "rect"
    x: str | None = None
    y: str | None = None
    width: str | None = None
    height: str | None = None
    rx: str | None = None
    ry: str | None = None


class CircleShape(ShapeBase):
    kind: Literal["circle"] = "circle"
    cx: str | None = None
    cy: str | None = None
    r: str | None = None


class LineShape(ShapeBase):
    kind: Literal["line"] = "line"
    x1: str | None = None
    y1: str | None = None
    x2: str | None = None
    y2: str | None = None


ShapeElement = Annotated[
    Union[PathShape, RectShape, CircleShape, LineShape],
    Field(discriminator="kind"),
]


class GroupElement(_Frozen):
    """A <g>; its transform wraps all descendants, it is never merged into theirs."""

    kind: Literal["g"] = "g"
    id: str | None = None
    transform: str | None = None
    filter: str | None = None
    children: list[Element] = Field(default_factory=list)


Element = Annotated[
    Union[PathShape, RectShape, CircleShape, LineShape, GroupElement],
    Field(discriminator="kind"),
]


class GradientStop(_Frozen):
    offset: str = "0"
    color: str | None = None
    opacity: str | None = None


class GradientDefinition(_Frozen):
    id: str
    type: Literal["linear", "radial"] = "linear"
    x1: str | None = None
    y1: str | None = None
    x2: str | None = None
    y2: str | None = None
    cx: str | None = None
    cy: str | None = None
    r: str | None = None
    stops: list[GradientStop] = Field(default_factory=list)


class DropShadow(_Frozen):
    dx: str | None = None
    dy: str | None = None
    std_deviation: str | None = None
    flood_color: str | None = None
    flood_opacity: str | None = None


class FilterDefinition(_Frozen):
    id: str
    drop_shadow: DropShadow | None = None


class AnimationElement(_Frozen):
    tag: Literal["animate", "animateTransform"] = "animate"
    attribute_name: str = ""
    dur: str | None = None
    from_value: str | None = None
    to_value: str | None = None
    repeat_count: str | None = None


class SvgDocument(_Frozen):
    """Represents a parsed SVG file."""

    width: str | None = None
    height: str | None = None
    view_box: str | None = None
    elements: list[Element] = Field(default_factory=list)
    gradients: list[GradientDefinition] = Field(default_factory=list)
    filters: list[FilterDefinition] = Field(default_factory=list)
    animations: list[AnimationElement] = Field(default_factory=list)
    # Tag names of elements outside the supported set, in document order
    ignored: list[str] = Field(default_factory=list)


GroupElement.model_rebuild()
SvgDocument.model_rebuild()
