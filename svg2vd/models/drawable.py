"""Vector Drawable output tree.

The emitter builds these nodes; ``svg2vd.svg.serializer`` is the only code that
turns them into text. Attribute values are already formatted strings.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar

ANDROID_NS = "http://schemas.android.com/apk/res/android"
AAPT_NS = "http://schemas.android.com/aapt"


def _present(pairs: list[tuple[str, str | None]]) -> list[tuple[str, str]]:
    return [(k, v) for k, v in pairs if v is not None]


@dataclass
class DrawableNode:
    tag: ClassVar[str] = ""

    def attributes(self) -> list[tuple[str, str]]:
        return []

    def children(self) -> list[DrawableNode]:
        return []


@dataclass
class GradientItemNode(DrawableNode):
    tag: ClassVar[str] = "item"

    offset: str = "0"
    color: str = ""

    def attributes(self) -> list[tuple[str, str]]:
        return [("android:offset", self.offset), ("android:color", self.color)]


@dataclass
class GradientNode(DrawableNode):
    tag: ClassVar[str] = "gradient"

    type: str = "linear"
    start_x: str = "0%"
    start_y: str = "0%"
    end_x: str = "100%"
    end_y: str = "0%"
    items: list[GradientItemNode] = field(default_factory=list)

    def attributes(self) -> list[tuple[str, str]]:
        return [
            ("android:type", self.type),
            ("android:startX", self.start_x),
            ("android:startY", self.start_y),
            ("android:endX", self.end_x),
            ("android:endY", self.end_y),
        ]

    def children(self) -> list[DrawableNode]:
        return list(self.items)


@dataclass
class AaptAttrNode(DrawableNode):
    tag: ClassVar[str] = "aapt:attr"

    name: str = ""
    content: DrawableNode | None = None

    def attributes(self) -> list[tuple[str, str]]:
        return [("name", self.name)]

    def children(self) -> list[DrawableNode]:
        return [self.content] if self.content is not None else []


@dataclass
class PathNode(DrawableNode):
    tag: ClassVar[str] = "path"

    path_data: str = ""
    fill_color: str | None = None
    stroke_color: str | None = None
    stroke_width: str | None = None
    fill_alpha: str | None = None
    stroke_alpha: str | None = None
    fill_type: str | None = None
    stroke_line_cap: str | None = None
    stroke_line_join: str | None = None
    # Replaces fill_color when present
    fill_gradient: GradientNode | None = None

    def attributes(self) -> list[tuple[str, str]]:
        return _present([
            ("android:pathData", self.path_data),
            ("android:fillColor", None if self.fill_gradient else self.fill_color),
            ("android:strokeColor", self.stroke_color),
            ("android:strokeWidth", self.stroke_width),
            ("android:fillAlpha", self.fill_alpha),
            ("android:strokeAlpha", self.stroke_alpha),
            ("android:fillType", self.fill_type),
            ("android:strokeLineCap", self.stroke_line_cap),
            ("android:strokeLineJoin", self.stroke_line_join),
        ])

    def children(self) -> list[DrawableNode]:
        if self.fill_gradient is None:
            return []
        return [AaptAttrNode(name="android:fillColor", content=self.fill_gradient)]


@dataclass
class GroupNode(DrawableNode):
    tag: ClassVar[str] = "group"

    rotation: str | None = None
    pivot_x: str | None = None
    pivot_y: str | None = None
    translate_x: str | None = None
    translate_y: str | None = None
    nodes: list[DrawableNode] = field(default_factory=list)

    def attributes(self) -> list[tuple[str, str]]:
        return _present([
            ("android:rotation", self.rotation),
            ("android:pivotX", self.pivot_x),
            ("android:pivotY", self.pivot_y),
            ("android:translateX", self.translate_x),
            ("android:translateY", self.translate_y),
        ])

    def children(self) -> list[DrawableNode]:
        return list(self.nodes)


@dataclass
class ObjectAnimatorNode(DrawableNode):
    tag: ClassVar[str] = "objectAnimator"

    property_name: str = ""
    duration: str = "1000"
    value_from: str = "0"
    value_to: str = "1"
    value_type: str = "floatType"
    repeat_count: str = "infinite"

    def attributes(self) -> list[tuple[str, str]]:
        return [
            ("android:propertyName", self.property_name),
            ("android:duration", self.duration),
            ("android:valueFrom", self.value_from),
            ("android:valueTo", self.value_to),
            ("android:valueType", self.value_type),
            ("android:repeatCount", self.repeat_count),
        ]


@dataclass
class VectorNode(DrawableNode):
    """Document root: <vector> with size header."""

    tag: ClassVar[str] = "vector"

    width: str = "100"
    height: str = "100"
    viewport_width: str = "100"
    viewport_height: str = "100"
    nodes: list[DrawableNode] = field(default_factory=list)

    def attributes(self) -> list[tuple[str, str]]:
        return [
            ("xmlns:android", ANDROID_NS),
            ("xmlns:aapt", AAPT_NS),
            ("android:width", f"{self.width}dp"),
            ("android:height", f"{self.height}dp"),
            ("android:viewportWidth", self.viewport_width),
            ("android:viewportHeight", self.viewport_height),
        ]

    def children(self) -> list[DrawableNode]:
        return list(self.nodes)

    def iter_paths(self) -> list[PathNode]:
        """All <path> nodes in render order."""
        found: list[PathNode] = []
        stack: list[DrawableNode] = list(reversed(self.nodes))
        while stack:
            node = stack.pop()
            if isinstance(node, PathNode):
                found.append(node)
            stack.extend(reversed(node.children()))
        return found
