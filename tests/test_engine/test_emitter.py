"""Tests for the element emitter and group walker."""

from svg2vd.engine.config import ConverterConfig
from svg2vd.engine.context import ConversionContext
from svg2vd.engine.emitter import emit_element, emit_shape, order_elements, walk_group
from svg2vd.models.drawable import GroupNode, PathNode
from svg2vd.models.svg_document import CircleShape, LineShape, PathShape, RectShape
from svg2vd.svg.parser import parse_svg
from tests.conftest import MIXED_ORDER_SVG, NESTED_GROUPS_SVG, ROTATED_SVG, SHADOW_CIRCLE_SVG


def _doc_ctx(svg: str, config: ConverterConfig | None = None):
    doc = parse_svg(svg)
    return doc, ConversionContext.from_document(doc, config)


class TestPaint:
    def test_fill_stroke_and_width(self):
        (node,) = emit_shape(
            CircleShape(cx="50", cy="50", r="40", fill="red", stroke="black", stroke_width="3"),
            ConversionContext(),
        )
        assert node.fill_color == "#FFFF0000"
        assert node.stroke_color == "#FF000000"
        assert node.stroke_width == "3"

    def test_absent_fill_uses_default(self):
        (node,) = emit_shape(PathShape(d="M0 0 L1 1"), ConversionContext())
        assert node.fill_color == "#FF373737"
        assert node.stroke_color is None
        assert node.stroke_width is None

    def test_line_is_stroke_only_with_default_width(self):
        (node,) = emit_shape(LineShape(x1="0", y1="0", x2="1", y2="1", stroke="red"), ConversionContext())
        assert node.fill_color is None
        assert node.stroke_color == "#FFFF0000"
        assert node.stroke_width == "1"

    def test_line_stroke_width(self):
        (node,) = emit_shape(
            LineShape(x1="10", y1="10", x2="90", y2="90", stroke="red", stroke_width="2"),
            ConversionContext(),
        )
        assert node.path_data == "M10,10 L90,90"
        assert node.stroke_width == "2"

    def test_px_stroke_width(self):
        (node,) = emit_shape(RectShape(width="1", height="1", stroke="red", stroke_width="1.5px"), ConversionContext())
        assert node.stroke_width == "1.5"

    def test_extra_presentation_attributes(self):
        ctx = ConversionContext()
        (node,) = emit_shape(
            PathShape(
                d="M0 0 L1 1",
                fill_opacity="0.5",
                stroke_opacity="25%",
                fill_rule="evenodd",
                stroke_linecap="round",
                stroke_linejoin="bevel",
            ),
            ctx,
        )
        assert node.fill_alpha == "0.5"
        assert node.stroke_alpha == "0.25"
        assert node.fill_type == "evenOdd"
        assert node.stroke_line_cap == "round"
        assert node.stroke_line_join == "bevel"
        assert ctx.warnings == []

    def test_unknown_keyword_is_reported(self):
        ctx = ConversionContext()
        (node,) = emit_shape(PathShape(d="M0 0 L1 1", stroke_linejoin="arcs"), ctx)
        assert node.stroke_line_join is None
        assert [w.kind for w in ctx.warnings] == ["unsupported_construct"]

    def test_legacy_color_mode(self):
        ctx = ConversionContext(config=ConverterConfig(color_mode="legacy"))
        (node,) = emit_shape(RectShape(width="1", height="1", fill="red"), ctx)
        assert node.fill_color == "red"
        (node,) = emit_shape(RectShape(width="1", height="1"), ctx)
        assert node.fill_color == "#000000"

    def test_unresolved_gradient_falls_back_to_default_fill(self):
        ctx = ConversionContext()
        (node,) = emit_shape(PathShape(d="M0 0 L1 1", fill="url(#missing)"), ctx)
        assert node.fill_gradient is None
        assert node.fill_color == "#FF373737"
        assert ctx.warnings[0].kind == "unresolved_reference"

    def test_empty_path_is_skipped(self):
        ctx = ConversionContext()
        assert emit_shape(PathShape(d="  "), ctx) == []
        assert ctx.warnings[0].kind == "malformed_value"


class TestRotation:
    def test_rotated_shape_is_wrapped(self):
        doc, ctx = _doc_ctx(ROTATED_SVG)
        (group,) = emit_element(doc.elements[0], ctx)
        assert isinstance(group, GroupNode)
        assert (group.rotation, group.pivot_x, group.pivot_y) == ("45", "50", "50")
        (path,) = group.nodes
        assert path.path_data == "M 25 25 h 50 v 50 h -50 Z"

    def test_rotation_without_pivot(self):
        (group,) = emit_shape(RectShape(width="1", height="1", transform="rotate(10)"), ConversionContext())
        assert group.rotation == "10"
        assert group.pivot_x is None and group.pivot_y is None

    def test_non_rotation_transform_is_reported(self):
        ctx = ConversionContext()
        (node,) = emit_shape(RectShape(width="1", height="1", transform="translate(5 5)"), ctx)
        assert isinstance(node, PathNode)
        assert [w.kind for w in ctx.warnings] == ["unsupported_construct"]

    def test_malformed_angle_renders_nan(self):
        (group,) = emit_shape(RectShape(width="1", height="1", transform="rotate(abc)"), ConversionContext())
        assert group.rotation == "NaN"


class TestShadow:
    def test_filtered_circle_emits_shadow_first(self):
        doc, ctx = _doc_ctx(SHADOW_CIRCLE_SVG)
        shadow_group, primary = emit_element(doc.elements[0], ctx)
        assert isinstance(shadow_group, GroupNode)
        assert (shadow_group.translate_x, shadow_group.translate_y) == ("2", "4")
        (shadow,) = shadow_group.nodes
        assert shadow.path_data == primary.path_data
        assert shadow.fill_color == "#80000000"
        assert primary.fill_color == "#FFFF0000"

    def test_shadow_inside_rotation_group(self):
        doc, ctx = _doc_ctx(SHADOW_CIRCLE_SVG)
        circle = doc.elements[0].model_copy(update={"transform": "rotate(90 50 50)"})
        (group,) = emit_shape(circle, ctx)
        assert group.rotation == "90"
        assert isinstance(group.nodes[0], GroupNode)
        assert isinstance(group.nodes[1], PathNode)


class TestGroupWalker:
    def test_nested_groups(self):
        doc, ctx = _doc_ctx(NESTED_GROUPS_SVG)
        outer = walk_group(doc.elements[0], ctx)
        assert outer.rotation == "30"
        assert outer.pivot_x is None
        # path*, rect*, line*, then nested g
        kinds = [type(n).__name__ for n in outer.nodes]
        assert kinds == ["PathNode", "PathNode", "PathNode", "GroupNode"]
        assert outer.nodes[0].path_data == "M0 0 L 10 10"
        assert outer.nodes[1].path_data == "M 0 0 h 10 v 10 h -10 Z"
        assert outer.nodes[2].path_data == "M0,0 L100,100"
        inner = outer.nodes[3]
        assert (inner.rotation, inner.pivot_x, inner.pivot_y) == ("15", "50", "50")
        (circle,) = inner.nodes
        assert circle.path_data.startswith("M 50 40")

    def test_plain_group_has_no_attributes(self):
        doc, ctx = _doc_ctx(MIXED_ORDER_SVG)
        group = walk_group(doc.elements[0], ctx)
        assert group.attributes() == []
        assert len(group.nodes) == 1

    def test_group_filter_applies_to_children(self):
        svg = '''<svg viewBox="0 0 10 10">
          <defs><filter id="s"><feDropShadow dx="1" dy="1"/></filter></defs>
          <g filter="url(#s)">
            <rect width="2" height="2"/>
            <circle cx="5" cy="5" r="1"/>
          </g>
        </svg>'''
        doc, ctx = _doc_ctx(svg)
        group = walk_group(doc.elements[0], ctx)
        kinds = [type(n).__name__ for n in group.nodes]
        # circle before rect, each with its shadow first
        assert kinds == ["GroupNode", "PathNode", "GroupNode", "PathNode"]
        assert group.nodes[0].translate_y == "3"


class TestOrdering:
    def test_type_order(self):
        doc, ctx = _doc_ctx(MIXED_ORDER_SVG)
        kinds = [el.kind for el in order_elements(doc.elements, ctx.config)]
        assert kinds == ["path", "circle", "rect", "line", "g"]

    def test_document_order(self):
        doc, ctx = _doc_ctx(MIXED_ORDER_SVG, ConverterConfig(element_order="document"))
        kinds = [el.kind for el in order_elements(doc.elements, ctx.config)]
        assert kinds == ["g", "line", "rect", "circle", "path"]
