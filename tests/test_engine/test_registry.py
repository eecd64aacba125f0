"""Tests for the shape registry."""

import pytest

import svg2vd.engine.geometry  # noqa: F401
from svg2vd.engine.context import ConversionContext
from svg2vd.engine.registry import ShapeRegistry, ShapeSpec, get_registry


def _noop(el, ctx: ConversionContext) -> str:
    return "M0 0"


def test_register_and_get():
    reg = ShapeRegistry()
    spec = ShapeSpec(tag="ellipse", fn=_noop)
    reg.register(spec)
    assert reg.get("ellipse") is spec
    assert "ellipse" in reg
    assert reg.count == 1


def test_duplicate_tag_rejected():
    reg = ShapeRegistry()
    reg.register(ShapeSpec(tag="rect", fn=_noop))
    with pytest.raises(ValueError, match="Duplicate"):
        reg.register(ShapeSpec(tag="rect", fn=_noop))


def test_builtin_shapes_registered():
    reg = get_registry()
    assert reg.tags() == ["circle", "line", "path", "rect"]
    assert reg.get("line").fillable is False
    assert reg.get("circle").fillable is True
