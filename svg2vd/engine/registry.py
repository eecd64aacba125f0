"""Shape registry — every path synthesizer is a standalone function registered via decorator.

Usage:
    @shape("circle", description="Four cubic arcs")
    def circle_path(el: CircleShape, ctx: ConversionContext) -> str:
        return "M ..."

Supporting a new SVG primitive = one decorated function. Nothing else changes.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable

if TYPE_CHECKING:
    from svg2vd.engine.context import ConversionContext

logger = logging.getLogger(__name__)


@dataclass
class ShapeSpec:
    tag: str
    fn: Callable[[Any, "ConversionContext"], str]
    # Closed outlines are filled; open ones (line) are stroke-only
    fillable: bool = True
    description: str = ""


class ShapeRegistry:
    """Singleton registry of path synthesizers keyed by SVG tag."""

    def __init__(self) -> None:
        self._shapes: dict[str, ShapeSpec] = {}

    def register(self, spec: ShapeSpec) -> None:
        if spec.tag in self._shapes:
            raise ValueError(f"Duplicate shape tag: {spec.tag}")
        self._shapes[spec.tag] = spec
        logger.debug("Registered shape <%s>", spec.tag)

    def get(self, tag: str) -> ShapeSpec:
        return self._shapes[tag]

    def __contains__(self, tag: object) -> bool:
        return tag in self._shapes

    def tags(self) -> list[str]:
        return sorted(self._shapes)

    @property
    def count(self) -> int:
        return len(self._shapes)


# Module-level singleton
_registry = ShapeRegistry()


def get_registry() -> ShapeRegistry:
    return _registry


def shape(
    tag: str,
    *,
    fillable: bool = True,
    description: str = "",
):
    """Decorator to register a path synthesizer."""

    def decorator(fn: Callable[[Any, "ConversionContext"], str]):
        spec = ShapeSpec(
            tag=tag,
            fn=fn,
            fillable=fillable,
            description=description,
        )
        _registry.register(spec)
        return fn

    return decorator
