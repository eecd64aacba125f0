"""ConversionContext — the call-scoped state flowing through one conversion.

Gradient and filter registries are per conversion. Nothing here is shared
between calls.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field

from svg2vd.engine.config import ConverterConfig
from svg2vd.models.diagnostics import ConversionWarning, WarningKind
from svg2vd.models.svg_document import FilterDefinition, GradientDefinition, SvgDocument
from svg2vd.utils.numbers import parse_number

logger = logging.getLogger(__name__)


@dataclass
class ConversionContext:
    """Registries and diagnostics for a single document conversion."""

    config: ConverterConfig = field(default_factory=ConverterConfig)
    # Linear gradients by id
    gradients: dict[str, GradientDefinition] = field(default_factory=dict)
    # Radial gradients are recognised only to report them as unsupported
    radial_gradient_ids: set[str] = field(default_factory=set)
    # Filters by id
    filters: dict[str, FilterDefinition] = field(default_factory=dict)
    # Non-fatal problems, in the order they were met
    warnings: list[ConversionWarning] = field(default_factory=list)

    @classmethod
    def from_document(cls, doc: SvgDocument, config: ConverterConfig | None = None) -> ConversionContext:
        """Build the registries from the document's <defs>."""
        ctx = cls(config=config or ConverterConfig())
        for gradient in doc.gradients:
            if gradient.type == "radial":
                ctx.radial_gradient_ids.add(gradient.id)
                continue
            if gradient.id in ctx.gradients:
                ctx.warn("malformed_value", f"linearGradient#{gradient.id}", "duplicate gradient id, keeping the first")
                continue
            ctx.gradients[gradient.id] = gradient
        for flt in doc.filters:
            if flt.id in ctx.filters:
                ctx.warn("malformed_value", f"filter#{flt.id}", "duplicate filter id, keeping the first")
                continue
            ctx.filters[flt.id] = flt
        for tag in doc.ignored:
            ctx.warn("unsupported_construct", tag, f"<{tag}> is not supported and was skipped")
        logger.debug(
            "Registries built: %d gradients, %d filters",
            len(ctx.gradients),
            len(ctx.filters),
        )
        return ctx

    def warn(self, kind: WarningKind, element: str, message: str) -> None:
        self.warnings.append(ConversionWarning(kind=kind, element=element, message=message))
        logger.warning("%s: %s (%s)", element, message, kind)

    def number(self, raw: str | None, default: float, element: str, attr: str) -> float:
        """Parse a numeric attribute, recording malformed text. Malformed values come back as NaN."""
        value = parse_number(raw, default)
        if math.isnan(value) and raw is not None:
            self.warn("malformed_value", element, f"{attr}={raw!r} is not a number")
        return value


def label_of(element: object) -> str:
    """Short name for diagnostics: "circle#sun", or just "circle" without an id."""
    tag = getattr(element, "kind", type(element).__name__)
    element_id = getattr(element, "id", None)
    return f"{tag}#{element_id}" if element_id else tag
