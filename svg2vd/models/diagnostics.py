"""Non-fatal conversion diagnostics."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

WarningKind = Literal["unresolved_reference", "malformed_value", "unsupported_construct"]


class ConversionWarning(BaseModel):
    """Something the converter recovered from by falling back to a default."""

    kind: WarningKind
    element: str = ""  # e.g. "circle", "rect#logo", "filter#glow"
    message: str = ""


class ConversionResult(BaseModel):
    xml: str
    warnings: list[ConversionWarning] = Field(default_factory=list)

    def warnings_of(self, kind: WarningKind) -> list[ConversionWarning]:
        return [w for w in self.warnings if w.kind == kind]
