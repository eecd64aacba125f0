"""API request models."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field


class ConvertRequest(BaseModel):
    svg: str = Field(..., description="Raw SVG code")
    color_mode: Literal["android", "legacy"] | None = Field(
        default=None,
        description="Color table; defaults to SVG2VD_COLOR_MODE",
    )
    element_order: Literal["type", "document"] | None = Field(
        default=None,
        description="Emission order; defaults to SVG2VD_ELEMENT_ORDER",
    )
