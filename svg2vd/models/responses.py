"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from svg2vd.models.diagnostics import ConversionWarning


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    shapes_supported: list[str] = Field(default_factory=list)


class ConvertResponse(BaseModel):
    xml: str
    warnings: list[ConversionWarning] = Field(default_factory=list)
    processing_time_ms: float = 0.0
