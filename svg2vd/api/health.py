"""Health check + meta endpoints."""

from __future__ import annotations

from fastapi import APIRouter

import svg2vd.engine.geometry  # noqa: F401  (registers the shape synthesizers)
from svg2vd.engine.registry import get_registry
from svg2vd.models.responses import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(
        status="ok",
        version="0.1.0",
        shapes_supported=get_registry().tags(),
    )
