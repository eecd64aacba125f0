"""POST /api/convert — SVG markup to Vector Drawable XML."""

from __future__ import annotations

import logging
import time

from fastapi import APIRouter, HTTPException

from svg2vd.config import settings
from svg2vd.engine.assembler import convert_svg
from svg2vd.engine.config import ConverterConfig
from svg2vd.models.requests import ConvertRequest
from svg2vd.models.responses import ConvertResponse
from svg2vd.svg.parser import SvgParseError

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/convert", response_model=ConvertResponse)
def convert(req: ConvertRequest) -> ConvertResponse:
    start = time.perf_counter()
    config = ConverterConfig(
        color_mode=req.color_mode or settings.svg2vd_color_mode,
        element_order=req.element_order or settings.svg2vd_element_order,
    )
    try:
        result = convert_svg(req.svg, config)
    except SvgParseError as e:
        logger.warning("Convert request rejected: %s", e)
        raise HTTPException(status_code=422, detail=str(e)) from e

    elapsed = (time.perf_counter() - start) * 1000
    return ConvertResponse(
        xml=result.xml,
        warnings=result.warnings,
        processing_time_ms=round(elapsed, 1),
    )
