"""svg2vd — convert SVG markup to Android Vector Drawable XML."""

from svg2vd.engine.assembler import convert_svg, convert_svg_to_android_vector, output_path_for
from svg2vd.engine.config import ConverterConfig
from svg2vd.models.diagnostics import ConversionResult, ConversionWarning
from svg2vd.svg.parser import SvgParseError

__version__ = "0.1.0"

__all__ = [
    "ConversionResult",
    "ConversionWarning",
    "ConverterConfig",
    "SvgParseError",
    "convert_svg",
    "convert_svg_to_android_vector",
    "output_path_for",
]
