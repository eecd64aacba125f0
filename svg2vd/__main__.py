"""Command line: python -m svg2vd <input.svg> → <input.xml> next to it."""

from __future__ import annotations

import argparse
import logging
import sys

from svg2vd.config import settings
from svg2vd.engine.assembler import convert_svg_to_android_vector, output_path_for
from svg2vd.engine.config import ConverterConfig

logger = logging.getLogger("svg2vd")


class _UsageParser(argparse.ArgumentParser):
    """Wrong arguments print usage and exit with status 1."""

    def error(self, message: str) -> None:  # type: ignore[override]
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def build_parser() -> argparse.ArgumentParser:
    p = _UsageParser(prog="svg2vd", description="Convert an SVG file to an Android Vector Drawable XML file.")
    p.add_argument("svg", help="input .svg file; output is written beside it as .xml")
    p.add_argument("--color-mode", choices=["android", "legacy"], default=settings.svg2vd_color_mode)
    p.add_argument("--order", choices=["type", "document"], default=settings.svg2vd_element_order)
    return p


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, settings.svg2vd_log_level.upper(), logging.INFO),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    config = ConverterConfig(color_mode=args.color_mode, element_order=args.order)
    out_path = output_path_for(args.svg)
    try:
        result = convert_svg_to_android_vector(args.svg, out_path, config)
    except OSError as e:
        logger.error("Cannot convert %s: %s", args.svg, e)
        return 1
    if result is not None:
        logger.info("Conversion completed successfully: %s (%d warnings)", out_path, len(result.warnings))
    return 0


if __name__ == "__main__":
    sys.exit(main())
