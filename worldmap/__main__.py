"""Command line entry point: ``python -m worldmap WORLD.xml -o out/``."""

import argparse
import logging
import sys
from typing import List, Optional

from worldmap.config import DEFAULT_OUTPUT_DIR, DEFAULT_PREVIEW_SIZE, RenderConfig
from worldmap.errors import WorldMapError
from worldmap.pipeline import run
from worldmap.types import DEFAULT_CELL_SIZE
from worldmap.utils.log import setup_logging

logger = logging.getLogger("worldmap")


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="worldmap",
        description="Render a tile-based world map into layered SVG files.",
    )
    ap.add_argument("input", help="World map XML file")
    ap.add_argument(
        "-o", "--output-dir", default=DEFAULT_OUTPUT_DIR, help="Output directory"
    )
    ap.add_argument("--cell-size", type=int, default=DEFAULT_CELL_SIZE)
    ap.add_argument(
        "--background",
        action="store_true",
        help="Add a white background rectangle",
    )
    ap.add_argument(
        "--lenient",
        action="store_true",
        help="Skip unknown geometry types instead of failing",
    )
    ap.add_argument(
        "--preview", action="store_true", help="Also write PNG previews per layer"
    )
    ap.add_argument("--preview-size", type=int, default=DEFAULT_PREVIEW_SIZE)
    ap.add_argument("--log-level", default="INFO")
    return ap


def config_from_args(args: argparse.Namespace) -> RenderConfig:
    return RenderConfig(
        input_path=args.input,
        output_dir=args.output_dir,
        cell_size=args.cell_size,
        background=args.background,
        strict=not args.lenient,
        preview=args.preview,
        preview_size=args.preview_size,
        log_level=args.log_level,
    )


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        config = config_from_args(args).validate()
    except WorldMapError as e:
        parser.error(str(e))
    setup_logging(config.logging_level)
    try:
        run(config)
    except WorldMapError as e:
        logger.error("%s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
