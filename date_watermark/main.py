# -*- coding: utf-8 -*-
"""程序入口：命令行参数解析、日志配置、启动批处理。"""
from __future__ import annotations
import argparse
import logging
import os
import sys
from typing import List, Optional

from date_watermark.core.batch import BatchProcessor
from date_watermark.core.config import WatermarkConfig, parse_color
from date_watermark.core.errors import ConfigurationError, InputPathError
from date_watermark.core.fonts import FontWeight
from date_watermark.core.image_loader import check_input_path
from date_watermark.core.placement import Position

logger = logging.getLogger(__name__)

EPILOG = """\
Examples:
  date-watermark -i /path/to/images
  date-watermark -i /path/to/image.jpg -s 32 -c '#FF0000' -p TOP_LEFT
  date-watermark -i /path/to/images -s 28 -c FFFFFF -p bottom_right -o 0.7
"""


class _ArgumentParser(argparse.ArgumentParser):
    """argparse exits with 2 on bad arguments; this tool uses 1."""

    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="date-watermark",
        description="Adds date watermarks to images based on their EXIF data.",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("-i", "--input", required=True, help="Input image file or directory path")
    parser.add_argument("-s", "--size", help="Font size for watermark (default: 24)")
    parser.add_argument("-c", "--color", help="Watermark color in hex format (default: #FFFFFF)")
    parser.add_argument("-p", "--position",
                        help="Watermark position: " + ", ".join(p.name for p in Position)
                        + " (default: BOTTOM_RIGHT)")
    parser.add_argument("-o", "--opacity", help="Watermark opacity (0.0-1.0, default: 0.8)")
    parser.add_argument("-m", "--margin", type=int, help="Margin from the image edges in pixels (default: 20)")
    parser.add_argument("-f", "--font", help="Font family (default: Arial)")
    parser.add_argument("-w", "--weight", help="Font weight: " + ", ".join(w.name for w in FontWeight)
                        + " (default: BOLD)")
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("-v", "--verbose", action="store_true", help="Show debug logging")
    verbosity.add_argument("-q", "--quiet", action="store_true", help="Only log errors")
    return parser


def configure_logging(verbose: bool = False, quiet: bool = False) -> None:
    level = logging.WARNING
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.ERROR
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def _warn(message: str) -> None:
    print(f"Warning: {message}", file=sys.stderr)


def build_config(args: argparse.Namespace) -> WatermarkConfig:
    """Turns parsed arguments into a config.

    Unreadable values fall back to the default with a warning. Values that
    parse but are out of range are passed through and rejected by the config.
    """
    changes = {}

    if args.size is not None:
        try:
            size = int(args.size)
            if size <= 0:
                raise ValueError(size)
            changes["font_size"] = size
        except ValueError:
            _warn("Invalid font size, using default")

    if args.color is not None:
        try:
            changes["color"] = parse_color(args.color)
        except ValueError:
            _warn("Invalid color format, using default")

    if args.position is not None:
        try:
            changes["position"] = Position.parse(args.position)
        except ValueError:
            _warn("Invalid position, using default. Valid positions: "
                  + str([p.name for p in Position]))

    if args.opacity is not None:
        try:
            changes["opacity"] = float(args.opacity)
        except ValueError:
            _warn("Invalid opacity format, using default")

    if args.margin is not None:
        changes["margin"] = args.margin

    if args.font is not None:
        changes["font_family"] = args.font

    if args.weight is not None:
        try:
            changes["font_weight"] = FontWeight.parse(args.weight)
        except ValueError:
            _warn("Invalid font weight, using default. Valid weights: "
                  + str([w.name for w in FontWeight]))

    return WatermarkConfig(**changes)


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose, args.quiet)

    try:
        config = build_config(args)
        for w in config.warnings():
            _warn(w)
        input_path = check_input_path(args.input)

        processor = BatchProcessor(config)
        if os.path.isdir(input_path):
            processor.process_directory(input_path)
        else:
            processor.process_single_file(input_path)
    except ConfigurationError as e:
        print(f"Error: Invalid configuration - {e}", file=sys.stderr)
        return 1
    except InputPathError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except Exception as e:
        logger.debug("Unexpected error", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
