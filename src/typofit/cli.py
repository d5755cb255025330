# SPDX-License-Identifier: Apache-2.0
"""
typofit - CLI Tool

Quick typography sizing decisions from the command line, measured with a
PDF standard font (PDFium) or a Pillow font.

Usage:
    typofit <command> [options]

Examples:
    typofit estimate "Hello world"
    typofit truncate "A very long title" --width 60 --tail ...
    typofit fit-box --ref 100 20 --box 200 40
    typofit fit-threshold --threshold 800 --value 400 --size 16 --direction -1
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Callable, Sequence
from pathlib import Path
from typing import NoReturn

from typofit.core.errors import TypographyError
from typofit.core.estimator import (
    DEFAULT_DISTRIBUTION,
    DEFAULT_SAMPLES,
    text_width_estimator,
)
from typofit.core.font_scaling import font_size_to_box, font_size_to_threshold
from typofit.core.measure import (
    DEFAULT_FONT_NAME,
    DEFAULT_FONT_SIZE,
    MeasureConfig,
    create_measurer,
)
from typofit.core.models import BBox
from typofit.core.truncate import truncate

logger = logging.getLogger(__name__)


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments.

    Args:
        argv: Arguments to parse. Defaults to sys.argv[1:].

    Returns:
        Parsed argument Namespace.
    """
    parser = argparse.ArgumentParser(
        prog="typofit",
        description="Typography heuristics - estimate, truncate and scale text",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s estimate "Hello world"                      # Estimated vs measured width
  %(prog)s truncate "A long title" --width 40 --tail ...
  %(prog)s --backend pillow truncate "A long title" --width 40
  %(prog)s fit-box --ref 100 20 --box 200 40           # Scale by height
  %(prog)s fit-threshold --threshold 800 --value 400 --size 16 --direction -1
""",
    )

    parser.add_argument(
        "--backend",
        choices=["pdfium", "pillow"],
        default="pdfium",
        help="Text measurer backend (default: pdfium)",
    )
    parser.add_argument(
        "--font",
        default=DEFAULT_FONT_NAME,
        help=f"PDF standard font name for pdfium (default: {DEFAULT_FONT_NAME})",
    )
    parser.add_argument(
        "--font-path",
        type=Path,
        default=None,
        help="TrueType/OpenType font file for pillow (default: Pillow's font)",
    )
    parser.add_argument(
        "--font-size",
        type=float,
        default=DEFAULT_FONT_SIZE,
        help=f"Font size (default: {DEFAULT_FONT_SIZE})",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Verbose output",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    estimate = subparsers.add_parser("estimate", help="Estimate text width")
    estimate.add_argument("text", help="Text to estimate")
    estimate.add_argument(
        "--samples",
        nargs="+",
        default=list(DEFAULT_SAMPLES),
        help="Calibration samples (default: %(default)s)",
    )
    estimate.add_argument(
        "--distribution",
        nargs="+",
        type=float,
        default=list(DEFAULT_DISTRIBUTION),
        help="Sample weights (default: %(default)s)",
    )

    trunc = subparsers.add_parser("truncate", help="Truncate text to a width")
    trunc.add_argument("text", help="Text to truncate")
    trunc.add_argument("-w", "--width", type=float, required=True, help="Width to fit")
    trunc.add_argument("--tail", default="", help='Overflow marker such as "..."')
    trunc.add_argument(
        "--estimate",
        action="store_true",
        help="Measure with the heuristic estimator instead of the font",
    )

    fit_box = subparsers.add_parser("fit-box", help="Scale font size to a box")
    fit_box.add_argument(
        "--ref",
        nargs=2,
        type=float,
        required=True,
        metavar=("WIDTH", "HEIGHT"),
        help="Reference box size",
    )
    fit_box.add_argument(
        "--box",
        nargs=2,
        type=float,
        required=True,
        metavar=("WIDTH", "HEIGHT"),
        help="New box size",
    )
    fit_box.add_argument("--ratio", type=float, default=1.0, help="Font size ratio")
    fit_box.add_argument(
        "--by-width",
        action="store_true",
        help="Scale by width instead of height",
    )

    fit_threshold = subparsers.add_parser(
        "fit-threshold", help="Scale font size against a threshold"
    )
    fit_threshold.add_argument("--threshold", type=float, required=True)
    fit_threshold.add_argument("--value", type=float, required=True)
    fit_threshold.add_argument("--size", type=float, required=True, help="Default font size")
    fit_threshold.add_argument(
        "--direction",
        type=float,
        default=0,
        help="Negative: only shrink, positive: only grow, 0: unclamped",
    )

    return parser.parse_args(argv)


def _run_estimate(args: argparse.Namespace, measurer: Callable[[str], float]) -> None:
    estimator = text_width_estimator(measurer, args.samples, args.distribution)
    print(f"Average char width: {estimator.average_char_width:.4f}")
    print(f"Estimated width: {estimator(args.text):.2f}")
    print(f"Measured width: {measurer(args.text):.2f}")


def _run_truncate(args: argparse.Namespace, measurer: Callable[[str], float]) -> None:
    measure = text_width_estimator(measurer) if args.estimate else measurer
    text, kept = truncate(measure, args.text, args.width, args.tail)
    print(text)
    print(f"Kept: {kept}/{len(args.text)}")


def run(args: argparse.Namespace) -> int:
    """Run the selected command.

    Args:
        args: Parsed arguments.

    Returns:
        Process exit code.
    """
    if args.command == "fit-box":
        try:
            scaler = font_size_to_box(
                BBox.from_size(*args.ref), args.ratio, by_height=not args.by_width
            )
        except TypographyError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1
        print(f"{scaler(BBox.from_size(*args.box)):.2f}")
        return 0

    if args.command == "fit-threshold":
        try:
            threshold_scaler = font_size_to_threshold(args.threshold, args.direction)
        except TypographyError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1
        print(f"{threshold_scaler(args.size, args.value):.2f}")
        return 0

    config = MeasureConfig(
        backend=args.backend,
        font_name=args.font,
        font_size=args.font_size,
        font_path=args.font_path,
    )
    try:
        measurer = create_measurer(config)
    except TypographyError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    logger.debug("Using %s measurer for %r", config.backend, args.command)
    try:
        if args.command == "estimate":
            _run_estimate(args, measurer)
        else:
            _run_truncate(args, measurer)
    except TypographyError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    finally:
        measurer.close()

    return 0


def main(argv: Sequence[str] | None = None) -> NoReturn:
    """Main entry point."""
    args = parse_args(argv)

    # Configure logging
    log_level = logging.DEBUG if args.verbose else logging.WARNING
    logging.basicConfig(level=log_level, format="%(levelname)s: %(message)s")

    sys.exit(run(args))


if __name__ == "__main__":
    main()
