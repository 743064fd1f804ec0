"""
Command-line demo for the polyline library.

Prints polyline listings and their lengths:
- square:  a 4-point square outline, then the same line with (3, 3) appended
- h-shape: the 5-point "H" polyline
- random:  a line of random points drawn from [low, high)
"""
import argparse
import logging
import sys
from typing import List, Optional, TextIO

from polyline.core.geometry import make_rng
from polyline.core.models import GeometryOptions, Line, Point
from polyline.core.reports import format_length, render_line, render_summary
from polyline.utils.log import get_logger, setup_logging

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="polyline-demo",
        description="Print example polylines and their lengths",
    )
    parser.add_argument(
        "demo",
        nargs="?",
        default="square",
        choices=["square", "h-shape", "random"],
        help="Which demo to run (default: square)",
    )
    parser.add_argument("--width", type=float, default=6, help="H-shape width")
    parser.add_argument("--height", type=float, default=10, help="H-shape height")
    parser.add_argument("--low", type=float, default=0.0, help="Random range bound")
    parser.add_argument("--high", type=float, default=10.0, help="Random range bound")
    parser.add_argument("--count", type=int, default=5, help="Number of random points")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("--epsilon", type=float, default=None, help="Comparison tolerance")
    parser.add_argument("--precision", type=int, default=None, help="Decimal places in output")
    parser.add_argument("--scalar", choices=["integer", "real", "complex"], default=None,
                        help="Coordinate type for the demo lines")
    parser.add_argument("--config", type=str, default=None, help="JSON options file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def load_options(args: argparse.Namespace) -> GeometryOptions:
    """Options from ``--config`` with command-line overrides applied."""
    options = GeometryOptions.from_json_file(args.config) if args.config else GeometryOptions()

    data = options.to_dict()
    if args.seed is not None:
        data["seed"] = args.seed
    if args.epsilon is not None:
        data["epsilon"] = args.epsilon
    if args.precision is not None:
        data["precision"] = args.precision
    if args.scalar is not None:
        data["default_scalar"] = args.scalar
    return GeometryOptions.from_dict(data)


def _number(value: float, scalar: type):
    """Command-line numbers arrive as floats; integer lines need whole values."""
    if scalar is int:
        if not float(value).is_integer():
            raise ValueError(f"{value:g} is not a whole number")
        return int(value)
    return scalar(value)


def run_square(options: GeometryOptions, out: TextIO) -> None:
    scalar = options.scalar_type
    line1 = Line([Point(0, 0), Point(0, 5), Point(5, 5), Point(5, 0)], scalar)
    out.write(render_line(line1, options.precision) + "\n")

    p = Point(3, 3)
    line2 = line1 + p
    out.write(f"After adding point {p}:\n")
    out.write(render_line(line2, options.precision) + "\n")

    out.write(f"Length of line1: {format_length(line1.length(), options.precision)}\n")
    out.write(f"Length of line2: {format_length(line2.length(), options.precision)}\n")

    matches = options.lines_equal(line2[:-1], line1)
    out.write(f"line2 without {p} equals line1: {matches}\n")


def run_h_shape(width: float, height: float, options: GeometryOptions, out: TextIO) -> None:
    scalar = options.scalar_type
    h = Line.h_shape(_number(width, scalar), _number(height, scalar), scalar)
    out.write(render_summary(
        h,
        title="Line in the shape of H:",
        precision=options.precision,
        length_label="Length of H-shaped line",
    ))


def run_random(low: float, high: float, count: int, options: GeometryOptions, out: TextIO) -> None:
    scalar = options.scalar_type
    line = Line.random(low, high, count, scalar=scalar, rng=make_rng(options.seed))
    out.write(render_summary(
        line,
        title=f"Random line in [{min(low, high):g}, {max(low, high):g}):",
        precision=options.precision,
        length_label="Length of random line",
    ))


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point; returns the process exit code."""
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(logging.DEBUG if args.verbose else logging.WARNING)

    try:
        options = load_options(args)
    except (OSError, ValueError) as e:
        logger.error("Failed to load options: %s", e)
        return 2

    logger.debug("Running %s demo with %s", args.demo, options.to_dict())

    out = sys.stdout
    if args.demo == "square":
        run_square(options, out)
    elif args.demo == "h-shape":
        try:
            run_h_shape(args.width, args.height, options, out)
        except ValueError as e:
            parser.error(f"h-shape size: {e}")
    else:
        run_random(args.low, args.high, args.count, options, out)
    return 0


if __name__ == "__main__":
    sys.exit(main())
