"""
Command-Line Interface for the Trampoline Dig Project Calculator.

Usage:
    trampoline-dig
    trampoline-dig --trampoline-height 40 --ring-sides 12
    python -m trampolinedig --air-channel-count 0 --verbose

Every flag is optional and falls back to the default project. Any value that
does not parse aborts the run with exit code 2 and nothing on stdout.
"""
from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import fields
from typing import Callable, List, Optional

from trampolinedig import __version__, config
from trampolinedig.errors import InvalidInputError
from trampolinedig.logging_config import setup_logging
from trampolinedig.model.calculator import calculate
from trampolinedig.model.parameters import DigParameters, parse_count, parse_real
from trampolinedig.report import format_report

logger = logging.getLogger(__name__)


def _argument_type(parse: Callable[[str, str], object], name: str) -> Callable[[str], object]:
    """Wraps a parser so argparse reports InvalidInputError as a usage error."""
    def convert(raw: str) -> object:
        try:
            return parse(raw, name)
        except InvalidInputError as e:
            raise argparse.ArgumentTypeError(str(e)) from e
    return convert


def build_parser() -> argparse.ArgumentParser:
    """Creates the argument parser with one flag per project parameter."""
    parser = argparse.ArgumentParser(
        prog=config.PROGRAM_NAME,
        description=config.PROGRAM_DESCRIPTION,
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    parser.add_argument(
        "--trampoline-height",
        type=_argument_type(parse_real, "trampoline height"),
        default=config.DEFAULT_TRAMPOLINE_HEIGHT,
        help="height of trampoline (default: %(default)g)",
    )
    parser.add_argument(
        # The spaced spelling is kept for scripts written against earlier releases
        "--trampoline-sides", "--trampoline sides",
        dest="trampoline_sides",
        type=_argument_type(parse_count, "trampoline sides"),
        default=config.DEFAULT_TRAMPOLINE_SIDES,
        help="number of sides of regular polygon trampoline shape (default: %(default)s)",
    )
    parser.add_argument(
        "--trampoline-side-length",
        type=_argument_type(parse_real, "trampoline side length"),
        default=config.DEFAULT_TRAMPOLINE_SIDE_LENGTH,
        help="length of each side of regular polygon trampoline shape (default: %(default)g)",
    )
    parser.add_argument(
        "--retaining-wall-thickness",
        type=_argument_type(parse_real, "retaining wall thickness"),
        default=config.DEFAULT_RETAINING_WALL_THICKNESS,
        help="thickness of retaining wall (default: %(default)g)",
    )
    parser.add_argument(
        "--ring-sides",
        type=_argument_type(parse_count, "ring sides"),
        default=config.DEFAULT_RING_SIDES,
        help="number of sides of regular polygon to be built around trampoline (default: %(default)s)",
    )
    parser.add_argument(
        "--apothem-difference",
        type=_argument_type(parse_real, "apothem difference"),
        default=config.DEFAULT_APOTHEM_DIFFERENCE,
        help=(
            "difference between the trampoline apothem plus retaining wall thickness "
            "and apothem of regular polygon to be built around trampoline (default: %(default)g)"
        ),
    )
    parser.add_argument(
        "--air-channel-count",
        type=_argument_type(parse_count, "air channel count"),
        default=config.DEFAULT_AIR_CHANNEL_COUNT,
        help="number of air channels to include (default: %(default)s)",
    )
    parser.add_argument(
        "--air-channel-width",
        type=_argument_type(parse_real, "air channel width"),
        default=config.DEFAULT_AIR_CHANNEL_WIDTH,
        help="width of each air channel (default: %(default)g)",
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="log intermediate dimensions to stderr",
    )
    parser.add_argument(
        "--log-file",
        default=None,
        help="also write the log to this file",
    )
    return parser


def parameters_from_args(args: argparse.Namespace) -> DigParameters:
    return DigParameters(**{f.name: getattr(args, f.name) for f in fields(DigParameters)})


def main(argv: Optional[List[str]] = None) -> int:
    """
    Parses the command line, runs the calculator and prints the report.

    Returns:
        Process exit code. Parse failures exit through argparse with code 2.
    """
    args = build_parser().parse_args(argv)

    setup_logging(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        log_file=args.log_file,
        stream=sys.stderr,
    )

    parameters = parameters_from_args(args)
    logger.debug(f"Parameters: {parameters.to_dict()}")

    results = calculate(parameters)
    print(format_report(results))
    return 0


if __name__ == "__main__":
    sys.exit(main())
