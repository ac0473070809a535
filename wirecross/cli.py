"""Command-line interface for wirecross."""

from __future__ import annotations

import argparse
import json
import sys
from typing import List, Optional, Set

from wirecross.logging import configure_logging, get_logger
from wirecross.tracer import (
    closest_crossing_distance,
    find_crossings,
    manhattan_distance,
)
from wirecross.types.base import Point

logger = get_logger(__name__)


def _sorted_crossings(crossings: Set[Point]) -> List[Point]:
    """Order crossings nearest-first, ties broken by coordinates."""
    return sorted(crossings, key=lambda p: (manhattan_distance(p), p[0], p[1]))


def _run_closest(path_a: str, path_b: str) -> None:
    distance = closest_crossing_distance(path_a, path_b)
    logger.info("Closest crossing distance: %d", distance)
    print(distance)


def _run_crossings(path_a: str, path_b: str, as_json: bool = False) -> None:
    crossings = _sorted_crossings(find_crossings(path_a, path_b))
    logger.info("Found %d crossing(s)", len(crossings))
    if as_json:
        print(json.dumps([list(p) for p in crossings]))
        return
    for x, y in crossings:
        print(f"{x},{y}")


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``wirecross`` command.

    Args:
        argv: Optional list of command-line arguments. If ``None``, ``sys.argv``
            is used.
    """
    parser = argparse.ArgumentParser(
        prog="wirecross",
        description="Find where two wire paths cross on the grid.",
    )

    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--quiet", action="store_true", help="Only log warnings and errors"
    )

    subparsers = parser.add_subparsers(
        dest="command",
        required=True,
        title="Available commands",
        metavar="{closest,crossings}",
        help="Available commands",
    )

    closest_parser = subparsers.add_parser(
        "closest", help="Print the Manhattan distance of the nearest crossing"
    )
    crossings_parser = subparsers.add_parser(
        "crossings", help="List every crossing, nearest first"
    )
    crossings_parser.add_argument(
        "--json", action="store_true", help="Print crossings as a JSON list"
    )
    for p in (closest_parser, crossings_parser):
        p.add_argument("path_a", help='First path, e.g. "R8,U5,L5,D3"')
        p.add_argument("path_b", help='Second path, e.g. "U7,R6,D4,L4"')

    effective_args = sys.argv[1:] if argv is None else argv

    if not effective_args:
        parser.print_help()
        raise SystemExit(0)

    args = parser.parse_args(effective_args)

    configure_logging(verbose=args.verbose, quiet=args.quiet)
    logger.debug("Debug logging enabled")

    if args.command == "closest":
        _run_closest(args.path_a, args.path_b)
    elif args.command == "crossings":
        _run_crossings(args.path_a, args.path_b, as_json=args.json)


if __name__ == "__main__":
    main()
