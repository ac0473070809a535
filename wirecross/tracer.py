"""Grid tracing of wire paths and crossing search.

A path is walked from the origin one unit step at a time. Every visited grid
point goes into a set, the *trace*. Two traces are intersected to find where
the wires cross; the shared origin is not counted as a crossing.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import reduce
from typing import Iterable, List, Optional, Sequence, Set, Union

from wirecross.config import TRACER_CONFIG, TracerConfig
from wirecross.logging import get_logger
from wirecross.parse import parse_path
from wirecross.types.base import ORIGIN, Move, Point

__all__ = [
    "inclusive_range",
    "trace_path",
    "find_crossings",
    "closest_crossing_distance",
    "manhattan_distance",
]

logger = get_logger(__name__)

PathLike = Union[str, Iterable[Move], None]


def inclusive_range(start: int, count: int) -> List[int]:
    """Return every integer between ``start`` and ``start + count`` inclusive.

    The result is ascending whatever the sign of ``count`` and always holds
    ``abs(count) + 1`` values.

    Examples:
        >>> inclusive_range(2, 3)
        [2, 3, 4, 5]
        >>> inclusive_range(4, -2)
        [2, 3, 4]
    """
    low = min(start, start + count)
    return list(range(low, low + abs(count) + 1))


def manhattan_distance(point: Point) -> int:
    """Return ``|x| + |y|`` for a grid point."""
    x, y = point
    return abs(x) + abs(y)


@dataclass
class _Walk:
    """Accumulator threaded through the moves of a path."""

    x: int = 0
    y: int = 0
    visited: Set[Point] = field(default_factory=lambda: {ORIGIN})

    def step(self, move: Move) -> "_Walk":
        dx, dy = move
        self.visited.update((x, self.y) for x in inclusive_range(self.x, dx))
        self.visited.update((self.x, y) for y in inclusive_range(self.y, dy))
        self.x += dx
        self.y += dy
        return self


def _as_moves(path: PathLike, config: Optional[TracerConfig]) -> Sequence[Move]:
    if path is None or isinstance(path, str):
        return parse_path(path, config)
    return list(path)


def trace_path(path: PathLike, config: Optional[TracerConfig] = None) -> Set[Point]:
    """Return the set of grid points visited by a path.

    Args:
        path: Path string, or an iterable of moves such as the output of
            ``parse_path``.
        config: Tracer configuration used when ``path`` is a string.

    Returns:
        Every point on every segment, both endpoints included, plus the origin.
    """
    moves = _as_moves(path, config)
    walk = reduce(_Walk.step, moves, _Walk())
    logger.debug(
        "Traced %d moves to %d points, ending at (%d, %d)",
        len(moves),
        len(walk.visited),
        walk.x,
        walk.y,
    )
    return walk.visited


def find_crossings(
    path_a: PathLike, path_b: PathLike, config: Optional[TracerConfig] = None
) -> Set[Point]:
    """Return the points visited by both paths, excluding the origin."""
    crossings = trace_path(path_a, config) & trace_path(path_b, config)
    crossings.discard(ORIGIN)
    return crossings


def _closest(points: Iterable[Point], default: int) -> int:
    return min((manhattan_distance(p) for p in points), default=default)


def closest_crossing_distance(
    path_a: PathLike, path_b: PathLike, config: Optional[TracerConfig] = None
) -> int:
    """Return the Manhattan distance of the crossing nearest the origin.

    Args:
        path_a: First path string or move sequence.
        path_b: Second path string or move sequence.
        config: Tracer configuration; defaults to ``TRACER_CONFIG``.

    Returns:
        The smallest ``|x| + |y|`` among crossings, or
        ``config.no_crossing_distance`` (0 by default) when the paths never
        cross.
    """
    cfg = config or TRACER_CONFIG
    crossings = find_crossings(path_a, path_b, cfg)
    if not crossings:
        logger.debug("Paths do not cross")
    return _closest(crossings, cfg.no_crossing_distance)
