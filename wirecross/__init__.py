"""wirecross: crossing search for grid wire paths.

Two wires leave the origin following move lists such as ``"R8,U5,L5,D3"``.
wirecross expands each list into the grid points it visits, intersects them,
and reports the crossing closest to the origin by Manhattan distance.

Primary API:
    parse_move() / parse_path() - Turn instruction tokens into displacements
    trace_path() - Every grid point a path visits
    find_crossings() - Points shared by two paths, origin excluded
    closest_crossing_distance() - Manhattan distance of the nearest crossing

Example:
    from wirecross import closest_crossing_distance

    closest_crossing_distance("R8,U5,L5,D3", "U7,R6,D4,L4")  # 6
"""

from __future__ import annotations

from wirecross import cli, logging
from wirecross.config import TRACER_CONFIG, TracerConfig
from wirecross.parse import parse_move, parse_path
from wirecross.tracer import (
    closest_crossing_distance,
    find_crossings,
    inclusive_range,
    manhattan_distance,
    trace_path,
)
from wirecross.types.base import ORIGIN, Direction, Move, Point

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Types
    "Direction",
    "Move",
    "Point",
    "ORIGIN",
    # Parsing
    "parse_move",
    "parse_path",
    # Tracing
    "inclusive_range",
    "trace_path",
    "find_crossings",
    "closest_crossing_distance",
    "manhattan_distance",
    # Configuration
    "TracerConfig",
    "TRACER_CONFIG",
    # Utilities
    "cli",
    "logging",
]
