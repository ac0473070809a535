"""Parsing of move instructions.

A path is a separator-delimited list of tokens such as ``"R75,D30,U83"``.
Each token is one direction letter followed by a step count. Tokens that do
not fit this shape are skipped rather than reported as errors.
"""

from __future__ import annotations

import re
from typing import List, Optional

from wirecross.config import TRACER_CONFIG, TracerConfig
from wirecross.logging import get_logger
from wirecross.types.base import Direction, Move

__all__ = [
    "parse_move",
    "parse_path",
]

logger = get_logger(__name__)

_MOVE_REGEX = re.compile(r"([LRUD])(\d+)")


def parse_move(token: Optional[str]) -> Optional[Move]:
    """Convert one instruction token into a displacement vector.

    Args:
        token: Instruction such as ``"R5"`` or ``"D9"``. The first
            letter-and-digits run in the token is used; anything around it is
            ignored.

    Returns:
        ``(dx, dy)`` for a valid token, otherwise ``None``.

    Examples:
        >>> parse_move("L6")
        (-6, 0)
        >>> parse_move("R5x")
        (5, 0)
        >>> parse_move("A1") is None
        True
    """
    if not token:
        return None
    match = _MOVE_REGEX.search(token)
    if match is None:
        return None
    return Direction.from_string(match.group(1)).scale(int(match.group(2)))


def parse_path(path: Optional[str], config: Optional[TracerConfig] = None) -> List[Move]:
    """Parse a path string into its ordered list of moves.

    Empty tokens and tokens rejected by :func:`parse_move` are dropped.

    Args:
        path: Separator-delimited instruction tokens.
        config: Tracer configuration; defaults to ``TRACER_CONFIG``.

    Returns:
        Moves in the order they appear in ``path``.
    """
    if not path:
        return []
    cfg = config or TRACER_CONFIG

    moves: List[Move] = []
    for token in cfg.split(path):
        move = parse_move(token)
        if move is None:
            logger.debug("Skipping invalid move token %r", token)
            continue
        moves.append(move)
    return moves
