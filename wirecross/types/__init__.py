"""Shared type aliases and enums."""

from wirecross.types.base import ORIGIN, Direction, Move, Point

__all__ = ["ORIGIN", "Direction", "Move", "Point"]
