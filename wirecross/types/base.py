"""Base types shared by the parser and the tracer."""

from __future__ import annotations

from enum import Enum
from typing import Tuple

#: Integer coordinate pair (x, y) on the grid.
Point = Tuple[int, int]

#: Signed displacement (dx, dy) produced by a single instruction token.
Move = Tuple[int, int]

#: Shared starting point of every path.
ORIGIN: Point = (0, 0)


class Direction(Enum):
    """Instruction letters and the unit vector each one moves along."""

    L = (-1, 0)
    R = (1, 0)
    U = (0, 1)
    D = (0, -1)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]

    def scale(self, length: int) -> Move:
        """Return the displacement of ``length`` unit steps in this direction."""
        return (self.dx * length, self.dy * length)

    @classmethod
    def from_string(cls, value: str) -> "Direction":
        """Parse an instruction letter into a Direction.

        Args:
            value: One of "L", "R", "U", "D" (case-sensitive).

        Returns:
            The corresponding Direction member.

        Raises:
            ValueError: If the letter doesn't match any member.
        """
        try:
            return cls[value]
        except KeyError:
            valid = ", ".join(d.name for d in cls)
            raise ValueError(
                f"Invalid direction '{value}'. Valid values are: {valid}"
            ) from None
