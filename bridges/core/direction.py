"""
Compass directions on the board grid.

The y axis grows to the south, so NORTH has a negative dy.
"""

from enum import Enum
from typing import Optional


class Direction(Enum):
    """The four directions a bridge can be built in"""
    EAST = (1, 0)
    SOUTH = (0, 1)
    WEST = (-1, 0)
    NORTH = (0, -1)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]

    @property
    def opposite(self) -> 'Direction':
        return Direction((-self.dx, -self.dy))

    @classmethod
    def nearest(cls, dx: int, dy: int) -> Optional['Direction']:
        """
        Return the direction which best matches the delta (dx, dy).

        E.g. (2, -3) lies more to the north, so NORTH is returned.
        Returns None if both axes are equally strong (diagonals and (0, 0)).
        """
        if abs(dx) > abs(dy):
            return cls.EAST if dx > 0 else cls.WEST
        if abs(dy) > abs(dx):
            return cls.SOUTH if dy > 0 else cls.NORTH
        return None

    def __repr__(self):
        return f"Direction.{self.name}"
