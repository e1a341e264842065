"""
Bridge value type.
"""

from functools import total_ordering
from typing import Iterable

from .island import Island
from .exceptions import PlacementError


def _between(start: int, mid: int, end: int) -> bool:
    """Check if mid lies strictly between start and end (in either order)"""
    return start < mid < end or start > mid > end


@total_ordering
class Bridge:
    """
    Represents a single or double bridge between two islands.

    Bridges are immutable. The order of the two islands does not matter for
    equality, hashing and ordering: Bridge(a, b) == Bridge(b, a).
    """

    __slots__ = ('_island1', '_island2', '_is_double')

    def __init__(self, island1: Island, island2: Island, is_double: bool = False):
        """
        Create a bridge.

        Args:
            island1: First island of the bridge
            island2: Second island of the bridge
            is_double: Whether this is a double bridge

        Raises:
            PlacementError: If an island is missing or the islands are not
                aligned on exactly one axis.
        """
        if island1 is None or island2 is None:
            raise PlacementError("Bridge needs two islands, got None")
        if island1.x != island2.x and island1.y != island2.y:
            raise PlacementError(f"Islands must match in x or y coordinate: {island1}, {island2}")
        if island1.x == island2.x and island1.y == island2.y:
            raise PlacementError(f"Cannot build a bridge on a single position: {island1}, {island2}")

        object.__setattr__(self, '_island1', island1)
        object.__setattr__(self, '_island2', island2)
        object.__setattr__(self, '_is_double', bool(is_double))

    def __setattr__(self, name, value):
        raise AttributeError("Bridge is immutable")

    @property
    def island1(self) -> Island:
        return self._island1

    @property
    def island2(self) -> Island:
        return self._island2

    @property
    def is_double(self) -> bool:
        return self._is_double

    @property
    def islands(self):
        return self._island1, self._island2

    @property
    def multiplicity(self) -> int:
        """Number of bridges this counts as (1 or 2)"""
        return 2 if self._is_double else 1

    @property
    def is_horizontal(self) -> bool:
        return self._island1.y == self._island2.y

    def has_island(self, island: Island) -> bool:
        """Check if the given island is one of the ends of this bridge"""
        return self._island1 == island or self._island2 == island

    def other_island(self, island: Island) -> Island:
        """Return the island at the other end of this bridge"""
        if self._island1 == island:
            return self._island2
        if self._island2 == island:
            return self._island1
        raise PlacementError(f"{island} is not connected by {self}")

    def as_single(self) -> 'Bridge':
        return Bridge(self._island1, self._island2, False)

    def as_double(self) -> 'Bridge':
        return Bridge(self._island1, self._island2, True)

    def crosses(self, other: 'Bridge') -> bool:
        """
        Check if the other bridge crosses this one.

        Only perpendicular bridges whose interiors intersect cross each
        other; touching at an end point is not a crossing.
        """
        x1, y1 = self._island1.x, self._island1.y
        x2, y2 = self._island2.x, self._island2.y
        x3, y3 = other.island1.x, other.island1.y
        x4, y4 = other.island2.x, other.island2.y

        return ((_between(x1, x3, x2) and _between(y3, y1, y4)) or
                (_between(x3, x1, x4) and _between(y1, y3, y2)))

    def crosses_any(self, others: Iterable['Bridge']) -> bool:
        """Check if any of the given bridges crosses this one"""
        return any(self.crosses(other) for other in others)

    def cuts(self, island: Island) -> bool:
        """Check if this bridge runs across the position of the given island"""
        if self._island1.x == self._island2.x:
            return (island.x == self._island1.x and
                    _between(self._island1.y, island.y, self._island2.y))
        return (island.y == self._island1.y and
                _between(self._island1.x, island.x, self._island2.x))

    def is_covered(self, bridges: Iterable['Bridge']) -> bool:
        """
        Check if a bridge between the same islands (single or double)
        is among the given bridges.
        """
        bridges = list(bridges)
        return self in bridges or Bridge(self._island1, self._island2, not self._is_double) in bridges

    @staticmethod
    def count(bridges: Iterable['Bridge']) -> int:
        """Total number of bridges, double bridges counting as two"""
        return sum(bridge.multiplicity for bridge in bridges)

    def _key_islands(self):
        return frozenset((self._island1, self._island2))

    def __eq__(self, other):
        if not isinstance(other, Bridge):
            return NotImplemented
        return (self._is_double == other.is_double and
                self._key_islands() == other._key_islands())

    def __lt__(self, other):
        if not isinstance(other, Bridge):
            return NotImplemented
        for island in sorted({self._island1, self._island2, other.island1, other.island2}):
            mine = self.has_island(island)
            theirs = other.has_island(island)
            if mine and not theirs:
                return True
            if theirs and not mine:
                return False
        return self._is_double < other.is_double

    def __hash__(self):
        return hash((self._key_islands(), self._is_double))

    def __repr__(self):
        kind = "double" if self._is_double else "single"
        return f"Bridge({self._island1!r}<->{self._island2!r}, {kind})"
