"""
Island value type.
"""

from dataclasses import dataclass
from typing import Iterable, TYPE_CHECKING

from .. import config
from .exceptions import PlacementError

if TYPE_CHECKING:
    from .bridge import Bridge


@dataclass(frozen=True, order=True)
class Island:
    """
    Represents an island in the puzzle.

    Islands are immutable. Equality and ordering compare
    (x, y, required_bridges) lexicographically.
    """
    x: int
    y: int
    required_bridges: int

    def __post_init__(self):
        if self.x < 0 or self.y < 0:
            raise PlacementError(f"Island coordinates must be >= 0, got ({self.x}, {self.y})")
        if not (config.MIN_REQUIRED_BRIDGES <= self.required_bridges <= config.MAX_REQUIRED_BRIDGES):
            raise PlacementError(
                f"Island bridge count must be between {config.MIN_REQUIRED_BRIDGES} and "
                f"{config.MAX_REQUIRED_BRIDGES}, got {self.required_bridges}"
            )

    @property
    def position(self):
        return self.x, self.y

    def collides_with(self, other: 'Island') -> bool:
        """
        Check if this island is too close to another one.

        Two islands collide if they share a coordinate and lie at most one
        cell apart on the other axis (so they overlap or touch).
        """
        dx = other.x - self.x
        dy = other.y - self.y
        return (dx == 0 and abs(dy) <= 1) or (dy == 0 and abs(dx) <= 1)

    def is_cut_by(self, bridges: Iterable['Bridge']) -> bool:
        """Check if any of the given bridges runs across this island"""
        return any(bridge.cuts(self) for bridge in bridges)

    def with_required(self, required_bridges: int) -> 'Island':
        """Return a copy of this island with another bridge requirement"""
        return Island(self.x, self.y, required_bridges)

    def translated(self, dx: int, dy: int) -> 'Island':
        """Return a copy of this island moved by (dx, dy)"""
        return Island(self.x + dx, self.y + dy, self.required_bridges)

    def __repr__(self):
        return f"Island({self.x}, {self.y}, bridges={self.required_bridges})"
