"""
Merge two Bridges boards side by side.
"""

import logging
from typing import Optional

from ..core.board import Board
from ..core.bridge import Bridge
from ..core.island import Island


class BoardMerger:
    """
    Place two boards next to each other so they can be joined by one bridge.

    The top right island of the left board and the top left island of the
    right board (the gates) end up on the same row with a free column
    between the boards. Each gate needs one more bridge afterwards; the
    bridge between the gates is left to the caller.
    """

    def __init__(self):
        self.logger = logging.getLogger(f"bridges.{self.__class__.__name__}")

    def merge(self, left: Board, right: Board, add_bridges: bool = False) -> Board:
        """
        Merge the given boards.

        If one of the boards has no islands, a copy of the other is returned.

        Args:
            left: Board placed on the left
            right: Board placed on the right
            add_bridges: Whether to keep the bridges of both boards

        Returns:
            The merged board
        """
        left_gate = self.find_top_right(left)
        right_gate = self.find_top_left(right)

        if left_gate is None:
            return right.copy()
        if right_gate is None:
            return left.copy()

        left_dx = 0
        right_dx = left.width + 1

        # Move the board with the lower gate up
        if left_gate.y < right_gate.y:
            left_dy = 0
            right_dy = left_gate.y - right_gate.y
            dy = right_dy
        else:
            left_dy = right_gate.y - left_gate.y
            right_dy = 0
            dy = left_dy

        width = left.width + right.width + 1
        height = max(left.height, right.height) + abs(dy)
        self.logger.debug(f"Merging {left!r} and {right!r} into {width}x{height}, "
                          f"gates {left_gate} and {right_gate}")

        board = Board(width, height)
        for island in left.get_islands():
            board.add_island(self._translate_island(island, left_dx, left_dy, left_gate))
        for island in right.get_islands():
            board.add_island(self._translate_island(island, right_dx, right_dy, right_gate))

        if not add_bridges:
            return board

        for bridge in left.bridges():
            board.add_bridge(self._translate_bridge(bridge, left_dx, left_dy, left_gate))
        for bridge in right.bridges():
            board.add_bridge(self._translate_bridge(bridge, right_dx, right_dy, right_gate))

        return board

    @staticmethod
    def find_top_right(board: Board) -> Optional[Island]:
        """Return the island with minimal y, then maximal x, or None"""
        islands = board.get_islands()
        if not islands:
            return None
        return min(islands, key=lambda island: (island.y, -island.x))

    @staticmethod
    def find_top_left(board: Board) -> Optional[Island]:
        """Return the island with minimal y, then minimal x, or None"""
        islands = board.get_islands()
        if not islands:
            return None
        return min(islands, key=lambda island: (island.y, island.x))

    @staticmethod
    def _translate_island(island: Island, dx: int, dy: int, gate: Island) -> Island:
        moved = island.translated(dx, dy)
        if island == gate:
            moved = moved.with_required(moved.required_bridges + 1)
        return moved

    @classmethod
    def _translate_bridge(cls, bridge: Bridge, dx: int, dy: int, gate: Island) -> Bridge:
        return Bridge(
            cls._translate_island(bridge.island1, dx, dy, gate),
            cls._translate_island(bridge.island2, dx, dy, gate),
            bridge.is_double
        )


def merge(left: Board, right: Board, add_bridges: bool = False) -> Board:
    """Merge two boards with a default BoardMerger."""
    return BoardMerger().merge(left, right, add_bridges)
