"""
Solving strategies for Bridges boards.

Each strategy inspects a board and proposes one bridge that can be added,
or None if it cannot infer anything.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from ..core.board import Board
from ..core.bridge import Bridge
from ..core.island import Island
from ..core.exceptions import PlacementError


class Strategy(ABC):
    """Abstract base class for solving strategies"""

    name: str = ""

    @abstractmethod
    def next_bridge(self, board: Board) -> Optional[Bridge]:
        """Return a bridge which can be added to the board, or None."""
        pass

    def __repr__(self):
        return f"{self.__class__.__name__}()"


class RequiredStrategy(Strategy):
    """
    Deduce bridges from the required count of an island.

    For every incomplete island the valid neighbors (reachable without
    crossing a bridge) are split into neighbors that can still take two
    bridges from it and neighbors that can take one. With
    available = 2 * doubles + singles:

    - required == available: every neighbor must get its maximum, so any
      missing bridge is forced.
    - required == available - 1: if no single neighbor is left after
      dropping the ones already connected, each double neighbor needs at
      least one bridge.

    The second rule is a heuristic and does not find every forced bridge.
    It also covers cases the 2n / 2n-1 rules miss, e.g. a 4 with
    neighbors 2, 1 and 1.
    """

    name = "required"

    def next_bridge(self, board: Board) -> Optional[Bridge]:
        for island in board.get_islands():
            required = island.required_bridges
            existing = board.bridges(island)

            # The island may even have too many bridges after a player mistake
            if required <= Bridge.count(existing):
                continue

            single_neighbors, double_neighbors = self._split_neighbors(board, island)
            available = 2 * len(double_neighbors) + len(single_neighbors)

            if required == available:
                for neighbor in double_neighbors:
                    bridge = Bridge(island, neighbor, True)
                    if bridge not in existing:
                        return bridge
                for neighbor in single_neighbors:
                    bridge = Bridge(island, neighbor, False)
                    if not bridge.is_covered(existing):
                        return bridge

            elif required == available - 1:
                connected = set()
                for bridge in existing:
                    connected.update(bridge.islands)

                if all(neighbor in connected for neighbor in single_neighbors):
                    for neighbor in double_neighbors:
                        bridge = Bridge(island, neighbor, False)
                        if not bridge.is_covered(existing):
                            return bridge

        return None

    @staticmethod
    def _split_neighbors(board: Board, island: Island):
        """Split valid neighbors by how many more bridges they can take from island"""
        single_neighbors: List[Island] = []
        double_neighbors: List[Island] = []

        for neighbor in board.valid_neighbors(island):
            # Ignore the bridge to island itself, it counts as available
            others = [b for b in board.bridges(neighbor) if not b.has_island(island)]
            remaining = neighbor.required_bridges - Bridge.count(others)

            if remaining >= 2:
                double_neighbors.append(neighbor)
            elif remaining == 1:
                single_neighbors.append(neighbor)

        return single_neighbors, double_neighbors


class IsolatedStrategy(Strategy):
    """
    Deduce bridges from the rule that all islands must be connected.

    An island needing at most two bridges, with exactly two neighbors of
    which one has the same requirement, would form a closed pair with that
    neighbor. So it must get a bridge to the other neighbor.
    """

    name = "isolated"

    def next_bridge(self, board: Board) -> Optional[Bridge]:
        for island in board.get_islands():
            required = island.required_bridges
            if required > 2:
                continue

            existing = board.bridges(island)
            if required <= Bridge.count(existing):
                continue

            neighbors = board.neighbors(island)
            if len(neighbors) != 2:
                continue

            isolated_index = next(
                (i for i, neighbor in enumerate(neighbors) if neighbor.required_bridges == required),
                None
            )
            if isolated_index is None:
                continue

            other = neighbors[(isolated_index + 1) % 2]
            bridge = Bridge(island, other, False)
            if not bridge.is_covered(existing):
                return bridge

        return None


class BruteforceStrategy(Strategy):
    """
    Try all combinations of bridges until a solution is found.

    Works on a copy of the board and returns one bridge of the found
    solution which is not on the original board.
    """

    name = "bruteforce"

    def next_bridge(self, board: Board) -> Optional[Bridge]:
        solution = board.copy()
        if not self.search(solution):
            return None

        existing = board.bridges()
        for bridge in solution.bridges():
            if bridge not in existing:
                return bridge
        return None

    def search(self, board: Board) -> bool:
        """
        Run a depth first search in place on the board.

        Returns:
            True if a solution was found and is left on the board, False
            otherwise (the board is then back in its original state).
        """
        incomplete = board.get_incomplete()
        if not incomplete:
            return board.is_complete()

        # Try every possible bridge for the first incomplete island
        island = incomplete[0]
        existing = board.bridges(island)

        for neighbor in board.valid_neighbors(island):
            # A saturated neighbor cannot take another bridge in any solution
            if board.bridge_count(neighbor) >= neighbor.required_bridges:
                continue

            if Bridge(island, neighbor, True) in existing:
                continue
            elif Bridge(island, neighbor, False) in existing:
                bridge = Bridge(island, neighbor, True)
            else:
                bridge = Bridge(island, neighbor, False)

            try:
                board.add_bridge(bridge)
            except PlacementError:
                continue

            if self.search(board):
                return True
            board.remove_one_bridge(bridge)

        return False


STRATEGY_REGISTRY = {
    RequiredStrategy.name: RequiredStrategy,
    IsolatedStrategy.name: IsolatedStrategy,
    BruteforceStrategy.name: BruteforceStrategy,
}


def get_strategy(name: str) -> Strategy:
    """
    Get a strategy by name.

    Raises:
        ValueError: If the strategy name is not recognized
    """
    strategy_class = STRATEGY_REGISTRY.get(name.lower())
    if not strategy_class:
        raise ValueError(f"Unknown strategy: {name}. Available: {list(STRATEGY_REGISTRY.keys())}")
    return strategy_class()
