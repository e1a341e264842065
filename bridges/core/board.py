"""
Core data structure for Bridges puzzles.
"""

from typing import List, Optional, Dict, Tuple, Iterable, Union

from .direction import Direction
from .island import Island
from .bridge import Bridge
from .exceptions import PlacementError


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


class Board:
    """
    A fixed size board holding islands and the bridges between them.

    The board guarantees that
    1. every bridge connects two islands on the board which are neighbors,
    2. at most one bridge exists per pair of islands (a double bridge
       replaces the single one).

    Crossing bridges are not rejected by add_bridge(); use can_add() to check
    whether a bridge may be placed by a player or a solver.
    """

    def __init__(self, width: int, height: int,
                 islands: Optional[Iterable[Island]] = None,
                 bridges: Optional[Iterable[Bridge]] = None):
        """
        Initialize a board.

        Args:
            width: Width of the board grid
            height: Height of the board grid
            islands: Islands to place on the board
            bridges: Bridges to add after the islands have been placed

        Raises:
            PlacementError: If the dimensions, islands or bridges are invalid.
        """
        if width < 1 or height < 1:
            raise PlacementError(f"Board width and height must be >= 1, got {width} x {height}")

        self._width = width
        self._height = height
        self._islands: List[Island] = []
        self._bridges: List[Bridge] = []
        self._island_map: Dict[Tuple[int, int], Island] = {}

        for island in islands or []:
            self.add_island(island)
        for bridge in bridges or []:
            self.add_bridge(bridge)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def copy(self) -> 'Board':
        """
        Create an independent copy of the board.

        Islands and bridges are immutable and therefore shared.
        """
        new_board = Board(self._width, self._height)
        new_board._islands = list(self._islands)
        new_board._bridges = list(self._bridges)
        new_board._island_map = dict(self._island_map)
        return new_board

    # Islands

    def add_island(self, island: Island):
        """
        Place an island on the board.

        Raises:
            PlacementError: If the island lies outside the board or collides
                with an island already on the board.
        """
        if island.x >= self._width or island.y >= self._height:
            raise PlacementError(f"Cannot place {island}. Board is {self._width} x {self._height}.")

        for other in self._islands:
            if other.collides_with(island):
                raise PlacementError(f"{island} collides with already present {other}")

        self._islands.append(island)
        self._island_map[island.position] = island

    def get_islands(self) -> List[Island]:
        """Return the islands in placement order (a copy, safe to modify)"""
        return list(self._islands)

    def get_island_count(self) -> int:
        return len(self._islands)

    def has_island(self, island: Island) -> bool:
        return self._island_map.get(island.position) == island

    def get_island_at(self, x: int, y: int) -> Optional[Island]:
        """Return the island at the given position or None"""
        return self._island_map.get((x, y))

    def neighbor(self, island: Island, direction: Direction) -> Optional[Island]:
        """
        Return the nearest island in the given direction or None.

        The result does not depend on the bridges on the board.

        Raises:
            PlacementError: If the island is not on this board.
        """
        if not self.has_island(island):
            raise PlacementError(f"{island} not present on board")

        nearest = None
        nearest_distance = None
        for other in self._islands:
            dx = other.x - island.x
            dy = other.y - island.y
            if _sign(dx) != direction.dx or _sign(dy) != direction.dy:
                continue
            distance = abs(dx) + abs(dy)
            if nearest is None or distance < nearest_distance:
                nearest = other
                nearest_distance = distance
        return nearest

    def neighbors(self, island: Island) -> List[Island]:
        """Return the neighbors of an island, at most one per direction"""
        if island is None:
            raise PlacementError("Island required, got None")

        result = []
        for direction in Direction:
            other = self.neighbor(island, direction)
            if other is not None:
                result.append(other)
        return result

    def valid_neighbors(self, island: Island) -> List[Island]:
        """Return the neighbors which can be reached without crossing a bridge"""
        return [other for other in self.neighbors(island)
                if not Bridge(island, other).crosses_any(self._bridges)]

    # Bridges

    def bridges(self, island: Optional[Island] = None) -> List[Bridge]:
        """
        Return the bridges on the board.

        Args:
            island: If given, only bridges connecting this island are returned
        """
        if island is None:
            return list(self._bridges)
        return [bridge for bridge in self._bridges if bridge.has_island(island)]

    def bridge_count(self, island: Island) -> int:
        """Number of bridges at an island, double bridges counting as two"""
        return Bridge.count(self.bridges(island))

    def search_bridge(self, island: Island,
                      other: Union[Island, Direction]) -> Optional[Bridge]:
        """
        Return the bridge between two islands, or from an island in a
        direction, or None.

        The order of the islands does not matter. Islands which are not on
        the board simply yield None.
        """
        if isinstance(other, Direction):
            neighbor = self.neighbor(island, other)
            if neighbor is None:
                return None
            other = neighbor

        for bridge in self._bridges:
            if bridge.has_island(island) and bridge.has_island(other):
                return bridge
        return None

    def create_bridge(self, island: Island, direction: Direction) -> Optional[Bridge]:
        """
        Build (without adding) the next bridge from an island in a direction.

        Returns a single bridge if there is none yet, a double bridge if a
        single one exists, and None if a double bridge already exists or
        there is no neighbor. Conflicts with other bridges are not checked.
        """
        neighbor = self.neighbor(island, direction)
        if neighbor is None:
            return None

        existing = self.search_bridge(island, neighbor)
        if existing is None:
            return Bridge(island, neighbor, False)
        if not existing.is_double:
            return Bridge(island, neighbor, True)
        return None

    def can_add(self, bridge: Optional[Bridge]) -> bool:
        """Check whether a bridge can legally be placed on the board"""
        if bridge is None:
            return False

        if not (self.has_island(bridge.island1) and self.has_island(bridge.island2)):
            return False

        for other in self._bridges:
            if other.crosses(bridge) or other == bridge:
                return False

        # A single bridge is pointless if the double one is present
        if not bridge.is_double and bridge.is_covered(self._bridges):
            return False

        return True

    def add_bridge(self, bridge: Bridge):
        """
        Add a bridge, or upgrade an existing single bridge to a double one.

        Crossing bridges are not rejected here.

        Raises:
            PlacementError: If the islands are not neighbors or the bridge
                cannot replace the existing one.
        """
        first, second = bridge.islands
        if second not in self.neighbors(first):
            raise PlacementError(f"Cannot add {bridge}. Contained islands aren't neighbors.")

        existing = self.search_bridge(first, second)
        if existing is None:
            self._bridges.append(bridge)
        elif not existing.is_double and bridge.is_double:
            self._bridges.remove(existing)
            self._bridges.append(bridge)
        else:
            raise PlacementError(f"Cannot replace {existing} with {bridge}")

    def remove_one_bridge(self, bridge: Bridge) -> Optional[Bridge]:
        """
        Remove one bridge from the board.

        A double bridge is replaced by a single one.

        Returns:
            The single bridge replacing a removed double bridge, else None

        Raises:
            PlacementError: If the bridge is not on the board.
        """
        if bridge not in self._bridges:
            raise PlacementError(f"Board doesn't contain {bridge}")

        self._bridges.remove(bridge)
        if bridge.is_double:
            replacement = bridge.as_single()
            self._bridges.append(replacement)
            return replacement
        return None

    def reset(self):
        """Remove all bridges, keeping the islands"""
        self._bridges.clear()

    # State queries

    def get_incomplete(self) -> List[Island]:
        """Return the islands with fewer bridges than required"""
        return [island for island in self._islands
                if self.bridge_count(island) < island.required_bridges]

    def get_overfull(self) -> List[Island]:
        """Return the islands with more bridges than required"""
        return [island for island in self._islands
                if self.bridge_count(island) > island.required_bridges]

    def is_complete(self) -> bool:
        """Check if every island has exactly its required bridges and all are connected"""
        for island in self._islands:
            if self.bridge_count(island) != island.required_bridges:
                return False
        return self.is_fully_connected()

    def is_fully_connected(self) -> bool:
        """Check if every island can be reached from every other one"""
        return len(self.partition()) == 1

    def partition(self) -> List[List[Island]]:
        """
        Split the islands into groups connected by bridges.

        A board without bridges has one group per island, a fully connected
        board has exactly one group.
        """
        adjacency: Dict[Island, List[Island]] = {island: [] for island in self._islands}
        for bridge in self._bridges:
            adjacency[bridge.island1].append(bridge.island2)
            adjacency[bridge.island2].append(bridge.island1)

        visited = set()
        groups = []
        for start in self._islands:
            if start in visited:
                continue

            # Depth first walk along the bridges
            group = []
            stack = [start]
            while stack:
                current = stack.pop()
                if current in visited:
                    continue
                visited.add(current)
                group.append(current)
                stack.extend(other for other in reversed(adjacency[current])
                             if other not in visited)
            groups.append(group)

        return groups

    def render(self, spaced: bool = False, show_bridges: bool = True) -> str:
        """
        Draw the board as text.

        Args:
            spaced: Put islands on every other row and column, so bridges
                between adjacent cells stay visible
            show_bridges: Whether to draw the bridges

        Returns:
            One line per grid row
        """
        step = 2 if spaced else 1
        blank = ' ' if spaced else '.'
        grid = [[blank for _ in range((self._width - 1) * step + 1)]
                for _ in range((self._height - 1) * step + 1)]

        if show_bridges:
            for bridge in self._bridges:
                a, b = bridge.islands
                if bridge.is_horizontal:
                    for col in range(min(a.x, b.x) * step + 1, max(a.x, b.x) * step):
                        grid[a.y * step][col] = '=' if bridge.is_double else '-'
                else:
                    for row in range(min(a.y, b.y) * step + 1, max(a.y, b.y) * step):
                        grid[row][a.x * step] = '"' if bridge.is_double else '|'

        for island in self._islands:
            grid[island.y * step][island.x * step] = str(island.required_bridges)

        return '\n'.join(''.join(row).rstrip() for row in grid)

    def __str__(self):
        """Grid rendering of the board (useful for debugging)"""
        return self.render()

    def __repr__(self):
        return (f"Board({self._width}x{self._height}, {len(self._islands)} islands, "
                f"{len(self._bridges)} bridges)")
