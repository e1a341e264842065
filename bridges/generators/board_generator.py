"""
Random board generator for Bridges.
"""

import logging
import random
from pathlib import Path
from typing import List, Optional, Tuple, Union

import yaml

from .. import config
from ..core.board import Board
from ..core.bridge import Bridge
from ..core.direction import Direction
from ..core.island import Island
from ..core.exceptions import GenerationError


class BoardGeneratorConfig:
    """Configuration for board generator"""

    KEYS = ('min_width', 'max_width', 'min_height', 'max_height',
            'min_islands', 'density', 'tries', 'random_seed')

    def __init__(self, **kwargs):
        unknown = set(kwargs) - set(self.KEYS)
        if unknown:
            raise ValueError(f"Unknown generator options: {sorted(unknown)}")

        self.min_width: int = kwargs.get('min_width', config.MIN_WIDTH)
        self.max_width: int = kwargs.get('max_width', config.MAX_WIDTH)
        self.min_height: int = kwargs.get('min_height', config.MIN_HEIGHT)
        self.max_height: int = kwargs.get('max_height', config.MAX_HEIGHT)
        self.min_islands: int = kwargs.get('min_islands', config.MIN_ISLAND_COUNT)
        self.density: float = kwargs.get('density', config.ISLAND_DENSITY)
        self.tries: int = kwargs.get('tries', config.DEFAULT_TRIES)
        self.random_seed: Optional[int] = kwargs.get('random_seed', None)

    @classmethod
    def from_yaml(cls, path: Union[str, Path]) -> 'BoardGeneratorConfig':
        """Load the configuration from a YAML mapping of the same keys"""
        with open(path, 'r') as f:
            data = yaml.safe_load(f) or {}
        if not isinstance(data, dict):
            raise ValueError(f"Generator config in {path} must be a mapping")
        return cls(**data)

    def __repr__(self):
        options = ', '.join(f"{key}={getattr(self, key)!r}" for key in self.KEYS)
        return f"BoardGeneratorConfig({options})"


class BoardGenerator:
    """
    Generate solvable boards by growing a random bridge network.

    Starting from a single island, islands are added one at a time next to
    a random existing island and connected to it by a random single or
    double bridge, never crossing or cutting existing bridges. The island
    requirements are then read off the finished network, so every
    generated board has at least one solution.
    """

    def __init__(self, config: Optional[BoardGeneratorConfig] = None,
                 rng: Optional[random.Random] = None):
        self.config = config or BoardGeneratorConfig()
        self.logger = logging.getLogger(f"bridges.{self.__class__.__name__}")
        self.random = rng or random.Random(self.config.random_seed)

    def max_island_count(self, width: int, height: int) -> int:
        """Maximal island count allowed for a board of the given size"""
        return int(self.config.density * width * height)

    def random_width(self) -> int:
        return self.random.randrange(self.config.min_width, self.config.max_width)

    def random_height(self) -> int:
        return self.random.randrange(self.config.min_height, self.config.max_height)

    def random_island_count(self, width: int, height: int) -> int:
        maximum = self.max_island_count(width, height)
        if maximum <= self.config.min_islands:
            return self.config.min_islands
        return self.config.min_islands + self.random.randrange(maximum - self.config.min_islands)

    def generate(self, width: Optional[int] = None, height: Optional[int] = None,
                 island_count: Optional[int] = None, tries: Optional[int] = None) -> Board:
        """
        Generate a board without bridges.

        Args:
            width: Board width (random if None)
            height: Board height (random if None)
            island_count: Number of islands (random if None)
            tries: Number of attempts; negative means retry forever.
                Defaults to the configured number of tries.

        Returns:
            The generated board

        Raises:
            ValueError: If width, height or island count is out of range
            GenerationError: If no board could be built within the tries
        """
        puzzle, _ = self.generate_with_solution(width, height, island_count, tries)
        return puzzle

    def generate_with_solution(self, width: Optional[int] = None, height: Optional[int] = None,
                               island_count: Optional[int] = None,
                               tries: Optional[int] = None) -> Tuple[Board, Board]:
        """
        Generate a board together with the solution it was built from.

        Returns:
            (puzzle, solution): the puzzle has no bridges, the solution holds
            the same islands and a complete set of bridges
        """
        width = self.random_width() if width is None else width
        height = self.random_height() if height is None else height
        self._check_size(width, height)

        if island_count is None:
            island_count = self.random_island_count(width, height)
        if not (self.config.min_islands <= island_count <= self.max_island_count(width, height)):
            raise ValueError(f"Invalid island count: {island_count}")

        tries = self.config.tries if tries is None else tries
        self.logger.info(f"Generating {width}x{height} board with {island_count} islands")

        attempt = 0
        while tries < 0 or attempt < tries:
            attempt += 1
            network = self._grow(width, height, island_count)
            if network is None:
                self.logger.debug(f"Attempt {attempt} got stuck, retrying")
                continue

            self.logger.info(f"Successfully generated board on attempt {attempt}")
            return self._extract(network)

        self.logger.warning(f"Failed to generate board after {tries} attempts")
        raise GenerationError(
            f"Couldn't generate a {width} x {height} board with {island_count} islands "
            f"within {tries} tries"
        )

    def generate_batch(self, count: int, width: int, height: int,
                       island_count: Optional[int] = None) -> List[Board]:
        """Generate multiple boards of the same size"""
        boards = []
        for i in range(count):
            self.logger.info(f"Generating board {i + 1}/{count}")
            boards.append(self.generate(width, height, island_count))
        return boards

    def _check_size(self, width: int, height: int):
        if not (self.config.min_width <= width <= self.config.max_width):
            raise ValueError(f"Invalid width: {width}")
        if not (self.config.min_height <= height <= self.config.max_height):
            raise ValueError(f"Invalid height: {height}")

    def _grow(self, width: int, height: int, island_count: int) -> Optional[Board]:
        """Build a bridge network with provisional requirements, or None if stuck"""
        board = Board(width, height)
        while board.get_island_count() < island_count:
            if not self._add_island(board):
                return None
        return board

    @staticmethod
    def _extract(network: Board) -> Tuple[Board, Board]:
        """
        Rebuild the network with the real requirements.

        Islands are immutable, so corrected copies are placed on fresh boards.
        """
        corrected = {}
        puzzle = Board(network.width, network.height)
        for island in network.get_islands():
            fixed = island.with_required(network.bridge_count(island))
            corrected[island] = fixed
            puzzle.add_island(fixed)

        solution = puzzle.copy()
        for bridge in network.bridges():
            solution.add_bridge(Bridge(corrected[bridge.island1], corrected[bridge.island2], bridge.is_double))

        return puzzle, solution

    def _add_island(self, board: Board) -> bool:
        """Try to add one island (and a bridge to it) to the network."""
        islands = board.get_islands()
        if not islands:
            x = self.random.randrange(board.width)
            y = self.random.randrange(board.height)
            board.add_island(Island(x, y, 1))
            return True

        # Try islands and directions in random order until one works
        self.random.shuffle(islands)
        for origin in islands:
            directions = list(Direction)
            self.random.shuffle(directions)
            for direction in directions:
                if self._add_island_towards(board, origin, direction):
                    return True

        return False

    def _add_island_towards(self, board: Board, origin: Island, direction: Direction) -> bool:
        """Try to add an island in the given direction from origin."""
        positions = []

        # Keep one free cell for the bridge
        x = origin.x + 2 * direction.dx
        y = origin.y + 2 * direction.dy

        # Walk until the border or another island
        while 0 <= x < board.width and 0 <= y < board.height:
            candidate = Island(x, y, 1)
            if any(other.collides_with(candidate) for other in board.get_islands()):
                break
            positions.append(candidate)
            x += direction.dx
            y += direction.dy

        self.random.shuffle(positions)
        bridges = board.bridges()

        for candidate in positions:
            bridge = Bridge(origin, candidate, self.random.random() < 0.5)
            if bridge.crosses_any(bridges) or candidate.is_cut_by(bridges):
                continue

            board.add_island(candidate)
            board.add_bridge(bridge)
            return True

        return False
