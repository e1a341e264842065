"""
Validator for Bridges puzzle constraints.
"""

from enum import Enum
from typing import List

import networkx as nx

from .. import config
from .board import Board


class BoardState(Enum):
    """State of a board in a running game"""
    NO_BOARD = "no_board"
    UNSOLVED = "unsolved"        # valid, not solved yet, a solve step exists
    SOLVED = "solved"
    UNSOLVABLE = "unsolvable"    # valid, but no solve step can be found
    INCORRECT = "incorrect"      # some island has too many bridges


class ValidationResult:
    """Result of board validation"""

    def __init__(self):
        self.is_valid = True
        self.errors: List[str] = []
        self.warnings: List[str] = []

    def add_error(self, error: str):
        """Add an error message"""
        self.errors.append(error)
        self.is_valid = False

    def add_warning(self, warning: str):
        """Add a warning message"""
        self.warnings.append(warning)

    def merge(self, other: 'ValidationResult'):
        for error in other.errors:
            self.add_error(error)
        self.warnings.extend(other.warnings)

    def __bool__(self):
        return self.is_valid

    def __repr__(self):
        status = "Valid" if self.is_valid else "Invalid"
        return f"ValidationResult({status}, {len(self.errors)} errors, {len(self.warnings)} warnings)"


class BoardValidator:
    """Validates Bridges board constraints"""

    @staticmethod
    def bridge_graph(board: Board) -> nx.MultiGraph:
        """Build a multigraph with one edge per bridge (two for a double bridge)"""
        graph = nx.MultiGraph()
        graph.add_nodes_from(board.get_islands())
        for bridge in board.bridges():
            for _ in range(bridge.multiplicity):
                graph.add_edge(bridge.island1, bridge.island2)
        return graph

    @staticmethod
    def validate_structure(board: Board) -> ValidationResult:
        """Validate islands: positions, requirements and spacing"""
        result = ValidationResult()

        islands = board.get_islands()
        if not islands:
            result.add_error("Board has no islands")

        for island in islands:
            if not (0 <= island.x < board.width and 0 <= island.y < board.height):
                result.add_error(f"{island} lies outside the {board.width} x {board.height} board")
            if not (config.MIN_REQUIRED_BRIDGES <= island.required_bridges <= config.MAX_REQUIRED_BRIDGES):
                result.add_error(f"{island} has invalid bridge requirement")

        for i, island in enumerate(islands):
            for other in islands[i + 1:]:
                if island.collides_with(other):
                    result.add_error(f"{island} collides with {other}")

        return result

    @staticmethod
    def validate_bridges(board: Board) -> ValidationResult:
        """Validate bridges: no crossings, no island above its requirement"""
        result = ValidationResult()
        bridges = board.bridges()

        for i, bridge in enumerate(bridges):
            for other in bridges[i + 1:]:
                if bridge.crosses(other):
                    result.add_error(f"{bridge} crosses {other}")

        for island in board.get_overfull():
            result.add_error(
                f"{island} has too many bridges: {board.bridge_count(island)} > {island.required_bridges}"
            )

        return result

    @staticmethod
    def validate_solution(board: Board) -> ValidationResult:
        """Validate if the board is a complete solution"""
        result = ValidationResult()
        result.merge(BoardValidator.validate_structure(board))
        result.merge(BoardValidator.validate_bridges(board))

        for island in board.get_incomplete():
            result.add_error(
                f"{island} has {board.bridge_count(island)} bridges, requires {island.required_bridges}"
            )

        graph = BoardValidator.bridge_graph(board)
        if graph.number_of_nodes() > 0 and not nx.is_connected(graph):
            result.add_error(
                f"Not all islands are connected ({nx.number_connected_components(graph)} groups)"
            )

        # Every bridge adds one to two islands, so the total must be even
        total = sum(island.required_bridges for island in board.get_islands())
        if total % 2 != 0:
            result.add_error(f"Total bridge requirements ({total}) is odd - impossible to solve")

        return result

    @staticmethod
    def validate_partial_solution(board: Board) -> ValidationResult:
        """Validate an intermediate state: errors for conflicts, warnings for open islands"""
        result = ValidationResult()
        result.merge(BoardValidator.validate_structure(board))
        result.merge(BoardValidator.validate_bridges(board))

        for island in board.get_incomplete():
            result.add_warning(
                f"{island} is incomplete: {board.bridge_count(island)} < {island.required_bridges}"
            )

        return result

    @staticmethod
    def get_board_statistics(board: Board) -> dict:
        """Get various statistics about the board"""
        islands = board.get_islands()
        bridges = board.bridges()
        total_required = sum(i.required_bridges for i in islands)

        stats = {
            'width': board.width,
            'height': board.height,
            'num_islands': len(islands),
            'num_bridges': len(bridges),
            'single_bridges': sum(1 for b in bridges if not b.is_double),
            'double_bridges': sum(1 for b in bridges if b.is_double),
            'total_bridge_requirements': total_required,
            'avg_bridges_per_island': total_required / len(islands) if islands else 0,
            'density': len(islands) / (board.width * board.height),
            'num_groups': len(board.partition()),
            'is_complete': board.is_complete(),
        }

        degree_dist = {}
        for island in islands:
            degree_dist[island.required_bridges] = degree_dist.get(island.required_bridges, 0) + 1
        stats['degree_distribution'] = degree_dist

        if islands:
            stats['avg_possible_connections'] = (
                sum(len(board.neighbors(i)) for i in islands) / len(islands)
            )

        return stats
