"""Shared fixtures for the Bridges test suite."""

import pytest

from bridges.core.board import Board
from bridges.core.bridge import Bridge
from bridges.core.island import Island
from bridges.generators.board_generator import BoardGenerator, BoardGeneratorConfig


@pytest.fixture
def pair_board():
    """Smallest solvable board: two islands needing one bridge each."""
    return Board(3, 1, [Island(0, 0, 1), Island(2, 0, 1)])


@pytest.fixture
def square_board():
    """Four islands needing two bridges each, solved by a ring of single bridges."""
    return Board(3, 3, [
        Island(0, 0, 2), Island(2, 0, 2),
        Island(0, 2, 2), Island(2, 2, 2),
    ])


@pytest.fixture
def cross_board():
    """Four islands around the centre with a crossing pair of bridges placed."""
    west, east = Island(0, 2, 1), Island(4, 2, 1)
    north, south = Island(2, 0, 1), Island(2, 4, 1)
    board = Board(5, 5, [west, east, north, south])
    board.add_bridge(Bridge(west, east))
    board.add_bridge(Bridge(north, south))
    return board


@pytest.fixture
def generator():
    return BoardGenerator(BoardGeneratorConfig(random_seed=42))
