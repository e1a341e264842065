"""Unit tests for the Board aggregate."""

import pytest
from bridges.core.board import Board
from bridges.core.bridge import Bridge
from bridges.core.direction import Direction
from bridges.core.island import Island
from bridges.core.exceptions import PlacementError


class TestBoardIslands:
    """Tests for placing and finding islands."""

    @pytest.mark.parametrize("width, height", [(0, 1), (1, 0), (-2, 5)])
    def test_invalid_dimensions(self, width, height):
        with pytest.raises(PlacementError):
            Board(width, height)

    def test_add_island(self):
        board = Board(5, 5)
        board.add_island(Island(4, 4, 2))
        assert board.get_island_count() == 1
        assert board.get_island_at(4, 4) == Island(4, 4, 2)
        assert board.get_island_at(0, 0) is None
        assert board.has_island(Island(4, 4, 2))
        assert not board.has_island(Island(4, 4, 3))

    def test_island_out_of_bounds(self):
        board = Board(5, 5)
        with pytest.raises(PlacementError):
            board.add_island(Island(5, 0, 1))

    def test_colliding_island(self):
        board = Board(5, 5)
        board.add_island(Island(2, 2, 1))
        with pytest.raises(PlacementError):
            board.add_island(Island(2, 3, 1))
        assert board.get_island_count() == 1

    def test_neighbor(self):
        """Test that the nearest island in a direction is found."""
        center = Island(2, 2, 4)
        board = Board(7, 7, [center, Island(4, 2, 1), Island(6, 2, 1), Island(2, 0, 1), Island(0, 0, 1)])
        assert board.neighbor(center, Direction.EAST) == Island(4, 2, 1)
        assert board.neighbor(center, Direction.NORTH) == Island(2, 0, 1)
        assert board.neighbor(center, Direction.WEST) is None
        assert board.neighbor(center, Direction.SOUTH) is None
        assert board.neighbors(center) == [Island(4, 2, 1), Island(2, 0, 1)]

    def test_neighbor_of_unknown_island(self, pair_board):
        with pytest.raises(PlacementError):
            pair_board.neighbor(Island(1, 1, 1), Direction.EAST)

    def test_neighbors_ignore_bridges(self, cross_board):
        west = Island(0, 2, 1)
        north = Island(2, 0, 1)
        assert cross_board.neighbors(north) == [Island(2, 4, 1)]
        assert cross_board.neighbors(west) == [Island(4, 2, 1)]

    def test_valid_neighbors(self):
        """Test that neighbors behind a crossing bridge are excluded."""
        west, east = Island(0, 2, 1), Island(4, 2, 1)
        north, south = Island(2, 0, 1), Island(2, 4, 1)
        board = Board(5, 5, [west, east, north, south])
        board.add_bridge(Bridge(west, east))
        assert board.valid_neighbors(north) == []
        assert board.valid_neighbors(west) == [east]


class TestBoardBridges:
    """Tests for adding and removing bridges."""

    def test_pair_scenario(self, pair_board):
        """Test that a single bridge completes the two island board."""
        first, second = pair_board.get_islands()
        pair_board.add_bridge(Bridge(first, second))
        assert pair_board.is_complete()
        assert pair_board.get_incomplete() == []

    def test_bridge_between_non_neighbors(self):
        a, b, c = Island(0, 0, 1), Island(2, 0, 2), Island(4, 0, 1)
        board = Board(5, 1, [a, b, c])
        with pytest.raises(PlacementError):
            board.add_bridge(Bridge(a, c))

    def test_upgrade_to_double(self, pair_board):
        first, second = pair_board.get_islands()
        pair_board.add_bridge(Bridge(first, second))
        pair_board.add_bridge(Bridge(second, first, True))
        assert pair_board.bridges() == [Bridge(first, second, True)]
        assert pair_board.bridge_count(first) == 2

    @pytest.mark.parametrize("existing, added", [
        (False, False), (True, True), (True, False),
    ])
    def test_illegal_transitions(self, pair_board, existing, added):
        first, second = pair_board.get_islands()
        pair_board.add_bridge(Bridge(first, second, existing))
        with pytest.raises(PlacementError):
            pair_board.add_bridge(Bridge(first, second, added))
        assert pair_board.bridges() == [Bridge(first, second, existing)]

    def test_remove_one_bridge(self, pair_board):
        first, second = pair_board.get_islands()
        pair_board.add_bridge(Bridge(first, second, True))

        replacement = pair_board.remove_one_bridge(Bridge(first, second, True))
        assert replacement == Bridge(first, second)
        assert pair_board.bridges() == [replacement]

        assert pair_board.remove_one_bridge(replacement) is None
        assert pair_board.bridges() == []

    def test_remove_missing_bridge(self, pair_board):
        first, second = pair_board.get_islands()
        pair_board.add_bridge(Bridge(first, second))
        with pytest.raises(PlacementError):
            pair_board.remove_one_bridge(Bridge(first, second, True))

    def test_at_most_two_per_pair(self, square_board):
        """Test that any sequence of successful mutations keeps pairs at two bridges."""
        islands = square_board.get_islands()
        pairs = [(islands[0], islands[1]), (islands[0], islands[2]), (islands[1], islands[3])]
        for _ in range(3):
            for a, b in pairs:
                for is_double in (False, True):
                    try:
                        square_board.add_bridge(Bridge(a, b, is_double))
                    except PlacementError:
                        pass
            for a, b in pairs:
                found = square_board.search_bridge(a, b)
                assert found is not None
                assert Bridge.count([found]) <= 2
            square_board.remove_one_bridge(square_board.search_bridge(*pairs[0]))

    def test_search_bridge(self, square_board):
        a, b, c, _ = square_board.get_islands()
        square_board.add_bridge(Bridge(a, b))
        assert square_board.search_bridge(b, a) == Bridge(a, b)
        assert square_board.search_bridge(a, Direction.EAST) == Bridge(a, b)
        assert square_board.search_bridge(a, c) is None
        assert square_board.search_bridge(a, Direction.NORTH) is None

    def test_create_bridge(self, square_board):
        a, b, _, _ = square_board.get_islands()
        assert square_board.create_bridge(a, Direction.EAST) == Bridge(a, b)
        square_board.add_bridge(Bridge(a, b))
        assert square_board.create_bridge(a, Direction.EAST) == Bridge(a, b, True)
        square_board.add_bridge(Bridge(a, b, True))
        assert square_board.create_bridge(a, Direction.EAST) is None
        assert square_board.create_bridge(a, Direction.WEST) is None

    def test_can_add(self, square_board):
        a, b, c, _ = square_board.get_islands()
        assert square_board.can_add(Bridge(a, b))
        square_board.add_bridge(Bridge(a, b, True))
        assert not square_board.can_add(Bridge(a, b))
        assert not square_board.can_add(Bridge(a, b, True))
        assert square_board.can_add(Bridge(a, c))
        assert not square_board.can_add(None)
        assert not square_board.can_add(Bridge(Island(0, 0, 3), b))

    def test_can_add_rejects_crossing(self):
        west, east = Island(0, 2, 1), Island(4, 2, 1)
        north, south = Island(2, 0, 1), Island(2, 4, 1)
        board = Board(5, 5, [west, east, north, south])
        board.add_bridge(Bridge(west, east))
        assert not board.can_add(Bridge(north, south))

    def test_crossing_bridges_can_be_stored(self, cross_board):
        assert len(cross_board.bridges()) == 2

    def test_bridges_of_island(self, square_board):
        a, b, c, d = square_board.get_islands()
        square_board.add_bridge(Bridge(a, b))
        square_board.add_bridge(Bridge(c, d, True))
        assert square_board.bridges(a) == [Bridge(a, b)]
        assert square_board.bridges(d) == [Bridge(c, d, True)]
        assert len(square_board.bridges()) == 2


class TestBoardState:
    """Tests for completeness, connectivity and copying."""

    def test_reset_is_idempotent(self, square_board):
        a, b, _, _ = square_board.get_islands()
        square_board.add_bridge(Bridge(a, b))
        square_board.reset()
        assert square_board.bridges() == []
        square_board.reset()
        assert square_board.bridges() == []
        assert square_board.get_island_count() == 4

    def test_partition(self, square_board):
        a, b, c, d = square_board.get_islands()
        assert len(square_board.partition()) == 4

        square_board.add_bridge(Bridge(a, b, True))
        square_board.add_bridge(Bridge(c, d, True))
        groups = square_board.partition()
        assert sorted(sorted(group) for group in groups) == [sorted([a, b]), sorted([c, d])]
        assert not square_board.is_fully_connected()

    def test_complete_needs_connection(self, square_board):
        """Test that two closed pairs satisfy all counts but are not complete."""
        a, b, c, d = square_board.get_islands()
        square_board.add_bridge(Bridge(a, b, True))
        square_board.add_bridge(Bridge(c, d, True))
        assert square_board.get_incomplete() == []
        assert not square_board.is_complete()

    def test_ring_is_complete(self, square_board):
        a, b, c, d = square_board.get_islands()
        for first, second in [(a, b), (b, d), (d, c), (c, a)]:
            square_board.add_bridge(Bridge(first, second))
        assert square_board.is_fully_connected()
        assert square_board.is_complete()

    def test_overfull(self, pair_board):
        first, second = pair_board.get_islands()
        pair_board.add_bridge(Bridge(first, second, True))
        assert pair_board.get_overfull() == [first, second]
        assert not pair_board.is_complete()

    def test_copy_is_independent(self, pair_board):
        first, second = pair_board.get_islands()
        copy = pair_board.copy()
        copy.add_bridge(Bridge(first, second))
        assert pair_board.bridges() == []
        assert copy.get_islands() == pair_board.get_islands()
        assert (copy.width, copy.height) == (pair_board.width, pair_board.height)

    def test_str(self, pair_board):
        first, second = pair_board.get_islands()
        pair_board.add_bridge(Bridge(first, second, True))
        assert str(pair_board) == "1=1"

    def test_render(self, square_board):
        top_left, top_right = Island(0, 0, 2), Island(2, 0, 2)
        bottom_left = Island(0, 2, 2)
        square_board.add_bridge(Bridge(top_left, top_right))
        square_board.add_bridge(Bridge(top_left, bottom_left, True))
        assert str(square_board) == "2-2\n\"..\n2.2"
        assert square_board.render(show_bridges=False) == "2.2\n...\n2.2"
        assert square_board.render(spaced=True) == '2---2\n"\n"\n"\n2   2'
