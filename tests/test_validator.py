"""Unit tests for board validation and conversion helpers."""

import logging

import numpy as np
from bridges.core.board import Board
from bridges.core.bridge import Bridge
from bridges.core.island import Island
from bridges.core.validator import BoardValidator, ValidationResult
from bridges.core.utils import BoardConverter, setup_logger


class TestValidationResult:
    """Tests for ValidationResult class."""

    def test_errors_invalidate(self):
        result = ValidationResult()
        assert result
        result.add_warning("just a warning")
        assert result.is_valid
        result.add_error("broken")
        assert not result
        assert result.errors == ["broken"]

    def test_merge(self):
        first, second = ValidationResult(), ValidationResult()
        second.add_error("broken")
        second.add_warning("careful")
        first.merge(second)
        assert not first.is_valid
        assert first.warnings == ["careful"]


class TestBoardValidator:
    """Tests for BoardValidator class."""

    def test_valid_solution(self, square_board):
        a, b, c, d = square_board.get_islands()
        for first, second in [(a, b), (b, d), (d, c), (c, a)]:
            square_board.add_bridge(Bridge(first, second))
        assert BoardValidator.validate_solution(square_board).is_valid

    def test_disconnected_solution(self, square_board):
        a, b, c, d = square_board.get_islands()
        square_board.add_bridge(Bridge(a, b, True))
        square_board.add_bridge(Bridge(c, d, True))

        result = BoardValidator.validate_solution(square_board)
        assert not result.is_valid
        assert any("connected" in error for error in result.errors)

    def test_unsolved_board(self, pair_board):
        result = BoardValidator.validate_solution(pair_board)
        assert not result.is_valid
        assert BoardValidator.validate_partial_solution(pair_board).is_valid
        assert len(BoardValidator.validate_partial_solution(pair_board).warnings) == 2

    def test_odd_total(self):
        board = Board(3, 1, [Island(0, 0, 1), Island(2, 0, 2)])
        result = BoardValidator.validate_solution(board)
        assert any("odd" in error for error in result.errors)

    def test_crossing_bridges(self, cross_board):
        result = BoardValidator.validate_bridges(cross_board)
        assert not result.is_valid
        assert any("crosses" in error for error in result.errors)

    def test_empty_board(self):
        assert not BoardValidator.validate_structure(Board(4, 4)).is_valid

    def test_bridge_graph(self, pair_board):
        first, second = pair_board.get_islands()
        pair_board.add_bridge(Bridge(first, second, True))
        graph = BoardValidator.bridge_graph(pair_board)
        assert graph.number_of_nodes() == 2
        assert graph.number_of_edges() == 2

    def test_statistics(self, square_board):
        a, b, _, _ = square_board.get_islands()
        square_board.add_bridge(Bridge(a, b, True))
        stats = BoardValidator.get_board_statistics(square_board)
        assert stats['num_islands'] == 4
        assert stats['double_bridges'] == 1
        assert stats['total_bridge_requirements'] == 8
        assert stats['num_groups'] == 3
        assert stats['degree_distribution'] == {2: 4}
        assert not stats['is_complete']


class TestBoardConverter:
    """Tests for BoardConverter class."""

    def test_to_grid(self, square_board):
        grid = BoardConverter.to_grid(square_board)
        assert grid.shape == (3, 3)
        assert grid[0, 2] == 2
        assert grid[1, 1] == 0
        assert np.count_nonzero(grid) == 4

    def test_from_grid(self):
        grid = np.array([[1, 0, 2], [0, 0, 0], [0, 0, 1]])
        board = BoardConverter.from_grid(grid)
        assert (board.width, board.height) == (3, 3)
        assert sorted(board.get_islands()) == [Island(0, 0, 1), Island(2, 0, 2), Island(2, 2, 1)]

    def test_to_string(self, pair_board):
        first, second = pair_board.get_islands()
        pair_board.add_bridge(Bridge(first, second))
        assert BoardConverter.to_string(pair_board) == "1   1".replace("   ", "---")
        assert BoardConverter.to_string(pair_board, show_bridges=False) == "1   1"

    def test_to_string_vertical(self):
        top, bottom = Island(0, 0, 2), Island(0, 2, 2)
        board = Board(1, 3, [top, bottom])
        board.add_bridge(Bridge(top, bottom, True))
        assert BoardConverter.to_string(board) == '2\n"\n"\n"\n2'


class TestSetupLogger:
    """Tests for logger setup."""

    def test_file_handler(self, tmp_path):
        log_file = tmp_path / "logs" / "solver.log"
        logger = setup_logger("bridges.test", log_file, level="DEBUG")
        logger.debug("hello")
        for handler in logger.handlers:
            handler.flush()

        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 2
        assert "hello" in log_file.read_text()

        # Calling again replaces the handlers
        logger = setup_logger("bridges.test")
        assert len(logger.handlers) == 1
