"""Unit tests for the board generator."""

import pytest
from bridges.core.exceptions import GenerationError
from bridges.core.validator import BoardValidator
from bridges.generators import BoardGenerator, BoardGeneratorConfig
from bridges.serialization import write


class TestBoardGenerator:
    """Tests for BoardGenerator class."""

    def test_generate_creates_valid_board(self, generator):
        """Test that generated boards have the requested shape."""
        board = generator.generate(10, 8, 12)

        assert (board.width, board.height) == (10, 8)
        assert board.get_island_count() == 12
        assert board.bridges() == []
        assert BoardValidator.validate_structure(board).is_valid
        for island in board.get_islands():
            assert 1 <= island.required_bridges <= 8

    def test_no_colliding_islands(self, generator):
        for _ in range(5):
            islands = generator.generate(6, 6, 5).get_islands()
            for i, island in enumerate(islands):
                for other in islands[i + 1:]:
                    assert not island.collides_with(other)

    def test_generate_with_solution(self, generator):
        """Test that the returned solution solves the puzzle."""
        puzzle, solution = generator.generate_with_solution(12, 12, 20)

        assert solution.is_complete()
        assert sorted(solution.get_islands()) == sorted(puzzle.get_islands())
        assert puzzle.bridges() == []

    def test_random_parameters(self):
        generator = BoardGenerator(BoardGeneratorConfig(random_seed=1, max_width=9, max_height=7))
        board = generator.generate()
        assert 4 <= board.width < 9
        assert 4 <= board.height < 7
        assert 2 <= board.get_island_count() <= generator.max_island_count(board.width, board.height)

    def test_seed_is_deterministic(self):
        first = BoardGenerator(BoardGeneratorConfig(random_seed=7)).generate(9, 9, 10)
        second = BoardGenerator(BoardGeneratorConfig(random_seed=7)).generate(9, 9, 10)
        assert write(first) == write(second)

    def test_generate_batch(self, generator):
        boards = generator.generate_batch(3, 5, 5, 4)
        assert len(boards) == 3
        assert all(board.get_island_count() == 4 for board in boards)

    @pytest.mark.parametrize("width, height, islands", [
        (3, 10, 4),     # too narrow
        (10, 26, 4),    # too high
        (4, 4, 1),      # too few islands
        (4, 4, 4),      # more than 20% of the cells
    ])
    def test_invalid_parameters(self, generator, width, height, islands):
        with pytest.raises(ValueError):
            generator.generate(width, height, islands)

    def test_tries_exhausted(self, generator):
        with pytest.raises(GenerationError):
            generator.generate(5, 5, 3, tries=0)

    @staticmethod
    def stuck_growth(generator, monkeypatch, stuck):
        """Make the first `stuck` growth attempts of the generator fail."""
        grow = generator._grow
        calls = []

        def fake_grow(width, height, island_count):
            calls.append(width)
            if len(calls) <= stuck:
                return None
            board = None
            while board is None:
                board = grow(width, height, island_count)
            return board

        monkeypatch.setattr(generator, '_grow', fake_grow)
        return calls

    def test_stuck_attempts_use_up_tries(self, generator, monkeypatch):
        calls = self.stuck_growth(generator, monkeypatch, 3)
        with pytest.raises(GenerationError):
            generator.generate(10, 10, 5, tries=3)
        assert len(calls) == 3

    def test_retry_after_stuck_attempts(self, generator, monkeypatch):
        calls = self.stuck_growth(generator, monkeypatch, 3)
        board = generator.generate(10, 10, 5, tries=4)
        assert board.get_island_count() == 5
        assert len(calls) == 4

    def test_negative_tries_retry_until_success(self, generator, monkeypatch):
        calls = self.stuck_growth(generator, monkeypatch, 250)
        board = generator.generate(10, 10, 5, tries=-1)
        assert board.get_island_count() == 5
        assert len(calls) == 251

    def test_island_count_limits(self, generator):
        assert generator.max_island_count(10, 10) == 20
        assert generator.max_island_count(4, 4) == 3
        for _ in range(20):
            assert 2 <= generator.random_island_count(10, 10) < 20
        assert generator.random_island_count(4, 2) == 2


class TestBoardGeneratorConfig:
    """Tests for generator configuration."""

    def test_defaults(self):
        config = BoardGeneratorConfig()
        assert (config.min_width, config.max_width) == (4, 25)
        assert config.tries == 100
        assert config.random_seed is None

    def test_unknown_option(self):
        with pytest.raises(ValueError):
            BoardGeneratorConfig(difficulty='hard')

    def test_from_yaml(self, tmp_path):
        path = tmp_path / "generator.yaml"
        path.write_text("max_width: 10\ntries: 5\nrandom_seed: 3\n")

        config = BoardGeneratorConfig.from_yaml(path)
        assert config.max_width == 10
        assert config.tries == 5
        assert config.random_seed == 3
        assert config.min_height == 4

    def test_from_yaml_unknown_key(self, tmp_path):
        path = tmp_path / "generator.yaml"
        path.write_text("colour: blue\n")
        with pytest.raises(ValueError):
            BoardGeneratorConfig.from_yaml(path)
