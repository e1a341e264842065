"""
Step-wise solver for Bridges boards.
"""

import logging
import time
from collections import defaultdict
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Dict, Any, List, Tuple

from ..core.board import Board
from ..core.bridge import Bridge
from ..core.validator import BoardState
from ..core.utils import setup_logger, memory_usage
from .strategies import Strategy, get_strategy


DEFAULT_STRATEGIES = ['required', 'isolated', 'bruteforce']


@dataclass
class SolverConfig:
    """Configuration for the board solver"""
    strategies: List[str] = field(default_factory=lambda: list(DEFAULT_STRATEGIES))
    max_steps: Optional[int] = None  # None means until no step is left
    verbose: bool = False
    log_file: Optional[Path] = None


@dataclass
class SolverResult:
    """Result from solving a board"""
    success: bool
    solution: Optional[Board] = None
    solve_time: float = 0.0
    steps: int = 0
    memory_used: float = 0.0  # MB
    message: str = ""

    bridges_added: List[Bridge] = field(default_factory=list)
    stats: Dict[str, Any] = field(default_factory=dict)

    def __repr__(self):
        status = "Success" if self.success else "Failed"
        return f"SolverResult({status}, time={self.solve_time:.2f}s, steps={self.steps})"


class BoardSolver:
    """
    Solve boards one bridge at a time.

    The strategies are tried in order; the first one proposing a bridge
    wins. All methods work on the given board in place.
    """

    def __init__(self, config: Optional[SolverConfig] = None):
        """Initialize solver with configuration."""
        self.config = config or SolverConfig()
        self.strategies: List[Strategy] = [get_strategy(name) for name in self.config.strategies]

        logger_name = f"bridges.{self.__class__.__name__}"
        if self.config.verbose or self.config.log_file:
            self.logger = setup_logger(
                logger_name,
                self.config.log_file,
                "DEBUG" if self.config.verbose else "INFO"
            )
        else:
            self.logger = logging.getLogger(logger_name)

    def _find(self, board: Board) -> Tuple[Optional[Bridge], Optional[Strategy]]:
        for strategy in self.strategies:
            bridge = strategy.next_bridge(board)
            if bridge is not None:
                return bridge, strategy
        return None, None

    def next_bridge(self, board: Board) -> Optional[Bridge]:
        """Return the next bridge which can be added to the board, or None."""
        bridge, _ = self._find(board)
        return bridge

    def has_step(self, board: Board) -> bool:
        """Check if a solve step exists for the board."""
        return self.next_bridge(board) is not None

    def step(self, board: Board) -> bool:
        """
        Execute a single solve step in place.

        Returns:
            True if the board changed, False otherwise.
        """
        bridge, strategy = self._find(board)
        if bridge is None:
            return False

        board.add_bridge(bridge)
        self.logger.debug(f"{strategy.name}: added {bridge}")
        return True

    def next_step(self, board: Board) -> Optional[Bridge]:
        """
        Execute a single solve step, adding at most one bridge line.

        If the next bridge is a double bridge while the single one can still
        be added, the single bridge is added first.

        Returns:
            The bridge added to the board, or None.
        """
        bridge, strategy = self._find(board)
        if bridge is None:
            return None

        if bridge.is_double:
            single = bridge.as_single()
            if board.can_add(single):
                bridge = single

        board.add_bridge(bridge)
        self.logger.debug(f"{strategy.name}: added {bridge}")
        return bridge

    def solve(self, board: Board) -> SolverResult:
        """
        Solve the board (as far as possible) in place.

        Steps are applied until no strategy finds a bridge or max_steps is
        reached. The board may end up incomplete if it is ambiguous or
        unsolvable.
        """
        self.logger.info(f"Solving {board!r}")

        start_time = time.time()
        initial_memory = memory_usage()
        rules_used = defaultdict(int)
        added = []

        while self.config.max_steps is None or len(added) < self.config.max_steps:
            bridge, strategy = self._find(board)
            if bridge is None:
                break

            board.add_bridge(bridge)
            added.append(bridge)
            rules_used[strategy.name] += 1
            self.logger.debug(f"{strategy.name}: added {bridge}")

        success = board.is_complete()
        result = SolverResult(
            success=success,
            solution=board,
            solve_time=time.time() - start_time,
            steps=len(added),
            memory_used=memory_usage() - initial_memory,
            message="Board solved" if success else "No further step found",
            bridges_added=added,
            stats={'rules_used': dict(rules_used)}
        )

        if success:
            self.logger.info(f"Solved in {result.solve_time:.2f}s with {result.steps} steps")
        else:
            self.logger.info(f"Stopped after {result.steps} steps: {result.message}")

        return result

    def get_state(self, board: Optional[Board]) -> BoardState:
        """Classify the board as seen by a player."""
        if board is None:
            return BoardState.NO_BOARD
        if board.is_complete():
            return BoardState.SOLVED
        if board.get_overfull():
            return BoardState.INCORRECT
        if self.has_step(board):
            return BoardState.UNSOLVED
        return BoardState.UNSOLVABLE


_default_solver = BoardSolver()


def next_bridge(board: Board) -> Optional[Bridge]:
    """Return the next bridge found by the default strategy chain, or None."""
    return _default_solver.next_bridge(board)


def has_step(board: Board) -> bool:
    return _default_solver.has_step(board)


def step(board: Board) -> bool:
    """Apply one step of the default strategy chain in place."""
    return _default_solver.step(board)


def solve(board: Board) -> SolverResult:
    """Solve the board in place with the default strategy chain."""
    return _default_solver.solve(board)


def board_state(board: Optional[Board], solver: Optional[BoardSolver] = None) -> BoardState:
    """Classify the board, using the default solver unless another one is given."""
    return (solver or _default_solver).get_state(board)
