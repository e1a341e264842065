"""
Solvers for Bridges boards.
"""

from .base_solver import (
    BoardSolver, SolverConfig, SolverResult, DEFAULT_STRATEGIES,
    next_bridge, has_step, step, solve, board_state
)
from .strategies import (
    Strategy, RequiredStrategy, IsolatedStrategy, BruteforceStrategy,
    STRATEGY_REGISTRY, get_strategy
)

__all__ = [
    # Solver
    'BoardSolver',
    'SolverConfig',
    'SolverResult',
    'DEFAULT_STRATEGIES',

    # Default solver shortcuts
    'next_bridge',
    'has_step',
    'step',
    'solve',
    'board_state',

    # Strategies
    'Strategy',
    'RequiredStrategy',
    'IsolatedStrategy',
    'BruteforceStrategy',
    'STRATEGY_REGISTRY',
    'get_strategy',
]
