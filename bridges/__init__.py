"""
Bridges (Hashiwokakero) puzzle engine.

Board model, step-wise solver, random generator, board merger and the
text board format.
"""

from .core import (
    Direction, Island, Bridge, Board,
    BridgesError, PlacementError,
    BoardFormatError, BoardSyntaxError, BoardSemanticError,
    GenerationError,
    BoardValidator, ValidationResult, BoardState,
    setup_logger, BoardConverter,
)
from .solvers import (
    BoardSolver, SolverConfig, SolverResult,
    next_bridge, has_step, step, solve, board_state,
)
from .generators import BoardGenerator, BoardGeneratorConfig, BoardMerger, merge
from .serialization import BoardReader, BoardWriter, read, read_file, write, write_file

__version__ = "0.1.0"

__all__ = [
    'Direction', 'Island', 'Bridge', 'Board',
    'BridgesError', 'PlacementError',
    'BoardFormatError', 'BoardSyntaxError', 'BoardSemanticError',
    'GenerationError',
    'BoardValidator', 'ValidationResult', 'BoardState',
    'setup_logger', 'BoardConverter',
    'BoardSolver', 'SolverConfig', 'SolverResult',
    'next_bridge', 'has_step', 'step', 'solve', 'board_state',
    'BoardGenerator', 'BoardGeneratorConfig', 'BoardMerger', 'merge',
    'BoardReader', 'BoardWriter', 'read', 'read_file', 'write', 'write_file',
]
