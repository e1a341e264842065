# bridges/core/__init__.py
"""
Core data structures and utilities for the Bridges puzzle engine.
"""

from .direction import Direction
from .island import Island
from .bridge import Bridge
from .board import Board
from .exceptions import (
    BridgesError, PlacementError,
    BoardFormatError, BoardSyntaxError, BoardSemanticError,
    GenerationError
)
from .validator import BoardValidator, ValidationResult, BoardState
from .utils import setup_logger, timer, memory_usage, BoardConverter

__all__ = [
    # Data structures
    'Direction', 'Island', 'Bridge', 'Board',

    # Errors
    'BridgesError', 'PlacementError',
    'BoardFormatError', 'BoardSyntaxError', 'BoardSemanticError',
    'GenerationError',

    # Validation
    'BoardValidator', 'ValidationResult', 'BoardState',

    # Utilities
    'setup_logger', 'timer', 'memory_usage', 'BoardConverter',
]
