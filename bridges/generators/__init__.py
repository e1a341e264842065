"""
Board generation and merging.
"""

from .board_generator import BoardGenerator, BoardGeneratorConfig
from .board_merger import BoardMerger, merge

__all__ = [
    'BoardGenerator',
    'BoardGeneratorConfig',
    'BoardMerger',
    'merge',
]
