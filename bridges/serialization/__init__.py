"""
Reading and writing boards in the text board format.
"""

from .board_reader import BoardReader, read, read_file, tokenize
from .board_writer import BoardWriter, write, write_file

__all__ = [
    'BoardReader',
    'BoardWriter',
    'read',
    'read_file',
    'write',
    'write_file',
    'tokenize',
]
