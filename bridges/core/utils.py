"""
Utility functions for the Bridges puzzle engine.
"""

import logging
import os
import time
from functools import wraps
from pathlib import Path
from typing import Optional

import numpy as np
import psutil

from .. import config
from .board import Board
from .island import Island


def setup_logger(name: str, log_file: Optional[Path] = None, level: str = config.LOG_LEVEL) -> logging.Logger:
    """
    Set up a logger with console and optional file output.

    Args:
        name: Logger name
        log_file: Optional log file path
        level: Logging level

    Returns:
        Configured logger
    """
    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, level.upper()))

    # Remove existing handlers
    logger.handlers = []

    formatter = logging.Formatter(config.LOG_FORMAT, datefmt=config.LOG_DATE_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(getattr(logging, level.upper()))
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(getattr(logging, level.upper()))
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger


def timer(func):
    """Decorator logging the execution time of a method at debug level"""
    @wraps(func)
    def wrapper(*args, **kwargs):
        start_time = time.time()
        result = func(*args, **kwargs)
        execution_time = time.time() - start_time

        if args and hasattr(args[0], 'logger'):
            args[0].logger.debug(f"{func.__name__} took {execution_time:.3f} seconds")

        return result
    return wrapper


def memory_usage() -> float:
    """Get current memory usage in MB"""
    process = psutil.Process(os.getpid())
    return process.memory_info().rss / 1024 / 1024


class BoardConverter:
    """Convert boards between different representations"""

    @staticmethod
    def to_grid(board: Board) -> np.ndarray:
        """
        Convert a board to a 2D grid indexed [y, x].
        0: empty, 1-8: island with that many required bridges
        """
        grid = np.zeros((board.height, board.width), dtype=int)
        for island in board.get_islands():
            grid[island.y, island.x] = island.required_bridges
        return grid

    @staticmethod
    def from_grid(grid: np.ndarray) -> Board:
        """Create a board (without bridges) from a 2D requirement grid"""
        height, width = grid.shape
        board = Board(width, height)

        for y, x in zip(*np.nonzero(grid)):
            board.add_island(Island(int(x), int(y), int(grid[y, x])))

        return board

    @staticmethod
    def to_string(board: Board, show_bridges: bool = True) -> str:
        """
        Convert a board to a spaced out text drawing.

        Islands are drawn at even rows and columns, so bridges between
        adjacent cells stay visible.

        Args:
            board: The board to convert
            show_bridges: Whether to draw the bridges

        Returns:
            String representation of the board
        """
        return board.render(spaced=True, show_bridges=show_bridges)
