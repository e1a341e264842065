"""
Writer for the Bridges board file format.
"""

from pathlib import Path
from typing import Union

from ..core.board import Board


class BoardWriter:
    """Convert boards to the text format read by BoardReader"""

    @staticmethod
    def write(board: Board) -> str:
        """
        Return the text representation of a board.

        Islands and bridges are sorted, so equal boards give equal text.
        Bridge lines refer to islands by their index in the sorted list.

        Raises:
            ValueError: If board is None
        """
        if board is None:
            raise ValueError("Board must not be None.")

        islands = sorted(board.get_islands())
        bridges = sorted(board.bridges())
        index = {island: i for i, island in enumerate(islands)}

        lines = [
            "FIELD",
            f"{board.width} x {board.height} | {board.get_island_count()}",
            "",
            "ISLANDS",
        ]
        for island in islands:
            lines.append(f"( {island.x}, {island.y} | {island.required_bridges} )")

        if bridges:
            lines.append("")
            lines.append("BRIDGES")
            for bridge in bridges:
                first, second = sorted((index[bridge.island1], index[bridge.island2]))
                lines.append(f"( {first}, {second} | {'true' if bridge.is_double else 'false'} )")

        return '\n'.join(lines) + '\n'

    @classmethod
    def write_file(cls, board: Board, path: Union[str, Path]):
        """Write a board to a file. I/O errors are propagated."""
        path = Path(path)
        with open(path, 'w') as f:
            f.write(cls.write(board))


def write(board: Board) -> str:
    return BoardWriter.write(board)


def write_file(board: Board, path: Union[str, Path]):
    BoardWriter.write_file(board, path)
