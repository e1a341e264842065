#!/usr/bin/env python3
"""
Script to merge two Bridges boards side by side.

Usage:
    python scripts/merge_puzzles.py left.bgs right.bgs merged.bgs
    python scripts/merge_puzzles.py left.bgs right.bgs merged.bgs --keep-bridges --connect
"""

import click
import sys
from pathlib import Path

# Add parent directory to path
sys.path.append(str(Path(__file__).parent.parent))

from bridges.core.bridge import Bridge
from bridges.core.exceptions import BridgesError
from bridges.core.utils import BoardConverter, setup_logger
from bridges.generators import BoardMerger
from bridges.serialization import BoardReader, BoardWriter


@click.command()
@click.argument('left_file', type=click.Path(exists=True))
@click.argument('right_file', type=click.Path(exists=True))
@click.argument('output_file', type=click.Path())
@click.option('--keep-bridges', is_flag=True,
              help='Keep the bridges already placed on both boards')
@click.option('--connect', is_flag=True,
              help='Also add the bridge between the two gate islands')
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose output')
def main(left_file, right_file, output_file, keep_bridges, connect, verbose):
    """Merge LEFT_FILE and RIGHT_FILE into OUTPUT_FILE."""

    setup_logger("bridges", level="DEBUG" if verbose else "INFO")

    try:
        left = BoardReader.read_file(left_file)
        right = BoardReader.read_file(right_file)
    except BridgesError as e:
        click.echo(f"Error loading board: {e}")
        sys.exit(1)

    merger = BoardMerger()
    board = merger.merge(left, right, add_bridges=keep_bridges)

    if connect:
        left_gate = merger.find_top_right(left)
        right_gate = merger.find_top_left(right)
        if left_gate is not None and right_gate is not None:
            # Gates share a row after merging, look them up by position
            row = min(left_gate.y, right_gate.y)
            first = board.get_island_at(left_gate.x, row)
            second = board.get_island_at(right_gate.x + left.width + 1, row)
            board.add_bridge(Bridge(first, second))

    BoardWriter.write_file(board, output_file)

    click.echo(BoardConverter.to_string(board, show_bridges=True))
    click.echo(f"\nMerged {board.width}x{board.height} board saved to {output_file}")


if __name__ == '__main__':
    main()
