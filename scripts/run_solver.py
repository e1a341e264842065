#!/usr/bin/env python3
"""
Script to solve a single Bridges board.

Usage:
    python scripts/run_solver.py board.bgs --save solved.bgs
    python scripts/run_solver.py --generate 10x10 --islands 12 --seed 42
    python scripts/run_solver.py board.bgs --steps 3 --strategy required --strategy isolated
"""

import click
import sys
from pathlib import Path
import json

# Add parent directory to path
sys.path.append(str(Path(__file__).parent.parent))

from bridges.core.exceptions import BridgesError, GenerationError
from bridges.core.validator import BoardValidator
from bridges.core.utils import BoardConverter, setup_logger
from bridges.solvers import BoardSolver, SolverConfig, STRATEGY_REGISTRY, DEFAULT_STRATEGIES, board_state
from bridges.generators import BoardGenerator, BoardGeneratorConfig
from bridges.serialization import BoardReader, BoardWriter


def parse_size(size: str):
    """Parse WIDTHxHEIGHT"""
    width, height = map(int, size.lower().split('x'))
    return width, height


@click.command()
@click.argument('board_file', required=False, type=click.Path())
@click.option('--generate', '-g', type=str,
              help='Generate a board instead (format: WIDTHxHEIGHT)')
@click.option('--islands', '-i', type=int, default=None,
              help='Island count for a generated board (random if omitted)')
@click.option('--seed', type=int, default=None,
              help='Random seed for generation')
@click.option('--strategy', '-a', 'strategies', multiple=True,
              type=click.Choice(list(STRATEGY_REGISTRY.keys())),
              help='Strategies to use, in order (default: all)')
@click.option('--steps', '-n', type=int, default=None,
              help='Only apply this many single bridge steps')
@click.option('--save', '-s', 'save_path', type=click.Path(),
              help='Save the resulting board to file')
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose output')
@click.option('--log-file', type=click.Path(), default=None,
              help='Also write the log to this file')
def main(board_file, generate, islands, seed, strategies, steps, save_path, verbose, log_file):
    """Solve a Bridges board step by step or completely."""

    logger = setup_logger("bridges", log_file, level="DEBUG" if verbose else "INFO")

    # Load or generate board
    if generate:
        try:
            width, height = parse_size(generate)
        except ValueError:
            click.echo("Error: Generate format should be WIDTHxHEIGHT (e.g., 10x10)")
            sys.exit(1)

        generator = BoardGenerator(BoardGeneratorConfig(random_seed=seed))
        try:
            board = generator.generate(width, height, islands)
        except (ValueError, GenerationError) as e:
            click.echo(f"Error: Failed to generate board: {e}")
            sys.exit(1)

    elif board_file:
        board_path = Path(board_file)
        if not board_path.exists():
            click.echo(f"Error: Board file '{board_file}' not found")
            sys.exit(1)

        try:
            board = BoardReader.read_file(board_path)
            logger.info(f"Loaded board from {board_path}")
        except BridgesError as e:
            click.echo(f"Error loading board: {e}")
            sys.exit(1)
    else:
        click.echo("Error: Either provide a board file or use --generate")
        sys.exit(1)

    logger.info(f"Board: {board.width}x{board.height} with {board.get_island_count()} islands")

    validation = BoardValidator.validate_structure(board)
    if not validation:
        click.echo(f"Error: Invalid board - {'; '.join(validation.errors)}")
        sys.exit(1)

    solver = BoardSolver(SolverConfig(strategies=list(strategies) or list(DEFAULT_STRATEGIES)))

    if steps is not None:
        for i in range(steps):
            bridge = solver.next_step(board)
            if bridge is None:
                click.echo(f"No further step after {i} steps")
                break
            click.echo(f"Step {i + 1}: {bridge}")
    else:
        result = solver.solve(board)

        click.echo("\n" + "=" * 50)
        click.echo(f"Status: {'SUCCESS' if result.success else 'FAILED'}")
        click.echo(f"Time: {result.solve_time:.3f} seconds")
        click.echo(f"Steps: {result.steps}")
        click.echo(f"Memory: {result.memory_used:.1f} MB")
        if result.message:
            click.echo(f"Message: {result.message}")
        if result.stats:
            click.echo(f"Additional stats: {json.dumps(result.stats, indent=2)}")
        click.echo("=" * 50 + "\n")

    click.echo(BoardConverter.to_string(board, show_bridges=True))
    click.echo(f"\nState: {board_state(board, solver).name}")

    if save_path:
        BoardWriter.write_file(board, save_path)
        click.echo(f"\nBoard saved to {save_path}")


if __name__ == '__main__':
    main()
