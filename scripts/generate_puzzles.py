#!/usr/bin/env python3
"""
Script to generate Bridges boards.

Usage:
    python scripts/generate_puzzles.py --count 10 --size 10x10 --islands 15
    python scripts/generate_puzzles.py --batch 5x5:4:10 --batch 12x12:20:5 --seed 7
    python scripts/generate_puzzles.py --config generator.yaml --count 3
"""

import click
import sys
from pathlib import Path
from datetime import datetime
import json

# Add parent directory to path
sys.path.append(str(Path(__file__).parent.parent))

from bridges import config
from bridges.core.exceptions import GenerationError
from bridges.core.utils import BoardConverter, setup_logger
from bridges.core.validator import BoardValidator
from bridges.generators import BoardGenerator, BoardGeneratorConfig
from bridges.serialization import BoardWriter


def parse_batch(spec: str):
    """Parse WIDTHxHEIGHT:ISLANDS:COUNT, ISLANDS may be '*' for random"""
    parts = spec.split(':')
    if len(parts) != 3:
        raise ValueError("Invalid format")

    size_str, islands_str, count_str = parts
    width, height = map(int, size_str.lower().split('x'))
    islands = None if islands_str == '*' else int(islands_str)
    return width, height, islands, int(count_str)


@click.command()
@click.option('--count', '-n', type=int, default=10,
              help='Number of boards to generate')
@click.option('--size', '-s', type=str, default=None,
              help='Board size (format: WIDTHxHEIGHT, random if omitted)')
@click.option('--islands', '-i', type=int, default=None,
              help='Island count (random if omitted)')
@click.option('--batch', '-b', multiple=True,
              help='Batch generation (format: WIDTHxHEIGHT:ISLANDS:COUNT)')
@click.option('--tries', '-t', type=int, default=None,
              help='Attempts per board, negative for unlimited')
@click.option('--config', '-c', 'config_file', type=click.Path(exists=True),
              help='YAML file with generator options')
@click.option('--output-dir', '-o', type=click.Path(), default=str(config.PUZZLES_DIR),
              help='Output directory for boards')
@click.option('--seed', type=int, default=None,
              help='Random seed for reproducibility')
@click.option('--show', is_flag=True, help='Print the first generated board')
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose output')
def main(count, size, islands, batch, tries, config_file, output_dir, seed, show, verbose):
    """Generate Bridges boards into .bgs files."""

    setup_logger("bridges", level="DEBUG" if verbose else "WARNING")

    click.echo("=" * 60)
    click.echo("Bridges Board Generator")
    click.echo("=" * 60)

    output_path = Path(output_dir)
    output_path.mkdir(parents=True, exist_ok=True)

    generator_config = BoardGeneratorConfig.from_yaml(config_file) if config_file else BoardGeneratorConfig()
    if seed is not None:
        generator_config.random_seed = seed
    generator = BoardGenerator(generator_config)

    generation_tasks = []
    if batch:
        click.echo("\nBatch generation:")
        for spec in batch:
            try:
                width, height, num_islands, num = parse_batch(spec)
            except ValueError as e:
                click.echo(f"Error parsing batch spec '{spec}': {e}")
                click.echo("Format should be WIDTHxHEIGHT:ISLANDS:COUNT")
                sys.exit(1)
            generation_tasks.append((width, height, num_islands, num))
            click.echo(f"  - {num} boards at {width}x{height} with {num_islands or 'random'} islands")
    else:
        width = height = None
        if size:
            try:
                width, height = map(int, size.lower().split('x'))
            except ValueError:
                click.echo(f"Error: Invalid size format '{size}' (use WIDTHxHEIGHT)")
                sys.exit(1)
        generation_tasks.append((width, height, islands, count))

    total_boards = sum(num for _, _, _, num in generation_tasks)
    click.echo(f"\nTotal boards to generate: {total_boards}")

    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    generated = []
    failures = 0

    with click.progressbar(length=total_boards, label='Generating boards') as bar:
        for width, height, num_islands, num in generation_tasks:
            for i in range(num):
                try:
                    board = generator.generate(width, height, num_islands, tries)
                except GenerationError as e:
                    failures += 1
                    click.echo(f"\n{e}")
                    bar.update(1)
                    continue
                except ValueError as e:
                    click.echo(f"\nError: {e}")
                    sys.exit(1)

                board_id = f"{board.width}x{board.height}_{timestamp}_{len(generated):04d}"
                BoardWriter.write_file(board, output_path / f"{board_id}{config.BOARD_FILE_SUFFIX}")
                generated.append((board_id, board))
                bar.update(1)

    summary = {
        'timestamp': timestamp,
        'total_generated': len(generated),
        'failures': failures,
        'boards': [
            {'id': board_id, **BoardValidator.get_board_statistics(board)}
            for board_id, board in generated
        ],
        'generator_config': {key: getattr(generator_config, key) for key in BoardGeneratorConfig.KEYS},
    }

    summary_path = output_path / f"generation_summary_{timestamp}.json"
    with open(summary_path, 'w') as f:
        json.dump(summary, f, indent=2, default=str)

    click.echo(f"\nSuccessfully generated {len(generated)}/{total_boards} boards")
    click.echo(f"Boards saved to: {output_path}")

    if show and generated:
        board_id, board = generated[0]
        click.echo(f"\nSample board ({board_id}):")
        click.echo(BoardConverter.to_string(board, show_bridges=False))


if __name__ == '__main__':
    main()
