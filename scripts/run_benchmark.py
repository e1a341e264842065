#!/usr/bin/env python3
"""
Script to benchmark solver strategy chains on generated boards.

Usage:
    python scripts/run_benchmark.py --suite quick
    python scripts/run_benchmark.py --sizes 8x8 --sizes 12x12 -n 10 --seed 1
"""

import click
import sys
from pathlib import Path

# Add parent directory to path
sys.path.append(str(Path(__file__).parent.parent))

from bridges import config
from bridges.analysis import Benchmark, BenchmarkConfig, BenchmarkAnalyzer
from bridges.core.utils import setup_logger


# Predefined benchmark suites
BENCHMARK_SUITES = {
    'quick': {
        'sizes': [(5, 5), (8, 8)],
        'boards_per_size': 3,
    },
    'standard': {
        'sizes': list(config.BENCHMARK_SIZES),
        'boards_per_size': config.BENCHMARK_BOARDS_PER_SIZE,
    },
    'dense': {
        'sizes': [(8, 8), (12, 12), (16, 16)],
        'boards_per_size': 5,
        'island_fraction': 0.9,
    },
}


@click.command()
@click.option('--suite', type=click.Choice(list(BENCHMARK_SUITES.keys())),
              help='Use predefined benchmark suite')
@click.option('--sizes', '-s', multiple=True,
              help='Board sizes (format: WIDTHxHEIGHT)')
@click.option('--boards-per-size', '-n', type=int, default=config.BENCHMARK_BOARDS_PER_SIZE,
              help='Number of boards per size')
@click.option('--island-fraction', type=float, default=0.5,
              help='Fraction of the maximal island count to generate')
@click.option('--seed', type=int, default=None, help='Random seed')
@click.option('--save-boards', is_flag=True, help='Save the generated boards')
@click.option('--output-dir', '-o', type=click.Path(), default=str(config.BENCHMARKS_DIR),
              help='Output directory for results')
def main(suite, sizes, boards_per_size, island_fraction, seed, save_boards, output_dir):
    """Compare the deduction-only and the full strategy chain."""

    setup_logger("bridges", level="WARNING")

    if suite:
        config_dict = dict(BENCHMARK_SUITES[suite])
    else:
        parsed_sizes = []
        for size in sizes:
            try:
                width, height = map(int, size.lower().split('x'))
            except ValueError:
                click.echo(f"Error: Invalid size format '{size}' (use WIDTHxHEIGHT)")
                sys.exit(1)
            parsed_sizes.append((width, height))

        config_dict = {
            'sizes': parsed_sizes or list(config.BENCHMARK_SIZES),
            'boards_per_size': boards_per_size,
            'island_fraction': island_fraction,
        }

    config_dict.update({
        'random_seed': seed,
        'output_dir': output_dir,
        'save_boards': save_boards,
    })

    benchmark = Benchmark(BenchmarkConfig(**config_dict))
    results_df = benchmark.run()

    click.echo("\nBenchmark completed! Results summary:")
    click.echo(f"  Total runs: {len(results_df)}")
    click.echo(f"  Solved: {results_df['success'].sum()}")
    click.echo(f"  Success rate: {results_df['success'].mean() * 100:.1f}%")

    latest = max(Path(output_dir).glob("benchmark_results_*.csv"), key=lambda p: p.stat().st_mtime)
    analyzer = BenchmarkAnalyzer(latest)
    click.echo("\nSolver Performance:")
    click.echo(analyzer.get_summary_statistics().to_string())
    click.echo("\nPerformance by island count:")
    click.echo(analyzer.get_performance_by_size().to_string())


if __name__ == '__main__':
    main()
