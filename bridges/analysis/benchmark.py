"""
Benchmark system for comparing solver strategy chains.
"""

import json
import logging
import time
import traceback
from dataclasses import dataclass, asdict, field
from datetime import datetime
from pathlib import Path
from typing import List, Dict, Any, Optional, Tuple

import pandas as pd
from tqdm import tqdm

from .. import config
from ..core.board import Board
from ..core.validator import BoardValidator
from ..core.utils import timer
from ..generators.board_generator import BoardGenerator, BoardGeneratorConfig
from ..serialization.board_writer import BoardWriter
from ..solvers.base_solver import BoardSolver, SolverConfig, DEFAULT_STRATEGIES


@dataclass
class BenchmarkResult:
    """Result from a single benchmark run"""
    board_id: str
    solver: str
    success: bool
    solve_time: float
    steps: int
    memory_mb: float

    # Board characteristics
    width: int
    height: int
    num_islands: int

    # Solution quality
    is_valid: bool = False
    incomplete_islands: int = 0
    error_message: str = ""

    timestamp: str = ""
    rules_used: Dict[str, int] = field(default_factory=dict)

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization"""
        return asdict(self)


class BenchmarkConfig:
    """Configuration for benchmark runs"""

    def __init__(self, **kwargs):
        # Named strategy chains to compare
        self.solvers: Dict[str, List[str]] = kwargs.get('solvers', {
            'deduction': ['required', 'isolated'],
            'full': list(DEFAULT_STRATEGIES),
        })
        self.sizes: List[Tuple[int, int]] = kwargs.get('sizes', list(config.BENCHMARK_SIZES))
        self.boards_per_size: int = kwargs.get('boards_per_size', config.BENCHMARK_BOARDS_PER_SIZE)
        # Fraction of the maximal island count to generate
        self.island_fraction: float = kwargs.get('island_fraction', 0.5)
        self.random_seed: Optional[int] = kwargs.get('random_seed', None)

        # Output parameters
        self.output_dir: Path = Path(kwargs.get('output_dir', config.BENCHMARKS_DIR))
        self.save_boards: bool = kwargs.get('save_boards', False)


class Benchmark:
    """Run benchmarks on generated Bridges boards"""

    def __init__(self, config: BenchmarkConfig):
        self.config = config
        self.logger = logging.getLogger(f"bridges.{self.__class__.__name__}")
        self.generator = BoardGenerator(BoardGeneratorConfig(random_seed=config.random_seed))

        self.results: List[BenchmarkResult] = []

    def run(self, save: bool = True) -> pd.DataFrame:
        """
        Run the complete benchmark suite.

        Args:
            save: Whether to write CSV and JSON files to the output directory

        Returns:
            DataFrame with all benchmark results
        """
        self.logger.info("Starting benchmark suite")
        start_time = time.time()

        boards = self.prepare_boards()
        self.logger.info(f"Prepared {len(boards)} test boards")

        total = len(boards) * len(self.config.solvers)
        with tqdm(total=total, desc="Running benchmarks") as pbar:
            for board_id, board in boards:
                for solver_name, strategies in self.config.solvers.items():
                    self.results.append(self.run_single(board_id, board, solver_name, strategies))
                    pbar.update(1)

        results_df = pd.DataFrame([r.to_dict() for r in self.results])

        if save:
            self._save(results_df)

        self.logger.info(f"Benchmark completed in {time.time() - start_time:.2f} seconds")
        return results_df

    @timer
    def prepare_boards(self) -> List[Tuple[str, Board]]:
        """Generate the test boards"""
        boards = []
        board_dir = self.config.output_dir / "boards"
        if self.config.save_boards:
            board_dir.mkdir(parents=True, exist_ok=True)

        for width, height in self.config.sizes:
            maximum = self.generator.max_island_count(width, height)
            island_count = max(config.MIN_ISLAND_COUNT, int(maximum * self.config.island_fraction))
            self.logger.info(f"Generating {width}x{height} boards with {island_count} islands")

            for i in range(self.config.boards_per_size):
                board = self.generator.generate(width, height, island_count)
                board_id = f"{width}x{height}_{i:04d}"
                if self.config.save_boards:
                    BoardWriter.write_file(board, board_dir / f"{board_id}{config.BOARD_FILE_SUFFIX}")
                boards.append((board_id, board))

        return boards

    def run_single(self, board_id: str, board: Board, solver_name: str,
                   strategies: List[str]) -> BenchmarkResult:
        """Solve a copy of the board with one strategy chain"""
        result = BenchmarkResult(
            board_id=board_id,
            solver=solver_name,
            success=False,
            solve_time=0.0,
            steps=0,
            memory_mb=0.0,
            width=board.width,
            height=board.height,
            num_islands=board.get_island_count(),
            timestamp=datetime.now().isoformat()
        )

        try:
            solver = BoardSolver(SolverConfig(strategies=strategies))
            solver_result = solver.solve(board.copy())

            result.success = solver_result.success
            result.solve_time = solver_result.solve_time
            result.steps = solver_result.steps
            result.memory_mb = solver_result.memory_used
            result.rules_used = solver_result.stats.get('rules_used', {})
            result.incomplete_islands = len(solver_result.solution.get_incomplete())

            if solver_result.success:
                validation = BoardValidator.validate_solution(solver_result.solution)
                result.is_valid = validation.is_valid
                if not validation.is_valid:
                    result.error_message = "; ".join(validation.errors)

        except Exception as e:
            result.error_message = f"Exception: {str(e)}"
            self.logger.error(f"Error in {solver_name} on {board_id}: {str(e)}")
            self.logger.debug(traceback.format_exc())

        return result

    def _save(self, results_df: pd.DataFrame):
        self.config.output_dir.mkdir(parents=True, exist_ok=True)

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        results_file = self.config.output_dir / f"benchmark_results_{timestamp}.csv"
        results_df.to_csv(results_file, index=False)

        json_file = self.config.output_dir / f"benchmark_results_{timestamp}.json"
        with open(json_file, 'w') as f:
            json.dump({
                'config': {
                    'solvers': self.config.solvers,
                    'sizes': self.config.sizes,
                    'boards_per_size': self.config.boards_per_size,
                    'island_fraction': self.config.island_fraction,
                    'random_seed': self.config.random_seed,
                },
                'results': [r.to_dict() for r in self.results],
                'summary': self.compute_summary(results_df)
            }, f, indent=2)

        self.logger.info(f"Results saved to {results_file}")

    def compute_summary(self, results_df: pd.DataFrame) -> Dict[str, Any]:
        """Compute summary statistics"""
        summary: Dict[str, Any] = {
            'total_runs': len(results_df),
            'successful_runs': int(results_df['success'].sum()) if len(results_df) else 0,
            'by_solver': {},
            'by_size': {},
        }

        for solver_name, data in results_df.groupby('solver'):
            summary['by_solver'][solver_name] = {
                'success_rate': float(data['success'].mean()),
                'avg_time': float(data['solve_time'].mean()),
                'median_time': float(data['solve_time'].median()),
                'avg_steps': float(data['steps'].mean()),
                'valid_solutions': int(data['is_valid'].sum()),
                'total_runs': len(data),
            }

        for (width, height), data in results_df.groupby(['width', 'height']):
            summary['by_size'][f"{width}x{height}"] = {
                'success_rate': float(data['success'].mean()),
                'avg_time': float(data['solve_time'].mean()),
            }

        return summary


class BenchmarkAnalyzer:
    """Analyze saved benchmark results"""

    def __init__(self, results_file: Path):
        self.results_df = pd.read_csv(results_file)

    def get_summary_statistics(self) -> pd.DataFrame:
        """Get summary statistics by solver"""
        summary = self.results_df.groupby('solver').agg({
            'success': ['count', 'sum', 'mean'],
            'solve_time': ['mean', 'median', 'std', 'min', 'max'],
            'steps': ['mean', 'max'],
        }).round(3)

        # Flatten column names
        summary.columns = ['_'.join(col).strip() for col in summary.columns.values]
        return summary

    def get_performance_by_size(self) -> pd.DataFrame:
        """Analyze performance by board size"""
        return self.results_df.groupby(['solver', 'num_islands']).agg({
            'success': 'mean',
            'solve_time': 'mean',
            'incomplete_islands': 'mean',
        }).round(3)
