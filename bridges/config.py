from pathlib import Path

# Project root directory
PROJECT_ROOT = Path(__file__).parent.parent

# Results directories (created by the scripts on demand)
RESULTS_DIR = PROJECT_ROOT / "results"
PUZZLES_DIR = RESULTS_DIR / "puzzles"
BENCHMARKS_DIR = RESULTS_DIR / "benchmarks"

# Board file format
BOARD_FILE_SUFFIX = ".bgs"

# Island requirements
MIN_REQUIRED_BRIDGES = 1
MAX_REQUIRED_BRIDGES = 8

# Generator limits
MIN_WIDTH = 4
MAX_WIDTH = 25
MIN_HEIGHT = 4
MAX_HEIGHT = 25
MIN_ISLAND_COUNT = 2
ISLAND_DENSITY = 0.2  # max islands per cell
DEFAULT_TRIES = 100  # negative means unbounded

# Benchmark defaults
BENCHMARK_SIZES = [(5, 5), (8, 8), (10, 10), (12, 12)]
BENCHMARK_BOARDS_PER_SIZE = 5

# Logging configuration
LOG_LEVEL = "INFO"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
