"""
Benchmarking of solver strategy chains.
"""

from .benchmark import Benchmark, BenchmarkConfig, BenchmarkResult, BenchmarkAnalyzer

__all__ = ['Benchmark', 'BenchmarkConfig', 'BenchmarkResult', 'BenchmarkAnalyzer']
