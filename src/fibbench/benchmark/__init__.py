"""Wall-clock benchmark of naive recursive Fibonacci.

This package provides:
- A single timed fib(n) run with a millisecond report
- YAML configuration for the input value
- The `fibbench` command-line entry point
"""

from __future__ import annotations

from fibbench.benchmark.config import BenchmarkConfig, load_config
from fibbench.benchmark.runner import DEFAULT_N, BenchmarkRun, run

__all__ = [
    "DEFAULT_N",
    "BenchmarkConfig",
    "BenchmarkRun",
    "load_config",
    "run",
]
