"""Benchmark driver.

Times a single call to fib(n) with a monotonic clock and reports:
- The computed Fibonacci value
- The elapsed wall-clock time in whole milliseconds
"""

from __future__ import annotations

import sys
import time
from dataclasses import dataclass
from typing import TextIO

from fibbench.fibonacci import fib

DEFAULT_N = 35

NS_PER_MS = 1_000_000


@dataclass(frozen=True)
class BenchmarkRun:
    """Outcome of one timed fib(n) call.

    Attributes:
        n: Input passed to fib.
        result: Computed Fibonacci value.
        elapsed_ms: Wall-clock duration in milliseconds (never negative).
    """

    n: int
    result: int
    elapsed_ms: int

    def format(self) -> str:
        """Format the run as the two report lines."""
        return (
            f"Fibonacci series for n={self.n}: {self.result}\n"
            f"Time elapsed: {self.elapsed_ms} milliseconds"
        )


def check_n(n: object) -> int:
    """Validate the fib precondition.

    Raises:
        TypeError: If n is not an int (bool is rejected too).
        ValueError: If n is negative.
    """
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"n must be an integer, got {type(n).__name__}")
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")
    return n


def elapsed_millis(start_ns: int, end_ns: int) -> int:
    """Convert two clock readings to whole milliseconds, saturating at 0."""
    return max(0, (end_ns - start_ns) // NS_PER_MS)


def run(n: int = DEFAULT_N, out: TextIO | None = None) -> BenchmarkRun:
    """Time fib(n) and print the result and elapsed time.

    Args:
        n: Fibonacci index to compute.
        out: Stream for the report (default: sys.stdout).

    Returns:
        BenchmarkRun with the value and timing.
    """
    check_n(n)

    start = time.perf_counter_ns()
    result = fib(n)
    end = time.perf_counter_ns()

    bench_run = BenchmarkRun(n=n, result=result, elapsed_ms=elapsed_millis(start, end))
    print(bench_run.format(), file=out if out is not None else sys.stdout)
    return bench_run
