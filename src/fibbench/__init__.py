"""fibbench: naive recursive Fibonacci micro-benchmark."""

from __future__ import annotations

import sys

from fibbench.benchmark import run
from fibbench.fibonacci import fib


def main() -> None:
    """Entry point for fibbench CLI."""
    from fibbench.benchmark.cli import main as cli_main

    sys.exit(cli_main())


__all__ = ["fib", "main", "run"]
