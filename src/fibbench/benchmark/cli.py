"""Command-line interface for the Fibonacci benchmark.

Provides the `fibbench` command. Without options it times fib(35);
`-n` or a YAML `--config` file select another input.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

import yaml

from fibbench.benchmark.config import BenchmarkConfig, load_config
from fibbench.benchmark.runner import DEFAULT_N, run


def non_negative_int(value: str) -> int:
    """Argparse type for a non-negative integer."""
    try:
        n = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {value!r}") from None
    if n < 0:
        raise argparse.ArgumentTypeError(f"must be non-negative: {n}")
    return n


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="fibbench",
        description="Time a naive recursive Fibonacci computation",
    )
    parser.add_argument(
        "-n",
        type=non_negative_int,
        help=f"Fibonacci index to compute (default: {DEFAULT_N})",
    )
    parser.add_argument(
        "--config",
        help="Path to a YAML configuration file",
    )
    return parser


def cmd_run(args: argparse.Namespace) -> int:
    """Run the benchmark."""
    config = BenchmarkConfig()

    if args.config:
        config_path = Path(args.config)
        if not config_path.exists():
            print(f"Error: Configuration not found: {config_path}")
            return 1
        try:
            config = load_config(config_path)
        except (OSError, ValueError, yaml.YAMLError) as e:
            print(f"Error loading configuration: {e}")
            return 1

    n = args.n if args.n is not None else config.n
    run(n)
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)
    return cmd_run(args)


if __name__ == "__main__":
    sys.exit(main())
