"""Benchmark configuration loading."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import yaml

from fibbench.benchmark.runner import DEFAULT_N, check_n


@dataclass
class BenchmarkConfig:
    """Configuration for a benchmark run.

    Attributes:
        n: Fibonacci index to compute.
    """

    n: int = DEFAULT_N


def load_config(config_path: Path | str) -> BenchmarkConfig:
    """Load benchmark configuration from YAML.

    An empty document yields the defaults. Unknown keys are ignored.

    Args:
        config_path: Path to the YAML file.

    Returns:
        BenchmarkConfig.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the document is not a mapping or n is invalid.
    """
    with Path(config_path).open() as f:
        data = yaml.safe_load(f)

    if data is None:
        return BenchmarkConfig()
    if not isinstance(data, dict):
        raise ValueError(f"{config_path}: expected a mapping, got {type(data).__name__}")

    n = data.get("n", DEFAULT_N)
    try:
        check_n(n)
    except (TypeError, ValueError) as e:
        raise ValueError(f"{config_path}: {e}") from e

    return BenchmarkConfig(n=n)
