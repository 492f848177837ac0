"""Benchmark harness for Fibonacci lookups."""

import logging
import time
from typing import Iterable, List, Optional

import pandas as pd

from .models import BenchmarkResult
from .numeric import BIG, BOUNDED_TYPES
from .protocols import LoggerProtocol, Numeric
from .sequence import f, max_term

# Index benchmarked for unbounded types, which have no largest term.
UNBOUNDED_INDEX = 100


class Benchmark:
    """
    Times repeated ``f(n)`` lookups.

    For bounded types the benchmarked index is the largest representable one,
    so each lookup walks the whole range of the type.
    """

    def __init__(self, iterations: int = 100, logger: Optional[LoggerProtocol] = None):
        """
        Initialize benchmark.

        Args:
            iterations: Number of lookups per measurement
            logger: Logger instance
        """
        if iterations <= 0:
            raise ValueError("iterations must be positive")
        self.iterations = iterations
        self._logger = logger or logging.getLogger(__name__)

    def run_index(self, numeric: Numeric, n: int) -> BenchmarkResult:
        """
        Time ``f(n)`` in ``numeric``.

        Raises:
            ValueError: If F(n) does not fit ``numeric``
        """
        result = f(n, numeric)
        if result.is_err():
            raise ValueError(f"F({n}) does not fit {numeric.name}: {result}")

        start_time = time.perf_counter()
        for _ in range(self.iterations):
            f(n, numeric)
        elapsed = time.perf_counter() - start_time

        stats = BenchmarkResult(
            name=numeric.name, n=n, iterations=self.iterations, total_seconds=elapsed
        )
        self._logger.info(
            f"{numeric.name}: f({n}) x {self.iterations} in {elapsed:.4f}s "
            f"({stats.mean_seconds * 1e6:.2f} us/call)"
        )
        return stats

    def run_max(self, numeric: Numeric) -> BenchmarkResult:
        """Time ``f(max_n)`` for a bounded numeric type."""
        max_n = max_term(numeric).max_n
        return self.run_index(numeric, max_n)

    def run_all(self, numerics: Optional[Iterable[Numeric]] = None) -> List[BenchmarkResult]:
        """
        Run the benchmark suite.

        Args:
            numerics: Types to benchmark; defaults to every bounded type, then
                the arbitrary-precision type at ``UNBOUNDED_INDEX``

        Returns:
            One result per type
        """
        if numerics is None:
            numerics = list(BOUNDED_TYPES) + [BIG]

        results = []
        for numeric in numerics:
            if getattr(numeric, "bounded", True):
                results.append(self.run_max(numeric))
            else:
                results.append(self.run_index(numeric, UNBOUNDED_INDEX))
        return results

    @staticmethod
    def to_dataframe(results: Iterable[BenchmarkResult]) -> pd.DataFrame:
        """Convert results to a pandas DataFrame."""
        return pd.DataFrame(
            [r.to_dict() for r in results],
            columns=["name", "n", "iterations", "total_seconds", "mean_seconds"],
        )
