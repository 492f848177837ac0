"""Arrow and pandas views over a Fibonacci sequence."""

import logging
from itertools import islice
from typing import Dict, Generator, List, Optional

import pandas as pd
import pyarrow as pa

from .numeric import arrow_type_for
from .protocols import LoggerProtocol, Numeric
from .sequence import Fibonacci


class SequenceTableBuilder:
    """Build tables of ``(n, value)`` rows from a fresh generator.

    Rows stop at ``count`` terms or when the numeric type is exhausted,
    whichever comes first.
    """

    def __init__(self, numeric: Numeric, logger: Optional[LoggerProtocol] = None):
        """Initialize the table builder.

        Args:
            numeric: Numeric type the terms are computed in
            logger: Logger instance
        """
        self.numeric = numeric
        self._logger = logger or logging.getLogger(__name__)

    def _terms(self, count: Optional[int]):
        if count is not None and count < 0:
            raise ValueError("count must be non-negative")
        return enumerate(islice(Fibonacci(self.numeric), count))

    def generate_records(self, count: Optional[int] = None) -> Dict[str, List]:
        """Generate sequence records.

        Args:
            count: Maximum number of terms (``None`` for every representable term)

        Returns:
            Dictionary with ``n`` and ``value`` columns
        """
        data: Dict[str, List] = {"n": [], "value": []}
        for n, value in self._terms(count):
            data["n"].append(n)
            data["value"].append(value)

        self._logger.info(
            f"Generated {len(data['n']):,} {self.numeric.name} Fibonacci terms"
        )
        return data

    def create_arrow_table(self, data: Dict[str, List]) -> pa.Table:
        """Convert records to a PyArrow table.

        The ``value`` column uses the numeric type's Arrow integer type, or
        decimal strings when no Arrow integer is wide enough.
        """
        value_type = arrow_type_for(self.numeric)
        if value_type is None:
            values = pa.array([str(v) for v in data["value"]], type=pa.string())
        else:
            values = pa.array(data["value"], type=value_type)

        table = pa.table({"n": pa.array(data["n"], type=pa.uint64()), "value": values})
        self._logger.debug(
            f"Created PyArrow table with {table.num_rows:,} rows, value type {values.type}"
        )
        return table

    def generate_table(self, count: Optional[int] = None) -> pa.Table:
        """Generate terms and return them as a PyArrow table."""
        return self.create_arrow_table(self.generate_records(count))

    def create_dataframe(self, data: Dict[str, List]) -> pd.DataFrame:
        """Convert records to a pandas DataFrame."""
        return self.create_arrow_table(data).to_pandas()

    def generate_dataframe(self, count: Optional[int] = None) -> pd.DataFrame:
        """Generate terms and return them as a pandas DataFrame."""
        return self.create_dataframe(self.generate_records(count))

    def generate_dataframe_blocks(
        self, block_size: int, count: Optional[int] = None
    ) -> Generator[pd.DataFrame, None, None]:
        """Yield the sequence as DataFrame blocks of at most ``block_size`` rows.

        Args:
            block_size: Number of terms per block
            count: Maximum number of terms (``None`` for every representable term)

        Yields:
            pandas DataFrame blocks
        """
        if block_size <= 0:
            raise ValueError("block_size must be positive")

        terms = self._terms(count)
        block_num = 0
        while True:
            block = list(islice(terms, block_size))
            if not block:
                break
            block_num += 1
            data = {"n": [n for n, _ in block], "value": [v for _, v in block]}
            self._logger.info(f"Generated block {block_num} ({len(block):,} terms)")
            yield self.create_dataframe(data)
