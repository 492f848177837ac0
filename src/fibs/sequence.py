"""Fibonacci sequence generator with explicit overflow detection."""

import copy
import logging
import sys
from typing import Iterator, Optional, Union

from .errors import DegenerateNumericTypeError
from .models import Err, GeneratorState, Ok
from .numeric import U64
from .protocols import Numeric

logger = logging.getLogger(__name__)

# Largest index accepted by f(); the host's size-indexing maximum.
MAX_INDEX = sys.maxsize


def _zero(numeric: Numeric) -> int:
    zero = numeric.zero()
    if zero is None:
        raise DegenerateNumericTypeError(numeric.name)
    return zero


class Fibonacci:
    """Iterator over Fibonacci numbers in a given numeric type.

    Produces 0, 1, 1, 2, 3, 5, 8, ... one term per call and stops exactly one
    call after the last term representable in ``numeric``. Once exhausted, it
    stays exhausted: every further call reports the end of the sequence.

    Example:
        >>> from itertools import islice
        >>> list(islice(Fibonacci(), 3, 8))
        [2, 3, 5, 8, 13]
        >>> list(Fibonacci(U8))
        [0, 1, 1, 2, 3, 5, 8, 13, 21, 34, 55, 89, 144, 233]

    Reusing one iterator is cheaper than calling ``f`` for several indices.
    """

    def __init__(self, numeric: Numeric = U64):
        """Initialize a fresh generator.

        Args:
            numeric: Numeric type the terms are computed in
        """
        self.numeric = numeric
        self.state = GeneratorState.FRESH
        # Term emitted by the previous call; kept after exhaustion for diagnostics.
        self.previous: Optional[int] = None
        # Term the next call emits.
        self.current: Optional[int] = None

    @classmethod
    def default(cls) -> "Fibonacci":
        """Create a generator over 64-bit unsigned integers."""
        return cls()

    @classmethod
    def f(cls, n: int, numeric: Numeric = U64) -> Union[Ok, Err]:
        """Return F(n) in ``numeric``. See :func:`f`."""
        return f(n, numeric)

    @property
    def has_overflowed(self) -> bool:
        return self.state is GeneratorState.EXHAUSTED

    def produce_next(self) -> Optional[int]:
        """Emit the next term, or ``None`` once the numeric type is exhausted.

        The term computed ahead of time may overflow; the call that notices
        still returns its own valid term, and the call after it returns
        ``None``.
        """
        if self.state is GeneratorState.EXHAUSTED:
            return None

        if self.state is GeneratorState.FRESH:
            # One is the implicit predecessor of F(0), so F(1) comes out as 1.
            emitted = _zero(self.numeric)
            addend = self.numeric.one()
        else:
            emitted = self.current
            addend = self.previous

        following = self.numeric.checked_add(emitted, addend)

        self.previous = emitted
        self.current = following
        if following is None:
            self.state = GeneratorState.EXHAUSTED
        else:
            self.state = GeneratorState.PRODUCING
        return emitted

    def __iter__(self) -> Iterator[int]:
        return self

    def __next__(self) -> int:
        term = self.produce_next()
        if term is None:
            raise StopIteration
        return term

    def copy(self) -> "Fibonacci":
        """Return an independent generator in the same state."""
        return copy.copy(self)

    def __copy__(self) -> "Fibonacci":
        clone = type(self)(self.numeric)
        clone.state = self.state
        clone.previous = self.previous
        clone.current = self.current
        return clone

    def __repr__(self):
        return (
            f"Fibonacci(numeric={self.numeric.name}, state={self.state.value}, "
            f"previous={self.previous}, current={self.current})"
        )


def _validate_index(n: int) -> None:
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"n must be an int, got {type(n).__name__}")
    if n < 0:
        raise ValueError("n must be non-negative")
    if n > MAX_INDEX:
        raise ValueError(f"n must not exceed {MAX_INDEX}")


def f(n: int, numeric: Numeric = U64) -> Union[Ok, Err]:
    """Return the F(n) value in the Fibonacci series.

    If F(n) would overflow ``numeric``, ``Err`` is returned with the largest
    index that does not overflow and the term at that index. The same
    ``Err`` comes back for every larger ``n``, up to and including
    ``MAX_INDEX``.

    Args:
        n: Zero-based index (F(0) = 0, F(1) = 1, F(2) = 1, ...)
        numeric: Numeric type to compute in

    Returns:
        ``Ok(value)`` or ``Err(max_n, max_value)``

    Raises:
        TypeError: If ``n`` is not an int
        ValueError: If ``n`` is negative or above ``MAX_INDEX``
        DegenerateNumericTypeError: If ``numeric`` cannot produce zero

    Example:
        >>> f(9)
        Ok(value=34)
        >>> f(14, U8)
        Err(max_n=13, max_value=233)
        >>> f(9000, U8).unwrap_or_else(lambda max_n, max_value: max_value)
        233
    """
    _validate_index(n)
    generator = Fibonacci(numeric)

    # Exactly n steps, then one more call: n + 1 is never computed, so
    # n == MAX_INDEX is handled like any other index.
    last: Optional[int] = None
    for i in range(n):
        term = generator.produce_next()
        if term is None:
            if i == 0:
                raise DegenerateNumericTypeError(numeric.name)
            logger.debug(f"F({n}) overflows {numeric.name} after F({i - 1}) = {last}")
            return Err(i - 1, last)
        last = term

    term = generator.produce_next()
    if term is None:
        if n == 0:
            raise DegenerateNumericTypeError(numeric.name)
        logger.debug(f"F({n}) overflows {numeric.name} after F({n - 1}) = {last}")
        return Err(n - 1, last)
    return Ok(term)


def max_term(numeric: Numeric) -> Err:
    """Return the largest representable index and term of a bounded type.

    Raises:
        ValueError: If ``numeric`` is unbounded
    """
    if not getattr(numeric, "bounded", True):
        raise ValueError(f"Numeric type {numeric.name} is unbounded")
    result = f(MAX_INDEX, numeric)
    if result.is_ok():
        raise ValueError(f"Numeric type {numeric.name} did not overflow by F({MAX_INDEX})")
    return result
