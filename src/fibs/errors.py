"""Exceptions raised by the fibs package."""

from typing import Any


class FibsError(Exception):
    """Base class for all fibs errors."""


class CapacityExceededError(FibsError, OverflowError):
    """Raised when an ``Err`` result is unwrapped.

    ``f`` itself never raises this; running past the capacity of a numeric
    type is a normal outcome reported through ``Err``.
    """

    def __init__(self, max_n: int, max_value: Any):
        self.max_n = max_n
        self.max_value = max_value
        super().__init__(
            f"Fibonacci term overflows the numeric type; "
            f"largest representable is F({max_n}) = {max_value}"
        )


class DegenerateNumericTypeError(FibsError, RuntimeError):
    """Raised when a numeric type cannot even produce its own zero."""

    def __init__(self, type_name: str):
        self.type_name = type_name
        super().__init__(f"Numeric type {type_name} could not produce F(0) = 0")


class UnknownNumericTypeError(FibsError, ValueError):
    """Raised when a numeric type name cannot be resolved."""
