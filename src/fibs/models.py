"""Result types and data models."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Tuple

from .errors import CapacityExceededError


class GeneratorState(str, Enum):
    """Lifecycle of a Fibonacci generator."""

    FRESH = "fresh"
    PRODUCING = "producing"
    EXHAUSTED = "exhausted"


@dataclass(frozen=True)
class Ok:
    """Successful lookup: ``value`` is the requested term."""

    value: Any

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def ok(self) -> Any:
        return self.value

    def err(self) -> None:
        return None

    def unwrap(self) -> Any:
        return self.value

    def unwrap_or_else(self, fallback: Callable[[int, Any], Any]) -> Any:
        return self.value

    def unwrap_err(self) -> Tuple[int, Any]:
        raise ValueError(f"Called unwrap_err() on {self!r}")


@dataclass(frozen=True)
class Err:
    """Failed lookup: the requested term does not fit the numeric type.

    ``max_n`` is the largest index whose term is representable and
    ``max_value`` is that term. Every index past ``max_n`` yields the same
    ``Err``.
    """

    max_n: int
    max_value: Any

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def ok(self) -> None:
        return None

    def err(self) -> Tuple[int, Any]:
        return (self.max_n, self.max_value)

    def unwrap(self) -> Any:
        raise CapacityExceededError(self.max_n, self.max_value)

    def unwrap_or_else(self, fallback: Callable[[int, Any], Any]) -> Any:
        """Return ``fallback(max_n, max_value)``."""
        return fallback(self.max_n, self.max_value)

    def unwrap_err(self) -> Tuple[int, Any]:
        return (self.max_n, self.max_value)


@dataclass
class BenchmarkResult:
    """Timing of repeated ``f(n)`` lookups for one numeric type."""

    name: str
    n: int
    iterations: int
    total_seconds: float = 0.0

    @property
    def mean_seconds(self) -> float:
        return self.total_seconds / self.iterations if self.iterations > 0 else 0.0

    def to_dict(self) -> dict:
        """Convert result to dictionary."""
        return {
            "name": self.name,
            "n": self.n,
            "iterations": self.iterations,
            "total_seconds": self.total_seconds,
            "mean_seconds": self.mean_seconds,
        }
