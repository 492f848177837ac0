"""Protocol definitions for dependency inversion."""

from typing import Optional, Protocol, runtime_checkable


@runtime_checkable
class Numeric(Protocol):
    """Protocol for the numeric capability a Fibonacci generator runs over.

    Values are plain Python ints; the capability decides which of them are
    representable and reports overflow instead of wrapping.
    """

    name: str

    def zero(self) -> int:
        """Return the additive identity."""
        ...

    def one(self) -> int:
        """Return the multiplicative identity."""
        ...

    def checked_add(self, a: int, b: int) -> Optional[int]:
        """Return ``a + b``, or ``None`` if the sum is not representable."""
        ...


class LoggerProtocol(Protocol):
    """Protocol for logging."""

    def info(self, message: str) -> None:
        """Log info message."""
        ...

    def debug(self, message: str) -> None:
        """Log debug message."""
        ...

    def warning(self, message: str) -> None:
        """Log warning message."""
        ...

    def error(self, message: str) -> None:
        """Log error message."""
        ...
