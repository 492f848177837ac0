"""fibs - Fibonacci numbers with explicit overflow detection."""

__version__ = "0.1.0"

from .errors import (
    CapacityExceededError,
    DegenerateNumericTypeError,
    FibsError,
    UnknownNumericTypeError,
)
from .models import Err, GeneratorState, Ok
from .numeric import (
    BIG,
    I8,
    I16,
    I32,
    I64,
    I128,
    U8,
    U16,
    U32,
    U64,
    U128,
    ArrowInteger,
    BigInteger,
    BoundedInteger,
    get_numeric_type,
)
from .protocols import Numeric
from .sequence import MAX_INDEX, Fibonacci, f, max_term

__all__ = [
    # Sequence
    "Fibonacci",
    "f",
    "max_term",
    "MAX_INDEX",
    # Results
    "Ok",
    "Err",
    "GeneratorState",
    # Numeric types
    "Numeric",
    "BoundedInteger",
    "ArrowInteger",
    "BigInteger",
    "get_numeric_type",
    "I8",
    "U8",
    "I16",
    "U16",
    "I32",
    "U32",
    "I64",
    "U64",
    "I128",
    "U128",
    "BIG",
    # Errors
    "FibsError",
    "CapacityExceededError",
    "DegenerateNumericTypeError",
    "UnknownNumericTypeError",
]
