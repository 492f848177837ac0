"""Concrete numeric types with checked addition."""

import logging
from dataclasses import dataclass
from typing import Dict, Optional

import pyarrow as pa
import pyarrow.compute as pc

from .errors import UnknownNumericTypeError
from .protocols import Numeric

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BoundedInteger:
    """Fixed-width two's-complement integer.

    ``checked_add`` returns ``None`` as soon as a sum leaves
    ``[min_value, max_value]``; nothing is ever wrapped.
    """

    bits: int
    signed: bool

    bounded = True

    def __post_init__(self):
        """Validate the width."""
        if self.bits <= 0:
            raise ValueError("bits must be positive")

    @classmethod
    def signed_of(cls, bits: int) -> "BoundedInteger":
        """Create a signed integer type of the given width."""
        return cls(bits=bits, signed=True)

    @classmethod
    def unsigned_of(cls, bits: int) -> "BoundedInteger":
        """Create an unsigned integer type of the given width."""
        return cls(bits=bits, signed=False)

    @property
    def name(self) -> str:
        return f"{'i' if self.signed else 'u'}{self.bits}"

    @property
    def min_value(self) -> int:
        return -(1 << (self.bits - 1)) if self.signed else 0

    @property
    def max_value(self) -> int:
        return (1 << (self.bits - 1)) - 1 if self.signed else (1 << self.bits) - 1

    def zero(self) -> int:
        return 0

    def one(self) -> int:
        return 1

    def checked_add(self, a: int, b: int) -> Optional[int]:
        total = a + b
        if total < self.min_value or total > self.max_value:
            return None
        return total


class ArrowInteger:
    """Integer type backed by a pyarrow integer ``DataType``.

    Additions go through ``pyarrow.compute.add_checked``, which raises
    ``ArrowInvalid`` on overflow; that is reported as ``None``.
    """

    bounded = True

    def __init__(self, data_type: pa.DataType):
        """Initialize the Arrow-backed numeric type.

        Args:
            data_type: A pyarrow integer type such as ``pa.uint8()``

        Raises:
            TypeError: If ``data_type`` is not an integer type
        """
        if not pa.types.is_integer(data_type):
            raise TypeError(f"Expected a pyarrow integer type, got {data_type}")
        self.data_type = data_type

    @property
    def name(self) -> str:
        return f"arrow:{self.data_type}"

    def zero(self) -> int:
        return pa.scalar(0, type=self.data_type).as_py()

    def one(self) -> int:
        return pa.scalar(1, type=self.data_type).as_py()

    def checked_add(self, a: int, b: int) -> Optional[int]:
        try:
            total = pc.add_checked(
                pa.scalar(a, type=self.data_type), pa.scalar(b, type=self.data_type)
            )
        except pa.ArrowInvalid:
            logger.debug(f"{self.name}: {a} + {b} overflows")
            return None
        return total.as_py()

    def __eq__(self, other):
        return isinstance(other, ArrowInteger) and self.data_type.equals(other.data_type)

    def __hash__(self):
        return hash(("arrow", str(self.data_type)))

    def __repr__(self):
        return f"ArrowInteger({self.data_type!r})"


@dataclass(frozen=True)
class BigInteger:
    """Arbitrary-precision integer; addition never overflows."""

    name: str = "big"
    bounded = False

    def zero(self) -> int:
        return 0

    def one(self) -> int:
        return 1

    def checked_add(self, a: int, b: int) -> Optional[int]:
        return a + b


I8 = BoundedInteger.signed_of(8)
U8 = BoundedInteger.unsigned_of(8)
I16 = BoundedInteger.signed_of(16)
U16 = BoundedInteger.unsigned_of(16)
I32 = BoundedInteger.signed_of(32)
U32 = BoundedInteger.unsigned_of(32)
I64 = BoundedInteger.signed_of(64)
U64 = BoundedInteger.unsigned_of(64)
I128 = BoundedInteger.signed_of(128)
U128 = BoundedInteger.unsigned_of(128)
BIG = BigInteger()

BOUNDED_TYPES = (I8, U8, I16, U16, I32, U32, I64, U64, I128, U128)

_ARROW_TYPES: Dict[str, pa.DataType] = {
    "int8": pa.int8(),
    "uint8": pa.uint8(),
    "int16": pa.int16(),
    "uint16": pa.uint16(),
    "int32": pa.int32(),
    "uint32": pa.uint32(),
    "int64": pa.int64(),
    "uint64": pa.uint64(),
}

_NUMERIC_TYPES: Dict[str, Numeric] = {t.name: t for t in BOUNDED_TYPES}
_NUMERIC_TYPES.update(
    {f"{'int' if t.signed else 'uint'}{t.bits}": t for t in BOUNDED_TYPES}
)
_NUMERIC_TYPES["big"] = BIG


def get_numeric_type(name: str) -> Numeric:
    """Resolve a numeric type by name.

    Accepts short names (``u8``, ``i128``), long names (``uint8``),
    ``big``, and Arrow-backed names (``arrow:uint16``).

    Raises:
        UnknownNumericTypeError: If the name is not recognised
    """
    key = name.strip().lower()
    if key.startswith("arrow:"):
        arrow_name = key[len("arrow:"):]
        if arrow_name not in _ARROW_TYPES:
            raise UnknownNumericTypeError(
                f"Unknown Arrow integer type: {arrow_name}. "
                f"Valid options: {', '.join(_ARROW_TYPES)}"
            )
        return ArrowInteger(_ARROW_TYPES[arrow_name])
    if key not in _NUMERIC_TYPES:
        raise UnknownNumericTypeError(
            f"Unknown numeric type: {name}. Valid options: {', '.join(_NUMERIC_TYPES)}"
        )
    return _NUMERIC_TYPES[key]


def arrow_type_for(numeric: Numeric) -> Optional[pa.DataType]:
    """Return the Arrow integer type that holds every value of ``numeric``.

    Returns ``None`` when no native Arrow integer is wide enough.
    """
    if isinstance(numeric, ArrowInteger):
        return numeric.data_type
    if isinstance(numeric, BoundedInteger):
        long_name = f"{'int' if numeric.signed else 'uint'}{numeric.bits}"
        return _ARROW_TYPES.get(long_name)
    return None
