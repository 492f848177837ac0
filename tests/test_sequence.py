"""Tests for sequence module."""

import copy
from itertools import islice

import pytest

from fibs import (
    BIG,
    I8,
    I16,
    I32,
    I64,
    I128,
    MAX_INDEX,
    U8,
    U16,
    U32,
    U64,
    U128,
    DegenerateNumericTypeError,
    Err,
    Fibonacci,
    GeneratorState,
    Ok,
    f,
    max_term,
)

FIRST_TERMS = [0, 1, 1, 2, 3, 5, 8, 13, 21, 34, 55, 89, 144, 233]

KNOWN_MAX = [
    (I8, 11, 89),
    (U8, 13, 233),
    (I16, 23, 28657),
    (U16, 24, 46368),
    (I32, 46, 1836311903),
    (U32, 47, 2971215073),
    (I64, 92, 7540113804746346429),
    (U64, 93, 12200160415121876738),
    (I128, 184, 127127879743834334146972278486287885163),
    (U128, 186, 332825110087067562321196029789634457848),
]


class ZerolessNumeric:
    """Broken numeric type that cannot produce zero."""

    name = "zeroless"

    def zero(self):
        return None

    def one(self):
        return 1

    def checked_add(self, a, b):
        return a + b


class SingleTermNumeric:
    """Numeric type whose additions always overflow."""

    name = "single"

    def zero(self):
        return 0

    def one(self):
        return 1

    def checked_add(self, a, b):
        return None


def test_sanity():
    """Test the first few lookups and iterator steps."""
    assert f(0) == Ok(0)
    assert f(1) == Ok(1)
    assert f(2) == Ok(1)
    assert f(3) == Ok(2)

    assert f(13, U8) == Ok(233), "Must reach the largest value that fits the type"

    generator = Fibonacci.default()
    assert next(generator) == 0
    assert next(generator) == 1
    assert next(generator) == 1
    assert next(generator) == 2


@pytest.mark.parametrize(
    "numeric,max_n,expected", KNOWN_MAX, ids=[t.name for t, _, _ in KNOWN_MAX]
)
def test_known_max(numeric, max_n, expected):
    """Test the largest representable term and the saturating failure."""
    assert f(max_n, numeric) == Ok(expected)
    assert f(max_n + 1, numeric) == Err(max_n, expected)
    assert f(max_n + 2, numeric) == Err(max_n, expected)
    assert f(MAX_INDEX, numeric) == Err(max_n, expected)
    assert max_term(numeric) == Err(max_n, expected)


def test_u8_boundaries():
    """Test the u8 boundary examples."""
    assert f(13, U8) == Ok(233)
    assert f(14, U8) == Err(13, 233)
    assert f(MAX_INDEX, U8) == Err(13, 233)


def test_u64_boundaries():
    """Test the u64 boundary examples."""
    assert f(93, U64) == Ok(12200160415121876738)
    assert f(94, U64) == Err(93, 12200160415121876738)


def test_lookup_matches_standard_sequence():
    """Test every representable u8 index against the standard sequence."""
    for n, expected in enumerate(FIRST_TERMS):
        assert f(n, U8) == Ok(expected)


def test_lookup_matches_iterator():
    """Test that f(n) equals the (n+1)-th value produced by a fresh iterator."""
    for numeric in (U8, I16, U64):
        for n in range(100):
            produced = list(islice(Fibonacci(numeric), n + 1))
            expected = produced[-1] if len(produced) == n + 1 else None
            assert f(n, numeric).ok() == expected


def test_u8_iterator_exhausts():
    """Test that a u8 iterator emits exactly 14 values."""
    assert list(Fibonacci(U8)) == FIRST_TERMS


def test_u16_iterator_exhausts():
    """Test that wider types produce more terms."""
    assert list(Fibonacci(U16)) == FIRST_TERMS + [
        377, 610, 987, 1597, 2584, 4181, 6765, 10946, 17711, 28657, 46368,
    ]


def test_fused_termination():
    """Test that an exhausted generator stays exhausted."""
    generator = Fibonacci(U8)
    for _ in FIRST_TERMS:
        assert generator.produce_next() is not None

    for _ in range(5):
        assert generator.produce_next() is None
        with pytest.raises(StopIteration):
            next(generator)


def test_state_transitions():
    """Test the fresh, producing and exhausted states."""
    generator = Fibonacci(U8)
    assert generator.state is GeneratorState.FRESH
    assert generator.previous is None
    assert generator.current is None

    assert generator.produce_next() == 0
    assert generator.state is GeneratorState.PRODUCING

    for _ in range(12):
        generator.produce_next()
    assert generator.state is GeneratorState.PRODUCING
    assert not generator.has_overflowed

    # F(13) = 233 is still returned; computing F(14) overflows
    assert generator.produce_next() == 233
    assert generator.state is GeneratorState.EXHAUSTED
    assert generator.has_overflowed
    assert generator.previous == 233
    assert generator.current is None

    assert generator.produce_next() is None
    assert generator.state is GeneratorState.EXHAUSTED
    assert generator.previous == 233


def test_skip_and_take():
    """Test slicing the iterator."""
    assert list(islice(Fibonacci(), 3, 8)) == [2, 3, 5, 8, 13]
    assert list(islice(Fibonacci(), 10))[-1] == 34
    assert f(9).ok() == 34


def test_reuse_iterator_for_several_indices():
    """Test picking several indices from one iterator."""
    picked = [value for n, value in enumerate(Fibonacci(U8)) if n in (3, 4, 9)]
    assert picked == [f(3, U8).unwrap(), f(4, U8).unwrap(), f(9, U8).unwrap()]
    assert picked == [2, 3, 34]


def test_copy_is_independent():
    """Test that a copied generator advances independently."""
    generator = Fibonacci(U8)
    for _ in range(5):
        next(generator)

    clone = generator.copy()
    assert next(clone) == 5
    assert next(clone) == 8
    assert next(generator) == 5

    other = copy.copy(generator)
    assert other.state is generator.state
    assert other.previous == generator.previous
    assert other.current == generator.current


def test_repr():
    """Test the debug representation."""
    generator = Fibonacci(U8)
    assert repr(generator) == "Fibonacci(numeric=u8, state=fresh, previous=None, current=None)"
    next(generator)
    assert repr(generator) == "Fibonacci(numeric=u8, state=producing, previous=0, current=1)"


def test_classmethod_lookup():
    """Test Fibonacci.f delegates to f."""
    assert Fibonacci.f(9) == Ok(34)
    assert Fibonacci.f(14, U8) == Err(13, 233)


def test_big_integer():
    """Test lookups past every fixed-width type."""
    assert f(187, BIG) == Ok(538522340430300790495419781092981030533)
    assert str(f(1000, BIG).unwrap()) == (
        "434665576869374564356885276750406258025646605173717804024817290895365554179490518904038"
        "798400792551692959225930803226347752096896232398733224711616429964409065331879382989696"
        "49928516003704476137795166849228875"
    )


def test_max_term_rejects_unbounded():
    """Test that max_term refuses unbounded types."""
    with pytest.raises(ValueError, match="unbounded"):
        max_term(BIG)


def test_single_term_capacity():
    """Test a type whose first addition already overflows."""
    numeric = SingleTermNumeric()
    assert f(0, numeric) == Ok(0)
    assert f(1, numeric) == Err(0, 0)
    assert f(MAX_INDEX, numeric) == Err(0, 0)
    assert list(Fibonacci(numeric)) == [0]


def test_degenerate_numeric_type():
    """Test that a type without zero is a fatal error."""
    with pytest.raises(DegenerateNumericTypeError, match="zeroless"):
        f(0, ZerolessNumeric())

    with pytest.raises(DegenerateNumericTypeError, match="zeroless"):
        f(5, ZerolessNumeric())

    with pytest.raises(DegenerateNumericTypeError):
        next(Fibonacci(ZerolessNumeric()))


@pytest.mark.parametrize("n", ["3", 1.5, None, True])
def test_index_must_be_int(n):
    """Test that non-int indices are rejected."""
    with pytest.raises(TypeError):
        f(n)


@pytest.mark.parametrize("n", [-1, MAX_INDEX + 1])
def test_index_out_of_range(n):
    """Test that indices outside [0, MAX_INDEX] are rejected."""
    with pytest.raises(ValueError):
        f(n)
