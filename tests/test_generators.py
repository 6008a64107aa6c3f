"""Tests for the lazy sequence generators."""

from itertools import islice

import pytest

from lazyseq.errors import InvalidArgumentError, SequenceOverflowError
from lazyseq.sequence.generators import (
    CachedSequence,
    LazySequence,
    fibonacci,
    fibonacci_number,
    iterate,
    recursive_fibonacci,
    signed_range,
)
from lazyseq.sequence.models import NumericMode

F_100 = 354224848179261915075


def test_first_fibonacci_numbers():
    """Test the first values match F(0)=0, F(1)=1."""
    assert list(fibonacci().take(10)) == [0, 1, 1, 2, 3, 5, 8, 13, 21, 34]


def test_nth_matches_definition():
    """Test nth against the recursive definition for small indices."""
    fib = fibonacci()
    for n in range(20):
        assert fib.nth(n) == recursive_fibonacci(n)


def test_nth_index_zero_returns_seed_value():
    """Test index 0 returns the first emitted value."""
    assert fibonacci().nth(0) == 0


def test_large_index_uses_arbitrary_precision():
    """Test values far beyond 64 bits are exact."""
    fib = fibonacci()
    assert fib.nth(100) == F_100
    f_1000 = fib.nth(1000)
    assert len(str(f_1000)) == 209
    assert f_1000 % 1000 == 875


def test_nth_agrees_with_iterative_computation():
    """Test the lazy sequence and the single-value loop agree."""
    assert fibonacci().nth(5000) == fibonacci_number(5000)


def test_restart_is_deterministic():
    """Test independent iterations yield identical values."""
    fib = fibonacci()
    assert fib.nth(300) == fib.nth(300)
    assert list(fib.take(50)) == list(fib.take(50))


def test_iterators_do_not_share_state():
    """Test advancing one iterator leaves another untouched."""
    fib = fibonacci()
    first = iter(fib)
    second = iter(fib)
    for _ in range(10):
        next(first)
    assert next(second) == 0
    assert next(first) == 55


def test_take_and_drop():
    """Test lazy prefix and suffix helpers."""
    fib = fibonacci()
    assert list(islice(fib.drop(5), 3)) == [5, 8, 13]
    assert list(fib.take(0)) == []


def test_indexing_and_slicing():
    """Test item access sugar."""
    fib = fibonacci()
    assert fib[10] == 55
    assert list(fib[5:10]) == [5, 8, 13, 21, 34]
    assert list(fib[0:10:3]) == [0, 2, 8, 34]
    assert list(islice(fib[3:], 2)) == [2, 3]


@pytest.mark.parametrize("bad", [-1, -100])
def test_negative_index_is_rejected(bad):
    """Test negative indices raise InvalidArgumentError."""
    with pytest.raises(InvalidArgumentError):
        fibonacci().nth(bad)


@pytest.mark.parametrize("bad", ["3", 1.0, True, None])
def test_non_integer_index_is_rejected(bad):
    """Test non-integer indices raise InvalidArgumentError."""
    with pytest.raises(InvalidArgumentError):
        fibonacci().nth(bad)


def test_invalid_counts_and_slices():
    """Test negative counts and bad slice bounds are rejected."""
    fib = fibonacci()
    with pytest.raises(InvalidArgumentError):
        fib.take(-1)
    with pytest.raises(InvalidArgumentError):
        fib.drop(-1)
    with pytest.raises(InvalidArgumentError):
        fib[-1]
    with pytest.raises(InvalidArgumentError):
        fib[::0]
    with pytest.raises(InvalidArgumentError):
        fib[-5:]


def test_invalid_argument_is_value_error():
    """Test callers can catch InvalidArgumentError as ValueError."""
    with pytest.raises(ValueError):
        fibonacci().nth(-1)


def test_signed_range():
    """Test two's-complement bounds."""
    assert signed_range(8) == (-128, 127)
    assert signed_range(64) == (-(2**63), 2**63 - 1)


def test_fixed_width_64_bit_boundary():
    """Test F(92) fits in 64 bits and F(93) overflows."""
    fib = fibonacci(bits=64)
    assert fib.mode is NumericMode.FIXED_WIDTH
    assert fib.nth(92) == 7540113804746346429

    with pytest.raises(SequenceOverflowError) as excinfo:
        fib.nth(93)
    assert excinfo.value.index == 93
    assert excinfo.value.bits == 64
    assert excinfo.value.value == fibonacci_number(93)


def test_fixed_width_overflow_stops_iteration_at_first_bad_value():
    """Test values before the overflow are emitted normally."""
    emitted = []
    with pytest.raises(SequenceOverflowError):
        for value in fibonacci(bits=8):
            emitted.append(value)
    assert emitted[-1] == 89
    assert len(emitted) == 12


def test_overflow_error_is_overflow_error():
    """Test SequenceOverflowError is an OverflowError."""
    with pytest.raises(OverflowError):
        fibonacci(bits=8).nth(20)


def test_arbitrary_mode_is_default():
    """Test default mode is arbitrary precision."""
    fib = fibonacci()
    assert fib.mode is NumericMode.ARBITRARY
    assert fib.bits is None


@pytest.mark.parametrize("bits", [0, 1, -8, "64"])
def test_invalid_bits(bits):
    """Test unusable integer widths are rejected."""
    with pytest.raises(InvalidArgumentError):
        fibonacci(bits=bits)


def test_custom_transition_rule():
    """Test a caller-supplied seed and rule."""
    powers_of_two = LazySequence(1, lambda n: (n, n * 2), name="powers")
    assert list(powers_of_two.take(6)) == [1, 2, 4, 8, 16, 32]
    assert powers_of_two.nth(100) == 2**100


def test_from_step():
    """Test building a sequence from a step function."""
    whole_numbers = LazySequence.from_step(lambda n: n + 1, 1)
    assert list(whole_numbers.take(5)) == [1, 2, 3, 4, 5]


def test_iterate_pairs():
    """Test the generic iterate generator on Fibonacci pairs."""
    pairs = iterate(lambda p: (p[1], p[0] + p[1]), (0, 1))
    assert list(islice(pairs, 5)) == [(0, 1), (1, 1), (1, 2), (2, 3), (3, 5)]


def test_cached_sequence_retains_realized_values():
    """Test the cache grows only as far as requested."""
    cache = CachedSequence(fibonacci())
    assert len(cache) == 0
    assert cache.nth(10) == 55
    assert len(cache) == 11
    assert cache[3] == 2
    assert len(cache) == 11
    assert list(islice(cache, 12)) == list(fibonacci().take(12))
    assert len(cache) == 12

    cache.clear()
    assert len(cache) == 0
    assert cache.nth(5) == 5


def test_fibonacci_number_rejects_negative():
    """Test the single-value helper validates its input."""
    with pytest.raises(InvalidArgumentError):
        fibonacci_number(-1)
    with pytest.raises(InvalidArgumentError):
        recursive_fibonacci(-1)


def test_cached_sequence_repeats_overflow():
    """Test a cache keeps raising the overflow that ended its iterator."""
    cache = CachedSequence(fibonacci(bits=8))
    with pytest.raises(SequenceOverflowError):
        cache.nth(20)
    with pytest.raises(SequenceOverflowError) as excinfo:
        cache.nth(20)
    assert excinfo.value.index == 12

    # Values realized before the overflow stay available.
    assert cache.nth(11) == 89
    assert len(cache) == 12

    with pytest.raises(SequenceOverflowError):
        list(cache)

    cache.clear()
    assert cache.nth(5) == 5
    with pytest.raises(SequenceOverflowError):
        cache.nth(12)
