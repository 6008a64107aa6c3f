"""Lazy, restartable numeric sequences."""

import logging
from itertools import islice
from typing import Any, Callable, Iterator, List, Optional, Tuple

from ..errors import InvalidArgumentError, SequenceOverflowError
from .models import NumericMode
from .protocols import TransitionRule
from .validation import non_negative_int, positive_int

logger = logging.getLogger(__name__)


def signed_range(bits: int) -> Tuple[int, int]:
    """Return the inclusive bounds of a signed two's-complement integer."""
    return -(1 << (bits - 1)), (1 << (bits - 1)) - 1


def iterate(step: Callable[[Any], Any], seed: Any) -> Iterator[Any]:
    """
    Yield seed, step(seed), step(step(seed)), ... forever.

    Args:
        step: Pure function applied to the previous value
        seed: First value

    Yields:
        Successive applications of ``step``
    """
    value = seed
    while True:
        yield value
        value = step(value)


class LazySequence:
    """
    An unbounded sequence described by a seed state and a transition rule.

    The object itself holds no realized values. Every call to ``iter()``
    starts a fresh generator from the seed, and that generator keeps only
    the current carry state, so consumed elements are free to be collected
    as soon as the caller drops them.

    With ``bits`` set, every emitted value is range-checked against a
    signed integer of that width and ``SequenceOverflowError`` is raised
    for the first value that does not fit.
    """

    def __init__(
        self,
        seed: Any,
        transition: TransitionRule,
        bits: Optional[int] = None,
        name: str = "sequence",
    ):
        """
        Initialize the sequence.

        Args:
            seed: Initial carry state
            transition: Function mapping state to (emitted value, next state)
            bits: Width of the signed integer type for fixed-width mode,
                or None for arbitrary precision
            name: Label used in logs and repr
        """
        if bits is not None:
            bits = positive_int("bits", bits)
            if bits < 2:
                raise InvalidArgumentError("bits must be at least 2")
        self._seed = seed
        self._transition = transition
        self._bits = bits
        self.name = name

    @classmethod
    def from_step(
        cls,
        step: Callable[[Any], Any],
        seed: Any,
        bits: Optional[int] = None,
        name: str = "sequence",
    ) -> "LazySequence":
        """Build a sequence that emits seed, step(seed), ... (see ``iterate``)."""
        return cls(seed, lambda value: (value, step(value)), bits=bits, name=name)

    @property
    def seed(self) -> Any:
        return self._seed

    @property
    def bits(self) -> Optional[int]:
        return self._bits

    @property
    def mode(self) -> NumericMode:
        if self._bits is None:
            return NumericMode.ARBITRARY
        return NumericMode.FIXED_WIDTH

    def __iter__(self) -> Iterator[Any]:
        if self._bits is None:
            return self._generate()
        return self._generate_checked(self._bits)

    def _generate(self) -> Iterator[Any]:
        state = self._seed
        while True:
            value, state = self._transition(state)
            yield value

    def _generate_checked(self, bits: int) -> Iterator[Any]:
        low, high = signed_range(bits)
        state = self._seed
        index = 0
        while True:
            value, state = self._transition(state)
            if not low <= value <= high:
                logger.debug(f"{self.name}: overflow of {bits}-bit range at index {index}")
                raise SequenceOverflowError(value, bits, index)
            yield value
            index += 1

    def nth(self, index: int) -> Any:
        """
        Return the element at ``index``.

        Walks a fresh generator and discards the prefix as it goes, so only
        the carry state is alive at any time.

        Args:
            index: Zero-based position, any non-negative integer

        Returns:
            The element at that position

        Raises:
            InvalidArgumentError: If index is negative or not an integer
            SequenceOverflowError: In fixed-width mode, if any value up to
                and including ``index`` does not fit
        """
        index = non_negative_int("index", index)
        logger.debug(f"{self.name}: realizing element {index:,}")
        return next(islice(iter(self), index, None))

    def take(self, count: int) -> Iterator[Any]:
        """Lazily yield the first ``count`` elements."""
        count = non_negative_int("count", count)
        return islice(iter(self), count)

    def drop(self, count: int) -> Iterator[Any]:
        """Lazily yield every element after the first ``count``."""
        count = non_negative_int("count", count)
        return islice(iter(self), count, None)

    def __getitem__(self, key):
        if isinstance(key, slice):
            start = 0 if key.start is None else non_negative_int("start", key.start)
            stop = None if key.stop is None else non_negative_int("stop", key.stop)
            step = 1 if key.step is None else positive_int("step", key.step)
            return islice(iter(self), start, stop, step)
        return self.nth(key)

    def __repr__(self) -> str:
        return f"LazySequence(name={self.name!r}, mode={self.mode.value}, bits={self._bits})"


class CachedSequence:
    """
    Memoizing view over a LazySequence.

    Every realized value is kept for as long as this object is alive. Use it
    only when repeated random access to a bounded prefix is worth holding
    that prefix in memory; drop the object to release it.
    """

    def __init__(self, sequence: LazySequence):
        self._sequence = sequence
        self._iterator = iter(sequence)
        self._values: List[Any] = []
        self._overflow: Optional[SequenceOverflowError] = None

    def __len__(self) -> int:
        """Number of values realized so far."""
        return len(self._values)

    def _realize_through(self, index: int) -> None:
        # A finished iterator cannot resume; replay the overflow that ended it.
        if self._overflow is not None and index >= len(self._values):
            raise self._overflow
        while len(self._values) <= index:
            try:
                self._values.append(next(self._iterator))
            except SequenceOverflowError as e:
                self._overflow = e
                raise

    def nth(self, index: int) -> Any:
        index = non_negative_int("index", index)
        self._realize_through(index)
        return self._values[index]

    def __getitem__(self, index: int) -> Any:
        return self.nth(index)

    def __iter__(self) -> Iterator[Any]:
        index = 0
        while True:
            self._realize_through(index)
            yield self._values[index]
            index += 1

    def clear(self) -> None:
        """Forget every realized value and restart from the seed."""
        self._values = []
        self._overflow = None
        self._iterator = iter(self._sequence)


def _fibonacci_step(state: Tuple[int, int]) -> Tuple[int, Tuple[int, int]]:
    a, b = state
    return a, (b, a + b)


def fibonacci(bits: Optional[int] = None) -> LazySequence:
    """
    The Fibonacci numbers F(0)=0, F(1)=1, F(n)=F(n-1)+F(n-2).

    Args:
        bits: Opt into fixed-width mode with overflow detection

    Returns:
        A restartable LazySequence
    """
    return LazySequence((0, 1), _fibonacci_step, bits=bits, name="fibonacci")


def fibonacci_number(n: int) -> int:
    """Compute F(n) iteratively with constant stack and carry."""
    n = non_negative_int("n", n)
    a, b = 0, 1
    for _ in range(n):
        a, b = b, a + b
    return a


def recursive_fibonacci(n: int) -> int:
    """
    Textbook doubly-recursive F(n).

    Exponential time and linear stack depth; only for small n.
    """
    n = non_negative_int("n", n)
    if n < 2:
        return n
    return recursive_fibonacci(n - 1) + recursive_fibonacci(n - 2)
