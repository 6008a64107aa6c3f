"""Counting runs of predicate-matching elements over streamed sources."""

from collections import deque
from functools import partial
from typing import Any, Callable, Container, Iterable, Iterator, Tuple

from .models import Toss
from .protocols import Predicate
from .validation import positive_int


def equals(value: Any) -> Predicate:
    """Predicate matching elements equal to ``value``."""

    def matches(element: Any) -> bool:
        return element == value

    return matches


def member_of(values: Container) -> Predicate:
    """Predicate matching elements contained in ``values`` (e.g. a set)."""

    def matches(element: Any) -> bool:
        return element in values

    return matches


def complement(predicate: Callable[[Any], bool]) -> Predicate:
    """Predicate matching exactly the elements ``predicate`` rejects."""

    def matches(element: Any) -> bool:
        return not predicate(element)

    return matches


def count_if(predicate: Callable[[Any], bool], source: Iterable[Any]) -> int:
    """Count the items of ``source`` for which ``predicate`` holds."""
    return sum(1 for item in source if predicate(item))


def sliding_windows(
    source: Iterable[Any], window_length: int, step: int = 1
) -> Iterator[Tuple[Any, ...]]:
    """
    Yield complete windows of ``source`` in order.

    Windows start every ``step`` elements; a trailing partial window is
    never produced. Only the last ``window_length`` elements are buffered.

    Args:
        source: Any iterable, including unbounded generators
        window_length: Size of each window
        step: Offset between the starts of consecutive windows

    Yields:
        Tuples of ``window_length`` elements

    Raises:
        InvalidArgumentError: If window_length or step is not positive
    """
    window_length = positive_int("window_length", window_length)
    step = positive_int("step", step)
    return _sliding_windows(source, window_length, step)


def _sliding_windows(
    source: Iterable[Any], window_length: int, step: int
) -> Iterator[Tuple[Any, ...]]:
    window: deque = deque(maxlen=window_length)
    skip = 0
    for element in source:
        window.append(element)
        if len(window) < window_length:
            continue
        if skip:
            skip -= 1
            continue
        yield tuple(window)
        skip = step - 1


def count_runs(
    window_length: int,
    predicate: Callable[[Any], bool],
    source: Iterable[Any],
    step: int = 1,
) -> int:
    """
    Count windows of ``window_length`` whose every element satisfies ``predicate``.

    ``source`` is consumed once, left to right. The predicate runs once per
    element and only the length of the current streak of matches is kept:
    a window matches iff that streak reaches ``window_length`` at the
    window's last element.

    Args:
        window_length: Size of each window, positive
        predicate: Pure element test
        source: Any iterable, including lazily produced ones
        step: Offset between the starts of consecutive windows

    Returns:
        Number of matching windows, 0 if source is shorter than a window

    Raises:
        InvalidArgumentError: If window_length or step is not positive
    """
    window_length = positive_int("window_length", window_length)
    step = positive_int("step", step)

    count = 0
    streak = 0
    # Position of the next window's last element.
    next_end = window_length - 1
    for position, element in enumerate(source):
        streak = streak + 1 if predicate(element) else 0
        if position == next_end:
            if streak >= window_length:
                count += 1
            next_end += step
    return count


def count_runs_by_windows(
    window_length: int,
    predicate: Callable[[Any], bool],
    source: Iterable[Any],
    step: int = 1,
) -> int:
    """Same result as ``count_runs``, computed by testing each window in full."""
    return count_if(
        lambda window: all(predicate(element) for element in window),
        sliding_windows(source, window_length, step),
    )


def by_pairs(source: Iterable[Any]) -> Iterator[Tuple[Any, Any]]:
    """Yield each overlapping pair of consecutive elements."""
    iterator = iter(source)
    missing = object()
    previous = next(iterator, missing)
    if previous is missing:
        return
    for current in iterator:
        yield previous, current
        previous = current


# Overlapping pairs of consecutive heads.
count_head_pairs = partial(count_runs, 2, equals(Toss.HEADS))
