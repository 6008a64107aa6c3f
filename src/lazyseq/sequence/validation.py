"""Argument checks shared by the sequence and run utilities."""

import operator
from typing import Any

from ..errors import InvalidArgumentError


def as_int(name: str, value: Any) -> int:
    """Coerce an integer-like value, rejecting bools, floats and strings."""
    if isinstance(value, bool):
        raise InvalidArgumentError(f"{name} must be an integer, got {value!r}")
    try:
        return operator.index(value)
    except TypeError:
        raise InvalidArgumentError(
            f"{name} must be an integer, got {type(value).__name__}"
        ) from None


def non_negative_int(name: str, value: Any) -> int:
    number = as_int(name, value)
    if number < 0:
        raise InvalidArgumentError(f"{name} must be non-negative, got {number}")
    return number


def positive_int(name: str, value: Any) -> int:
    number = as_int(name, value)
    if number <= 0:
        raise InvalidArgumentError(f"{name} must be positive, got {number}")
    return number
