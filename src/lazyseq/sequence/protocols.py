"""Protocol definitions for dependency inversion."""

from typing import Any, Iterator, Protocol, Tuple

import pandas as pd

from .models import WriteStatistics


class TransitionRule(Protocol):
    """Maps a carry state to the value it emits and the next carry state."""

    def __call__(self, state: Any) -> Tuple[Any, Any]:
        ...


class Predicate(Protocol):
    """Pure element test."""

    def __call__(self, element: Any) -> bool:
        ...


class DataWriter(Protocol):
    """Protocol for data writers."""

    def write(self, dataframes: Iterator[pd.DataFrame]) -> WriteStatistics:
        """Write dataframes to output."""
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
