"""Exception types raised by lazyseq."""

from typing import Optional


class LazySeqError(Exception):
    """Base class for all lazyseq errors."""


class InvalidArgumentError(LazySeqError, ValueError):
    """Raised when a caller passes an argument outside its valid domain."""


class SequenceOverflowError(LazySeqError, OverflowError):
    """
    Raised when a fixed-width sequence emits a value it cannot represent.

    Attributes:
        value: The offending value
        bits: Width of the signed integer type in use
        index: Position of the value in the sequence, when known
    """

    def __init__(self, value: int, bits: int, index: Optional[int] = None):
        self.value = value
        self.bits = bits
        self.index = index
        where = f" at index {index}" if index is not None else ""
        super().__init__(
            f"value{where} does not fit in a signed {bits}-bit integer "
            f"({len(str(abs(value)))} digits)"
        )
