"""lazyseq - Lazy numeric sequences and streaming run counting."""

__version__ = "0.1.0"

from .errors import InvalidArgumentError, LazySeqError, SequenceOverflowError
from .sequence.generators import CachedSequence, LazySequence, fibonacci
from .sequence.runs import count_runs, member_of, sliding_windows
from .toss_generator import TossGenerator

__all__ = [
    "CachedSequence",
    "InvalidArgumentError",
    "LazySeqError",
    "LazySequence",
    "SequenceOverflowError",
    "TossGenerator",
    "count_runs",
    "fibonacci",
    "member_of",
    "sliding_windows",
]
