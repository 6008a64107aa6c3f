"""Lazy sequences, run counting and sequence export."""

from .generators import (
    CachedSequence,
    LazySequence,
    fibonacci,
    fibonacci_number,
    iterate,
    recursive_fibonacci,
    signed_range,
)
from .models import ExportConfig, NumericMode, Toss, WriteStatistics
from .pipeline import ExportPipeline, SequenceComparator
from .processors import DataFrameTransformer, SequenceBatcher
from .protocols import DataWriter, LoggerProtocol, Predicate, TransitionRule
from .runs import (
    by_pairs,
    complement,
    count_head_pairs,
    count_if,
    count_runs,
    count_runs_by_windows,
    equals,
    member_of,
    sliding_windows,
)
from .utils import FileComparator, MemoryProfiler, ParquetReader
from .writers import CSVWriter, DualWriter, ParquetWriter

__all__ = [
    # Models
    "ExportConfig",
    "NumericMode",
    "Toss",
    "WriteStatistics",
    # Protocols
    "DataWriter",
    "LoggerProtocol",
    "Predicate",
    "TransitionRule",
    # Generators
    "CachedSequence",
    "LazySequence",
    "fibonacci",
    "fibonacci_number",
    "iterate",
    "recursive_fibonacci",
    "signed_range",
    # Runs
    "by_pairs",
    "complement",
    "count_head_pairs",
    "count_if",
    "count_runs",
    "count_runs_by_windows",
    "equals",
    "member_of",
    "sliding_windows",
    # Processors
    "SequenceBatcher",
    "DataFrameTransformer",
    # Writers
    "ParquetWriter",
    "CSVWriter",
    "DualWriter",
    # Utils
    "FileComparator",
    "ParquetReader",
    "MemoryProfiler",
    # Pipeline
    "ExportPipeline",
    "SequenceComparator",
]
