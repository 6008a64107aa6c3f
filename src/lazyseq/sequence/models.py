"""Data models and configuration classes."""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from ..errors import InvalidArgumentError


class Toss(str, Enum):
    """Outcome of a single coin toss."""

    HEADS = "h"
    TAILS = "t"


class NumericMode(str, Enum):
    """Integer representation used by a sequence."""

    ARBITRARY = "arbitrary"
    FIXED_WIDTH = "fixed_width"


@dataclass
class ExportConfig:
    """Sequence export configuration."""

    count: int = 10000
    batch_size: int = 1000
    compression: str = "snappy"
    output_file: Path = field(default_factory=lambda: Path("fibonacci.parquet"))
    csv_copy: bool = False

    @classmethod
    def default(cls) -> "ExportConfig":
        """Create default configuration."""
        return cls()

    def __post_init__(self):
        """Validate configuration after initialization."""
        self.output_file = Path(self.output_file)
        if self.count < 0:
            raise InvalidArgumentError("count must be non-negative")
        if self.batch_size <= 0:
            raise InvalidArgumentError("batch_size must be positive")

    @property
    def csv_file(self) -> Path:
        """Path of the optional CSV copy, next to the Parquet file."""
        return self.output_file.with_suffix(".csv")


@dataclass
class WriteStatistics:
    """Statistics for write operations."""

    total_rows: int = 0
    total_batches: int = 0
    file_size_bytes: int = 0
    elapsed_time: float = 0.0
