"""Configuration management for the application."""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from .errors import InvalidArgumentError
from .sequence.models import ExportConfig

# Load environment variables from .env file
load_dotenv()


def _env_bool(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes")


def _env_int(name: str, default: str) -> int:
    raw = os.getenv(name, default)
    try:
        return int(raw)
    except ValueError:
        raise InvalidArgumentError(f"{name} must be an integer, got {raw!r}") from None


@dataclass
class AppConfig:
    """Application configuration parameters."""

    index: int = 1000
    window_length: int = 2
    num_tosses: int = 1000
    seed: int = 42
    fixed_width_bits: Optional[int] = None
    compare_memory: bool = False
    verbose: bool = False

    def __post_init__(self):
        """Validate configuration after initialization."""
        if self.index < 0:
            raise InvalidArgumentError("index must be non-negative")
        if self.window_length <= 0:
            raise InvalidArgumentError("window_length must be positive")
        if self.num_tosses < 0:
            raise InvalidArgumentError("num_tosses must be non-negative")
        if self.fixed_width_bits is not None and self.fixed_width_bits <= 1:
            raise InvalidArgumentError("fixed_width_bits must be greater than 1")

    @classmethod
    def from_env(cls) -> "AppConfig":
        """Load application configuration from environment variables.

        LAZYSEQ_FIXED_WIDTH_BITS left unset (or empty) selects
        arbitrary-precision integers.
        """
        bits = os.getenv("LAZYSEQ_FIXED_WIDTH_BITS") or None
        return cls(
            index=_env_int("LAZYSEQ_INDEX", "1000"),
            window_length=_env_int("LAZYSEQ_WINDOW_LENGTH", "2"),
            num_tosses=_env_int("LAZYSEQ_NUM_TOSSES", "1000"),
            seed=_env_int("LAZYSEQ_SEED", "42"),
            fixed_width_bits=(
                _env_int("LAZYSEQ_FIXED_WIDTH_BITS", bits) if bits else None
            ),
            compare_memory=_env_bool("LAZYSEQ_COMPARE_MEMORY"),
            verbose=_env_bool("LAZYSEQ_VERBOSE"),
        )


def get_app_config() -> AppConfig:
    """Get application configuration."""
    return AppConfig.from_env()


def get_export_config() -> ExportConfig:
    """Get export configuration."""
    return ExportConfig(
        count=_env_int("LAZYSEQ_EXPORT_COUNT", "10000"),
        batch_size=_env_int("LAZYSEQ_BATCH_SIZE", "1000"),
        compression=os.getenv("LAZYSEQ_COMPRESSION", "snappy"),
        output_file=Path(os.getenv("LAZYSEQ_OUTPUT_FILE", "fibonacci.parquet")),
        csv_copy=_env_bool("LAZYSEQ_CSV_COPY"),
    )
