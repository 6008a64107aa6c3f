"""Utility classes for reading exports and profiling memory."""

import gc
import logging
import os
import time
import tracemalloc
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

import pandas as pd
import psutil

from .protocols import LoggerProtocol


class ParquetReader:
    """
    Reads exported sequence files back into memory.

    Single Responsibility: Handle Parquet file reading operations.
    """

    def __init__(self, logger: Optional[LoggerProtocol] = None):
        self._logger = logger or logging.getLogger(__name__)

    def read(self, parquet_path: Path) -> pd.DataFrame:
        """Read an exported file, ordered by position."""
        self._logger.info(f"Reading Parquet file: {parquet_path}")
        df = pd.read_parquet(parquet_path, engine="pyarrow")
        return df.sort_values("position").reset_index(drop=True)

    def read_values(self, parquet_path: Path) -> List[int]:
        """
        Read the value column as Python ints.

        Args:
            parquet_path: Path to an exported Parquet file

        Returns:
            Values ordered by their sequence index
        """
        df = self.read(parquet_path)
        values = [int(v) for v in df["value"]]
        self._logger.info(f"Decoded {len(values):,} values from {parquet_path}")
        return values


class FileComparator:
    """
    Compares the Parquet export against its CSV copy.

    Single Responsibility: Compare files and report differences.
    """

    def __init__(self, logger: Optional[LoggerProtocol] = None):
        self._logger = logger or logging.getLogger(__name__)

    def compare(self, parquet_path: Path, csv_path: Path) -> bool:
        """
        Check that both files hold the same position and value columns.

        Args:
            parquet_path: Path to Parquet export
            csv_path: Path to CSV copy

        Returns:
            True if files match, False otherwise
        """
        self._logger.info(f"Comparing exports: {parquet_path} vs {csv_path}")

        df1 = ParquetReader(self._logger).read(parquet_path)[["position", "value"]]
        df2 = pd.read_csv(csv_path, dtype={"value": str})[["position", "value"]]
        df2 = df2.sort_values("position").reset_index(drop=True)

        if df1.shape != df2.shape:
            self._logger.error(f"Files have different shapes: {df1.shape} vs {df2.shape}")
            return False

        mismatched = int((df1["position"].values != df2["position"].values).sum()) + int(
            (df1["value"].astype(str).values != df2["value"].astype(str).values).sum()
        )
        if mismatched:
            self._logger.error(f"Files contain different data: {mismatched} differences")
            return False

        self._logger.info(f"Files match: {len(df1):,} rows")
        return True


class MemoryProfiler:
    """
    Profiles memory usage for operations.

    Single Responsibility: Track and report memory statistics.
    """

    def __init__(self, logger: Optional[LoggerProtocol] = None):
        self._logger = logger or logging.getLogger(__name__)

    def profile(self, operation_name: str, operation_func: Callable[[], Any]) -> Dict:
        """
        Profile memory usage of an operation.

        Python allocations are traced with tracemalloc; process-wide figures
        come from psutil.

        Args:
            operation_name: Name of the operation
            operation_func: Zero-argument callable to execute

        Returns:
            Dictionary with memory statistics and the operation's result
        """
        gc.collect()

        tracemalloc.start()
        try:
            start_time = time.time()
            result = operation_func()
            elapsed_time = time.time() - start_time
            current_mem, peak_mem = tracemalloc.get_traced_memory()
        finally:
            tracemalloc.stop()

        process = psutil.Process(os.getpid())
        mem_info = process.memory_info()

        stats = {
            "operation": operation_name,
            "result": result,
            "elapsed_time": elapsed_time,
            "current_memory": current_mem,
            "peak_memory": peak_mem,
            "rss": mem_info.rss,
            "vms": mem_info.vms,
            "memory_percent": process.memory_percent(),
        }
        self._logger.debug(
            f"{operation_name}: peak {peak_mem:,} bytes in {elapsed_time:.3f}s"
        )
        return stats
