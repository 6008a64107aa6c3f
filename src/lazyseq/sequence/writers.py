"""Streaming writers for exported sequence prefixes."""

import logging
import time
from pathlib import Path
from typing import Iterator, Optional

import pandas as pd
import pyarrow as pa
import pyarrow.parquet as pq

from .models import WriteStatistics
from .protocols import LoggerProtocol


class ParquetWriter:
    """
    Appends one row group per DataFrame to a single Parquet file.

    Any file already at ``output_path`` is removed on entry, so after a
    write the path holds exactly what this writer produced, or nothing
    when no frames arrived.
    """

    def __init__(
        self,
        output_path: Path,
        compression: str = "snappy",
        logger: Optional[LoggerProtocol] = None,
    ):
        """
        Initialize Parquet writer.

        Args:
            output_path: Path to output Parquet file
            compression: Compression codec
            logger: Logger instance
        """
        self.output_path = Path(output_path)
        self.compression = compression
        self._logger = logger or logging.getLogger(__name__)
        self._writer: Optional[pq.ParquetWriter] = None
        self._rows = 0
        self._row_groups = 0

    def __enter__(self):
        if self.output_path.exists():
            self._logger.info(f"Replacing existing export at {self.output_path}")
            self.output_path.unlink()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def write_frame(self, df: pd.DataFrame) -> None:
        """Append ``df`` as a row group, opening the file on the first one."""
        table = pa.Table.from_pandas(df, preserve_index=False)
        if self._writer is None:
            self._writer = pq.ParquetWriter(
                str(self.output_path), table.schema, compression=self.compression
            )
        self._writer.write_table(table)
        self._rows += table.num_rows
        self._row_groups += 1
        self._logger.debug(f"Row group {self._row_groups}: {table.num_rows} rows")

    def write(self, dataframes: Iterator[pd.DataFrame]) -> WriteStatistics:
        """
        Drain ``dataframes`` into the file and close it.

        Args:
            dataframes: Iterator of DataFrames to write

        Returns:
            WriteStatistics; file size is 0 when no file was created
        """
        start_time = time.time()
        for df in dataframes:
            self.write_frame(df)

        created = self._writer is not None
        # The footer is only on disk once the writer is closed.
        self.close()

        stats = WriteStatistics(
            total_rows=self._rows,
            total_batches=self._row_groups,
            file_size_bytes=self.output_path.stat().st_size if created else 0,
            elapsed_time=time.time() - start_time,
        )
        self._logger.info(
            f"Wrote {stats.total_rows:,} rows in {stats.total_batches} row groups "
            f"to {self.output_path}"
        )
        return stats

    def close(self):
        if self._writer:
            self._writer.close()
            self._writer = None


class CSVWriter:
    """Appends DataFrames to a CSV file, header first."""

    def __init__(self, output_path: Path, logger: Optional[LoggerProtocol] = None):
        self.output_path = Path(output_path)
        self._logger = logger or logging.getLogger(__name__)
        self._file_handle = None
        self._total_rows = 0

    def __enter__(self):
        self._file_handle = open(self.output_path, "w", newline="", encoding="utf-8")
        self._logger.info(f"Writing CSV copy: {self.output_path}")
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    @property
    def total_rows(self) -> int:
        return self._total_rows

    def write_frame(self, df: pd.DataFrame) -> None:
        if not self._file_handle:
            raise RuntimeError("CSVWriter must be used as context manager")
        df.to_csv(self._file_handle, index=False, header=self._total_rows == 0)
        self._total_rows += len(df)

    def close(self):
        if self._file_handle:
            self._file_handle.close()
            self._file_handle = None


class DualWriter:
    """
    Feeds one DataFrame stream to a ParquetWriter and, optionally, a CSVWriter.

    Each frame is appended to the CSV copy as it passes through to the
    Parquet writer, so only one batch is in memory at a time.
    """

    def __init__(
        self,
        parquet_writer: ParquetWriter,
        csv_writer: Optional[CSVWriter] = None,
    ):
        self.parquet_writer = parquet_writer
        self.csv_writer = csv_writer
        self._logger = logging.getLogger(__name__)

    def write(self, dataframes: Iterator[pd.DataFrame]) -> WriteStatistics:
        if not self.csv_writer:
            return self.parquet_writer.write(dataframes)

        def mirrored() -> Iterator[pd.DataFrame]:
            for df in dataframes:
                self.csv_writer.write_frame(df)
                yield df

        stats = self.parquet_writer.write(mirrored())
        self._logger.info(
            f"CSV copy: {self.csv_writer.total_rows:,} rows in {self.csv_writer.output_path}"
        )
        return stats
