"""Pipeline orchestrator classes."""

import logging
import time
from typing import Dict, Optional

from .generators import CachedSequence, LazySequence
from .models import ExportConfig, WriteStatistics
from .processors import DataFrameTransformer, SequenceBatcher
from .protocols import LoggerProtocol
from .utils import FileComparator, MemoryProfiler
from .writers import CSVWriter, DualWriter, ParquetWriter


class ExportPipeline:
    """
    Streams a prefix of a sequence to Parquet (and optionally CSV).

    Single Responsibility: Coordinate batching, transformation and writing.
    Memory stays at about one batch regardless of the prefix length.
    """

    def __init__(
        self,
        sequence: LazySequence,
        config: ExportConfig,
        logger: Optional[LoggerProtocol] = None,
    ):
        """
        Initialize pipeline.

        Args:
            sequence: Sequence to export
            config: Export configuration
            logger: Logger instance
        """
        self.sequence = sequence
        self.config = config
        self._logger = logger or logging.getLogger(__name__)

        self.batcher = SequenceBatcher(config.batch_size)
        self.transformer = DataFrameTransformer()

    def execute(self) -> WriteStatistics:
        """
        Execute the export.

        Returns:
            WriteStatistics with operation results
        """
        self._logger.info(
            f"Exporting first {self.config.count:,} values of {self.sequence.name} "
            f"to {self.config.output_file}"
        )
        self._logger.info(f"Batch size: {self.config.batch_size} values per batch")

        start_time = time.time()

        # Build generator pipeline
        values = enumerate(self.sequence.take(self.config.count))
        batches = self.batcher.batch(values)
        dataframes = self.transformer.transform(batches)

        csv_path = self.config.csv_file if self.config.csv_copy else None

        with ParquetWriter(
            self.config.output_file, self.config.compression, self._logger
        ) as parquet_writer:
            csv_writer = None
            if csv_path:
                csv_writer = CSVWriter(csv_path, self._logger)
                csv_writer.__enter__()

            try:
                writer = DualWriter(parquet_writer, csv_writer)
                stats = writer.write(dataframes)
            finally:
                if csv_writer:
                    csv_writer.__exit__(None, None, None)

        elapsed = time.time() - start_time
        self._logger.info(f"Export completed in {elapsed:.2f} seconds")

        if csv_path and stats.total_rows:
            if not FileComparator(self._logger).compare(self.config.output_file, csv_path):
                self._logger.warning(
                    f"CSV copy does not match Parquet export; keeping {csv_path} for inspection"
                )

        return stats


class SequenceComparator:
    """
    Compares streaming access with a cached, head-retaining view.

    Single Responsibility: Compare peak memory of both access patterns.
    """

    def __init__(self, logger: Optional[LoggerProtocol] = None):
        self._logger = logger or logging.getLogger(__name__)
        self.profiler = MemoryProfiler(logger)

    def compare(self, sequence: LazySequence, index: int) -> Dict[str, Dict]:
        """
        Realize element ``index`` both ways and log the difference.

        Args:
            sequence: Sequence to measure
            index: Element to realize

        Returns:
            Mapping of approach name to profiler statistics
        """
        self._logger.info("=" * 80)
        self._logger.info(f"MEMORY COMPARISON: {sequence.name}[{index:,}]")
        self._logger.info("=" * 80)

        streaming = self.profiler.profile("Streaming", lambda: sequence.nth(index))

        def cached_nth():
            cache = CachedSequence(sequence)
            return cache.nth(index)

        cached = self.profiler.profile("Cached", cached_nth)

        self._print_comparison(streaming, cached)
        return {"streaming": streaming, "cached": cached}

    def _print_comparison(self, streaming: Dict, cached: Dict):
        """Log comparison results."""
        peak_diff = cached["peak_memory"] - streaming["peak_memory"]
        self._logger.info(
            f"Peak Memory Usage:\n"
            f"  Streaming:  {self._format_bytes(streaming['peak_memory'])}\n"
            f"  Cached:     {self._format_bytes(cached['peak_memory'])}\n"
            f"  Difference: {self._format_bytes(peak_diff)}"
        )
        self._logger.info(
            f"Execution Time:\n"
            f"  Streaming:  {streaming['elapsed_time']:.2f} seconds\n"
            f"  Cached:     {cached['elapsed_time']:.2f} seconds"
        )

    @staticmethod
    def _format_bytes(bytes_value: float) -> str:
        """Format bytes to human-readable format."""
        for unit in ["B", "KB", "MB", "GB"]:
            if abs(bytes_value) < 1024.0:
                return f"{bytes_value:.2f} {unit}"
            bytes_value /= 1024.0
        return f"{bytes_value:.2f} TB"
