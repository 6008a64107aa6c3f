"""Main entry point for the lazyseq application."""

import logging
import sys
import time
from typing import Optional

from .config import AppConfig, get_app_config, get_export_config
from .errors import SequenceOverflowError
from .sequence.generators import fibonacci
from .sequence.models import ExportConfig, Toss, WriteStatistics
from .sequence.pipeline import ExportPipeline, SequenceComparator
from .sequence.runs import count_runs, equals
from .toss_generator import TossGenerator

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False):
    """Configure logging level.

    Args:
        verbose: Enable verbose logging
    """
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)
    else:
        logging.getLogger().setLevel(logging.INFO)


def print_summary(
    app_config: AppConfig,
    value: Optional[int],
    runs: int,
    write_stats: WriteStatistics,
    export_config: ExportConfig,
    elapsed: float,
):
    """Print summary statistics."""
    print("\n" + "=" * 80)
    print("EXECUTION SUMMARY")
    print("=" * 80)

    print("\nFibonacci:")
    print(f"  Index: {app_config.index:,}")
    if value is None:
        print(f"  Value: overflows a signed {app_config.fixed_width_bits}-bit integer")
    else:
        digits = str(value)
        print(f"  Digits: {len(digits):,}")
        print(f"  Last three digits: {value % 1000:03d}")
        if len(digits) <= 40:
            print(f"  Value: {digits}")

    print("\nCoin tosses:")
    print(f"  Tosses: {app_config.num_tosses:,} (seed {app_config.seed})")
    print(f"  Runs of {app_config.window_length} heads: {runs:,}")

    print("\nExport:")
    print(f"  Rows: {write_stats.total_rows:,}")
    print(f"  Row groups: {write_stats.total_batches}")
    print(f"  File size: {write_stats.file_size_bytes / 1024 / 1024:.2f} MB")
    print(f"  Compression: {export_config.compression}")
    print(f"  File path: {export_config.output_file}")

    print(f"\nTotal time: {elapsed:.2f} seconds")
    print("\n" + "=" * 80)


def main() -> int:
    """Main execution function."""
    logger.info("Starting lazyseq")
    logger.info("=" * 80)

    try:
        app_config = get_app_config()
        export_config = get_export_config()
        setup_logging(app_config.verbose)

        mode = (
            f"fixed width ({app_config.fixed_width_bits} bits)"
            if app_config.fixed_width_bits
            else "arbitrary precision"
        )
        logger.info(f"Fibonacci index: {app_config.index:,}")
        logger.info(f"Numeric mode: {mode}")
        logger.info(f"Window length: {app_config.window_length}")
        logger.info(f"Tosses: {app_config.num_tosses:,}")

        start_time = time.time()
        sequence = fibonacci(bits=app_config.fixed_width_bits)

        value: Optional[int]
        try:
            value = sequence.nth(app_config.index)
        except SequenceOverflowError as e:
            logger.warning(f"{e}")
            value = None

        tosses = TossGenerator(seed=app_config.seed).tosses()
        runs = count_runs(
            app_config.window_length,
            equals(Toss.HEADS),
            (toss for _, toss in zip(range(app_config.num_tosses), tosses)),
        )
        logger.info(f"Counted {runs:,} runs of {app_config.window_length} heads")

        # Export always uses arbitrary precision so a long prefix cannot overflow.
        write_stats = ExportPipeline(fibonacci(), export_config, logger).execute()

        if app_config.compare_memory:
            SequenceComparator(logger).compare(fibonacci(), app_config.index)

        print_summary(
            app_config, value, runs, write_stats, export_config, time.time() - start_time
        )

        logger.info("Execution completed successfully!")
        return 0

    except KeyboardInterrupt:
        logger.warning("\nExecution interrupted by user")
        return 130
    except Exception as e:
        logger.error(f"\nError during execution: {e}", exc_info=True)
        return 1


if __name__ == "__main__":
    sys.exit(main())
