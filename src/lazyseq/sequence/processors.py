"""Processing classes for turning a sequence prefix into DataFrames."""

import logging
from typing import Any, Iterable, Iterator, List, Tuple

import pandas as pd

from ..errors import InvalidArgumentError

IndexedValue = Tuple[int, Any]


class SequenceBatcher:
    """
    Batches indexed sequence values into groups for efficient processing.

    Single Responsibility: Group (index, value) pairs into batches.
    """

    def __init__(self, batch_size: int = 1000):
        """
        Initialize batcher.

        Args:
            batch_size: Number of values per batch
        """
        if batch_size <= 0:
            raise InvalidArgumentError("batch_size must be positive")
        self.batch_size = batch_size

    def batch(self, values: Iterable[IndexedValue]) -> Iterator[List[IndexedValue]]:
        """
        Batch indexed values into groups.

        Args:
            values: Iterator of (index, value) pairs

        Yields:
            Lists of (index, value) pairs
        """
        batch: List[IndexedValue] = []
        for item in values:
            batch.append(item)
            if len(batch) >= self.batch_size:
                yield batch
                batch = []

        # Yield remaining values
        if batch:
            yield batch


class DataFrameTransformer:
    """
    Transforms batches of sequence values into pandas DataFrames.

    Values are stored as decimal strings because they routinely exceed
    the int64 range.
    """

    def transform(self, batches: Iterator[List[IndexedValue]]) -> Iterator[pd.DataFrame]:
        """
        Transform batches to DataFrames.

        Args:
            batches: Iterator of (index, value) batches

        Yields:
            DataFrames with position, value, digits and batch_number columns
        """
        logger = logging.getLogger(__name__)
        for batch_num, batch in enumerate(batches, 1):
            indices = [index for index, _ in batch]
            values = [str(value) for _, value in batch]

            df = pd.DataFrame(
                {
                    "position": pd.Series(indices, dtype="int64"),
                    "value": pd.Series(values, dtype="object"),
                    "digits": pd.Series(
                        [len(v.lstrip("-")) for v in values], dtype="int32"
                    ),
                }
            )
            df["batch_number"] = batch_num

            logger.debug(f"Created DataFrame batch {batch_num} with {len(df)} values")
            yield df
