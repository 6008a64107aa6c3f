"""Generate seeded coin tosses using the Faker library."""

import logging
from typing import Iterator, List

from faker import Faker

from .sequence.models import Toss
from .sequence.validation import non_negative_int

logger = logging.getLogger(__name__)


class TossGenerator:
    """Generate reproducible coin-toss streams."""

    def __init__(self, seed: int = 42):
        """Initialize the toss generator.

        Args:
            seed: Random seed for reproducibility
        """
        self.seed = seed

    def _faker(self) -> Faker:
        faker = Faker()
        faker.seed_instance(self.seed)
        return faker

    def tosses(self) -> Iterator[Toss]:
        """Yield an unbounded stream of tosses.

        Each call starts again from the seed, so two calls yield the same
        stream.
        """
        faker = self._faker()
        while True:
            yield Toss.HEADS if faker.boolean() else Toss.TAILS

    def generate_tosses(self, num_tosses: int) -> List[Toss]:
        """Generate a bounded list of tosses.

        Args:
            num_tosses: Number of tosses to generate

        Returns:
            List of tosses
        """
        num_tosses = non_negative_int("num_tosses", num_tosses)
        logger.info(f"Generating {num_tosses:,} coin tosses...")

        tosses = []
        for i, toss in enumerate(self.tosses()):
            if i >= num_tosses:
                break
            tosses.append(toss)

            if (i + 1) % 10000 == 0:
                logger.debug(f"Generated {i + 1:,} tosses...")

        logger.info(f"Successfully generated {len(tosses):,} tosses")
        return tosses
