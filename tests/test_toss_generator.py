"""Tests for toss_generator module."""

from itertools import islice

import pytest

from lazyseq.errors import InvalidArgumentError
from lazyseq.sequence.models import Toss
from lazyseq.sequence.runs import by_pairs, count_head_pairs, count_runs, equals
from lazyseq.toss_generator import TossGenerator


def test_toss_generator_initialization():
    """Test that TossGenerator can be initialized."""
    generator = TossGenerator(seed=42)
    assert generator.seed == 42


def test_generate_tosses():
    """Test generating a bounded list of tosses."""
    tosses = TossGenerator(seed=42).generate_tosses(100)

    assert len(tosses) == 100
    assert all(isinstance(toss, Toss) for toss in tosses)
    assert TossGenerator(seed=42).generate_tosses(0) == []


def test_generate_tosses_rejects_negative_count():
    """Test negative counts are rejected."""
    with pytest.raises(InvalidArgumentError):
        TossGenerator().generate_tosses(-1)


def test_tosses_are_reproducible():
    """Test the same seed yields the same stream, call after call."""
    generator = TossGenerator(seed=7)
    first = list(islice(generator.tosses(), 200))
    second = list(islice(generator.tosses(), 200))
    third = TossGenerator(seed=7).generate_tosses(200)

    assert first == second == third


def test_tosses_contain_both_outcomes():
    """Test a long stream is not degenerate."""
    tosses = TossGenerator(seed=1).generate_tosses(500)
    assert Toss.HEADS in tosses
    assert Toss.TAILS in tosses


def test_count_head_pairs_over_tosses():
    """Test the partially applied counter on a generated stream."""
    tosses = TossGenerator(seed=3).generate_tosses(1000)
    expected = sum(1 for a, b in by_pairs(tosses) if a == b == Toss.HEADS)

    assert count_head_pairs(tosses) == expected
    assert count_runs(2, equals(Toss.HEADS), iter(tosses)) == expected
