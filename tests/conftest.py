"""Shared pytest fixtures."""

import pytest

ENV_VARS = [
    "LAZYSEQ_INDEX",
    "LAZYSEQ_WINDOW_LENGTH",
    "LAZYSEQ_NUM_TOSSES",
    "LAZYSEQ_SEED",
    "LAZYSEQ_FIXED_WIDTH_BITS",
    "LAZYSEQ_COMPARE_MEMORY",
    "LAZYSEQ_VERBOSE",
    "LAZYSEQ_EXPORT_COUNT",
    "LAZYSEQ_BATCH_SIZE",
    "LAZYSEQ_COMPRESSION",
    "LAZYSEQ_OUTPUT_FILE",
    "LAZYSEQ_CSV_COPY",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Start every test from defaults, ignoring the shell and any .env file."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
