"""Shared fixtures for tokenizer tests."""

from pathlib import Path

import pytest

DATA_DIR = Path(__file__).parent / "data"


@pytest.fixture
def sample_bytes() -> bytes:
    """Multilingual sample text."""
    return (DATA_DIR / "sample.txt").read_bytes()
