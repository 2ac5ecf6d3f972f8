"""Shared restart matrices."""

import numpy as np
import pytest


@pytest.fixture
def latin_matrix():
    """Every row and every column holds each of 20 symbols exactly 50 times."""
    idx = np.arange(1000)
    return ((idx[:, None] + idx[None, :]) % 20).astype(np.uint8)


@pytest.fixture
def constant_matrix():
    return np.zeros((1000, 1000), dtype=np.uint8)


@pytest.fixture
def random_bits_matrix():
    rng = np.random.default_rng(42)
    return rng.integers(0, 2, size=(1000, 1000), dtype=np.uint8)
