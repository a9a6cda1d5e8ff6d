"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def random_vectors(rng):
    """Pairs of equal-length integer vectors, lengths 0 through 9."""
    pairs = []
    for n in range(10):
        a = rng.integers(-1000, 1000, size=n)
        b = rng.integers(-1000, 1000, size=n)
        pairs.append((a.tolist(), b.tolist()))
    return pairs


@pytest.fixture
def random_matrices(rng):
    """(m, v, w) triples with m rectangular and len(v) == len(w) == n_cols(m)."""
    triples = []
    for n_rows, n_cols in [(1, 1), (2, 3), (3, 2), (4, 4), (5, 1), (1, 5), (3, 0)]:
        m = rng.integers(-100, 100, size=(n_rows, n_cols))
        v = rng.integers(-100, 100, size=n_cols)
        w = rng.integers(-100, 100, size=n_cols)
        triples.append((m.tolist(), v.tolist(), w.tolist()))
    return triples


@pytest.fixture
def square_matrix():
    """The 3x3 matrix from the README examples."""
    return [[1, 2, 3], [4, 5, 6], [7, 8, 9]]
