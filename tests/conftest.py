"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from pymatrix import Matrix


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def a2():
    """The 2x2 matrix [[1, 2], [3, 4]] (det = -2)."""
    return Matrix.from_array([[1.0, 2.0], [3.0, 4.0]])


@pytest.fixture
def random_square(rng):
    """Factory for random n x n matrices with entries in [-5, 5)."""
    def make(n):
        return Matrix.from_array(rng.uniform(-5.0, 5.0, size=(n, n)))
    return make
