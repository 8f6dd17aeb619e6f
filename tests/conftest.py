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
def a():
    """A = [[1, 2], [3, 4]]."""
    return Matrix.from_array([[1.0, 2.0], [3.0, 4.0]])


@pytest.fixture
def b():
    """B = [[5, 6], [7, 8]]."""
    return Matrix.from_array([[5.0, 6.0], [7.0, 8.0]])


@pytest.fixture
def random_pair(rng):
    """Two random 4x3 matrices."""
    return (
        Matrix.from_array(rng.standard_normal((4, 3))),
        Matrix.from_array(rng.standard_normal((4, 3))),
    )
