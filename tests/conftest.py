"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from pymatrices.matrix import Matrix


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def A22():
    """The 2x2 matrix [[1, 2], [3, 4]]."""
    return Matrix([[1, 2], [3, 4]])


@pytest.fixture
def B22():
    """The 2x2 matrix [[5, 6], [7, 8]]."""
    return Matrix([[5, 6], [7, 8]])


@pytest.fixture
def well_conditioned(rng):
    """Random 5x5 matrix made diagonally dominant so it is safely invertible."""
    data = rng.standard_normal((5, 5)) + 10.0 * np.eye(5)
    return Matrix(data)
