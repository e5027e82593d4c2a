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
def symmetric_matrix(rng):
    """Random 6x6 symmetric matrix."""
    A = rng.standard_normal((6, 6))
    return A + A.T


@pytest.fixture
def general_matrix(rng):
    """Random 7x7 non-symmetric matrix."""
    return rng.standard_normal((7, 7))


@pytest.fixture
def covariance_matrix(rng):
    """Sample covariance of a 200x5 dataset, as a PCA caller would pass it."""
    X = rng.standard_normal((200, 5)) @ rng.standard_normal((5, 5))
    return np.cov(X, rowvar=False)
