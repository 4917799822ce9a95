"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from trendfit.regression import Dataset


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def exact_line_data():
    """Points lying exactly on y = 1.5 - 0.75 x."""
    x = np.linspace(-10.0, 10.0, 21)
    y = 1.5 - 0.75 * x
    return Dataset.from_arrays(x, y), 1.5, -0.75


@pytest.fixture
def noisy_trend_data(rng):
    """Upward trend with Gaussian noise, x = 0..49."""
    n = 50
    x = np.arange(n, dtype=np.float64)
    y = 3.0 + 0.4 * x + rng.standard_normal(n) * 2.0
    return Dataset.from_arrays(x, y)


@pytest.fixture
def sample_series():
    """Series used by the demonstration driver."""
    return Dataset.from_series([2.0, 3.0, 5.0, 7.0, 11.0])
