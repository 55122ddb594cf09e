"""
pytest configuration and shared fixtures.
"""

import numpy as np
import pytest

from pymatrix import Matrix


ALL_DTYPES = [
    np.int8, np.int16, np.int32, np.int64,
    np.uint8, np.uint16, np.uint32, np.uint64,
    np.float32, np.float64,
]


@pytest.fixture(params=ALL_DTYPES, ids=lambda t: np.dtype(t).name)
def dtype(request):
    """Every supported element type."""
    return np.dtype(request.param)


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def square_int():
    """3x3 int64 matrix with distinct elements 1..9."""
    return Matrix(3, 3, 1, 2, 3, 4, 5, 6, 7, 8, 9, dtype=np.int64)


@pytest.fixture
def rect_float(rng):
    """4x3 float64 matrix of small random values."""
    return Matrix.from_array(rng.standard_normal((4, 3)))
