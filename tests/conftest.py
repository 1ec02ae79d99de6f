"""
pytest configuration and shared fixtures.
"""

import numpy as np
import pytest

from VECalgebra import VectorAlgebra


@pytest.fixture(params=[True, False], ids=["numba", "numpy"])
def va(request):
    """VectorAlgebra on each kernel path."""
    return VectorAlgebra(use_numba=request.param)


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)
