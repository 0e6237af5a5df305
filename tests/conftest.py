"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from pygeomath.matrices import Matrix2, Matrix3, Matrix4
from pygeomath.vectors import Vector2, Vector3, Vector4


VECTOR_TYPES = [Vector2, Vector3, Vector4]
MATRIX_TYPES = [Matrix2, Matrix3, Matrix4]


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture(params=VECTOR_TYPES, ids=lambda cls: cls.__name__)
def vector_cls(request):
    """Each concrete vector type in turn."""
    return request.param


@pytest.fixture(params=MATRIX_TYPES, ids=lambda cls: cls.__name__)
def matrix_cls(request):
    """Each concrete matrix type in turn."""
    return request.param


@pytest.fixture
def invertible_matrices(rng, matrix_cls):
    """
    Well-conditioned random matrices: diagonally dominant, so |det| is
    far from zero and single-precision inverses stay accurate.
    """
    n = matrix_cls.ORDER
    matrices = []
    for _ in range(10):
        data = rng.uniform(-1.0, 1.0, (n, n)) + np.eye(n) * (n + 1)
        matrices.append(matrix_cls(data))
    return matrices
