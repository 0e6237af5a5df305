"""
Square matrices (orders 2, 3, 4).

Public API:
    Matrix                     Base class: transpose, minors, adjugate, inverse
    Matrix2, Matrix3, Matrix4  Concrete value types with closed-form det()
    matrix_type(order)         Concrete class for an order
    apply(matrix, vector)      Matrix-vector product

Matrices act on vectors of matching dimension through `matrix @ vector`
(or `matrix * vector`).

Example:
    >>> from pygeomath.matrices import Matrix2
    >>> Matrix2([[1, 2], [2, 4]]).try_invert() is None
    True
"""

from pygeomath.matrices._base import Matrix, matrix_type
from pygeomath.matrices.fixed import Matrix2, Matrix3, Matrix4
from pygeomath.vectors import Vector


def apply(matrix: Matrix, vector: Vector) -> Vector:
    """Apply matrix to vector; see Matrix.apply."""
    return matrix.apply(vector)


__all__ = [
    "Matrix",
    "Matrix2",
    "Matrix3",
    "Matrix4",
    "matrix_type",
    "apply",
]
