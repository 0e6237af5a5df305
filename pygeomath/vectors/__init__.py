"""
Fixed-size vectors (dimensions 2, 3, 4).

Public API:
    Vector                     Base class with the shared algorithms
    Vector2, Vector3, Vector4  Concrete value types
    vector_type(dim)           Concrete class for a dimension

Example:
    >>> from pygeomath.vectors import Vector2
    >>> Vector2(3, 4).length()
    5.0
    >>> Vector2(1, 0).is_orthogonal_to(Vector2(0, 1))
    True
"""

from pygeomath.vectors._base import Vector, vector_type
from pygeomath.vectors.fixed import Vector2, Vector3, Vector4

__all__ = [
    "Vector",
    "Vector2",
    "Vector3",
    "Vector4",
    "vector_type",
]
