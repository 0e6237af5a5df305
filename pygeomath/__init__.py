"""
PyGeomath: small-dimension linear algebra for 2D/3D/4D geometry.

Fixed-size vectors (dimensions 2-4), square matrices (orders 2-4) and
builders for the canonical transform matrices (scale, rotation,
translation, shear, perspective and orthographic projection) in plain
and homogeneous form.

Submodules:
    core: Constants, exceptions, validation
    vectors: Vector2, Vector3, Vector4
    matrices: Matrix2, Matrix3, Matrix4
    transforms: Matrix builders and apply helpers
"""

__version__ = "0.1.0"

from pygeomath import core
from pygeomath import vectors
from pygeomath import matrices
from pygeomath import transforms
from pygeomath.core import EPSILON, PI
from pygeomath.vectors import Vector2, Vector3, Vector4
from pygeomath.matrices import Matrix2, Matrix3, Matrix4, apply

__all__ = [
    "__version__",
    "core",
    "vectors",
    "matrices",
    "transforms",
    "EPSILON",
    "PI",
    "Vector2",
    "Vector3",
    "Vector4",
    "Matrix2",
    "Matrix3",
    "Matrix4",
    "apply",
]
