"""
Apply homogeneous transforms to vectors.

A 2D point (x, y) is carried as Vector3(x, y, 1) and a 3D point as
Vector4(x, y, z, 1). to_homogeneous / from_homogeneous convert between
the two forms; from_homogeneous performs the perspective divide.

Single-axis scales leave the other factors at 1; single-axis shears
leave the other coefficients at 0, so both reduce to the identity on
the untouched axes.
"""

from __future__ import annotations

from pygeomath.core.constants import EPSILON
from pygeomath.core.exceptions import DimensionError, NumericalError
from pygeomath.transforms.builders import (
    rotation_matrix_homogeneous_2d,
    rotation_matrix_homogeneous_3d_ox,
    rotation_matrix_homogeneous_3d_oy,
    rotation_matrix_homogeneous_3d_oz,
    scaling_matrix_homogeneous_2d,
    scaling_matrix_homogeneous_3d,
    shearing_matrix_homogeneous_2d,
    shearing_matrix_homogeneous_3d,
    translate_matrix_homogeneous_2d,
    translate_matrix_homogeneous_3d,
)
from pygeomath.vectors import Vector, Vector3, Vector4, vector_type


# ═══════════════════════════════════════════════════════════════════════
# Coordinate conversion
# ═══════════════════════════════════════════════════════════════════════


def _check_dim(vector: Vector, dims: tuple[int, ...], name: str) -> None:
    if vector.dim() not in dims:
        raise DimensionError(
            f"{name}: expected a vector of dimension {' or '.join(map(str, dims))}, "
            f"got {type(vector).__name__}"
        )


def to_homogeneous(vector: Vector) -> Vector:
    """
    Append w = 1: Vector2 -> Vector3, Vector3 -> Vector4.

    Raises:
        DimensionError: If vector is not a Vector2 or Vector3
    """
    _check_dim(vector, (2, 3), 'to_homogeneous')
    return vector_type(vector.dim() + 1).from_array([*vector, 1.0])


def try_from_homogeneous(vector: Vector) -> Vector | None:
    """
    Divide by the last component and drop it.

    Returns None for a point at infinity (|w| < EPSILON).

    Raises:
        DimensionError: If vector is not a Vector3 or Vector4
    """
    _check_dim(vector, (3, 4), 'from_homogeneous')
    *head, w = vector
    if abs(w) < EPSILON:
        return None
    return vector_type(vector.dim() - 1).from_array([value / w for value in head])


def from_homogeneous(vector: Vector) -> Vector:
    """
    Divide by the last component and drop it.

    Raises:
        NumericalError: If the point is at infinity (|w| < EPSILON)
    """
    result = try_from_homogeneous(vector)
    if result is None:
        raise NumericalError(
            f"{vector!r} is a point at infinity and has no affine form"
        )
    return result


# ═══════════════════════════════════════════════════════════════════════
# 2D (Vector3)
# ═══════════════════════════════════════════════════════════════════════


def scale2(vector: Vector3, coefficients: tuple[float, float]) -> Vector3:
    a, b = coefficients
    return scaling_matrix_homogeneous_2d(a, b) @ vector


def scale2x(vector: Vector3, coefficient: float) -> Vector3:
    return scale2(vector, (coefficient, 1.0))


def scale2y(vector: Vector3, coefficient: float) -> Vector3:
    return scale2(vector, (1.0, coefficient))


def rotate2(vector: Vector3, phi: float) -> Vector3:
    return rotation_matrix_homogeneous_2d(phi) @ vector


def translate2(vector: Vector3, offsets: tuple[float, float]) -> Vector3:
    a, b = offsets
    return translate_matrix_homogeneous_2d(a, b) @ vector


def shear2(vector: Vector3, coefficients: tuple[float, float]) -> Vector3:
    a, b = coefficients
    return shearing_matrix_homogeneous_2d(a, b) @ vector


def shear2x(vector: Vector3, coefficient: float) -> Vector3:
    return shear2(vector, (coefficient, 0.0))


def shear2y(vector: Vector3, coefficient: float) -> Vector3:
    return shear2(vector, (0.0, coefficient))


# ═══════════════════════════════════════════════════════════════════════
# 3D (Vector4)
# ═══════════════════════════════════════════════════════════════════════


def scale3(vector: Vector4, coefficients: tuple[float, float, float]) -> Vector4:
    a, b, c = coefficients
    return scaling_matrix_homogeneous_3d(a, b, c) @ vector


def scale3x(vector: Vector4, coefficient: float) -> Vector4:
    return scale3(vector, (coefficient, 1.0, 1.0))


def scale3y(vector: Vector4, coefficient: float) -> Vector4:
    return scale3(vector, (1.0, coefficient, 1.0))


def scale3z(vector: Vector4, coefficient: float) -> Vector4:
    return scale3(vector, (1.0, 1.0, coefficient))


def rotate3x(vector: Vector4, phi: float) -> Vector4:
    return rotation_matrix_homogeneous_3d_ox(phi) @ vector


def rotate3y(vector: Vector4, psi: float) -> Vector4:
    return rotation_matrix_homogeneous_3d_oy(psi) @ vector


def rotate3z(vector: Vector4, xi: float) -> Vector4:
    return rotation_matrix_homogeneous_3d_oz(xi) @ vector


def translate3(vector: Vector4, offsets: tuple[float, float, float]) -> Vector4:
    a, b, c = offsets
    return translate_matrix_homogeneous_3d(a, b, c) @ vector


def shear3(vector: Vector4, coefficients: tuple[float, float, float]) -> Vector4:
    a, b, c = coefficients
    return shearing_matrix_homogeneous_3d(a, b, c) @ vector


def shear3x(vector: Vector4, coefficient: float) -> Vector4:
    return shear3(vector, (coefficient, 0.0, 0.0))


def shear3y(vector: Vector4, coefficient: float) -> Vector4:
    return shear3(vector, (0.0, coefficient, 0.0))


def shear3z(vector: Vector4, coefficient: float) -> Vector4:
    return shear3(vector, (0.0, 0.0, coefficient))
