"""
Apply plain (non-homogeneous) transforms to vectors.

Each helper builds the matrix from pygeomath.transforms.builders and
applies it. Single-axis scales leave the other axes at factor 1.
"""

from __future__ import annotations

from pygeomath.transforms.builders import (
    rotation_matrix_2d,
    rotation_matrix_3d_ox,
    rotation_matrix_3d_oy,
    rotation_matrix_3d_oz,
    scaling_matrix_2d,
    scaling_matrix_3d,
)
from pygeomath.vectors import Vector2, Vector3


def scale2(vector: Vector2, coefficients: tuple[float, float]) -> Vector2:
    a, b = coefficients
    return scaling_matrix_2d(a, b) @ vector


def scale2x(vector: Vector2, coefficient: float) -> Vector2:
    return scale2(vector, (coefficient, 1.0))


def scale2y(vector: Vector2, coefficient: float) -> Vector2:
    return scale2(vector, (1.0, coefficient))


def scale3(vector: Vector3, coefficients: tuple[float, float, float]) -> Vector3:
    a, b, c = coefficients
    return scaling_matrix_3d(a, b, c) @ vector


def scale3x(vector: Vector3, coefficient: float) -> Vector3:
    return scale3(vector, (coefficient, 1.0, 1.0))


def scale3y(vector: Vector3, coefficient: float) -> Vector3:
    return scale3(vector, (1.0, coefficient, 1.0))


def scale3z(vector: Vector3, coefficient: float) -> Vector3:
    return scale3(vector, (1.0, 1.0, coefficient))


def rotate2(vector: Vector2, phi: float) -> Vector2:
    return rotation_matrix_2d(phi) @ vector


def rotate3x(vector: Vector3, phi: float) -> Vector3:
    return rotation_matrix_3d_ox(phi) @ vector


def rotate3y(vector: Vector3, psi: float) -> Vector3:
    return rotation_matrix_3d_oy(psi) @ vector


def rotate3z(vector: Vector3, xi: float) -> Vector3:
    return rotation_matrix_3d_oz(xi) @ vector
