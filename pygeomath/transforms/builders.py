"""
Transform-matrix builders.

Pure functions from scalar parameters to matrices. Plain (linear) forms
act on Vector2/Vector3; homogeneous forms act on Vector3/Vector4 whose
last component is the homogeneous coordinate.

Homogeneous scale, rotation and shear matrices embed the plain block in
the upper-left corner of an identity matrix one order larger, so the
homogeneous coordinate is preserved. Translation and projection exist
only in homogeneous form.

Angles are in radians; see pygeomath.core.constants.radians_from_degree.
"""

from __future__ import annotations

import math
import warnings

import numpy as np
from numpy.typing import NDArray

from pygeomath.core.constants import PI
from pygeomath.core.validation import check_nonzero
from pygeomath.matrices import Matrix, Matrix2, Matrix3, Matrix4, matrix_type


def _embed_homogeneous(block: Matrix) -> Matrix:
    """Place block in the upper-left corner of the next-order identity."""
    n = block.dim()
    data = np.eye(n + 1, dtype=np.float64)
    data[:n, :n] = block.to_array()
    return matrix_type(n + 1)(data)


def _rotation_block(phi: float) -> NDArray[np.float64]:
    c, s = math.cos(phi), math.sin(phi)
    return np.array([[c, -s], [s, c]])


# ═══════════════════════════════════════════════════════════════════════
# Scale
# ═══════════════════════════════════════════════════════════════════════


def scaling_matrix_2d(a: float, b: float) -> Matrix2:
    return Matrix2(np.diag([a, b]))


def scaling_matrix_3d(a: float, b: float, c: float) -> Matrix3:
    return Matrix3(np.diag([a, b, c]))


def scaling_matrix_homogeneous_2d(a: float, b: float) -> Matrix3:
    return _embed_homogeneous(scaling_matrix_2d(a, b))


def scaling_matrix_homogeneous_3d(a: float, b: float, c: float) -> Matrix4:
    return _embed_homogeneous(scaling_matrix_3d(a, b, c))


# ═══════════════════════════════════════════════════════════════════════
# Rotation (right-handed, counter-clockwise for positive angles)
# ═══════════════════════════════════════════════════════════════════════


def rotation_matrix_2d(phi: float) -> Matrix2:
    """[[cos, -sin], [sin, cos]]"""
    return Matrix2(_rotation_block(phi))


rotation_matrix = rotation_matrix_2d


def rotation_matrix_3d_ox(phi: float) -> Matrix3:
    """Rotation about the x axis: y toward z."""
    data = np.eye(3)
    data[1:, 1:] = _rotation_block(phi)
    return Matrix3(data)


def rotation_matrix_3d_oy(psi: float) -> Matrix3:
    """Rotation about the y axis: z toward x."""
    c, s = math.cos(psi), math.sin(psi)
    return Matrix3([
        [c, 0.0, s],
        [0.0, 1.0, 0.0],
        [-s, 0.0, c],
    ])


def rotation_matrix_3d_oz(xi: float) -> Matrix3:
    """Rotation about the z axis: x toward y."""
    data = np.eye(3)
    data[:2, :2] = _rotation_block(xi)
    return Matrix3(data)


def rotation_matrix_homogeneous_2d(phi: float) -> Matrix3:
    return _embed_homogeneous(rotation_matrix_2d(phi))


def rotation_matrix_homogeneous_3d_ox(phi: float) -> Matrix4:
    return _embed_homogeneous(rotation_matrix_3d_ox(phi))


def rotation_matrix_homogeneous_3d_oy(psi: float) -> Matrix4:
    return _embed_homogeneous(rotation_matrix_3d_oy(psi))


def rotation_matrix_homogeneous_3d_oz(xi: float) -> Matrix4:
    return _embed_homogeneous(rotation_matrix_3d_oz(xi))


# ═══════════════════════════════════════════════════════════════════════
# Translation and shear (homogeneous only)
# ═══════════════════════════════════════════════════════════════════════


def translate_matrix_homogeneous_2d(a: float, b: float) -> Matrix3:
    """Identity with the offset (a, b) in the last column."""
    data = np.eye(3)
    data[:2, 2] = [a, b]
    return Matrix3(data)


def translate_matrix_homogeneous_3d(a: float, b: float, c: float) -> Matrix4:
    """Identity with the offset (a, b, c) in the last column."""
    data = np.eye(4)
    data[:3, 3] = [a, b, c]
    return Matrix4(data)


def shearing_matrix_homogeneous_2d(a: float, b: float) -> Matrix3:
    """x' = x + a*y, y' = b*x + y."""
    return _embed_homogeneous(Matrix2([[1.0, a], [b, 1.0]]))


def shearing_matrix_homogeneous_3d(a: float, b: float, c: float) -> Matrix4:
    """Cyclic shear: x' = x + a*y, y' = y + b*z, z' = z + c*x."""
    return _embed_homogeneous(Matrix3([
        [1.0, a, 0.0],
        [0.0, 1.0, b],
        [c, 0.0, 1.0],
    ]))


# ═══════════════════════════════════════════════════════════════════════
# Projection
# ═══════════════════════════════════════════════════════════════════════


def perspective_matrix_homogeneous_3d(
    z_far: float,
    z_near: float,
    aspect_ratio: float,
    fov: float,
) -> Matrix4:
    """
    Perspective projection from view space to clip space.

    Args:
        z_far: Distance to the far clip plane
        z_near: Distance to the near clip plane
        aspect_ratio: Viewport width / height
        fov: Vertical field of view in radians

    Returns:
        Matrix4 with f = tan(pi/2 - fov/2) and r = 1 / (near - far):
            [[f/aspect, 0, 0,              0              ],
             [0,        f, 0,              0              ],
             [0,        0, (near + far)*r, 2*near*far*r   ],
             [0,        0, -1,             0              ]]

    Raises:
        ValidationError: If aspect_ratio is zero or near == far
    """
    check_nonzero(aspect_ratio, 'aspect_ratio')
    check_nonzero(z_near - z_far, 'z_near - z_far')
    if not 0.0 < fov < PI:
        warnings.warn(
            f"fov={fov} rad is outside (0, pi); the projection is degenerate or mirrored",
            RuntimeWarning,
            stacklevel=2,
        )

    f = math.tan(PI * 0.5 - 0.5 * fov)
    range_inverse = 1.0 / (z_near - z_far)
    return Matrix4([
        [f / aspect_ratio, 0.0, 0.0, 0.0],
        [0.0, f, 0.0, 0.0],
        [0.0, 0.0, (z_near + z_far) * range_inverse, z_near * z_far * range_inverse * 2.0],
        [0.0, 0.0, -1.0, 0.0],
    ])


def ortho_matrix_homogeneous_3d(
    left: float,
    right: float,
    bottom: float,
    top: float,
    near: float,
    far: float,
) -> Matrix4:
    """
    Orthographic projection of the box [left, right] x [bottom, top] x
    [-near, -far] onto the cube [-1, 1]^3.

    Raises:
        ValidationError: If any of the three ranges is zero
    """
    rl_range = right - left
    tb_range = top - bottom
    fn_range = far - near
    check_nonzero(rl_range, 'right - left')
    check_nonzero(tb_range, 'top - bottom')
    check_nonzero(fn_range, 'far - near')

    t_x = -(right + left) / rl_range
    t_y = -(top + bottom) / tb_range
    t_z = -(far + near) / fn_range
    return Matrix4([
        [2.0 / rl_range, 0.0, 0.0, t_x],
        [0.0, 2.0 / tb_range, 0.0, t_y],
        [0.0, 0.0, -2.0 / fn_range, t_z],
        [0.0, 0.0, 0.0, 1.0],
    ])
