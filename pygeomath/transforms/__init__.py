"""
Transform matrices and their application to vectors.

Submodules:
    builders: Scale, rotation, translation, shear and projection matrices
    linear: Apply plain transforms (Vector2, Vector3)
    homogeneous: Apply homogeneous transforms (Vector3, Vector4) and
        convert to/from homogeneous coordinates

The matrix builders are re-exported here.

Example:
    >>> from pygeomath.transforms import translate_matrix_homogeneous_2d
    >>> from pygeomath.vectors import Vector3
    >>> translate_matrix_homogeneous_2d(5, 7) @ Vector3(1, 1, 1)
    Vector3(x=6.0, y=8.0, z=1.0)
"""

from pygeomath.transforms import homogeneous, linear
from pygeomath.transforms.builders import (
    ortho_matrix_homogeneous_3d,
    perspective_matrix_homogeneous_3d,
    rotation_matrix,
    rotation_matrix_2d,
    rotation_matrix_3d_ox,
    rotation_matrix_3d_oy,
    rotation_matrix_3d_oz,
    rotation_matrix_homogeneous_2d,
    rotation_matrix_homogeneous_3d_ox,
    rotation_matrix_homogeneous_3d_oy,
    rotation_matrix_homogeneous_3d_oz,
    scaling_matrix_2d,
    scaling_matrix_3d,
    scaling_matrix_homogeneous_2d,
    scaling_matrix_homogeneous_3d,
    shearing_matrix_homogeneous_2d,
    shearing_matrix_homogeneous_3d,
    translate_matrix_homogeneous_2d,
    translate_matrix_homogeneous_3d,
)

__all__ = [
    "homogeneous",
    "linear",
    # Scale
    "scaling_matrix_2d",
    "scaling_matrix_3d",
    "scaling_matrix_homogeneous_2d",
    "scaling_matrix_homogeneous_3d",
    # Rotation
    "rotation_matrix",
    "rotation_matrix_2d",
    "rotation_matrix_3d_ox",
    "rotation_matrix_3d_oy",
    "rotation_matrix_3d_oz",
    "rotation_matrix_homogeneous_2d",
    "rotation_matrix_homogeneous_3d_ox",
    "rotation_matrix_homogeneous_3d_oy",
    "rotation_matrix_homogeneous_3d_oz",
    # Translation / shear
    "translate_matrix_homogeneous_2d",
    "translate_matrix_homogeneous_3d",
    "shearing_matrix_homogeneous_2d",
    "shearing_matrix_homogeneous_3d",
    # Projection
    "perspective_matrix_homogeneous_3d",
    "ortho_matrix_homogeneous_3d",
]
