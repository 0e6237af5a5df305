"""
Concrete matrices of order 2, 3 and 4.

Each order supplies its own determinant:
    Matrix2: ad - bc
    Matrix3: cofactor expansion along the first row, written out
    Matrix4: cofactor expansion along the first row over 3x3 minors

Determinants are accumulated in double precision from the stored
single-precision entries.
"""

from __future__ import annotations

from pygeomath.matrices._base import Matrix


class Matrix2(Matrix):
    """2x2 matrix."""

    __slots__ = ()

    ORDER = 2

    def det(self) -> float:
        (a, b), (c, d) = self._data.tolist()
        return a * d - b * c


class Matrix3(Matrix):
    """3x3 matrix; also a homogeneous 2D transform."""

    __slots__ = ()

    ORDER = 3

    def det(self) -> float:
        (a, b, c), (d, e, f), (g, h, i) = self._data.tolist()
        return a * (e * i - f * h) - b * (d * i - f * g) + c * (d * h - e * g)


class Matrix4(Matrix):
    """4x4 matrix; also a homogeneous 3D transform."""

    __slots__ = ()

    ORDER = 4

    def det(self) -> float:
        first_row = self._data[0].tolist()
        return sum(
            (-1.0) ** j * value * self.minor(0, j)
            for j, value in enumerate(first_row)
        )
