"""
Concrete vectors of dimension 2, 3 and 4.

All algebra lives in Vector; these classes fix DIM and expose the
components by axis name.
"""

from __future__ import annotations

from pygeomath.vectors._base import Vector


class Vector2(Vector):
    """2D vector (x, y)."""

    __slots__ = ()

    DIM = 2
    AXES = ('x', 'y')

    def __init__(self, x: float, y: float) -> None:
        super().__init__(x, y)

    @property
    def x(self) -> float:
        return float(self._data[0])

    @property
    def y(self) -> float:
        return float(self._data[1])


class Vector3(Vector):
    """3D vector (x, y, z), also a homogeneous 2D point."""

    __slots__ = ()

    DIM = 3
    AXES = ('x', 'y', 'z')

    def __init__(self, x: float, y: float, z: float) -> None:
        super().__init__(x, y, z)

    @property
    def x(self) -> float:
        return float(self._data[0])

    @property
    def y(self) -> float:
        return float(self._data[1])

    @property
    def z(self) -> float:
        return float(self._data[2])


class Vector4(Vector):
    """4D vector (x, y, z, w), also a homogeneous 3D point."""

    __slots__ = ()

    DIM = 4
    AXES = ('x', 'y', 'z', 'w')

    def __init__(self, x: float, y: float, z: float, w: float) -> None:
        super().__init__(x, y, z, w)

    @property
    def x(self) -> float:
        return float(self._data[0])

    @property
    def y(self) -> float:
        return float(self._data[1])

    @property
    def z(self) -> float:
        return float(self._data[2])

    @property
    def w(self) -> float:
        return float(self._data[3])
