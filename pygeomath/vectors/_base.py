"""
Vector base class.

Implements every geometric algorithm (normalize, angle, reflect,
orthogonality) once, on top of a small set of primitives: component-wise
add/sub, scaling, dot product and length. Vector2, Vector3 and Vector4
only fix the dimension and name the axes.

Every geometrically undefined operation has two forms:
    try_normalize / try_angle / try_reflect_with  -> value or None
    normalize / angle / reflect_with              -> value, or NullVectorError
"""

from __future__ import annotations

import math
from typing import Iterator, TypeVar

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pygeomath.core.constants import EPSILON
from pygeomath.core.exceptions import NullVectorError
from pygeomath.core.validation import (
    check_array,
    check_finite,
    check_index,
    check_result_finite,
    check_shape,
)

V = TypeVar('V', bound='Vector')

# dimension -> concrete Vector subclass, filled by __init_subclass__;
# only classes that declare DIM themselves register, first one wins
_VECTOR_TYPES: dict[int, type[Vector]] = {}


def vector_type(dim: int) -> type[Vector]:
    """
    Look up the concrete Vector class for a dimension.

    Raises:
        KeyError: If no vector type of that dimension exists
    """
    try:
        return _VECTOR_TYPES[dim]
    except KeyError:
        raise KeyError(
            f"No vector type of dimension {dim}; available: {sorted(_VECTOR_TYPES)}"
        ) from None


class Vector:
    """
    Immutable fixed-size vector of single-precision components.

    Subclasses set DIM and AXES. Components live in a read-only float32
    array; every operation returns a new instance.

    Equality is epsilon-tolerant, so vectors are not hashable.
    """

    __slots__ = ('_data',)

    DIM: int = 0
    AXES: tuple[str, ...] = ()

    _data: NDArray[np.float32]

    # numpy scalars on the left of an operator defer to our reflected methods
    __array_ufunc__ = None

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        if cls.__dict__.get('DIM'):
            _VECTOR_TYPES.setdefault(cls.DIM, cls)

    def __init__(self, *components: float) -> None:
        name = type(self).__name__
        data = check_array(components, name)
        check_shape(data, (self.DIM,), name)
        check_finite(data, name)
        data.flags.writeable = False
        self._data = data

    @classmethod
    def from_array(cls: type[V], array: ArrayLike) -> V:
        """Build a vector from any length-DIM sequence or array."""
        data = check_array(array, cls.__name__)
        check_shape(data, (cls.DIM,), cls.__name__)
        check_finite(data, cls.__name__)
        return cls._wrap(data)

    @classmethod
    def _wrap(cls: type[V], data: NDArray) -> V:
        """
        Internal constructor for already-validated or computed data.

        Raises:
            NumericalError: If the data overflows single precision
        """
        obj = object.__new__(cls)
        data = np.array(data, dtype=np.float32)
        check_result_finite(data, cls.__name__)
        data.flags.writeable = False
        obj._data = data
        return obj

    @classmethod
    def filled(cls: type[V], value: float) -> V:
        """Vector with every component equal to value."""
        return cls.from_array(np.full(cls.DIM, value))

    @classmethod
    def zero(cls: type[V]) -> V:
        return cls.filled(0.0)

    # ------------------------------------------------------------------
    # Primitives
    # ------------------------------------------------------------------

    def dim(self) -> int:
        return self.DIM

    def length(self) -> float:
        """Euclidean norm: sqrt of the sum of squared components."""
        return math.sqrt(self.dot(self))

    def dot(self, other: V) -> float:
        """Sum of component-wise products."""
        self._check_same_type(other)
        return float(np.dot(self._data.astype(np.float64), other._data.astype(np.float64)))

    def to_array(self) -> NDArray[np.float32]:
        """Writable float32 copy of the components."""
        return self._data.copy()

    # ------------------------------------------------------------------
    # Geometry
    # ------------------------------------------------------------------

    def try_normalize(self: V) -> V | None:
        """Unit vector in the same direction, or None for a null vector."""
        length = self.length()
        if length < EPSILON:
            return None
        return self / length

    def normalize(self: V) -> V:
        """
        Unit vector in the same direction.

        Raises:
            NullVectorError: If length() < EPSILON
        """
        result = self.try_normalize()
        if result is None:
            raise NullVectorError(
                "Can't normalize null vector",
                operation='normalize',
                length=self.length(),
            )
        return result

    def try_angle(self, other: V) -> float | None:
        """
        Angle in radians between self and other, in [0, pi].

        Returns None if either vector is null. The cosine is clamped to
        [-1, 1] before acos to absorb round-off.
        """
        self._check_same_type(other)
        self_len, other_len = self.length(), other.length()
        if self_len < EPSILON or other_len < EPSILON:
            return None
        cosine = self.dot(other) / (self_len * other_len)
        return math.acos(min(1.0, max(-1.0, cosine)))

    def angle(self, other: V) -> float:
        """
        Angle in radians between self and other.

        Raises:
            NullVectorError: If either vector is null
        """
        result = self.try_angle(other)
        if result is None:
            raise NullVectorError(
                "It is not possible to calculate the angle between two vectors, "
                "one of which is null",
                operation='angle',
                length=min(self.length(), other.length()),
            )
        return result

    def is_orthogonal_to(self, other: V) -> bool:
        return abs(self.dot(other)) < EPSILON

    def try_reflect_with(self: V, axis: V) -> V | None:
        """
        Reflect self with respect to the normal `axis`.

        Computes self - 2 * dot(self, n) * n where n = axis normalized.
        Returns None if axis is null.
        """
        self._check_same_type(axis)
        normal = axis.try_normalize()
        if normal is None:
            return None
        return self - normal * (2.0 * self.dot(normal))

    def reflect_with(self: V, axis: V) -> V:
        """
        Reflect self with respect to the normal `axis`.

        Raises:
            NullVectorError: If axis is null
        """
        result = self.try_reflect_with(axis)
        if result is None:
            raise NullVectorError(
                "It is not possible to reflect the vector relative to the null vector",
                operation='reflect_with',
                length=axis.length(),
            )
        return result

    def is_close(self, other: object, eps: float = EPSILON) -> bool:
        """True if other is the same vector type and every component differs by < eps."""
        if type(other) is not type(self):
            return False
        return bool(np.all(np.abs(self._data - other._data) < eps))

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------

    def __add__(self: V, other: V) -> V:
        if type(other) is not type(self):
            return NotImplemented
        return self._wrap(self._data + other._data)

    def __sub__(self: V, other: V) -> V:
        if type(other) is not type(self):
            return NotImplemented
        return self._wrap(self._data - other._data)

    def __neg__(self: V) -> V:
        return self._wrap(-self._data)

    def __mul__(self: V, scalar: float) -> V:
        if not _is_scalar(scalar):
            return NotImplemented
        return self._wrap(self._data * np.float32(scalar))

    __rmul__ = __mul__

    def __truediv__(self: V, scalar: float) -> V:
        if not _is_scalar(scalar):
            return NotImplemented
        if scalar == 0:
            raise ZeroDivisionError(f"{type(self).__name__} division by zero")
        return self._wrap(self._data / np.float32(scalar))

    def __abs__(self) -> float:
        return self.length()

    # ------------------------------------------------------------------
    # Sequence protocol
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return self.DIM

    def __getitem__(self, index: int) -> float:
        return float(self._data[check_index(index, self.DIM, type(self).__name__)])

    def __iter__(self) -> Iterator[float]:
        return (float(value) for value in self._data)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self.is_close(other)

    __hash__ = None  # tolerant equality is not transitive

    def __repr__(self) -> str:
        parts = ", ".join(f"{axis}={float(value)!r}" for axis, value in zip(self.AXES, self._data))
        return f"{type(self).__name__}({parts})"

    def _check_same_type(self, other: object) -> None:
        if type(other) is not type(self):
            raise TypeError(
                f"{type(self).__name__}: operand must be {type(self).__name__}, "
                f"got {type(other).__name__}"
            )


def _is_scalar(value: object) -> bool:
    return isinstance(value, (int, float, np.integer, np.floating)) and not isinstance(value, bool)
