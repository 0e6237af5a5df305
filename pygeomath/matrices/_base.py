"""
Matrix base class.

Square N x N matrices of single-precision entries, row-major, indexed by
(row, column). Concrete orders (Matrix2, Matrix3, Matrix4) only supply a
closed-form det(); minors, cofactors, the adjugate and the inverse are
derived here from the determinants of lower-order matrices.

Inversion uses the adjugate method: inverse = adjugate / det. Nothing is
cached; det and invertibility are recomputed from the entries on every
call.
"""

from __future__ import annotations

from typing import TypeVar

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pygeomath.core.constants import EPSILON, unpack
from pygeomath.core.exceptions import DimensionError, SingularMatrixError
from pygeomath.core.validation import (
    check_array,
    check_finite,
    check_index,
    check_result_finite,
    check_shape,
)
from pygeomath.vectors import Vector, vector_type

M = TypeVar('M', bound='Matrix')

# order -> concrete Matrix subclass, filled by __init_subclass__;
# only classes that declare ORDER themselves register, first one wins
_MATRIX_TYPES: dict[int, type[Matrix]] = {}


def matrix_type(order: int) -> type[Matrix]:
    """
    Look up the concrete Matrix class for an order.

    Raises:
        KeyError: If no matrix type of that order exists
    """
    try:
        return _MATRIX_TYPES[order]
    except KeyError:
        raise KeyError(
            f"No matrix type of order {order}; available: {sorted(_MATRIX_TYPES)}"
        ) from None


def _det_of(block: NDArray) -> float:
    """Determinant of a square block of order 1..4."""
    if block.shape == (1, 1):
        return float(block[0, 0])
    return matrix_type(block.shape[0])._wrap(block).det()


class Matrix:
    """
    Immutable N x N matrix of single-precision entries.

    Subclasses set ORDER and implement det(). Rows and columns are
    returned as vectors of matching dimension.

    Equality is epsilon-tolerant, so matrices are not hashable.
    """

    __slots__ = ('_data',)

    ORDER: int = 0

    _data: NDArray[np.float32]

    # numpy scalars on the left of an operator defer to our reflected methods
    __array_ufunc__ = None

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        if cls.__dict__.get('ORDER'):
            _MATRIX_TYPES.setdefault(cls.ORDER, cls)

    def __init__(self, rows: ArrayLike) -> None:
        name = type(self).__name__
        data = check_array(rows, name)
        check_shape(data, (self.ORDER, self.ORDER), name)
        check_finite(data, name)
        data.flags.writeable = False
        self._data = data

    @classmethod
    def _wrap(cls: type[M], data: NDArray) -> M:
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
    def scalar(cls: type[M], value: float) -> M:
        """Matrix with value on the diagonal and zero elsewhere."""
        return cls(np.eye(cls.ORDER) * value)

    @classmethod
    def identity(cls: type[M]) -> M:
        return cls.scalar(1.0)

    @classmethod
    def zero(cls: type[M]) -> M:
        return cls.scalar(0.0)

    @classmethod
    def from_rows(cls: type[M], *rows: Vector) -> M:
        """Build a matrix whose i-th row is rows[i]."""
        cls._check_vectors(rows)
        return cls._wrap(np.stack([row.to_array() for row in rows]))

    @classmethod
    def from_columns(cls: type[M], *columns: Vector) -> M:
        """Build a matrix whose j-th column is columns[j]."""
        cls._check_vectors(columns)
        return cls._wrap(np.stack([column.to_array() for column in columns], axis=1))

    @classmethod
    def _check_vectors(cls, vectors: tuple[Vector, ...]) -> None:
        expected = vector_type(cls.ORDER)
        if len(vectors) != cls.ORDER:
            raise DimensionError(
                f"{cls.__name__}: expected {cls.ORDER} vectors, got {len(vectors)}"
            )
        for vector in vectors:
            if type(vector) is not expected:
                raise DimensionError(
                    f"{cls.__name__}: expected {expected.__name__}, got {type(vector).__name__}"
                )

    # ------------------------------------------------------------------
    # Algebra
    # ------------------------------------------------------------------

    def dim(self) -> int:
        return self.ORDER

    def det(self) -> float:
        raise NotImplementedError(
            f"Subclasses must implement det(); {type(self).__name__} does not"
        )

    def get_row(self, i: int) -> Vector:
        i = check_index(i, self.ORDER, 'row')
        return vector_type(self.ORDER)._wrap(self._data[i, :])

    def get_column(self, j: int) -> Vector:
        j = check_index(j, self.ORDER, 'column')
        return vector_type(self.ORDER)._wrap(self._data[:, j])

    def transpose(self: M) -> M:
        return self._wrap(self._data.T)

    def minor(self, i: int, j: int) -> float:
        """Determinant of the matrix with row i and column j removed."""
        i = check_index(i, self.ORDER, 'row')
        j = check_index(j, self.ORDER, 'column')
        block = np.delete(np.delete(self._data, i, axis=0), j, axis=1)
        return _det_of(block)

    def cofactor(self, i: int, j: int) -> float:
        return (-1.0) ** (i + j) * self.minor(i, j)

    def adjugate(self: M) -> M:
        """Transpose of the cofactor matrix."""
        n = self.ORDER
        cofactors = np.array(
            [[self.cofactor(i, j) for j in range(n)] for i in range(n)],
            dtype=np.float64,
        )
        return self._wrap(cofactors.T)

    def try_invert(self: M) -> M | None:
        """
        Inverse via adjugate / det, or None if |det| < EPSILON.
        """
        det = self.det()
        if abs(det) < EPSILON:
            return None
        return self._wrap(self.adjugate()._data.astype(np.float64) / det)

    def invert(self: M) -> M:
        """
        Inverse of the matrix.

        Raises:
            SingularMatrixError: If the matrix is singular
        """
        result = self.try_invert()
        if result is None:
            raise SingularMatrixError(
                "It is impossible to invert a singular matrix",
                matrix_name=type(self).__name__,
                determinant=self.det(),
            )
        return result

    def is_singular(self) -> bool:
        return self.try_invert() is None

    def is_close(self, other: object, eps: float = EPSILON) -> bool:
        """True if other is the same matrix type and every entry differs by < eps."""
        if type(other) is not type(self):
            return False
        return bool(np.all(np.abs(self._data - other._data) < eps))

    def to_array(self) -> NDArray[np.float32]:
        """Writable float32 copy of the entries."""
        return self._data.copy()

    def to_list(self) -> list[float]:
        """Entries as a flat row-major list."""
        return unpack(self._data)

    # ------------------------------------------------------------------
    # Composition
    # ------------------------------------------------------------------

    def apply(self, vector: Vector) -> Vector:
        """
        Matrix-vector product: result[i] = sum_j M[i, j] * v[j].

        Raises:
            DimensionError: If vector.dim() != ORDER
        """
        if vector.dim() != self.ORDER:
            raise DimensionError(
                f"{type(self).__name__} cannot be applied to {type(vector).__name__}: "
                f"dimension {vector.dim()} != order {self.ORDER}"
            )
        product = self._data.astype(np.float64) @ vector.to_array().astype(np.float64)
        return vector_type(self.ORDER)._wrap(product)

    def compose(self: M, other: M) -> M:
        """
        Matrix product self @ other.

        Applying the result to a vector equals applying `other` first,
        then `self`.
        """
        if type(other) is not type(self):
            raise DimensionError(
                f"{type(self).__name__} cannot be multiplied by {type(other).__name__}"
            )
        return self._wrap(self._data.astype(np.float64) @ other._data.astype(np.float64))

    def __matmul__(self, other):
        if isinstance(other, Vector):
            return self.apply(other)
        if isinstance(other, Matrix):
            return self.compose(other)
        return NotImplemented

    def __mul__(self, other):
        if isinstance(other, (Vector, Matrix)):
            return self @ other
        if isinstance(other, (int, float, np.integer, np.floating)) and not isinstance(other, bool):
            return self._wrap(self._data * np.float32(other))
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, (int, float, np.integer, np.floating)) and not isinstance(other, bool):
            return self._wrap(self._data * np.float32(other))
        return NotImplemented

    def __add__(self: M, other: M) -> M:
        if type(other) is not type(self):
            return NotImplemented
        return self._wrap(self._data + other._data)

    def __sub__(self: M, other: M) -> M:
        if type(other) is not type(self):
            return NotImplemented
        return self._wrap(self._data - other._data)

    def __neg__(self: M) -> M:
        return self._wrap(-self._data)

    def __getitem__(self, index: tuple[int, int]) -> float:
        if not isinstance(index, tuple) or len(index) != 2:
            raise TypeError(
                f"{type(self).__name__}: index must be a (row, column) pair, got {index!r}"
            )
        i, j = index
        return float(self._data[check_index(i, self.ORDER, 'row'), check_index(j, self.ORDER, 'column')])

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.is_close(other)

    __hash__ = None  # tolerant equality is not transitive

    def __repr__(self) -> str:
        rows = ", ".join(
            "[" + ", ".join(repr(float(value)) for value in row) + "]"
            for row in self._data
        )
        return f"{type(self).__name__}([{rows}])"
