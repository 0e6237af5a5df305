"""
Exception hierarchy for PyGeomath.

All exceptions inherit from PyGeomathError to allow catching any
library-specific error.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages name the offending value or parameter
    - Geometrically undefined results are NumericalError subclasses;
      bad inputs are ValidationError subclasses
"""


class PyGeomathError(Exception):
    """Base exception for all PyGeomath errors."""
    pass


class ValidationError(PyGeomathError):
    """
    Input validation failed.

    Raised when user-provided components or builder parameters fail
    validation checks (non-numeric, non-finite, degenerate ranges).
    """
    pass


class DimensionError(ValidationError):
    """
    Dimensions are incorrect or inconsistent.

    Raised when a vector or matrix is constructed from the wrong number
    of components, or when a matrix is applied to an operand of a
    different dimension.
    """
    pass


class NumericalError(PyGeomathError):
    """
    Geometric computation is undefined.

    Base class for errors arising from degenerate values: null vectors,
    singular matrices, points at infinity.
    """
    pass


class SingularMatrixError(NumericalError):
    """
    Matrix is singular (|det| below EPSILON).

    Raised by Matrix.invert(). Use Matrix.try_invert() to get None instead.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        determinant: The determinant that failed the check, if computed
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        determinant: float | None = None
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.determinant = determinant


class NullVectorError(NumericalError):
    """
    Vector is null (length below EPSILON) where a direction is required.

    Raised by normalize(), angle() and reflect_with(). The try_* variants
    return None instead.

    Attributes:
        operation: Name of the operation that needed a direction
        length: Length of the offending vector, if computed
    """

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        length: float | None = None
    ):
        super().__init__(message)
        self.operation = operation
        self.length = length
