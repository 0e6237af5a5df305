"""
Core infrastructure for PyGeomath.

This module provides the shared constants, exceptions and validators
used by the vectors, matrices and transforms submodules.

Key components:
    constants: EPSILON / PRECISION / PI / DEGREE and angle conversion
    exceptions: Exception hierarchy
    validation: Input validators
"""

from pygeomath.core.constants import (
    PRECISION,
    EPSILON,
    PI,
    DEGREE,
    epsilon_from_precision,
    radians_from_degree,
    degrees_from_radian,
    unpack,
)
from pygeomath.core.exceptions import (
    PyGeomathError,
    ValidationError,
    DimensionError,
    NumericalError,
    SingularMatrixError,
    NullVectorError,
)

__all__ = [
    # Constants
    "PRECISION",
    "EPSILON",
    "PI",
    "DEGREE",
    "epsilon_from_precision",
    "radians_from_degree",
    "degrees_from_radian",
    "unpack",
    # Exceptions
    "PyGeomathError",
    "ValidationError",
    "DimensionError",
    "NumericalError",
    "SingularMatrixError",
    "NullVectorError",
]
