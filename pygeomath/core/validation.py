"""
Input validation utilities for PyGeomath.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except conversion of numbers to float32)
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pygeomath.core.exceptions import ValidationError, DimensionError, NumericalError


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.float32]:
    """
    Validate and convert input to a float32 numpy array.

    Accepts any array-like and converts to numpy array. Rejects inputs
    that result in object dtype (indicating mixed types or non-numeric data).

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray with dtype float32 (always a fresh copy)

    Raises:
        ValidationError: If input cannot be converted to numeric array
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    # Rejects strings, datetimes and booleans (np.bool_ is not np.number)
    if not np.issubdtype(result.dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    return result.astype(np.float32, copy=True)


def check_finite(array: NDArray[np.floating], name: str) -> None:
    """
    Verify array contains no NaN or Inf values.

    Values too large for single precision become Inf during conversion
    and are rejected here as well.

    Raises:
        ValidationError: If array contains non-finite values
    """
    if not np.all(np.isfinite(array)):
        n_nan = int(np.sum(np.isnan(array)))
        n_inf = int(np.sum(np.isinf(array)))
        raise ValidationError(
            f"{name}: contains non-finite values ({n_nan} NaN, {n_inf} Inf)"
        )


def check_shape(
    array: NDArray[np.floating],
    shape: tuple[int, ...],
    name: str,
) -> None:
    """
    Verify array has exactly the given shape.

    Args:
        array: Array to check
        shape: Required shape
        name: Parameter name for error messages

    Raises:
        DimensionError: If the shape differs
    """
    if array.shape != shape:
        raise DimensionError(
            f"{name}: expected shape {shape}, got {array.shape}"
        )


def check_index(index: int, bound: int, name: str) -> int:
    """
    Verify an index lies in [0, bound).

    Negative indices are not wrapped: row and column numbers are
    positions, not offsets from the end.

    Returns:
        The index as a plain int

    Raises:
        IndexError: If the index is out of range
    """
    if isinstance(index, (bool, np.bool_)) or not isinstance(index, (int, np.integer)):
        raise TypeError(f"{name}: index must be an integer, got {type(index).__name__}")
    if not 0 <= index < bound:
        raise IndexError(f"{name}: index {index} out of range [0, {bound})")
    return int(index)


def check_nonzero(value: float, name: str) -> None:
    """
    Verify a scalar parameter is not exactly zero.

    Used by projection builders, which divide by clip-plane ranges and
    the aspect ratio.

    Raises:
        ValidationError: If value == 0
    """
    if value == 0:
        raise ValidationError(f"{name}: must be nonzero, got {value}")


def check_result_finite(array: NDArray[np.floating], name: str) -> None:
    """
    Verify a computed result is finite.

    Products and quotients of finite single-precision values can still
    overflow to Inf; such results are rejected rather than stored.

    Raises:
        NumericalError: If array contains non-finite values
    """
    if not np.all(np.isfinite(array)):
        raise NumericalError(
            f"{name}: result overflows single precision (non-finite entries)"
        )
