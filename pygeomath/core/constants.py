"""
Numerical constants shared by all geometric comparisons.

EPSILON is the single threshold for "numerically zero": vector lengths,
determinants and dot products are compared against it, never against 0.
It is derived from a fixed number of decimal digits (PRECISION).
"""

import numpy as np
from numpy.typing import ArrayLike

# Decimal digits trusted in single-precision geometric results
PRECISION: int = 3


def epsilon_from_precision(digits: int) -> float:
    """
    Tolerance corresponding to a number of trusted decimal digits.

    Args:
        digits: Number of decimal digits (non-negative)

    Returns:
        10 ** -digits

    Raises:
        ValueError: If digits is negative
    """
    if digits < 0:
        raise ValueError(f"digits: must be non-negative, got {digits}")
    return 1.0 / 10 ** digits


EPSILON: float = epsilon_from_precision(PRECISION)  # 0.001

PI: float = float(np.pi)

# One degree in radians
DEGREE: float = PI / 180.0


def radians_from_degree(degree: float) -> float:
    """Convert an angle in degrees to radians."""
    return degree * DEGREE


def degrees_from_radian(radian: float) -> float:
    """Convert an angle in radians to degrees."""
    return radian / DEGREE


def unpack(grid: ArrayLike) -> list[float]:
    """
    Flatten a square grid into a row-major list of floats.

    Args:
        grid: N x N nested sequence or array

    Returns:
        List of N*N floats, row by row
    """
    return [float(value) for value in np.asarray(grid, dtype=np.float64).ravel()]
