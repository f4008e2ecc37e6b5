"""
Numerical precision constants and utilities.

Provides the float64 epsilon and the tolerance rules used to decide when a
singular value or pivot counts as zero.
"""

import numpy as np
from numpy.typing import NDArray
from typing import Any


# Machine epsilon for float64
EPSILON_64: float = float(np.finfo(np.float64).eps)  # ~2.22e-16


def rank_tolerance(shape: tuple[int, int], largest: float) -> float:
    """
    Threshold below which a singular value (or R/U diagonal) is zero.

    Uses max(rows, cols) * eps * largest, the LAPACK/NumPy convention.

    Args:
        shape: Shape of the decomposed matrix
        largest: Largest singular value or diagonal magnitude

    Returns:
        Absolute tolerance
    """
    return max(shape) * EPSILON_64 * largest


def safe_ratio(numerator: float, denominator: float) -> float:
    """
    Division that returns inf (or nan for 0/0) instead of raising.

    Args:
        numerator: Dividend
        denominator: Divisor

    Returns:
        numerator / denominator under IEEE-754 semantics
    """
    with np.errstate(divide='ignore', invalid='ignore'):
        return float(np.float64(numerator) / np.float64(denominator))


def numerical_rank(
    singular_values: NDArray[np.floating[Any]],
    shape: tuple[int, int],
    tol: float | None = None,
) -> int:
    """
    Count singular values exceeding the rank tolerance.

    Args:
        singular_values: Singular values in descending order
        shape: Shape of the matrix they came from
        tol: Absolute tolerance; defaults to rank_tolerance(shape, s_max)

    Returns:
        Numerical rank
    """
    if singular_values.size == 0:
        return 0
    if tol is None:
        tol = rank_tolerance(shape, float(singular_values[0]))
    return int(np.sum(singular_values > tol))
