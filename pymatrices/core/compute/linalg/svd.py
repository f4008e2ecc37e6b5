"""
Singular value decomposition helpers.

Rank and condition number are both read off the singular values, so only
those are computed (no U or V).
"""

from typing import Any

import numpy as np
from numpy.typing import NDArray

from pymatrices.core.exceptions import ConvergenceError
from pymatrices.core.compute.precision import safe_ratio


def singular_values_cpu(A: NDArray[np.floating[Any]]) -> NDArray[np.floating[Any]]:
    """
    Singular values of A in descending order (LAPACK gesdd).

    Args:
        A: Matrix (m x n)

    Returns:
        Array of min(m, n) singular values

    Raises:
        ConvergenceError: If the SVD iteration does not converge
    """
    try:
        return np.linalg.svd(A, compute_uv=False)
    except np.linalg.LinAlgError as e:
        raise ConvergenceError(
            f"SVD did not converge: {e}",
            reason=str(e),
        ) from e


def condition_from_singular_values(s: NDArray[np.floating[Any]]) -> float:
    """
    Ratio of the largest to the smallest singular value.

    Returns:
        sigma_max / sigma_min; inf when sigma_min is zero
    """
    return safe_ratio(float(s[0]), float(s[-1]))
