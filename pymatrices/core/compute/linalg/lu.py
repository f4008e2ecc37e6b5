"""
LU decomposition with partial pivoting.

Backs the determinant, the inverse and exact solves of square systems.
Uses LAPACK getrf/getrs through scipy.linalg.
"""

import warnings
from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import NDArray
from scipy.linalg import LinAlgWarning, lu_factor, lu_solve

from pymatrices.core.exceptions import SingularMatrixError
from pymatrices.core.compute.precision import numerical_rank, rank_tolerance
from pymatrices.core.compute.linalg.svd import singular_values_cpu, condition_from_singular_values


@dataclass(frozen=True)
class LUResult:
    """
    Result of LU decomposition.

    Attributes:
        lu: Packed factors, unit-lower L below the diagonal and U on and above it
        piv: LAPACK pivot indices (row i was interchanged with row piv[i])
        n_swaps: Number of actual row interchanges
    """
    lu: NDArray[np.floating[Any]]
    piv: NDArray[np.integer[Any]]
    n_swaps: int

    @property
    def pivots(self) -> NDArray[np.floating[Any]]:
        """Diagonal of U."""
        return np.diag(self.lu)

    def is_singular(self) -> bool:
        """
        True if any pivot is zero relative to the largest pivot.

        The cutoff is max(n, m) * eps * max|pivot|, so a matrix whose
        pivots differ in scale by more than that counts as singular even
        though its determinant, the product of the pivots, is nonzero.
        """
        magnitudes = np.abs(self.pivots)
        largest = float(magnitudes.max()) if magnitudes.size else 0.0
        if largest == 0.0:
            return True
        return bool(np.any(magnitudes <= rank_tolerance(self.lu.shape, largest)))


def lu_cpu(A: NDArray[np.floating[Any]]) -> LUResult:
    """
    LU decomposition with partial pivoting (LAPACK getrf).

    Never fails on singular input: the zero pivot is left in U and it is
    up to the caller to decide whether that matters.

    Args:
        A: Square matrix (n x n)

    Returns:
        LUResult
    """
    with warnings.catch_warnings():
        # getrf reports exactly-zero pivots as a warning; singularity is
        # judged by the callers.
        warnings.simplefilter('ignore', LinAlgWarning)
        lu, piv = lu_factor(A, check_finite=False)
    n_swaps = int(np.sum(piv != np.arange(piv.shape[0])))
    return LUResult(lu=lu, piv=piv, n_swaps=n_swaps)


def lu_det_cpu(A: NDArray[np.floating[Any]]) -> float:
    """
    Determinant as the signed product of the LU pivots.

    Args:
        A: Square matrix (n x n)

    Returns:
        det(A); exactly 0.0 when a pivot is exactly zero
    """
    result = lu_cpu(A)
    sign = -1.0 if result.n_swaps % 2 else 1.0
    return sign * float(np.prod(result.pivots))


def lu_solve_cpu(
    A: NDArray[np.floating[Any]],
    B: NDArray[np.floating[Any]],
    matrix_name: str = 'A',
) -> NDArray[np.floating[Any]]:
    """
    Solve the square system A X = B via LU decomposition.

    Args:
        A: Square coefficient matrix (n x n)
        B: Right-hand side (n x m)
        matrix_name: Name used in the error, if A is singular

    Returns:
        Solution X (n x m)

    Pivots are tested relative to the largest pivot (see
    LUResult.is_singular), not against zero.

    Raises:
        SingularMatrixError: If A has a zero pivot
    """
    result = lu_cpu(A)
    if result.is_singular():
        s = singular_values_cpu(A)
        rank = numerical_rank(s, A.shape)
        raise SingularMatrixError(
            f"Matrix {matrix_name} is singular: rank={rank}, expected={A.shape[0]}.",
            matrix_name=matrix_name,
            condition_number=condition_from_singular_values(s),
            rank=rank,
            expected_rank=A.shape[0],
        )
    return lu_solve((result.lu, result.piv), B, check_finite=False)
