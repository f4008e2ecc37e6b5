"""
QR decomposition implementations.

Provides the QR kernel and the least-squares solve built on it. Used by
the general solve primitive for non-square systems, and from there by
trend forecasting and OLS regression.
"""

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import NDArray
from scipy.linalg import solve_triangular

from pymatrices.core.exceptions import SingularMatrixError
from pymatrices.core.compute.precision import rank_tolerance


@dataclass(frozen=True)
class QRResult:
    """
    Result of QR decomposition.

    Attributes:
        Q: Orthogonal matrix (n x k where k = min(n, p))
        R: Upper triangular matrix (k x p)
        rank: Numerical rank determined from R diagonal
    """
    Q: NDArray[np.floating[Any]]
    R: NDArray[np.floating[Any]]
    rank: int


def qr_cpu(
    X: NDArray[np.floating[Any]],
) -> QRResult:
    """
    Reduced QR decomposition using LAPACK (via NumPy).

    Computes X = QR where Q (n x k) has orthonormal columns and R (k x p)
    is upper triangular, k = min(n, p).

    Args:
        X: Matrix to decompose (n x p)

    Returns:
        QRResult with Q, R, and numerical rank
    """
    Q, R = np.linalg.qr(X, mode='reduced')

    # Determine numerical rank from R diagonal
    diag_R = np.abs(np.diag(R))
    largest = float(diag_R.max()) if len(diag_R) > 0 else 0.0
    if largest > 0:
        # Tolerance based on matrix size and machine epsilon
        tol = rank_tolerance(X.shape, largest)
        rank = int(np.sum(diag_R > tol))
    else:
        rank = 0

    return QRResult(Q=Q, R=R, rank=rank)


def qr_solve_cpu(
    X: NDArray[np.floating[Any]],
    Y: NDArray[np.floating[Any]],
    check_rank: bool,
    matrix_name: str = 'X',
) -> NDArray[np.floating[Any]]:
    """
    Solve least squares via QR decomposition (CPU).

    Overdetermined or square (n >= p): minimizes ||Y - X B||² via
        X = QR
        B = R⁻¹ Q'Y

    Underdetermined (n < p): returns the minimum-norm exact solution via
    the QR decomposition of X':
        X' = QR
        B = Q R⁻' Y

    Args:
        X: Coefficient matrix (n x p)
        Y: Right-hand side (n,) or (n x m)
        check_rank: If True, raise SingularMatrixError on rank-deficient X
        matrix_name: Name used in the error message

    Returns:
        Solution B (p,) or (p x m)

    Raises:
        SingularMatrixError: If X is rank-deficient and check_rank=True
    """
    n, p = X.shape
    k = min(n, p)
    qr_result = qr_cpu(X if n >= p else X.T)

    if check_rank and qr_result.rank < k:
        raise SingularMatrixError(
            f"Matrix {matrix_name} is rank-deficient: rank={qr_result.rank}, expected={k}.",
            matrix_name=matrix_name,
            rank=qr_result.rank,
            expected_rank=k,
        )

    R = qr_result.R[:k, :k]
    if n >= p:
        # Compute Q'Y first, then solve the triangular system
        QtY = qr_result.Q.T @ Y
        return solve_triangular(R, QtY[:k], lower=False)

    # R' z = Y by forward substitution, then lift back with Q
    z = solve_triangular(R, Y, trans='T', lower=False)
    return qr_result.Q @ z
