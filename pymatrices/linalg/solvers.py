"""
Decomposition-backed operations on Matrix values.

Public API:
    det(A), trace(A)                      - square matrices only
    rank(A), cond(A)                      - any shape, via SVD
    inverse(A)                            - square, via LU
    eig(A), eigenvalues(A), eigenvectors(A),
    real_eigenvalues(A), imaginary_eigenvalues(A)
    solve(A, B)                           - exact (LU) or least squares (QR)

None of these modify their arguments.
"""

from __future__ import annotations

import logging
from typing import Any

import numpy as np
from numpy.typing import NDArray

from pymatrices.core.exceptions import ShapeMismatchError, ValidationError
from pymatrices.core.validation import check_square
from pymatrices.core.compute.precision import numerical_rank
from pymatrices.core.compute.linalg import (
    condition_from_singular_values,
    eig_cpu,
    lu_det_cpu,
    lu_solve_cpu,
    qr_solve_cpu,
    singular_values_cpu,
)
from pymatrices.linalg.solution import EigenSolution
from pymatrices.matrix.matrix import Matrix

_log = logging.getLogger(__name__)


def _storage(A: Any, name: str) -> NDArray[np.float64]:
    if not isinstance(A, Matrix):
        raise ValidationError(f"{name}: expected a Matrix, got {type(A).__name__}")
    return A._data


def det(A: Matrix) -> float:
    """
    Determinant via LU decomposition with partial pivoting.

    A singular matrix has determinant 0.0; that is a result, not an error.

    The determinant is the plain product of the LU pivots, with no
    tolerance. inverse and solve instead treat a pivot at or below
    n * eps * max|pivot| as zero, so det([[1e-17, 0], [0, 1]]) is
    1e-17 while inverse of the same matrix raises SingularMatrixError.

    Raises:
        NotSquareError: If A is not square
    """
    data = _storage(A, 'A')
    check_square(data, 'det')
    return lu_det_cpu(data)


def trace(A: Matrix) -> float:
    """
    Sum of the diagonal.

    Raises:
        NotSquareError: If A is not square
    """
    data = _storage(A, 'A')
    check_square(data, 'trace')
    return float(np.trace(data))


def rank(A: Matrix, tol: float | None = None) -> int:
    """
    Numerical rank: number of singular values above a tolerance.

    Args:
        A: Any matrix
        tol: Absolute threshold; defaults to max(rows, cols) * eps * sigma_max
    """
    data = _storage(A, 'A')
    return numerical_rank(singular_values_cpu(data), data.shape, tol)


def cond(A: Matrix) -> float:
    """
    2-norm condition number sigma_max / sigma_min.

    Returns inf for a matrix with a zero singular value.
    """
    data = _storage(A, 'A')
    return condition_from_singular_values(singular_values_cpu(data))


def inverse(A: Matrix) -> Matrix:
    """
    Inverse via LU solve of A X = I.

    A pivot at or below n * eps * max|pivot| counts as zero, so a matrix
    with a tiny but nonzero determinant may still be rejected here.

    Raises:
        NotSquareError: If A is not square
        SingularMatrixError: If A is singular
    """
    data = _storage(A, 'A')
    n = check_square(data, 'inverse')
    return Matrix._wrap(lu_solve_cpu(data, np.eye(n), matrix_name='A'))


def eig(A: Matrix) -> EigenSolution:
    """
    Eigendecomposition of a real square matrix.

    Symmetric matrices use the symmetric solver (ascending real
    eigenvalues, orthonormal eigenvectors); everything else uses
    Hessenberg reduction followed by the shifted QR algorithm.

    Raises:
        NotSquareError: If A is not square
        ConvergenceError: If the QR iteration does not converge
    """
    data = _storage(A, 'A')
    check_square(data, 'eig')
    result = eig_cpu(data)
    _log.debug("eig: %dx%d, symmetric=%s", data.shape[0], data.shape[1], result.symmetric)
    return EigenSolution(_result=result)


def eigenvalues(A: Matrix) -> tuple[NDArray[np.float64], NDArray[np.float64]]:
    """(real parts, imaginary parts) of the eigenvalues, in matching order."""
    solution = eig(A)
    return solution.real, solution.imag


def real_eigenvalues(A: Matrix) -> NDArray[np.float64]:
    """Real parts of the eigenvalues."""
    return eig(A).real


def imaginary_eigenvalues(A: Matrix) -> NDArray[np.float64]:
    """Imaginary parts of the eigenvalues."""
    return eig(A).imag


def eigenvectors(A: Matrix) -> Matrix:
    """Real eigenvector matrix; see EigenSolution for the column layout."""
    return eig(A).vectors


def solve(A: Matrix, B: Matrix) -> Matrix:
    """
    Solve A X = B.

    Square A is solved exactly by LU decomposition. Otherwise X minimizes
    ||A X - B||: by QR least squares when A has more rows than columns,
    and as the minimum-norm solution when it has fewer.

    Args:
        A: Coefficient matrix (m x n)
        B: Right-hand side (m x k)

    Returns:
        X (n x k)

    Raises:
        ShapeMismatchError: If A and B have different numbers of rows
        SingularMatrixError: If A is singular (square) or rank-deficient
    """
    a = _storage(A, 'A')
    b = _storage(B, 'B')
    if a.shape[0] != b.shape[0]:
        raise ShapeMismatchError(
            f"solve: A has {a.shape[0]} rows but B has {b.shape[0]} rows; they must be equal",
            left_shape=A.shape,
            right_shape=B.shape,
            operation='solve',
        )

    m, n = a.shape
    if m == n:
        _log.debug("solve: %dx%d square system, using LU", m, n)
        return Matrix._wrap(lu_solve_cpu(a, b, matrix_name='A'))

    _log.debug(
        "solve: %dx%d %s system, using QR",
        m, n, 'overdetermined' if m > n else 'underdetermined',
    )
    return Matrix._wrap(qr_solve_cpu(a, b, check_rank=True, matrix_name='A'))
