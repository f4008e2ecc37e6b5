"""
Decompositions and solves on dense matrices.

Public API:
    det(A), rank(A), cond(A), trace(A)
    inverse(A)
    eig(A) -> EigenSolution
    eigenvalues(A), real_eigenvalues(A), imaginary_eigenvalues(A)
    eigenvectors(A)
    solve(A, B)

Example:
    >>> from pymatrices.matrix import Matrix
    >>> from pymatrices.linalg import rank, trace
    >>> A = Matrix([[1, 2], [3, 4]])
    >>> rank(A), trace(A)
    (2, 5.0)
"""

from pymatrices.linalg.solution import EigenSolution
from pymatrices.linalg.solvers import (
    det,
    rank,
    cond,
    trace,
    inverse,
    eig,
    eigenvalues,
    real_eigenvalues,
    imaginary_eigenvalues,
    eigenvectors,
    solve,
)

__all__ = [
    "det",
    "rank",
    "cond",
    "trace",
    "inverse",
    "eig",
    "eigenvalues",
    "real_eigenvalues",
    "imaginary_eigenvalues",
    "eigenvectors",
    "solve",
    "EigenSolution",
]
