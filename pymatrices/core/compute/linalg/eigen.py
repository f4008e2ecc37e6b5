"""
Eigendecomposition of real square matrices.

Symmetric input goes to the symmetric tridiagonal solver (LAPACK syevd),
which yields real eigenvalues in ascending order and orthonormal
eigenvectors. General input goes through Hessenberg reduction and the
shifted QR algorithm (LAPACK geev).

Complex eigenvectors are folded into a real matrix in block form: for a
conjugate pair at positions (j, j+1), column j holds the real part and
column j+1 the imaginary part of the eigenvector belonging to the
eigenvalue with positive imaginary part, so that A V = V D with D block
diagonal.
"""

from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import NDArray

from pymatrices.core.exceptions import ConvergenceError


@dataclass(frozen=True)
class EigenResult:
    """
    Result of eigendecomposition.

    Attributes:
        real: Real parts of the eigenvalues (n,)
        imag: Imaginary parts of the eigenvalues (n,)
        vectors: Real eigenvector matrix in block form (n x n)
        symmetric: Whether the symmetric solver was used
    """
    real: NDArray[np.floating[Any]]
    imag: NDArray[np.floating[Any]]
    vectors: NDArray[np.floating[Any]]
    symmetric: bool

    def block_diagonal(self) -> NDArray[np.floating[Any]]:
        """
        The real block-diagonal eigenvalue matrix D with A V = V D.

        Real eigenvalues sit on the diagonal; each conjugate pair a ± bi
        occupies a 2x2 block [[a, b], [-b, a]].
        """
        n = self.real.shape[0]
        D = np.diag(self.real)
        for j in range(n):
            if self.imag[j] > 0:
                D[j, j + 1] = self.imag[j]
            elif self.imag[j] < 0:
                D[j, j - 1] = self.imag[j]
        return D


def eig_cpu(A: NDArray[np.floating[Any]]) -> EigenResult:
    """
    Eigenvalues and real block-form eigenvectors of a square matrix.

    Args:
        A: Square matrix (n x n)

    Returns:
        EigenResult

    Raises:
        ConvergenceError: If the QR iteration does not converge
    """
    n = A.shape[0]

    try:
        if np.array_equal(A, A.T):
            w, V = np.linalg.eigh(A)
            return EigenResult(
                real=w,
                imag=np.zeros(n),
                vectors=V,
                symmetric=True,
            )
        w, V = np.linalg.eig(A)
    except np.linalg.LinAlgError as e:
        raise ConvergenceError(
            f"Eigenvalues did not converge: {e}",
            reason=str(e),
        ) from e

    real = np.ascontiguousarray(w.real, dtype=np.float64)
    imag = np.ascontiguousarray(w.imag, dtype=np.float64)
    vectors = np.empty((n, n), dtype=np.float64)

    j = 0
    while j < n:
        if imag[j] > 0 and j + 1 < n:
            # geev stores conjugate pairs adjacently, positive part first
            vectors[:, j] = V[:, j].real
            vectors[:, j + 1] = V[:, j].imag
            j += 2
        else:
            vectors[:, j] = V[:, j].real
            j += 1

    return EigenResult(real=real, imag=imag, vectors=vectors, symmetric=False)
