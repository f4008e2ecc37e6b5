"""
Eigendecomposition solution type.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import NDArray

from pymatrices.core.compute.linalg.eigen import EigenResult
from pymatrices.matrix.matrix import Matrix


@dataclass(frozen=True)
class EigenSolution:
    """
    User-facing eigendecomposition of a real square matrix.

    Eigenvalues come as parallel real/imaginary arrays in matching order.
    Complex conjugate pairs are adjacent, the one with positive imaginary
    part first. The eigenvector matrix is real: for a conjugate pair at
    (j, j+1) column j is the real part and column j+1 the imaginary part
    of the eigenvector of eigenvalue j.
    """
    _result: EigenResult

    @property
    def real(self) -> NDArray[np.floating[Any]]:
        """Real parts of the eigenvalues."""
        return self._result.real.copy()

    @property
    def imag(self) -> NDArray[np.floating[Any]]:
        """Imaginary parts of the eigenvalues."""
        return self._result.imag.copy()

    @property
    def values(self) -> NDArray[np.complexfloating[Any, Any]]:
        """Eigenvalues as complex numbers."""
        return self._result.real + 1j * self._result.imag

    @property
    def vectors(self) -> Matrix:
        """Real eigenvector matrix in block form."""
        return Matrix._wrap(self._result.vectors.copy())

    @property
    def block_diagonal(self) -> Matrix:
        """Real matrix D with A V = V D (2x2 blocks for conjugate pairs)."""
        return Matrix._wrap(self._result.block_diagonal())

    @property
    def symmetric(self) -> bool:
        """Whether the symmetric solver was used."""
        return self._result.symmetric

    @property
    def is_real(self) -> bool:
        """True if every eigenvalue is real."""
        return bool(np.all(self._result.imag == 0))

    def __repr__(self) -> str:
        return f"EigenSolution(n={self._result.real.shape[0]}, symmetric={self.symmetric})"
