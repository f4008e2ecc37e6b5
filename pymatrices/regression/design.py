"""
Regression design.

Design takes a data matrix laid out as Y | X1 .. Xk, one observation per
row, and splits it into the response and the design matrix. The design
matrix is the data matrix with its first column overwritten by ones, so
the first coefficient is the intercept.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymatrices.core.exceptions import OverdeterminedError
from pymatrices.core.validation import check_finite
from pymatrices.matrix.matrix import Matrix


@dataclass(frozen=True)
class RegressionDesign:
    """
    OLS design specification.

    Immutable after construction.

    Construction:
        RegressionDesign.from_matrix(Matrix([[3, 1], [5, 2], [7, 3]]))
        RegressionDesign.from_matrix([[3, 1], [5, 2], [7, 3]])
    """
    _X: Matrix
    _y: NDArray[np.floating[Any]]
    _n: int
    _k: int

    @classmethod
    def from_matrix(cls, data: Matrix | ArrayLike) -> RegressionDesign:
        """
        Build a design from a Y | X1 .. Xk data matrix.

        Raises:
            ValidationError: If the data are not a finite numeric matrix
            OverdeterminedError: If k >= n
        """
        matrix = data.copy() if isinstance(data, Matrix) else Matrix(data)
        array = matrix.to_numpy()
        check_finite(array, 'data')

        n = matrix.n_rows
        k = matrix.n_cols - 1
        if k >= n:
            raise OverdeterminedError(
                f"data: the system is overdetermined; {k} independent variables "
                f"need more than {k} observations, got {n}",
                n_observations=n,
                n_variables=k,
            )

        y = array[:, 0].copy()
        matrix.set_column(0, np.ones(n))
        return cls(_X=matrix, _y=y, _n=n, _k=k)

    @property
    def X(self) -> Matrix:
        """Design matrix (n, k+1) with a leading column of ones."""
        return self._X

    @property
    def y(self) -> NDArray[np.floating[Any]]:
        """Response vector (n,)."""
        return self._y

    @property
    def n(self) -> int:
        """Number of observations."""
        return self._n

    @property
    def k(self) -> int:
        """Number of independent variables."""
        return self._k

    @property
    def p(self) -> int:
        """Number of coefficients, intercept included."""
        return self._k + 1

    def response_matrix(self) -> Matrix:
        return Matrix.from_columns([self._y])

