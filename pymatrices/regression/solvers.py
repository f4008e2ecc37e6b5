"""
Solver dispatch for OLS regression.

Provides regress() (public API) and backend selection.
"""

from __future__ import annotations

import logging
from typing import Literal
from numpy.typing import ArrayLike

from pymatrices.core.exceptions import ValidationError
from pymatrices.matrix.matrix import Matrix
from pymatrices.regression.design import RegressionDesign
from pymatrices.regression.solution import RegressionSolution
from pymatrices.regression.backends.cpu import CPULeastSquaresBackend

_log = logging.getLogger(__name__)

BackendChoice = Literal['auto', 'cpu', 'cpu_lstsq']


def _get_backend(choice: BackendChoice) -> CPULeastSquaresBackend:
    """
    Select and instantiate the backend.

    Raises:
        ValidationError: If unknown backend specified
    """
    if choice in ('auto', 'cpu', 'cpu_lstsq'):
        return CPULeastSquaresBackend()
    raise ValidationError(
        f"Unknown backend: {choice!r}. Valid choices: 'auto', 'cpu', 'cpu_lstsq'"
    )


def regress(
    data: Matrix | ArrayLike,
    *,
    backend: BackendChoice = 'auto',
) -> RegressionSolution:
    """
    Ordinary least squares on a Y | X1 .. Xk data matrix.

    Fits Y = b0 + b1 X1 + ... + bk Xk over the n rows of data.

    Args:
        data: Matrix (or rectangular array-like) whose column 0 is the
            dependent variable and columns 1..k the independent ones
        backend: 'auto', 'cpu' or 'cpu_lstsq'

    Returns:
        RegressionSolution with coefficients [b0, b1, .., bk] and
        statistics (R², TSS, RSS)

    Raises:
        OverdeterminedError: If k >= n
        SingularMatrixError: If the predictors are collinear

    Example:
        >>> sol = regress([[3, 1], [5, 2], [7, 3], [9, 4]])
        >>> sol.coefficients
        array([1., 2.])
    """
    design = RegressionDesign.from_matrix(data)
    impl = _get_backend(backend)
    _log.debug("regress: n=%d k=%d backend=%s", design.n, design.k, impl.name)
    result = impl.solve(design)
    return RegressionSolution(_result=result, _design=design)
