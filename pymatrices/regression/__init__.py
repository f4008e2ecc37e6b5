"""
Multi-variable ordinary least squares.

Public API:
    regress(data) -> RegressionSolution

data is laid out Y | X1 .. Xk with one observation per row.

Example:
    >>> from pymatrices.regression import regress
    >>> sol = regress([[3, 1], [5, 2], [7, 3], [9, 4]])
    >>> r_squared, tss, rss = sol.statistics
    >>> print(sol.summary())
"""

from pymatrices.regression.design import RegressionDesign
from pymatrices.regression.solution import RegressionSolution, RegressionParams
from pymatrices.regression.solvers import regress

__all__ = [
    "regress",
    "RegressionDesign",
    "RegressionSolution",
    "RegressionParams",
]
