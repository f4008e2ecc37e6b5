"""
PyMatrices: dense matrix algebra and least-squares statistics for Python.

Matrix values with validated, exception-based error reporting, a
broadcasting arithmetic layer over scalars and matrices, LAPACK-backed
decompositions, and trend forecasting and OLS regression built on them.

Submodules:
    core: Exceptions, validation, Result envelope, compute kernels
    matrix: The Matrix value type
    arithmetic: Broadcasting plus / minus / times and friends
    linalg: Determinant, rank, inverse, eigen, solve
    trend: Linear, compound and continuous growth forecasts
    regression: Multi-variable OLS
"""

__version__ = "0.1.0"

from pymatrices import core
from pymatrices import matrix
from pymatrices import arithmetic
from pymatrices import linalg
from pymatrices import trend
from pymatrices import regression

from pymatrices.core.exceptions import (
    PyMatricesError,
    ValidationError,
    DimensionError,
    NotSquareError,
    ShapeMismatchError,
    MatrixIndexError,
    OperandTypeError,
    EmptyInputError,
    EmptyOperandsError,
    NonPositiveInputError,
    OverdeterminedError,
    NumericalError,
    SingularMatrixError,
    ConvergenceError,
)
from pymatrices.matrix import Matrix, make_constant, make_identity
from pymatrices.arithmetic import (
    plus,
    minus,
    times,
    times_elementwise,
    plus_scalar,
    times_scalar,
    map_elements,
)
from pymatrices.linalg import (
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
from pymatrices.trend import forecast_linear, forecast_compound, forecast_continuous
from pymatrices.regression import regress

__all__ = [
    "__version__",
    # Submodules
    "core",
    "matrix",
    "arithmetic",
    "linalg",
    "trend",
    "regression",
    # Matrix
    "Matrix",
    "make_constant",
    "make_identity",
    # Arithmetic
    "plus",
    "minus",
    "times",
    "times_elementwise",
    "plus_scalar",
    "times_scalar",
    "map_elements",
    # Linear algebra
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
    # Statistics
    "forecast_linear",
    "forecast_compound",
    "forecast_continuous",
    "regress",
    # Exceptions
    "PyMatricesError",
    "ValidationError",
    "DimensionError",
    "NotSquareError",
    "ShapeMismatchError",
    "MatrixIndexError",
    "OperandTypeError",
    "EmptyInputError",
    "EmptyOperandsError",
    "NonPositiveInputError",
    "OverdeterminedError",
    "NumericalError",
    "SingularMatrixError",
    "ConvergenceError",
]
