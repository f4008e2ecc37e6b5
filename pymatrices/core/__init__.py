"""
Core infrastructure for pymatrices.

This module provides shared abstractions, utilities, and compute
infrastructure used by all domain-specific submodules (matrix, linalg,
arithmetic, trend, regression).

Key components:
    protocols: Backend protocol
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Timing, precision, linear algebra kernels
"""

from pymatrices.core.protocols import Backend
from pymatrices.core.result import Result
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

__all__ = [
    # Protocols
    "Backend",
    # Result
    "Result",
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
