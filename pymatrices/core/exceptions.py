"""
Exception hierarchy for pymatrices.

All exceptions inherit from PyMatricesError to allow catching any
library-specific error. Domain-specific exceptions should inherit from
the appropriate base class here.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information

Where a failure has an obvious builtin counterpart (a bad coordinate, an
operand of the wrong kind, a value outside a function's domain), the
exception also derives from that builtin so callers can catch either.
"""


class PyMatricesError(Exception):
    """Base exception for all pymatrices errors."""
    pass


class ValidationError(PyMatricesError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect or inconsistent.

    Raised when array shapes don't match expected dimensions, when a row
    or column of the wrong length is supplied, or when a matrix would
    have zero rows or columns.

    Attributes:
        expected: Expected length or shape, if known
        actual: Actual length or shape, if known
    """

    def __init__(
        self,
        message: str,
        expected: int | tuple[int, ...] | None = None,
        actual: int | tuple[int, ...] | None = None,
    ):
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class NotSquareError(DimensionError):
    """Operation requires a square matrix."""
    pass


class ShapeMismatchError(DimensionError):
    """
    Two operands have incompatible shapes.

    Attributes:
        left_shape: Shape of the left operand
        right_shape: Shape of the right operand
        operation: Name of the operation that rejected them
    """

    def __init__(
        self,
        message: str,
        left_shape: tuple[int, int] | None = None,
        right_shape: tuple[int, int] | None = None,
        operation: str | None = None,
    ):
        super().__init__(message, expected=left_shape, actual=right_shape)
        self.left_shape = left_shape
        self.right_shape = right_shape
        self.operation = operation


class MatrixIndexError(ValidationError, IndexError):
    """
    Row, column or range index out of bounds.

    Attributes:
        index: The offending index
        bound: Number of valid positions along the axis
        axis: 'row' or 'column'
    """

    def __init__(
        self,
        message: str,
        index: int | None = None,
        bound: int | None = None,
        axis: str | None = None,
    ):
        super().__init__(message)
        self.index = index
        self.bound = bound
        self.axis = axis


class OperandTypeError(ValidationError, TypeError):
    """
    Operand is neither a real number nor a Matrix.

    Attributes:
        operand_type: Name of the rejected operand's type
    """

    def __init__(self, message: str, operand_type: str | None = None):
        super().__init__(message)
        self.operand_type = operand_type


class EmptyInputError(ValidationError):
    """A sequence that must be non-empty was empty."""
    pass


class EmptyOperandsError(EmptyInputError):
    """A reduction received no operands."""
    pass


class NonPositiveInputError(ValidationError, ValueError):
    """
    Value outside the domain of the logarithm.

    Attributes:
        index: Position of the first offending value
        value: The offending value
    """

    def __init__(self, message: str, index: int, value: float):
        super().__init__(message)
        self.index = index
        self.value = value


class OverdeterminedError(ValidationError):
    """
    Too few observations for the number of coefficients.

    Attributes:
        n_observations: Number of rows supplied
        n_variables: Number of independent variables supplied
    """

    def __init__(self, message: str, n_observations: int, n_variables: int):
        super().__init__(message)
        self.n_observations = n_observations
        self.n_variables = n_variables


class NumericalError(PyMatricesError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class SingularMatrixError(NumericalError):
    """
    Matrix is singular or nearly singular.

    Raised when a matrix operation requires invertibility but the matrix
    is singular or numerically rank-deficient.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        condition_number: Estimated condition number, if available
        rank: Numerical rank, if computed
        expected_rank: Expected rank (typically min(n, p))
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        condition_number: float | None = None,
        rank: int | None = None,
        expected_rank: int | None = None
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.condition_number = condition_number
        self.rank = rank
        self.expected_rank = expected_rank


class ConvergenceError(PyMatricesError):
    """
    Iterative algorithm failed to converge.

    Raised when an iterative method (the shifted QR iteration behind the
    eigendecomposition) fails to meet its convergence criteria.

    Attributes:
        iterations: Number of iterations completed, if known
        reason: Why convergence failed, as reported by the kernel
    """

    def __init__(
        self,
        message: str,
        iterations: int | None = None,
        reason: str | None = None,
    ):
        super().__init__(message)
        self.iterations = iterations
        self.reason = reason
