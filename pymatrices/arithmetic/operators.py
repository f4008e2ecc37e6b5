"""
Broadcasting binary operators over scalars and matrices.

A BinaryOperator is defined by its scalar rule f(a, b). From that rule
the fold derives every mixed case:

    scalar (+) scalar  ->  f(a, b)
    scalar (+) matrix  ->  f applied between the scalar and every entry
    matrix (+) scalar  ->  same, operand order preserved
    matrix (+) matrix  ->  elementwise f on equal shapes, or the
                           operator's matrix rule (the matrix product for
                           'times') when it has one

The scalar rule must broadcast over NumPy arrays; NumPy ufuncs do, and
from_scalar_rule lifts any plain Python function.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable

import numpy as np
from numpy.typing import NDArray

from pymatrices.core.exceptions import (
    EmptyOperandsError,
    OperandTypeError,
    ShapeMismatchError,
)
from pymatrices.core.validation import check_real
from pymatrices.arithmetic.operand import MatrixValue, Operand, Scalar, as_operand, unwrap
from pymatrices.matrix.matrix import Matrix


ScalarRule = Callable[[Any, Any], Any]
MatrixRule = Callable[[NDArray[np.float64], NDArray[np.float64]], NDArray[np.float64]]

# Relative binding strength for hosts that register infix forms;
# multiplication binds tighter than addition and subtraction.
PLUS_PRECEDENCE = 7
TIMES_PRECEDENCE = 8


@dataclass(frozen=True)
class BinaryOperator:
    """
    A binary numeric operator with scalar/matrix broadcasting.

    Attributes:
        name: Operator name, used in error messages
        rule: Scalar rule f(a, b), broadcasting over arrays
        precedence: Infix binding strength (higher binds tighter)
        matrix_rule: Rule for matrix (+) matrix when it is not elementwise;
            requires left.cols == right.rows
    """
    name: str
    rule: ScalarRule
    precedence: int = PLUS_PRECEDENCE
    matrix_rule: MatrixRule | None = None

    @classmethod
    def from_scalar_rule(
        cls,
        name: str,
        func: Callable[[float, float], float],
        precedence: int = PLUS_PRECEDENCE,
    ) -> BinaryOperator:
        """
        Build an elementwise operator from a plain scalar function.

        Example:
            >>> hypot = BinaryOperator.from_scalar_rule('hypot', math.hypot)
            >>> hypot.reduce([3.0, make_constant(1, 2, 4.0)]).to_rows()
            [[5.0, 5.0]]
        """
        lifted = np.frompyfunc(func, 2, 1)

        def rule(a: Any, b: Any) -> Any:
            result = lifted(a, b)
            if isinstance(result, np.ndarray):
                return result.astype(np.float64)
            return float(result)

        return cls(name=name, rule=rule, precedence=precedence)

    def reduce(self, operands: Iterable[Any]) -> float | Matrix:
        """
        Fold a non-empty operand sequence left to right.

        The first operand seeds the accumulator (a matrix is copied, so no
        input is ever modified).

        Raises:
            EmptyOperandsError: If operands is empty
            OperandTypeError: If an operand is neither a number nor a Matrix
            ShapeMismatchError: If two matrices are incompatible
        """
        iterator = iter(operands)
        try:
            first = next(iterator)
        except StopIteration:
            raise EmptyOperandsError(
                f"{self.name}: at least one operand is required"
            ) from None

        accumulator = _owned(as_operand(first, 0))
        for position, operand in enumerate(iterator, start=1):
            accumulator = self._combine(accumulator, as_operand(operand, position))
        return unwrap(accumulator)

    def apply(self, left: Any, right: Any) -> float | Matrix:
        """Two-operand (infix) form; same broadcasting as reduce."""
        accumulator = _owned(as_operand(left, 0))
        return unwrap(self._combine(accumulator, as_operand(right, 1)))

    def __call__(self, *operands: Any) -> float | Matrix:
        return self.reduce(operands)

    def _combine(self, accumulator: Operand, operand: Operand) -> Operand:
        # The accumulator belongs to the fold and is updated in place
        # whenever its shape survives the step.
        match accumulator, operand:
            case Scalar(a), Scalar(b):
                return Scalar(float(self.rule(a, b)))
            case Scalar(a), MatrixValue(m):
                return MatrixValue(Matrix._wrap(self.rule(a, m._data)))
            case MatrixValue(m), Scalar(b):
                m._data[...] = self.rule(m._data, b)
                return accumulator
            case MatrixValue(left), MatrixValue(right):
                return self._combine_matrices(left, right)
        raise OperandTypeError(
            f"{self.name}: cannot combine {type(accumulator).__name__} "
            f"with {type(operand).__name__}"
        )

    def _combine_matrices(self, left: Matrix, right: Matrix) -> MatrixValue:
        if self.matrix_rule is not None:
            if left.n_cols != right.n_rows:
                raise ShapeMismatchError(
                    f"{self.name}: the left matrix has {left.n_cols} columns but the "
                    f"right matrix has {right.n_rows} rows; they must be equal",
                    left_shape=left.shape,
                    right_shape=right.shape,
                    operation=self.name,
                )
            return MatrixValue(Matrix._wrap(self.matrix_rule(left._data, right._data)))

        if left.shape != right.shape:
            raise ShapeMismatchError(
                f"{self.name}: matrices must have the same number of rows and columns. "
                f"Needed a matrix with {left.n_rows} rows and {left.n_cols} columns, "
                f"but found a matrix with {right.n_rows} rows and {right.n_cols} columns",
                left_shape=left.shape,
                right_shape=right.shape,
                operation=self.name,
            )
        left._data[...] = self.rule(left._data, right._data)
        return MatrixValue(left)


def _owned(operand: Operand) -> Operand:
    """Copy a matrix operand so the fold may mutate it."""
    match operand:
        case MatrixValue(matrix):
            return MatrixValue(matrix.copy())
    return operand


PLUS = BinaryOperator('plus', np.add, PLUS_PRECEDENCE)
MINUS = BinaryOperator('minus', np.subtract, PLUS_PRECEDENCE)
TIMES = BinaryOperator('times', np.multiply, TIMES_PRECEDENCE, matrix_rule=np.matmul)
TIMES_ELEMENTWISE = BinaryOperator('times_elementwise', np.multiply, TIMES_PRECEDENCE)

OPERATORS: dict[str, BinaryOperator] = {
    op.name: op for op in (PLUS, MINUS, TIMES, TIMES_ELEMENTWISE)
}


def plus(*operands: Any) -> float | Matrix:
    """Sum of scalars and equal-shape matrices, broadcasting scalars."""
    return PLUS.reduce(operands)


def minus(*operands: Any) -> float | Matrix:
    """First operand minus each of the rest, left to right."""
    return MINUS.reduce(operands)


def times(*operands: Any) -> float | Matrix:
    """Algebraic product: matrix product between matrices, scaling otherwise."""
    return TIMES.reduce(operands)


def times_elementwise(*operands: Any) -> float | Matrix:
    """Elementwise (Hadamard) product, broadcasting scalars."""
    return TIMES_ELEMENTWISE.reduce(operands)


def _require_matrix(obj: Any, name: str) -> Matrix:
    if not isinstance(obj, Matrix):
        raise OperandTypeError(
            f"{name}: the first input must be a matrix, got {type(obj).__name__}",
            operand_type=type(obj).__name__,
        )
    return obj


def plus_scalar(matrix: Matrix, value: float) -> Matrix:
    """New matrix with value added to every entry."""
    return PLUS.apply(_require_matrix(matrix, 'plus_scalar'), check_real(value, 'value'))


def times_scalar(matrix: Matrix, value: float) -> Matrix:
    """New matrix with every entry multiplied by value."""
    return TIMES_ELEMENTWISE.apply(
        _require_matrix(matrix, 'times_scalar'), check_real(value, 'value')
    )


def map_elements(func: Callable[..., float], *matrices: Matrix) -> Matrix:
    """
    Apply a scalar function elementwise across equal-shape matrices.

    func receives one argument per matrix: the entries found at the same
    (row, col) position.

    Example:
        >>> map_elements(lambda a, b: max(a, b), A, B)

    Raises:
        EmptyOperandsError: If no matrices are given
        OperandTypeError: If an argument is not a Matrix
        ShapeMismatchError: If the matrices differ in shape
    """
    if not matrices:
        raise EmptyOperandsError("map_elements: at least one matrix is required")
    for position, matrix in enumerate(matrices):
        if not isinstance(matrix, Matrix):
            raise OperandTypeError(
                f"map_elements: input {position} must be a matrix, got {type(matrix).__name__}",
                operand_type=type(matrix).__name__,
            )

    first = matrices[0]
    for matrix in matrices[1:]:
        if matrix.shape != first.shape:
            raise ShapeMismatchError(
                f"map_elements: all matrices must have the same dimensions: the first "
                f"was {first.n_rows}x{first.n_cols} and another was "
                f"{matrix.n_rows}x{matrix.n_cols}",
                left_shape=first.shape,
                right_shape=matrix.shape,
                operation='map_elements',
            )

    lifted = np.frompyfunc(func, len(matrices), 1)
    result = lifted(*(matrix._data for matrix in matrices))
    return Matrix._wrap(np.asarray(result, dtype=np.float64))
