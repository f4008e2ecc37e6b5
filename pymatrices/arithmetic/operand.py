"""
Operands of the broadcast arithmetic framework.

An operand is either a real scalar or a Matrix. Raw values are tagged on
entry to a reduction, so the operators dispatch on two explicit variants
instead of probing types at every step.
"""

from __future__ import annotations

import numbers
from dataclasses import dataclass
from typing import Any

import numpy as np

from pymatrices.core.exceptions import OperandTypeError
from pymatrices.matrix.matrix import Matrix


@dataclass(frozen=True)
class Scalar:
    """A real number operand."""
    value: float


@dataclass(frozen=True)
class MatrixValue:
    """A matrix operand."""
    matrix: Matrix


Operand = Scalar | MatrixValue


def is_operand(obj: Any) -> bool:
    """True for a Matrix or a real number other than a bool."""
    if isinstance(obj, (Scalar, MatrixValue, Matrix)):
        return True
    return isinstance(obj, numbers.Real) and not isinstance(obj, (bool, np.bool_))


def as_operand(obj: Any, position: int | None = None) -> Operand:
    """
    Tag a raw value as a Scalar or MatrixValue.

    Args:
        obj: A real number, a Matrix, or an already tagged operand
        position: Position in the operand list, for error messages

    Raises:
        OperandTypeError: If obj is neither a real number nor a Matrix
    """
    match obj:
        case Scalar() | MatrixValue():
            return obj
        case Matrix():
            return MatrixValue(obj)
        case bool() | np.bool_():
            pass
        case numbers.Real():
            return Scalar(float(obj))

    where = f" at position {position}" if position is not None else ""
    raise OperandTypeError(
        f"Inputs must be matrices or numbers, but got {type(obj).__name__}{where}",
        operand_type=type(obj).__name__,
    )


def unwrap(operand: Operand) -> float | Matrix:
    """Strip the tag."""
    match operand:
        case Scalar(value):
            return value
        case MatrixValue(matrix):
            return matrix
