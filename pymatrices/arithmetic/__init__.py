"""
Broadcasting arithmetic over scalars and matrices.

Public API:
    plus(*ops), minus(*ops)          - variadic sum / difference
    times(*ops)                      - variadic algebraic product
    times_elementwise(*ops)          - variadic Hadamard product
    plus_scalar(M, s), times_scalar(M, s)
    map_elements(func, *matrices)    - elementwise function of k matrices
    BinaryOperator                   - the framework; PLUS, MINUS, TIMES,
                                       TIMES_ELEMENTWISE are its instances

Every operator also has a two-operand form, e.g. PLUS.apply(a, b), for
hosts that expose infix syntax; the operators carry a precedence so that
times binds tighter than plus and minus.

Example:
    >>> from pymatrices.arithmetic import plus
    >>> from pymatrices.matrix import make_constant
    >>> plus(make_constant(2, 2, 5.0), 3.0).to_rows()
    [[8.0, 8.0], [8.0, 8.0]]
"""

from pymatrices.arithmetic.operand import (
    Operand,
    Scalar,
    MatrixValue,
    as_operand,
    is_operand,
    unwrap,
)
from pymatrices.arithmetic.operators import (
    BinaryOperator,
    PLUS,
    MINUS,
    TIMES,
    TIMES_ELEMENTWISE,
    OPERATORS,
    PLUS_PRECEDENCE,
    TIMES_PRECEDENCE,
    plus,
    minus,
    times,
    times_elementwise,
    plus_scalar,
    times_scalar,
    map_elements,
)

__all__ = [
    "Operand",
    "Scalar",
    "MatrixValue",
    "as_operand",
    "is_operand",
    "unwrap",
    "BinaryOperator",
    "PLUS",
    "MINUS",
    "TIMES",
    "TIMES_ELEMENTWISE",
    "OPERATORS",
    "PLUS_PRECEDENCE",
    "TIMES_PRECEDENCE",
    "plus",
    "minus",
    "times",
    "times_elementwise",
    "plus_scalar",
    "times_scalar",
    "map_elements",
]
