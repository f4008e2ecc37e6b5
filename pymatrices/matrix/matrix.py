"""
Dense matrix value type.

A Matrix owns a C-contiguous float64 array of fixed shape. Its contents
can change in place, but only through set, set_row, set_column,
swap_rows and swap_columns; every other operation returns a new Matrix
and leaves its operands alone. Each of the mutators validates all of its
arguments before touching the storage.

Equality with == is identity. Use recursively_equal for an exact,
element-by-element comparison.
"""

from __future__ import annotations

from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymatrices.core.exceptions import MatrixIndexError
from pymatrices.core.validation import (
    check_1d,
    check_2d,
    check_array,
    check_index,
    check_length,
    check_nonempty_2d,
    check_positive_int,
    check_range_end,
    check_real,
    check_rectangular,
)


def _as_storage(data: Any, name: str) -> NDArray[np.float64]:
    """Validate a nested sequence or 2D array and return an owned copy."""
    if isinstance(data, Matrix):
        return data.to_numpy()
    check_rectangular(data, name)
    array = check_array(data, name)
    check_2d(array, name)
    check_nonempty_2d(array, name)
    return np.array(array, dtype=np.float64, order='C', copy=True)


def _as_vector(values: Any, name: str) -> NDArray[np.float64]:
    array = check_array(values, name)
    check_1d(array, name)
    return array


def _format_number(value: float) -> str:
    """Whole numbers print without a trailing '.0'."""
    if np.isfinite(value) and value == int(value) and abs(value) < 1e15:
        return str(int(value))
    return repr(float(value))


class Matrix:
    """
    Dense rows x cols matrix of float64 values, rows >= 1 and cols >= 1.

    Construction:
        Matrix([[1, 2], [3, 4]])               # from rows
        Matrix.from_rows([[1, 2], [3, 4]])     # same
        Matrix.from_columns([[1, 3], [2, 4]])  # same matrix, by column
        make_constant(2, 3, 0.0)
        make_identity(3)

    The input is always copied; a Matrix never shares storage with its
    source or with another Matrix.
    """

    __slots__ = ('_data',)

    # Matrices are mutable, so they hash by identity like any other object.
    __hash__ = object.__hash__

    # Make NumPy defer to the reflected operators below instead of
    # converting the matrix to an array.
    __array_ufunc__ = None

    def __init__(self, data: ArrayLike):
        self._data = _as_storage(data, 'data')

    # === Construction ===

    @classmethod
    def from_rows(cls, rows: ArrayLike) -> Matrix:
        """Build a matrix from a sequence of equal-length rows."""
        return cls(rows)

    @classmethod
    def from_columns(cls, columns: ArrayLike) -> Matrix:
        """Build a matrix from a sequence of equal-length columns."""
        return cls._wrap(_as_storage(columns, 'columns').T)

    @classmethod
    def _wrap(cls, array: NDArray[np.float64]) -> Matrix:
        """Take ownership of an already-validated 2D array without re-checking it."""
        matrix = cls.__new__(cls)
        matrix._data = np.ascontiguousarray(array, dtype=np.float64)
        return matrix

    # === Shape ===

    @property
    def n_rows(self) -> int:
        return self._data.shape[0]

    @property
    def n_cols(self) -> int:
        return self._data.shape[1]

    @property
    def shape(self) -> tuple[int, int]:
        return (self._data.shape[0], self._data.shape[1])

    def dimensions(self) -> tuple[int, int]:
        """(rows, cols)."""
        return self.shape

    def is_square(self) -> bool:
        return self.n_rows == self.n_cols

    # === Element access ===

    def get(self, row: int, col: int) -> float:
        """Value at (row, col)."""
        r = check_index(row, self.n_rows, 'row', 'get')
        c = check_index(col, self.n_cols, 'column', 'get')
        return float(self._data[r, c])

    def get_row(self, row: int) -> NDArray[np.float64]:
        """Copy of one row as a 1D array."""
        r = check_index(row, self.n_rows, 'row', 'get_row')
        return self._data[r, :].copy()

    def get_column(self, col: int) -> NDArray[np.float64]:
        """Copy of one column as a 1D array."""
        c = check_index(col, self.n_cols, 'column', 'get_column')
        return self._data[:, c].copy()

    # === In-place mutation ===

    def set(self, row: int, col: int, value: float) -> None:
        """Overwrite the value at (row, col)."""
        r = check_index(row, self.n_rows, 'row', 'set')
        c = check_index(col, self.n_cols, 'column', 'set')
        self._data[r, c] = check_real(value, 'value')

    def set_row(self, row: int, values: ArrayLike) -> None:
        """Replace a full row; values must have exactly n_cols entries."""
        r = check_index(row, self.n_rows, 'row', 'set_row')
        new_row = _as_vector(values, 'values')
        check_length(new_row, self.n_cols, 'set_row')
        self._data[r, :] = new_row

    def set_column(self, col: int, values: ArrayLike) -> None:
        """Replace a full column; values must have exactly n_rows entries."""
        c = check_index(col, self.n_cols, 'column', 'set_column')
        new_col = _as_vector(values, 'values')
        check_length(new_col, self.n_rows, 'set_column')
        self._data[:, c] = new_col

    def swap_rows(self, first: int, second: int) -> None:
        """Exchange two rows. Swapping a row with itself does nothing."""
        i = check_index(first, self.n_rows, 'row', 'swap_rows')
        j = check_index(second, self.n_rows, 'row', 'swap_rows')
        if i != j:
            self._data[[i, j], :] = self._data[[j, i], :]

    def swap_columns(self, first: int, second: int) -> None:
        """Exchange two columns. Swapping a column with itself does nothing."""
        i = check_index(first, self.n_cols, 'column', 'swap_columns')
        j = check_index(second, self.n_cols, 'column', 'swap_columns')
        if i != j:
            self._data[:, [i, j]] = self._data[:, [j, i]]

    def set_and_report(self, row: int, col: int, value: float) -> Matrix:
        """
        Copy of this matrix with (row, col) set to value.

        The receiver is not modified.
        """
        result = self.copy()
        result.set(row, col, value)
        return result

    # === Derived matrices ===

    def copy(self) -> Matrix:
        """Deep copy."""
        return Matrix._wrap(self._data.copy())

    def transpose(self) -> Matrix:
        """New cols x rows matrix."""
        return Matrix._wrap(self._data.T.copy())

    @property
    def T(self) -> Matrix:
        return self.transpose()

    def submatrix(self, row_start: int, col_start: int, row_end: int, col_end: int) -> Matrix:
        """
        Rows [row_start, row_end) and columns [col_start, col_end).

        The end indices are exclusive, as in Python slicing, so
        submatrix(0, 0, rows, cols) is a copy of the whole matrix.

        Raises:
            MatrixIndexError: If a start index is outside [0, size), an end
                index is outside [1, size], or a range would be empty
        """
        r1 = check_index(row_start, self.n_rows, 'row', 'submatrix')
        c1 = check_index(col_start, self.n_cols, 'column', 'submatrix')
        r2 = check_range_end(row_end, self.n_rows, 'row', 'submatrix')
        c2 = check_range_end(col_end, self.n_cols, 'column', 'submatrix')
        if r2 <= r1:
            raise MatrixIndexError(
                f"submatrix: end row index ({r2}) must be greater than "
                f"start row index ({r1})",
                index=r2, bound=self.n_rows, axis='row',
            )
        if c2 <= c1:
            raise MatrixIndexError(
                f"submatrix: end column index ({c2}) must be greater than "
                f"start column index ({c1})",
                index=c2, bound=self.n_cols, axis='column',
            )
        return Matrix._wrap(self._data[r1:r2, c1:c2].copy())

    # === Conversion ===

    def to_rows(self) -> list[list[float]]:
        """Nested list, one inner list per row."""
        return self._data.tolist()

    def to_columns(self) -> list[list[float]]:
        """Nested list, one inner list per column."""
        return self._data.T.tolist()

    def to_numpy(self) -> NDArray[np.float64]:
        """Copy of the backing array."""
        return self._data.copy()

    def __array__(self, dtype: Any = None, copy: bool | None = None) -> NDArray[Any]:
        array = self._data.copy()
        return array if dtype is None else array.astype(dtype)

    # === Comparison ===

    def recursively_equal(self, other: object) -> bool:
        """
        Exact element-by-element equality.

        No tolerance is applied: this is change detection, not numerical
        comparison. NaN entries never compare equal.
        """
        if not isinstance(other, Matrix):
            return False
        return self.shape == other.shape and bool(np.array_equal(self._data, other._data))

    # === Arithmetic ===
    # Python operators route through the broadcast framework: + and - are
    # plus/minus, * is the elementwise product and @ the matrix product.

    def __add__(self, other: Any) -> Any:
        return _binary('plus', self, other)

    def __radd__(self, other: Any) -> Any:
        return _binary('plus', other, self)

    def __sub__(self, other: Any) -> Any:
        return _binary('minus', self, other)

    def __rsub__(self, other: Any) -> Any:
        return _binary('minus', other, self)

    def __mul__(self, other: Any) -> Any:
        return _binary('times_elementwise', self, other)

    def __rmul__(self, other: Any) -> Any:
        return _binary('times_elementwise', other, self)

    def __matmul__(self, other: Any) -> Any:
        if not isinstance(other, Matrix):
            return NotImplemented
        return _binary('times', self, other)

    def __neg__(self) -> Matrix:
        return Matrix._wrap(-self._data)

    # === Display ===

    def pretty_print(self) -> str:
        """
        Multi-line text rendering with each column right-aligned.

        >>> print(Matrix([[1, 2.5], [30, 4]]).pretty_print())
        [[  1  2.5 ]
         [ 30    4 ]]
        """
        cells = [[_format_number(v) for v in row] for row in self._data]
        widths = [max(len(row[j]) for row in cells) for j in range(self.n_cols)]
        lines = []
        for row in cells:
            body = "".join(
                (" " if j else "") + " " + cell.rjust(widths[j])
                for j, cell in enumerate(row)
            )
            lines.append("[" + body + " ]")
        return "[" + "\n ".join(lines) + "]"

    def __str__(self) -> str:
        return self.pretty_print()

    def __repr__(self) -> str:
        return f"Matrix({self.to_rows()!r})"


def _binary(name: str, left: Any, right: Any) -> Any:
    # Imported lazily: the arithmetic package depends on this module.
    from pymatrices.arithmetic.operand import is_operand
    from pymatrices.arithmetic.operators import OPERATORS

    if not (is_operand(left) and is_operand(right)):
        return NotImplemented
    return OPERATORS[name].apply(left, right)


def make_constant(rows: int, cols: int, value: float) -> Matrix:
    """rows x cols matrix with every entry equal to value."""
    n_rows = check_positive_int(rows, 'rows')
    n_cols = check_positive_int(cols, 'cols')
    return Matrix._wrap(np.full((n_rows, n_cols), check_real(value, 'value'), dtype=np.float64))


def make_identity(n: int) -> Matrix:
    """n x n identity matrix."""
    size = check_positive_int(n, 'n')
    return Matrix._wrap(np.eye(size, dtype=np.float64))
