"""
Tests for the Matrix value type.

Validates:
    - Construction from rows, columns, arrays; validation of input
    - Element, row and column access with bounds checking
    - In-place mutators validate before mutating
    - Transpose, submatrix, copy and conversions return fresh storage
    - Identity equality vs recursively_equal
    - Python operators route through the broadcast framework
    - pretty_print layout
"""

import numpy as np
import pytest

from pymatrices.core.exceptions import (
    DimensionError,
    MatrixIndexError,
    ShapeMismatchError,
    ValidationError,
)
from pymatrices.matrix import Matrix, make_constant, make_identity


# ═══════════════════════════════════════════════════════════════════════
# Construction
# ═══════════════════════════════════════════════════════════════════════


class TestConstruction:
    """Matrices are built from rectangular, numeric, non-empty input."""

    def test_from_rows(self, A22):
        assert A22.to_rows() == [[1.0, 2.0], [3.0, 4.0]]
        assert A22.dimensions() == (2, 2)

    def test_from_columns(self, A22):
        M = Matrix.from_columns([[1, 3], [2, 4]])
        assert M.recursively_equal(A22)

    def test_from_numpy(self):
        M = Matrix(np.arange(6).reshape(2, 3))
        assert M.shape == (2, 3)
        assert M.n_rows == 2
        assert M.n_cols == 3
        assert M.get(1, 2) == 5.0

    def test_input_is_copied(self):
        data = np.ones((2, 2))
        M = Matrix(data)
        data[0, 0] = 99.0
        assert M.get(0, 0) == 1.0

    def test_from_matrix_copies(self, A22):
        M = Matrix(A22)
        M.set(0, 0, 10)
        assert A22.get(0, 0) == 1.0

    def test_ragged_rows(self):
        with pytest.raises(DimensionError, match="same length"):
            Matrix([[1, 2], [3]])

    def test_flat_list(self):
        with pytest.raises(DimensionError):
            Matrix([1, 2, 3])

    @pytest.mark.parametrize("data", [[], [[]], np.zeros((0, 3))])
    def test_empty(self, data):
        with pytest.raises(DimensionError):
            Matrix(data)

    def test_non_numeric(self):
        with pytest.raises(ValidationError):
            Matrix([["a", "b"]])

    def test_make_constant(self):
        M = make_constant(2, 3, 7)
        assert M.to_rows() == [[7.0] * 3] * 2

    def test_make_constant_rejects_zero_rows(self):
        with pytest.raises(ValidationError):
            make_constant(0, 3, 1.0)

    def test_make_identity(self):
        np.testing.assert_array_equal(make_identity(3).to_numpy(), np.eye(3))

    def test_make_identity_rejects_zero(self):
        with pytest.raises(ValidationError):
            make_identity(0)


# ═══════════════════════════════════════════════════════════════════════
# Access
# ═══════════════════════════════════════════════════════════════════════


class TestAccess:

    def test_get(self, A22):
        assert A22.get(1, 0) == 3.0

    def test_get_row_and_column(self, A22):
        np.testing.assert_array_equal(A22.get_row(1), [3.0, 4.0])
        np.testing.assert_array_equal(A22.get_column(1), [2.0, 4.0])

    def test_row_is_a_copy(self, A22):
        row = A22.get_row(0)
        row[0] = 50.0
        assert A22.get(0, 0) == 1.0

    @pytest.mark.parametrize("row, col", [(2, 0), (0, 2), (-1, 0)])
    def test_get_out_of_range(self, A22, row, col):
        with pytest.raises(MatrixIndexError):
            A22.get(row, col)

    def test_index_error_attributes(self, A22):
        with pytest.raises(IndexError) as exc_info:
            A22.get_column(5)
        assert exc_info.value.index == 5
        assert exc_info.value.bound == 2
        assert exc_info.value.axis == 'column'


# ═══════════════════════════════════════════════════════════════════════
# Mutation
# ═══════════════════════════════════════════════════════════════════════


class TestMutation:
    """Mutators change the receiver and validate everything first."""

    def test_set(self, A22):
        A22.set(0, 1, 9.5)
        assert A22.get(0, 1) == 9.5

    def test_set_rejects_bool(self, A22):
        with pytest.raises(ValidationError):
            A22.set(0, 0, True)
        assert A22.get(0, 0) == 1.0

    def test_set_row(self, A22):
        A22.set_row(1, [7, 8])
        assert A22.to_rows() == [[1.0, 2.0], [7.0, 8.0]]

    def test_set_row_wrong_length_leaves_matrix_unchanged(self, A22):
        before = A22.copy()
        with pytest.raises(DimensionError):
            A22.set_row(0, [1, 2, 3])
        assert A22.recursively_equal(before)

    def test_set_column(self, A22):
        A22.set_column(0, np.array([0.0, 0.0]))
        assert A22.to_columns()[0] == [0.0, 0.0]

    def test_set_column_bad_index_leaves_matrix_unchanged(self, A22):
        before = A22.copy()
        with pytest.raises(MatrixIndexError):
            A22.set_column(2, [1, 2])
        assert A22.recursively_equal(before)

    def test_swap_rows(self, A22):
        A22.swap_rows(0, 1)
        assert A22.to_rows() == [[3.0, 4.0], [1.0, 2.0]]

    def test_double_swap_restores(self, rng):
        M = Matrix(rng.standard_normal((4, 3)))
        before = M.copy()
        M.swap_rows(0, 3)
        M.swap_rows(0, 3)
        M.swap_columns(1, 2)
        M.swap_columns(1, 2)
        assert M.recursively_equal(before)

    def test_swap_with_self(self, A22):
        before = A22.copy()
        A22.swap_columns(1, 1)
        assert A22.recursively_equal(before)

    def test_set_and_report_leaves_receiver(self, A22):
        result = A22.set_and_report(0, 0, 100)
        assert result.get(0, 0) == 100.0
        assert A22.get(0, 0) == 1.0


# ═══════════════════════════════════════════════════════════════════════
# Derived matrices and conversion
# ═══════════════════════════════════════════════════════════════════════


class TestDerived:

    def test_transpose(self, A22):
        assert A22.transpose().to_rows() == [[1.0, 3.0], [2.0, 4.0]]

    def test_transpose_twice_is_identity(self, rng):
        M = Matrix(rng.standard_normal((3, 5)))
        assert M.T.T.recursively_equal(M)
        assert M.T.shape == (5, 3)

    def test_submatrix_top_left(self, A22):
        assert A22.submatrix(0, 0, 1, 1).to_rows() == [[1.0]]

    def test_submatrix_block(self):
        M = Matrix(np.arange(12).reshape(3, 4))
        np.testing.assert_array_equal(
            M.submatrix(1, 1, 3, 3).to_numpy(), [[5.0, 6.0], [9.0, 10.0]]
        )

    def test_submatrix_whole(self, A22):
        assert A22.submatrix(0, 0, 2, 2).recursively_equal(A22)

    @pytest.mark.parametrize("args", [(1, 0, 1, 2), (0, 1, 2, 1), (0, 0, 3, 1), (2, 0, 2, 1)])
    def test_submatrix_bad_range(self, A22, args):
        with pytest.raises(MatrixIndexError):
            A22.submatrix(*args)

    def test_copy_is_independent(self, A22):
        C = A22.copy()
        C.set(0, 0, -1)
        assert A22.get(0, 0) == 1.0

    def test_to_columns(self, A22):
        assert A22.to_columns() == [[1.0, 3.0], [2.0, 4.0]]

    def test_array_protocol(self, A22):
        array = np.asarray(A22)
        array[0, 0] = 10.0
        assert A22.get(0, 0) == 1.0
        assert np.asarray(A22, dtype=np.float32).dtype == np.float32


# ═══════════════════════════════════════════════════════════════════════
# Equality
# ═══════════════════════════════════════════════════════════════════════


class TestEquality:
    """== is identity; recursively_equal compares contents exactly."""

    def test_identity_equality(self, A22):
        assert A22 == A22
        assert A22 != A22.copy()

    def test_recursively_equal(self, A22):
        assert A22.recursively_equal(Matrix([[1, 2], [3, 4]]))
        assert not A22.recursively_equal(Matrix([[1, 2], [3, 4.000001]]))
        assert not A22.recursively_equal(Matrix([[1, 2, 0], [3, 4, 0]]))
        assert not A22.recursively_equal([[1, 2], [3, 4]])

    def test_nan_never_equal(self):
        M = Matrix([[np.nan]])
        assert not M.recursively_equal(M.copy())

    def test_hashable_by_identity(self, A22):
        assert len({A22, A22.copy()}) == 2


# ═══════════════════════════════════════════════════════════════════════
# Operators
# ═══════════════════════════════════════════════════════════════════════


class TestOperators:

    def test_add_scalar_both_sides(self, A22):
        assert (A22 + 1).to_rows() == [[2.0, 3.0], [4.0, 5.0]]
        assert (1 + A22).to_rows() == [[2.0, 3.0], [4.0, 5.0]]

    def test_numpy_scalar_on_the_left(self, A22):
        result = np.float64(2.0) * A22
        assert isinstance(result, Matrix)
        assert result.to_rows() == [[2.0, 4.0], [6.0, 8.0]]

    def test_rsub_preserves_order(self, A22):
        assert (10 - A22).to_rows() == [[9.0, 8.0], [7.0, 6.0]]

    def test_elementwise_mul(self, A22, B22):
        assert (A22 * B22).to_rows() == [[5.0, 12.0], [21.0, 32.0]]

    def test_matmul(self, A22, B22):
        assert (A22 @ B22).to_rows() == [[19.0, 22.0], [43.0, 50.0]]

    def test_neg(self, A22):
        assert (-A22).to_rows() == [[-1.0, -2.0], [-3.0, -4.0]]

    def test_shape_mismatch(self, A22):
        with pytest.raises(ShapeMismatchError):
            A22 + make_constant(2, 3, 1.0)

    def test_unsupported_operand(self, A22):
        with pytest.raises(TypeError):
            A22 + "a"
        with pytest.raises(TypeError):
            A22 * True

    def test_operands_unchanged(self, A22, B22):
        A22 + B22
        A22 @ B22
        assert A22.to_rows() == [[1.0, 2.0], [3.0, 4.0]]
        assert B22.to_rows() == [[5.0, 6.0], [7.0, 8.0]]


# ═══════════════════════════════════════════════════════════════════════
# Display
# ═══════════════════════════════════════════════════════════════════════


class TestDisplay:

    def test_pretty_print(self):
        text = Matrix([[1, 2.5], [30, 4]]).pretty_print()
        assert text == "[[  1  2.5 ]\n [ 30    4 ]]"

    def test_str_is_pretty_print(self, A22):
        assert str(A22) == A22.pretty_print()

    def test_repr(self, A22):
        assert repr(A22) == "Matrix([[1.0, 2.0], [3.0, 4.0]])"
