"""
Tests for the pymatrices exception hierarchy.

Validates:
    - Inheritance chain (all exceptions catchable via PyMatricesError)
    - Builtin bases (IndexError, TypeError, ValueError) where they apply
    - Diagnostic attributes and their defaults
"""

import pytest

from pymatrices.core.exceptions import (
    ConvergenceError,
    DimensionError,
    EmptyInputError,
    EmptyOperandsError,
    MatrixIndexError,
    NonPositiveInputError,
    NotSquareError,
    NumericalError,
    OperandTypeError,
    OverdeterminedError,
    PyMatricesError,
    ShapeMismatchError,
    SingularMatrixError,
    ValidationError,
)


# ═══════════════════════════════════════════════════════════════════════
# Inheritance hierarchy
# ═══════════════════════════════════════════════════════════════════════


class TestInheritance:
    """Every exception is catchable via PyMatricesError."""

    @pytest.mark.parametrize("exc_type", [
        ValidationError,
        DimensionError,
        NotSquareError,
        ShapeMismatchError,
        EmptyInputError,
        EmptyOperandsError,
        NumericalError,
        SingularMatrixError,
        ConvergenceError,
    ])
    def test_catchable_as_base(self, exc_type):
        with pytest.raises(PyMatricesError):
            raise exc_type("failed")

    def test_shape_errors_are_dimension_errors(self):
        assert issubclass(NotSquareError, DimensionError)
        assert issubclass(ShapeMismatchError, DimensionError)
        assert issubclass(DimensionError, ValidationError)

    def test_empty_operands_is_empty_input(self):
        with pytest.raises(EmptyInputError):
            raise EmptyOperandsError("no operands")

    def test_singular_is_numerical_not_validation(self):
        assert issubclass(SingularMatrixError, NumericalError)
        assert not issubclass(SingularMatrixError, ValidationError)

    def test_convergence_error_is_not_numerical_error(self):
        """ConvergenceError inherits from PyMatricesError, not NumericalError."""
        assert not issubclass(ConvergenceError, NumericalError)


class TestBuiltinBases:
    """Errors with an obvious builtin counterpart derive from it too."""

    def test_index_error(self):
        with pytest.raises(IndexError):
            raise MatrixIndexError("out of range", index=3, bound=2, axis='row')

    def test_type_error(self):
        with pytest.raises(TypeError):
            raise OperandTypeError("not a number", operand_type='str')

    def test_value_error(self):
        with pytest.raises(ValueError):
            raise NonPositiveInputError("negative", index=0, value=-1.0)


# ═══════════════════════════════════════════════════════════════════════
# Diagnostic attributes
# ═══════════════════════════════════════════════════════════════════════


class TestAttributes:
    """Exceptions carry what went wrong as attributes."""

    def test_dimension_error_defaults(self):
        exc = DimensionError("wrong shape")
        assert exc.expected is None
        assert exc.actual is None
        assert str(exc) == "wrong shape"

    def test_shape_mismatch(self):
        exc = ShapeMismatchError(
            "mismatch", left_shape=(2, 2), right_shape=(2, 3), operation='plus'
        )
        assert exc.left_shape == (2, 2)
        assert exc.right_shape == (2, 3)
        assert exc.operation == 'plus'
        assert exc.expected == (2, 2)
        assert exc.actual == (2, 3)

    def test_matrix_index_error(self):
        exc = MatrixIndexError("bad", index=5, bound=3, axis='column')
        assert (exc.index, exc.bound, exc.axis) == (5, 3, 'column')

    def test_non_positive_input(self):
        exc = NonPositiveInputError("bad", index=2, value=0.0)
        assert exc.index == 2
        assert exc.value == 0.0

    def test_overdetermined(self):
        exc = OverdeterminedError("bad", n_observations=2, n_variables=3)
        assert exc.n_observations == 2
        assert exc.n_variables == 3

    def test_singular_matrix_error(self):
        exc = SingularMatrixError(
            "singular", matrix_name='A', condition_number=float('inf'),
            rank=1, expected_rank=2,
        )
        assert exc.matrix_name == 'A'
        assert exc.rank == 1
        assert exc.expected_rank == 2

    def test_singular_matrix_error_defaults(self):
        exc = SingularMatrixError("singular")
        assert exc.matrix_name is None
        assert exc.condition_number is None

    def test_convergence_error(self):
        exc = ConvergenceError("no convergence", reason="Eigenvalues did not converge")
        assert exc.iterations is None
        assert exc.reason == "Eigenvalues did not converge"
