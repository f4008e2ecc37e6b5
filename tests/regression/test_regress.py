"""
Tests for OLS regression.

Validates:
    - exact recovery of a noiseless linear relationship
    - agreement with numpy.linalg.lstsq on noisy multi-variable data
    - the data layout (column 0 is Y and becomes the intercept column)
    - overdetermined and collinear inputs
    - constant response: R² is nan and a RuntimeWarning is emitted
"""

import warnings

import numpy as np
import pytest

from pymatrices.core.exceptions import (
    OverdeterminedError,
    SingularMatrixError,
    ValidationError,
)
from pymatrices.core.protocols import Backend
from pymatrices.matrix import Matrix
from pymatrices.regression import RegressionDesign, RegressionSolution, regress
from pymatrices.regression.backends import CPULeastSquaresBackend


LINE = [[3, 1], [5, 2], [7, 3], [9, 4]]


# ═══════════════════════════════════════════════════════════════════════
# Exact fits
# ═══════════════════════════════════════════════════════════════════════


class TestExactFit:
    """Y = 1 + 2X is recovered exactly."""

    def test_coefficients(self):
        solution = regress(LINE)
        assert isinstance(solution, RegressionSolution)
        np.testing.assert_allclose(solution.coefficients, [1.0, 2.0], rtol=1e-12)
        assert solution.intercept == pytest.approx(1.0)

    def test_statistics(self):
        r_squared, tss, rss = regress(LINE).statistics
        assert r_squared == pytest.approx(1.0)
        assert tss == pytest.approx(20.0)
        assert rss == pytest.approx(0.0, abs=1e-20)

    def test_from_matrix(self):
        data = Matrix(LINE)
        solution = regress(data)
        np.testing.assert_allclose(solution.coefficients, [1.0, 2.0], rtol=1e-12)
        assert data.get_column(0).tolist() == [3.0, 5.0, 7.0, 9.0]

    def test_square_system(self):
        solution = regress([[3, 1], [5, 2]])
        np.testing.assert_allclose(solution.coefficients, [1.0, 2.0])
        assert solution.df_residual == 0

    def test_residuals_and_fitted(self):
        solution = regress(LINE)
        np.testing.assert_allclose(solution.fitted_values, [3.0, 5.0, 7.0, 9.0])
        np.testing.assert_allclose(solution.residuals, 0.0, atol=1e-12)


# ═══════════════════════════════════════════════════════════════════════
# Noisy multi-variable data
# ═══════════════════════════════════════════════════════════════════════


class TestLeastSquares:

    @pytest.fixture
    def noisy(self, rng):
        n = 60
        X = rng.standard_normal((n, 3))
        y = 1.0 + X @ np.array([2.0, -3.0, 0.5]) + 0.1 * rng.standard_normal(n)
        return np.column_stack([y, X]), X, y

    def test_matches_lstsq(self, noisy):
        data, X, y = noisy
        design = np.column_stack([np.ones(len(y)), X])
        expected = np.linalg.lstsq(design, y, rcond=None)[0]
        solution = regress(data)
        np.testing.assert_allclose(solution.coefficients, expected, rtol=1e-10)

    def test_r_squared(self, noisy):
        data, X, y = noisy
        solution = regress(data)
        assert solution.rss == pytest.approx(solution.residuals @ solution.residuals)
        assert solution.tss == pytest.approx(np.sum((y - y.mean()) ** 2))
        assert solution.r_squared == pytest.approx(1.0 - solution.rss / solution.tss)
        assert 0.99 < solution.r_squared < 1.0

    def test_residuals_orthogonal_to_design(self, noisy):
        data, X, y = noisy
        solution = regress(data)
        design = np.column_stack([np.ones(len(y)), X])
        np.testing.assert_allclose(design.T @ solution.residuals, 0.0, atol=1e-10)
        np.testing.assert_allclose(solution.fitted_values + solution.residuals, y)

    def test_counts(self, noisy):
        data, _, _ = noisy
        solution = regress(data)
        assert solution.n_observations == 60
        assert solution.n_variables == 3
        assert solution.df_residual == 56


# ═══════════════════════════════════════════════════════════════════════
# Failure modes
# ═══════════════════════════════════════════════════════════════════════


class TestValidation:

    def test_overdetermined(self):
        with pytest.raises(OverdeterminedError, match="overdetermined") as exc_info:
            regress([[1, 2, 3], [4, 5, 6]])
        assert exc_info.value.n_observations == 2
        assert exc_info.value.n_variables == 2

    def test_more_variables_than_rows(self):
        with pytest.raises(OverdeterminedError):
            regress([[1, 2, 3, 4]])

    def test_collinear(self):
        data = [[1, 1, 2], [2, 2, 4], [4, 3, 6], [3, 4, 8]]
        with pytest.raises(SingularMatrixError):
            regress(data)

    def test_non_finite(self):
        with pytest.raises(ValidationError, match="non-finite"):
            regress([[1, 1], [2, np.inf], [3, 3]])

    def test_unknown_backend(self):
        with pytest.raises(ValidationError, match="Unknown backend"):
            regress(LINE, backend='gpu')


class TestConstantResponse:
    """TSS = 0 leaves R² undefined."""

    def test_r_squared_nan_with_warning(self):
        with pytest.warns(RuntimeWarning, match="total sum of squares is 0"):
            solution = regress([[5, 1], [5, 2], [5, 3]])
        assert np.isnan(solution.r_squared)
        assert solution.tss == 0.0
        np.testing.assert_allclose(solution.coefficients, [5.0, 0.0], atol=1e-12)
        assert solution._result.has_warning("total sum of squares")

    def test_r_squared_nan_not_inf_with_residual_noise(self):
        y = 5.0
        x = [0.3, 1.7, 2.9, 11.3, 0.05]
        with pytest.warns(RuntimeWarning):
            solution = regress([[y, xi] for xi in x])
        assert solution.tss == 0.0
        assert solution.rss >= 0.0
        assert np.isnan(solution.r_squared)
        assert not np.isinf(solution.r_squared)

    def test_no_warning_otherwise(self):
        with warnings.catch_warnings():
            warnings.simplefilter('error')
            solution = regress(LINE)
        assert solution.warnings == ()


# ═══════════════════════════════════════════════════════════════════════
# Design, backend, presentation
# ═══════════════════════════════════════════════════════════════════════


class TestDesign:

    def test_first_column_becomes_ones(self):
        design = RegressionDesign.from_matrix(LINE)
        np.testing.assert_array_equal(design.X.get_column(0), np.ones(4))
        np.testing.assert_array_equal(design.X.get_column(1), [1.0, 2.0, 3.0, 4.0])
        np.testing.assert_array_equal(design.y, [3.0, 5.0, 7.0, 9.0])
        assert (design.n, design.k, design.p) == (4, 1, 2)


class TestPresentation:

    def test_backend(self):
        assert isinstance(CPULeastSquaresBackend(), Backend)
        solution = regress(LINE)
        assert solution.backend_name == 'cpu_lstsq'
        assert 'total_seconds' in solution.timing
        assert solution.info['method'] == 'qr'

    def test_summary(self):
        text = regress(LINE).summary()
        assert "OLS Regression Results" in text
        assert "(Intercept)" in text
        assert "R-squared: 1.000000" in text

    def test_repr(self):
        assert repr(regress(LINE)) == "RegressionSolution(n=4, k=1, r_squared=1.0000)"
