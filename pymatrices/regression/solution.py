"""
Regression solution types.

Contains the parameter payload and user-facing solution wrapper.
"""

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING
import numpy as np
from numpy.typing import NDArray

from pymatrices.core.result import Result

if TYPE_CHECKING:
    from pymatrices.regression.design import RegressionDesign


@dataclass(frozen=True)
class RegressionParams:
    """
    Parameter payload for OLS regression.

    This is the immutable data computed by backends.
    """
    coefficients: NDArray[np.floating[Any]]
    residuals: NDArray[np.floating[Any]]
    fitted_values: NDArray[np.floating[Any]]
    r_squared: float
    tss: float
    rss: float
    df_residual: int


@dataclass
class RegressionSolution:
    """
    User-facing regression results.

    Wraps the backend Result. Coefficients are ordered intercept first,
    then one slope per independent variable.
    """
    _result: Result[RegressionParams]
    _design: 'RegressionDesign'

    @property
    def coefficients(self) -> NDArray[np.floating[Any]]:
        return self._result.params.coefficients

    @property
    def intercept(self) -> float:
        return float(self._result.params.coefficients[0])

    @property
    def residuals(self) -> NDArray[np.floating[Any]]:
        """y - X b."""
        return self._result.params.residuals

    @property
    def fitted_values(self) -> NDArray[np.floating[Any]]:
        return self._result.params.fitted_values

    @property
    def r_squared(self) -> float:
        """
        1 - RSS/TSS; nan when the response is constant.

        A constant response is detected up front rather than divided
        through, so round-off in RSS never turns into -inf:
        the result is always nan with a RuntimeWarning.
        """
        return self._result.params.r_squared

    @property
    def tss(self) -> float:
        return self._result.params.tss

    @property
    def rss(self) -> float:
        return self._result.params.rss

    @property
    def statistics(self) -> tuple[float, float, float]:
        """(R², TSS, RSS)."""
        p = self._result.params
        return (p.r_squared, p.tss, p.rss)

    @property
    def df_residual(self) -> int:
        return self._result.params.df_residual

    @property
    def n_observations(self) -> int:
        return self._design.n

    @property
    def n_variables(self) -> int:
        return self._design.k

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def summary(self) -> str:
        """Generate a plain-text summary."""
        lines = [
            "OLS Regression Results",
            "=" * 48,
            f"Observations: {self.n_observations}",
            f"Independent variables: {self.n_variables}",
            f"R-squared: {self.r_squared:.6f}",
            f"Total sum of squares: {self.tss:.6f}",
            f"Residual sum of squares: {self.rss:.6f} on {self.df_residual} DF",
            "",
            "Coefficients:",
            "-" * 48,
        ]

        for i, coef in enumerate(self.coefficients):
            label = "(Intercept)" if i == 0 else f"X{i}"
            lines.append(f"  {label:<12} {coef:14.6f}")

        lines.append("-" * 48)
        lines.append(f"Backend: {self.backend_name}")
        if self.timing:
            lines.append(f"Time: {self.timing.get('total_seconds', 0):.4f}s")
        for message in self.warnings:
            lines.append(f"Warning: {message}")

        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"RegressionSolution(n={self.n_observations}, k={self.n_variables}, "
            f"r_squared={self.r_squared:.4f})"
        )
