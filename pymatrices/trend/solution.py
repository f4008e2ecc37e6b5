"""
Trend forecast solution types.

Contains the parameter payload and user-facing solution wrapper.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, TYPE_CHECKING

from pymatrices.core.result import Result

if TYPE_CHECKING:
    from pymatrices.trend.design import TrendDesign


@dataclass(frozen=True)
class ForecastParams:
    """
    Parameter payload for a growth-trend fit.

    intercept and slope are the raw least-squares line on the response
    (ln(y) for the log models); constant and rate are the model's
    parameters reconstructed from them.
    """
    forecast: float
    constant: float
    rate: float
    r_squared: float
    intercept: float
    slope: float
    tss: float
    rss: float


@dataclass
class ForecastSolution:
    """
    User-facing trend forecast.

    Unpacks as the 4-tuple (forecast, constant, rate, r_squared):

        >>> forecast, constant, slope, r2 = forecast_linear([1, 2, 3, 4])

    where rate is the slope (linear), 1 + rate (compound) or the
    continuous rate (continuous).
    """
    _result: Result[ForecastParams]
    _design: 'TrendDesign'

    @property
    def forecast(self) -> float:
        """Predicted value at t = n."""
        return self._result.params.forecast

    @property
    def constant(self) -> float:
        return self._result.params.constant

    @property
    def rate(self) -> float:
        return self._result.params.rate

    @property
    def r_squared(self) -> float:
        return self._result.params.r_squared

    @property
    def intercept(self) -> float:
        return self._result.params.intercept

    @property
    def slope(self) -> float:
        return self._result.params.slope

    @property
    def tss(self) -> float:
        return self._result.params.tss

    @property
    def rss(self) -> float:
        return self._result.params.rss

    @property
    def model(self) -> str:
        return self._design.model

    @property
    def n_observations(self) -> int:
        return self._design.n

    @property
    def info(self) -> dict:
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

    def as_tuple(self) -> tuple[float, float, float, float]:
        """(forecast, constant, rate, r_squared)."""
        p = self._result.params
        return (p.forecast, p.constant, p.rate, p.r_squared)

    def __iter__(self) -> Iterator[float]:
        return iter(self.as_tuple())

    def __repr__(self) -> str:
        return (
            f"ForecastSolution(model={self.model!r}, n={self.n_observations}, "
            f"forecast={self.forecast:.6g}, r_squared={self.r_squared:.4f})"
        )
