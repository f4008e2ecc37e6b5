"""
Growth-trend forecasting on a single series.

Public API:
    forecast_linear(values)      -> Y = c + s t
    forecast_compound(values)    -> Y = c (1 + r)^t
    forecast_continuous(values)  -> Y = c e^(r t)

Each returns a ForecastSolution that unpacks as
(forecast, constant, rate, r_squared).

Example:
    >>> from pymatrices.trend import forecast_linear
    >>> forecast, constant, slope, r2 = forecast_linear([1, 2, 3, 4])
"""

from pymatrices.trend.design import TrendDesign
from pymatrices.trend.solution import ForecastParams, ForecastSolution
from pymatrices.trend.solvers import (
    forecast_linear,
    forecast_compound,
    forecast_continuous,
)

__all__ = [
    "forecast_linear",
    "forecast_compound",
    "forecast_continuous",
    "TrendDesign",
    "ForecastParams",
    "ForecastSolution",
]
