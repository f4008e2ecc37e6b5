"""
Solver dispatch for growth-trend forecasting.

Provides forecast_linear(), forecast_compound() and forecast_continuous()
(public API) and backend selection.
"""

from __future__ import annotations

import logging
from typing import Literal
from numpy.typing import ArrayLike

from pymatrices.core.exceptions import ValidationError
from pymatrices.trend.design import TrendDesign, TrendModel
from pymatrices.trend.solution import ForecastSolution
from pymatrices.trend.backends.cpu import CPUTrendBackend

_log = logging.getLogger(__name__)


BackendChoice = Literal['auto', 'cpu']


def _get_backend(choice: BackendChoice) -> CPUTrendBackend:
    if choice in ('auto', 'cpu'):
        return CPUTrendBackend()
    raise ValidationError(f"Unknown backend: {choice!r}")


def _forecast(values: ArrayLike, model: TrendModel, backend: BackendChoice) -> ForecastSolution:
    design = TrendDesign.from_values(values, model=model)
    impl = _get_backend(backend)
    _log.debug("forecast_%s: n=%d backend=%s", model, design.n, impl.name)
    result = impl.solve(design)
    return ForecastSolution(_result=result, _design=design)


def forecast_linear(
    values: ArrayLike,
    *,
    backend: BackendChoice = 'auto',
) -> ForecastSolution:
    """
    Fit Y = constant + slope * t and forecast t = n.

    Time starts at zero, so for n observations the forecast is
    constant + slope * n.

    Args:
        values: Observed series y_0..y_{n-1}
        backend: 'auto' or 'cpu'

    Returns:
        ForecastSolution unpacking as (forecast, constant, slope, r_squared)

    Raises:
        EmptyInputError: If values is empty
        ValidationError: If values are non-numeric or non-finite

    Example:
        >>> forecast, constant, slope, r2 = forecast_linear([1, 2, 3, 4])
        >>> round(forecast, 9), round(slope, 9)
        (5.0, 1.0)
    """
    return _forecast(values, 'linear', backend)


def forecast_compound(
    values: ArrayLike,
    *,
    backend: BackendChoice = 'auto',
) -> ForecastSolution:
    """
    Fit Y = constant * (1 + rate)^t and forecast t = n.

    The reported rate is (1 + rate) itself; a value below one means the
    series is declining.

    Args:
        values: Observed series, all strictly positive
        backend: 'auto' or 'cpu'

    Returns:
        ForecastSolution unpacking as (forecast, constant, 1 + rate, r_squared)

    Raises:
        EmptyInputError: If values is empty
        NonPositiveInputError: If any value is zero or negative
    """
    return _forecast(values, 'compound', backend)


def forecast_continuous(
    values: ArrayLike,
    *,
    backend: BackendChoice = 'auto',
) -> ForecastSolution:
    """
    Fit Y = constant * e^(rate * t) and forecast t = n.

    The continuous analog of forecast_compound; the two usually give
    comparable forecasts. rate may be negative.

    Args:
        values: Observed series, all strictly positive
        backend: 'auto' or 'cpu'

    Returns:
        ForecastSolution unpacking as (forecast, constant, rate, r_squared)

    Raises:
        EmptyInputError: If values is empty
        NonPositiveInputError: If any value is zero or negative
    """
    return _forecast(values, 'continuous', backend)
