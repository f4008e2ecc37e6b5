"""
CPU backend for growth-trend forecasting.

All three models reduce to a straight-line fit of the response against
t = 0..n-1, solved with the general least-squares primitive.
"""

from typing import Any

import numpy as np

from pymatrices.core.result import Result
from pymatrices.core.compute.timing import Timer
from pymatrices.core.compute.precision import safe_ratio
from pymatrices.linalg.solvers import solve
from pymatrices.trend.design import TrendDesign
from pymatrices.trend.solution import ForecastParams


class CPUTrendBackend:
    """
    CPU backend using the QR least-squares solve.

    Implements the Backend protocol for TrendDesign -> ForecastParams.
    """

    @property
    def name(self) -> str:
        return 'cpu_trend'

    def solve(self, design: TrendDesign) -> Result[ForecastParams]:
        """
        Fit the design's growth model.

        Algorithm:
            1. Build X = [1, t] and the response (y or ln y)
            2. Solve X A = response by least squares
            3. Reconstruct constant and rate for the model
            4. R² = 1 - RSS/TSS on the response, 1 when TSS = 0

        A single observation admits no trend: it is returned as both
        forecast and constant, with a flat rate and R² = 0.

        Growth too steep for a double saturates: constant, rate and
        forecast come back as inf rather than raising.
        """
        timer = Timer()
        timer.start()

        if design.n == 1:
            params = self._single_observation(design)
            timer.stop()
            return Result(
                params=params,
                info={'method': 'single_observation', 'model': design.model},
                timing=timer.result(),
                backend_name=self.name,
            )

        # === Least-Squares Fit ===
        with timer.section('design'):
            X = design.design_matrix()
            Y = design.response_matrix()

        with timer.section('solve'):
            A = solve(X, Y)
            intercept = A.get(0, 0)
            slope = A.get(1, 0)

        # === Goodness of Fit ===
        with timer.section('statistics'), np.errstate(over='ignore', invalid='ignore'):
            response = design.response
            t = np.arange(design.n, dtype=np.float64)
            residuals = intercept + slope * t - response
            rss = float(residuals @ residuals)
            tss = float(np.sum((response - np.mean(response)) ** 2))
            # A constant series has nothing left to explain.
            r_squared = 1.0 - safe_ratio(rss, tss) if tss > 0 else 1.0

        params = _reconstruct(design, intercept, slope, r_squared, tss, rss)
        timer.stop()

        info: dict[str, Any] = {
            'method': 'least_squares',
            'model': design.model,
        }

        return Result(
            params=params,
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=(),
        )

    @staticmethod
    def _single_observation(design: TrendDesign) -> ForecastParams:
        value = float(design.values[0])
        rate = 1.0 if design.model == 'compound' else 0.0
        intercept = float(design.response[0])
        return ForecastParams(
            forecast=value,
            constant=value,
            rate=rate,
            r_squared=0.0,
            intercept=intercept,
            slope=0.0,
            tss=0.0,
            rss=0.0,
        )


def _reconstruct(
    design: TrendDesign,
    intercept: float,
    slope: float,
    r_squared: float,
    tss: float,
    rss: float,
) -> ForecastParams:
    """Map the fitted line back to the model's constant, rate and forecast."""
    n = design.n
    if design.model == 'linear':
        constant = intercept
        rate = slope
        forecast = constant + slope * n
    else:
        # Overflow saturates to inf, as in IEEE-754 arithmetic.
        with np.errstate(over='ignore', invalid='ignore'):
            constant = float(np.exp(intercept))
            if design.model == 'compound':
                # ln y = ln c + ln(1 + r) t
                rate = float(np.exp(slope))
                forecast = float(constant * np.power(np.float64(rate), n))
            else:
                # ln y = ln c + r t
                rate = slope
                forecast = float(constant * np.exp(rate * n))

    return ForecastParams(
        forecast=forecast,
        constant=constant,
        rate=rate,
        r_squared=r_squared,
        intercept=intercept,
        slope=slope,
        tss=tss,
        rss=rss,
    )
