"""
CPU backend for OLS regression.

Solves X b = y in the least-squares sense with the general solve
primitive, which factors X by Householder QR.
"""

import warnings
from typing import Any
import numpy as np

from pymatrices.core.result import Result
from pymatrices.core.compute.timing import Timer
from pymatrices.linalg.solvers import solve
from pymatrices.regression.design import RegressionDesign
from pymatrices.regression.solution import RegressionParams


class CPULeastSquaresBackend:
    """
    CPU backend using QR least squares.

    Implements the Backend protocol for RegressionDesign -> RegressionParams.
    """

    @property
    def name(self) -> str:
        return 'cpu_lstsq'

    def solve(self, design: RegressionDesign) -> Result[RegressionParams]:
        """
        Solve OLS via QR decomposition.

        Algorithm:
            1. Solve X b = y by least squares
            2. Compute residuals and fitted values
            3. R² = 1 - RSS/TSS

        A constant response has TSS = 0 and no defined R²; it is
        reported as nan together with a RuntimeWarning. The plain ratio
        would give -inf whenever round-off leaves RSS above 0.

        Args:
            design: Validated regression design

        Returns:
            Result containing RegressionParams

        Raises:
            SingularMatrixError: If the predictors are collinear
        """
        timer = Timer()
        timer.start()
        notes: list[str] = []

        X = design.X
        y = design.y

        # === Least-Squares Solve ===
        with timer.section('solve'):
            b = solve(X, design.response_matrix())
            coefficients = b.get_column(0)

        # === Compute Residuals and Fitted Values ===
        with timer.section('residuals'):
            fitted_values = X.to_numpy() @ coefficients
            residuals = y - fitted_values

        # === Compute Summary Statistics ===
        with timer.section('statistics'):
            rss = float(residuals @ residuals)
            y_mean = np.mean(y)
            tss = float(np.sum((y - y_mean) ** 2))
            if tss == 0.0:
                r_squared = float('nan')
                message = (
                    "The response is constant (total sum of squares is 0); "
                    "R-squared is undefined and reported as nan"
                )
                warnings.warn(message, RuntimeWarning, stacklevel=3)
                notes.append(message)
            else:
                r_squared = 1.0 - rss / tss

        timer.stop()

        # === Construct Result ===
        params = RegressionParams(
            coefficients=coefficients,
            residuals=residuals,
            fitted_values=fitted_values,
            r_squared=r_squared,
            tss=tss,
            rss=rss,
            df_residual=design.n - design.p,
        )

        info: dict[str, Any] = {
            'method': 'qr',
            'n_variables': design.k,
        }

        return Result(
            params=params,
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(notes),
        )
