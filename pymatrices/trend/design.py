"""
Trend design.

Design holds one observed series y_0..y_{n-1} at times t = 0..n-1 and
knows which growth model it will be fitted to. The compound and
continuous models are fitted on ln(y), so their designs insist that
every observation is positive.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymatrices.core.exceptions import EmptyInputError, NonPositiveInputError
from pymatrices.core.validation import check_1d, check_array, check_finite
from pymatrices.matrix.matrix import Matrix


TrendModel = Literal['linear', 'compound', 'continuous']
LOG_MODELS: frozenset[str] = frozenset({'compound', 'continuous'})


@dataclass(frozen=True)
class TrendDesign:
    """
    Growth-trend design specification.

    Construction:
        TrendDesign.from_values([1, 2, 3, 4], model='linear')
    """
    _values: NDArray[np.floating[Any]]
    _model: str

    @classmethod
    def from_values(cls, values: ArrayLike, model: TrendModel) -> TrendDesign:
        """
        Build a design from an observed series.

        Raises:
            ValidationError: If values are non-numeric or non-finite
            DimensionError: If values are not one-dimensional
            EmptyInputError: If the series is empty
            NonPositiveInputError: If a log model meets a value <= 0
        """
        y = check_array(values, 'values')
        check_1d(y, 'values')
        if y.shape[0] == 0:
            raise EmptyInputError("values: the input list is empty")
        check_finite(y, 'values')

        if model in LOG_MODELS:
            bad = np.flatnonzero(y <= 0.0)
            if bad.size > 0:
                index = int(bad[0])
                raise NonPositiveInputError(
                    f"values: item {index} of the input list is zero or negative "
                    f"({y[index]!r}); the {model} growth model needs positive values",
                    index=index,
                    value=float(y[index]),
                )

        return cls(_values=y.copy(), _model=model)

    # === Properties ===

    @property
    def values(self) -> NDArray[np.floating[Any]]:
        """Observed series (n,)."""
        return self._values

    @property
    def model(self) -> str:
        return self._model

    @property
    def n(self) -> int:
        """Number of observations."""
        return self._values.shape[0]

    @property
    def is_log_model(self) -> bool:
        return self._model in LOG_MODELS

    @property
    def response(self) -> NDArray[np.floating[Any]]:
        """Series the straight line is fitted to: y, or ln(y) for log models."""
        if self.is_log_model:
            return np.log(self._values)
        return self._values

    def design_matrix(self) -> Matrix:
        """The n x 2 matrix [1, t] with t = 0..n-1."""
        t = np.arange(self.n, dtype=np.float64)
        return Matrix.from_columns([np.ones(self.n), t])

    def response_matrix(self) -> Matrix:
        """The response as an n x 1 matrix."""
        return Matrix.from_columns([self.response])
