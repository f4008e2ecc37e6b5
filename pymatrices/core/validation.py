"""
Input validation utilities for pymatrices.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - No default handling of edge cases
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import numbers
import operator
from collections.abc import Sequence

import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any

from pymatrices.core.exceptions import (
    ValidationError,
    DimensionError,
    NotSquareError,
    MatrixIndexError,
)


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Validate and convert input to a float64 numpy array.

    Accepts any array-like and converts to numpy array. Rejects inputs
    that result in object dtype (indicating mixed types or non-numeric data).

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray of dtype float64

    Raises:
        ValidationError: If input cannot be converted to numeric array
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    # Reject non-numeric dtypes (strings, bytes, datetime, complex, etc.)
    if result.dtype == np.bool_ or not (
        np.issubdtype(result.dtype, np.integer) or np.issubdtype(result.dtype, np.floating)
    ):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected real numeric data"
        )

    return result.astype(np.float64, copy=False)


def check_finite(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array contains no NaN or Inf values.

    Args:
        array: Array to check
        name: Parameter name for error messages

    Raises:
        ValidationError: If array contains non-finite values
    """
    if not np.all(np.isfinite(array)):
        n_nan = int(np.sum(np.isnan(array)))
        n_inf = int(np.sum(np.isinf(array)))
        raise ValidationError(
            f"{name}: contains non-finite values ({n_nan} NaN, {n_inf} Inf)"
        )


def check_ndim(array: NDArray[np.floating[Any]], ndim: int, name: str) -> None:
    """
    Verify array has exactly the specified number of dimensions.

    Args:
        array: Array to check
        ndim: Required number of dimensions
        name: Parameter name for error messages

    Raises:
        DimensionError: If array has wrong number of dimensions
    """
    if array.ndim != ndim:
        raise DimensionError(
            f"{name}: expected {ndim}D array, got {array.ndim}D with shape {array.shape}",
            expected=ndim,
            actual=array.ndim,
        )


def check_1d(array: NDArray[np.floating[Any]], name: str) -> None:
    """Verify array is 1-dimensional."""
    check_ndim(array, 1, name)


def check_2d(array: NDArray[np.floating[Any]], name: str) -> None:
    """Verify array is 2-dimensional."""
    check_ndim(array, 2, name)


def check_rectangular(data: Any, name: str) -> None:
    """
    Verify a nested sequence has exactly two levels of equal-length rows.

    NumPy arrays are already rectangular and pass through; only plain
    nested sequences are inspected.

    Args:
        data: Nested sequence (list of rows)
        name: Parameter name for error messages

    Raises:
        DimensionError: If nesting depth is wrong or rows differ in length
    """
    if isinstance(data, np.ndarray):
        return
    if not isinstance(data, Sequence) or isinstance(data, (str, bytes)):
        raise DimensionError(f"{name}: expected a sequence of rows, got {type(data).__name__}")

    widths = []
    for i, row in enumerate(data):
        if not isinstance(row, (Sequence, np.ndarray)) or isinstance(row, (str, bytes)):
            raise DimensionError(
                f"{name}: expected exactly two levels of nesting, "
                f"but row {i} is a {type(row).__name__}"
            )
        widths.append(len(row))

    if widths and len(set(widths)) > 1:
        bad = next(i for i, w in enumerate(widths) if w != widths[0])
        raise DimensionError(
            f"{name}: all rows must have the same length; row 0 has {widths[0]} "
            f"entries but row {bad} has {widths[bad]}",
            expected=widths[0],
            actual=widths[bad],
        )


def check_nonempty_2d(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify a 2D array has at least one row and one column.

    Raises:
        DimensionError: If either dimension is zero
    """
    n_rows, n_cols = array.shape
    if n_rows < 1 or n_cols < 1:
        raise DimensionError(
            f"{name}: a matrix needs at least one row and one column, got shape {array.shape}",
            actual=array.shape,
        )


def check_positive_int(value: Any, name: str) -> int:
    """
    Verify value is an integer >= 1 and return it as int.

    Raises:
        ValidationError: If value is not an integer or is < 1
    """
    try:
        result = operator.index(value)
    except TypeError as e:
        raise ValidationError(
            f"{name}: expected a positive integer, got {type(value).__name__}"
        ) from e
    if result < 1:
        raise ValidationError(f"{name}: must be at least 1, got {result}")
    return result


def check_index(index: Any, bound: int, axis: str, name: str) -> int:
    """
    Verify a zero-based index lies in [0, bound) and return it as int.

    Negative indices are rejected rather than wrapped.

    Args:
        index: Index to check
        bound: Number of valid positions along the axis
        axis: 'row' or 'column', for error messages
        name: Parameter name for error messages

    Raises:
        ValidationError: If index is not an integer
        MatrixIndexError: If index is out of range
    """
    try:
        result = operator.index(index)
    except TypeError as e:
        raise ValidationError(
            f"{name}: expected an integer {axis} index, got {type(index).__name__}"
        ) from e
    if result < 0 or result >= bound:
        raise MatrixIndexError(
            f"{name}: {axis} index {result} is out of range; "
            f"should be between 0 and {bound - 1} inclusive",
            index=result,
            bound=bound,
            axis=axis,
        )
    return result


def check_length(values: NDArray[np.floating[Any]], expected: int, name: str) -> None:
    """
    Verify a 1D array has exactly the expected length.

    Raises:
        DimensionError: If the length differs
    """
    actual = values.shape[0]
    if actual != expected:
        raise DimensionError(
            f"{name}: the length of the given sequence ({actual}) does not match "
            f"the required length ({expected})",
            expected=expected,
            actual=actual,
        )


def check_square(array: NDArray[np.floating[Any]], name: str) -> int:
    """
    Verify a 2D array is square and return its order.

    Raises:
        NotSquareError: If rows != columns
    """
    n_rows, n_cols = array.shape
    if n_rows != n_cols:
        raise NotSquareError(
            f"{name}: matrix must be square, got {n_rows}x{n_cols}",
            expected=(n_rows, n_rows),
            actual=(n_rows, n_cols),
        )
    return n_rows


def check_real(value: Any, name: str) -> float:
    """
    Verify value is a real number (not a bool) and return it as float.

    Raises:
        ValidationError: If value is not a real number
    """
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, numbers.Real):
        raise ValidationError(
            f"{name}: expected a real number, got {type(value).__name__}"
        )
    return float(value)


def check_range_end(index: Any, size: int, axis: str, name: str) -> int:
    """
    Verify an exclusive range end lies in [1, size] and return it as int.

    Raises:
        ValidationError: If index is not an integer
        MatrixIndexError: If index is out of range
    """
    try:
        result = operator.index(index)
    except TypeError as e:
        raise ValidationError(
            f"{name}: expected an integer {axis} index, got {type(index).__name__}"
        ) from e
    if result < 1 or result > size:
        raise MatrixIndexError(
            f"{name}: end {axis} index {result} is out of range; "
            f"should be between 1 and {size} inclusive",
            index=result,
            bound=size,
            axis=axis,
        )
    return result
