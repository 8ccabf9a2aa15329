"""
Input validation utilities for PyMatrix.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - No clamping or wrapping of indices
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter or operation names included in all error messages
"""

from __future__ import annotations

from typing import Any, TYPE_CHECKING
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymatrix.core.exceptions import (
    DimensionMismatchError,
    EmptyMatrixError,
    IndexOutOfBoundsError,
    InvalidDimensionsError,
    NonSquareMatrixError,
    ValidationError,
)

if TYPE_CHECKING:
    from pymatrix.matrix.matrix import Matrix


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.float64]:
    """
    Validate and convert input to a float64 numpy array.

    Accepts any array-like and converts to numpy array. Rejects inputs
    that result in object dtype (indicating mixed types or ragged data)
    or in a non-numeric dtype.

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray with dtype float64

    Raises:
        ValidationError: If input cannot be converted to numeric array
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or ragged data"
        )

    if result.dtype == np.bool_ or not np.issubdtype(result.dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected real numbers"
        )

    if np.issubdtype(result.dtype, np.complexfloating):
        raise ValidationError(f"{name}: complex dtype {result.dtype}, expected real numbers")

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


def check_extent(rows: int, cols: int) -> None:
    """
    Verify construction extents are non-negative integers.

    Zero is allowed; it produces an empty matrix.

    Raises:
        InvalidDimensionsError: If either extent is negative or not an int
    """
    for label, value in (('rows', rows), ('cols', cols)):
        if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
            raise InvalidDimensionsError(
                f"{label}: expected non-negative int, got {type(value).__name__}",
                rows=None, cols=None,
            )
        if value < 0:
            raise InvalidDimensionsError(
                f"{label}: must be non-negative, got {value}",
                rows=int(rows), cols=int(cols),
            )


def check_index(index: int, bound: int, axis: str) -> int:
    """
    Verify 0 <= index < bound.

    Args:
        index: Row or column index
        bound: Exclusive upper bound (row or column count)
        axis: 'row' or 'col', used in the error message

    Returns:
        The index as a plain int

    Raises:
        IndexOutOfBoundsError: If index is negative, >= bound, or not an int
    """
    if isinstance(index, bool) or not isinstance(index, (int, np.integer)):
        raise IndexOutOfBoundsError(
            f"{axis} index: expected int, got {type(index).__name__}",
            index=None, bound=bound, axis=axis,
        )
    if index < 0 or index >= bound:
        raise IndexOutOfBoundsError(
            f"{axis} index {index} out of bounds for {axis} count {bound}",
            index=int(index), bound=bound, axis=axis,
        )
    return int(index)


def check_not_empty(m: Matrix, operation: str) -> None:
    """
    Verify a matrix has at least one row and one column.

    Raises:
        EmptyMatrixError: If rows == 0 or cols == 0
    """
    if m.is_empty:
        raise EmptyMatrixError(
            f"{operation}: operand is empty ({m.rows}x{m.cols})",
            operation=operation,
        )


def check_same_shape(a: Matrix, b: Matrix, operation: str) -> None:
    """
    Verify two matrices have identical shape.

    Raises:
        DimensionMismatchError: If shapes differ
    """
    if a.shape != b.shape:
        raise DimensionMismatchError(
            f"{operation}: shape mismatch {a.rows}x{a.cols} vs {b.rows}x{b.cols}",
            operation=operation,
            left_shape=a.shape,
            right_shape=b.shape,
        )


def check_square(m: Matrix, operation: str) -> None:
    """
    Verify a matrix is square.

    Raises:
        NonSquareMatrixError: If rows != cols
    """
    if m.rows != m.cols:
        raise NonSquareMatrixError(
            f"{operation}: requires a square matrix, got {m.rows}x{m.cols}",
            shape=m.shape,
        )
