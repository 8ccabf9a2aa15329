"""
Matrix construction and element access.

Functional entry points over the Matrix type: create, from_flat,
from_rows, zeros, identity, get, set_value, is_empty, height, width.
"""

from __future__ import annotations

from typing import Sequence
import numpy as np
from numpy.typing import ArrayLike

from pymatrix.core.exceptions import DimensionMismatchError, ValidationError
from pymatrix.core.validation import check_array, check_extent
from pymatrix.matrix.matrix import Matrix


def create(rows: int, cols: int) -> Matrix:
    """
    Allocate a rows x cols matrix with unspecified content.

    Zero extents are allowed and give an empty matrix.
    """
    return Matrix(rows, cols)


def zeros(rows: int, cols: int) -> Matrix:
    """rows x cols matrix of zeros."""
    check_extent(rows, cols)
    return Matrix._adopt(rows, cols, np.zeros(int(rows) * int(cols), dtype=np.float64))


def identity(n: int) -> Matrix:
    """n x n identity matrix."""
    check_extent(n, n)
    return Matrix._adopt(n, n, np.eye(int(n), dtype=np.float64).reshape(-1))


def from_flat(rows: int, cols: int, data: ArrayLike) -> Matrix:
    """
    Fill a new rows x cols matrix row-major from a flat sequence.

    Parameters
    ----------
    rows, cols : int
        Target shape.
    data : array-like
        Exactly rows * cols numbers, in row-major order.

    Raises
    ------
    InvalidDimensionsError
        If rows or cols is negative.
    DimensionMismatchError
        If data does not hold exactly rows * cols values.
    ValidationError
        If data is not numeric.
    """
    check_extent(rows, cols)
    flat = check_array(data, 'data')
    if flat.ndim != 1:
        raise ValidationError(
            f"data: expected flat 1D sequence, got {flat.ndim}D with shape {flat.shape}"
        )
    expected = int(rows) * int(cols)
    if flat.shape[0] != expected:
        raise DimensionMismatchError(
            f"from_flat: {rows}x{cols} needs {expected} values, got {flat.shape[0]}",
            operation='from_flat',
            left_shape=(int(rows), int(cols)),
            right_shape=flat.shape,
        )
    return Matrix._adopt(rows, cols, flat.copy())


def from_rows(rows: Sequence[Sequence[float]]) -> Matrix:
    """
    Build a matrix from a sequence of equal-length rows.

    An empty sequence gives the 0 x 0 matrix.
    """
    rows = list(rows)
    if not rows:
        return Matrix(0, 0)
    width_0 = len(rows[0])
    for index, row in enumerate(rows):
        if len(row) != width_0:
            raise DimensionMismatchError(
                f"from_rows: row {index} has {len(row)} entries, expected {width_0}",
                operation='from_rows',
                left_shape=(width_0,),
                right_shape=(len(row),),
            )
    if width_0 == 0:
        return Matrix(len(rows), 0)
    return Matrix.from_array(rows)


def is_empty(m: Matrix) -> bool:
    """True when m has no rows or no columns."""
    return m.is_empty


def height(m: Matrix) -> int:
    """Row count, or 0 for an empty matrix."""
    return 0 if m.is_empty else m.rows


def width(m: Matrix) -> int:
    """Column count, or 0 for an empty matrix."""
    return 0 if m.is_empty else m.cols


def get(m: Matrix, i: int, j: int) -> float:
    """Bounds-checked read; see Matrix.get."""
    return m.get(i, j)


def set_value(m: Matrix, i: int, j: int, value: float) -> float:
    """Bounds-checked write; mutates m and returns the stored value."""
    return m.set(i, j, value)
