"""
Structural transforms: transpose, row/column swap, slice, concatenation.

All transforms return a new Matrix and leave their operands untouched.
"""

from __future__ import annotations

import numpy as np

from pymatrix.core.exceptions import (
    DimensionMismatchError,
    IndexOutOfBoundsError,
    InvalidDimensionsError,
)
from pymatrix.core.validation import check_index, check_not_empty
from pymatrix.matrix.matrix import Matrix


def transpose(m: Matrix) -> Matrix:
    """cols x rows matrix with out[i, j] = m[j, i]. Empty in, empty out."""
    return Matrix._wrap(m.data.reshape(m.rows, m.cols).T)


def row_swap(m: Matrix, a: int, b: int) -> Matrix:
    """Copy of m with rows a and b exchanged."""
    check_not_empty(m, 'row_swap')
    a = check_index(a, m.rows, 'row')
    b = check_index(b, m.rows, 'row')
    out = m.copy()
    view = out._view()
    view[[a, b], :] = view[[b, a], :]
    return out


def col_swap(m: Matrix, a: int, b: int) -> Matrix:
    """Copy of m with columns a and b exchanged."""
    check_not_empty(m, 'col_swap')
    a = check_index(a, m.cols, 'col')
    b = check_index(b, m.cols, 'col')
    out = m.copy()
    view = out._view()
    view[:, [a, b]] = view[:, [b, a]]
    return out


def slice_matrix(m: Matrix, r0: int, r1: int, c0: int, c1: int) -> Matrix:
    """
    Sub-matrix over rows [r0, r1) and columns [c0, c1).

    Raises:
        EmptyMatrixError: If m is empty
        IndexOutOfBoundsError: If a bound is not an int, a start is negative,
            or an end exceeds the shape
        InvalidDimensionsError: If the extracted row or column count is not positive
    """
    check_not_empty(m, 'slice')
    for label, start, end, bound, axis in (
        ('r', r0, r1, m.rows, 'row'),
        ('c', c0, c1, m.cols, 'col'),
    ):
        for suffix, value in (('0', start), ('1', end)):
            if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
                raise IndexOutOfBoundsError(
                    f"slice: {label}{suffix} expected int, got {type(value).__name__}",
                    index=None, bound=bound, axis=axis,
                )
        if start < 0:
            raise IndexOutOfBoundsError(
                f"slice: {label}0={start} is negative",
                index=start, bound=bound, axis=axis,
            )
        if end > bound:
            raise IndexOutOfBoundsError(
                f"slice: {label}1={end} exceeds {axis} count {bound}",
                index=end, bound=bound, axis=axis,
            )
    n_rows = r1 - r0
    n_cols = c1 - c0
    if n_rows <= 0 or n_cols <= 0:
        raise InvalidDimensionsError(
            f"slice: extracted extent must be positive, got {n_rows}x{n_cols} "
            f"from rows [{r0}, {r1}) and cols [{c0}, {c1})",
            rows=n_rows, cols=n_cols,
        )
    return Matrix._wrap(m.data.reshape(m.rows, m.cols)[r0:r1, c0:c1])


def concat_vertical(a: Matrix, b: Matrix) -> Matrix:
    """
    Stack b below a; column counts must match.

    Concatenating with an empty matrix returns a copy of the other operand.
    """
    if a.is_empty:
        return b.copy()
    if b.is_empty:
        return a.copy()
    if a.cols != b.cols:
        raise DimensionMismatchError(
            f"concat_vertical: column counts differ ({a.cols} vs {b.cols})",
            operation='concat_vertical',
            left_shape=a.shape,
            right_shape=b.shape,
        )
    return Matrix._adopt(a.rows + b.rows, a.cols, np.concatenate([a.data, b.data]))


def concat_horizontal(a: Matrix, b: Matrix) -> Matrix:
    """
    Place b to the right of a; row counts must match.

    Concatenating with an empty matrix returns a copy of the other operand.
    """
    if a.is_empty:
        return b.copy()
    if b.is_empty:
        return a.copy()
    if a.rows != b.rows:
        raise DimensionMismatchError(
            f"concat_horizontal: row counts differ ({a.rows} vs {b.rows})",
            operation='concat_horizontal',
            left_shape=a.shape,
            right_shape=b.shape,
        )
    stacked = np.hstack([a.data.reshape(a.rows, a.cols), b.data.reshape(b.rows, b.cols)])
    return Matrix._wrap(stacked)
