"""
Scalar, elementwise and matrix-product arithmetic.

Every operation allocates and returns a new Matrix; operands are never
modified. An empty operand raises EmptyMatrixError before any shape check.
"""

from __future__ import annotations

from numbers import Real
import numpy as np

from pymatrix.core.exceptions import (
    DimensionMismatchError,
    DivideByZeroError,
    ValidationError,
)
from pymatrix.core.validation import check_not_empty, check_same_shape
from pymatrix.matrix.matrix import Matrix


def _check_scalar(value: float, name: str = 'scalar') -> float:
    if isinstance(value, bool) or not isinstance(value, (Real, np.floating, np.integer)):
        raise ValidationError(f"{name}: expected real number, got {type(value).__name__}")
    return float(value)


def _from_flat_result(m: Matrix, flat: np.ndarray) -> Matrix:
    return Matrix._adopt(m.rows, m.cols, flat)


# ─── Scalar ─────────────────────────────────────────────────────────────


def add_scalar(m: Matrix, s: float) -> Matrix:
    """m + s."""
    check_not_empty(m, 'add_scalar')
    return _from_flat_result(m, m.data + _check_scalar(s))


def sub_scalar(m: Matrix, s: float) -> Matrix:
    """m - s."""
    check_not_empty(m, 'sub_scalar')
    return _from_flat_result(m, m.data - _check_scalar(s))


def scalar_sub(s: float, m: Matrix) -> Matrix:
    """s - m."""
    check_not_empty(m, 'scalar_sub')
    return _from_flat_result(m, _check_scalar(s) - m.data)


def mul_scalar(m: Matrix, s: float) -> Matrix:
    """m * s."""
    check_not_empty(m, 'mul_scalar')
    return _from_flat_result(m, m.data * _check_scalar(s))


def div_scalar(m: Matrix, s: float) -> Matrix:
    """
    m / s, computed as m * (1 / s).

    Raises:
        DivideByZeroError: If s == 0
    """
    check_not_empty(m, 'div_scalar')
    divisor = _check_scalar(s, 'divisor')
    if divisor == 0.0:
        raise DivideByZeroError(f"div_scalar: divisor is zero for {m.rows}x{m.cols} matrix")
    return _from_flat_result(m, m.data * (1.0 / divisor))


# ─── Elementwise ────────────────────────────────────────────────────────


def add(a: Matrix, b: Matrix) -> Matrix:
    """Elementwise a + b; shapes must match."""
    check_not_empty(a, 'add')
    check_not_empty(b, 'add')
    check_same_shape(a, b, 'add')
    return _from_flat_result(a, a.data + b.data)


def sub(a: Matrix, b: Matrix) -> Matrix:
    """Elementwise a - b; shapes must match."""
    check_not_empty(a, 'sub')
    check_not_empty(b, 'sub')
    check_same_shape(a, b, 'sub')
    return _from_flat_result(a, a.data - b.data)


def mul_elementwise(a: Matrix, b: Matrix) -> Matrix:
    """Hadamard product; shapes must match."""
    check_not_empty(a, 'mul_elementwise')
    check_not_empty(b, 'mul_elementwise')
    check_same_shape(a, b, 'mul_elementwise')
    return _from_flat_result(a, a.data * b.data)


def div_elementwise(a: Matrix, b: Matrix) -> Matrix:
    """
    Elementwise a / b; shapes must match.

    Raises:
        DivideByZeroError: If any entry of b is zero
    """
    check_not_empty(a, 'div_elementwise')
    check_not_empty(b, 'div_elementwise')
    check_same_shape(a, b, 'div_elementwise')
    zero_at = np.flatnonzero(b.data == 0.0)
    if zero_at.size:
        i, j = divmod(int(zero_at[0]), b.cols)
        raise DivideByZeroError(
            f"div_elementwise: divisor has {zero_at.size} zero entries "
            f"(first at row {i}, col {j})"
        )
    return _from_flat_result(a, a.data / b.data)


# ─── Matrix product ─────────────────────────────────────────────────────


def matmul(a: Matrix, b: Matrix) -> Matrix:
    """
    Matrix product a @ b.

    Requires a.cols == b.rows; the result is a.rows x b.cols with
    out[i, j] = sum_k a[i, k] * b[k, j].

    Raises:
        EmptyMatrixError: If either operand is empty
        DimensionMismatchError: If the inner dimensions differ
    """
    check_not_empty(a, 'matmul')
    check_not_empty(b, 'matmul')
    if a.cols != b.rows:
        raise DimensionMismatchError(
            f"matmul: inner dimensions differ, {a.rows}x{a.cols} @ {b.rows}x{b.cols} "
            f"(a.cols={a.cols} != b.rows={b.rows})",
            operation='matmul',
            left_shape=a.shape,
            right_shape=b.shape,
        )
    left = a.data.reshape(a.rows, a.cols)
    right = b.data.reshape(b.rows, b.cols)
    out = np.zeros((a.rows, b.cols), dtype=np.float64)
    # Accumulate one rank-1 update per shared index k.
    for k in range(a.cols):
        out += np.outer(left[:, k], right[k, :])
    return Matrix._adopt(a.rows, b.cols, out.reshape(-1))
