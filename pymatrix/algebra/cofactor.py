"""
Cofactor-expansion algebra: minor, determinant, adjugate, inverse.

The determinant is a Laplace expansion along row 0, recursing on freshly
allocated minors. Cost is O(n!), so these routines suit small matrices;
no LU path is provided.

inverse() refuses only when |det| <= singular_tol (0.0 by default, so an
exactly zero determinant). Near-singular inputs still produce a result,
with a RuntimeWarning when |det| falls below the pivot tolerance.
"""

from __future__ import annotations

import warnings
import numpy as np
from numpy.typing import NDArray

from pymatrix.core.compute.tolerances import DEFAULT_POLICY, TolerancePolicy
from pymatrix.core.exceptions import (
    InvalidDimensionsError,
    SingularMatrixError,
    ValidationError,
)
from pymatrix.core.validation import (
    check_finite,
    check_index,
    check_not_empty,
    check_square,
)
from pymatrix.matrix.matrix import Matrix


def _minor_array(a: NDArray[np.float64], i: int, j: int) -> NDArray[np.float64]:
    """New array with row i and column j removed."""
    return np.delete(np.delete(a, i, axis=0), j, axis=1)


def _det(a: NDArray[np.float64]) -> float:
    n = a.shape[0]
    if n == 1:
        return float(a[0, 0])
    total = 0.0
    sign = 1.0
    for f in range(n):
        total += sign * a[0, f] * _det(_minor_array(a, 0, f))
        sign = -sign
    return float(total)


def _check_square_operand(m: Matrix, operation: str) -> NDArray[np.float64]:
    check_not_empty(m, operation)
    check_square(m, operation)
    return m.to_numpy()


def minor(m: Matrix, i: int, j: int) -> Matrix:
    """
    (n-1) x (n-1) matrix obtained by deleting row i and column j of m.

    Always a fresh allocation; m is untouched.

    Raises:
        EmptyMatrixError: If m is empty
        NonSquareMatrixError: If m is not square
        IndexOutOfBoundsError: If i or j is outside m
        InvalidDimensionsError: If m is 1 x 1 (the minor would be empty)
    """
    a = _check_square_operand(m, 'minor')
    i = check_index(i, m.rows, 'row')
    j = check_index(j, m.cols, 'col')
    if m.rows == 1:
        raise InvalidDimensionsError(
            "minor: a 1x1 matrix has no non-empty minor", rows=0, cols=0
        )
    return Matrix._wrap(_minor_array(a, i, j))


def determinant(m: Matrix) -> float:
    """
    Determinant by Laplace expansion along the first row.

    det(A) = sum_f (-1)^f * A[0, f] * det(minor(A, 0, f)), with det of a
    1 x 1 matrix being its sole entry.

    Raises:
        EmptyMatrixError: If m is empty
        NonSquareMatrixError: If m is not square
    """
    return _det(_check_square_operand(m, 'determinant'))


def _adjugate_array(a: NDArray[np.float64]) -> NDArray[np.float64]:
    n = a.shape[0]
    if n == 1:
        return np.ones((1, 1), dtype=np.float64)
    adj = np.empty((n, n), dtype=np.float64)
    for i in range(n):
        for j in range(n):
            sign = 1.0 if (i + j) % 2 == 0 else -1.0
            # Stored transposed: the cofactor of (i, j) lands at (j, i).
            adj[j, i] = sign * _det(_minor_array(a, i, j))
    return adj


def adjugate(m: Matrix) -> Matrix:
    """
    Adjugate (transposed cofactor matrix) of a square matrix.

    For a 1 x 1 matrix the adjugate is [[1]].

    Raises:
        EmptyMatrixError: If m is empty
        NonSquareMatrixError: If m is not square
    """
    return Matrix._wrap(_adjugate_array(_check_square_operand(m, 'adjugate')))


def inverse(
    m: Matrix,
    *,
    singular_tol: float | None = None,
    warn_tol: float | None = None,
    policy: TolerancePolicy = DEFAULT_POLICY,
) -> Matrix:
    """
    Inverse via adjugate(m) / determinant(m).

    Parameters
    ----------
    m : Matrix
        Non-empty square matrix.
    singular_tol : float, optional
        Raise SingularMatrixError when |det| <= singular_tol. Defaults to
        policy.singular_tol; DEFAULT_POLICY uses 0.0, which rejects only
        an exactly zero determinant.
    warn_tol : float, optional
        Emit a RuntimeWarning when 0 < |det| < warn_tol. Defaults to
        policy.pivot_tol.
    policy : TolerancePolicy
        Source of the default tolerances.

    Raises
    ------
    EmptyMatrixError
        If m is empty.
    NonSquareMatrixError
        If m is not square.
    ValidationError
        If m holds NaN or Inf, or singular_tol is negative.
    SingularMatrixError
        If the determinant is within singular_tol of zero.
    """
    if singular_tol is None:
        singular_tol = policy.singular_tol
    if warn_tol is None:
        warn_tol = policy.pivot_tol
    if singular_tol < 0:
        raise ValidationError(f"singular_tol: must be non-negative, got {singular_tol}")

    a = _check_square_operand(m, 'inverse')
    check_finite(a, 'm')
    det = _det(a)

    if abs(det) <= singular_tol:
        raise SingularMatrixError(
            f"inverse: matrix is singular (determinant={det!r}, "
            f"singular_tol={singular_tol!r})",
            matrix_name='m',
            determinant=det,
            expected_rank=m.rows,
        )

    if abs(det) < warn_tol:
        warnings.warn(
            f"inverse: determinant {det:.3e} is below {warn_tol:.1e}; "
            f"result may be numerically unstable",
            RuntimeWarning,
            stacklevel=2,
        )

    return Matrix._wrap(_adjugate_array(a) / det)
