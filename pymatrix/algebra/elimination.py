"""
Elimination engine: in-place reduction to reduced row-echelon form.

The reduction walks a (row, lead) cursor across the matrix:

    1. Scan rows r..rows-1 in column `lead` for the first entry with
       |x| > pivot_tol. If none, move to the next column and keep r.
    2. Swap that row into position r, scale it so the pivot is 1, and
       subtract multiples of it from every other row to clear the column.
    3. Advance r and lead; stop when either runs off the matrix.

row_echelon() runs this on the caller's matrix and returns it. rank()
runs it on a copy. eliminate() returns the reduced copy together with
pivot columns, row swaps and timing.
"""

from __future__ import annotations

from dataclasses import dataclass
import numpy as np
from numpy.typing import NDArray

from pymatrix.core.compute.timing import timed
from pymatrix.core.compute.tolerances import DEFAULT_POLICY, TolerancePolicy
from pymatrix.core.exceptions import ValidationError
from pymatrix.core.result import Result
from pymatrix.core.validation import check_not_empty
from pymatrix.matrix.matrix import Matrix


@dataclass(frozen=True)
class EchelonParams:
    """
    Payload of eliminate().

    Attributes:
        matrix: The reduced matrix
        pivot_columns: Column of each pivot, in row order
        row_swaps: (r, i) pairs, one per swap performed
        rank: Number of rows with an entry above the pivot tolerance
    """
    matrix: Matrix
    pivot_columns: tuple[int, ...]
    row_swaps: tuple[tuple[int, int], ...]
    rank: int


def _check_tol(pivot_tol: float | None, policy: TolerancePolicy) -> float:
    # An explicit pivot_tol wins over the policy. A positive tolerance keeps
    # the clamped pivot away from zero.
    if pivot_tol is None:
        pivot_tol = policy.pivot_tol
    if not pivot_tol > 0:
        raise ValidationError(f"pivot_tol: must be positive, got {pivot_tol}")
    return float(pivot_tol)


def _guard_pivot(pivot: float, pivot_tol: float) -> float:
    """
    Clamp a pivot within tolerance of zero to +/- pivot_tol.

    _reduce only selects candidates with |x| > pivot_tol, so there the
    pivot passes through unchanged; the clamp bounds any other divisor.
    """
    if abs(pivot) > pivot_tol:
        return pivot
    return pivot_tol if pivot >= 0 else -pivot_tol


def _reduce(
    a: NDArray[np.float64],
    pivot_tol: float,
) -> tuple[list[int], list[tuple[int, int]]]:
    """Reduce the 2D view `a` in place; returns (pivot_columns, row_swaps)."""
    n_rows, n_cols = a.shape
    pivots: list[int] = []
    swaps: list[tuple[int, int]] = []
    r = 0
    lead = 0
    while r < n_rows and lead < n_cols:
        candidates = np.flatnonzero(np.abs(a[r:, lead]) > pivot_tol)
        if candidates.size == 0:
            lead += 1
            continue

        i = r + int(candidates[0])
        if i != r:
            a[[r, i], :] = a[[i, r], :]
            swaps.append((r, i))

        a[r, :] /= _guard_pivot(float(a[r, lead]), pivot_tol)

        factors = a[:, lead].copy()
        factors[r] = 0.0
        a -= np.outer(factors, a[r, :])

        pivots.append(lead)
        r += 1
        lead += 1
    return pivots, swaps


def _count_nonzero_rows(a: NDArray[np.float64], pivot_tol: float) -> int:
    return int(np.sum(np.any(np.abs(a) > pivot_tol, axis=1)))


def row_echelon(
    m: Matrix,
    *,
    pivot_tol: float | None = None,
    policy: TolerancePolicy = DEFAULT_POLICY,
) -> Matrix:
    """
    Reduce m to reduced row-echelon form, in place.

    Destructive: m itself is modified and returned. Copy first
    (m.copy()) to keep the original.

    Parameters
    ----------
    m : Matrix
        Non-empty matrix.
    pivot_tol : float, optional
        Entries with |x| <= pivot_tol are never chosen as pivots. Defaults
        to policy.pivot_tol.
    policy : TolerancePolicy
        Source of the default tolerance.

    Returns
    -------
    The same Matrix instance, reduced.

    Raises
    ------
    EmptyMatrixError
        If m is empty.
    """
    check_not_empty(m, 'row_echelon')
    _reduce(m._view(), _check_tol(pivot_tol, policy))
    return m


def rank(
    m: Matrix,
    *,
    pivot_tol: float | None = None,
    policy: TolerancePolicy = DEFAULT_POLICY,
) -> int:
    """
    Numerical rank via elimination on a copy of m.

    Counts rows of the reduced form holding at least one entry with
    |x| > pivot_tol (policy.pivot_tol unless given). m is not modified.
    """
    check_not_empty(m, 'rank')
    tol = _check_tol(pivot_tol, policy)
    work = m.to_numpy()
    _reduce(work, tol)
    return _count_nonzero_rows(work, tol)


def eliminate(
    m: Matrix,
    *,
    pivot_tol: float | None = None,
    policy: TolerancePolicy = DEFAULT_POLICY,
    in_place: bool = False,
) -> Result[EchelonParams]:
    """
    Row-echelon reduction with diagnostics.

    Parameters
    ----------
    m : Matrix
        Non-empty matrix.
    pivot_tol : float, optional
        Pivot tolerance; defaults to policy.pivot_tol.
    policy : TolerancePolicy
        Source of the default tolerance, recorded in info.
    in_place : bool
        If True, reduce m itself (as row_echelon does); otherwise reduce
        a copy and leave m untouched.

    Returns
    -------
    Result[EchelonParams] with the reduced matrix, pivot columns, row
    swaps, rank, and timing.
    """
    check_not_empty(m, 'eliminate')
    tol = _check_tol(pivot_tol, policy)

    target = m if in_place else m.copy()
    with timed() as timer:
        with timer.section('reduction'):
            pivots, swaps = _reduce(target._view(), tol)
        with timer.section('rank'):
            n_nonzero = _count_nonzero_rows(target._view(), tol)

    warnings_list: list[str] = []
    if n_nonzero < min(m.rows, m.cols):
        warnings_list.append(
            f"rank deficient: rank={n_nonzero}, min(rows, cols)={min(m.rows, m.cols)}"
        )

    return Result(
        params=EchelonParams(
            matrix=target,
            pivot_columns=tuple(pivots),
            row_swaps=tuple(swaps),
            rank=n_nonzero,
        ),
        info={
            'method': 'gauss_jordan',
            'pivot_tol': tol,
            'policy': policy.name,
            'shape': m.shape,
            'in_place': in_place,
        },
        timing=timer.result(),
        backend_name='cpu_elimination',
        warnings=tuple(warnings_list),
    )
