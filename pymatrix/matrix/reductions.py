"""
Scalar reductions over all entries.
"""

from __future__ import annotations

from pymatrix.core.validation import check_not_empty
from pymatrix.matrix.matrix import Matrix


def matrix_sum(m: Matrix) -> float:
    """Total of all entries."""
    check_not_empty(m, 'sum')
    return float(m.data.sum())


def mean(m: Matrix) -> float:
    """sum(m) / (rows * cols)."""
    check_not_empty(m, 'mean')
    return matrix_sum(m) / (m.rows * m.cols)
