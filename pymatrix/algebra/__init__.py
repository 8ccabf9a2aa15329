"""
Linear-algebra routines over Matrix.

Public API:
    row_echelon(m)   - In-place reduced row-echelon form
    rank(m)          - Numerical rank via elimination
    eliminate(m)     - Elimination with pivot/swap diagnostics
    determinant(m)   - Laplace-expansion determinant
    minor(m, i, j)   - Matrix with row i and column j deleted
    adjugate(m)      - Transposed cofactor matrix
    inverse(m)       - adjugate(m) / determinant(m)
"""

from pymatrix.algebra.elimination import (
    EchelonParams,
    row_echelon,
    rank,
    eliminate,
)
from pymatrix.algebra.cofactor import (
    minor,
    determinant,
    adjugate,
    inverse,
)

__all__ = [
    "EchelonParams",
    "row_echelon",
    "rank",
    "eliminate",
    "minor",
    "determinant",
    "adjugate",
    "inverse",
]
