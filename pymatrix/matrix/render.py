"""
Text rendering of a Matrix.

Bracketed, one tab-indented line per row, entries fixed to three
decimals and tab-separated:

    [
    	[1.000	2.000]
    	[3.000	4.000]
    ]

An empty matrix renders as "Empty Matrix".
"""

from __future__ import annotations

from pymatrix.matrix.matrix import Matrix

EMPTY_TEXT = "Empty Matrix"


def format_matrix(m: Matrix, precision: int = 3) -> str:
    """Render m as text; read-only."""
    if m.is_empty:
        return EMPTY_TEXT
    lines = ["["]
    for row in m.tolist():
        cells = "\t".join(f"{value:.{precision}f}" for value in row)
        lines.append(f"\t[{cells}]")
    lines.append("]")
    return "\n".join(lines)
