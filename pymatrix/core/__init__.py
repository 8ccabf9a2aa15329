"""
Core infrastructure for PyMatrix.

Shared abstractions used by the matrix and algebra packages.

Key components:
    exceptions: Exception hierarchy
    validation: Input validators
    result: Generic Result[P] envelope
    compute: Tolerances, timing, scalar numeric helpers
"""

from pymatrix.core.result import Result
from pymatrix.core.exceptions import (
    PyMatrixError,
    ValidationError,
    DimensionMismatchError,
    InvalidDimensionsError,
    IndexOutOfBoundsError,
    EmptyMatrixError,
    NonSquareMatrixError,
    NumericalError,
    SingularMatrixError,
    DivideByZeroError,
    ConvergenceError,
)

__all__ = [
    # Result
    "Result",
    # Exceptions
    "PyMatrixError",
    "ValidationError",
    "DimensionMismatchError",
    "InvalidDimensionsError",
    "IndexOutOfBoundsError",
    "EmptyMatrixError",
    "NonSquareMatrixError",
    "NumericalError",
    "SingularMatrixError",
    "DivideByZeroError",
    "ConvergenceError",
]
