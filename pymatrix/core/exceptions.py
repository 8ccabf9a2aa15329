"""
Exception hierarchy for PyMatrix.

All exceptions inherit from PyMatrixError to allow catching any
library-specific error. Precondition violations are ValidationErrors;
failures that arise from the numbers themselves are NumericalErrors.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PyMatrixError(Exception):
    """Base exception for all PyMatrix errors."""
    pass


class ValidationError(PyMatrixError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionMismatchError(ValidationError):
    """
    Operand shapes are incompatible for an operation.

    Raised by binary arithmetic, matrix products, concatenation and flat
    construction when the shapes involved don't line up.

    Attributes:
        operation: Name of the operation that failed
        left_shape: Shape of the left operand (or expected shape)
        right_shape: Shape of the right operand (or actual shape)
    """

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        left_shape: tuple[int, ...] | None = None,
        right_shape: tuple[int, ...] | None = None
    ):
        super().__init__(message)
        self.operation = operation
        self.left_shape = left_shape
        self.right_shape = right_shape


class InvalidDimensionsError(ValidationError):
    """
    Requested matrix extents are not allowed.

    Raised for negative construction extents and for slices whose
    extracted row or column count is not strictly positive.

    Attributes:
        rows: Requested row extent
        cols: Requested column extent
    """

    def __init__(
        self,
        message: str,
        rows: int | None = None,
        cols: int | None = None
    ):
        super().__init__(message)
        self.rows = rows
        self.cols = cols


class IndexOutOfBoundsError(ValidationError, IndexError):
    """
    Row or column index outside the matrix.

    Indices are never clamped or wrapped; anything outside [0, bound)
    raises this error.

    Attributes:
        index: The offending index
        bound: The exclusive upper bound it was checked against
        axis: 'row' or 'col'
    """

    def __init__(
        self,
        message: str,
        index: int | None = None,
        bound: int | None = None,
        axis: str | None = None
    ):
        super().__init__(message)
        self.index = index
        self.bound = bound
        self.axis = axis


class EmptyMatrixError(ValidationError):
    """
    Operation requires a non-empty matrix.

    Attributes:
        operation: Name of the operation that was guarded
    """

    def __init__(self, message: str, operation: str | None = None):
        super().__init__(message)
        self.operation = operation


class NonSquareMatrixError(ValidationError):
    """
    Operation requires a square matrix.

    Attributes:
        shape: Actual (rows, cols) of the operand
    """

    def __init__(self, message: str, shape: tuple[int, int] | None = None):
        super().__init__(message)
        self.shape = shape


class NumericalError(PyMatrixError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class SingularMatrixError(NumericalError):
    """
    Matrix is singular.

    Raised when a matrix operation requires invertibility but the matrix
    determinant is zero (or within the configured singular tolerance).

    Attributes:
        matrix_name: Name/description of the problematic matrix
        determinant: The determinant that triggered the error, if computed
        rank: Numerical rank, if computed
        expected_rank: Expected rank (typically n for an n x n matrix)
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        determinant: float | None = None,
        rank: int | None = None,
        expected_rank: int | None = None
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.determinant = determinant
        self.rank = rank
        self.expected_rank = expected_rank


class DivideByZeroError(NumericalError, ZeroDivisionError):
    """Division by an exact zero (scalar divisor, elementwise divisor, 0 ** -n)."""
    pass


class ConvergenceError(PyMatrixError):
    """
    Iterative algorithm failed to converge.

    Raised when an iterative approximation (Newton square root, n-th root)
    fails to meet its convergence criterion within the maximum number of
    iterations.

    Attributes:
        iterations: Number of iterations completed
        final_change: Final change between successive iterates
        reason: Why convergence failed (e.g., 'max_iterations', 'diverging')
        threshold: The convergence threshold that was not met
    """

    def __init__(
        self,
        message: str,
        iterations: int,
        final_change: float | None = None,
        reason: str | None = None,
        threshold: float | None = None
    ):
        super().__init__(message)
        self.iterations = iterations
        self.final_change = final_change
        self.reason = reason
        self.threshold = threshold
