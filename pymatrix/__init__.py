"""
PyMatrix: dense-matrix runtime for Python.

A small numerical engine for matrix construction, element access,
arithmetic, structural transforms and linear-algebra reductions
(row-echelon form, determinant, adjugate, inverse, rank) over
two-dimensional arrays of real numbers.

Submodules:
    matrix: Matrix type, construction, arithmetic, transforms, reductions
    algebra: Elimination engine and cofactor algebra
    core: Exceptions, validation, tolerances, numeric helpers
"""

__version__ = "0.1.0"

from pymatrix.matrix import (
    Matrix,
    create,
    from_flat,
    from_rows,
    zeros,
    identity,
    get,
    set_value,
    is_empty,
    height,
    width,
    add_scalar,
    sub_scalar,
    scalar_sub,
    mul_scalar,
    div_scalar,
    add,
    sub,
    matmul,
    mul_elementwise,
    div_elementwise,
    transpose,
    row_swap,
    col_swap,
    slice_matrix,
    concat_vertical,
    concat_horizontal,
    matrix_sum,
    mean,
    format_matrix,
)
from pymatrix.algebra import (
    EchelonParams,
    row_echelon,
    rank,
    eliminate,
    minor,
    determinant,
    adjugate,
    inverse,
)
from pymatrix.core.compute import (
    TolerancePolicy,
    DEFAULT_POLICY,
    STRICT_POLICY,
    select_policy,
    sqrt,
    root,
    power,
)
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
    "__version__",
    "Matrix",
    "create",
    "from_flat",
    "from_rows",
    "zeros",
    "identity",
    "get",
    "set_value",
    "is_empty",
    "height",
    "width",
    "add_scalar",
    "sub_scalar",
    "scalar_sub",
    "mul_scalar",
    "div_scalar",
    "add",
    "sub",
    "matmul",
    "mul_elementwise",
    "div_elementwise",
    "transpose",
    "row_swap",
    "col_swap",
    "slice_matrix",
    "concat_vertical",
    "concat_horizontal",
    "matrix_sum",
    "mean",
    "format_matrix",
    "EchelonParams",
    "row_echelon",
    "rank",
    "eliminate",
    "minor",
    "determinant",
    "adjugate",
    "inverse",
    "TolerancePolicy",
    "DEFAULT_POLICY",
    "STRICT_POLICY",
    "select_policy",
    "sqrt",
    "root",
    "power",
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
