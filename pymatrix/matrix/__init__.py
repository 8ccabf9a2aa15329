"""
Matrix value type and the operations that act on it directly.

Submodules:
    matrix: the Matrix class
    construction: create, from_flat, from_rows, zeros, identity, access
    arithmetic: scalar, elementwise and matrix-product arithmetic
    transforms: transpose, swaps, slice, concatenation
    reductions: sum, mean
    render: text form
"""

from pymatrix.matrix.matrix import Matrix
from pymatrix.matrix.construction import (
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
)
from pymatrix.matrix.arithmetic import (
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
)
from pymatrix.matrix.transforms import (
    transpose,
    row_swap,
    col_swap,
    slice_matrix,
    concat_vertical,
    concat_horizontal,
)
from pymatrix.matrix.reductions import matrix_sum, mean
from pymatrix.matrix.render import format_matrix

__all__ = [
    "Matrix",
    # Construction & access
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
    # Arithmetic
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
    # Transforms
    "transpose",
    "row_swap",
    "col_swap",
    "slice_matrix",
    "concat_vertical",
    "concat_horizontal",
    # Reductions
    "matrix_sum",
    "mean",
    # Rendering
    "format_matrix",
]
