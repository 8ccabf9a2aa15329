"""
Matrix: dense row-major value type.

A Matrix owns a single flat float64 buffer of length rows * cols.
Element (i, j) lives at offset i * cols + j. The shape is fixed at
construction; content changes only through set() / m[i, j] = v and
the in-place elimination routine.
"""

from __future__ import annotations

from numbers import Real
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymatrix.core.compute.tolerances import DEFAULT_POLICY
from pymatrix.core.exceptions import ValidationError
from pymatrix.core.validation import (
    check_array,
    check_extent,
    check_index,
)


class Matrix:
    """
    Dense matrix of real numbers.

    Construction:
        Matrix.from_array([[1, 2], [3, 4]])
        pymatrix.from_flat(2, 2, [1, 2, 3, 4])
        pymatrix.zeros(2, 3), pymatrix.identity(3)

    Operators:
        a + b, a - b, a * b (elementwise), a / b (elementwise), a @ b,
        with a number on either side for the scalar forms.
    """

    __slots__ = ('_rows', '_cols', '_data')

    def __init__(self, rows: int, cols: int, data: NDArray[np.float64] | None = None):
        """
        Args:
            rows: Row count (>= 0)
            cols: Column count (>= 0)
            data: Optional flat float64 buffer of length rows * cols. It is
                copied, so later changes to it do not reach the matrix.
                Without data the contents are uninitialized.
        """
        size = self._check_buffer(rows, cols, data)
        self._rows = int(rows)
        self._cols = int(cols)
        self._data = np.empty(size, dtype=np.float64) if data is None else data.copy()

    @staticmethod
    def _check_buffer(rows: int, cols: int, data: NDArray[np.float64] | None) -> int:
        check_extent(rows, cols)
        size = int(rows) * int(cols)
        if data is not None and (
            data.ndim != 1 or data.shape[0] != size or data.dtype != np.float64
        ):
            raise ValidationError(
                f"data: expected flat float64 buffer of length {size}, "
                f"got dtype {data.dtype} with shape {data.shape}"
            )
        return size

    @classmethod
    def _adopt(cls, rows: int, cols: int, data: NDArray[np.float64]) -> Matrix:
        """Internal builder: take ownership of a freshly allocated flat buffer."""
        cls._check_buffer(rows, cols, data)
        m = cls.__new__(cls)
        m._rows = int(rows)
        m._cols = int(cols)
        m._data = data
        return m

    @classmethod
    def from_array(cls, array: ArrayLike) -> Matrix:
        """
        Build a Matrix from a 2D array-like.

        The input is copied; the new matrix never shares memory with it.
        """
        arr = check_array(array, 'array')
        if arr.ndim != 2:
            raise ValidationError(
                f"array: expected 2D array, got {arr.ndim}D with shape {arr.shape}"
            )
        return cls._wrap(arr)

    @classmethod
    def _wrap(cls, arr: NDArray[np.floating[Any]]) -> Matrix:
        """Internal builder: copy a 2D float array into a fresh flat buffer."""
        rows, cols = arr.shape
        data = np.array(arr, dtype=np.float64, order='C', copy=True).reshape(-1)
        return cls._adopt(rows, cols, data)

    # --- Shape ---

    @property
    def rows(self) -> int:
        """Number of rows."""
        return self._rows

    @property
    def cols(self) -> int:
        """Number of columns."""
        return self._cols

    @property
    def shape(self) -> tuple[int, int]:
        """(rows, cols)."""
        return (self._rows, self._cols)

    @property
    def size(self) -> int:
        """Number of entries (rows * cols)."""
        return self._rows * self._cols

    @property
    def is_empty(self) -> bool:
        """True when the matrix has no rows or no columns."""
        return self._rows == 0 or self._cols == 0

    # --- Element access ---

    def get(self, i: int, j: int) -> float:
        """Bounds-checked read of entry (i, j)."""
        i = check_index(i, self._rows, 'row')
        j = check_index(j, self._cols, 'col')
        return float(self._data[i * self._cols + j])

    def set(self, i: int, j: int, value: float) -> float:
        """Bounds-checked write of entry (i, j); returns the stored value."""
        i = check_index(i, self._rows, 'row')
        j = check_index(j, self._cols, 'col')
        if isinstance(value, bool) or not isinstance(value, (Real, np.floating, np.integer)):
            raise ValidationError(
                f"value: expected real number, got {type(value).__name__}"
            )
        self._data[i * self._cols + j] = value
        return float(self._data[i * self._cols + j])

    def __getitem__(self, key: tuple[int, int]) -> float:
        i, j = self._unpack_key(key)
        return self.get(i, j)

    def __setitem__(self, key: tuple[int, int], value: float) -> None:
        i, j = self._unpack_key(key)
        self.set(i, j, value)

    @staticmethod
    def _unpack_key(key: Any) -> tuple[int, int]:
        if not isinstance(key, tuple) or len(key) != 2:
            raise ValidationError(f"index: expected (row, col) pair, got {key!r}")
        return key

    # --- Buffer access ---

    @property
    def data(self) -> NDArray[np.float64]:
        """Read-only view of the flat row-major buffer."""
        view = self._data.view()
        view.flags.writeable = False
        return view

    def _view(self) -> NDArray[np.float64]:
        """Writable 2D view sharing the flat buffer (internal use only)."""
        return self._data.reshape(self._rows, self._cols)

    def to_numpy(self) -> NDArray[np.float64]:
        """Return a 2D copy of the contents."""
        return self._view().copy()

    def tolist(self) -> list[list[float]]:
        """Return the contents as nested Python lists."""
        return self._view().tolist()

    def copy(self) -> Matrix:
        """Deep copy with its own buffer."""
        return Matrix._adopt(self._rows, self._cols, self._data.copy())

    # --- Comparison ---

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and bool(np.array_equal(self._data, other._data))

    __hash__ = None  # mutable content

    def allclose(
        self,
        other: Matrix,
        rtol: float = DEFAULT_POLICY.rtol,
        atol: float = DEFAULT_POLICY.atol,
    ) -> bool:
        """
        Approximate equality: same shape and |a - b| <= atol + rtol * |b|
        for every entry.
        """
        if self.shape != other.shape:
            return False
        return bool(np.allclose(self._data, other._data, rtol=rtol, atol=atol))

    # --- Operators ---

    def __add__(self, other: Matrix | float) -> Matrix:
        from pymatrix.matrix import arithmetic
        if isinstance(other, Matrix):
            return arithmetic.add(self, other)
        return arithmetic.add_scalar(self, other)

    def __radd__(self, other: float) -> Matrix:
        from pymatrix.matrix import arithmetic
        return arithmetic.add_scalar(self, other)

    def __sub__(self, other: Matrix | float) -> Matrix:
        from pymatrix.matrix import arithmetic
        if isinstance(other, Matrix):
            return arithmetic.sub(self, other)
        return arithmetic.sub_scalar(self, other)

    def __rsub__(self, other: float) -> Matrix:
        from pymatrix.matrix import arithmetic
        return arithmetic.scalar_sub(other, self)

    def __mul__(self, other: Matrix | float) -> Matrix:
        from pymatrix.matrix import arithmetic
        if isinstance(other, Matrix):
            return arithmetic.mul_elementwise(self, other)
        return arithmetic.mul_scalar(self, other)

    def __rmul__(self, other: float) -> Matrix:
        from pymatrix.matrix import arithmetic
        return arithmetic.mul_scalar(self, other)

    def __truediv__(self, other: Matrix | float) -> Matrix:
        from pymatrix.matrix import arithmetic
        if isinstance(other, Matrix):
            return arithmetic.div_elementwise(self, other)
        return arithmetic.div_scalar(self, other)

    def __matmul__(self, other: Matrix) -> Matrix:
        from pymatrix.matrix import arithmetic
        if not isinstance(other, Matrix):
            return NotImplemented
        return arithmetic.matmul(self, other)

    def __neg__(self) -> Matrix:
        from pymatrix.matrix import arithmetic
        return arithmetic.mul_scalar(self, -1.0)

    # --- Convenience ---

    @property
    def T(self) -> Matrix:
        """Transpose (new matrix)."""
        from pymatrix.matrix.transforms import transpose
        return transpose(self)

    def __str__(self) -> str:
        from pymatrix.matrix.render import format_matrix
        return format_matrix(self)

    def __repr__(self) -> str:
        return f"Matrix(rows={self._rows}, cols={self._cols})"
