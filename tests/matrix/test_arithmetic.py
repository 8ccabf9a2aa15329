"""
Tests for scalar, elementwise and matrix-product arithmetic.
"""

import numpy as np
import pytest

from pymatrix import (
    DimensionMismatchError,
    DivideByZeroError,
    EmptyMatrixError,
    Matrix,
    ValidationError,
    add,
    add_scalar,
    div_elementwise,
    div_scalar,
    from_flat,
    identity,
    matmul,
    mul_elementwise,
    mul_scalar,
    scalar_sub,
    sub,
    sub_scalar,
    zeros,
)


# ═══════════════════════════════════════════════════════════════════════
# Scalar operations
# ═══════════════════════════════════════════════════════════════════════


class TestScalar:

    def test_add_sub(self, a2):
        np.testing.assert_array_equal(add_scalar(a2, 1).to_numpy(), [[2, 3], [4, 5]])
        np.testing.assert_array_equal(sub_scalar(a2, 1).to_numpy(), [[0, 1], [2, 3]])

    def test_scalar_minus_matrix(self, a2):
        np.testing.assert_array_equal(scalar_sub(10, a2).to_numpy(), [[9, 8], [7, 6]])

    def test_mul_div(self, a2):
        np.testing.assert_array_equal(mul_scalar(a2, 2).to_numpy(), [[2, 4], [6, 8]])
        np.testing.assert_allclose(div_scalar(a2, 4).to_numpy(), [[0.25, 0.5], [0.75, 1.0]])

    def test_div_by_zero(self, a2):
        with pytest.raises(DivideByZeroError):
            div_scalar(a2, 0)

    def test_operands_unmodified(self, a2):
        before = a2.copy()
        add_scalar(a2, 5)
        mul_scalar(a2, 5)
        assert a2 == before

    def test_non_numeric_scalar(self, a2):
        with pytest.raises(ValidationError, match="real number"):
            add_scalar(a2, "1")

    @pytest.mark.parametrize("op", [add_scalar, sub_scalar, mul_scalar, div_scalar])
    def test_empty_operand(self, op):
        with pytest.raises(EmptyMatrixError):
            op(zeros(0, 2), 1.0)

    def test_scalar_sub_empty(self):
        with pytest.raises(EmptyMatrixError):
            scalar_sub(1.0, zeros(0, 0))


# ═══════════════════════════════════════════════════════════════════════
# Elementwise operations
# ═══════════════════════════════════════════════════════════════════════


class TestElementwise:

    def test_add_sub(self, a2):
        b = from_flat(2, 2, [4, 3, 2, 1])
        np.testing.assert_array_equal(add(a2, b).to_numpy(), [[5, 5], [5, 5]])
        np.testing.assert_array_equal(sub(a2, b).to_numpy(), [[-3, -1], [1, 3]])

    def test_hadamard(self, a2):
        np.testing.assert_array_equal(mul_elementwise(a2, a2).to_numpy(), [[1, 4], [9, 16]])

    def test_elementwise_divide(self, a2):
        np.testing.assert_array_equal(div_elementwise(a2, a2).to_numpy(), np.ones((2, 2)))

    def test_elementwise_divide_by_zero_entry(self, a2):
        with pytest.raises(DivideByZeroError, match="row 1, col 0"):
            div_elementwise(a2, from_flat(2, 2, [1, 1, 0, 1]))

    @pytest.mark.parametrize("op", [add, sub, mul_elementwise, div_elementwise])
    def test_shape_mismatch(self, op):
        with pytest.raises(DimensionMismatchError) as exc_info:
            op(zeros(2, 2) + 1, zeros(2, 3) + 1)
        assert exc_info.value.left_shape == (2, 2)
        assert exc_info.value.right_shape == (2, 3)

    @pytest.mark.parametrize("op", [add, sub, mul_elementwise, div_elementwise])
    def test_empty_checked_before_shape(self, op):
        with pytest.raises(EmptyMatrixError):
            op(zeros(0, 0), zeros(2, 3))


# ═══════════════════════════════════════════════════════════════════════
# Matrix product
# ═══════════════════════════════════════════════════════════════════════


class TestMatmul:

    def test_known_product(self, a2):
        np.testing.assert_array_equal(matmul(a2, a2).to_numpy(), [[7, 10], [15, 22]])

    def test_rectangular_shape(self):
        a = from_flat(2, 3, [1, 2, 3, 4, 5, 6])
        b = from_flat(3, 1, [1, 0, -1])
        result = matmul(a, b)
        assert result.shape == (2, 1)
        np.testing.assert_array_equal(result.to_numpy(), [[-2], [-2]])

    def test_matches_numpy(self, rng):
        a = rng.standard_normal((4, 5))
        b = rng.standard_normal((5, 3))
        result = matmul(Matrix.from_array(a), Matrix.from_array(b))
        np.testing.assert_allclose(result.to_numpy(), a @ b, rtol=1e-12, atol=1e-12)

    def test_identity_neutral(self, a2):
        assert matmul(identity(2), a2) == a2
        assert matmul(a2, identity(2)) == a2

    def test_inner_dimension_mismatch(self):
        a = from_flat(2, 3, [1, 2, 3, 4, 5, 6])
        with pytest.raises(DimensionMismatchError, match="inner dimensions"):
            matmul(a, a)

    def test_empty_operand(self, a2):
        with pytest.raises(EmptyMatrixError):
            matmul(a2, zeros(2, 0))


# ═══════════════════════════════════════════════════════════════════════
# Operator overloads
# ═══════════════════════════════════════════════════════════════════════


class TestOperators:

    def test_binary_operators(self, a2):
        assert a2 + a2 == mul_scalar(a2, 2)
        assert a2 - a2 == zeros(2, 2)
        assert a2 * a2 == mul_elementwise(a2, a2)
        assert a2 / a2 == div_elementwise(a2, a2)
        assert a2 @ a2 == matmul(a2, a2)

    def test_scalar_operators(self, a2):
        assert a2 + 1 == add_scalar(a2, 1)
        assert 1 + a2 == add_scalar(a2, 1)
        assert a2 - 1 == sub_scalar(a2, 1)
        assert 1 - a2 == scalar_sub(1, a2)
        assert 3 * a2 == mul_scalar(a2, 3)
        assert a2 / 2 == div_scalar(a2, 2)
        assert -a2 == mul_scalar(a2, -1)

    def test_transpose_property(self, a2):
        np.testing.assert_array_equal(a2.T.to_numpy(), [[1, 3], [2, 4]])
