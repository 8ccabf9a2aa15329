"""
Tests for minor, determinant, adjugate and inverse.

Random-matrix cases are checked against scipy.linalg.det / inv.
"""

import warnings

import numpy as np
import pytest
from scipy import linalg as sla

from pymatrix import (
    EmptyMatrixError,
    IndexOutOfBoundsError,
    InvalidDimensionsError,
    Matrix,
    NonSquareMatrixError,
    STRICT_POLICY,
    SingularMatrixError,
    ValidationError,
    adjugate,
    determinant,
    from_flat,
    identity,
    inverse,
    matmul,
    minor,
    transpose,
    zeros,
)


# ═══════════════════════════════════════════════════════════════════════
# minor
# ═══════════════════════════════════════════════════════════════════════


class TestMinor:

    def test_deletes_row_and_column(self):
        m = from_flat(3, 3, [1, 2, 3, 4, 5, 6, 7, 8, 9])
        np.testing.assert_array_equal(minor(m, 1, 0).to_numpy(), [[2, 3], [8, 9]])

    def test_fresh_allocation(self):
        m = from_flat(2, 2, [1, 2, 3, 4])
        sub = minor(m, 0, 0)
        sub[0, 0] = 0.0
        assert m[1, 1] == 4.0

    def test_out_of_bounds(self, a2):
        with pytest.raises(IndexOutOfBoundsError):
            minor(a2, 2, 0)

    def test_one_by_one(self):
        with pytest.raises(InvalidDimensionsError):
            minor(identity(1), 0, 0)


# ═══════════════════════════════════════════════════════════════════════
# determinant
# ═══════════════════════════════════════════════════════════════════════


class TestDeterminant:

    def test_two_by_two(self, a2):
        assert determinant(a2) == -2.0

    def test_one_by_one(self):
        assert determinant(from_flat(1, 1, [-3.5])) == -3.5

    def test_identity(self):
        assert determinant(identity(4)) == 1.0

    def test_singular(self):
        assert determinant(from_flat(3, 3, [1, 2, 3, 4, 5, 6, 7, 8, 9])) == 0.0

    def test_three_by_three(self):
        m = from_flat(3, 3, [2, -3, 1, 2, 0, -1, 1, 4, 5])
        assert determinant(m) == pytest.approx(49.0)

    @pytest.mark.parametrize("n", [2, 3, 4, 5, 6])
    def test_matches_scipy(self, random_square, n):
        m = random_square(n)
        assert determinant(m) == pytest.approx(sla.det(m.to_numpy()), rel=1e-8, abs=1e-10)

    def test_non_square(self):
        with pytest.raises(NonSquareMatrixError):
            determinant(zeros(2, 3))

    def test_empty(self):
        with pytest.raises(EmptyMatrixError):
            determinant(zeros(0, 0))

    def test_does_not_mutate(self, a2):
        before = a2.copy()
        determinant(a2)
        assert a2 == before


# ═══════════════════════════════════════════════════════════════════════
# adjugate
# ═══════════════════════════════════════════════════════════════════════


class TestAdjugate:

    def test_two_by_two(self, a2):
        np.testing.assert_array_equal(adjugate(a2).to_numpy(), [[4, -2], [-3, 1]])

    def test_one_by_one_is_identity(self):
        assert adjugate(from_flat(1, 1, [7.0])) == identity(1)

    def test_transposed_cofactors(self):
        """A @ adj(A) == det(A) * I."""
        m = from_flat(3, 3, [2, -3, 1, 2, 0, -1, 1, 4, 5])
        product = matmul(m, adjugate(m)).to_numpy()
        np.testing.assert_allclose(product, 49.0 * np.eye(3), atol=1e-12)

    def test_singular_matrix_still_has_adjugate(self):
        m = from_flat(2, 2, [1, 2, 2, 4])
        np.testing.assert_array_equal(adjugate(m).to_numpy(), [[4, -2], [-2, 1]])

    def test_non_square(self):
        with pytest.raises(NonSquareMatrixError):
            adjugate(zeros(3, 2))


# ═══════════════════════════════════════════════════════════════════════
# inverse
# ═══════════════════════════════════════════════════════════════════════


class TestInverse:

    def test_two_by_two(self, a2):
        np.testing.assert_array_equal(inverse(a2).to_numpy(), [[-2, 1], [1.5, -0.5]])

    def test_one_by_one(self):
        assert inverse(from_flat(1, 1, [4.0])) == from_flat(1, 1, [0.25])

    @pytest.mark.parametrize("n", [2, 3, 4, 5])
    def test_matches_scipy(self, random_square, n):
        m = random_square(n)
        np.testing.assert_allclose(
            inverse(m).to_numpy(), sla.inv(m.to_numpy()), rtol=1e-8, atol=1e-10
        )

    def test_singular(self):
        with pytest.raises(SingularMatrixError) as exc_info:
            inverse(from_flat(2, 2, [1, 2, 2, 4]))
        assert exc_info.value.determinant == 0.0
        assert exc_info.value.expected_rank == 2

    def test_only_exact_zero_is_singular_by_default(self):
        m = from_flat(2, 2, [1, 0, 0, 1e-9])
        with pytest.warns(RuntimeWarning, match="numerically unstable"):
            result = inverse(m)
        assert result[1, 1] == pytest.approx(1e9)

    def test_singular_tolerance(self):
        m = from_flat(2, 2, [1, 0, 0, 1e-9])
        with pytest.raises(SingularMatrixError):
            inverse(m, singular_tol=1e-5)

    def test_strict_policy_rejects_near_singular(self):
        m = from_flat(2, 2, [1, 0, 0, 1e-9])
        with pytest.raises(SingularMatrixError):
            inverse(m, policy=STRICT_POLICY)

    def test_explicit_tolerance_wins_over_policy(self):
        m = from_flat(2, 2, [1, 0, 0, 1e-3])
        result = inverse(m, singular_tol=0.0, policy=STRICT_POLICY)
        assert result[1, 1] == pytest.approx(1e3)

    @pytest.mark.parametrize("bad", [np.nan, np.inf])
    def test_non_finite_rejected(self, bad):
        m = from_flat(2, 2, [1, 0, 0, 1])
        m[0, 1] = bad
        with pytest.raises(ValidationError, match="non-finite"):
            inverse(m)

    def test_negative_singular_tolerance(self, a2):
        with pytest.raises(ValidationError, match="singular_tol"):
            inverse(a2, singular_tol=-1.0)

    def test_well_conditioned_does_not_warn(self, a2):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            inverse(a2)

    def test_non_square(self):
        with pytest.raises(NonSquareMatrixError):
            inverse(zeros(2, 3))

    def test_empty(self):
        with pytest.raises(EmptyMatrixError):
            inverse(zeros(0, 0))


# ═══════════════════════════════════════════════════════════════════════
# Cross-operation properties
# ═══════════════════════════════════════════════════════════════════════


class TestProperties:

    @pytest.mark.parametrize("n", [1, 2, 3, 4, 5])
    def test_determinant_transpose_invariant(self, random_square, n):
        m = random_square(n)
        assert determinant(transpose(m)) == pytest.approx(determinant(m), rel=1e-9, abs=1e-9)

    @pytest.mark.parametrize("n", [1, 2, 3, 4, 5])
    def test_product_with_inverse_is_identity(self, random_square, n):
        m = random_square(n)
        assert matmul(m, inverse(m)).allclose(identity(n), rtol=1e-8, atol=1e-8)

    def test_inverse_of_inverse(self, a2):
        assert inverse(inverse(a2)).allclose(a2)

    def test_from_array_matches_numpy_det(self, rng):
        a = rng.standard_normal((4, 4))
        assert determinant(Matrix.from_array(a)) == pytest.approx(np.linalg.det(a), rel=1e-9)
