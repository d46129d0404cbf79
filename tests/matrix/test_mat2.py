"""
Tests for Mat2 and the shared matrix behavior.

Behavior common to every matrix size (identity products, inversion,
singular handling, transposition, storage layout) is parametrized over
Mat2, Mat3 and Mat4; checks are made against numpy.linalg on the
row-major view.
"""

import numpy as np
import pytest

from glmath import Mat2, Mat3, Mat4, Vec2, Vec3
from glmath.core.exceptions import DimensionError, SingularMatrixError
from glmath.core.scalar import FLOAT32, INT32
from glmath.matrix._common import _BaseMat


ALL_MATRICES = [Mat2, Mat3, Mat4]


def random_matrix(cls, rng):
    n = cls._size
    return cls(rng.standard_normal((n, n)) + n * np.identity(n))


# ═══════════════════════════════════════════════════════════════════════
# Construction and layout
# ═══════════════════════════════════════════════════════════════════════


class TestConstruction:

    def test_default_is_identity(self):
        np.testing.assert_array_equal(Mat2().data, np.identity(2))

    def test_column_major_layout(self):
        m = Mat2([[1, 2], [3, 4]])
        # data[c][r]: first column is (1, 2)
        assert m.column(0) == Vec2(1, 2)
        assert m.row(0) == Vec2(1, 3)
        assert m[1, 0] == 3.0
        np.testing.assert_array_equal(m.to_row_major(), [[1, 3], [2, 4]])

    def test_wrong_shape(self):
        with pytest.raises(DimensionError):
            Mat2(np.identity(3))

    def test_from_axes(self):
        m = Mat2.from_axes(Vec2(1, 2), Vec2(3, 4))
        assert m == Mat2([[1, 2], [3, 4]])

    def test_from_axes_wrong_count(self):
        with pytest.raises(DimensionError, match="expected 2 axes, got 3"):
            Mat2.from_axes(Vec2(1, 2), Vec2(3, 4), Vec2(5, 6))

    def test_from_axes_wrong_type(self):
        with pytest.raises(DimensionError, match="axis 1 must be Vec2"):
            Mat2.from_axes(Vec2(1, 2), Vec3(3, 4, 5))

    def test_from_axes_takes_first_axis_scalar(self):
        m = Mat2.from_axes(Vec2(1, 2, scalar='float32'), Vec2(3, 4, scalar='float32'))
        assert m.scalar == FLOAT32

    def test_setitem_casts(self):
        m = Mat2(scalar='int32')
        m[0, 1] = 2.9
        assert m[0, 1] == 2

    def test_constants_are_fresh_values(self):
        m = Mat2.IDENTITY
        m.set_zero()
        assert Mat2.IDENTITY == Mat2()
        assert Mat2.ZERO == Mat2.zero()

    def test_to_numpy_is_a_copy(self):
        m = Mat2()
        arr = m.to_numpy()
        arr[0, 0] = 5.0
        assert m[0, 0] == 1.0


# ═══════════════════════════════════════════════════════════════════════
# Algebra shared by all sizes
# ═══════════════════════════════════════════════════════════════════════


class TestSharedAlgebra:

    @pytest.mark.parametrize("cls", ALL_MATRICES)
    def test_identity_products(self, cls, rng):
        m = random_matrix(cls, rng)
        assert cls.IDENTITY * m == m
        assert m * cls.IDENTITY == m

    @pytest.mark.parametrize("cls", ALL_MATRICES)
    def test_product_matches_numpy(self, cls, rng):
        a = random_matrix(cls, rng)
        b = random_matrix(cls, rng)
        expected = a.to_row_major() @ b.to_row_major()
        np.testing.assert_allclose((a * b).to_row_major(), expected, rtol=1e-12)
        np.testing.assert_allclose((a @ b).to_row_major(), expected, rtol=1e-12)

    @pytest.mark.parametrize("cls", ALL_MATRICES)
    def test_vector_product_matches_numpy(self, cls, rng):
        m = random_matrix(cls, rng)
        v = cls._vector_type.from_iterable(rng.standard_normal(cls._size))
        expected = m.to_row_major() @ v.to_numpy()
        np.testing.assert_allclose((m * v).to_numpy(), expected, rtol=1e-12)

    @pytest.mark.parametrize("cls", ALL_MATRICES)
    def test_det_matches_numpy(self, cls, rng):
        m = random_matrix(cls, rng)
        assert m.det() == pytest.approx(np.linalg.det(m.to_row_major()), rel=1e-10)

    @pytest.mark.parametrize("cls", ALL_MATRICES)
    def test_inverse_matches_numpy(self, cls, rng):
        m = random_matrix(cls, rng)
        np.testing.assert_allclose(
            m.get_inverted().to_row_major(),
            np.linalg.inv(m.to_row_major()),
            rtol=1e-10, atol=1e-12,
        )

    @pytest.mark.parametrize("cls", ALL_MATRICES)
    def test_times_inverse_is_identity(self, cls, rng):
        m = random_matrix(cls, rng)
        assert (m * m.get_inverted()).is_close(cls.IDENTITY, atol=1e-12)

    @pytest.mark.parametrize("cls", ALL_MATRICES)
    def test_invert_in_place(self, cls, rng):
        m = random_matrix(cls, rng)
        original = m.copy()
        assert m.invert() is m
        assert m.invert().is_close(original, atol=1e-12)

    @pytest.mark.parametrize("cls", ALL_MATRICES)
    def test_singular_invert_is_noop(self, cls):
        m = cls.zero()
        m[0, 0] = 3.0
        before = m.copy()
        m.invert()
        np.testing.assert_array_equal(m.data, before.data)
        np.testing.assert_array_equal(m.get_inverted().data, before.data)

    @pytest.mark.parametrize("cls", ALL_MATRICES)
    def test_checked_inverse_raises(self, cls):
        with pytest.raises(SingularMatrixError) as exc_info:
            cls.zero().checked_inverse()
        assert exc_info.value.matrix_name == cls.__name__
        assert exc_info.value.determinant == 0.0

    @pytest.mark.parametrize("cls", ALL_MATRICES)
    def test_checked_inverse_leaves_original(self, cls, rng):
        m = random_matrix(cls, rng)
        before = m.copy()
        inv = m.checked_inverse()
        np.testing.assert_array_equal(m.data, before.data)
        assert inv.is_close(m.get_inverted())

    @pytest.mark.parametrize("cls", ALL_MATRICES)
    def test_transpose(self, cls, rng):
        m = random_matrix(cls, rng)
        t = m.get_transposed()
        np.testing.assert_array_equal(t.data, m.data.T)
        assert m.transpose() is m
        assert m == t

    @pytest.mark.parametrize("cls", ALL_MATRICES)
    def test_set_identity_and_zero(self, cls, rng):
        m = random_matrix(cls, rng)
        assert m.set_zero() is m
        assert m == cls.ZERO
        assert m.set_identity() == cls.IDENTITY

    @pytest.mark.parametrize("cls", ALL_MATRICES)
    def test_float32_preserved(self, cls, rng):
        m = cls(rng.standard_normal((cls._size, cls._size)) + 3 * np.identity(cls._size),
                scalar='float32')
        assert (m * m).scalar == FLOAT32
        assert m.get_inverted().scalar == FLOAT32
        assert m.get_transposed().scalar == FLOAT32


class TestArithmetic:

    def test_add_sub_neg(self):
        a = Mat2([[1, 2], [3, 4]])
        b = Mat2([[4, 3], [2, 1]])
        assert a + b == Mat2([[5, 5], [5, 5]])
        assert a - b == Mat2([[-3, -1], [1, 3]])
        assert -a == Mat2([[-1, -2], [-3, -4]])

    def test_in_place(self):
        m = Mat2([[1, 2], [3, 4]])
        alias = m
        m += Mat2()
        m -= Mat2([[1, 0], [0, 1]])
        m *= Mat2([[0, 1], [1, 0]])
        assert alias is m
        # swapping columns
        assert m == Mat2([[3, 4], [1, 2]])

    def test_product_worked_example(self):
        a = Mat2([[1, 2], [3, 4]])
        b = Mat2([[5, 6], [7, 8]])
        np.testing.assert_array_equal((a * b).to_row_major(), [[23, 31], [34, 46]])

    def test_vector_product(self):
        m = Mat2([[1, 2], [3, 4]])
        assert m * Vec2(1, 1) == Vec2(4, 6)

    def test_mismatched_operand(self):
        with pytest.raises(TypeError):
            Mat2() * Mat3()
        with pytest.raises(TypeError):
            Mat2() * Vec3(1, 2, 3)

    def test_numpy_operand_on_the_left_rejected(self):
        """numpy defers to the matrix instead of returning a bare array."""
        with pytest.raises(TypeError):
            np.float64(2) * Mat2()
        with pytest.raises(TypeError):
            np.identity(2) + Mat2()

    def test_numpy_conversion_still_works(self):
        np.testing.assert_array_equal(np.asarray(Mat2()), np.identity(2))

    def test_unhashable(self):
        with pytest.raises(TypeError):
            hash(Mat2())


class TestBaseClass:

    def test_base_is_abstract(self):
        with pytest.raises(TypeError):
            _BaseMat()

    def test_subclass_without_det_is_abstract(self):
        class Incomplete(_BaseMat):
            __slots__ = ()
            _size = 2
            _vector_type = Vec2

            def _adjugate(self):
                return self.data

        with pytest.raises(TypeError):
            Incomplete()


class TestMat2:

    def test_det(self):
        assert Mat2([[4, 7], [2, 6]]).det() == 10.0

    def test_inverse_values(self):
        inv = Mat2([[4, 7], [2, 6]]).get_inverted()
        np.testing.assert_allclose(inv.to_row_major(), [[0.6, -0.2], [-0.7, 0.4]])

    def test_integer_det(self):
        d = Mat2([[4, 7], [2, 6]], scalar='int32').det()
        assert d == 10
        assert Mat2(scalar=INT32).scalar == INT32
