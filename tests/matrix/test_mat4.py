"""
Tests for Mat4 and its affine helpers.

Rotation results are cross-checked against scipy.spatial.transform.
"""

import math

import numpy as np
import pytest
from scipy.spatial.transform import Rotation

from glmath import Mat4, Vec3, Vec4
from glmath.core.exceptions import DimensionError
from glmath.core.scalar import FLOAT32


class TestDeterminant:

    def test_matches_numpy(self, well_conditioned_data):
        m = Mat4(well_conditioned_data)
        assert m.det() == pytest.approx(np.linalg.det(m.to_row_major()), rel=1e-12)

    def test_affine_det_is_scale_product(self, affine):
        assert affine.det() == pytest.approx(2.0 * 0.5 * 1.5)

    def test_inverse_of_affine(self, affine):
        assert (affine * affine.get_inverted()).is_close(Mat4.IDENTITY, atol=1e-12)
        assert (affine.get_inverted() * affine).is_close(Mat4.IDENTITY, atol=1e-12)


class TestScale:

    def test_diagonal(self):
        m = Mat4().scale(Vec3(2, 0.5, 1))
        assert m * Vec4(1, 1, 1, 1) == Vec4(2, 0.5, 1, 1)

    def test_scales_columns(self, well_conditioned_data):
        m = Mat4(well_conditioned_data)
        scaled = m.get_scaled(Vec3(2, 3, 4))
        np.testing.assert_allclose(scaled.data[:3], m.data[:3] * np.array([[2], [3], [4]]))
        np.testing.assert_array_equal(scaled.data[3], m.data[3])

    def test_requires_vec3(self):
        with pytest.raises(DimensionError, match="expected Vec3, got Vec4"):
            Mat4().scale(Vec4(1, 1, 1, 1))


class TestTranslate:

    def test_identity_translation(self):
        m = Mat4.IDENTITY.get_translated(Vec3(1, 2, 3))
        assert m * Vec4(0, 0, 0, 1) == Vec4(1, 2, 3, 1)

    def test_directions_unaffected(self):
        m = Mat4().translate(Vec3(1, 2, 3))
        assert m * Vec4(1, 0, 0, 0) == Vec4(1, 0, 0, 0)

    def test_translation_in_own_basis(self):
        m = Mat4().scale(Vec3(2, 2, 2)).translate(Vec3(1, 0, 0))
        np.testing.assert_array_equal(m.data[3], [2, 0, 0, 1])

    def test_accumulates(self):
        m = Mat4().translate(Vec3(1, 0, 0)).translate(Vec3(0, 1, 0))
        np.testing.assert_array_equal(m.data[3], [1, 1, 0, 1])

    def test_get_translated_leaves_original(self):
        m = Mat4()
        m.get_translated(Vec3(1, 2, 3))
        assert m == Mat4.IDENTITY


class TestRotate:

    def test_quarter_turn_about_z(self):
        m = Mat4().rotate(Vec3(0, 0, 1), math.pi / 2)
        result = m * Vec4(1, 0, 0, 0)
        np.testing.assert_allclose(result.to_numpy(), [0, 1, 0, 0], atol=1e-15)

    def test_matches_scipy(self, unit_axis):
        angle = 1.1
        m = Mat4().rotate(unit_axis, angle)
        expected = Rotation.from_rotvec(unit_axis.to_numpy() * angle).as_matrix()
        np.testing.assert_allclose(m.to_mat3().to_row_major(), expected, atol=1e-12)

    def test_post_multiplies(self, unit_axis, well_conditioned_data):
        m = Mat4(well_conditioned_data)
        rotation = Mat4().rotate(unit_axis, 0.4)
        assert m.get_rotated(unit_axis, 0.4).is_close(m * rotation, atol=1e-12)

    def test_translation_column_untouched(self, unit_axis):
        m = Mat4().translate(Vec3(1, 2, 3))
        m.rotate(unit_axis, 0.7)
        np.testing.assert_array_equal(m.data[3], [1, 2, 3, 1])

    def test_rotation_is_orthonormal(self, unit_axis):
        r = Mat4().rotate(unit_axis, 2.3).to_mat3()
        np.testing.assert_allclose(r.to_row_major() @ r.to_row_major().T, np.identity(3), atol=1e-12)
        assert r.det() == pytest.approx(1.0)

    def test_float32_preserved(self):
        m = Mat4(scalar='float32').rotate(Vec3(0, 1, 0, scalar='float32'), 0.5)
        assert m.scalar == FLOAT32


class TestConversions:

    def test_to_mat3(self, well_conditioned_data):
        m = Mat4(well_conditioned_data)
        np.testing.assert_array_equal(m.to_mat3().data, well_conditioned_data[:3, :3])

    def test_transform_vector_matches_numpy(self, affine, rng):
        v = Vec4.from_iterable(rng.standard_normal(4))
        np.testing.assert_allclose((affine @ v).to_numpy(), affine.to_row_major() @ v.to_numpy())
