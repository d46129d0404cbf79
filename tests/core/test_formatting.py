"""
Tests for display helpers and the str/repr of each type.
"""

import numpy as np

from glmath import Mat2, Quat, Vec2, Vec3
from glmath.core.formatting import (
    format_bracketed,
    format_component,
    format_constructor,
    format_rows,
)
from glmath.core.scalar import FLOAT64, INT32


class TestHelpers:

    def test_numpy_scalar_prints_plain(self):
        assert format_component(np.float32(1.5)) == '1.5'
        assert format_component(np.int64(3)) == '3'

    def test_bracketed(self):
        assert format_bracketed([1.0, 2.5]) == '[1.0, 2.5]'

    def test_constructor_default_scalar_omitted(self):
        assert format_constructor('Vec2', [1.0, 2.0], FLOAT64) == 'Vec2(1.0, 2.0)'

    def test_constructor_other_scalar_named(self):
        assert format_constructor('Vec2', [1, 2], INT32) == "Vec2(1, 2, scalar='int32')"

    def test_rows(self):
        assert format_rows([[1, 2], [3, 4]]) == '[1, 2]\n[3, 4]'


class TestDisplay:

    def test_vector_str(self):
        assert str(Vec3(1, 2, 3)) == '[1.0, 2.0, 3.0]'

    def test_vector_repr(self):
        assert repr(Vec2(1, 2)) == 'Vec2(1.0, 2.0)'
        assert repr(Vec2(1, 2, scalar='int32')) == "Vec2(1, 2, scalar='int32')"

    def test_matrix_str_lists_rows(self):
        # column-major data: columns (1, 2) and (3, 4)
        assert str(Mat2([[1, 2], [3, 4]])) == '[1.0, 3.0]\n[2.0, 4.0]'

    def test_matrix_repr(self):
        assert repr(Mat2()) == 'Mat2([[1.0, 0.0], [0.0, 1.0]])'

    def test_quat_str_in_storage_order(self):
        assert str(Quat()) == '[0.0, 0.0, 0.0, 1.0]'

    def test_quat_repr_in_constructor_order(self):
        assert repr(Quat(4, 1, 2, 3)) == 'Quat(4.0, 1.0, 2.0, 3.0)'
