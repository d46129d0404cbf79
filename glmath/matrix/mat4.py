"""
4x4 matrix with affine helpers.

Besides the generic algebra, Mat4 composes scale, translation and
axis-angle rotation into itself in place. All three post-multiply: they
act in the matrix's current basis, not in world space.
"""

from __future__ import annotations

from typing import Any
import numpy as np
from numpy.typing import NDArray

from glmath.core.constants import ClassConstant
from glmath.core.validation import check_dimension
from glmath.matrix._common import _BaseMat, cofactor_adjugate, det33
from glmath.matrix.mat3 import Mat3
from glmath.vector import Vec3, Vec4


class Mat4(_BaseMat):
    """A column-major 4x4 matrix; ``Mat4()`` is the identity."""
    __slots__ = ()

    _size = 4
    _vector_type = Vec4

    IDENTITY = ClassConstant(lambda cls: cls.identity())
    ZERO = ClassConstant(lambda cls: cls.zero())

    def det(self) -> Any:
        # cofactor expansion along the first column
        d = self.data
        total = self.scalar.ZERO
        for q in range(4):
            minor = np.delete(d[1:], q, axis=1)
            term = d[0, q] * det33(*minor.ravel())
            total = total - term if q % 2 else total + term
        return total

    def _adjugate(self) -> NDArray[Any]:
        return cofactor_adjugate(self.data, lambda minor: det33(*minor.ravel()))

    def to_mat3(self) -> Mat3:
        """Upper-left 3x3 block (the linear part)."""
        return Mat3._from_np(self.data[:3, :3].copy())

    # --- affine helpers ---

    def scale(self, v: Vec3) -> Mat4:
        """
        Scale the first three axes by v.x, v.y and v.z in place.

        Returns self.
        """
        check_dimension(v, Vec3, "scale")
        s = self.scalar
        self.data[:3] = s.cast_array(self.data[:3] * v._v[:, np.newaxis])
        return self

    def get_scaled(self, v: Vec3) -> Mat4:
        return self.copy().scale(v)

    def translate(self, v: Vec3) -> Mat4:
        """
        Translate by v expressed in this matrix's own basis, in place.

        Accumulates data[0]*v.x + data[1]*v.y + data[2]*v.z into the
        fourth column. Returns self.
        """
        check_dimension(v, Vec3, "translate")
        offset = np.einsum('kr,k->r', self.data[:3], v._v)
        self.data[3] = self.scalar.cast_array(self.data[3] + offset)
        return self

    def get_translated(self, v: Vec3) -> Mat4:
        return self.copy().translate(v)

    def rotate(self, axis: Vec3, angle: Any) -> Mat4:
        """
        Rotate by angle radians about axis, in place.

        Builds the Rodrigues factor matrix for a unit axis (the caller
        normalizes) and composes it into the first three columns; the
        fourth column is untouched. Returns self.
        """
        check_dimension(axis, Vec3, "axis")
        s = self.scalar
        c = s.cos(angle)
        sn = s.sin(angle)
        one_minus_c = s.ONE - c
        x, y, z = (s.cast(a) for a in axis._v)

        xy = x * y
        yz = y * z
        xz = x * z
        xs = x * sn
        ys = y * sn
        zs = z * sn

        # factor[i][j]: weight of current axis j in new axis i
        factor = np.array([
            [x * x * one_minus_c + c, xy * one_minus_c + zs, xz * one_minus_c - ys],
            [xy * one_minus_c - zs, y * y * one_minus_c + c, yz * one_minus_c + xs],
            [xz * one_minus_c + ys, yz * one_minus_c - xs, z * z * one_minus_c + c],
        ])
        rotated = np.einsum('ij,jr->ir', factor, self.data[:3])
        self.data[:3] = s.cast_array(rotated)
        return self

    def get_rotated(self, axis: Vec3, angle: Any) -> Mat4:
        return self.copy().rotate(axis, angle)
