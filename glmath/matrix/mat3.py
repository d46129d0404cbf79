"""3x3 matrix."""

from __future__ import annotations

from typing import Any
import numpy as np
from numpy.typing import NDArray

from glmath.core.constants import ClassConstant
from glmath.matrix._common import _BaseMat, cofactor_adjugate, det22, det33
from glmath.vector import Vec3


class Mat3(_BaseMat):
    """A column-major 3x3 matrix; ``Mat3()`` is the identity."""
    __slots__ = ()

    _size = 3
    _vector_type = Vec3

    IDENTITY = ClassConstant(lambda cls: cls.identity())
    ZERO = ClassConstant(lambda cls: cls.zero())

    def det(self) -> Any:
        return det33(*self.data.ravel())

    def _adjugate(self) -> NDArray[Any]:
        return cofactor_adjugate(self.data, lambda minor: det22(*minor.ravel()))

    def to_mat4(self) -> 'Mat4':
        """Embed as the upper-left block of a Mat4 with identity translation."""
        from glmath.matrix.mat4 import Mat4
        out = np.identity(4, dtype=self.data.dtype)
        out[:3, :3] = self.data
        return Mat4._from_np(out)
