"""2x2 matrix."""

from __future__ import annotations

from typing import Any
import numpy as np
from numpy.typing import NDArray

from glmath.core.constants import ClassConstant
from glmath.matrix._common import _BaseMat, det22
from glmath.vector import Vec2


class Mat2(_BaseMat):
    """A column-major 2x2 matrix; ``Mat2()`` is the identity."""
    __slots__ = ()

    _size = 2
    _vector_type = Vec2

    IDENTITY = ClassConstant(lambda cls: cls.identity())
    ZERO = ClassConstant(lambda cls: cls.zero())

    def det(self) -> Any:
        d = self.data
        return det22(d[0, 0], d[0, 1], d[1, 0], d[1, 1])

    def _adjugate(self) -> NDArray[Any]:
        d = self.data
        return np.array([[d[1, 1], -d[0, 1]],
                         [-d[1, 0], d[0, 0]]], dtype=d.dtype)
