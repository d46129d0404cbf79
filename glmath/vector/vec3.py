"""Three-component vector, the only one with a cross product."""

from __future__ import annotations

from typing import Any
import numpy as np

from glmath.core.constants import ClassConstant
from glmath.core.swizzle import install_components, install_swizzles
from glmath.vector._common import _BaseVec
from glmath.vector.vec2 import Vec2


@install_components
class Vec3(_BaseVec):
    """A 3-dimensional vector (x, y, z)."""
    __slots__ = ()

    _dim = 3
    _axes = 'xyz'

    def __init__(self, x: Any, y: Any, z: Any, *, scalar: Any = None):
        super().__init__(x, y, z, scalar=scalar)

    ZERO = ClassConstant(lambda cls: cls.zero())
    ONE = ClassConstant(lambda cls: cls.one())
    X = ClassConstant(lambda cls: cls.unit(0))
    Y = ClassConstant(lambda cls: cls.unit(1))
    Z = ClassConstant(lambda cls: cls.unit(2))

    @classmethod
    def unit_x(cls, scalar: Any = None) -> Vec3:
        return cls.unit(0, scalar)

    @classmethod
    def unit_y(cls, scalar: Any = None) -> Vec3:
        return cls.unit(1, scalar)

    @classmethod
    def unit_z(cls, scalar: Any = None) -> Vec3:
        return cls.unit(2, scalar)

    def cross(self, other: Vec3) -> Vec3:
        """
        Cross product (y1*z2 - z1*y2, z1*x2 - x1*z2, x1*y2 - y1*x2).

        Crossing with the zero vector gives the zero vector.
        """
        return self._wrap(np.cross(self._v, other._v))

    def extend(self, w: Any) -> 'Vec4':
        """Vec4 with this vector's components and the given w."""
        from glmath.vector.vec4 import Vec4
        return Vec4._from_np(self.scalar.cast_array(np.append(self._v, w)))


install_swizzles(Vec3, {2: Vec2, 3: Vec3})
