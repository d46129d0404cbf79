"""Four-component vector."""

from __future__ import annotations

from typing import Any

from glmath.core.constants import ClassConstant
from glmath.core.swizzle import install_components, install_swizzles
from glmath.vector._common import _BaseVec
from glmath.vector.vec2 import Vec2
from glmath.vector.vec3 import Vec3


@install_components
class Vec4(_BaseVec):
    """A 4-dimensional vector (x, y, z, w)."""
    __slots__ = ()

    _dim = 4
    _axes = 'xyzw'

    def __init__(self, x: Any, y: Any, z: Any, w: Any, *, scalar: Any = None):
        super().__init__(x, y, z, w, scalar=scalar)

    ZERO = ClassConstant(lambda cls: cls.zero())
    ONE = ClassConstant(lambda cls: cls.one())
    X = ClassConstant(lambda cls: cls.unit(0))
    Y = ClassConstant(lambda cls: cls.unit(1))
    Z = ClassConstant(lambda cls: cls.unit(2))
    W = ClassConstant(lambda cls: cls.unit(3))

    @classmethod
    def unit_x(cls, scalar: Any = None) -> Vec4:
        return cls.unit(0, scalar)

    @classmethod
    def unit_y(cls, scalar: Any = None) -> Vec4:
        return cls.unit(1, scalar)

    @classmethod
    def unit_z(cls, scalar: Any = None) -> Vec4:
        return cls.unit(2, scalar)

    @classmethod
    def unit_w(cls, scalar: Any = None) -> Vec4:
        return cls.unit(3, scalar)


install_swizzles(Vec4, {2: Vec2, 3: Vec3, 4: Vec4})
